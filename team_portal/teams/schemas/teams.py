"""
Team schemas for API requests and responses.
"""

from datetime import datetime
from uuid import UUID

from ninja import Schema
from pydantic import field_validator

from team_portal.users.schemas import StudentSchema


class MemberSchema(Schema):
    """Team member information for display."""

    id: UUID
    student_id: str
    name: str
    email: str
    department: str
    section: str

    @classmethod
    def from_student(cls, student) -> "MemberSchema":
        """Create from Student model instance."""
        return cls(
            id=student.id,
            student_id=student.student_id,
            name=student.name or "",
            email=student.email or "",
            department=student.department or "",
            section=student.section or "",
        )


class ProjectSummarySchema(Schema):
    """Short project information shown on the team dashboard."""

    id: UUID
    title: str
    approval: str
    is_approved: bool | None


class TeamSchema(Schema):
    """Schema for a team."""

    id: UUID
    code: str
    team_lead: MemberSchema
    approval: str
    is_approved: bool | None
    theme: str
    mentor: str
    member_count: int
    created: datetime


class TeamDashboardSchema(TeamSchema):
    """Team with members and project summary for the dashboard."""

    members: list[MemberSchema]
    project: ProjectSummarySchema | None
    is_team_lead: bool


class MembershipResponseSchema(Schema):
    """Response after creating or joining a team."""

    success: bool
    message: str
    team: TeamSchema
    student: StudentSchema


class JoinTeamSchema(Schema):
    """Schema for joining a team by code."""

    code: str

    @field_validator("code")
    @classmethod
    def normalize_code(cls, v: str) -> str:
        return v.strip().upper()

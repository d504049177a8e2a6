"""
Authentication schemas for login and the session snapshot.
"""

from uuid import UUID

from ninja import Schema
from pydantic import field_validator

from team_portal.users.session import StudentSession


class LoginSchema(Schema):
    """Login request schema."""

    register_number: str
    password: str

    @field_validator("register_number")
    @classmethod
    def strip_register_number(cls, v: str) -> str:
        return v.strip()


class StudentSchema(Schema):
    """Session snapshot exposed to the frontend."""

    id: UUID
    student_id: str
    register_number: str
    name: str
    email: str
    department: str
    section: str
    team_id: UUID | None

    @staticmethod
    def from_session(session: StudentSession) -> "StudentSchema":
        return StudentSchema(
            id=session.id,
            student_id=session.student_id,
            register_number=session.register_number,
            name=session.name,
            email=session.email,
            department=session.department,
            section=session.section,
            team_id=session.team_id,
        )


class LoginResponseSchema(Schema):
    """Login response schema."""

    success: bool
    student: StudentSchema | None = None
    csrf_token: str | None = None


class CSRFTokenSchema(Schema):
    """CSRF token response."""

    csrf_token: str

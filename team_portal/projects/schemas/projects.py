"""
Project schemas for API requests and responses.
"""

from datetime import datetime
from uuid import UUID

from ninja import Schema


class ProjectSchema(Schema):
    """Project response schema."""

    id: UUID
    team_id: UUID
    title: str
    description: str
    theme: str
    approval: str
    is_approved: bool | None
    created: datetime
    modified: datetime


class TeamProjectSchema(Schema):
    """The team's project (if any) and whether the caller may edit it."""

    project: ProjectSchema | None
    can_edit: bool


class ProjectSaveSchema(Schema):
    """Schema for creating or updating the team project."""

    title: str
    description: str
    theme: str


class ProjectSaveResponseSchema(Schema):
    """Response after saving the team project."""

    success: bool
    message: str
    created: bool
    project: ProjectSchema


class ThemeListSchema(Schema):
    themes: list[str]

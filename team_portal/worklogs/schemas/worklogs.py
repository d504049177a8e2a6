"""
Work log schemas for API requests and responses.
"""

from datetime import date
from datetime import datetime
from uuid import UUID

from ninja import Schema


class WorkLogSchema(Schema):
    """Work log response schema."""

    id: UUID
    student_id: UUID
    team_id: UUID | None
    date: date
    expected_task: str
    completed_task: str
    mentor_status: str
    mentor_approved: bool | None
    is_editable: bool
    comments: str
    created: datetime


class WorkLogInputSchema(Schema):
    """Schema for creating or updating a work log."""

    date: date
    expected_task: str
    completed_task: str

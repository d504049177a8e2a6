"""
Review schemas for API requests and responses.
"""

from datetime import date
from datetime import datetime
from uuid import UUID

from ninja import Schema


class AttachmentSchema(Schema):
    """Review attachment response schema."""

    id: UUID
    review_id: UUID
    attachment_name: str
    link: str
    created: datetime


class ReviewSchema(Schema):
    """Review response schema with its attachments."""

    id: UUID
    team_id: UUID
    stage: str
    is_completed: bool
    completed_on: date | None
    result: str
    department: str
    created: datetime
    attachments: list[AttachmentSchema]


class TemplateSchema(Schema):
    """Review template response schema."""

    id: UUID
    name: str
    description: str
    link: str
    review: str | None

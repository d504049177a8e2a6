"""
Reviews API controller.
"""

from uuid import UUID

from django.http import HttpRequest
from ninja import File
from ninja import Form
from ninja import UploadedFile
from ninja_extra import api_controller
from ninja_extra import http_delete
from ninja_extra import http_get
from ninja_extra import http_post

from team_portal.core.api import BaseAPI
from team_portal.core.api import IsAuthenticated
from team_portal.core.exceptions import ErrorSchema
from team_portal.core.schemas import MessageSchema
from team_portal.reviews import services
from team_portal.reviews.models import ReviewAttachment
from team_portal.reviews.models import ReviewTemplate
from team_portal.reviews.schemas import AttachmentSchema
from team_portal.reviews.schemas import ReviewSchema
from team_portal.reviews.schemas import TemplateSchema
from team_portal.users.session import get_session
from team_portal.users.session import require_membership


def attachment_to_schema(attachment: ReviewAttachment) -> AttachmentSchema:
    """Convert ReviewAttachment to schema."""
    return AttachmentSchema(
        id=attachment.id,
        review_id=attachment.review_id,
        attachment_name=attachment.attachment_name,
        link=attachment.link,
        created=attachment.created,
    )


def review_to_schema(item: services.ReviewWithAttachments) -> ReviewSchema:
    """Convert a review and its attachments to schema."""
    review = item.review
    return ReviewSchema(
        id=review.id,
        team_id=review.team_id,
        stage=review.stage,
        is_completed=review.is_completed,
        completed_on=review.completed_on,
        result=review.result,
        department=review.department,
        created=review.created,
        attachments=[attachment_to_schema(a) for a in item.attachments],
    )


def template_to_schema(template: ReviewTemplate) -> TemplateSchema:
    return TemplateSchema(
        id=template.id,
        name=template.name,
        description=template.description,
        link=template.link,
        review=template.review,
    )


@api_controller("/reviews", tags=["Reviews"], permissions=[IsAuthenticated])
class ReviewController(BaseAPI):
    """Team reviews, their attachments and review templates."""

    @http_get(
        "/",
        response={200: list[ReviewSchema], 401: ErrorSchema, 403: ErrorSchema},
        url_name="reviews_list",
    )
    def list_reviews(self, request: HttpRequest):
        """
        List the current team's reviews, most recent first.

        Available once the team project is approved.
        """
        team_id = require_membership(get_session(request))
        return 200, [review_to_schema(item) for item in services.list_reviews(team_id)]

    @http_post(
        "/{review_id}/attachments",
        response={201: AttachmentSchema, 400: ErrorSchema, 401: ErrorSchema, 403: ErrorSchema, 404: ErrorSchema, 502: ErrorSchema},
        url_name="reviews_add_attachment",
    )
    def add_attachment(
        self,
        request: HttpRequest,
        review_id: UUID,
        attachment_name: str = Form(...),
        link: str | None = Form(None),
        file: UploadedFile | None = File(None),
    ):
        """
        Attach a document to a review.

        Send either a file (multipart) or an external link, not both.
        """
        attachment = services.add_attachment(
            get_session(request),
            review_id,
            display_name=attachment_name,
            link=link,
            file=file,
        )
        return 201, attachment_to_schema(attachment)

    @http_delete(
        "/attachments/{attachment_id}",
        response={200: MessageSchema, 401: ErrorSchema, 403: ErrorSchema, 404: ErrorSchema},
        url_name="reviews_remove_attachment",
    )
    def remove_attachment(self, request: HttpRequest, attachment_id: UUID):
        """Remove an attachment from one of the team's reviews."""
        services.remove_attachment(get_session(request), attachment_id)
        return 200, MessageSchema(success=True, message="Piece jointe supprimee.")

    @http_get(
        "/templates",
        response={200: list[TemplateSchema], 401: ErrorSchema},
        url_name="reviews_templates",
    )
    def list_templates(self, request: HttpRequest, stage: str):
        """Templates applicable to a review stage."""
        return 200, [template_to_schema(t) for t in services.match_templates(stage)]

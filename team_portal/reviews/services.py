"""
Review tracking for a team: stages, attachments and templates.
"""

import logging
from collections import defaultdict
from dataclasses import dataclass
from dataclasses import field
from uuid import UUID

from django.core.exceptions import ValidationError as DjangoValidationError
from django.core.files.uploadedfile import UploadedFile
from django.core.validators import URLValidator
from django.db.models import QuerySet

from team_portal.core.exceptions import NotFoundError
from team_portal.core.exceptions import ProjectNotApprovedError
from team_portal.core.exceptions import ValidationError
from team_portal.core.models import ApprovalState
from team_portal.projects.models import Project
from team_portal.reviews.models import Review
from team_portal.reviews.models import ReviewAttachment
from team_portal.reviews.models import ReviewTemplate
from team_portal.reviews.storage import upload_file
from team_portal.users.session import StudentSession
from team_portal.users.session import require_membership

logger = logging.getLogger(__name__)


@dataclass
class ReviewWithAttachments:
    review: Review
    attachments: list[ReviewAttachment] = field(default_factory=list)


def require_approved_project(team_id: UUID) -> None:
    """Reviews stay closed until the team project is approved."""
    approval = Project.objects.filter(team_id=team_id).values_list("approval", flat=True).first()
    if approval != ApprovalState.APPROVED:
        raise ProjectNotApprovedError()


def require_review_access(session: StudentSession) -> UUID:
    """Return the caller's team id if it may use the review section."""
    team_id = require_membership(session)
    require_approved_project(team_id)
    return team_id


def list_reviews(team_id: UUID) -> list[ReviewWithAttachments]:
    """
    Return the team's reviews, most recent first, each with its attachments.

    Attachments are loaded with a single query keyed by review id and
    grouped here.
    """
    require_approved_project(team_id)
    reviews = list(Review.objects.filter(team_id=team_id).order_by("-created"))
    if not reviews:
        return []

    grouped: dict[UUID, list[ReviewAttachment]] = defaultdict(list)
    attachments = ReviewAttachment.objects.filter(
        review_id__in=[r.id for r in reviews]
    ).order_by("-created")
    for attachment in attachments:
        grouped[attachment.review_id].append(attachment)

    return [ReviewWithAttachments(review=r, attachments=grouped.get(r.id, [])) for r in reviews]


def get_team_review(session: StudentSession, review_id: UUID) -> Review:
    """Return one of the caller's team reviews."""
    team_id = require_review_access(session)
    review = Review.objects.filter(id=review_id, team_id=team_id).first()
    if review is None:
        raise NotFoundError("Revue introuvable.")
    return review


def _normalize_link(link: str) -> str:
    # Links pasted without a scheme, e.g. "drive.google.com/file/d/abc"
    if "://" not in link:
        link = f"https://{link}"
    try:
        URLValidator(schemes=["http", "https"])(link)
    except DjangoValidationError as e:
        raise ValidationError("Lien invalide.", details={"field": "link"}) from e
    return link


def add_attachment(
    session: StudentSession,
    review_id: UUID,
    display_name: str,
    link: str | None = None,
    file: UploadedFile | None = None,
) -> ReviewAttachment:
    """
    Attach an uploaded file or an external link to a review.

    Exactly one of ``link`` and ``file`` must be given. Files go through
    the upload backend and are stored by their public URL, the same way
    as links. Links without a scheme get ``https://``; their reachability
    is not checked.
    """
    display_name = (display_name or "").strip()
    link = (link or "").strip()

    if not display_name:
        raise ValidationError("Veuillez saisir un nom d'affichage.", details={"field": "attachment_name"})
    if file is None and not link:
        raise ValidationError("Veuillez fournir un fichier ou un lien.")
    if file is not None and link:
        raise ValidationError("Fournissez soit un fichier, soit un lien, pas les deux.")

    review = get_team_review(session, review_id)

    link = upload_file(file) if file is not None else _normalize_link(link)

    attachment = ReviewAttachment.objects.create(
        review=review,
        attachment_name=display_name,
        link=link,
    )
    logger.info(
        "Attachment '%s' added to review %s (%s) by %s",
        attachment.attachment_name,
        review.id,
        review.stage,
        session.student_id,
    )
    return attachment


def remove_attachment(session: StudentSession, attachment_id: UUID) -> None:
    """Delete an attachment of one of the caller's team reviews."""
    team_id = require_review_access(session)
    attachment = ReviewAttachment.objects.filter(
        id=attachment_id,
        review__team_id=team_id,
    ).first()
    if attachment is None:
        raise NotFoundError("Piece jointe introuvable.")

    attachment.delete()
    logger.info("Attachment %s removed by %s", attachment_id, session.student_id)


def match_templates(stage: str) -> QuerySet[ReviewTemplate]:
    """Templates with no stage, the same stage, or the same stage ignoring case."""
    return ReviewTemplate.objects.for_stage(stage)

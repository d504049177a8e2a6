"""
Models for staged team reviews.

Contains:
- Review: a review stage scheduled for a team (read-only for students)
- ReviewAttachment: a named link (uploaded file URL or external link)
- ReviewTemplate: reference material, optionally tied to a stage name
"""

from django.db import models
from django.db.models import Q
from django.utils.translation import gettext_lazy as _

from team_portal.core.models import BaseModel


class Review(BaseModel):
    """
    Review checkpoint for a team (e.g., "Proposal").

    Created and graded by staff; students only attach documents.
    """

    team = models.ForeignKey(
        "teams.Team",
        on_delete=models.CASCADE,
        related_name="reviews",
        verbose_name=_("team"),
    )
    stage = models.CharField(_("stage"), max_length=100)
    is_completed = models.BooleanField(_("completed"), default=False)
    completed_on = models.DateField(_("completed on"), null=True, blank=True)
    result = models.TextField(_("result"), blank=True)
    department = models.CharField(_("department"), max_length=100, blank=True)

    class Meta:
        verbose_name = _("review")
        verbose_name_plural = _("reviews")
        ordering = ["-created"]

    def __str__(self) -> str:
        return f"{self.stage} - {self.team}"


class ReviewAttachment(BaseModel):
    """Supporting document attached to a review."""

    review = models.ForeignKey(
        Review,
        on_delete=models.CASCADE,
        related_name="attachments",
        verbose_name=_("review"),
    )
    attachment_name = models.CharField(_("name"), max_length=255)
    link = models.URLField(
        _("link"),
        max_length=1000,
        help_text=_("Uploaded file URL or external link"),
    )

    class Meta:
        verbose_name = _("review attachment")
        verbose_name_plural = _("review attachments")
        ordering = ["-created"]

    def __str__(self) -> str:
        return self.attachment_name


class ReviewTemplateQuerySet(models.QuerySet):
    def for_stage(self, stage: str) -> "ReviewTemplateQuerySet":
        """
        Templates applicable to ``stage``.

        A template matches when it has no stage, the exact stage, or the
        stage in another letter case.
        """
        return self.filter(
            Q(review__isnull=True)
            | Q(review="")
            | Q(review=stage)
            | Q(review__iexact=stage)
        )


class ReviewTemplate(BaseModel):
    """Reference document offered to teams preparing a review."""

    name = models.CharField(_("name"), max_length=255)
    description = models.TextField(_("description"), blank=True)
    link = models.URLField(_("link"), max_length=1000, blank=True)
    review = models.CharField(
        _("review stage"),
        max_length=100,
        null=True,
        blank=True,
        help_text=_("Stage this template belongs to; empty for every stage"),
    )

    objects = ReviewTemplateQuerySet.as_manager()

    class Meta:
        verbose_name = _("review template")
        verbose_name_plural = _("review templates")
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name

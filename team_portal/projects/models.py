"""
Models for team projects.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _

from team_portal.core.models import ApprovalState
from team_portal.core.models import BaseModel


class ProjectTheme(models.TextChoices):
    """Themes a team can pick for its project."""

    WEB_DEVELOPMENT = "Web Development", _("Web Development")
    MOBILE_APP = "Mobile App", _("Mobile App")
    AI_ML = "AI/ML", _("AI/ML")
    BLOCKCHAIN = "Blockchain", _("Blockchain")
    IOT = "IoT", _("IoT")
    CYBERSECURITY = "Cybersecurity", _("Cybersecurity")
    DATA_SCIENCE = "Data Science", _("Data Science")


class Project(BaseModel):
    """
    Project registered by a team.

    A team has at most one project, created and edited by its lead.
    Titles are unique across all teams.

    Inherits from BaseModel:
        - id: UUID primary key
        - created: auto-set on creation
        - modified: auto-updated on save
    """

    team = models.OneToOneField(
        "teams.Team",
        on_delete=models.CASCADE,
        related_name="project",
        verbose_name=_("team"),
    )
    title = models.CharField(
        _("title"),
        max_length=255,
        unique=True,
    )
    description = models.TextField(
        _("description"),
        help_text=_("Free-text description of the project"),
    )
    theme = models.CharField(
        _("theme"),
        max_length=50,
        choices=ProjectTheme.choices,
    )
    # Decided by staff from the admin
    approval = models.CharField(
        _("approval"),
        max_length=20,
        choices=ApprovalState.choices,
        default=ApprovalState.PENDING,
    )

    class Meta:
        verbose_name = _("project")
        verbose_name_plural = _("projects")
        ordering = ["-created"]

    def __str__(self) -> str:
        return self.title

    def get_approval_state(self) -> ApprovalState:
        return ApprovalState(self.approval)

"""
Models for team management.

Contains:
- Team: a student project team, joined by a 6-character code
"""

import logging

from django.conf import settings
from django.db import models
from django.utils.translation import gettext_lazy as _

from team_portal.core.models import ApprovalState
from team_portal.core.models import BaseModel
from team_portal.teams.codes import TEAM_CODE_LENGTH
from team_portal.teams.codes import generate_team_code

logger = logging.getLogger(__name__)


class Team(BaseModel):
    """
    Student project team.

    The student who creates the team becomes its lead. Other students
    join with the team's code. Membership is stored on the student
    (``Student.team``), reachable here as ``members``.

    Inherits from BaseModel:
        - id: UUID primary key (the team id)
        - created: auto-set on creation
        - modified: auto-updated on save
    """

    team_lead = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="led_teams",
        verbose_name=_("team lead"),
        help_text=_("The student who created the team"),
    )

    code = models.CharField(
        _("join code"),
        max_length=TEAM_CODE_LENGTH,
        unique=True,
        default=generate_team_code,
        help_text=_("Code shared with classmates to join the team"),
    )

    # Decided by staff from the admin
    approval = models.CharField(
        _("approval"),
        max_length=20,
        choices=ApprovalState.choices,
        default=ApprovalState.PENDING,
    )

    theme = models.CharField(_("theme"), max_length=100, blank=True)
    mentor = models.CharField(_("mentor"), max_length=255, blank=True)

    class Meta:
        verbose_name = _("team")
        verbose_name_plural = _("teams")
        ordering = ["-created"]

    def __str__(self) -> str:
        return f"{self.code} ({self.team_lead})"

    def is_lead(self, student) -> bool:
        """Check if the student leads this team."""
        return self.team_lead_id == student.id

    @property
    def member_count(self) -> int:
        """Return the number of students in the team."""
        return self.members.count()

    def get_approval_state(self) -> ApprovalState:
        return ApprovalState(self.approval)

    def has_capacity(self) -> bool:
        return self.member_count < settings.TEAM_MAX_MEMBERS

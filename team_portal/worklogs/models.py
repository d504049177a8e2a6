"""
Models for student work logs.
"""

import logging

from django.conf import settings
from django.db import models
from django.utils.translation import gettext_lazy as _
from django_fsm import FSMField
from django_fsm import transition

from team_portal.core.models import ApprovalState
from team_portal.core.models import BaseModel

logger = logging.getLogger(__name__)


class WorkLog(BaseModel):
    """
    Daily work log written by a student.

    Uses django-fsm for the mentor decision with protected transitions:
    - pending: log can still be edited or deleted by its author
    - approved: mentor accepted the log (terminal)
    - rejected: mentor rejected the log (terminal)
    """

    student = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="work_logs",
        verbose_name=_("student"),
    )
    # Team of the student when the log was written
    team = models.ForeignKey(
        "teams.Team",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="work_logs",
        verbose_name=_("team"),
    )

    date = models.DateField(_("date"))
    expected_task = models.TextField(_("expected task"))
    completed_task = models.TextField(_("completed task"))

    mentor_status = FSMField(
        _("mentor decision"),
        default=ApprovalState.PENDING,
        choices=ApprovalState.choices,
        protected=True,
    )
    comments = models.TextField(_("mentor comments"), blank=True)

    class Meta:
        verbose_name = _("work log")
        verbose_name_plural = _("work logs")
        ordering = ["-date", "-created"]

    def __str__(self) -> str:
        return f"{self.student} - {self.date} ({self.get_mentor_status_display()})"

    # FSM Transitions

    @transition(field=mentor_status, source=ApprovalState.PENDING, target=ApprovalState.APPROVED)
    def approve(self, comments: str = ""):
        """Mentor accepts the log."""
        if comments:
            self.comments = comments

    @transition(field=mentor_status, source=ApprovalState.PENDING, target=ApprovalState.REJECTED)
    def reject(self, comments: str = ""):
        """Mentor rejects the log."""
        if comments:
            self.comments = comments

    # Helper methods

    @property
    def is_editable(self) -> bool:
        """Only logs still waiting for the mentor can change."""
        return not self.get_approval_state().is_decided

    def get_approval_state(self) -> ApprovalState:
        return ApprovalState(self.mentor_status)

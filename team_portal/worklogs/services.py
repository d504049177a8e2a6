"""
Work log operations for the logged-in student.

Logs can only be edited or deleted while the mentor decision is pending;
the check happens before any write.
"""

import logging
from datetime import date
from uuid import UUID

from django.db.models import QuerySet
from django.utils import timezone

from team_portal.core.exceptions import LogLockedError
from team_portal.core.exceptions import NotFoundError
from team_portal.core.exceptions import NotOwnerError
from team_portal.core.exceptions import ValidationError
from team_portal.users.session import StudentSession
from team_portal.worklogs.models import WorkLog

logger = logging.getLogger(__name__)


def _validate(log_date: date | None, expected_task: str, completed_task: str) -> tuple[date, str, str]:
    if log_date is None:
        raise ValidationError("Veuillez choisir une date.", details={"field": "date"})
    if log_date > timezone.localdate():
        raise ValidationError("La date ne peut pas etre dans le futur.", details={"field": "date"})

    expected_task = (expected_task or "").strip()
    completed_task = (completed_task or "").strip()
    if not expected_task:
        raise ValidationError("Veuillez decrire le travail prevu.", details={"field": "expected_task"})
    if not completed_task:
        raise ValidationError("Veuillez decrire le travail realise.", details={"field": "completed_task"})
    return log_date, expected_task, completed_task


def _get_own_editable_log(session: StudentSession, log_id: UUID, action: str) -> WorkLog:
    log = WorkLog.objects.filter(id=log_id).first()
    if log is None:
        raise NotFoundError("Journal introuvable.")
    if log.student_id != session.id:
        raise NotOwnerError("Vous ne pouvez modifier que vos propres journaux.")
    if not log.is_editable:
        raise LogLockedError(
            f"Impossible de {action} un journal deja evalue par le mentor.",
            details={"mentor_status": log.mentor_status},
        )
    return log


def list_logs(session: StudentSession) -> QuerySet[WorkLog]:
    """Return the caller's logs, most recent date first."""
    return WorkLog.objects.filter(student_id=session.id).order_by("-date", "-created")


def create_log(
    session: StudentSession,
    log_date: date | None,
    expected_task: str,
    completed_task: str,
) -> WorkLog:
    """Record a new pending log for the caller and their current team."""
    log_date, expected_task, completed_task = _validate(log_date, expected_task, completed_task)

    log = WorkLog.objects.create(
        student_id=session.id,
        team_id=session.team_id,
        date=log_date,
        expected_task=expected_task,
        completed_task=completed_task,
    )
    logger.info("Work log %s created by %s for %s", log.id, session.student_id, log.date)
    return log


def update_log(
    session: StudentSession,
    log_id: UUID,
    log_date: date | None,
    expected_task: str,
    completed_task: str,
) -> WorkLog:
    """Update a pending log owned by the caller."""
    log = _get_own_editable_log(session, log_id, "modifier")
    log_date, expected_task, completed_task = _validate(log_date, expected_task, completed_task)

    log.date = log_date
    log.expected_task = expected_task
    log.completed_task = completed_task
    log.save(update_fields=["date", "expected_task", "completed_task", "modified"])

    logger.info("Work log %s updated by %s", log.id, session.student_id)
    return log


def delete_log(session: StudentSession, log_id: UUID) -> None:
    """Delete a pending log owned by the caller."""
    log = _get_own_editable_log(session, log_id, "supprimer")
    log.delete()
    logger.info("Work log %s deleted by %s", log_id, session.student_id)

"""
Tests for work log operations.
"""

import datetime
import uuid

import pytest
from django.utils import timezone

from team_portal.core.exceptions import LogLockedError
from team_portal.core.exceptions import NotFoundError
from team_portal.core.exceptions import NotOwnerError
from team_portal.core.exceptions import ValidationError
from team_portal.core.models import ApprovalState
from team_portal.teams.tests.factories import TeamFactory
from team_portal.users.session import StudentSession
from team_portal.worklogs import services
from team_portal.worklogs.models import WorkLog
from team_portal.worklogs.tests.factories import WorkLogFactory


@pytest.fixture
def session(student):
    return StudentSession.from_student(student)


def yesterday():
    return timezone.localdate() - datetime.timedelta(days=1)


@pytest.mark.django_db
class TestCreateLog:
    def test_create_pending_log(self, student, session):
        log = services.create_log(session, yesterday(), " Plan ", " Done ")

        assert log.student_id == student.id
        assert log.team_id is None
        assert log.expected_task == "Plan"
        assert log.completed_task == "Done"
        assert log.mentor_status == ApprovalState.PENDING

    def test_log_records_current_team(self):
        team = TeamFactory()

        log = services.create_log(StudentSession.from_student(team.team_lead), yesterday(), "Plan", "Done")

        assert log.team_id == team.id

    def test_today_allowed(self, session):
        log = services.create_log(session, timezone.localdate(), "Plan", "Done")

        assert log.date == timezone.localdate()

    def test_future_date_rejected(self, session):
        with pytest.raises(ValidationError) as exc:
            services.create_log(session, timezone.localdate() + datetime.timedelta(days=1), "Plan", "Done")

        assert exc.value.details == {"field": "date"}

    @pytest.mark.parametrize(
        ("expected", "completed", "field"),
        [("", "Done", "expected_task"), ("Plan", "  ", "completed_task")],
    )
    def test_empty_tasks_rejected(self, session, expected, completed, field):
        with pytest.raises(ValidationError) as exc:
            services.create_log(session, yesterday(), expected, completed)

        assert exc.value.details == {"field": field}
        assert not WorkLog.objects.exists()


@pytest.mark.django_db
class TestListLogs:
    def test_only_own_logs_newest_first(self, student, session):
        older = WorkLogFactory(student=student, date=yesterday() - datetime.timedelta(days=3))
        newer = WorkLogFactory(student=student, date=yesterday())
        WorkLogFactory()

        assert list(services.list_logs(session)) == [newer, older]


@pytest.mark.django_db
class TestUpdateLog:
    def test_update_pending_log(self, student, session):
        log = WorkLogFactory(student=student)

        services.update_log(session, log.id, yesterday(), "New plan", "New done")

        log = WorkLog.objects.get(id=log.id)
        assert log.expected_task == "New plan"
        assert log.completed_task == "New done"

    @pytest.mark.parametrize("status", [ApprovalState.APPROVED, ApprovalState.REJECTED])
    def test_decided_log_locked(self, student, session, status):
        log = WorkLogFactory(student=student, mentor_status=status)

        with pytest.raises(LogLockedError) as exc:
            services.update_log(session, log.id, yesterday(), "New plan", "New done")

        assert exc.value.code == "LOG_LOCKED"
        assert WorkLog.objects.get(id=log.id).expected_task == log.expected_task

    def test_lock_checked_before_validation(self, student, session):
        log = WorkLogFactory(student=student, mentor_status=ApprovalState.APPROVED)

        with pytest.raises(LogLockedError):
            services.update_log(session, log.id, None, "", "")

    def test_other_students_log_rejected(self, session):
        log = WorkLogFactory()

        with pytest.raises(NotOwnerError):
            services.update_log(session, log.id, yesterday(), "Plan", "Done")

    def test_missing_log(self, session):
        with pytest.raises(NotFoundError):
            services.update_log(session, uuid.uuid4(), yesterday(), "Plan", "Done")


@pytest.mark.django_db
class TestDeleteLog:
    def test_delete_pending_log(self, student, session):
        log = WorkLogFactory(student=student)

        services.delete_log(session, log.id)

        assert not WorkLog.objects.filter(id=log.id).exists()

    @pytest.mark.parametrize("status", [ApprovalState.APPROVED, ApprovalState.REJECTED])
    def test_decided_log_kept(self, student, session, status):
        log = WorkLogFactory(student=student, mentor_status=status)

        with pytest.raises(LogLockedError):
            services.delete_log(session, log.id)

        assert WorkLog.objects.filter(id=log.id).exists()

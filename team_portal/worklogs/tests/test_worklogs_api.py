"""
Tests for the work logs API endpoints.
"""

import datetime

import pytest
from django.utils import timezone

from team_portal.core.models import ApprovalState
from team_portal.worklogs.models import WorkLog
from team_portal.worklogs.tests.factories import WorkLogFactory


@pytest.mark.django_db
class TestWorkLogEndpoints:
    """Tests for /api/logs/."""

    def test_create_and_list(self, authenticated_client, student):
        today = timezone.localdate().isoformat()

        response = authenticated_client.post(
            "/api/logs/",
            data={"date": today, "expected_task": "Plan", "completed_task": "Done"},
            content_type="application/json",
        )

        assert response.status_code == 201
        created = response.json()
        assert created["mentor_status"] == "pending"
        assert created["mentor_approved"] is None
        assert created["is_editable"] is True

        listed = authenticated_client.get("/api/logs/").json()
        assert [log["id"] for log in listed] == [created["id"]]

    def test_future_date_rejected(self, authenticated_client):
        tomorrow = (timezone.localdate() + datetime.timedelta(days=1)).isoformat()

        response = authenticated_client.post(
            "/api/logs/",
            data={"date": tomorrow, "expected_task": "Plan", "completed_task": "Done"},
            content_type="application/json",
        )

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    def test_update_pending_log(self, authenticated_client, student):
        log = WorkLogFactory(student=student)

        response = authenticated_client.put(
            f"/api/logs/{log.id}",
            data={"date": log.date.isoformat(), "expected_task": "Plan 2", "completed_task": "Done 2"},
            content_type="application/json",
        )

        assert response.status_code == 200
        assert response.json()["expected_task"] == "Plan 2"

    def test_update_approved_log_locked(self, authenticated_client, student):
        log = WorkLogFactory(student=student, mentor_status=ApprovalState.APPROVED)

        response = authenticated_client.put(
            f"/api/logs/{log.id}",
            data={"date": log.date.isoformat(), "expected_task": "Plan 2", "completed_task": "Done 2"},
            content_type="application/json",
        )

        assert response.status_code == 409
        assert response.json()["code"] == "LOG_LOCKED"

    def test_delete(self, authenticated_client, student):
        log = WorkLogFactory(student=student)

        response = authenticated_client.delete(f"/api/logs/{log.id}")

        assert response.status_code == 200
        assert not WorkLog.objects.filter(id=log.id).exists()

    def test_delete_rejected_log_locked(self, authenticated_client, student):
        log = WorkLogFactory(student=student, mentor_status=ApprovalState.REJECTED)

        response = authenticated_client.delete(f"/api/logs/{log.id}")

        assert response.status_code == 409
        assert WorkLog.objects.filter(id=log.id).exists()

    def test_cannot_delete_someone_elses_log(self, authenticated_client):
        log = WorkLogFactory()

        response = authenticated_client.delete(f"/api/logs/{log.id}")

        assert response.status_code == 403
        assert response.json()["code"] == "NOT_OWNER"

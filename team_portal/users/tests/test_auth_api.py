"""
Tests for the authentication API endpoints.
"""

import pytest
from django.test import Client

from team_portal.users.session import SESSION_KEY
from team_portal.users.tests.factories import StudentFactory


@pytest.mark.django_db
class TestLoginEndpoint:
    """Tests for POST /api/auth/login."""

    def test_login_with_register_number(self, student):
        """Test that a student logs in with register number and password."""
        client = Client()
        response = client.post(
            "/api/auth/login",
            data={"register_number": student.register_number, "password": "testpass123"},
            content_type="application/json",
        )

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["student"]["id"] == str(student.id)
        assert data["student"]["student_id"] == student.student_id
        assert data["student"]["team_id"] is None
        assert data["csrf_token"]
        assert client.session[SESSION_KEY]["register_number"] == student.register_number

    def test_register_number_is_stripped(self, student):
        response = Client().post(
            "/api/auth/login",
            data={"register_number": f"  {student.register_number} ", "password": "testpass123"},
            content_type="application/json",
        )

        assert response.status_code == 200

    def test_blank_register_number_rejected(self, db):
        response = Client().post(
            "/api/auth/login",
            data={"register_number": "   ", "password": "testpass123"},
            content_type="application/json",
        )

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"
        assert response.json()["details"]["field"] == "register_number"

    def test_wrong_password_rejected(self, student):
        """Test that a wrong password gives INVALID_CREDENTIALS."""
        response = Client().post(
            "/api/auth/login",
            data={"register_number": student.register_number, "password": "wrong"},
            content_type="application/json",
        )

        assert response.status_code == 401
        assert response.json()["code"] == "INVALID_CREDENTIALS"

    def test_unknown_register_number_rejected(self, db):
        response = Client().post(
            "/api/auth/login",
            data={"register_number": "NOPE", "password": "testpass123"},
            content_type="application/json",
        )

        assert response.status_code == 401
        assert response.json()["code"] == "INVALID_CREDENTIALS"

    def test_inactive_account_rejected(self, db):
        """Test that a disabled account gets a distinct error."""
        student = StudentFactory(password="testpass123", is_active=False)
        response = Client().post(
            "/api/auth/login",
            data={"register_number": student.register_number, "password": "testpass123"},
            content_type="application/json",
        )

        assert response.status_code == 401
        assert response.json()["code"] == "ACCOUNT_DISABLED"

    def test_password_is_stored_hashed(self, student):
        assert student.password != "testpass123"
        assert student.check_password("testpass123")


@pytest.mark.django_db
class TestMeEndpoint:
    """Tests for GET /api/auth/me."""

    def test_authenticated_student_gets_snapshot(self, authenticated_client, student):
        response = authenticated_client.get("/api/auth/me")

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == str(student.id)
        assert data["register_number"] == student.register_number
        assert data["name"] == student.name

    def test_unauthenticated_student_rejected(self, client):
        response = client.get("/api/auth/me")

        assert response.status_code == 401
        assert response.json()["code"] == "NOT_AUTHENTICATED"


@pytest.mark.django_db
class TestLogoutEndpoint:
    """Tests for POST /api/auth/logout."""

    def test_logout_clears_session(self, authenticated_client):
        response = authenticated_client.post("/api/auth/logout")

        assert response.status_code == 200
        assert response.json()["success"] is True
        assert SESSION_KEY not in authenticated_client.session
        assert authenticated_client.get("/api/auth/me").status_code == 401


@pytest.mark.django_db
class TestCsrfEndpoint:
    def test_returns_token(self, client):
        response = client.get("/api/auth/csrf")

        assert response.status_code == 200
        assert response.json()["csrf_token"]

import pytest
from django.test import Client

from team_portal.users.models import Student
from team_portal.users.tests.factories import StudentFactory

DEFAULT_PASSWORD = "testpass123"


@pytest.fixture(autouse=True)
def _media_storage(settings, tmpdir) -> None:
    settings.MEDIA_ROOT = tmpdir.strpath


@pytest.fixture
def student(db) -> Student:
    """Create an active student without a team."""
    return StudentFactory(password=DEFAULT_PASSWORD)


@pytest.fixture
def login_client():
    """Return a function logging a student in through the auth API."""

    def _login(student: Student, password: str = DEFAULT_PASSWORD) -> Client:
        client = Client()
        response = client.post(
            "/api/auth/login",
            data={"register_number": student.register_number, "password": password},
            content_type="application/json",
        )
        assert response.status_code == 200, response.content
        return client

    return _login


@pytest.fixture
def authenticated_client(student, login_client) -> Client:
    """Return a client authenticated as ``student``."""
    return login_client(student)


@pytest.fixture
def client_for():
    """Return a function giving a client with ``student`` already logged in."""

    def _client(student: Student) -> Client:
        client = Client()
        client.force_login(student)
        return client

    return _client

"""
Tests for the permission classes.
"""

import pytest
from django.contrib.auth.models import AnonymousUser
from django.test import RequestFactory

from team_portal.core.api.permissions import AllowAny
from team_portal.core.api.permissions import IsAuthenticated
from team_portal.users.tests.factories import StudentFactory


@pytest.fixture
def request_factory():
    """Return a Django RequestFactory."""
    return RequestFactory()


def make_request(request_factory, user=None):
    """Create a request with the given user."""
    request = request_factory.get("/")
    request.user = user if user else AnonymousUser()
    return request


@pytest.mark.django_db
class TestIsAuthenticated:
    """Tests for IsAuthenticated permission."""

    def test_anonymous_student_denied(self, request_factory):
        request = make_request(request_factory)
        assert IsAuthenticated().has_permission(request, None) is False

    def test_authenticated_student_allowed(self, request_factory):
        request = make_request(request_factory, StudentFactory())
        assert IsAuthenticated().has_permission(request, None) is True


class TestAllowAny:
    """Tests for AllowAny permission."""

    def test_anonymous_allowed(self, request_factory):
        request = make_request(request_factory)
        assert AllowAny().has_permission(request, None) is True

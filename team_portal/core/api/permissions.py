"""
Permission classes for API controllers.
"""

from typing import Any

from django.http import HttpRequest
from ninja_extra import permissions


class IsAuthenticated(permissions.BasePermission):
    """
    Permission class that requires authentication.

    Checks if the student is authenticated before allowing access.
    """

    message = "Authentification requise."

    def has_permission(self, request: HttpRequest, controller: Any) -> bool:
        """Check if the student is authenticated."""
        return bool(request.user and request.user.is_authenticated)


class AllowAny(permissions.BasePermission):
    """
    Permission class that allows any access.

    Used for public endpoints such as login.
    """

    def has_permission(self, request: HttpRequest, controller: Any) -> bool:
        """Always return True."""
        return True

"""
Student API controllers.
"""

from team_portal.users.api.auth import AuthController

__all__ = ["AuthController"]

"""
Student schemas for API requests and responses.
"""

from team_portal.users.schemas.auth import CSRFTokenSchema
from team_portal.users.schemas.auth import LoginResponseSchema
from team_portal.users.schemas.auth import LoginSchema
from team_portal.users.schemas.auth import StudentSchema

__all__ = [
    "LoginSchema",
    "StudentSchema",
    "LoginResponseSchema",
    "CSRFTokenSchema",
]

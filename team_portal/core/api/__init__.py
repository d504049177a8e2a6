from team_portal.core.api.base import BaseAPI
from team_portal.core.api.permissions import AllowAny
from team_portal.core.api.permissions import IsAuthenticated

__all__ = ["BaseAPI", "IsAuthenticated", "AllowAny"]

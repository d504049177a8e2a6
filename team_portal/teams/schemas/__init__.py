"""Team schemas for API requests and responses."""

from team_portal.teams.schemas.teams import JoinTeamSchema
from team_portal.teams.schemas.teams import MemberSchema
from team_portal.teams.schemas.teams import MembershipResponseSchema
from team_portal.teams.schemas.teams import ProjectSummarySchema
from team_portal.teams.schemas.teams import TeamDashboardSchema
from team_portal.teams.schemas.teams import TeamSchema

__all__ = [
    "MemberSchema",
    "ProjectSummarySchema",
    "TeamSchema",
    "TeamDashboardSchema",
    "MembershipResponseSchema",
    "JoinTeamSchema",
]

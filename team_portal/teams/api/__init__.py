"""
Team API controllers.
"""

from team_portal.teams.api.teams import TeamController

__all__ = ["TeamController"]

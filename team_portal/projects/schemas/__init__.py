"""
Project schemas.
"""

from team_portal.projects.schemas.projects import ProjectSaveResponseSchema
from team_portal.projects.schemas.projects import ProjectSaveSchema
from team_portal.projects.schemas.projects import ProjectSchema
from team_portal.projects.schemas.projects import TeamProjectSchema
from team_portal.projects.schemas.projects import ThemeListSchema

__all__ = [
    "ProjectSchema",
    "TeamProjectSchema",
    "ProjectSaveSchema",
    "ProjectSaveResponseSchema",
    "ThemeListSchema",
]

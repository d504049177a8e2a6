"""
Project API controllers.
"""

from team_portal.projects.api.projects import ProjectController

__all__ = [
    "ProjectController",
]

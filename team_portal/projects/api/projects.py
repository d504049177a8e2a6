"""
Team projects API controller.
"""

from django.http import HttpRequest
from ninja_extra import api_controller
from ninja_extra import http_get
from ninja_extra import http_put

from team_portal.core.api import BaseAPI
from team_portal.core.api import IsAuthenticated
from team_portal.core.exceptions import ErrorSchema
from team_portal.projects import services
from team_portal.projects.models import Project
from team_portal.projects.schemas import ProjectSaveResponseSchema
from team_portal.projects.schemas import ProjectSaveSchema
from team_portal.projects.schemas import ProjectSchema
from team_portal.projects.schemas import TeamProjectSchema
from team_portal.projects.schemas import ThemeListSchema
from team_portal.teams.models import Team
from team_portal.users.session import get_session


def project_to_schema(project: Project) -> ProjectSchema:
    """Convert Project to schema."""
    return ProjectSchema(
        id=project.id,
        team_id=project.team_id,
        title=project.title,
        description=project.description,
        theme=project.theme,
        approval=project.approval,
        is_approved=project.get_approval_state().to_legacy(),
        created=project.created,
        modified=project.modified,
    )


@api_controller("/projects", tags=["Projects"], permissions=[IsAuthenticated])
class ProjectController(BaseAPI):
    """Registration of the team project."""

    @http_get(
        "/themes",
        response={200: ThemeListSchema},
        url_name="projects_themes",
    )
    def list_themes(self, request: HttpRequest):
        """List the themes a project can pick."""
        return 200, ThemeListSchema(themes=services.list_themes())

    @http_get(
        "/my",
        response={200: TeamProjectSchema, 401: ErrorSchema, 403: ErrorSchema},
        url_name="projects_my",
    )
    def my_project(self, request: HttpRequest):
        """Get the current team's project, if any."""
        session = get_session(request)
        team_id = session.require_team()

        project = services.get_project(team_id)
        can_edit = Team.objects.filter(id=team_id, team_lead_id=session.id).exists()

        return 200, TeamProjectSchema(
            project=project_to_schema(project) if project else None,
            can_edit=can_edit,
        )

    @http_put(
        "/my",
        response={
            200: ProjectSaveResponseSchema,
            201: ProjectSaveResponseSchema,
            400: ErrorSchema,
            401: ErrorSchema,
            403: ErrorSchema,
            404: ErrorSchema,
            409: ErrorSchema,
        },
        url_name="projects_save",
    )
    def save_project(self, request: HttpRequest, data: ProjectSaveSchema):
        """
        Create or update the team project.

        Only the team lead can save. Titles must be unique across teams.
        """
        project, created = services.save_project(
            get_session(request),
            title=data.title,
            description=data.description,
            theme=data.theme,
        )

        status_code = 201 if created else 200
        return status_code, ProjectSaveResponseSchema(
            success=True,
            message="Projet cree avec succes." if created else "Projet mis a jour avec succes.",
            created=created,
            project=project_to_schema(project),
        )

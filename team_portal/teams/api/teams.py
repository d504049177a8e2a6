"""
Teams API controller.
"""

import logging

from django.core.exceptions import ObjectDoesNotExist
from django.http import HttpRequest
from ninja_extra import api_controller
from ninja_extra import http_get
from ninja_extra import http_post

from team_portal.core.api import BaseAPI
from team_portal.core.api import IsAuthenticated
from team_portal.core.exceptions import ErrorSchema
from team_portal.teams import services
from team_portal.teams.models import Team
from team_portal.teams.schemas import JoinTeamSchema
from team_portal.teams.schemas import MemberSchema
from team_portal.teams.schemas import MembershipResponseSchema
from team_portal.teams.schemas import ProjectSummarySchema
from team_portal.teams.schemas import TeamDashboardSchema
from team_portal.teams.schemas import TeamSchema
from team_portal.users.schemas import StudentSchema
from team_portal.users.session import get_session
from team_portal.users.session import replace_session

logger = logging.getLogger(__name__)


def team_to_schema(team: Team) -> TeamSchema:
    """Convert Team to schema."""
    return TeamSchema(
        id=team.id,
        code=team.code,
        team_lead=MemberSchema.from_student(team.team_lead),
        approval=team.approval,
        is_approved=team.get_approval_state().to_legacy(),
        theme=team.theme,
        mentor=team.mentor,
        member_count=team.member_count,
        created=team.created,
    )


def team_to_dashboard_schema(team: Team, viewer) -> TeamDashboardSchema:
    """Convert Team to dashboard schema, from the point of view of ``viewer``."""
    try:
        project = team.project
    except ObjectDoesNotExist:
        project = None

    return TeamDashboardSchema(
        **team_to_schema(team).model_dump(),
        members=[MemberSchema.from_student(m) for m in team.members.all()],
        project=ProjectSummarySchema(
            id=project.id,
            title=project.title,
            approval=project.approval,
            is_approved=project.get_approval_state().to_legacy(),
        ) if project else None,
        is_team_lead=team.is_lead(viewer),
    )


@api_controller("/teams", tags=["Teams"], permissions=[IsAuthenticated])
class TeamController(BaseAPI):
    """Team creation, joining and dashboard."""

    @http_post(
        "/",
        response={201: MembershipResponseSchema, 401: ErrorSchema, 404: ErrorSchema, 409: ErrorSchema},
        url_name="teams_create",
    )
    def create_team(self, request: HttpRequest):
        """
        Create a new team.

        The current student becomes the team lead and first member.
        """
        result = services.create_team(get_session(request))
        replace_session(request, result.session)

        return 201, MembershipResponseSchema(
            success=True,
            message="Equipe creee avec succes.",
            team=team_to_schema(result.team),
            student=StudentSchema.from_session(result.session),
        )

    @http_post(
        "/join",
        response={200: MembershipResponseSchema, 400: ErrorSchema, 401: ErrorSchema, 404: ErrorSchema, 409: ErrorSchema},
        url_name="teams_join",
    )
    def join_team(self, request: HttpRequest, data: JoinTeamSchema):
        """
        Join an existing team with its code.

        Fails when the code is unknown or the team is full.
        """
        result = services.join_team(get_session(request), data.code)
        replace_session(request, result.session)

        return 200, MembershipResponseSchema(
            success=True,
            message="Vous avez rejoint l'equipe.",
            team=team_to_schema(result.team),
            student=StudentSchema.from_session(result.session),
        )

    @http_get(
        "/my",
        response={200: TeamDashboardSchema, 401: ErrorSchema, 403: ErrorSchema, 404: ErrorSchema},
        url_name="teams_my",
    )
    def my_team(self, request: HttpRequest):
        """Get the current student's team with members and project."""
        session = get_session(request)
        team = services.get_team_for_session(session)
        return 200, team_to_dashboard_schema(team, session)

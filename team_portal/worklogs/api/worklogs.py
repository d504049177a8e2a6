"""
Work logs API controller.
"""

from uuid import UUID

from django.http import HttpRequest
from ninja_extra import api_controller
from ninja_extra import http_delete
from ninja_extra import http_get
from ninja_extra import http_post
from ninja_extra import http_put

from team_portal.core.api import BaseAPI
from team_portal.core.api import IsAuthenticated
from team_portal.core.exceptions import ErrorSchema
from team_portal.core.schemas import MessageSchema
from team_portal.users.session import get_session
from team_portal.worklogs import services
from team_portal.worklogs.models import WorkLog
from team_portal.worklogs.schemas import WorkLogInputSchema
from team_portal.worklogs.schemas import WorkLogSchema


def log_to_schema(log: WorkLog) -> WorkLogSchema:
    """Convert WorkLog to schema."""
    return WorkLogSchema(
        id=log.id,
        student_id=log.student_id,
        team_id=log.team_id,
        date=log.date,
        expected_task=log.expected_task,
        completed_task=log.completed_task,
        mentor_status=log.mentor_status,
        mentor_approved=log.get_approval_state().to_legacy(),
        is_editable=log.is_editable,
        comments=log.comments,
        created=log.created,
    )


@api_controller("/logs", tags=["Work Logs"], permissions=[IsAuthenticated])
class WorkLogController(BaseAPI):
    """CRUD operations for the current student's work logs."""

    @http_get(
        "/",
        response={200: list[WorkLogSchema], 401: ErrorSchema},
        url_name="worklogs_list",
    )
    def list_logs(self, request: HttpRequest):
        """List the current student's logs, most recent first."""
        logs = services.list_logs(get_session(request))
        return 200, [log_to_schema(log) for log in logs]

    @http_post(
        "/",
        response={201: WorkLogSchema, 400: ErrorSchema, 401: ErrorSchema},
        url_name="worklogs_create",
    )
    def create_log(self, request: HttpRequest, data: WorkLogInputSchema):
        """Record a new work log."""
        log = services.create_log(
            get_session(request),
            log_date=data.date,
            expected_task=data.expected_task,
            completed_task=data.completed_task,
        )
        return 201, log_to_schema(log)

    @http_put(
        "/{log_id}",
        response={200: WorkLogSchema, 400: ErrorSchema, 401: ErrorSchema, 403: ErrorSchema, 404: ErrorSchema, 409: ErrorSchema},
        url_name="worklogs_update",
    )
    def update_log(self, request: HttpRequest, log_id: UUID, data: WorkLogInputSchema):
        """
        Update a work log.

        Only logs still pending mentor review can be changed.
        """
        log = services.update_log(
            get_session(request),
            log_id,
            log_date=data.date,
            expected_task=data.expected_task,
            completed_task=data.completed_task,
        )
        return 200, log_to_schema(log)

    @http_delete(
        "/{log_id}",
        response={200: MessageSchema, 401: ErrorSchema, 403: ErrorSchema, 404: ErrorSchema, 409: ErrorSchema},
        url_name="worklogs_delete",
    )
    def delete_log(self, request: HttpRequest, log_id: UUID):
        """Delete a work log still pending mentor review."""
        services.delete_log(get_session(request), log_id)
        return 200, MessageSchema(success=True, message="Journal supprime avec succes.")

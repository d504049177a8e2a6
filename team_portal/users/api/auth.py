"""
Authentication API controller.
"""

import logging

from django.contrib.auth import authenticate
from django.contrib.auth import login
from django.contrib.auth import logout
from django.http import HttpRequest
from django.middleware.csrf import get_token
from ninja_extra import api_controller
from ninja_extra import http_get
from ninja_extra import http_post

from team_portal.core.api import AllowAny
from team_portal.core.api import BaseAPI
from team_portal.core.exceptions import AccountDisabledError
from team_portal.core.exceptions import ErrorSchema
from team_portal.core.exceptions import InvalidCredentialsError
from team_portal.core.exceptions import ValidationError
from team_portal.core.schemas import MessageSchema
from team_portal.users.models import Student
from team_portal.users.schemas import CSRFTokenSchema
from team_portal.users.schemas import LoginResponseSchema
from team_portal.users.schemas import LoginSchema
from team_portal.users.schemas import StudentSchema
from team_portal.users.session import StudentSession
from team_portal.users.session import get_session
from team_portal.users.session import replace_session

logger = logging.getLogger(__name__)


@api_controller("/auth", tags=["Authentication"], permissions=[AllowAny])
class AuthController(BaseAPI):
    """Login, logout and session endpoints."""

    @http_get("/csrf", response=CSRFTokenSchema, url_name="auth_csrf")
    def get_csrf_token(self, request: HttpRequest):
        """Get a CSRF token for subsequent POST requests."""
        return CSRFTokenSchema(csrf_token=get_token(request))

    @http_post(
        "/login",
        response={200: LoginResponseSchema, 400: ErrorSchema, 401: ErrorSchema},
        url_name="auth_login",
    )
    def login_view(self, request: HttpRequest, data: LoginSchema):
        """Authenticate a student with register number and password."""
        if not data.register_number:
            raise ValidationError("Le numero d'inscription est requis.", details={"field": "register_number"})

        student = authenticate(request, register_number=data.register_number, password=data.password)

        if student is None:
            # authenticate() returns None for inactive accounts too
            inactive = Student.objects.filter(
                register_number=data.register_number,
                is_active=False,
            ).first()
            if inactive is not None and inactive.check_password(data.password):
                return AccountDisabledError().to_response()
            logger.info("Failed login attempt for %s", data.register_number)
            return InvalidCredentialsError().to_response()

        login(request, student)

        session = StudentSession.from_student(student)
        replace_session(request, session)
        logger.info("Student %s logged in", student.student_id)

        return 200, LoginResponseSchema(
            success=True,
            student=StudentSchema.from_session(session),
            csrf_token=get_token(request),
        )

    @http_post("/logout", response={200: MessageSchema}, url_name="auth_logout")
    def logout_view(self, request: HttpRequest):
        """Logout the current student and clear the session."""
        logout(request)
        return 200, MessageSchema(success=True, message="Deconnexion reussie.")

    @http_get(
        "/me",
        response={200: StudentSchema, 401: ErrorSchema},
        url_name="auth_me",
    )
    def me_view(self, request: HttpRequest):
        """Return the session snapshot of the authenticated student."""
        return 200, StudentSchema.from_session(get_session(request))

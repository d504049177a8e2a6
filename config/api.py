"""
Main API configuration for Django Ninja Extra.
All API controllers are automatically registered here, and API
exceptions raised by services are rendered as ``ErrorSchema`` responses.
"""

import importlib
import inspect
import logging

from django.db import DatabaseError
from django.http import HttpRequest
from ninja.errors import ValidationError as SchemaValidationError
from ninja_extra import NinjaExtraAPI
from ninja_extra import exceptions as extra_exceptions

from team_portal import __version__
from team_portal.core.api.base import BaseAPI
from team_portal.core.exceptions import APIException
from team_portal.core.exceptions import BackendError
from team_portal.core.exceptions import NotAuthenticatedError
from team_portal.core.exceptions import PermissionDeniedError
from team_portal.core.exceptions import ValidationError

logger = logging.getLogger(__name__)

api = NinjaExtraAPI(
    title="Team Portal API",
    version=__version__,
    description="Backend API for the student team portal",
    docs_url="/docs",
    openapi_url="/openapi.json",
)


def render_error(request: HttpRequest, error: APIException):
    return api.create_response(
        request,
        error.to_schema().model_dump(),
        status=error.status_code,
    )


@api.exception_handler(APIException)
def handle_api_exception(request: HttpRequest, exc: APIException):
    return render_error(request, exc)


@api.exception_handler(extra_exceptions.PermissionDenied)
def handle_permission_denied(request: HttpRequest, exc: extra_exceptions.PermissionDenied):
    # Controller permission checks only know "denied"; anonymous callers get a 401
    if not request.user.is_authenticated:
        return render_error(request, NotAuthenticatedError())
    return render_error(request, PermissionDeniedError(str(exc.detail)))


@api.exception_handler(SchemaValidationError)
def handle_schema_validation_error(request: HttpRequest, exc: SchemaValidationError):
    # Malformed request bodies share the ErrorSchema shape of service errors
    return render_error(request, ValidationError(details={"errors": exc.errors}))


@api.exception_handler(DatabaseError)
def handle_database_error(request: HttpRequest, exc: DatabaseError):
    logger.exception("Database error on %s %s", request.method, request.path)
    return render_error(request, BackendError())


def register_controllers_from_module(api_instance: NinjaExtraAPI, module_path: str) -> None:
    """
    Dynamically import and register API controllers from a module.

    Controllers must inherit from BaseAPI to be registered.
    """
    try:
        module = importlib.import_module(module_path)
    except ModuleNotFoundError as e:
        if e.name != module_path:
            raise
        logger.debug("Module %s not found, skipping", module_path)
        return

    for attr_name in dir(module):
        attr = getattr(module, attr_name)
        if (
            inspect.isclass(attr)
            and issubclass(attr, BaseAPI)
            and attr is not BaseAPI
        ):
            logger.debug("Registering controller: %s.%s", module_path, attr_name)
            api_instance.register_controllers(attr)


# Register controllers from each local app
LOCAL_APPS = [
    "team_portal.users",
    "team_portal.teams",
    "team_portal.projects",
    "team_portal.worklogs",
    "team_portal.reviews",
]

for app in LOCAL_APPS:
    register_controllers_from_module(api, f"{app}.api")

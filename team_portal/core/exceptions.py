"""
Custom exceptions for the Team Portal API.
Centralized error handling: services raise, the API instance renders.
"""

from ninja import Schema


class ErrorSchema(Schema):
    """Standard error response schema."""

    code: str
    message: str
    details: dict | None = None


class APIException(Exception):
    """Base exception for API errors."""

    status_code: int = 500
    code: str = "INTERNAL_ERROR"
    message: str = "Une erreur interne est survenue."

    def __init__(
        self,
        message: str | None = None,
        code: str | None = None,
        details: dict | None = None,
    ):
        self.message = message or self.__class__.message
        self.code = code or self.__class__.code
        self.details = details
        super().__init__(self.message)

    def to_schema(self) -> ErrorSchema:
        return ErrorSchema(
            code=self.code,
            message=self.message,
            details=self.details,
        )

    def to_response(self) -> tuple[int, ErrorSchema]:
        """Convert exception to API response tuple."""
        return self.status_code, self.to_schema()


# Authentication Exceptions
class NotAuthenticatedError(APIException):
    """User is not authenticated."""

    status_code = 401
    code = "NOT_AUTHENTICATED"
    message = "Authentification requise."


class InvalidCredentialsError(APIException):
    """Invalid login credentials."""

    status_code = 401
    code = "INVALID_CREDENTIALS"
    message = "Numero d'inscription ou mot de passe incorrect."


class AccountDisabledError(APIException):
    """User account is disabled."""

    status_code = 401
    code = "ACCOUNT_DISABLED"
    message = "Ce compte est desactive."


# Authorization Exceptions
class PermissionDeniedError(APIException):
    """User doesn't have required permissions."""

    status_code = 403
    code = "PERMISSION_DENIED"
    message = "Vous n'avez pas les permissions necessaires."


class NotOwnerError(APIException):
    """User is not the owner of the resource."""

    status_code = 403
    code = "NOT_OWNER"
    message = "Vous n'etes pas le proprietaire de cette ressource."


class NotTeamLeadError(PermissionDeniedError):
    """Only the team lead may perform this action."""

    code = "NOT_TEAM_LEAD"
    message = "Seul le chef d'equipe peut effectuer cette action."


class NoTeamError(PermissionDeniedError):
    """The student does not belong to a team yet."""

    code = "NO_TEAM"
    message = "Vous ne faites partie d'aucune equipe."


class NotTeamMemberError(PermissionDeniedError):
    """The session names a team the student no longer belongs to."""

    code = "NOT_TEAM_MEMBER"
    message = "Vous ne faites plus partie de cette equipe. Veuillez vous reconnecter."


class ProjectNotApprovedError(PermissionDeniedError):
    """Reviews open once the team project is approved."""

    code = "PROJECT_NOT_APPROVED"
    message = "Les revues sont disponibles une fois le projet de l'equipe approuve."


# Resource Exceptions
class NotFoundError(APIException):
    """Resource not found."""

    status_code = 404
    code = "NOT_FOUND"
    message = "Ressource introuvable."


class InvalidTeamCodeError(NotFoundError):
    """No team matches the join code."""

    code = "INVALID_TEAM_CODE"
    message = "Code d'equipe invalide."


class AlreadyExistsError(APIException):
    """Resource already exists."""

    status_code = 409
    code = "ALREADY_EXISTS"
    message = "Cette ressource existe deja."


class AlreadyInTeamError(AlreadyExistsError):
    """The student is already a member of a team."""

    code = "ALREADY_IN_TEAM"
    message = "Vous faites deja partie d'une equipe."


class DuplicateTitleError(AlreadyExistsError):
    """Another project already uses this title."""

    code = "DUPLICATE_TITLE"
    message = "Un projet avec ce titre existe deja."


class TeamFullError(APIException):
    """The team has reached its maximum size."""

    status_code = 409
    code = "TEAM_FULL"
    message = "Cette equipe est complete."


class LogLockedError(APIException):
    """The work log has been reviewed by a mentor and can no longer change."""

    status_code = 409
    code = "LOG_LOCKED"
    message = "Ce journal a deja ete evalue par le mentor."


# Validation Exceptions
class ValidationError(APIException):
    """Invalid input data."""

    status_code = 400
    code = "VALIDATION_ERROR"
    message = "Donnees invalides."


# Backend Exceptions
class BackendError(APIException):
    """The data store failed to answer."""

    status_code = 503
    code = "BACKEND_ERROR"
    message = "Le service est momentanement indisponible. Veuillez reessayer."


class UploadError(APIException):
    """The upload collaborator rejected the file."""

    status_code = 502
    code = "UPLOAD_FAILED"
    message = "Echec du televersement du fichier."

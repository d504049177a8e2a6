"""
Session context for the logged-in student.

Every operation receives an explicit, immutable ``StudentSession``. The
snapshot lives in the Django session under ``SESSION_KEY`` and is only ever
rewritten through ``replace_session``.
"""

import logging
from dataclasses import asdict
from dataclasses import dataclass
from dataclasses import replace
from uuid import UUID

from django.http import HttpRequest

from team_portal.core.exceptions import NoTeamError
from team_portal.core.exceptions import NotAuthenticatedError
from team_portal.core.exceptions import NotTeamMemberError
from team_portal.users.models import Student

logger = logging.getLogger(__name__)

SESSION_KEY = "student"


@dataclass(frozen=True)
class StudentSession:
    """Immutable snapshot of the logged-in student's profile."""

    id: UUID
    student_id: str
    register_number: str
    name: str
    email: str
    department: str
    section: str
    team_id: UUID | None = None

    @classmethod
    def from_student(cls, student) -> "StudentSession":
        return cls(
            id=student.id,
            student_id=student.student_id,
            register_number=student.register_number,
            name=student.name,
            email=student.email,
            department=student.department,
            section=student.section,
            team_id=student.team_id,
        )

    @classmethod
    def from_dict(cls, data: dict) -> "StudentSession":
        team_id = data.get("team_id")
        return cls(
            id=UUID(data["id"]),
            student_id=data["student_id"],
            register_number=data["register_number"],
            name=data.get("name", ""),
            email=data.get("email", ""),
            department=data.get("department", ""),
            section=data.get("section", ""),
            team_id=UUID(team_id) if team_id else None,
        )

    def to_dict(self) -> dict:
        """JSON-serializable form stored in the Django session."""
        data = asdict(self)
        data["id"] = str(self.id)
        data["team_id"] = str(self.team_id) if self.team_id else None
        return data

    def with_team(self, team_id: UUID | None) -> "StudentSession":
        return replace(self, team_id=team_id)

    @property
    def has_team(self) -> bool:
        return self.team_id is not None

    def require_team(self) -> UUID:
        """Return the team id or raise if the student has no team."""
        if not self.has_team:
            raise NoTeamError()
        return self.team_id


def get_session(request: HttpRequest) -> StudentSession:
    """
    Return the session snapshot for the authenticated student.

    Falls back to building it from ``request.user`` when the stored
    snapshot is missing or belongs to another account.
    """
    user = getattr(request, "user", None)
    if not user or not user.is_authenticated:
        raise NotAuthenticatedError()

    data = request.session.get(SESSION_KEY)
    if data and data.get("id") == str(user.id):
        return StudentSession.from_dict(data)

    session = StudentSession.from_student(user)
    replace_session(request, session)
    return session


def replace_session(request: HttpRequest, session: StudentSession) -> None:
    """Single mutation point for the stored session snapshot."""
    request.session[SESSION_KEY] = session.to_dict()
    logger.debug("Session replaced for student %s (team=%s)", session.student_id, session.team_id)


def require_membership(session: StudentSession) -> UUID:
    """
    Return the snapshot's team id once the stored membership confirms it.

    Staff can move students from the admin; a snapshot taken before the
    move must not keep granting access to the old team.
    """
    team_id = session.require_team()
    if not Student.objects.filter(id=session.id, team_id=team_id).exists():
        logger.warning("Stale session for %s: no longer in team %s", session.student_id, team_id)
        raise NotTeamMemberError()
    return team_id

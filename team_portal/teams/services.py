"""
Team assignment: create a team or join one by code.

Both operations return the caller's new ``StudentSession``; callers
holding a session must store it with ``replace_session``.
"""

import logging
from dataclasses import dataclass

from django.conf import settings
from django.db import IntegrityError
from django.db import transaction

from team_portal.core.exceptions import AlreadyInTeamError
from team_portal.core.exceptions import BackendError
from team_portal.core.exceptions import InvalidTeamCodeError
from team_portal.core.exceptions import NotFoundError
from team_portal.core.exceptions import TeamFullError
from team_portal.core.exceptions import ValidationError
from team_portal.teams.codes import generate_team_code
from team_portal.teams.codes import normalize_team_code
from team_portal.teams.models import Team
from team_portal.teams.signals import membership_changed
from team_portal.users.models import Student
from team_portal.users.session import StudentSession

logger = logging.getLogger(__name__)

CODE_GENERATION_ATTEMPTS = 5


@dataclass(frozen=True)
class MembershipResult:
    team: Team
    session: StudentSession


def _get_student(session: StudentSession) -> Student:
    student = Student.objects.filter(id=session.id).first()
    if student is None:
        raise NotFoundError("Etudiant introuvable.")
    return student


def _insert_team(student: Student) -> Team:
    """Insert a team with a fresh code, regenerating on the rare collision."""
    for attempt in range(1, CODE_GENERATION_ATTEMPTS + 1):
        code = generate_team_code()
        try:
            with transaction.atomic():
                return Team.objects.create(team_lead=student, code=code)
        except IntegrityError:
            logger.warning("Team code collision on %s (attempt %d)", code, attempt)
    raise BackendError("Impossible de generer un code d'equipe unique.")


def create_team(session: StudentSession) -> MembershipResult:
    """
    Create a team led by the caller and make the caller its first member.

    The team insert and the membership update run in one transaction.
    """
    with transaction.atomic():
        student = _get_student(session)
        if student.team_id is not None:
            raise AlreadyInTeamError()

        team = _insert_team(student)
        student.team = team
        student.save(update_fields=["team"])

    logger.info("Team %s created by %s", team.code, student.student_id)
    membership_changed.send(sender=Team, student=student, team=team, created=True)

    return MembershipResult(team=team, session=session.with_team(team.id))


def join_team(session: StudentSession, code: str) -> MembershipResult:
    """
    Join the team matching ``code``.

    The team row is locked while its members are counted so that two
    concurrent joins cannot both pass the capacity check on databases
    supporting row locks.
    """
    code = normalize_team_code(code)
    if not code:
        raise ValidationError("Veuillez saisir un code d'equipe.")

    with transaction.atomic():
        student = _get_student(session)
        if student.team_id is not None:
            raise AlreadyInTeamError()

        team = Team.objects.select_for_update().filter(code=code).first()
        if team is None:
            raise InvalidTeamCodeError()

        max_members = settings.TEAM_MAX_MEMBERS
        if not team.has_capacity():
            raise TeamFullError(
                f"Cette equipe est complete (maximum {max_members} membres).",
                details={"max_members": max_members},
            )

        student.team = team
        student.save(update_fields=["team"])

    logger.info("Student %s joined team %s", student.student_id, team.code)
    membership_changed.send(sender=Team, student=student, team=team, created=False)

    return MembershipResult(team=team, session=session.with_team(team.id))


def get_team_for_session(session: StudentSession) -> Team:
    """Return the caller's team with lead and members loaded."""
    team_id = session.require_team()
    team = (
        Team.objects.select_related("team_lead")
        .prefetch_related("members")
        .filter(id=team_id)
        .first()
    )
    if team is None:
        raise NotFoundError("Equipe introuvable.")
    return team

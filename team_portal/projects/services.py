"""
Project registry: one project per team, titles unique across teams.
"""

import logging
from uuid import UUID

from django.db import IntegrityError
from django.db import transaction

from team_portal.core.exceptions import DuplicateTitleError
from team_portal.core.exceptions import NotFoundError
from team_portal.core.exceptions import NotTeamLeadError
from team_portal.core.exceptions import ValidationError
from team_portal.projects.models import Project
from team_portal.projects.models import ProjectTheme
from team_portal.teams.models import Team
from team_portal.users.session import StudentSession
from team_portal.users.session import require_membership

logger = logging.getLogger(__name__)


def get_project(team_id: UUID) -> Project | None:
    """Return the team's project, or None if it has not registered one."""
    return Project.objects.filter(team_id=team_id).first()


def list_themes() -> list[str]:
    return list(ProjectTheme.values)


def title_taken(title: str, exclude_project_id: UUID | None = None) -> bool:
    """Check whether another project already uses ``title``."""
    projects = Project.objects.filter(title=title)
    if exclude_project_id is not None:
        projects = projects.exclude(id=exclude_project_id)
    return projects.exists()


def _validate(title: str, description: str, theme: str) -> tuple[str, str, str]:
    title = (title or "").strip()
    description = (description or "").strip()
    theme = (theme or "").strip()

    if not title:
        raise ValidationError("Veuillez saisir un titre de projet.", details={"field": "title"})
    if not description:
        raise ValidationError("Veuillez saisir une description du projet.", details={"field": "description"})
    if not theme:
        raise ValidationError("Veuillez choisir un theme de projet.", details={"field": "theme"})
    if theme not in ProjectTheme.values:
        raise ValidationError(
            f"Theme invalide. Choix: {', '.join(ProjectTheme.values)}",
            details={"field": "theme"},
        )
    return title, description, theme


def save_project(
    session: StudentSession,
    title: str,
    description: str,
    theme: str,
) -> tuple[Project, bool]:
    """
    Create or update the caller's team project.

    Only the team lead may save, and membership is checked against the
    stored student rather than the session snapshot. The title check runs
    just before the write; the unique constraint on ``title`` catches a
    concurrent writer that slips in between.

    Returns the project and whether it was created.
    """
    team_id = require_membership(session)
    team = Team.objects.filter(id=team_id).first()
    if team is None:
        raise NotFoundError("Equipe introuvable.")
    if not team.is_lead(session):
        raise NotTeamLeadError("Seul le chef d'equipe peut creer ou modifier le projet.")

    title, description, theme = _validate(title, description, theme)

    project = get_project(team_id)
    if title_taken(title, exclude_project_id=project.id if project else None):
        raise DuplicateTitleError(details={"title": title})

    created = project is None
    try:
        with transaction.atomic():
            if created:
                project = Project.objects.create(
                    team=team,
                    title=title,
                    description=description,
                    theme=theme,
                )
            else:
                project.title = title
                project.description = description
                project.theme = theme
                project.save(update_fields=["title", "description", "theme", "modified"])
    except IntegrityError as e:
        logger.warning("Project title conflict on save for team %s: %s", team.code, e)
        raise DuplicateTitleError(details={"title": title}) from e

    logger.info(
        "Project '%s' %s by %s for team %s",
        project.title,
        "created" if created else "updated",
        session.student_id,
        team.code,
    )
    return project, created

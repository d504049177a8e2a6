"""
Tests for the project registry.
"""

import pytest

from team_portal.core.exceptions import DuplicateTitleError
from team_portal.core.exceptions import NoTeamError
from team_portal.core.exceptions import NotTeamLeadError
from team_portal.core.exceptions import NotTeamMemberError
from team_portal.core.exceptions import ValidationError
from team_portal.projects import services
from team_portal.projects.models import Project
from team_portal.projects.models import ProjectTheme
from team_portal.projects.tests.factories import ProjectFactory
from team_portal.teams.tests.factories import TeamFactory
from team_portal.users.models import Student
from team_portal.users.session import StudentSession
from team_portal.users.tests.factories import StudentFactory


@pytest.fixture
def team(db):
    return TeamFactory()


@pytest.fixture
def lead_session(team):
    return StudentSession.from_student(team.team_lead)


@pytest.mark.django_db
class TestSaveProject:
    """Tests for services.save_project."""

    def test_lead_creates_project(self, team, lead_session):
        project, created = services.save_project(
            lead_session,
            title="  Smart Campus ",
            description="Campus navigation app",
            theme=ProjectTheme.MOBILE_APP,
        )

        assert created is True
        assert project.team_id == team.id
        assert project.title == "Smart Campus"
        assert project.get_approval_state().to_legacy() is None

    def test_lead_updates_project(self, team, lead_session):
        ProjectFactory(team=team, title="Old title")

        project, created = services.save_project(
            lead_session,
            title="New title",
            description="Updated",
            theme=ProjectTheme.IOT,
        )

        assert created is False
        assert Project.objects.get(team=team).title == "New title"
        assert Project.objects.count() == 1

    def test_update_keeping_own_title(self, team, lead_session):
        ProjectFactory(team=team, title="Smart Campus")

        project, created = services.save_project(
            lead_session,
            title="Smart Campus",
            description="New description",
            theme=ProjectTheme.AI_ML,
        )

        assert created is False
        assert project.description == "New description"

    def test_title_of_another_team_rejected(self, lead_session):
        ProjectFactory(title="Smart Campus")

        with pytest.raises(DuplicateTitleError) as exc:
            services.save_project(
                lead_session,
                title="Smart Campus",
                description="Copy",
                theme=ProjectTheme.AI_ML,
            )

        assert exc.value.code == "DUPLICATE_TITLE"
        assert exc.value.details == {"title": "Smart Campus"}

    def test_concurrent_title_claim_reported_as_duplicate(self, team, lead_session, monkeypatch):
        """A title claimed after the check still fails on the unique constraint."""
        ProjectFactory(title="Smart Campus")
        monkeypatch.setattr(services, "title_taken", lambda *args, **kwargs: False)

        with pytest.raises(DuplicateTitleError) as exc:
            services.save_project(
                lead_session,
                title="Smart Campus",
                description="Copy",
                theme=ProjectTheme.AI_ML,
            )

        assert exc.value.details == {"title": "Smart Campus"}
        assert not Project.objects.filter(team=team).exists()

    def test_stale_session_rejected(self, team, lead_session):
        other = TeamFactory()
        Student.objects.filter(id=lead_session.id).update(team=other)

        with pytest.raises(NotTeamMemberError):
            services.save_project(
                lead_session,
                title="Smart Campus",
                description="Old snapshot",
                theme=ProjectTheme.AI_ML,
            )

        assert not Project.objects.exists()

    def test_member_cannot_save(self, team):
        mate = StudentFactory()
        mate.team = team
        mate.save()

        with pytest.raises(NotTeamLeadError):
            services.save_project(
                StudentSession.from_student(mate),
                title="Smart Campus",
                description="Nope",
                theme=ProjectTheme.AI_ML,
            )

        assert not Project.objects.exists()

    def test_student_without_team_rejected(self, db):
        with pytest.raises(NoTeamError):
            services.save_project(
                StudentSession.from_student(StudentFactory()),
                title="T",
                description="D",
                theme=ProjectTheme.AI_ML,
            )

    @pytest.mark.parametrize(
        ("title", "description", "theme", "field"),
        [
            ("", "Desc", ProjectTheme.AI_ML, "title"),
            ("   ", "Desc", ProjectTheme.AI_ML, "title"),
            ("Title", "", ProjectTheme.AI_ML, "description"),
            ("Title", "Desc", "", "theme"),
            ("Title", "Desc", "Gardening", "theme"),
        ],
    )
    def test_invalid_fields_rejected(self, lead_session, title, description, theme, field):
        with pytest.raises(ValidationError) as exc:
            services.save_project(lead_session, title=title, description=description, theme=theme)

        assert exc.value.details == {"field": field}
        assert not Project.objects.exists()


@pytest.mark.django_db
class TestTitleTaken:
    def test_excludes_own_project(self):
        project = ProjectFactory(title="Unique")

        assert services.title_taken("Unique") is True
        assert services.title_taken("Unique", exclude_project_id=project.id) is False
        assert services.title_taken("Other") is False

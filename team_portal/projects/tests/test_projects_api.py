"""
Tests for the projects API endpoints.
"""

import pytest

from team_portal.projects.models import ProjectTheme
from team_portal.projects.tests.factories import ProjectFactory
from team_portal.teams.tests.factories import TeamFactory
from team_portal.users.tests.factories import StudentFactory


@pytest.mark.django_db
class TestThemesEndpoint:
    def test_lists_themes(self, authenticated_client):
        response = authenticated_client.get("/api/projects/themes")

        assert response.status_code == 200
        themes = response.json()["themes"]
        assert "Web Development" in themes
        assert "Data Science" in themes
        assert len(themes) == 7


@pytest.mark.django_db
class TestMyProjectEndpoint:
    """Tests for GET and PUT /api/projects/my."""

    def test_no_project_yet(self, client_for):
        team = TeamFactory()

        response = client_for(team.team_lead).get("/api/projects/my")

        assert response.status_code == 200
        assert response.json() == {"project": None, "can_edit": True}

    def test_member_cannot_edit(self, client_for):
        mate = StudentFactory()
        team = TeamFactory(members=[mate])
        ProjectFactory(team=team)

        data = client_for(mate).get("/api/projects/my").json()

        assert data["can_edit"] is False
        assert data["project"]["team_id"] == str(team.id)

    def test_create_then_update(self, client_for):
        team = TeamFactory()
        client = client_for(team.team_lead)
        payload = {
            "title": "Smart Campus",
            "description": "Campus navigation",
            "theme": ProjectTheme.MOBILE_APP.value,
        }

        created = client.put("/api/projects/my", data=payload, content_type="application/json")
        payload["description"] = "Campus navigation with AR"
        updated = client.put("/api/projects/my", data=payload, content_type="application/json")

        assert created.status_code == 201
        assert created.json()["created"] is True
        assert updated.status_code == 200
        assert updated.json()["created"] is False
        assert updated.json()["project"]["description"] == "Campus navigation with AR"

    def test_duplicate_title(self, client_for):
        ProjectFactory(title="Taken")
        team = TeamFactory()

        response = client_for(team.team_lead).put(
            "/api/projects/my",
            data={"title": "Taken", "description": "D", "theme": "IoT"},
            content_type="application/json",
        )

        assert response.status_code == 409
        assert response.json()["code"] == "DUPLICATE_TITLE"

    def test_member_cannot_save(self, client_for):
        mate = StudentFactory()
        TeamFactory(members=[mate])

        response = client_for(mate).put(
            "/api/projects/my",
            data={"title": "T", "description": "D", "theme": "IoT"},
            content_type="application/json",
        )

        assert response.status_code == 403
        assert response.json()["code"] == "NOT_TEAM_LEAD"

    def test_without_team(self, authenticated_client):
        response = authenticated_client.get("/api/projects/my")

        assert response.status_code == 403
        assert response.json()["code"] == "NO_TEAM"

import re

from team_portal.teams.codes import TEAM_CODE_LENGTH
from team_portal.teams.codes import generate_team_code
from team_portal.teams.codes import normalize_team_code


class TestGenerateTeamCode:
    def test_code_shape(self):
        for _ in range(50):
            code = generate_team_code()
            assert len(code) == TEAM_CODE_LENGTH == 6
            assert re.fullmatch(r"[A-Z0-9]{6}", code)

    def test_codes_vary(self):
        assert len({generate_team_code() for _ in range(20)}) > 1


class TestNormalizeTeamCode:
    def test_strips_and_uppercases(self):
        assert normalize_team_code("  ab12cd ") == "AB12CD"

    def test_none_becomes_empty(self):
        assert normalize_team_code(None) == ""

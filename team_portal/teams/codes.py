"""
Join code generation for teams.
"""

import secrets
import string

TEAM_CODE_ALPHABET = string.ascii_uppercase + string.digits
TEAM_CODE_LENGTH = 6


def generate_team_code(length: int = TEAM_CODE_LENGTH) -> str:
    """Return a random join code drawn uniformly from [A-Z0-9]."""
    return "".join(secrets.choice(TEAM_CODE_ALPHABET) for _ in range(length))


def normalize_team_code(code: str) -> str:
    """Codes are typed by hand; compare them stripped and upper-cased."""
    return (code or "").strip().upper()

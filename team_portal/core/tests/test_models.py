"""
Tests for the shared approval state.
"""

from team_portal.core.models import ApprovalState


class TestApprovalState:
    """Conversion to the legacy nullable boolean and decision status."""

    def test_to_legacy(self):
        assert ApprovalState.PENDING.to_legacy() is None
        assert ApprovalState.APPROVED.to_legacy() is True
        assert ApprovalState.REJECTED.to_legacy() is False

    def test_only_pending_is_undecided(self):
        assert ApprovalState.PENDING.is_decided is False
        assert ApprovalState.APPROVED.is_decided is True
        assert ApprovalState.REJECTED.is_decided is True

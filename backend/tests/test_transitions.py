"""
Shelter Admin Backend — Status Transition Table Tests
=======================================================

What we test:
    ✅ Adoption review is one-way out of pending
    ✅ Donation confirm/cancel are always allowed
    ✅ Malformed tables are refused at construction
"""

import pytest

from app.exceptions import InvalidStateError
from app.services.transitions import (
    ADOPTION_STATUS,
    DONATION_STATUS,
    USER_STATUS,
    StatusMachine,
)


class TestAdoptionTransitions:
    @pytest.mark.parametrize("target", ["approved", "rejected", "cancelled"])
    def test_pending_moves_anywhere(self, target):
        assert ADOPTION_STATUS.can("pending", target)

    @pytest.mark.parametrize("state", ["approved", "rejected", "cancelled"])
    def test_decided_states_are_terminal(self, state):
        assert ADOPTION_STATUS.is_terminal(state)
        assert not ADOPTION_STATUS.can(state, "pending")

    def test_sources_for_approved(self):
        assert ADOPTION_STATUS.sources_for("approved") == frozenset({"pending"})

    def test_ensure_raises_with_context(self):
        with pytest.raises(InvalidStateError) as excinfo:
            ADOPTION_STATUS.ensure("approved", "rejected")
        assert excinfo.value.status_code == 400
        assert excinfo.value.context == {"current": "approved", "target": "rejected"}
        assert "from 'approved' to 'rejected'" in excinfo.value.message


class TestOtherTables:
    @pytest.mark.parametrize("state", ["pending", "confirmed", "cancelled"])
    def test_donation_actions_always_allowed(self, state):
        assert DONATION_STATUS.can(state, "confirmed")
        assert DONATION_STATUS.can(state, "cancelled")

    def test_donations_never_return_to_pending(self):
        assert DONATION_STATUS.sources_for("pending") == frozenset()

    def test_user_status_unrestricted(self):
        assert USER_STATUS.initial == "active"
        assert USER_STATUS.can("locked", "active")
        assert USER_STATUS.can("active", "locked")
        assert not USER_STATUS.can("active", "deleted")


class TestStatusMachineConstruction:
    def test_undeclared_target(self):
        with pytest.raises(ValueError, match="undeclared"):
            StatusMachine("demo", {"a": ("b",)}, initial="a")

    def test_undeclared_initial(self):
        with pytest.raises(ValueError, match="initial"):
            StatusMachine("demo", {"a": ()}, initial="z")

"""
Shelter Admin Backend — Status Transition Tables
==================================================

What:  One `StatusMachine` per status-bearing entity: its closed set of
       states and the legal moves between them.
How:   Action endpoints call `ensure(current, target)` before writing, and
       guarded UPDATE statements use `sources_for(target)` in their WHERE
       clause so a concurrent writer cannot slip an illegal move through.
Who:   AdoptionService, DonationService, UserService; the enum lists are
       also what the request schemas validate against.

Tables:
    Adoption        pending → approved | rejected | cancelled (others terminal)
    Donation        any → confirmed | cancelled (confirm/cancel are unconditional)
    User            any → active | locked | inactive
    Activity, AdoptionRecord, Volunteer
                    any → any (changed through partial updates)
"""

from typing import Dict, FrozenSet, Iterable, Mapping, Optional, Tuple

from app.exceptions import InvalidStateError


class StatusMachine:
    """
    A closed set of status strings with an explicit transition table.

    Args:
        name:         Entity label used in error messages ("adoption").
        transitions:  state → iterable of states reachable from it. Every
                      state must appear as a key, terminal ones mapping to ().
        initial:      Status new rows start in.
    """

    def __init__(
        self,
        name: str,
        transitions: Mapping[str, Iterable[str]],
        initial: str,
    ):
        self.name = name
        self.transitions: Dict[str, FrozenSet[str]] = {
            state: frozenset(targets) for state, targets in transitions.items()
        }
        unknown = {t for targets in self.transitions.values() for t in targets} - set(self.transitions)
        if unknown:
            raise ValueError(f"{name}: transitions reference undeclared states {sorted(unknown)}")
        if initial not in self.transitions:
            raise ValueError(f"{name}: initial state '{initial}' is not declared")
        self.initial = initial

    @classmethod
    def unrestricted(cls, name: str, states: Iterable[str], initial: str) -> "StatusMachine":
        """Every state may move to every state, itself included."""
        states = tuple(states)
        return cls(name, {state: states for state in states}, initial)

    @property
    def states(self) -> Tuple[str, ...]:
        return tuple(self.transitions)

    def can(self, current: str, target: str) -> bool:
        return target in self.transitions.get(current, frozenset())

    def is_terminal(self, state: str) -> bool:
        return not self.transitions.get(state)

    def sources_for(self, target: str) -> FrozenSet[str]:
        """All states from which `target` is reachable in one move."""
        return frozenset(
            state for state, targets in self.transitions.items() if target in targets
        )

    def ensure(self, current: str, target: str, message: Optional[str] = None) -> None:
        """Raises InvalidStateError unless `current → target` is legal."""
        if not self.can(current, target):
            raise InvalidStateError(
                message or f"Cannot change {self.name} status from '{current}' to '{target}'",
                current=current,
                target=target,
            )

    def __repr__(self) -> str:
        return f"<StatusMachine({self.name}, states={list(self.transitions)})>"


# ── Adoption applications ─────────────────────────────────────────────────
ADOPTION_STATUS = StatusMachine(
    "adoption",
    {
        "pending": ("approved", "rejected", "cancelled"),
        "approved": (),
        "rejected": (),
        "cancelled": (),
    },
    initial="pending",
)

# ── Donations ─────────────────────────────────────────────────────────────
# Confirm and cancel apply from any state, including a repeat of the same one.
DONATION_STATUS = StatusMachine(
    "donation",
    {
        "pending": ("confirmed", "cancelled"),
        "confirmed": ("confirmed", "cancelled"),
        "cancelled": ("confirmed", "cancelled"),
    },
    initial="pending",
)

# ── Users ─────────────────────────────────────────────────────────────────
USER_STATUS = StatusMachine.unrestricted(
    "user", ("active", "inactive", "locked"), initial="active",
)

# ── Free-form statuses ────────────────────────────────────────────────────
ACTIVITY_STATUS = StatusMachine.unrestricted(
    "activity", ("upcoming", "ongoing", "completed", "cancelled"), initial="upcoming",
)
ADOPTION_RECORD_STATUS = StatusMachine.unrestricted(
    "adoption record", ("active", "completed", "cancelled"), initial="active",
)
VOLUNTEER_STATUS = StatusMachine.unrestricted(
    "volunteer", ("active", "inactive"), initial="active",
)

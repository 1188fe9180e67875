"""Dispatch records: switch lifecycle state and per-evaluation outcome."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SwitchState(str, Enum):
    """Lifecycle state of a Switch.

    BUILDING -> EVALUATING -> SETTLED, and SETTLED -> EVALUATING again
    unless the strict re-evaluation policy is in force. CLOSED is terminal.
    """

    BUILDING = "building"
    EVALUATING = "evaluating"
    SETTLED = "settled"
    CLOSED = "closed"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class DispatchOutcome:
    """Match decision of a single successful evaluate() call.

    Attributes:
        switch_id: Id of the Switch that produced this outcome.
        matched_index: Insertion index of the branch that fired, or None.
        default_fired: Whether the default action ran.
        predicates_checked: How many predicates were invoked (at most
            ``matched_index + 1`` when a branch matched).
    """

    switch_id: str
    matched_index: int | None
    default_fired: bool
    predicates_checked: int

    @property
    def matched(self) -> bool:
        """True if a branch (not the default) fired."""
        return self.matched_index is not None

    @property
    def fired(self) -> bool:
        """True if any action ran, branch or default."""
        return self.matched or self.default_fired

"""caseswitch exception hierarchy.

All caseswitch-specific exceptions inherit from SwitchError.

Exceptions raised by user predicates and actions are never wrapped: they
propagate out of ``Switch.evaluate()`` unchanged.
"""

from __future__ import annotations


class SwitchError(Exception):
    """Base exception for all caseswitch errors."""


class InvalidBranchError(SwitchError):
    """Raised when a predicate or action cannot be used as part of a branch.

    Raised at the add site. The Switch is left exactly as it was.
    """

    def __init__(self, role: str, value: object, reason: str = "") -> None:
        self.role = role
        self.value = value
        msg = f"Invalid {role}: {value!r}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class AlreadyEvaluatedError(SwitchError):
    """Raised on a second evaluate() under the strict re-evaluation policy."""

    def __init__(self, switch_id: str) -> None:
        self.switch_id = switch_id
        super().__init__(
            f"Switch {switch_id} has already been evaluated. "
            f"Use ReevaluationPolicy.PERMISSIVE to allow re-evaluation."
        )


class EvaluationInProgressError(SwitchError):
    """Raised when evaluate() is re-entered from one of its own branches."""

    def __init__(self, switch_id: str) -> None:
        self.switch_id = switch_id
        super().__init__(f"Switch {switch_id} is already being evaluated")


class SwitchClosedError(SwitchError):
    """Raised when a closed Switch is used again."""

    def __init__(self, switch_id: str, operation: str) -> None:
        self.switch_id = switch_id
        self.operation = operation
        super().__init__(f"Cannot {operation}: switch {switch_id} is closed")


class SyntaxMismatchError(SwitchError):
    """Raised by the block adapter when case/default forms are malformed.

    Covers a case without its terminator, a terminator used twice, a second
    default in one block, and use of a block after it has closed. Never
    raised by the engine itself.
    """

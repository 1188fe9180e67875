"""Branch -- an immutable (predicate, action) pair.

A Branch tests the switched value with its predicate and, only when the
predicate is truthy, runs its action. Exceptions from either callable
propagate to the caller untouched.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from caseswitch.exceptions import InvalidBranchError

T = TypeVar("T")

Predicate = Callable[[Any], Any]
Action = Callable[[], Any]


def require_callable(role: str, fn: object) -> None:
    """Raise InvalidBranchError unless fn can be called."""
    if fn is None:
        raise InvalidBranchError(role, fn, "missing")
    if not callable(fn):
        raise InvalidBranchError(role, fn, f"{type(fn).__name__} is not callable")


def describe(fn: object) -> str:
    """Short display name for a predicate or action."""
    return getattr(fn, "__qualname__", None) or getattr(fn, "__name__", None) or repr(fn)


@dataclass(frozen=True)
class Branch(Generic[T]):
    """A single case of a Switch.

    Attributes:
        predicate: Test on the switched value. Its result is used for truth.
        action: Zero-argument callable run when the predicate matches.
    """

    predicate: Callable[[T], Any]
    action: Action

    @classmethod
    def make(cls, predicate: Callable[[T], Any], action: Action) -> Branch[T]:
        """Validate both callables and build a Branch.

        Raises:
            InvalidBranchError: If either argument is None or not callable.
        """
        require_callable("predicate", predicate)
        require_callable("action", action)
        return cls(predicate=predicate, action=action)

    def try_fire(self, value: T) -> bool:
        """Run the action if the predicate accepts value.

        Returns True when the predicate matched (even if the action then
        raises, in which case the exception propagates), False otherwise.
        """
        if not self.predicate(value):
            return False
        self.action()
        return True

    def __repr__(self) -> str:
        return f"Branch(predicate={describe(self.predicate)}, action={describe(self.action)})"

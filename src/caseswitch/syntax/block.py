"""Block adapter -- ``with switch(value) as sw:`` case/default syntax.

The block collects case and default forms onto a Switch and evaluates it
exactly once when the ``with`` statement exits normally::

    with switch(text) as sw:
        @sw.case("name in val")
        def _():
            print("hi")

        sw.case(lambda val: len(val) > 10).then(lambda: print("long"))

        @sw.default
        def _():
            print("other:", text)

A case form is opened by ``sw.case(condition)`` and terminated either by
``.then(action)`` or by decorating the action. Forms are checked as they
are written; malformed blocks raise SyntaxMismatchError.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from types import FrameType
from typing import Any, Generic, TypeVar

from caseswitch.engine.branch import Action
from caseswitch.engine.switch import Switch
from caseswitch.exceptions import SyntaxMismatchError
from caseswitch.models.config import SwitchConfig
from caseswitch.models.dispatch import DispatchOutcome
from caseswitch.syntax.expressions import as_predicate, caller_frame

logger = logging.getLogger(__name__)

T = TypeVar("T")


class OpenCase(Generic[T]):
    """A case form waiting for its action (the terminator)."""

    def __init__(self, block: SwitchBlock[T], predicate: Callable[[T], Any]) -> None:
        self._block = block
        self._predicate = predicate
        self._terminated = False

    @property
    def terminated(self) -> bool:
        return self._terminated

    def then(self, action: Action) -> Action:
        """Terminate the case with ``action`` and append the branch.

        Returns the action unchanged so the method also works as a decorator.
        """
        if self._terminated:
            raise SyntaxMismatchError(
                f"Case in switch {self._block.switch_id} already has an action"
            )
        self._block._close_case(self, self._predicate, action)
        self._terminated = True
        return action

    __call__ = then

    def __repr__(self) -> str:
        state = "terminated" if self._terminated else "open"
        return f"OpenCase({self._predicate!r}, {state})"


class SwitchBlock(Generic[T]):
    """Handle yielded by ``switch()``.

    Owns one Switch. Only one case may be open at a time and at most one
    default may be given.
    """

    def __init__(self, value: T, config: SwitchConfig | dict | None = None) -> None:
        self._switch: Switch[T] = Switch(value, config)
        self._open_case: OpenCase[T] | None = None
        self._default_given = False
        self._finished = False
        self.outcome: DispatchOutcome | None = None

    @property
    def switch(self) -> Switch[T]:
        return self._switch

    @property
    def switch_id(self) -> str:
        return self._switch.switch_id

    @property
    def value_type(self) -> type:
        return self._switch.value_type

    # ------------------------------------------------------------------
    # Forms
    # ------------------------------------------------------------------

    def case(self, condition: Callable[[T], Any] | str) -> OpenCase[T]:
        """Open a case form.

        ``condition`` is a one-argument callable or an expression string
        over ``val``, resolved in the calling frame.
        """
        return self._open(condition, caller_frame(1))

    def _open(self, condition: Callable[[T], Any] | str, frame: FrameType) -> OpenCase[T]:
        self._require_active("case")
        if self._open_case is not None:
            raise SyntaxMismatchError(
                f"Case opened in switch {self.switch_id} before the previous "
                f"case was given an action"
            )
        predicate = as_predicate(condition, frame)
        self._open_case = OpenCase(self, predicate)
        return self._open_case

    def _close_case(self, case: OpenCase[T], predicate: Callable[[T], Any], action: Action) -> None:
        self._require_active("case action")
        if case is not self._open_case:
            raise SyntaxMismatchError(
                f"Action given for a case that is not open in switch {self.switch_id}"
            )
        self._switch.add_case(predicate, action)
        self._open_case = None

    def default(self, action: Action) -> Action:
        """Set the default action. Usable as a decorator."""
        self._require_active("default")
        if self._open_case is not None:
            raise SyntaxMismatchError(
                f"Default given in switch {self.switch_id} while a case is open"
            )
        if self._default_given:
            raise SyntaxMismatchError(
                f"Switch {self.switch_id} already has a default"
            )
        self._switch.add_default(action)
        self._default_given = True
        return action

    # ------------------------------------------------------------------
    # Block close
    # ------------------------------------------------------------------

    def finish(self) -> DispatchOutcome:
        """Check the block is well formed, then evaluate once."""
        self._require_active("finish")
        self._finished = True
        if self._open_case is not None:
            raise SyntaxMismatchError(
                f"Switch {self.switch_id} closed with a case that has no action"
            )
        self.outcome = self._switch.evaluate()
        return self.outcome

    def abandon(self) -> None:
        self._finished = True

    def _require_active(self, form: str) -> None:
        if self._finished:
            raise SyntaxMismatchError(
                f"Cannot add {form}: switch {self.switch_id} block has closed"
            )


@contextmanager
def switch(value: T, config: SwitchConfig | dict | None = None) -> Iterator[SwitchBlock[T]]:
    """Open a switch block over ``value``; evaluates when the block exits.

    If the block body raises, nothing is evaluated and the exception
    propagates. The underlying Switch is closed on every exit path.
    """
    block = SwitchBlock(value, config)
    try:
        try:
            yield block
        except BaseException as exc:
            logger.debug(
                "Switch %s block raised %s; skipping evaluation",
                block.switch_id,
                type(exc).__name__,
            )
            block.abandon()
            raise
        block.finish()
    finally:
        block.switch.close()

"""Switch -- runtime predicate dispatch over a single value.

A Switch owns the value being dispatched on, an ordered list of Branches,
and at most one default action. ``evaluate()`` walks the branches in
insertion order and fires the first one whose predicate matches; if none
does, the default (when set) runs instead. At most one action runs per
evaluation and no predicate is consulted after the first match.

Typical use::

    sw = Switch(50)
    sw.add_case(lambda v: 0 <= v <= 100, lambda: print("in range"))
    sw.add_case(lambda v: v > 100, lambda: print("big"))
    sw.add_default(lambda: print("other"))
    sw.evaluate()

Re-evaluation is allowed by default and re-runs dispatch over the current
branch list. With ``SwitchConfig(reevaluation="strict")`` a second call
raises AlreadyEvaluatedError instead.
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from caseswitch.engine.branch import Action, Branch, require_callable
from caseswitch.exceptions import (
    AlreadyEvaluatedError,
    EvaluationInProgressError,
    SwitchClosedError,
)
from caseswitch.models.config import SwitchConfig
from caseswitch.models.dispatch import DispatchOutcome, SwitchState

logger = logging.getLogger(__name__)

T = TypeVar("T")

_ids = itertools.count(1)


def _next_switch_id() -> str:
    return f"sw-{next(_ids)}"


class Switch(Generic[T]):
    """Scoped dispatch object over one value.

    Not thread-safe: build and evaluate a Switch on the thread that created it.
    """

    def __init__(self, value: T, config: SwitchConfig | dict | None = None) -> None:
        self._config = SwitchConfig.coerce(config)
        self._switch_id = _next_switch_id()
        self._value: T | None = value
        self._value_type: type = type(value)
        self._branches: list[Branch[T]] = []
        self._default: Action | None = None
        self._state = SwitchState.BUILDING
        self._evaluations = 0
        logger.debug(
            "Switch %s created over %s value", self._label, self._value_type.__name__
        )

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def switch_id(self) -> str:
        """Process-unique id, e.g. ``"sw-12"``."""
        return self._switch_id

    @property
    def config(self) -> SwitchConfig:
        return self._config

    @property
    def value(self) -> T:
        """The switched value."""
        self._require_open("read value")
        return self._value  # type: ignore[return-value]

    @property
    def value_type(self) -> type:
        """Bare type of the switched value."""
        return self._value_type

    @property
    def state(self) -> SwitchState:
        return self._state

    @property
    def has_default(self) -> bool:
        return self._default is not None

    @property
    def evaluations(self) -> int:
        """Number of evaluate() calls that got past the state checks."""
        return self._evaluations

    @property
    def branches(self) -> tuple[Branch[T], ...]:
        """Snapshot of the branch list in insertion order."""
        return tuple(self._branches)

    def __len__(self) -> int:
        return len(self._branches)

    @property
    def _label(self) -> str:
        if self._config.name:
            return f"{self._switch_id}[{self._config.name}]"
        return self._switch_id

    def __repr__(self) -> str:
        return (
            f"Switch(id={self._label}, state={self._state}, "
            f"branches={len(self._branches)}, default={self.has_default})"
        )

    # ------------------------------------------------------------------
    # Building
    # ------------------------------------------------------------------

    def add_case(self, predicate: Callable[[T], Any], action: Action) -> Switch[T]:
        """Append a branch. Returns self for chaining.

        Raises:
            InvalidBranchError: If predicate or action is not callable.
            SwitchClosedError: If the switch has been closed.
        """
        self._require_open("add case")
        self._branches.append(Branch.make(predicate, action))
        return self

    def add_default(self, action: Action) -> Switch[T]:
        """Set the default action. Returns self for chaining.

        Calling this again replaces the previous default (last writer wins);
        there is no way to unset a default other than replacing it.

        Raises:
            InvalidBranchError: If action is not callable.
            SwitchClosedError: If the switch has been closed.
        """
        self._require_open("add default")
        require_callable("default", action)
        if self._default is not None:
            logger.debug("Switch %s: default action replaced", self._label)
        self._default = action
        return self

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def evaluate(self) -> DispatchOutcome:
        """Run first-match dispatch and return the outcome.

        Exceptions from predicates and actions propagate unchanged. After a
        predicate failure nothing else runs; after an action failure the
        branch is considered matched and the default does not run. Either
        way the switch ends up SETTLED.

        Raises:
            SwitchClosedError: If the switch has been closed, including by a
                predicate that did not match during this evaluation.
            EvaluationInProgressError: If called from inside its own dispatch.
            AlreadyEvaluatedError: On a second call under the strict policy.
        """
        self._require_open("evaluate")
        if self._state == SwitchState.EVALUATING:
            raise EvaluationInProgressError(self._switch_id)
        if self._state == SwitchState.SETTLED and self._config.strict:
            raise AlreadyEvaluatedError(self._switch_id)

        self._state = SwitchState.EVALUATING
        self._evaluations += 1
        try:
            return self._dispatch()
        finally:
            # close() from inside an action wins over SETTLED
            if self._state == SwitchState.EVALUATING:
                self._state = SwitchState.SETTLED

    def _dispatch(self) -> DispatchOutcome:
        value = self._value
        checked = 0
        for index, branch in enumerate(tuple(self._branches)):
            checked += 1
            try:
                fired = branch.try_fire(value)
            except Exception as exc:
                logger.debug(
                    "Switch %s: branch %d raised %s: %s",
                    self._label,
                    index,
                    type(exc).__name__,
                    exc,
                )
                raise
            if fired:
                logger.debug("Switch %s: branch %d matched", self._label, index)
                return DispatchOutcome(
                    switch_id=self._switch_id,
                    matched_index=index,
                    default_fired=False,
                    predicates_checked=checked,
                )
            # a predicate closed the switch: its branches and default are gone
            self._require_open("continue evaluation")

        default = self._default
        if default is None:
            logger.debug("Switch %s: no branch matched, no default", self._label)
            return DispatchOutcome(
                switch_id=self._switch_id,
                matched_index=None,
                default_fired=False,
                predicates_checked=checked,
            )

        logger.debug("Switch %s: no branch matched, running default", self._label)
        default()
        return DispatchOutcome(
            switch_id=self._switch_id,
            matched_index=None,
            default_fired=True,
            predicates_checked=checked,
        )

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        """Release the value, branches and default. Idempotent."""
        if self._state == SwitchState.CLOSED:
            return
        self._value = None
        self._branches.clear()
        self._default = None
        self._state = SwitchState.CLOSED
        logger.debug("Switch %s closed", self._label)

    @property
    def closed(self) -> bool:
        return self._state == SwitchState.CLOSED

    def __enter__(self) -> Switch[T]:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _require_open(self, operation: str) -> None:
        if self._state == SwitchState.CLOSED:
            raise SwitchClosedError(self._switch_id, operation)

"""Combinator form of the switch syntax.

An expression-style alternative to the block adapter::

    select(
        value,
        when(between(0, 100)).run(lambda: print("in range")),
        when("val > 100").run(lambda: print("big")),
        otherwise(lambda: print("other")),
    )
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from caseswitch.engine.branch import Action, require_callable
from caseswitch.engine.switch import Switch
from caseswitch.exceptions import SyntaxMismatchError
from caseswitch.models.config import SwitchConfig
from caseswitch.models.dispatch import DispatchOutcome
from caseswitch.syntax.expressions import as_predicate, caller_frame

T = TypeVar("T")


@dataclass(frozen=True)
class Clause:
    """A predicate paired with its action, ready to be added to a Switch."""

    predicate: Callable[[Any], Any]
    action: Action


@dataclass(frozen=True)
class DefaultClause:
    """The action to run when no clause matches."""

    action: Action


@dataclass(frozen=True)
class When:
    """Half-built clause returned by ``when()``; finish it with ``run()``."""

    predicate: Callable[[Any], Any]

    def run(self, action: Action) -> Clause:
        require_callable("action", action)
        return Clause(self.predicate, action)


def when(condition: Callable[[Any], Any] | str) -> When:
    """Start a clause. String conditions are resolved in the caller's frame."""
    return When(as_predicate(condition, caller_frame(1)))


def otherwise(action: Action) -> DefaultClause:
    require_callable("default", action)
    return DefaultClause(action)


def select(
    value: T,
    *clauses: Clause | DefaultClause,
    config: SwitchConfig | dict | None = None,
) -> DispatchOutcome:
    """Build a Switch from clauses, evaluate it once, and close it.

    Clauses keep their argument order; a DefaultClause may appear anywhere
    but at most once.

    Raises:
        SyntaxMismatchError: On a second default or a stray When.
    """
    with Switch(value, config) as sw:
        default_seen = False
        for clause in clauses:
            if isinstance(clause, Clause):
                sw.add_case(clause.predicate, clause.action)
            elif isinstance(clause, DefaultClause):
                if default_seen:
                    raise SyntaxMismatchError("select() given more than one default")
                sw.add_default(clause.action)
                default_seen = True
            elif isinstance(clause, When):
                raise SyntaxMismatchError(
                    "when() clause passed to select() without .run(action)"
                )
            else:
                raise SyntaxMismatchError(
                    f"Unexpected select() argument: {type(clause).__name__}"
                )
        return sw.evaluate()

"""Shared test fixtures for caseswitch.

Provides a Recorder that builds predicates and actions which log every
invocation, so tests can assert exactly what ran and in which order.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest


class Recorder:
    """Builds logging predicates/actions and keeps one shared call log."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, Any]] = []

    def predicate(self, name: Any, result: Any) -> Callable[[Any], Any]:
        def pred(val: Any) -> Any:
            self.calls.append(("pred", name))
            return result

        return pred

    def test(self, name: Any, fn: Callable[[Any], Any]) -> Callable[[Any], Any]:
        """Wrap a real predicate so its invocations are logged."""

        def pred(val: Any) -> Any:
            self.calls.append(("pred", name))
            return fn(val)

        return pred

    def action(self, name: Any) -> Callable[[], None]:
        def act() -> None:
            self.calls.append(("action", name))

        return act

    def raising(self, name: Any, exc: Exception) -> Callable[..., Any]:
        """Callable (predicate or action) that logs, then raises exc."""

        def boom(*args: Any) -> Any:
            self.calls.append(("raise", name))
            raise exc

        return boom

    @property
    def predicates(self) -> list[Any]:
        return [name for kind, name in self.calls if kind == "pred"]

    @property
    def actions(self) -> list[Any]:
        return [name for kind, name in self.calls if kind == "action"]


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()

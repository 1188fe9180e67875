"""String case conditions.

A case condition may be written as a Python expression over the bound name
``val``::

    sw.case("0 <= val <= 100")
    sw.case("name in val")

The expression is compiled once, at the case site, and evaluated against the
current globals and locals of the defining frame with ``val`` bound to
the switched value.
"""

from __future__ import annotations

import sys
from types import CodeType, FrameType
from typing import Any

from caseswitch.engine.branch import require_callable
from caseswitch.exceptions import InvalidBranchError

BOUND_NAME = "val"


class ExpressionPredicate:
    """Predicate compiled from a string expression over ``val``.

    Names are looked up in the defining frame each time the predicate runs,
    so rebinding a variable after the case is written is seen at dispatch.
    """

    __slots__ = ("source", "_code", "_frame")

    def __init__(self, source: str, frame: FrameType) -> None:
        self.source = source
        try:
            self._code: CodeType = compile(source.strip(), f"<case {source!r}>", "eval")
        except SyntaxError as exc:
            raise InvalidBranchError("predicate", source, f"syntax error: {exc.msg}") from None
        self._frame = frame

    def __call__(self, value: Any) -> Any:
        namespace = frame_namespace(self._frame)
        namespace[BOUND_NAME] = value
        return eval(self._code, namespace)

    def __repr__(self) -> str:
        return f"ExpressionPredicate({self.source!r})"


def frame_namespace(frame: FrameType) -> dict[str, Any]:
    """Current globals and locals of a frame merged into one new dict.

    ``val`` is bound as a global of this dict so generator expressions in
    the condition can see it.
    """
    namespace = dict(frame.f_globals)
    namespace.update(frame.f_locals)
    return namespace


def caller_frame(depth: int) -> FrameType:
    """Return the frame ``depth`` levels above the caller of this function."""
    return sys._getframe(depth + 1)


def as_predicate(condition: object, frame: FrameType | None = None) -> Any:
    """Turn a case condition into a predicate callable.

    Callables are returned as-is. Strings are compiled into an
    ExpressionPredicate resolved against ``frame`` (required for strings).

    Raises:
        InvalidBranchError: If the condition is neither callable nor a valid
            expression string.
    """
    if isinstance(condition, str):
        if frame is None:
            raise InvalidBranchError("predicate", condition, "no frame to resolve names in")
        return ExpressionPredicate(condition, frame)
    require_callable("predicate", condition)
    return condition

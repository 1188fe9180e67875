"""Reusable predicate factories for case conditions.

Each factory returns a plain one-argument callable suitable for
``Switch.add_case``, ``SwitchBlock.case`` or ``when``::

    sw.case(between(0, 100)).then(report_in_range)
    sw.case(any_of(equals(0), contains("x"))).then(...)
"""

from __future__ import annotations

import operator
from collections.abc import Callable, Container, Iterable
from typing import Any

from caseswitch.engine.branch import require_callable

Predicate = Callable[[Any], Any]


def _named(fn: Predicate, name: str) -> Predicate:
    fn.__name__ = name
    fn.__qualname__ = name
    return fn


def _compare(op: Callable[[Any, Any], Any], symbol: str, other: Any) -> Predicate:
    def predicate(val: Any) -> bool:
        return op(val, other)

    return _named(predicate, f"val {symbol} {other!r}")


def equals(other: Any) -> Predicate:
    """``val == other``"""
    return _compare(operator.eq, "==", other)


def greater_than(other: Any) -> Predicate:
    """``val > other``"""
    return _compare(operator.gt, ">", other)


def less_than(other: Any) -> Predicate:
    """``val < other``"""
    return _compare(operator.lt, "<", other)


def one_of(*options: Any) -> Predicate:
    """``val in options``. Options are kept in the order given."""
    choices = tuple(options)

    def predicate(val: Any) -> bool:
        return val in choices

    return _named(predicate, f"val in {choices!r}")


def between(low: Any, high: Any, inclusive: bool = True) -> Predicate:
    """Range test. Inclusive on both ends unless ``inclusive=False``."""
    op, symbol = (operator.le, "<=") if inclusive else (operator.lt, "<")

    def predicate(val: Any) -> bool:
        return op(low, val) and op(val, high)

    return _named(predicate, f"{low!r} {symbol} val {symbol} {high!r}")


def contains(item: Any) -> Predicate:
    """``item in val`` -- substring, element or key containment."""

    def predicate(val: Container[Any]) -> bool:
        return item in val

    return _named(predicate, f"{item!r} in val")


def longer_than(length: int) -> Predicate:
    """``len(val) > length``"""

    def predicate(val: Any) -> bool:
        return len(val) > length

    return _named(predicate, f"len(val) > {length}")


def instance_of(*types: type | tuple) -> Predicate:
    """``isinstance(val, types)``. Nested tuples of types are accepted."""

    def predicate(val: Any) -> bool:
        return isinstance(val, types)

    names = ", ".join(_type_name(t) for t in types)
    return _named(predicate, f"isinstance(val, ({names}))")


def all_of(*predicates: Predicate) -> Predicate:
    """True if every predicate is truthy. Stops at the first falsy one."""
    preds = _collect(predicates)

    def predicate(val: Any) -> bool:
        return all(p(val) for p in preds)

    return _named(predicate, " and ".join(f"({_name(p)})" for p in preds) or "True")


def any_of(*predicates: Predicate) -> Predicate:
    """True if any predicate is truthy. Stops at the first truthy one."""
    preds = _collect(predicates)

    def predicate(val: Any) -> bool:
        return any(p(val) for p in preds)

    return _named(predicate, " or ".join(f"({_name(p)})" for p in preds) or "False")


def negate(inner: Predicate) -> Predicate:
    """Logical not of another predicate."""
    _collect((inner,))

    def predicate(val: Any) -> bool:
        return not inner(val)

    return _named(predicate, f"not ({_name(inner)})")


def _collect(predicates: Iterable[Any]) -> tuple[Predicate, ...]:
    preds = tuple(predicates)
    for p in preds:
        require_callable("predicate", p)
    return preds


def _name(fn: Predicate) -> str:
    return getattr(fn, "__name__", None) or repr(fn)


def _type_name(t: type | tuple) -> str:
    if isinstance(t, tuple):
        return "(" + ", ".join(_type_name(item) for item in t) + ")"
    return getattr(t, "__name__", None) or repr(t)

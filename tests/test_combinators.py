"""Tests for when()/otherwise()/select().

Covers:
- Clause order is dispatch order; first match wins
- otherwise() anywhere in the argument list, at most once
- String conditions resolved in the caller's frame
- Validation of actions and stray arguments
"""

from __future__ import annotations

import pytest

from caseswitch import (
    Clause,
    DefaultClause,
    InvalidBranchError,
    SyntaxMismatchError,
    otherwise,
    select,
    when,
)
from caseswitch.syntax.predicates import between, greater_than, less_than


class TestSelect:
    def test_first_match_wins(self, recorder):
        outcome = select(
            50,
            when(between(0, 100)).run(recorder.action("in range")),
            when(greater_than(10)).run(recorder.action("big")),
            otherwise(recorder.action("other")),
        )
        assert recorder.actions == ["in range"]
        assert outcome.matched_index == 0

    def test_default_position_irrelevant(self, recorder):
        outcome = select(
            -5,
            otherwise(recorder.action("other")),
            when(greater_than(100)).run(recorder.action("big")),
        )
        assert recorder.actions == ["other"]
        assert outcome.default_fired
        assert outcome.predicates_checked == 1

    def test_no_clauses(self):
        outcome = select("anything")
        assert not outcome.fired

    def test_string_condition_uses_caller_scope(self, recorder):
        threshold = 3
        select(
            4,
            when("val > threshold").run(recorder.action("over")),
            otherwise(recorder.action("under")),
        )
        assert recorder.actions == ["over"]

    def test_string_condition_sees_rebinding_before_select(self, recorder):
        threshold = 3
        over = when("val > threshold").run(recorder.action("over"))
        threshold = 10  # noqa: F841
        select(4, over, otherwise(recorder.action("under")))
        assert recorder.actions == ["under"]

    def test_config_accepted(self, recorder):
        outcome = select(1, when(less_than(2)).run(recorder.action("a")), config={"name": "sel"})
        assert outcome.matched

    def test_two_defaults_rejected(self, recorder):
        with pytest.raises(SyntaxMismatchError, match="more than one default"):
            select(1, otherwise(recorder.action("a")), otherwise(recorder.action("b")))
        assert recorder.actions == []

    def test_unfinished_when_rejected(self, recorder):
        with pytest.raises(SyntaxMismatchError, match="without .run"):
            select(1, when(less_than(2)))

    def test_unexpected_argument_rejected(self):
        with pytest.raises(SyntaxMismatchError, match="Unexpected"):
            select(1, lambda: None)


class TestClauses:
    def test_run_builds_clause(self, recorder):
        pred = less_than(3)
        act = recorder.action("a")
        clause = when(pred).run(act)
        assert clause == Clause(pred, act)

    def test_run_rejects_uncallable(self):
        with pytest.raises(InvalidBranchError):
            when(less_than(3)).run("print")

    def test_when_rejects_uncallable(self):
        with pytest.raises(InvalidBranchError):
            when(12)

    def test_otherwise_builds_default(self, recorder):
        act = recorder.action("d")
        assert otherwise(act) == DefaultClause(act)

    def test_otherwise_rejects_none(self):
        with pytest.raises(InvalidBranchError):
            otherwise(None)

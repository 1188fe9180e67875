"""caseswitch: runtime predicate dispatch for Python.

Each case carries an arbitrary predicate over the switched value, so range
tests, membership tests and structural queries read like ordinary switch
cases. The first matching case wins; an optional default runs otherwise.
"""

from caseswitch._version import __version__

# Engine
from caseswitch.engine import Branch, Switch

# Configuration and dispatch records
from caseswitch.models import DispatchOutcome, ReevaluationPolicy, SwitchConfig, SwitchState

# Surface syntax
from caseswitch.syntax import (
    Clause,
    DefaultClause,
    OpenCase,
    SwitchBlock,
    When,
    otherwise,
    select,
    switch,
    when,
)
from caseswitch.syntax import predicates

# Exceptions
from caseswitch.exceptions import (
    AlreadyEvaluatedError,
    EvaluationInProgressError,
    InvalidBranchError,
    SwitchClosedError,
    SwitchError,
    SyntaxMismatchError,
)

__all__ = [
    "__version__",
    "Branch",
    "Switch",
    "DispatchOutcome",
    "ReevaluationPolicy",
    "SwitchConfig",
    "SwitchState",
    "switch",
    "SwitchBlock",
    "OpenCase",
    "when",
    "otherwise",
    "select",
    "When",
    "Clause",
    "DefaultClause",
    "predicates",
    "SwitchError",
    "InvalidBranchError",
    "AlreadyEvaluatedError",
    "EvaluationInProgressError",
    "SwitchClosedError",
    "SyntaxMismatchError",
]

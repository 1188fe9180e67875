"""Surface syntax over the dispatch engine.

Two forms are provided:

- the block adapter, ``with switch(value) as sw:`` with ``sw.case(...)`` and
  ``sw.default(...)`` forms, evaluated when the block exits;
- combinators, ``select(value, when(pred).run(action), otherwise(action))``.

Case conditions are callables taking the switched value, or expression
strings over the name ``val``. Ready-made predicates live in
``caseswitch.syntax.predicates``.
"""

from caseswitch.syntax.block import OpenCase, SwitchBlock, switch
from caseswitch.syntax.combinators import (
    Clause,
    DefaultClause,
    When,
    otherwise,
    select,
    when,
)
from caseswitch.syntax.expressions import BOUND_NAME, ExpressionPredicate

__all__ = [
    "switch",
    "SwitchBlock",
    "OpenCase",
    "when",
    "otherwise",
    "select",
    "When",
    "Clause",
    "DefaultClause",
    "ExpressionPredicate",
    "BOUND_NAME",
]

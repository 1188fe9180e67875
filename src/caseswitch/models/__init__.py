"""Domain models for caseswitch."""

from caseswitch.models.config import ReevaluationPolicy, SwitchConfig
from caseswitch.models.dispatch import DispatchOutcome, SwitchState

__all__ = [
    "ReevaluationPolicy",
    "SwitchConfig",
    "DispatchOutcome",
    "SwitchState",
]

"""Dispatch engine: Branch and Switch."""

from caseswitch.engine.branch import Branch
from caseswitch.engine.switch import Switch

__all__ = ["Branch", "Switch"]

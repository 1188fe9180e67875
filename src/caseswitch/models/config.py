"""Configuration models for caseswitch.

SwitchConfig holds per-switch settings.
ReevaluationPolicy controls what a second evaluate() call does.
"""

from __future__ import annotations

import enum
from typing import Optional

from pydantic import BaseModel


class ReevaluationPolicy(str, enum.Enum):
    """What to do when evaluate() is called on an already-settled switch."""

    PERMISSIVE = "permissive"
    STRICT = "strict"

    def __str__(self) -> str:
        return self.value


class SwitchConfig(BaseModel):
    """Per-switch configuration."""

    model_config = {"frozen": True}

    reevaluation: ReevaluationPolicy = ReevaluationPolicy.PERMISSIVE
    name: Optional[str] = None  # label shown in logs and repr

    @classmethod
    def coerce(cls, config: SwitchConfig | dict | None) -> SwitchConfig:
        """Accept a SwitchConfig, a plain dict, or None (defaults)."""
        if config is None:
            return cls()
        if isinstance(config, cls):
            return config
        return cls.model_validate(config)

    @property
    def strict(self) -> bool:
        return self.reevaluation == ReevaluationPolicy.STRICT

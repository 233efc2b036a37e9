"""
Core type definitions for the easing visualizer.

This module defines the descriptor that every registered function carries,
the two-value parameter set used by parametric functions, and the enums
shared across the package.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional, Set

from .logging_config import get_logger

logger = get_logger(__name__)


# Parametric functions take integer parameters on a 0-10 slider
PARAM_MIN = 0
PARAM_MAX = 10

# Drift defaults (matches the ScriptMapper "ease_6_6" preset)
DEFAULT_X = 6
DEFAULT_Y = 6


class EaseType(Enum):
    """
    How a base easing curve is applied.

        IN: f(t), slow at the start
        OUT: 1 - f(1 - t), slow at the end
        BOTH: f(2t)/2 mirrored around t = 0.5
    """

    IN = "easein"
    OUT = "easeout"
    BOTH = "easeboth"

    @classmethod
    def coerce(cls, value) -> "EaseType":
        """Accept an EaseType or its string value. Unknown values fall back to IN."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            logger.debug(f"Unknown ease type {value!r}, using {cls.IN.value}")
            return cls.IN


class FunctionFamily(Enum):
    """Which evaluation rules a function follows."""

    EASING = "easing"
    LED = "led"


EASE_NAMES: Set[str] = {e.value for e in EaseType}
FAMILY_NAMES: Set[str] = {f.value for f in FunctionFamily}


def _clamp_param(name: str, value: Any) -> int:
    try:
        number = float(value)
    except (TypeError, ValueError):
        logger.debug(f"Non-numeric {name}={value!r}, using minimum")
        return PARAM_MIN
    if math.isnan(number):
        return PARAM_MIN
    clamped = min(max(number, PARAM_MIN), PARAM_MAX)
    if clamped != number:
        logger.debug(f"Clamped {name} {number} -> {clamped}")
    return int(round(clamped))


@dataclass(frozen=True)
class ParameterSet:
    """
    Two integer parameters in [0, 10], owned by the caller.

    Out-of-range and non-integer values are clamped and rounded on
    construction, so a ParameterSet is always valid.
    """

    x: int = DEFAULT_X
    y: int = DEFAULT_Y

    def __post_init__(self):
        object.__setattr__(self, "x", _clamp_param("x", self.x))
        object.__setattr__(self, "y", _clamp_param("y", self.y))

    @classmethod
    def coerce(cls, value: Any = None) -> "ParameterSet":
        """
        Build a ParameterSet from a ParameterSet, a mapping or None.

        Missing keys fall back to the drift defaults.
        """
        if isinstance(value, cls):
            return value
        if value is None:
            return cls()
        if isinstance(value, Mapping):
            return cls(x=value.get("x", DEFAULT_X), y=value.get("y", DEFAULT_Y))
        x = getattr(value, "x", DEFAULT_X)
        y = getattr(value, "y", DEFAULT_Y)
        return cls(x=x, y=y)

    @property
    def normalized(self):
        """Parameters scaled to 0-1."""
        return self.x / PARAM_MAX, self.y / PARAM_MAX

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True)
class FunctionDescriptor:
    """
    Immutable description of one registered function.

    ``color`` and ``formula`` are display-only and passed through untouched.
    ``external_name`` is only meaningful when ``externally_compatible`` is set.
    """

    id: str
    name: str
    formula: str
    color: str
    family: FunctionFamily = FunctionFamily.EASING
    is_parametric: bool = False
    externally_compatible: bool = False
    external_name: Optional[str] = None
    default_params: Optional[ParameterSet] = None

    @property
    def export_name(self) -> Optional[str]:
        """Identifier used in external command syntax, or None."""
        if not self.externally_compatible:
            return None
        return self.external_name or self.id

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "formula": self.formula,
            "color": self.color,
            "family": self.family.value,
            "is_parametric": self.is_parametric,
            "externally_compatible": self.externally_compatible,
            "external_name": self.export_name,
            "default_params": self.default_params.to_dict() if self.default_params else None,
        }


__all__ = [
    "PARAM_MIN",
    "PARAM_MAX",
    "DEFAULT_X",
    "DEFAULT_Y",
    "EaseType",
    "FunctionFamily",
    "EASE_NAMES",
    "FAMILY_NAMES",
    "ParameterSet",
    "FunctionDescriptor",
]

"""
config.py - Immutable configuration dataclasses for spawn shapes.

Each shape resolves its parameters once, from one of these, at construction.
Values are normalized rather than validated: missing, None or non-finite
numbers collapse to 0.0 so a malformed config degrades to a degenerate shape
instead of an exception.
"""

from __future__ import annotations

__all__ = ["ShapeConfig", "OvalConfig", "TorusConfig", "RectConfig", "finite_or_zero"]

import math
import logging
from dataclasses import dataclass, fields, asdict
from typing import Any, ClassVar, Dict, Mapping

logger = logging.getLogger(__name__)


def finite_or_zero(value: Any) -> float:
    """Return `value` as a float, or 0.0 when it is None, NaN or infinite."""
    if value is None:
        return 0.0
    value = float(value)
    if not math.isfinite(value):
        logger.debug(f"Non-finite shape parameter {value!r} collapsed to 0.0")
        return 0.0
    return value


@dataclass(frozen=True)
class ShapeConfig:
    """Fields shared by every spawn shape."""
    x: float = 0.0
    y: float = 0.0
    affect_rotation: bool = False

    # camelCase keys found in emitter data files
    ALIASES: ClassVar[Dict[str, str]] = {"affectRotation": "affect_rotation"}

    def __post_init__(self):
        # Frozen: normalize through object.__setattr__
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name == "affect_rotation":
                object.__setattr__(self, f.name, bool(value))
            else:
                object.__setattr__(self, f.name, finite_or_zero(value))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "ShapeConfig":
        """Build from a plain mapping; camelCase or snake_case keys, unknown keys ignored."""
        aliases = {}
        for klass in reversed(cls.__mro__):
            aliases.update(getattr(klass, "ALIASES", {}) or {})
        names = {f.name for f in fields(cls)}

        kwargs: Dict[str, Any] = {}
        for key, value in (data or {}).items():
            name = aliases.get(key, key)
            if name in names:
                kwargs[name] = value
            else:
                logger.debug(f"{cls.__name__}: ignoring unknown key {key!r}")
        return cls(**kwargs)

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class OvalConfig(ShapeConfig):
    """Ellipse boundary; `radius`/`inner_radius` are carried but unused."""
    radius: float = 0.0
    inner_radius: float = 0.0
    semi_major_axis: float = 0.0
    semi_minor_axis: float = 0.0

    ALIASES: ClassVar[Dict[str, str]] = {
        "innerRadius": "inner_radius",
        "semiMajorAxis": "semi_major_axis",
        "semiMinorAxis": "semi_minor_axis",
    }


@dataclass(frozen=True)
class TorusConfig(ShapeConfig):
    """Disc (inner_radius == 0), annulus, or circle (inner_radius == radius)."""
    radius: float = 0.0
    inner_radius: float = 0.0

    ALIASES: ClassVar[Dict[str, str]] = {"innerRadius": "inner_radius", "r": "radius"}


@dataclass(frozen=True)
class RectConfig(ShapeConfig):
    """Axis-aligned rectangle; `x`, `y` is the top-left corner."""
    w: float = 0.0
    h: float = 0.0

"""
registry.py
-----------

Tag -> shape class lookup, used to turn emitter data records such as
`{"type": "oval", "data": {...}}` into spawn shapes.
"""

from __future__ import annotations

__all__ = ["SHAPES", "register_shape", "get_shape_class", "create_shape", "shape_from_record"]

import logging
from typing import Any, Dict, Mapping, Optional, Type

from .base import SpawnShape
from .oval import Oval
from .rect import Rect
from .rng import RandomSource
from .torus import Torus

logger = logging.getLogger(__name__)

SHAPES: Dict[str, Type[SpawnShape]] = {}


def register_shape(cls: Type[SpawnShape]) -> Type[SpawnShape]:
    """Register `cls` under its `TYPE` tag; usable as a class decorator."""
    tag = getattr(cls, "TYPE", "")
    if not isinstance(tag, str) or not tag:
        raise TypeError(f"{cls.__name__} has no TYPE tag")
    if tag in SHAPES and SHAPES[tag] is not cls:
        logger.warning(f"Shape tag {tag!r} re-registered: {SHAPES[tag].__name__} -> {cls.__name__}")
    SHAPES[tag] = cls
    return cls


def get_shape_class(tag: str) -> Type[SpawnShape]:
    try:
        return SHAPES[tag]
    except KeyError:
        raise ValueError(f"Unknown spawn shape type: {tag!r} (known: {sorted(SHAPES)})") from None


def create_shape(tag: str,
                 data: Optional[Mapping[str, Any]] = None,
                 rng: Optional[RandomSource] = None) -> SpawnShape:
    """Build the shape registered under `tag` from a plain data mapping."""
    return get_shape_class(tag)(data or {}, rng=rng)


def shape_from_record(record: Mapping[str, Any], rng: Optional[RandomSource] = None) -> SpawnShape:
    """Build a shape from a `{"type": ..., "data": {...}}` record."""
    return create_shape(record["type"], record.get("data"), rng=rng)


for _cls in (Oval, Torus, Rect):
    register_shape(_cls)

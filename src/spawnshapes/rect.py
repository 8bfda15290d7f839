"""
rect.py
-------

Rect spawn shape: area-uniform points inside an axis-aligned rectangle whose
top-left corner is (`x`, `y`).
"""

from __future__ import annotations

__all__ = ["Rect"]

from typing import Tuple

from .base import SpawnShape
from .config import RectConfig


class Rect(SpawnShape):
    """Uniform rectangle; has no notion of an outward direction."""

    __slots__ = ()

    TYPE = "rect"
    SUPPORTS_ROTATION = False
    CONFIG = RectConfig

    def _draw(self) -> Tuple[float, float, float]:
        cfg = self._config
        x = cfg.x + self._rng.random() * cfg.w
        y = cfg.y + self._rng.random() * cfg.h
        return x, y, 0.0

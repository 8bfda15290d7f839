"""
torus.py
--------

Torus spawn shape: a disc, a ring (annulus), or a bare circle.

- inner_radius == 0        -> filled disc
- 0 < inner_radius < radius -> annulus
- inner_radius == radius    -> circle outline

Interior samples are area-uniform: the radius is drawn as
`sqrt(inner^2 + u * (outer^2 - inner^2))`.
"""

from __future__ import annotations

__all__ = ["Torus"]

import math
import logging
from typing import Tuple

from .base import SpawnShape
from .config import TorusConfig

logger = logging.getLogger(__name__)


class Torus(SpawnShape):
    """Circle/ring shape; rotation, when enabled, points away from the center."""

    __slots__ = ("_radius", "_inner_radius",)

    TYPE = "torus"
    CONFIG = TorusConfig

    def _setup(self, config: TorusConfig) -> None:
        outer, inner = abs(config.radius), abs(config.inner_radius)
        if inner > outer:
            logger.debug(f"Torus inner_radius {inner} > radius {outer}; swapping")
            outer, inner = inner, outer
        self._radius = outer
        self._inner_radius = inner

    @property
    def radius(self) -> float:
        return self._radius

    @property
    def inner_radius(self) -> float:
        return self._inner_radius

    @property
    def is_outline(self) -> bool:
        return self._inner_radius == self._radius

    def _draw(self) -> Tuple[float, float, float]:
        angle = self._rng.random() * 2.0 * math.pi
        if self.is_outline:
            r = self._radius
        else:
            # Scaled by the outer radius so squaring cannot overflow
            k = self._inner_radius / self._radius
            r = self._radius * math.sqrt(k * k + self._rng.random() * (1.0 - k * k))
        x = self._config.x + r * math.cos(angle)
        y = self._config.y + r * math.sin(angle)
        return x, y, angle

"""
oval.py
-------

Oval spawn shape: points on the boundary of an axis-aligned ellipse.

The angle parameter `t` is drawn uniformly from [0, 2*pi) and evaluated on
the parametric ellipse `(a cos t, b sin t)`. Density along the boundary is
therefore uniform in `t`, not in arc length: for an eccentric ellipse points
bunch up near the ends of the major axis.

Example data record::

    {
        "type": "oval",
        "data": {
            "x": 0, "y": 0,
            "semiMajorAxis": 30, "semiMinorAxis": 10,
            "affectRotation": true
        }
    }
"""

from __future__ import annotations

__all__ = ["Oval"]

import math
from typing import Tuple

from .base import SpawnShape
from .config import OvalConfig


class Oval(SpawnShape):
    """
    Samples the ellipse boundary, relative to the oval's own center.

    `x`/`y` of the config are exposed through `center` but are not added to
    the sample; `radius`/`inner_radius` are accepted and ignored.
    """

    __slots__ = ("_semi_major_axis", "_semi_minor_axis",)

    TYPE = "oval"
    CONFIG = OvalConfig

    def _setup(self, config: OvalConfig) -> None:
        self._semi_major_axis = config.semi_major_axis
        self._semi_minor_axis = config.semi_minor_axis

    @property
    def semi_major_axis(self) -> float:
        return self._semi_major_axis

    @property
    def semi_minor_axis(self) -> float:
        return self._semi_minor_axis

    def _draw(self) -> Tuple[float, float, float]:
        t = self._rng.random() * 2.0 * math.pi
        x = self._semi_major_axis * math.cos(t)
        y = self._semi_minor_axis * math.sin(t)
        if x == 0.0 and y == 0.0:
            # Collapsed oval; signed zeros would make atan2 return +/-pi
            return x, y, 0.0
        return x, y, math.atan2(y, x)

"""
preview.py
----------
Scatter a batch of spawn samples over the shape's nominal outline, for a
visual check of the distribution.
"""

from __future__ import annotations

__all__ = ["plot_spawn_points", "preview_shape",]

import os
import logging
from pathlib import Path
from typing import Optional, Union

import matplotlib as mpl

# Use a non-interactive backend (safe for headless runs)
mpl.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.patches import Circle, Ellipse, Patch, Rectangle

from .base import SpawnShape
from .oval import Oval
from .rect import Rect
from .torus import Torus

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


def _outline_patches(shape: SpawnShape) -> list[Patch]:
    style = dict(fill=False, edgecolor="black", linewidth=1.0, linestyle="--")
    if isinstance(shape, Oval):
        return [Ellipse((0.0, 0.0), 2 * shape.semi_major_axis, 2 * shape.semi_minor_axis, **style)]
    if isinstance(shape, Torus):
        patches = [Circle(shape.center, shape.radius, **style)]
        if 0 < shape.inner_radius < shape.radius:
            patches.append(Circle(shape.center, shape.inner_radius, **style))
        return patches
    if isinstance(shape, Rect):
        cfg = shape.config
        return [Rectangle((cfg.x, cfg.y), cfg.w, cfg.h, **style)]
    return []


def plot_spawn_points(shape: SpawnShape, ax: Axes, count: int = 2000,
                      size: float = 2.0, color: str = "tab:blue") -> Axes:
    """
    Draw `count` samples of `shape` onto `ax`, plus the shape outline.

    Args:
        shape: Any spawn shape.
        ax: Target Matplotlib Axes.
        count: Number of samples to scatter.
        size: Marker size in points^2.
        color: Marker color.

    Returns:
        The same Axes, for chaining.
    """
    if not isinstance(ax, Axes):
        raise TypeError(f"ax must be a Matplotlib Axes, not {type(ax).__name__}")

    pts = shape.sample_batch(count)
    ax.scatter(pts[:, 0], pts[:, 1], s=size, c=color, linewidths=0)
    for patch in _outline_patches(shape):
        ax.add_patch(patch)

    ax.set_aspect("equal")
    ax.autoscale_view()
    ax.set_title(f"{shape.TYPE} ({count} samples)")
    logger.debug(f"Plotted {count} samples of {shape!r}")
    return ax


def preview_shape(shape: SpawnShape, count: int = 2000,
                  path: Optional[PathLike] = None) -> Figure:
    """Render a preview figure; save it to `path` when given."""
    fig, ax = plt.subplots(figsize=(5, 5))
    plot_spawn_points(shape, ax, count=count)
    fig.tight_layout()
    if path is not None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(path, dpi=100)
        logger.info(f"Preview written: {path}")
    return fig

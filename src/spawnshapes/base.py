"""
base.py
-------

Defines the abstract base class for spawn shapes.

A spawn shape owns a fixed set of geometric parameters (resolved once from a
`ShapeConfig`) and an injected random source. Each call to `sample()` draws
one i.i.d. point and writes it into a caller-owned particle; nothing about
the previous call is kept.
"""

from __future__ import annotations

__all__ = ["SpawnShape", "SpawnTarget", "PositionLike"]

import copy
import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, Mapping, Optional, Protocol, Tuple, Type, Union

import numpy as np
from numpy.typing import NDArray

from .config import ShapeConfig
from .rng import RandomSource, get_rng

logger = logging.getLogger(__name__)


class PositionLike(Protocol):
    x: float
    y: float


class SpawnTarget(Protocol):
    """The particle fields a shape writes; `rotation` only when enabled."""
    position: PositionLike
    rotation: float


class SpawnShape(ABC):
    """
    Abstract base class for all spawn shapes (oval, torus, rect, ...).

    Subclasses set `TYPE` (the registry tag), `CONFIG` (their config
    dataclass) and implement `_draw()`, which returns one `(x, y, rotation)`
    triple in emitter-local space.

    Attributes:
        config (ShapeConfig): Resolved, immutable parameters.
        rng (RandomSource): Source of uniform floats in [0, 1).

    Example:
        >>> oval = Oval(semi_major_axis=10, semi_minor_axis=4)
        >>> oval.sample(particle)
    """

    __slots__ = ("_config", "_rng",)

    TYPE: ClassVar[str] = ""
    CONFIG: ClassVar[Type[ShapeConfig]] = ShapeConfig
    SUPPORTS_ROTATION: ClassVar[bool] = True

    def __init__(self,
                 config: Union[ShapeConfig, Mapping[str, Any], None] = None,
                 rng: Optional[RandomSource] = None,
                 **kwargs: Any) -> None:
        """
        Args:
            config: A `CONFIG` instance, another `ShapeConfig` (its shared
                fields are carried over), a mapping of (camelCase or snake_case)
                fields, or None to build the config from `kwargs`.
            rng: Random source; defaults to the calling thread's shared RNG.
            **kwargs: Config fields, used only when `config` is None.
        """
        if config is None:
            config = self.CONFIG(**kwargs)
        elif isinstance(config, ShapeConfig) and not isinstance(config, self.CONFIG):
            config = self.CONFIG.from_mapping(config.as_dict())
        elif not isinstance(config, self.CONFIG):
            config = self.CONFIG.from_mapping(config)
        self._config = config
        self._rng = rng if rng is not None else get_rng(thread_safe=True)
        self._setup(config)
        logger.debug(f"Created {self!r}")

    def _setup(self, config: ShapeConfig) -> None:
        """Hook for subclasses to precompute values from the config."""

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------
    @property
    def config(self) -> ShapeConfig:
        return self._config

    @property
    def rng(self) -> RandomSource:
        return self._rng

    @property
    def center(self) -> Tuple[float, float]:
        return (self._config.x, self._config.y)

    @property
    def affect_rotation(self) -> bool:
        """True when samples also overwrite the target's rotation."""
        return self.SUPPORTS_ROTATION and self._config.affect_rotation

    def to_dict(self) -> Dict[str, Any]:
        """Tagged record (`{"type": ..., "data": {...}}`) of the resolved config."""
        return {"type": self.TYPE, "data": copy.deepcopy(self._config.as_dict())}

    # -------------------------------------------------------------------------
    # Abstract interface
    # -------------------------------------------------------------------------
    @abstractmethod
    def _draw(self) -> Tuple[float, float, float]:
        """Draw one `(x, y, rotation)` sample from the shape's distribution."""
        raise NotImplementedError

    # -------------------------------------------------------------------------
    # Sampling
    # -------------------------------------------------------------------------
    def sample(self, target: SpawnTarget) -> None:
        """Overwrite `target.position` (and `target.rotation` if enabled) with a new sample."""
        x, y, rotation = self._draw()
        target.position.x = x
        target.position.y = y
        if self.affect_rotation:
            target.rotation = rotation

    def sample_batch(self, count: int) -> NDArray[np.float64]:
        """
        Draw `count` samples without a target.

        Returns:
            float64 array of shape (count, 3): columns x, y, rotation.
            Rotation is NaN when the shape does not affect rotation.
        """
        out = np.empty((count, 3), dtype=np.float64)
        for i in range(count):
            out[i] = self._draw()
        if not self.affect_rotation:
            out[:, 2] = np.nan
        return out

    # ---------------------------------------------------------------------------
    # Representation
    # ---------------------------------------------------------------------------
    def __repr__(self) -> str:
        params = ", ".join(f"{k}={v!r}" for k, v in self._config.as_dict().items())
        return f"<{self.__class__.__name__} type={self.TYPE!r} {params}>"

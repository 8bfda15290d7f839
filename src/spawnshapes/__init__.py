"""spawnshapes - pluggable spawn-position generators for particle emitters."""

from .rng import RandomSource, RNG, get_rng, set_global_seed
from .config import ShapeConfig, OvalConfig, TorusConfig, RectConfig
from .base import SpawnShape, SpawnTarget
from .oval import Oval
from .torus import Torus
from .rect import Rect
from .registry import SHAPES, register_shape, get_shape_class, create_shape, shape_from_record
from .logging_utils import configure_logging


__all__ = [
    "RandomSource", "RNG", "get_rng", "set_global_seed",
    "ShapeConfig", "OvalConfig", "TorusConfig", "RectConfig",
    "SpawnShape", "SpawnTarget",
    "Oval", "Torus", "Rect",
    "SHAPES", "register_shape", "get_shape_class", "create_shape", "shape_from_record",
    "configure_logging",
]

"""
rng.py
------

Injectable random sources for spawn shapes.

- `RandomSource` is the only capability a shape needs: `random()` in [0, 1).
- `RNG` wraps either `random.Random` or `numpy.random.Generator` behind a
  lock, so one instance can be shared between threads.
- `get_rng()` returns the shared instance or a per-thread one.
"""

from __future__ import annotations

__all__ = ["RandomSource", "RNGBackend", "RNG", "get_rng", "set_global_seed",]

import os
import time
import random
import threading
from numbers import Real
from typing import Any, Optional, Protocol, TypeAlias, Union, runtime_checkable

import numpy as np
from numpy.typing import NDArray


# ---------------------------------------------------------------------
# Random source protocol
# ---------------------------------------------------------------------
@runtime_checkable
class RandomSource(Protocol):
    """Anything that can produce a uniform float in [0, 1)."""

    def random(self) -> float: ...


RNGBackend: TypeAlias = Union[random.Random, np.random.Generator]


def _entropy_seed() -> int:
    return os.getpid() ^ (time.time_ns() & 0xFFFFFFFF) ^ random.getrandbits(32)


# ---------------------------------------------------------------------
# RNG class
# ---------------------------------------------------------------------
class RNG:
    """Encapsulated, thread-safe hybrid random generator.

    Attributes:
        _rng:  Backend RNG (random.Random or numpy.random.Generator).
        _lock: threading.Lock for safe concurrent access.

    Notes:
        - Uses Python stdlib RNG by default.
        - `use_numpy=True` switches to `numpy.random.default_rng`, which
          allows `random(size=n)` for vectorized draws.
    """

    def __init__(self, seed: Optional[int] = None, use_numpy: bool = False):
        self._lock = threading.Lock()
        self._use_numpy = use_numpy
        seed_val = _entropy_seed() if seed is None else seed

        if use_numpy:
            self._rng: RNGBackend = np.random.default_rng(seed_val)
        else:
            self._rng: RNGBackend = random.Random(seed_val)

    # -----------------------------------------------------------------
    # Core seeding
    # -----------------------------------------------------------------
    def seed(self, seed: Optional[int] = None) -> None:
        """Reinitialize the RNG in place (preserves object identity)."""
        with self._lock:
            seed_val = _entropy_seed() if seed is None else seed
            if self._use_numpy:
                self._rng = np.random.default_rng(seed_val)
            else:
                self._rng.seed(seed_val)

    # -----------------------------------------------------------------
    # Draws
    # -----------------------------------------------------------------
    def random(self, size: Optional[int] = None) -> Union[float, NDArray[np.float64]]:
        """Uniform float in [0, 1); an array of `size` floats when requested."""
        with self._lock:
            if self._use_numpy:
                out = self._rng.random(size)
                if isinstance(out, Real):
                    return float(out)
                return out
            if size is None:
                return self._rng.random()
            return np.array([self._rng.random() for _ in range(size)], dtype=np.float64)

    # -----------------------------------------------------------------
    # Utility & Introspection
    # -----------------------------------------------------------------
    @property
    def use_numpy(self) -> bool:
        return self._use_numpy

    def getstate(self) -> Any:
        with self._lock:
            if self._use_numpy:
                return self._rng.bit_generator.state
            return self._rng.getstate()

    def setstate(self, state: Any) -> None:
        with self._lock:
            if self._use_numpy:
                self._rng.bit_generator.state = state
            else:
                self._rng.setstate(state)

    def __repr__(self) -> str:
        backend = "numpy" if self._use_numpy else "stdlib"
        return f"<RNG backend={backend} pid={os.getpid()} id={id(self)}>"


# =============================================================================
# GLOBAL & THREAD-LOCAL ACCESSORS
# =============================================================================
_global_rng = RNG()
_thread_local = threading.local()


def get_rng(thread_safe: bool = False, use_numpy: bool = False) -> RNG:
    """Return an RNG instance (shared or per-thread)."""
    if thread_safe:
        if not hasattr(_thread_local, "rng"):
            _thread_local.rng = RNG(use_numpy=use_numpy)
        return _thread_local.rng
    return _global_rng


def set_global_seed(seed: int) -> None:
    """Re-seed the shared RNG, the calling thread's RNG and NumPy's legacy global state.

    Shapes built without an explicit `rng` use the per-thread RNG, so this makes
    them reproducible on the calling thread only; other threads keep their own
    sequences and must be seeded from within those threads.
    """
    _global_rng.seed(seed)
    get_rng(thread_safe=True).seed(seed)
    np.random.seed(seed)

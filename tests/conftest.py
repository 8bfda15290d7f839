"""
-------
conftest.py
-------
Shared pytest fixtures for spawn shape tests.
"""

from dataclasses import dataclass, field
from itertools import cycle

import pytest
import matplotlib
matplotlib.use("Agg")  # ensure headless backend for CI
import matplotlib.pyplot as plt

from spawnshapes.rng import RNG


# -----------------------------------------------------------------------------
# Particle stand-in
# -----------------------------------------------------------------------------
@dataclass
class Point:
  x: float = float("nan")
  y: float = float("nan")


@dataclass
class Particle:
  position: Point = field(default_factory=Point)
  rotation: float = float("nan")


class ScriptedRandom:
  """Random source replaying a fixed sequence of draws (cycled)."""

  def __init__(self, *values):
    self.values = values
    self._it = cycle(values)
    self.calls = 0

  def random(self):
    self.calls += 1
    return next(self._it)


@pytest.fixture
def particle():
  return Particle()


@pytest.fixture
def scripted():
  """Factory: scripted(0.25, 0.5) -> ScriptedRandom."""
  return ScriptedRandom


@pytest.fixture
def seeded_rng():
  """Provide a deterministic RNG with fixed seed."""
  return RNG(seed=123)


# -----------------------------------------------------------------------------
# Core Matplotlib fixtures
# -----------------------------------------------------------------------------
@pytest.fixture(scope="function")
def fig_ax():
  """
  Create and yield an isolated Matplotlib Figure/Axes pair.

  The figure is automatically closed after the test to avoid memory leaks.
  """
  fig, ax = plt.subplots(figsize=(4, 3))
  yield fig, ax
  plt.close(fig)

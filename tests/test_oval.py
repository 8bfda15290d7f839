"""
test_oval.py
------------
Unit tests for the oval spawn shape (ellipse boundary sampling).
"""

import math

import numpy as np
import pytest
from scipy.stats import chisquare

from spawnshapes import Oval, OvalConfig, TorusConfig, RNG


SCENARIO = {"x": 5, "y": -5, "semiMajorAxis": 10, "semiMinorAxis": 4,
            "radius": 0, "innerRadius": 0}


# ---------------------------------------------------------------------
# 1. Construction and defaults
# ---------------------------------------------------------------------
def test_defaults_when_omitted():
  oval = Oval()
  assert oval.center == (0.0, 0.0)
  assert oval.affect_rotation is False
  assert oval.semi_major_axis == 0.0
  assert oval.semi_minor_axis == 0.0


def test_mapping_with_camel_case_keys(scripted):
  oval = Oval(SCENARIO, rng=scripted(0.0))
  assert isinstance(oval.config, OvalConfig)
  assert oval.center == (5.0, -5.0)
  assert oval.semi_major_axis == 10.0
  assert oval.semi_minor_axis == 4.0
  assert oval.config.radius == 0.0 and oval.config.inner_radius == 0.0


def test_keyword_and_config_construction_agree():
  a = Oval(semi_major_axis=3, semi_minor_axis=2, affect_rotation=True)
  b = Oval(OvalConfig(semi_major_axis=3, semi_minor_axis=2, affect_rotation=True))
  assert a.config == b.config


def test_parameters_are_read_only(particle, scripted):
  oval = Oval(SCENARIO, rng=scripted(0.0))
  with pytest.raises(AttributeError):
    oval.semi_major_axis = 99.0
  with pytest.raises(AttributeError):
    oval.config = OvalConfig()
  oval.sample(particle)
  assert particle.position.x == 10.0
  assert oval.to_dict()["data"]["semi_major_axis"] == 10.0


def test_other_shape_config_carries_shared_fields():
  oval = Oval(TorusConfig(x=1, y=2, radius=3, affect_rotation=True))
  assert isinstance(oval.config, OvalConfig)
  assert oval.center == (1.0, 2.0)
  assert oval.config.radius == 3.0
  assert oval.affect_rotation is True
  assert oval.semi_major_axis == 0.0


@pytest.mark.parametrize("cfg", [
  {},
  {"semiMajorAxis": 0, "semiMinorAxis": 0},
  {"semiMajorAxis": -3.5, "semiMinorAxis": 1e9, "x": -1e6},
  {"semiMajorAxis": float("nan"), "semiMinorAxis": None},
  {"semiMajorAxis": float("inf"), "x": float("-inf")},
])
def test_construction_never_raises_and_samples_are_finite(cfg, particle, seeded_rng):
  oval = Oval(cfg, rng=seeded_rng)
  for _ in range(20):
    oval.sample(particle)
    assert math.isfinite(particle.position.x)
    assert math.isfinite(particle.position.y)


def test_non_finite_axes_collapse_to_center(particle, scripted):
  oval = Oval({"semiMajorAxis": float("nan"), "semiMinorAxis": None}, rng=scripted(0.3))
  oval.sample(particle)
  assert (particle.position.x, particle.position.y) == (0.0, 0.0)


# ---------------------------------------------------------------------
# 2. Concrete scenarios with a scripted random source
# ---------------------------------------------------------------------
def test_t_zero_gives_end_of_major_axis(particle, scripted):
  oval = Oval(SCENARIO, rng=scripted(0.0))
  oval.sample(particle)
  assert particle.position.x == 10.0
  assert particle.position.y == 0.0


def test_t_quarter_turn_gives_end_of_minor_axis(particle, scripted):
  oval = Oval(SCENARIO, rng=scripted(0.25))
  oval.sample(particle)
  assert particle.position.x == pytest.approx(0.0, abs=1e-12)
  assert particle.position.y == pytest.approx(4.0)


def test_one_draw_per_sample(particle, scripted):
  src = scripted(0.1, 0.7)
  oval = Oval(SCENARIO, rng=src)
  for _ in range(5):
    oval.sample(particle)
  assert src.calls == 5


def test_sample_ignores_previous_target_state(particle, scripted):
  oval = Oval(SCENARIO, rng=scripted(0.0))
  particle.position.x, particle.position.y = 123.0, -456.0
  oval.sample(particle)
  assert (particle.position.x, particle.position.y) == (10.0, 0.0)


# ---------------------------------------------------------------------
# 3. Rotation
# ---------------------------------------------------------------------
def test_rotation_untouched_when_disabled(particle, scripted):
  Oval(SCENARIO, rng=scripted(0.25)).sample(particle)
  assert math.isnan(particle.rotation)


@pytest.mark.parametrize("u, expected", [
  (0.0, 0.0),
  (0.25, math.pi / 2),
  (0.5, math.pi),
  (0.75, -math.pi / 2),
])
def test_rotation_points_away_from_center(particle, scripted, u, expected):
  oval = Oval(dict(SCENARIO, affectRotation=True), rng=scripted(u))
  oval.sample(particle)
  assert particle.rotation == pytest.approx(expected, abs=1e-9)
  assert particle.rotation == pytest.approx(
      math.atan2(particle.position.y, particle.position.x))


def test_rotation_on_collapsed_oval_is_zero(particle, scripted):
  oval = Oval(affect_rotation=True, rng=scripted(0.6))
  oval.sample(particle)
  assert particle.rotation == 0.0


@pytest.mark.parametrize("u", [0.1, 0.3, 0.6, 0.9])
def test_collapsed_oval_rotation_ignores_signed_zeros(particle, scripted, u):
  """-0.0 coordinates in every quadrant still give a zero rotation."""
  oval = Oval(affect_rotation=True, rng=scripted(u))
  oval.sample(particle)
  assert particle.rotation == 0.0
  assert math.copysign(1.0, particle.rotation) == 1.0


# ---------------------------------------------------------------------
# 4. Geometry properties
# ---------------------------------------------------------------------
@pytest.mark.parametrize("a, b", [(10, 4), (1, 7), (0.5, 0.5), (250, 3)])
def test_samples_lie_on_boundary(a, b, seeded_rng):
  pts = Oval(semi_major_axis=a, semi_minor_axis=b, rng=seeded_rng).sample_batch(500)
  lhs = (pts[:, 0] / a) ** 2 + (pts[:, 1] / b) ** 2
  assert np.allclose(lhs, 1.0)


def test_equal_axes_give_a_circle(seeded_rng):
  pts = Oval(semi_major_axis=6, semi_minor_axis=6, rng=seeded_rng).sample_batch(500)
  assert np.allclose(pts[:, 0] ** 2 + pts[:, 1] ** 2, 36.0)


def test_zero_major_axis_collapses_to_segment(particle, seeded_rng):
  oval = Oval(semi_major_axis=0, semi_minor_axis=3, rng=seeded_rng)
  for _ in range(200):
    oval.sample(particle)
    assert particle.position.x == 0
    assert -3.0 <= particle.position.y <= 3.0


def test_radius_fields_do_not_affect_sampling(seeded_rng):
  pts = Oval(radius=100, inner_radius=50, semi_major_axis=2, semi_minor_axis=1,
             rng=seeded_rng).sample_batch(200)
  assert np.allclose((pts[:, 0] / 2) ** 2 + pts[:, 1] ** 2, 1.0)


# ---------------------------------------------------------------------
# 5. Distribution
# ---------------------------------------------------------------------
def test_parameter_t_is_uniform():
  a, b, n, bins = 10.0, 2.0, 20_000, 24
  pts = Oval(semi_major_axis=a, semi_minor_axis=b, rng=RNG(seed=7)).sample_batch(n)
  t = np.mod(np.arctan2(pts[:, 1] / b, pts[:, 0] / a), 2 * np.pi)
  counts, _ = np.histogram(t, bins=bins, range=(0, 2 * np.pi))
  _, p = chisquare(counts)
  assert p > 1e-3


def test_density_is_parametric_not_arc_length_uniform():
  """Uniform t puts 2/3 of points where |x| > a/2, even on a flat ellipse."""
  a, b, n = 10.0, 1.0, 20_000
  pts = Oval(semi_major_axis=a, semi_minor_axis=b, rng=RNG(seed=11)).sample_batch(n)
  frac = np.mean(np.abs(pts[:, 0]) > a / 2)
  assert frac == pytest.approx(2 / 3, abs=0.02)


def test_batch_rotation_column(seeded_rng):
  plain = Oval(semi_major_axis=3, semi_minor_axis=1, rng=seeded_rng).sample_batch(10)
  assert np.isnan(plain[:, 2]).all()
  rot = Oval(semi_major_axis=3, semi_minor_axis=1, affect_rotation=True,
             rng=seeded_rng).sample_batch(10)
  assert np.allclose(rot[:, 2], np.arctan2(rot[:, 1], rot[:, 0]))


def test_same_seed_same_samples():
  p1 = Oval(semi_major_axis=4, semi_minor_axis=2, rng=RNG(seed=5)).sample_batch(50)
  p2 = Oval(semi_major_axis=4, semi_minor_axis=2, rng=RNG(seed=5)).sample_batch(50)
  assert np.array_equal(p1, p2, equal_nan=True)

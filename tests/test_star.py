import math

import numpy as np
import pytest

import constants
from star import Star, seed_color


def test_spawn_starts_at_origin_heading_along_angle():
    star = Star.spawn(math.pi / 2, now=1.5)
    assert star.position.tolist() == [0.0, 0.0]
    assert star.velocity[0] == pytest.approx(0.0, abs=1e-12)
    assert star.velocity[1] == pytest.approx(constants.STAR_SPEED)
    assert star.color_seed == 1.5


def test_tick_moves_by_velocity_times_tick_scale():
    star = Star.spawn(0.0, now=0.0)
    for _ in range(constants.TARGET_TPS):
        star.tick()
    # One simulated second at STAR_SPEED units per second.
    assert star.position[0] == pytest.approx(constants.STAR_SPEED)
    assert star.position[1] == pytest.approx(0.0)


def test_seed_color_channels_stay_in_unit_range():
    for x in np.linspace(-100, 100, 257):
        assert all(0.0 <= c <= 1.0 for c in seed_color(x))


def test_seed_color_array_matches_scalar():
    seeds = np.array([0.0, 1.5, 7.25])
    r, g, b = seed_color(seeds)
    for i, x in enumerate(seeds):
        assert (r[i], g[i], b[i]) == pytest.approx(seed_color(float(x)))
    assert seed_color(0.0) == pytest.approx((0.5, 0.5, 0.5))


def test_tick_applies_speed_factor_each_tick():
    star = Star.spawn(math.pi / 4, now=0.0)
    direction = star.velocity / np.linalg.norm(star.velocity)
    for k in range(1, 6):
        star.tick(speed_factor=0.9)
        speed = np.linalg.norm(star.velocity)
        assert speed == pytest.approx(constants.STAR_SPEED * 0.9 ** k)
        assert star.velocity / speed == pytest.approx(direction)


def test_tick_growth_factor_increases_speed():
    star = Star.spawn(0.0, now=0.0)
    star.tick(speed_factor=1.5)
    assert star.velocity[0] == pytest.approx(constants.STAR_SPEED * 1.5)
    assert star.velocity[1] == pytest.approx(0.0)


def test_perturb_shifts_seed():
    star = Star.spawn(0.0, now=1.0)
    star.perturb(0.25)
    assert star.color_seed == 1.25

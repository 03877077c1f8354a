# star.py

import enum
import math
import logging
import numpy as np
from constants import R_SCALE, G_SCALE, B_SCALE, STAR_SPEED, STAR_SPEED_FACTOR, TICK_SCALE

logger = logging.getLogger("spiral")


class ColorMode(enum.Enum):
    """How a star's color relates to simulated time."""
    DYNAMIC = "dynamic"  # Evaluated at seed + elapsed time, keeps cycling
    STATIC = "static"    # Evaluated at seed only, fixed from spawn


def seed_color(x):
    """
    Maps a scalar, or an array of them, onto RGB using three independently
    scaled sine waves, one per channel. Each channel lies in [0, 1].
    Returns an (r, g, b) tuple whose entries have the shape of `x`.
    """
    return (
        0.5 + 0.5 * np.sin(x * R_SCALE),
        0.5 + 0.5 * np.sin(x * G_SCALE),
        0.5 + 0.5 * np.sin(x * B_SCALE),
    )


class Star:
    """
    A single emitted particle.

    Stars are spawned at the origin and travel outward along a fixed
    direction. The color is not stored; it is derived from color_seed on
    demand so that it can keep evolving after spawn and so the attractor can
    distort it.
    """
    __slots__ = ("position", "velocity", "color_seed")

    def __init__(self, position: np.ndarray, velocity: np.ndarray, color_seed: float):
        self.position = position
        self.velocity = velocity
        self.color_seed = color_seed

    @classmethod
    def spawn(cls, angle: float, now: float, speed: float = STAR_SPEED) -> "Star":
        """Creates a star at the origin heading along `angle`, seeded with `now`."""
        velocity = np.array([math.cos(angle), math.sin(angle)], dtype=float) * speed
        return cls(np.zeros(2, dtype=float), velocity, now)

    def tick(self, speed_factor: float = STAR_SPEED_FACTOR):
        """
        Moves the star one fixed tick. Velocity is in units per second, so it
        is scaled by the tick length, then decayed (or grown) by speed_factor.
        """
        self.position += self.velocity * TICK_SCALE
        if speed_factor != 1.0:
            self.velocity *= speed_factor

    def perturb(self, amount: float):
        self.color_seed += amount

    def __repr__(self):
        return f"Star(pos={self.position.tolist()}, seed={self.color_seed:.3f})"

# star_field.py

import logging
from collections import deque, namedtuple
from typing import Optional

import numpy as np

import constants
from star import Star, ColorMode

logger = logging.getLogger("spiral")

# An immutable view of the field, taken once per displayed frame.
FieldSnapshot = namedtuple('FieldSnapshot', ['positions', 'seeds', 'elapsed', 'color_mode'])

# The visible rectangle in simulation coordinates.
Bounds = namedtuple('Bounds', ['left', 'top', 'width', 'height'])


def contains(bounds: Bounds, point) -> bool:
    """Inclusive point-in-rectangle test."""
    return (bounds.left <= point[0] <= bounds.left + bounds.width
            and bounds.top <= point[1] <= bounds.top + bounds.height)


def wrap_angle(value: float) -> float:
    """
    Brings a value that has grown past a full turn back into [0, 2*pi).
    Values only ever grow by less than a full turn per step, so a single
    subtraction is enough and keeps the value continuous.
    """
    if value >= constants.FULL_TURN:
        value -= constants.FULL_TURN
    return value


class StarField:
    """
    Owns the simulation state: the simulated clock, the spawn angle and its
    angular velocity, the ordered window of live stars and the optional
    attractor.

    Data Contract:
    - Inputs:
        - color_mode (ColorMode): How star colors evolve over time.
    - Outputs: None. advance() mutates internal state.
    - Side Effects: Manages the lifecycle of all stars.
    - Invariants:
        - Stars are ordered oldest first. Spawns append at the back and
          eviction only pops from the front.
        - angle and angle_delta stay within [0, 2*pi).
        - now_ns == ticks * TICK_DURATION_NS exactly.
    """
    def __init__(self, color_mode: ColorMode = ColorMode.DYNAMIC):
        self.color_mode = color_mode
        self.stars = deque()
        self.angle = 0.0
        self.angle_delta = 0.0
        self.now_ns = 0
        self.last_spawn_ns = 0
        self.ticks = 0
        self.spawned = 0
        self.evicted = 0
        self.attractor: Optional[np.ndarray] = None

        logger.info(f"StarField created with color mode '{color_mode.value}'.")

    def __len__(self):
        return len(self.stars)

    def __iter__(self):
        return iter(self.stars)

    @property
    def elapsed(self) -> float:
        """Simulated seconds since the field was created."""
        return self.now_ns / 1_000_000_000

    def set_attractor(self, point):
        self.attractor = np.array(point, dtype=float)

    def clear_attractor(self):
        self.attractor = None

    def _spawn_due(self):
        """
        Spawns a star if a full interval has passed since the last one. The
        spawn mark moves by exactly one interval so the spawn count never
        drifts from floor(now / STAR_DELAY_NS).
        """
        if self.now_ns - self.last_spawn_ns >= constants.STAR_DELAY_NS:
            self.last_spawn_ns += constants.STAR_DELAY_NS
            self.stars.append(Star.spawn(self.angle, self.elapsed))
            self.spawned += 1

    def _evict_expired(self, bounds: Bounds):
        # Stars leave in spawn order, so stop at the first one still visible.
        while self.stars and not contains(bounds, self.stars[0].position):
            self.stars.popleft()
            self.evicted += 1

    def _apply_attractor(self):
        """
        Nudges each star's color seed by an amount inversely proportional to
        its distance from the attractor. Positions are left alone.
        """
        for star in self.stars:
            distance = np.hypot(*(star.position - self.attractor))
            distance = max(distance, constants.ATTRACTOR_MIN_DISTANCE)
            star.perturb(constants.ATTRACTOR_STRENGTH * constants.TICK_SCALE / distance)

    def advance(self, bounds: Bounds):
        """
        Runs one fixed simulation tick.

        Order: clock, spawn, move, evict, rotate, accelerate, attractor.
        Eviction runs after the move so the front star is always visible
        once advance() returns.
        """
        self.now_ns += constants.TICK_DURATION_NS
        self.ticks += 1

        self._spawn_due()

        for star in self.stars:
            star.tick()

        self._evict_expired(bounds)

        self.angle = wrap_angle(self.angle + self.angle_delta)
        self.angle_delta = wrap_angle(self.angle_delta + constants.ANGLE_ACCEL * constants.TICK_SCALE)

        if self.attractor is not None:
            self._apply_attractor()

    def snapshot(self) -> FieldSnapshot:
        """
        Copies the current star state into read-only arrays for the renderer.
        """
        count = len(self.stars)
        positions = np.empty((count, 2), dtype=np.float64)
        seeds = np.empty(count, dtype=np.float64)
        for i, star in enumerate(self.stars):
            positions[i] = star.position
            seeds[i] = star.color_seed
        positions.flags.writeable = False
        seeds.flags.writeable = False
        return FieldSnapshot(positions, seeds, self.elapsed, self.color_mode)

# constants.py

"""
Application Constants

This module defines static configuration values for the spiral field.
These are not expected to change between runs; run-level settings such as
logging live in config.json instead.

Data Contract:
- All values are immutable constants.
- Units are specified in comments where applicable.
- Colors used by the simulation and renderer are float RGB in [0, 1]. They
  are converted to 8-bit channels only at the canvas boundary.
"""

import math

# Screen dimensions
WIDTH = 1000  # Pixels
HEIGHT = 1000  # Pixels

# Window Title
TITLE = "Spiral!"

# Framerate
FPS = 60  # Frames per second (display)
TARGET_TPS = 60  # Simulation ticks per second

# Fixed timestep. Simulated time is tracked in integer nanoseconds so that
# k ticks always add up to exactly k * TICK_DURATION_NS.
TICK_DURATION_NS = 1_000_000_000 // TARGET_TPS
TICK_SCALE = 1.0 / TARGET_TPS  # Seconds of simulated time per tick

# Spawning
STAR_DELAY_NS = 100_000_000  # Simulated time between spawns (100 ms)
STAR_SPEED = 10.0  # Units per second
STAR_SPEED_FACTOR = 1.0  # Per-tick multiplier on velocity. 1.0 keeps speed constant.

# Rotation
ANGLE_ACCEL = 0.01  # Radians per tick, per second
FULL_TURN = 2.0 * math.pi

# Color cycle. Each channel is 0.5 + 0.5 * sin(x * scale).
R_SCALE = 0.2
G_SCALE = 0.3
B_SCALE = 0.5

# Rendering
MAX_SEGMENT_LEN = 5.0  # Longest flat-colored piece of a connector
LINE_WIDTH = 4.0  # Pixels
STAR_RADIUS = 2.0  # Pixels, point mode
BACKGROUND_COLOR = (0.0, 0.0, 0.0)
SECONDARY_COLOR = (0.3, 0.3, 0.3)

# Attractor. Seed perturbation per second is STRENGTH / distance.
ATTRACTOR_STRENGTH = 200.0
ATTRACTOR_MIN_DISTANCE = 1.0  # Clamp to avoid division by zero at the pointer

# Color mode: "dynamic" keeps cycling after spawn, "static" freezes the spawn color.
COLOR_MODE = "dynamic"

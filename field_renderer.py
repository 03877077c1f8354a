# field_renderer.py

import enum
import math
import logging
from collections import namedtuple

import numba
import numpy as np

import constants
from star import ColorMode, seed_color
from star_field import FieldSnapshot

logger = logging.getLogger("spiral")

# --- Draw primitives ---
# The renderer never talks to the graphics backend directly. It returns these
# and the canvas turns each one into a single draw call.
Circle = namedtuple('Circle', ['center', 'radius', 'color'])
Line = namedtuple('Line', ['start', 'end', 'width', 'round_caps', 'color'])


class DrawMode(enum.Enum):
    POINTS = "points"
    LINES = "lines"


class RenderOptions:
    """
    Per-frame rendering switches. Only the input handler changes these.
    """
    def __init__(self, draw_mode: DrawMode = DrawMode.LINES, show_primary: bool = True, show_secondary: bool = False):
        self.draw_mode = draw_mode
        self.show_primary = show_primary
        self.show_secondary = show_secondary

    def toggle_draw_mode(self):
        self.draw_mode = DrawMode.POINTS if self.draw_mode is DrawMode.LINES else DrawMode.LINES

    def toggle_primary(self):
        self.show_primary = not self.show_primary

    def toggle_secondary(self):
        self.show_secondary = not self.show_secondary

    def __repr__(self):
        return (f"RenderOptions(draw_mode={self.draw_mode.value}, "
                f"show_primary={self.show_primary}, show_secondary={self.show_secondary})")


# --- JIT-Compiled Search ---

@numba.jit(nopython=True)
def nearest_two(positions, ix):
    """
    Finds the closest and second closest star spawned after star `ix`.

    Compares squared distances only. Comparisons are strict, so on a tie the
    star found first in scan order (the older one) wins.
    Returns (primary, secondary) indices, -1 where no such star exists.
    """
    px = positions[ix, 0]
    py = positions[ix, 1]
    best = -1
    second = -1
    best_d = np.inf
    second_d = np.inf
    for j in range(ix + 1, positions.shape[0]):
        dx = positions[j, 0] - px
        dy = positions[j, 1] - py
        d = dx * dx + dy * dy
        if best == -1 or d < best_d:
            second = best
            second_d = best_d
            best = j
            best_d = d
        elif second == -1 or d < second_d:
            second = j
            second_d = d
    return best, second


def snapshot_colors(snapshot: FieldSnapshot) -> np.ndarray:
    """Evaluates every star's color at the snapshot time. Shape (N, 3)."""
    x = snapshot.seeds
    if snapshot.color_mode is not ColorMode.STATIC:
        x = x + snapshot.elapsed
    return np.stack(seed_color(x), axis=-1)


def interpolate_segments(start, start_color, end, end_color, max_len=constants.MAX_SEGMENT_LEN, width=constants.LINE_WIDTH):
    """
    Splits the connector start->end into ceil(length / max_len) pieces, each
    drawn in a single flat color stepping linearly from start_color to
    end_color. This fakes a gradient with a solid-color line primitive.
    """
    dx = end[0] - start[0]
    dy = end[1] - start[1]
    segments = max(1, math.ceil(math.hypot(dx, dy) / max_len))
    step_x, step_y = dx / segments, dy / segments
    color_delta = tuple((b - a) / segments for a, b in zip(start_color, end_color))

    lines = []
    x, y = float(start[0]), float(start[1])
    color = tuple(float(c) for c in start_color)
    for _ in range(segments):
        nx, ny = x + step_x, y + step_y
        lines.append(Line((x, y), (nx, ny), width, True, color))
        x, y = nx, ny
        color = tuple(c + d for c, d in zip(color, color_delta))
    return lines


def render_field(snapshot: FieldSnapshot, options: RenderOptions) -> list:
    """
    Turns a field snapshot into draw primitives. Does not touch the field.

    Point mode emits one circle per star. Line mode connects every star but
    the newest to its nearest later-spawned neighbor with an interpolated
    connector, and optionally to its second nearest with a dim straight line.
    """
    positions = snapshot.positions
    count = positions.shape[0]
    colors = snapshot_colors(snapshot)
    primitives = []

    if options.draw_mode is DrawMode.POINTS:
        for i in range(count):
            primitives.append(Circle(tuple(positions[i]), constants.STAR_RADIUS, tuple(colors[i])))
        return primitives

    if not (options.show_primary or options.show_secondary):
        return primitives

    for i in range(count - 1):
        primary, secondary = nearest_two(positions, i)
        if options.show_secondary and secondary != -1:
            primitives.append(Line(
                tuple(positions[i]), tuple(positions[secondary]),
                constants.LINE_WIDTH, True, constants.SECONDARY_COLOR
            ))
        if options.show_primary and primary != -1:
            primitives.extend(interpolate_segments(
                positions[i], colors[i], positions[primary], colors[primary]
            ))
    return primitives

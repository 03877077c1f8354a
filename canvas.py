# canvas.py

import logging
import pygame

from field_renderer import Circle, Line
from star_field import Bounds

logger = logging.getLogger("spiral")


def to_rgb(color) -> tuple:
    """Converts a float RGB color in [0, 1] to 8-bit channels, clamping drift."""
    return tuple(max(0, min(255, int(round(c * 255)))) for c in color[:3])


class PygameCanvas:
    """
    Draws on a pygame surface using an origin-centred coordinate space.

    Data Contract:
    - Inputs: surface (pygame.Surface) - The target surface.
    - Invariants: Simulation point (0, 0) maps to the centre of the surface.
      Screen size is read on every call, so a resized display stays centred.
    - Side Effects: pygame.error from the backend propagates to the caller.
    """
    def __init__(self, surface: pygame.Surface):
        self.surface = surface

    @property
    def half_size(self):
        width, height = self.surface.get_size()
        return width / 2, height / 2

    def bounds(self) -> Bounds:
        """The visible rectangle in simulation coordinates."""
        half_w, half_h = self.half_size
        return Bounds(-half_w, -half_h, half_w * 2, half_h * 2)

    def to_screen(self, point) -> tuple:
        half_w, half_h = self.half_size
        return (point[0] + half_w, point[1] + half_h)

    def to_simulation(self, screen_point) -> tuple:
        half_w, half_h = self.half_size
        return (screen_point[0] - half_w, screen_point[1] - half_h)

    def clear(self, color):
        self.surface.fill(to_rgb(color))

    def draw_filled_circle(self, center, radius, color):
        pygame.draw.circle(self.surface, to_rgb(color), self.to_screen(center), radius)

    def draw_line(self, start, end, width, round_caps, color):
        rgb = to_rgb(color)
        a = self.to_screen(start)
        b = self.to_screen(end)
        pygame.draw.line(self.surface, rgb, a, b, max(1, int(round(width))))
        if round_caps:
            # pygame lines have square ends; cap them with discs.
            pygame.draw.circle(self.surface, rgb, a, width / 2)
            pygame.draw.circle(self.surface, rgb, b, width / 2)


def draw_primitives(canvas: PygameCanvas, primitives):
    """Issues one canvas call per primitive."""
    for primitive in primitives:
        if isinstance(primitive, Line):
            canvas.draw_line(primitive.start, primitive.end, primitive.width, primitive.round_caps, primitive.color)
        elif isinstance(primitive, Circle):
            canvas.draw_filled_circle(primitive.center, primitive.radius, primitive.color)
        else:
            raise TypeError(f"Unknown draw primitive: {primitive!r}")

# controls.py

"""
Input handling.

Translates pygame events into changes on the session: pause, render mode
toggles, quit requests and the attractor held under the left mouse button.

Key bindings (key-up):
    SPACE   pause / resume the simulation
    P       switch between point and line mode
    L       show / hide the primary nearest connector
    N       show / hide the secondary nearest connector
    ESCAPE  quit
"""

import logging
import pygame

from field_renderer import RenderOptions
from star_field import StarField

logger = logging.getLogger("spiral")


class Session:
    """Host-side state that input can change besides the field itself."""
    def __init__(self, options: RenderOptions = None):
        self.options = options if options is not None else RenderOptions()
        self.running = True  # False while paused
        self.quit_requested = False
        self.pointer_held = False


def handle_event(event, session: Session, field: StarField, to_simulation):
    """
    Applies one pygame event.

    - Inputs:
        - event: A pygame event.
        - session: Mutable host state.
        - field: The star field, for the attractor.
        - to_simulation: Callable mapping a screen point to simulation coordinates.
    """
    if event.type == pygame.QUIT:
        session.quit_requested = True

    elif event.type == pygame.KEYUP:
        if event.key == pygame.K_SPACE:
            session.running = not session.running
            logger.info("Simulation resumed." if session.running else "Simulation paused.")
        elif event.key == pygame.K_p:
            session.options.toggle_draw_mode()
            logger.info(f"Draw mode: {session.options.draw_mode.value}")
        elif event.key == pygame.K_l:
            session.options.toggle_primary()
            logger.info(f"Primary nearest: {session.options.show_primary}")
        elif event.key == pygame.K_n:
            session.options.toggle_secondary()
            logger.info(f"Secondary nearest: {session.options.show_secondary}")
        elif event.key == pygame.K_ESCAPE:
            session.quit_requested = True

    elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
        session.pointer_held = True
        field.set_attractor(to_simulation(event.pos))
        logger.debug(f"Attractor set at {field.attractor}")

    elif event.type == pygame.MOUSEMOTION:
        if session.pointer_held:
            field.set_attractor(to_simulation(event.pos))

    elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
        session.pointer_held = False
        field.clear_attractor()
        logger.debug("Attractor cleared.")

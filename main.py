# main.py

import sys
import time
import logging
import cProfile
import io
import pstats

import pygame

import constants
import logger_setup
from canvas import PygameCanvas, draw_primitives
from controls import Session, handle_event
from field_renderer import render_field
from star import ColorMode
from star_field import StarField
from timestep import FixedTimestep

# Get the application's dedicated logger
logger = logging.getLogger("spiral")


def run_loop(field, canvas, clock, session, run_control):
    """
    The main frame loop.

    Each frame drains input, runs however many fixed ticks the elapsed wall
    time calls for (none while paused), then renders a snapshot of the field.
    Returns the number of simulation ticks run.
    """
    timestep = FixedTimestep()
    log_throttle = run_control.get('log_throttle_ticks', 600)
    max_ticks = run_control.get('max_ticks', 0)
    last_frame_ns = time.perf_counter_ns()

    while not session.quit_requested:
        for event in pygame.event.get():
            handle_event(event, session, field, canvas.to_simulation)

        # --- Physics & Logic Update ---
        frame_ns = time.perf_counter_ns()
        due = timestep.add_time(frame_ns - last_frame_ns)
        last_frame_ns = frame_ns

        if session.running:
            bounds = canvas.bounds()
            for _ in range(due):
                field.advance(bounds)

                # --- Logging (throttled) ---
                if log_throttle and field.ticks % log_throttle == 0:
                    logger.debug(
                        f"Tick={field.ticks}, "
                        f"Stars={len(field)}, "
                        f"Spawned={field.spawned}, "
                        f"Angle={field.angle:.3f}, "
                        f"AngleDelta={field.angle_delta:.4f}, "
                        f"FPS={clock.get_fps():.1f}"
                    )
                if max_ticks and field.ticks >= max_ticks:
                    logger.info(f"Reached max_ticks ({max_ticks}). Stopping.")
                    session.quit_requested = True
                    break
        else:
            timestep.reset()

        # --- Drawing ---
        canvas.clear(constants.BACKGROUND_COLOR)
        draw_primitives(canvas, render_field(field.snapshot(), session.options))
        pygame.display.flip()
        clock.tick(constants.FPS)

    return field.ticks


def main(config_path='config.json'):
    """
    Initializes the display and runs the spiral until the user quits.
    Returns a process exit status.
    """
    # --- Setup ---
    config = logger_setup.load_config(config_path)
    logger_setup.setup_logging(config)
    run_control = config.get('run_control', {})

    logger.info("Application starting...")
    logger.info(f"Loaded configuration: {config}")

    try:
        # --- Initialization ---
        pygame.init()
        screen = pygame.display.set_mode((constants.WIDTH, constants.HEIGHT), pygame.RESIZABLE)
        pygame.display.set_caption(constants.TITLE)
        clock = pygame.time.Clock()

        canvas = PygameCanvas(screen)
        field = StarField(color_mode=ColorMode(constants.COLOR_MODE))
        session = Session()

        if run_control.get('profile', False):
            profiler = cProfile.Profile()
            profiler.enable()
            ticks = run_loop(field, canvas, clock, session, run_control)
            profiler.disable()

            logger.info("Profiling complete.")
            s = io.StringIO()
            stats = pstats.Stats(profiler, stream=s).sort_stats('cumtime')
            stats.print_stats(20)  # Top 20 time-consuming functions
            logger.info(f"\n{s.getvalue()}")
        else:
            ticks = run_loop(field, canvas, clock, session, run_control)
    except pygame.error:
        logger.exception("Graphics backend failure, exiting.")
        return 1
    finally:
        pygame.quit()

    logger.info(f"Exited cleanly after {ticks} ticks ({field.spawned} stars spawned).")
    return 0


if __name__ == "__main__":
    sys.exit(main())

# main.py

import json
import logging
import cProfile
import pstats

import numpy as np
import pygame

import constants
import logger_setup
from frame_clock import FrameClock
from render_surface import RenderSurface
from settings import Settings
from star_field import StarField

# Get the application's dedicated logger
logger = logging.getLogger("starfield")

# Hotkeys for the numeric settings: key -> (setting name, direction)
KEY_BINDINGS = {
    pygame.K_UP: ('goal_fps', 1),
    pygame.K_DOWN: ('goal_fps', -1),
    pygame.K_RIGHT: ('acceleration', 1),
    pygame.K_LEFT: ('acceleration', -1),
    pygame.K_RIGHTBRACKET: ('proximity', 1),
    pygame.K_LEFTBRACKET: ('proximity', -1),
}


class StatsReporter:
    """
    Stats subscriber for the window: shows the latest stats in the caption
    every frame and logs them every `log_interval` frames.
    """
    def __init__(self, title: str, log_interval: int = constants.STATS_LOG_INTERVAL, set_caption=None):
        self.title = title
        self.log_interval = max(1, log_interval)
        self.set_caption = set_caption or pygame.display.set_caption
        self.frames = 0

    def __call__(self, stats):
        self.set_caption(
            f"{self.title} - stars: {stats.drawn_stars} "
            f"(buffered {stats.buffered_stars}) - fps: {stats.actual_fps}"
        )
        if self.frames % self.log_interval == 0:
            logger.debug(
                f"Frame={self.frames}, "
                f"DrawnStars={stats.drawn_stars}, "
                f"BufferedStars={stats.buffered_stars}, "
                f"ActualFPS={stats.actual_fps}"
            )
        self.frames += 1


def handle_event(event, settings: Settings, star_field: StarField, render: RenderSurface, clock: FrameClock):
    """
    Applies a single pygame event: quit, window resize or a settings hotkey.
    """
    if event.type == pygame.QUIT:
        clock.stop()
    elif event.type == pygame.VIDEORESIZE:
        surface = pygame.display.get_surface()
        if surface is not None:
            render.surface = surface
        star_field.on_viewport_resize(event.w, event.h)
        logger.info(f"Window resized to {event.w}x{event.h}.")
    elif event.type == pygame.KEYDOWN:
        if event.key == pygame.K_ESCAPE:
            clock.stop()
        elif event.key == pygame.K_c:
            settings.toggle_colorful()
        elif event.key in KEY_BINDINGS:
            name, direction = KEY_BINDINGS[event.key]
            settings.step(name, direction)


def make_frame_fn(settings: Settings, star_field: StarField, render: RenderSurface, clock: FrameClock):
    """Builds the per-tick function: events, simulation and drawing, flip."""
    def frame_fn(delta_time, fps):
        for event in pygame.event.get():
            handle_event(event, settings, star_field, render, clock)

        star_field.on_frame(render, delta_time, fps)
        pygame.display.flip()

    return frame_fn


def main(config_path='config.json'):
    """
    Main function to initialize and run the star field.
    """
    # --- Setup ---
    logger_setup.setup_logging(config_path)

    with open(config_path, 'r') as f:
        config = json.load(f)
    window_config = config.get('window', {})
    profiling_config = config.get('profiling', {})

    logger.info("Application starting...")
    logger.info(f"Loaded configuration: {config}")

    # Initialize the master random number generator (RNG)
    rng = np.random.default_rng(config['master_seed'])
    logger.info(f"Master RNG initialized with seed: {config['master_seed']}")

    settings = Settings.from_config(config.get('settings', {}))

    # --- Initialization ---
    width = window_config.get('width', constants.WIDTH)
    height = window_config.get('height', constants.HEIGHT)
    title = window_config.get('title', constants.TITLE)

    pygame.init()
    screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
    pygame.display.set_caption(title)

    render = RenderSurface(screen)
    star_field = StarField(settings, rng, render.width, render.height)
    star_field.subscribe(StatsReporter(title, config.get('stats_log_interval', constants.STATS_LOG_INTERVAL)))

    clock = FrameClock()
    frame_fn = make_frame_fn(settings, star_field, render, clock)

    try:
        if profiling_config.get('enabled', False):
            profiler = cProfile.Profile()
            profiler.enable()
            clock.run(frame_fn, max_frames=profiling_config.get('frame_limit', 10000))
            profiler.disable()
            logger.info("Profiling complete. Printing stats...")
            stats = pstats.Stats(profiler).sort_stats('cumtime')
            stats.print_stats(profiling_config.get('top_n', 20))
        else:
            clock.run(frame_fn)
    finally:
        logger.info(f"Application shutting down. Final stats: {star_field.stats}")
        pygame.quit()


if __name__ == "__main__":
    main()

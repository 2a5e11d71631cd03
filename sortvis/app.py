import argparse
import logging
import os
import sys

import pygame

from .driver import FrameDriver
from .render import Renderer, RendererError
from .settings import SETTINGS_JSON, ConfigError, build_config
from .sorters import ALGORITHM_KEYS
from .state import AppState
from .store import ArrayStore

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def configure_logging():
    """Set the root logger from the LOG_LEVEL environment variable (default INFO)."""
    level_name = os.environ.get("LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.INFO

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    root.addHandler(handler)
    logger.debug("Logging configured with level: %s", level_name)


def parse_arguments(argv=None):
    parser = argparse.ArgumentParser(
        prog="sortvis",
        description="Watch six classic sorting algorithms work, one step per frame.",
        epilog="Keys: 1-6 select Selection/Insertion/Bubble/Merge/Quick/Heap, "
               "R regenerates the array, ESC quits.",
    )
    parser.add_argument("--size", type=int, dest="array_size", help="number of bars")
    parser.add_argument("--fps", type=int, help="frames (sort steps) per second")
    parser.add_argument("--seed", type=int, help="seed for the random arrays")
    parser.add_argument("--low", type=int, dest="value_low", help="smallest bar value")
    parser.add_argument("--high", type=int, dest="value_high", help="largest bar value")
    parser.add_argument("--algorithm", choices=ALGORITHM_KEYS, help="algorithm to start with")
    parser.add_argument("--config", default=SETTINGS_JSON,
                        help="JSON settings file (default: %(default)s)")
    return parser.parse_args(argv)


def build_app(cfg):
    store = ArrayStore(cfg["array_size"], cfg["value_low"], cfg["value_high"], seed=cfg["seed"])
    state = AppState(store=store, algorithm=cfg["algorithm"])
    renderer = Renderer(cfg["window_width"], cfg["window_height"], cfg["value_high"])
    return FrameDriver(state, renderer, fps=cfg["fps"])


def main(argv=None) -> int:
    configure_logging()
    args = parse_arguments(argv)
    overrides = {k: v for k, v in vars(args).items() if k != "config"}
    try:
        cfg = build_config(overrides, path=args.config)
    except ConfigError as e:
        print(f"Invalid settings: {e}", file=sys.stderr)
        return 2
    logger.debug("Effective settings: %s", cfg)

    driver = build_app(cfg)
    try:
        driver.renderer.open()
    except RendererError as e:
        print(f"Renderer initialization failed: {e}")
        logger.debug("Renderer initialization failed", exc_info=True)
        pygame.quit()
        return 1

    try:
        driver.run()
    finally:
        driver.renderer.close()
        pygame.quit()
    return 0

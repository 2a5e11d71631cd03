import json
import logging
import os

from .sorters import ALGORITHM_KEYS

logger = logging.getLogger(__name__)

# ============================================================
# ===================== USER SETTINGS ========================
# ============================================================

WINDOW_WIDTH   = 1000
WINDOW_HEIGHT  = 600
ARRAY_SIZE     = 200
VALUE_LOW      = 10
VALUE_HIGH     = 599
FPS            = 60
ALGORITHM      = "selection"

# JSON file next to the launcher; overrides the defaults above
_ROOT_DIR     = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
SETTINGS_JSON = os.path.join(_ROOT_DIR, "sortvis_settings.json")

# ============================================================
# ========================= UI THEME =========================
# ============================================================

BACKGROUND_COLOR = (255, 255, 255)
BAR_COLOR        = (255, 165, 0)
PRIMARY_COLOR    = (255, 0, 0)
SECONDARY_COLOR  = (0, 0, 255)
TERTIARY_COLOR   = (0, 255, 0)
HUD_COLOR        = (60, 60, 80)
HUD_HEIGHT       = 28
HUD_FONT_SIZE    = 20


class ConfigError(ValueError):
    pass


DEFAULTS = {
    "window_width":  WINDOW_WIDTH,
    "window_height": WINDOW_HEIGHT,
    "array_size":    ARRAY_SIZE,
    "value_low":     VALUE_LOW,
    "value_high":    VALUE_HIGH,
    "fps":           FPS,
    "algorithm":     ALGORITHM,
    "seed":          None,
}


def read_settings_json(path=SETTINGS_JSON) -> dict:
    """Read overrides from the settings file. Missing or broken files give {}."""
    if not os.path.exists(path):
        return {}
    try:
        with open(path) as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("Ignoring settings file %s: %s", path, e)
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring settings file %s: top level is not an object", path)
        return {}
    return data


def build_config(overrides=None, path=SETTINGS_JSON) -> dict:
    """
    Merge defaults < settings file < overrides and validate the result.

    `overrides` entries that are None are treated as "not given", which is how
    argparse reports flags the user left out.
    """
    cfg = dict(DEFAULTS)
    for source in (read_settings_json(path), overrides or {}):
        for k, v in source.items():
            if k not in DEFAULTS:
                logger.warning("Unknown setting %r ignored", k)
                continue
            if v is not None:
                cfg[k] = v
    validate_config(cfg)
    return cfg


def validate_config(cfg):
    for k in ("window_width", "window_height", "array_size", "value_low", "value_high", "fps"):
        if isinstance(cfg[k], bool) or not isinstance(cfg[k], int):
            raise ConfigError(f"{k} must be an integer, got {cfg[k]!r}")
    if cfg["seed"] is not None and (isinstance(cfg["seed"], bool) or not isinstance(cfg["seed"], int)):
        raise ConfigError(f"seed must be an integer, got {cfg['seed']!r}")
    if cfg["window_width"] < 1 or cfg["window_height"] <= HUD_HEIGHT:
        raise ConfigError("window is too small")
    if cfg["array_size"] < 1:
        raise ConfigError("array_size must be at least 1")
    if cfg["fps"] < 1:
        raise ConfigError("fps must be at least 1")
    if cfg["value_low"] < 0 or cfg["value_low"] > cfg["value_high"]:
        raise ConfigError(
            f"value range {cfg['value_low']}..{cfg['value_high']} is invalid"
        )
    if cfg["algorithm"] not in ALGORITHM_KEYS:
        raise ConfigError(f"Unknown algorithm: {cfg['algorithm']!r}")

"""Persistent JSON config helpers.

Stores the fallback terminal width, color mode, theme, and log level.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from platformdirs import user_config_dir

from .theme import COLOR_MODES, DEFAULT_COLOR_MODE, normalize_theme_name

logger = logging.getLogger(__name__)

APP_NAME = "iconls"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
LOG_LEVEL_ENV = "ICONLS_LOG_LEVEL"

DEFAULT_FALLBACK_WIDTH = 80
MIN_USABLE_WIDTH = 20
DEFAULT_LOG_LEVEL = "WARNING"
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    if not isinstance(data, dict):
        logger.warning("ignoring config %s: top level is not an object", CONFIG_PATH)
        return {}
    return data


def load_fallback_width(config: dict[str, object] | None = None) -> int:
    """Width used when the terminal cannot be probed.

    Booleans, non-integers and values below ``MIN_USABLE_WIDTH`` fall back to
    ``DEFAULT_FALLBACK_WIDTH``.
    """
    value = (load_config() if config is None else config).get("fallback_width")
    if value is None:
        return DEFAULT_FALLBACK_WIDTH
    if isinstance(value, bool) or not isinstance(value, int) or value < MIN_USABLE_WIDTH:
        logger.warning("invalid fallback_width %r; using %d", value, DEFAULT_FALLBACK_WIDTH)
        return DEFAULT_FALLBACK_WIDTH
    return value


def load_color_mode(config: dict[str, object] | None = None) -> str:
    """Return ``never``, ``auto`` or ``always``."""
    value = (load_config() if config is None else config).get("color")
    if value is None:
        return DEFAULT_COLOR_MODE
    if not isinstance(value, str) or value.strip().lower() not in COLOR_MODES:
        logger.warning("invalid color mode %r; using %s", value, DEFAULT_COLOR_MODE)
        return DEFAULT_COLOR_MODE
    return value.strip().lower()


def load_theme_name(config: dict[str, object] | None = None) -> str:
    """Return a valid theme name, falling back to the default theme."""
    value = (load_config() if config is None else config).get("theme")
    return normalize_theme_name(value if isinstance(value, str) else None)


def load_log_level(config: dict[str, object] | None = None) -> str:
    """Return the logging level name.

    ``ICONLS_LOG_LEVEL`` overrides the ``log_level`` config key. Unknown names
    resolve to ``WARNING``.
    """
    value = os.environ.get(LOG_LEVEL_ENV)
    if not value:
        raw = (load_config() if config is None else config).get("log_level")
        value = raw if isinstance(raw, str) else ""
    candidate = value.strip().upper()
    return candidate if candidate in _LOG_LEVELS else DEFAULT_LOG_LEVEL


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "LOG_LEVEL_ENV",
    "DEFAULT_FALLBACK_WIDTH",
    "MIN_USABLE_WIDTH",
    "DEFAULT_LOG_LEVEL",
    "load_config",
    "load_fallback_width",
    "load_color_mode",
    "load_theme_name",
    "load_log_level",
]

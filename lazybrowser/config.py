"""JSON config loading.

Reads tick interval, opener program, preview style, theme, and listing
preferences. All access is defensive: malformed or missing config falls back
to defaults.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .events import DEFAULT_TICK_INTERVAL_MS
from .opener import DEFAULT_OPENER

APP_NAME = "lazybrowser"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH

DEFAULT_STYLE = "monokai"
DEFAULT_THEME_NAME = "default"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class BrowserConfig:
    """Effective settings after validation."""

    tick_interval_ms: int = DEFAULT_TICK_INTERVAL_MS
    opener: str = DEFAULT_OPENER
    style: str = DEFAULT_STYLE
    theme: str = DEFAULT_THEME_NAME
    show_hidden: bool = True
    refresh_on_tick: bool = True
    log_level: str = DEFAULT_LOG_LEVEL


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def _positive_int(value: object, default: int) -> int:
    # bool is an int subclass; reject it explicitly.
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        return default
    return value


def _nonempty_str(value: object, default: str) -> str:
    if not isinstance(value, str) or not value.strip():
        return default
    return value.strip()


def _bool(value: object, default: bool) -> bool:
    return value if isinstance(value, bool) else default


def _log_level(value: object) -> str:
    if not isinstance(value, str):
        return DEFAULT_LOG_LEVEL
    name = value.strip().upper()
    if not isinstance(logging.getLevelName(name), int):
        return DEFAULT_LOG_LEVEL
    return name


def load_browser_config() -> BrowserConfig:
    """Return validated settings, substituting defaults for bad values."""
    data = load_config()
    return BrowserConfig(
        tick_interval_ms=_positive_int(data.get("tick_interval_ms"), DEFAULT_TICK_INTERVAL_MS),
        opener=_nonempty_str(data.get("opener"), DEFAULT_OPENER),
        style=_nonempty_str(data.get("style"), DEFAULT_STYLE),
        theme=_nonempty_str(data.get("theme"), DEFAULT_THEME_NAME),
        show_hidden=_bool(data.get("show_hidden"), True),
        refresh_on_tick=_bool(data.get("refresh_on_tick"), True),
        log_level=_log_level(data.get("log_level")),
    )


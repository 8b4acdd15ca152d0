"""File-based logging setup.

Modules log through ``logging.getLogger(__name__)``; this module only attaches
a rotating file handler under the user log directory so log records never
write over the full-screen UI.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from platformdirs import user_log_dir

APP_NAME = "lazybrowser"
LOG_FILENAME = "lazybrowser.log"
LOG_PATH = Path(user_log_dir(APP_NAME, appauthor=False)) / LOG_FILENAME

# Max log file size: 5MB, keep 2 backups
_MAX_LOG_BYTES = 5 * 1024 * 1024
_BACKUP_COUNT = 2


def configure_logging(level: str = "WARNING", log_path: Path | None = None) -> logging.Logger:
    """Attach the rotating file handler to the package logger once."""
    logger = logging.getLogger(APP_NAME)
    logger.setLevel(level)
    if logger.handlers:
        return logger

    target = log_path if log_path is not None else LOG_PATH
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = RotatingFileHandler(
            target, maxBytes=_MAX_LOG_BYTES, backupCount=_BACKUP_COUNT, encoding="utf-8"
        )
    except OSError:
        handler = logging.NullHandler()

    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(handler)
    # Keep records away from the root logger's stderr handler.
    logger.propagate = False
    return logger

"""External opener launch helper.

Spawns the configured "open" program detached from the browser: its stderr
is discarded and nobody waits for it to exit. Returns an error message string
instead of raising for UI-friendly handling.
"""

from __future__ import annotations

import logging
import shlex
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_OPENER = "xdg-open"


def open_file(directory: Path, name: str, opener: str = DEFAULT_OPENER) -> str | None:
    """Run ``opener name`` inside ``directory`` without waiting for it."""
    cmd = shlex.split(opener)
    if not cmd:
        return "Cannot open: opener is empty."

    try:
        subprocess.Popen(
            [*cmd, name],
            cwd=directory,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    except (OSError, ValueError) as exc:
        logger.warning("failed to spawn %s for %s: %s", cmd[0], directory / name, exc)
        return f"Failed to launch {cmd[0]}: {exc}"
    logger.info("spawned %s for %s", cmd[0], directory / name)
    return None

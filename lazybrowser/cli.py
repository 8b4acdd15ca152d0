"""Command-line front door for lazybrowser.

Takes no options: the browser always starts in the current working directory.
Loads settings and logging, then dispatches into the interactive loop.
"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from .app import run_browser
from .config import CONFIG_PATH, load_browser_config
from .errors import NavigationError
from .log import LOG_PATH, configure_logging
from .ui_theme import available_theme_names


def build_parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog="lazybrowser",
        description="Browse the current directory in the terminal.",
        epilog=(
            f"Settings are read from {CONFIG_PATH} "
            f"(themes: {', '.join(available_theme_names())}, plain). "
            f"Logs go to {LOG_PATH}."
        ),
    )


def main(default_path: Path | None = None) -> None:
    """Parse arguments and launch the browser.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    build_parser().parse_args()

    if not os.isatty(sys.stdin.fileno()):
        raise SystemExit("lazybrowser needs an interactive terminal on stdin.")

    config = load_browser_config()
    configure_logging(config.log_level)

    try:
        status = run_browser(config, default_path if default_path is not None else Path.cwd())
    except NavigationError as exc:
        raise SystemExit(str(exc)) from exc
    raise SystemExit(status)


if __name__ == "__main__":
    main()

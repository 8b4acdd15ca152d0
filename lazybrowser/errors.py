"""Typed failures surfaced to the main loop.

Navigation and open failures are recoverable: the loop catches them and shows
an error notice instead of tearing down the session.
"""

from __future__ import annotations

from pathlib import Path


class BrowserError(Exception):
    """Base class for recoverable browser failures."""


class NavigationError(BrowserError):
    """A directory could not be read while entering, leaving, or refreshing."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot read {path}: {reason}")
        self.path = path
        self.reason = reason


class OpenError(BrowserError):
    """The external opener could not be spawned for an entry."""

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"Cannot open {name}: {reason}")
        self.name = name
        self.reason = reason


class CommandError(BrowserError):
    """A ':' command was not recognized or could not run."""


__all__ = ["BrowserError", "NavigationError", "OpenError", "CommandError"]

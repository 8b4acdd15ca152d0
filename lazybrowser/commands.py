"""Built-in ':' commands run by the default execute hook."""

from __future__ import annotations

import os
from pathlib import Path

from .errors import CommandError
from .navigation import NavigationController

COMMAND_ALIASES = {
    "q": "quit",
    "quit": "quit",
    "r": "refresh",
    "refresh": "refresh",
    "open": "open",
    "o": "open",
    "cd": "cd",
}


def parse_command(command: str) -> tuple[str, str]:
    """Split ``:name args`` into ``(name, args)``."""
    body = command[1:] if command.startswith(":") else command
    name, _sep, argument = body.strip().partition(" ")
    return name, argument.strip()


def resolve_target(base: Path, argument: str) -> Path:
    """Normalize a ``cd`` argument relative to ``base``."""
    return Path(os.path.normpath(base / os.path.expanduser(argument)))


def run_command(command: str, selected_name: str | None, navigation: NavigationController) -> bool:
    """Execute one command, returning ``True`` when the browser should quit.

    Raises ``CommandError`` for unknown commands and lets navigation errors
    propagate to the caller.
    """
    name, argument = parse_command(command)
    command_id = COMMAND_ALIASES.get(name)
    if command_id is None:
        raise CommandError(f"Unknown command: {command}")

    if command_id == "quit":
        return True
    if command_id == "refresh":
        navigation.refresh()
        return False
    if command_id == "open":
        entry = navigation.selected_entry
        if entry is None:
            raise CommandError("Nothing selected")
        if not entry.is_file:
            raise CommandError(f"open: {entry.name} is not a regular file")
        navigation.open_selected()
        return False
    if command_id == "cd":
        if argument:
            navigation.change_directory(resolve_target(navigation.path, argument))
            return False
        entry = navigation.selected_entry
        if entry is None or not entry.is_dir:
            raise CommandError("cd: selection is not a directory")
        navigation.enter()
        return False
    return False


__all__ = [
    "COMMAND_ALIASES",
    "parse_command",
    "resolve_target",
    "run_command",
]

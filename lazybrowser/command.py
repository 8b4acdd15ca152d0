"""Command-line mode state machine.

Owns the ':' command buffer and the display mode. Keys typed while editing
become buffer edits; Enter hands the finished command and the selected entry
name to an execute hook supplied by the surrounding program.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable

from .input import Action, KeyBindingRegistry, editing_key_registry, is_text_key

logger = logging.getLogger(__name__)

COMMAND_PREFIX = ":"
INVALID_COMMAND_NOTICE = "Invalid command"

ExecuteHook = Callable[[str, str | None], None]


class Mode(enum.Enum):
    NORMAL = "normal"
    EDITING = "editing"
    ERROR = "error"


class CommandProcessor:
    """Buffer and mode owner for ':' commands.

    ``notice`` carries the message shown while in ``Mode.ERROR``.
    """

    def __init__(
        self,
        on_execute: ExecuteHook | None = None,
        registry: KeyBindingRegistry | None = None,
    ) -> None:
        self.mode = Mode.NORMAL
        self.buffer = ""
        self.notice = ""
        self.on_execute = on_execute
        self._registry = registry if registry is not None else editing_key_registry()

    @property
    def editing(self) -> bool:
        return self.mode is Mode.EDITING

    def start(self) -> None:
        """Enter editing mode with a fresh ':' buffer."""
        self.mode = Mode.EDITING
        self.buffer = COMMAND_PREFIX
        self.notice = ""

    def append(self, text: str) -> None:
        if self.mode is not Mode.EDITING:
            return
        self.buffer += text

    def backspace(self) -> None:
        """Drop the last typed character; the leading ':' stays."""
        if self.mode is not Mode.EDITING:
            return
        if len(self.buffer) <= len(COMMAND_PREFIX):
            return
        self.buffer = self.buffer[:-1]

    def cancel(self) -> None:
        self.mode = Mode.NORMAL
        self.buffer = ""

    def execute(self, selected_name: str | None) -> bool:
        """Validate and run the buffered command against ``selected_name``.

        A valid buffer returns to normal mode before the hook runs, so the
        hook may still report an error of its own.
        """
        command = self.buffer
        self.buffer = ""
        if not command.startswith(COMMAND_PREFIX):
            self.report_error(INVALID_COMMAND_NOTICE)
            return False
        self.mode = Mode.NORMAL
        self.notice = ""
        logger.info("executing %r on %r", command, selected_name)
        if self.on_execute is not None:
            self.on_execute(command, selected_name)
        return True

    def report_error(self, message: str) -> None:
        """Show ``message`` until the next ':' starts a new command."""
        self.mode = Mode.ERROR
        self.buffer = ""
        self.notice = message

    def handle_key(self, key: str, selected_name: str | None) -> bool:
        """Apply one key while editing; return whether it was consumed."""
        if self.mode is not Mode.EDITING:
            return False
        action = self._registry.resolve(key)
        if action is Action.EXECUTE:
            self.execute(selected_name)
        elif action is Action.CANCEL:
            self.cancel()
        elif action is Action.DELETE_CHAR:
            self.backspace()
        elif is_text_key(key):
            self.append(key)
        else:
            return False
        return True


__all__ = [
    "COMMAND_PREFIX",
    "INVALID_COMMAND_NOTICE",
    "ExecuteHook",
    "Mode",
    "CommandProcessor",
]

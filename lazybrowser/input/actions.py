"""Logical actions and the key tables that produce them.

Physical key tokens from ``read_key`` are resolved to a closed set of
``Action`` values per input mode, so navigation code never sees key codes.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


class Action(enum.Enum):
    QUIT = "quit"
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    ENTER = "enter"
    LEAVE = "leave"
    START_COMMAND = "start_command"
    EXECUTE = "execute"
    CANCEL = "cancel"
    DELETE_CHAR = "delete_char"


@dataclass(frozen=True)
class KeyBinding:
    """Mapping from one or more key tokens to a single action."""

    combos: tuple[str, ...]
    action: Action


class KeyBindingRegistry:
    """Small key-to-action table."""

    def __init__(self) -> None:
        self._actions: dict[str, Action] = {}

    def register_binding(self, binding: KeyBinding) -> KeyBindingRegistry:
        """Register one binding, overwriting existing actions for same combos."""
        for combo in binding.combos:
            self._actions[combo] = binding.action
        return self

    def register_bindings(self, *bindings: KeyBinding) -> KeyBindingRegistry:
        """Register multiple bindings and return ``self`` for fluent usage."""
        for binding in bindings:
            self.register_binding(binding)
        return self

    def resolve(self, key: str) -> Action | None:
        return self._actions.get(key)

    def combos_for(self, action: Action) -> tuple[str, ...]:
        return tuple(combo for combo, bound in self._actions.items() if bound is action)


def normal_key_registry() -> KeyBindingRegistry:
    """Bindings active in normal and error modes."""
    return KeyBindingRegistry().register_bindings(
        KeyBinding(("q", "CTRL_C"), Action.QUIT),
        KeyBinding(("UP",), Action.MOVE_UP),
        KeyBinding(("DOWN",), Action.MOVE_DOWN),
        KeyBinding(("RIGHT",), Action.ENTER),
        KeyBinding(("LEFT",), Action.LEAVE),
        KeyBinding((":",), Action.START_COMMAND),
    )


def editing_key_registry() -> KeyBindingRegistry:
    """Bindings active while a command is being typed."""
    return KeyBindingRegistry().register_bindings(
        KeyBinding(("ENTER_CR", "ENTER_LF"), Action.EXECUTE),
        KeyBinding(("ESC",), Action.CANCEL),
        KeyBinding(("BACKSPACE",), Action.DELETE_CHAR),
    )


def is_text_key(key: str) -> bool:
    """Return whether ``key`` is a single printable character token."""
    return len(key) == 1 and key.isprintable()


__all__ = [
    "Action",
    "KeyBinding",
    "KeyBindingRegistry",
    "normal_key_registry",
    "editing_key_registry",
    "is_text_key",
]

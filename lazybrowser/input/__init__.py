"""Input-layer public API for key decoding and key-to-action resolution.

Low-level terminal decoding (`read_key`) is kept apart from the mode tables
that turn key tokens into logical actions.
"""

from .reader import ESC_SEQUENCE_TIMEOUT_MS, _PENDING_BYTES, read_key
from .actions import (
    Action,
    KeyBinding,
    KeyBindingRegistry,
    editing_key_registry,
    is_text_key,
    normal_key_registry,
)

__all__ = [
    "read_key",
    "_PENDING_BYTES",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "Action",
    "KeyBinding",
    "KeyBindingRegistry",
    "normal_key_registry",
    "editing_key_registry",
    "is_text_key",
]

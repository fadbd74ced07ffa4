"""Keymap for the editing commands and the clean-indent overrides."""

from .models import Binding, Command, KeyStroke
from .keymap import Keymap, KeymapConflictError
from .defaults import (
    CLEAN_INDENT_BINDINGS,
    CLEAN_INDENT_COMMANDS,
    DEFAULT_BINDINGS,
    DEFAULT_COMMANDS,
    default_keymap,
)

__all__ = [
    "Binding",
    "Command",
    "KeyStroke",
    "Keymap",
    "KeymapConflictError",
    "DEFAULT_COMMANDS",
    "DEFAULT_BINDINGS",
    "CLEAN_INDENT_COMMANDS",
    "CLEAN_INDENT_BINDINGS",
    "default_keymap",
]

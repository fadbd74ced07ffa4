"""Built-in keymap: plain editing keys plus the clean-indent overrides."""

from __future__ import annotations

from clean_indent.actions import core as core_actions
from clean_indent.actions import indent as indent_actions

from .keymap import Keymap
from .models import Binding, Command

DEFAULT_COMMANDS: tuple[Command, ...] = (
    Command("edit.newline", core_actions.newline, "Insert a plain line break"),
    Command("edit.backward_kill_word", core_actions.backward_kill_word, "Kill the previous word"),
    Command("edit.delete_backward_char", core_actions.delete_backward_char, "Delete the previous character"),
    Command("motion.forward_char", core_actions.forward_char, "Move right"),
    Command("motion.backward_char", core_actions.backward_char, "Move left"),
    Command("motion.next_line", core_actions.next_line, "Move down"),
    Command("motion.previous_line", core_actions.previous_line, "Move up"),
    Command("motion.beginning_of_line", core_actions.move_beginning_of_line, "Move to line start"),
    Command("motion.end_of_line", core_actions.move_end_of_line, "Move to line end"),
    Command("edit.undo", core_actions.undo, "Undo the last edit"),
    Command("edit.redo", core_actions.redo, "Redo the last undone edit"),
    Command("arg.universal", core_actions.universal_argument, "Multiply the next count by four"),
    Command("arg.digit", core_actions.digit_argument, "Add a digit to the next count"),
    Command("arg.negative", core_actions.negative_argument, "Negate the next count"),
)

DEFAULT_BINDINGS: tuple[Binding, ...] = (
    Binding.of("edit.newline", "ENTER"),
    Binding.of("edit.newline", "RETURN"),
    Binding.of("edit.backward_kill_word", "alt+BACKSPACE"),
    # terminals deliver meta as an ESC prefix
    Binding.of("edit.backward_kill_word", "ESC", "BACKSPACE"),
    Binding.of("edit.delete_backward_char", "BACKSPACE"),
    Binding.of("motion.forward_char", "RIGHT"),
    Binding.of("motion.backward_char", "LEFT"),
    Binding.of("motion.next_line", "DOWN"),
    Binding.of("motion.previous_line", "UP"),
    Binding.of("motion.beginning_of_line", "HOME"),
    Binding.of("motion.end_of_line", "END"),
    Binding.of("edit.undo", "ctrl+z"),
    Binding.of("edit.redo", "ctrl+y"),
    Binding.of("arg.universal", "ctrl+u"),
    Binding.of("arg.negative", "alt+-"),
    *(Binding.of("arg.digit", f"alt+{digit}") for digit in "0123456789"),
)

CLEAN_INDENT_COMMANDS: tuple[Command, ...] = (
    Command(
        "clean_indent.newline",
        indent_actions.newline_and_indent,
        "Newline and indent, trimming the indent if it goes unused",
    ),
    Command(
        "clean_indent.backspace_unindent",
        indent_actions.backspace_unindent,
        "Unindent to the previous outer level, or kill the previous word",
    ),
)

CLEAN_INDENT_BINDINGS: tuple[Binding, ...] = (
    Binding.of("clean_indent.newline", "ENTER"),
    Binding.of("clean_indent.newline", "RETURN"),
    Binding.of("clean_indent.backspace_unindent", "alt+BACKSPACE"),
    Binding.of("clean_indent.backspace_unindent", "ESC", "BACKSPACE"),
)


def default_keymap() -> Keymap:
    """Fresh keymap holding the plain editing commands and their keys."""

    keymap = Keymap()
    for command in DEFAULT_COMMANDS:
        keymap.define(command)
    for binding in DEFAULT_BINDINGS:
        keymap.bind(binding)
    return keymap


__all__ = [
    "DEFAULT_COMMANDS",
    "DEFAULT_BINDINGS",
    "CLEAN_INDENT_COMMANDS",
    "CLEAN_INDENT_BINDINGS",
    "default_keymap",
]

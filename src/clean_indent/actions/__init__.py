"""Editing verbs bound by the default keymap and by the clean-indent mode."""

from .core import (
    backward_char,
    backward_kill_word,
    delete_backward_char,
    digit_argument,
    forward_char,
    move_beginning_of_line,
    move_end_of_line,
    negative_argument,
    newline,
    next_line,
    previous_line,
    redo,
    undo,
    universal_argument,
)
from .indent import backspace_unindent, newline_and_indent

__all__ = [
    "universal_argument",
    "digit_argument",
    "negative_argument",
    "newline",
    "backward_kill_word",
    "delete_backward_char",
    "forward_char",
    "backward_char",
    "next_line",
    "previous_line",
    "move_beginning_of_line",
    "move_end_of_line",
    "undo",
    "redo",
    "newline_and_indent",
    "backspace_unindent",
]

"""Primitive text/cursor API the indent features consume from a host editor."""

from __future__ import annotations

from typing import ContextManager, Optional, Protocol


class TextHost(Protocol):
    """Offset-addressed view over a single buffer with a single point.

    Columns are display columns: tabs advance to the next tab stop.
    """

    # cursor
    def point(self) -> int: ...

    def point_min(self) -> int: ...

    def point_max(self) -> int: ...

    def goto_char(self, offset: int) -> int: ...

    def line_beginning_position(self) -> int: ...

    def line_end_position(self) -> int: ...

    def beginning_of_line(self) -> None: ...

    def end_of_line(self) -> None: ...

    def back_to_indentation(self) -> int: ...

    def forward_line(self, count: int) -> bool:
        """Move ``count`` lines (negative is up); False when a buffer edge stops it."""
        ...

    def current_column(self) -> int: ...

    def move_to_column(self, column: int) -> int: ...

    def save_excursion(self) -> ContextManager[None]:
        """Restore point on exit, shifted by any edits made in between."""
        ...

    # text queries
    def current_indentation(self) -> int: ...

    def line_length(self) -> int: ...

    def line_length_at(self, offset: int) -> Optional[int]:
        """Length of the line holding ``offset``; None when ``offset`` is stale."""
        ...

    def forward_char(self, count: int) -> bool: ...

    def line_move(self, count: int) -> bool:
        """Move vertically ``count`` lines, keeping the column when possible."""
        ...

    # mutation
    def insert(self, text: str) -> None: ...

    def delete_char(self, count: int) -> int:
        """Delete ``count`` chars forward, or backward when ``count`` is negative."""
        ...

    def newline(self) -> None: ...

    def newline_and_indent(self) -> None:
        """Break the line and indent the new one with the host's own rules."""
        ...

    def indent_line_to(self, column: int) -> None: ...

    def delete_horizontal_space(self, backward_only: bool = False) -> int: ...

    def delete_trailing_whitespace(self) -> int:
        """Trim whitespace at the end of the current line; return chars removed."""
        ...

    def delete_backward_char_untabify(self, count: int) -> int: ...

    def kill_word(self, count: int) -> str:
        """Kill ``count`` words forward, or backward when ``count`` is negative."""
        ...

    # diagnostics
    def message(self, text: str) -> None: ...


__all__ = ["TextHost"]

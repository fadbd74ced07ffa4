"""Cursor and marker state tied to a buffer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

Cursor = Tuple[int, int]  # (row, column)


@dataclass(slots=True, eq=False)
class Marker:
    """Buffer offset that follows edits made around it.

    With ``advance`` set, text inserted exactly at the marker lands before
    it (the marker moves right); otherwise the marker stays put.
    """

    offset: int
    advance: bool = False

    def adjust(self, start: int, end: int, inserted: int) -> None:
        self.offset = shift_offset(
            self.offset, start, end, inserted, advance=self.advance
        )


@dataclass(slots=True)
class BufferState:
    """Mutable point + change counter tied to a BufferDocument version."""

    point: int = 0
    last_change_tick: int = 0


def shift_offset(
    offset: int, start: int, end: int, inserted: int, *, advance: bool
) -> int:
    """Return where ``offset`` ends up after ``[start, end)`` became ``inserted`` chars."""

    if offset < start:
        return offset
    if offset == start and (end > start or not advance):
        return offset
    if offset >= end:
        return offset + inserted - (end - start)
    return start

"""High-level buffer façade combining document, point, markers, registers, and undo."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from clean_indent.runtime import telemetry

from .document import BufferDocument
from .registers import RegisterBank
from .state import BufferState, Cursor, Marker, shift_offset
from .sync import BufferMirror
from .undo import UndoEntry, UndoTimeline
from .validation import ensure_cursor, ensure_offset


@dataclass(slots=True)
class BufferDelta:
    version: int
    start: int
    removed: str
    inserted: str
    point: int
    label: str


class Buffer:
    def __init__(
        self,
        *,
        name: str = "default",
        document: Optional[BufferDocument] = None,
        state: Optional[BufferState] = None,
        registers: Optional[RegisterBank] = None,
        undo: Optional[UndoTimeline] = None,
    ) -> None:
        self.name = name
        self.document = document or BufferDocument()
        self.state = state or BufferState()
        self.registers = registers or RegisterBank()
        self.undo_timeline = undo or UndoTimeline()
        self._markers: List[Marker] = []

    @classmethod
    def from_text(
        cls, text: str, *, name: str = "default", point: int | None = None
    ) -> "Buffer":
        buffer = cls(name=name, document=BufferDocument.from_text(text))
        buffer.goto(len(text) if point is None else point)
        return buffer

    @property
    def text(self) -> str:
        return self.document.text()

    @property
    def length(self) -> int:
        return self.document.length

    @property
    def point(self) -> int:
        return self.state.point

    @property
    def cursor(self) -> Cursor:
        return self.offset_to_cursor(self.state.point)

    def goto(self, offset: int) -> int:
        """Move point to ``offset`` clamped into the buffer."""

        self.state.point = max(0, min(offset, self.length))
        return self.state.point

    def set_cursor(self, row: int, col: int) -> None:
        self.state.point = self.cursor_to_offset((row, col))

    def lines(self) -> tuple[str, ...]:
        return tuple(self.document.snapshot())

    def line_bounds(self, offset: int) -> tuple[int, int]:
        """Return ``(start, end)`` offsets of the line containing ``offset``."""

        row, col = self.offset_to_cursor(offset)
        start = offset - col
        return start, start + len(self.document.get_line(row))

    def cursor_to_offset(self, cursor: Cursor) -> int:
        row, col = ensure_cursor(self.document, cursor)
        return self.document.line_offset(row) + col

    def offset_to_cursor(self, offset: int) -> Cursor:
        ensure_offset(self.document, offset)
        running = 0
        lines = self.document.snapshot()
        for row, line in enumerate(lines):
            if offset <= running + len(line):
                return (row, offset - running)
            running += len(line) + 1
        return (len(lines) - 1, len(lines[-1]))

    def mirror(self, *, attributes: Optional[dict[str, str]] = None) -> BufferMirror:
        return BufferMirror(
            text=self.text,
            cursor=self.cursor,
            attributes=dict(attributes or {}),
        )

    def create_marker(self, offset: int, *, advance: bool = False) -> Marker:
        marker = Marker(ensure_offset(self.document, offset), advance=advance)
        self._markers.append(marker)
        return marker

    def release_marker(self, marker: Marker) -> None:
        if marker in self._markers:
            self._markers.remove(marker)

    def get_text_range(self, start: int, end: int) -> str:
        start = ensure_offset(self.document, start)
        end = ensure_offset(self.document, end)
        if start > end:
            start, end = end, start
        return self.text[start:end]

    def replace_range(self, start: int, end: int, text: str, *, label: str) -> BufferDelta:
        """Replace ``[start, end)`` with ``text``; point and markers follow the edit.

        Every change is recorded on the undo timeline as a whole-text snapshot.
        """

        start = ensure_offset(self.document, start)
        end = ensure_offset(self.document, end)
        if start > end:
            start, end = end, start
        with telemetry.span(f"buffer::{label}", metadata={"buffer": self.name}):
            before = self.text
            point_before = self.point
            after = before[:start] + text + before[end:]
            self.document = self.document.replace(lines=after.split("\n"))
            self.state.point = shift_offset(point_before, start, end, len(text), advance=True)
            for marker in self._markers:
                marker.adjust(start, end, len(text))
            self.state.last_change_tick = self.document.version
            if after != before:
                self.undo_timeline.record(
                    UndoEntry(label, before, after, point_before, self.point)
                )

        return BufferDelta(
            version=self.document.version,
            start=start,
            removed=before[start:end],
            inserted=text,
            point=self.point,
            label=label,
        )

    def insert_text(self, text: str, *, offset: Optional[int] = None) -> BufferDelta:
        position = self.point if offset is None else offset
        return self.replace_range(position, position, text, label="insert_text")

    def delete_range(self, start: int, end: int) -> BufferDelta:
        return self.replace_range(start, end, "", label="delete_range")

    def undo(self) -> bool:
        """Revert the latest edit. Markers are left untouched."""

        entry = self.undo_timeline.undo()
        if entry is None:
            return False
        self._restore(entry.before_text, entry.point_before)
        return True

    def redo(self) -> bool:
        entry = self.undo_timeline.redo()
        if entry is None:
            return False
        self._restore(entry.after_text, entry.point_after)
        return True

    def _restore(self, text: str, point: int) -> None:
        self.document = self.document.replace(lines=text.split("\n"))
        self.state.last_change_tick = self.document.version
        self.goto(point)


"""Core document data structures for clean_indent buffers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Sequence


@dataclass(slots=True)
class BufferDocument:
    """Immutable-ish text storage built on a simple list-of-lines model.

    Lines never contain ``"\\n"``; a trailing newline in the source text shows
    up as a final empty line so offsets round-trip exactly.
    """

    _lines: List[str] = field(default_factory=lambda: [""])
    version: int = 0
    dirty: bool = False

    @classmethod
    def from_text(cls, text: str) -> "BufferDocument":
        return cls(_lines=text.split("\n"), version=0, dirty=False)

    def snapshot(self) -> Sequence[str]:
        """Return the current lines without exposing internal mutability."""

        return tuple(self._lines)

    def replace(self, *, lines: Iterable[str]) -> "BufferDocument":
        """Return a new document holding ``lines`` with a bumped version."""

        updated = list(lines) or [""]
        return BufferDocument(_lines=updated, version=self.version + 1, dirty=True)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    @property
    def length(self) -> int:
        return sum(len(line) for line in self._lines) + len(self._lines) - 1

    def get_line(self, index: int) -> str:
        return self._lines[index]

    def line_offset(self, index: int) -> int:
        """Offset of the first character of line ``index``."""

        return sum(len(line) + 1 for line in self._lines[:index])

    def text(self) -> str:
        return "\n".join(self._lines)

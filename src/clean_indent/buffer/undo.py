"""Undo and redo stacks of whole-text snapshots."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True, slots=True)
class UndoEntry:
    label: str
    before_text: str
    after_text: str
    point_before: int
    point_after: int


class UndoTimeline:
    """Undone entries wait on a second stack until a fresh edit discards them."""

    def __init__(self) -> None:
        self._done: List[UndoEntry] = []
        self._undone: List[UndoEntry] = []

    def __len__(self) -> int:
        return len(self._done)

    def record(self, entry: UndoEntry) -> None:
        self._done.append(entry)
        self._undone.clear()

    def undo(self) -> Optional[UndoEntry]:
        return self._shift(self._done, self._undone)

    def redo(self) -> Optional[UndoEntry]:
        return self._shift(self._undone, self._done)

    @staticmethod
    def _shift(source: List[UndoEntry], target: List[UndoEntry]) -> Optional[UndoEntry]:
        if not source:
            return None
        entry = source.pop()
        target.append(entry)
        return entry

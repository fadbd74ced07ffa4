"""Per-buffer state shared by the indent tracker and the unindenter."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from clean_indent.config import IndentConfig
from clean_indent.host import TextHost


@dataclass(frozen=True, slots=True)
class IndentMark:
    """Where the last auto-indent left point, and how long that line was."""

    position: int
    length: int


@dataclass(slots=True)
class IndentSession:
    """Explicit replacement for editor-global state.

    One session per buffer: it owns the single pending ``IndentMark`` and the
    on/off flag of the minor mode.
    """

    host: TextHost
    config: IndentConfig = field(default_factory=IndentConfig)
    enabled: bool = True
    mark: Optional[IndentMark] = None

    def set_mark(self, position: int, length: int) -> IndentMark:
        self.mark = IndentMark(position=position, length=length)
        return self.mark

    def clear_mark(self) -> None:
        self.mark = None


__all__ = ["IndentMark", "IndentSession"]

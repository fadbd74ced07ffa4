"""Adapter boundary types for syncing buffers with host widgets."""

from __future__ import annotations

from dataclasses import dataclass, field

from .state import Cursor


@dataclass(slots=True)
class BufferMirror:
    """Host-friendly snapshot describing the current buffer state."""

    text: str
    cursor: Cursor
    attributes: dict[str, str] = field(default_factory=dict)


class BufferValidationError(RuntimeError):
    """Raised when adapters or buffers provide out-of-bounds positions."""

    def __init__(
        self,
        message: str,
        *,
        cursor: Cursor | None = None,
        offset: int | None = None,
    ) -> None:
        super().__init__(message)
        self.cursor = cursor
        self.offset = offset

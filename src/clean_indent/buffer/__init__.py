"""Buffer abstractions: document, point, markers, kill registers and undo."""

from .buffer import Buffer, BufferDelta
from .document import BufferDocument
from .registers import RegisterBank, RegisterValue
from .state import BufferState, Cursor, Marker
from .sync import BufferMirror, BufferValidationError
from .undo import UndoEntry, UndoTimeline
from .validation import ensure_cursor, ensure_offset

__all__ = [
    "BufferDocument",
    "BufferState",
    "Cursor",
    "Marker",
    "RegisterBank",
    "RegisterValue",
    "UndoTimeline",
    "UndoEntry",
    "Buffer",
    "BufferDelta",
    "BufferMirror",
    "BufferValidationError",
    "ensure_cursor",
    "ensure_offset",
]

"""Host editor boundary: the primitive API and an in-memory implementation."""

from .base import TextHost
from .indenters import (
    INDENTERS,
    Indenter,
    PythonIndenter,
    create_indenter,
    display_width,
    indentation_width,
)
from .memory import BufferHost

__all__ = [
    "TextHost",
    "BufferHost",
    "Indenter",
    "PythonIndenter",
    "INDENTERS",
    "create_indenter",
    "indentation_width",
    "display_width",
]

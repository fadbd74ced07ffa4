"""Clean auto-indent and backspace-unindent behaviors."""

from .session import IndentMark, IndentSession
from .tracker import IndentTracker
from .unindent import BackwardUnindenter

__all__ = [
    "IndentMark",
    "IndentSession",
    "IndentTracker",
    "BackwardUnindenter",
]

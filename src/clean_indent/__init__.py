"""Clean auto-indent and backspace-unindent for line-based text buffers."""

__all__ = [
    "adapters",
    "actions",
    "buffer",
    "config",
    "host",
    "indent",
    "keymaps",
    "minor_mode",
    "modes",
    "runtime",
]

__version__ = "0.1.0"

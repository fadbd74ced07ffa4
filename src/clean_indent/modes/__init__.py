"""Key dispatch for one buffer.

``context`` holds the plain values shared with commands. The loop itself
lives in ``clean_indent.modes.command_loop``; it imports the keymap layer,
whose commands in turn need these values, so it is not re-exported here.
"""

from .context import KeyInput, ModeBus, ModeContext, ModeResult, PrefixArgument

__all__ = [
    "KeyInput",
    "ModeBus",
    "ModeContext",
    "ModeResult",
    "PrefixArgument",
]

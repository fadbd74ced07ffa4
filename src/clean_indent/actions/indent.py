"""Actions installed by the clean-indent minor mode."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from clean_indent.modes.context import ModeContext, ModeResult

if TYPE_CHECKING:
    from clean_indent.minor_mode import CleanIndentMode


def _require_minor_mode(context: ModeContext) -> "CleanIndentMode":
    mode = context.extras.get("clean_indent_mode")
    if mode is None:
        raise RuntimeError("ModeContext.extras missing 'clean_indent_mode'")
    return cast("CleanIndentMode", mode)


def newline_and_indent(context: ModeContext, binding) -> ModeResult:
    del binding
    _require_minor_mode(context).tracker.on_return()
    return ModeResult(consumed=True, status="indent_newline")


def backspace_unindent(context: ModeContext, binding) -> ModeResult:
    del binding
    _require_minor_mode(context).unindenter.on_backspace(context.prefix_count)
    return ModeResult(consumed=True, status="indent_backspace")


__all__ = ["newline_and_indent", "backspace_unindent"]

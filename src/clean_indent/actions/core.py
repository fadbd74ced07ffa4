"""Plain editing verbs: the host's default behavior for each key.

Handlers take ``(context, binding)``; counted verbs read
``context.prefix_count``, which the command loop resets after every command
that is not itself part of a prefix argument.
"""

from __future__ import annotations

from clean_indent.modes.context import ModeContext, ModeResult, PrefixArgument


def _argument_result(context: ModeContext) -> ModeResult:
    return ModeResult(
        consumed=True, status="prefix_arg", message=f"arg {context.prefix_count}"
    )


def universal_argument(context: ModeContext, binding) -> ModeResult:
    del binding
    argument = context.prefix_arg or PrefixArgument()
    argument.multiplier *= 4
    context.prefix_arg = argument
    return _argument_result(context)


def digit_argument(context: ModeContext, binding) -> ModeResult:
    argument = context.prefix_arg or PrefixArgument()
    argument.digits += binding.keys[-1].key
    context.prefix_arg = argument
    return _argument_result(context)


def negative_argument(context: ModeContext, binding) -> ModeResult:
    del binding
    argument = context.prefix_arg or PrefixArgument()
    argument.negative = not argument.negative
    context.prefix_arg = argument
    return _argument_result(context)


def newline(context: ModeContext, binding) -> ModeResult:
    del binding
    for _ in range(max(context.prefix_count, 0)):
        context.host.newline()
    return ModeResult(consumed=True, status="newline")


def backward_kill_word(context: ModeContext, binding) -> ModeResult:
    del binding
    context.host.kill_word(-context.prefix_count)
    return ModeResult(consumed=True, status="kill_word")


def delete_backward_char(context: ModeContext, binding) -> ModeResult:
    del binding
    context.host.delete_char(-context.prefix_count)
    return ModeResult(consumed=True, status="delete_char")


def forward_char(context: ModeContext, binding) -> ModeResult:
    del binding
    context.host.forward_char(context.prefix_count)
    return ModeResult(consumed=True, status="motion")


def backward_char(context: ModeContext, binding) -> ModeResult:
    del binding
    context.host.forward_char(-context.prefix_count)
    return ModeResult(consumed=True, status="motion")


def next_line(context: ModeContext, binding) -> ModeResult:
    del binding
    context.host.line_move(context.prefix_count)
    return ModeResult(consumed=True, status="motion")


def previous_line(context: ModeContext, binding) -> ModeResult:
    del binding
    context.host.line_move(-context.prefix_count)
    return ModeResult(consumed=True, status="motion")


def move_beginning_of_line(context: ModeContext, binding) -> ModeResult:
    del binding
    context.host.beginning_of_line()
    return ModeResult(consumed=True, status="motion")


def move_end_of_line(context: ModeContext, binding) -> ModeResult:
    del binding
    context.host.end_of_line()
    return ModeResult(consumed=True, status="motion")


def undo(context: ModeContext, binding) -> ModeResult:
    del binding
    if not context.buffer.undo():
        return ModeResult(consumed=True, status="undo_empty", message="No further undo")
    return ModeResult(consumed=True, status="undo")


def redo(context: ModeContext, binding) -> ModeResult:
    del binding
    if not context.buffer.redo():
        return ModeResult(consumed=True, status="redo_empty", message="No further redo")
    return ModeResult(consumed=True, status="redo")


__all__ = [
    "universal_argument",
    "digit_argument",
    "negative_argument",
    "newline",
    "backward_kill_word",
    "delete_backward_char",
    "forward_char",
    "backward_char",
    "next_line",
    "previous_line",
    "move_beginning_of_line",
    "move_end_of_line",
    "undo",
    "redo",
]

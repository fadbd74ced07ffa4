from __future__ import annotations

import pytest

from clean_indent.actions import indent as indent_actions
from clean_indent.buffer import Buffer
from clean_indent.config import IndentConfig
from clean_indent.host import BufferHost
from clean_indent.minor_mode import MODE_FLAG, IndentEditor, create_editor
from clean_indent.modes import KeyInput, ModeBus, ModeContext, ModeResult


def press(editor: IndentEditor, key: str, *modifiers: str) -> ModeResult:
    return editor.loop.handle_key(KeyInput(key=key, modifiers=modifiers))


def type_text(editor: IndentEditor, text: str) -> None:
    for char in text:
        editor.loop.handle_key(KeyInput(key=char, text=char))


def describe(editor: IndentEditor, *keys: str) -> str | None:
    return editor.loop.keymap.describe_key(*keys)


def test_enter_then_moving_up_trims_indent() -> None:
    editor = create_editor("  foo")

    result = press(editor, "ENTER")
    assert result.status == "indent_newline"
    assert editor.buffer.text == "  foo\n  "

    press(editor, "UP")

    assert editor.buffer.text == "  foo\n"
    assert editor.mode.session.mark is None
    assert editor.host.messages == ["auto trimmed 2 chars"]


def test_typed_text_survives_moving_away() -> None:
    editor = create_editor("  foo", config=IndentConfig(simple_indent_mode=True))

    press(editor, "RETURN")
    type_text(editor, "x")
    press(editor, "UP")

    assert editor.buffer.text == "  foo\n  x"
    assert editor.host.messages == []


def test_python_indenter_drives_return() -> None:
    editor = create_editor("def f():", indenter="python")

    press(editor, "ENTER")
    type_text(editor, "pass")
    press(editor, "ENTER")

    assert editor.buffer.text == "def f():\n    pass\n"


def test_meta_backspace_unindents() -> None:
    editor = create_editor("a\n    b\n        ")

    result = press(editor, "BACKSPACE", "alt")

    assert result.status == "indent_backspace"
    assert editor.buffer.text == "a\n    b\n    "


def test_escape_backspace_sequence_unindents() -> None:
    editor = create_editor("a\n    b\n        ")

    pending = press(editor, "ESC")
    assert pending.status == "pending"
    assert pending.timeout_ms is not None

    press(editor, "BACKSPACE")

    assert editor.buffer.text == "a\n    b\n    "


def test_escape_followed_by_text_replays_the_key() -> None:
    editor = create_editor("ab")

    press(editor, "ESC")
    result = editor.loop.handle_key(KeyInput(key="c", text="c"))

    assert result.status == "self_insert"
    assert editor.buffer.text == "abc"


def test_pending_escape_times_out_quietly() -> None:
    editor = create_editor("ab")
    press(editor, "ESC")

    result = editor.loop.flush_pending()

    assert result is not None and result.status == "timeout"
    assert editor.buffer.text == "ab"


def test_digit_argument_kills_several_words() -> None:
    editor = create_editor("  one two three")

    press(editor, "2", "alt")
    press(editor, "BACKSPACE", "alt")

    assert editor.buffer.text == "  one "
    assert editor.context.prefix_arg is None


def test_prefix_argument_is_ignored_inside_the_indent() -> None:
    editor = create_editor("a\n    b\n        ")

    press(editor, "u", "ctrl")
    result = press(editor, "BACKSPACE", "alt")

    assert result.status == "indent_backspace"
    assert editor.buffer.text == "a\n    b\n    "
    assert editor.context.prefix_arg is None


def test_undo_leaves_a_stale_mark_that_is_dropped() -> None:
    editor = create_editor("  foo")
    press(editor, "ENTER")

    result = press(editor, "z", "ctrl")

    assert result.status == "undo"
    assert editor.buffer.text == "  foo\n"
    assert editor.mode.session.mark is None


def test_enable_installs_bindings_and_hook() -> None:
    editor = create_editor("", enable=False)
    assert describe(editor, "ENTER") == "edit.newline"
    assert editor.loop.post_command_hooks == ()

    editor.mode.enable()
    editor.mode.enable()

    assert editor.mode.active is True
    assert editor.mode.session.enabled is True
    assert describe(editor, "ENTER") == "clean_indent.newline"
    assert describe(editor, "RETURN") == "clean_indent.newline"
    assert describe(editor, "alt+BACKSPACE") == "clean_indent.backspace_unindent"
    assert describe(editor, "ESC", "BACKSPACE") == "clean_indent.backspace_unindent"
    assert len(editor.loop.post_command_hooks) == 1
    assert editor.context.extras[MODE_FLAG] is editor.mode


def test_disable_restores_displaced_bindings() -> None:
    editor = create_editor("")
    keymap = editor.loop.keymap
    before = len(keymap)

    editor.mode.disable()
    editor.mode.disable()

    assert editor.mode.active is False
    assert len(keymap) == before
    assert describe(editor, "ENTER") == "edit.newline"
    assert describe(editor, "RETURN") == "edit.newline"
    assert describe(editor, "alt+BACKSPACE") == "edit.backward_kill_word"
    assert describe(editor, "ESC", "BACKSPACE") == "edit.backward_kill_word"
    assert keymap.is_prefix("ESC")
    assert editor.loop.post_command_hooks == ()


def test_disabled_mode_passes_keys_through() -> None:
    editor = create_editor("foo\n    ")
    editor.mode.disable()

    press(editor, "BACKSPACE", "alt")
    assert editor.buffer.text == ""

    type_text(editor, "  bar")
    press(editor, "ENTER")
    assert editor.buffer.text == "  bar\n"
    assert editor.mode.session.mark is None


def test_disable_drops_pending_mark() -> None:
    editor = create_editor("  foo")
    press(editor, "ENTER")
    assert editor.mode.session.mark is not None

    editor.mode.disable()

    assert editor.mode.session.mark is None
    assert editor.buffer.text == "  foo\n  "


def test_toggle_reports_state() -> None:
    editor = create_editor("")

    assert editor.mode.toggle() is False
    assert editor.mode.toggle() is True


def test_indent_actions_require_the_minor_mode() -> None:
    buffer = Buffer.from_text("")
    context = ModeContext(
        buffer=buffer,
        bus=ModeBus(),
        host=BufferHost(buffer),
    )

    with pytest.raises(RuntimeError):
        indent_actions.newline_and_indent(context, None)

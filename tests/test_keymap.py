from __future__ import annotations

import pytest

from clean_indent.keymaps import (
    DEFAULT_BINDINGS,
    Binding,
    Command,
    Keymap,
    KeymapConflictError,
    KeyStroke,
    default_keymap,
)


def make_keymap(*command_ids: str) -> Keymap:
    keymap = Keymap()
    for command_id in command_ids:
        keymap.define(Command(command_id, lambda context, binding: None))
    return keymap


def test_stroke_token_sorts_modifiers() -> None:
    assert KeyStroke("BACKSPACE", ("meta", "Alt")).token == "alt+meta+BACKSPACE"
    assert KeyStroke.parse("ctrl+z") == KeyStroke("z", ("ctrl",))
    assert KeyStroke.parse("alt+-").key == "-"
    assert KeyStroke.parse("ctrl++") == KeyStroke("+", ("ctrl",))
    assert KeyStroke.parse("+").token == "+"


def test_binding_rejects_long_sequences() -> None:
    with pytest.raises(ValueError):
        Binding.of("edit.x", "ctrl+x", "ctrl+c", "q")
    with pytest.raises(ValueError):
        Binding(keys=(), command_id="edit.x")


def test_bind_returns_the_displaced_binding() -> None:
    keymap = make_keymap("edit.newline", "indent.newline")
    plain = Binding.of("edit.newline", "ENTER")

    assert keymap.bind(plain) is None
    assert keymap.bind(Binding.of("indent.newline", "ENTER")) == plain
    assert keymap.describe_key("ENTER") == "indent.newline"
    assert len(keymap) == 1


def test_bind_requires_a_defined_command() -> None:
    keymap = make_keymap()

    with pytest.raises(KeyError):
        keymap.bind(Binding.of("edit.missing", "ENTER"))


def test_define_refuses_duplicates_unless_replacing() -> None:
    keymap = make_keymap("edit.newline")
    replacement = Command("edit.newline", lambda context, binding: "new")

    with pytest.raises(ValueError):
        keymap.define(replacement)

    keymap.define(replacement, replace=True)
    assert keymap.command("edit.newline") is replacement


def test_two_key_binding_makes_a_prefix() -> None:
    keymap = make_keymap("edit.kill")
    keymap.bind(Binding.of("edit.kill", "ESC", "BACKSPACE"))

    assert keymap.is_prefix("ESC")
    assert keymap.lookup(("ESC", "BACKSPACE")).command_id == "edit.kill"
    assert keymap.lookup(("ESC",)) is None

    keymap.unbind("ESC", "BACKSPACE")

    assert not keymap.is_prefix("ESC")
    assert keymap.unbind("ESC", "BACKSPACE") is None


def test_prefix_keys_cannot_also_be_bound_alone() -> None:
    keymap = make_keymap("edit.kill", "edit.cancel")
    keymap.bind(Binding.of("edit.kill", "ESC", "BACKSPACE"))

    with pytest.raises(KeymapConflictError):
        keymap.bind(Binding.of("edit.cancel", "ESC"))

    other = make_keymap("edit.kill", "edit.cancel")
    other.bind(Binding.of("edit.cancel", "ESC"))
    with pytest.raises(KeymapConflictError):
        other.bind(Binding.of("edit.kill", "ESC", "BACKSPACE"))


def test_default_keymap_covers_editing_and_argument_keys() -> None:
    keymap = default_keymap()

    assert len(keymap) == len(DEFAULT_BINDINGS)
    assert keymap.describe_key("RETURN") == "edit.newline"
    assert keymap.describe_key("alt+BACKSPACE") == "edit.backward_kill_word"
    assert keymap.describe_key("ESC", "BACKSPACE") == "edit.backward_kill_word"
    assert keymap.describe_key("ctrl+y") == "edit.redo"
    assert keymap.describe_key("ctrl+u") == "arg.universal"
    assert keymap.describe_key("alt+7") == "arg.digit"
    assert keymap.describe_key("alt+-") == "arg.negative"
    assert keymap.describe_key("F5") is None

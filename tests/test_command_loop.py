from __future__ import annotations

from typing import List

from clean_indent.buffer import Buffer
from clean_indent.host import BufferHost
from clean_indent.modes import KeyInput, ModeBus, ModeContext, ModeResult
from clean_indent.modes.command_loop import CommandLoop, key_token


def make_loop(text: str = "", **kwargs: object) -> CommandLoop:
    buffer = Buffer.from_text(text)
    context = ModeContext(buffer=buffer, bus=ModeBus(), host=BufferHost(buffer))
    return CommandLoop(context, **kwargs)  # type: ignore[arg-type]


def press(loop: CommandLoop, key: str, *modifiers: str, text: str | None = None) -> ModeResult:
    return loop.handle_key(KeyInput(key=key, modifiers=modifiers, text=text))


def test_key_token_normalizes_modifiers() -> None:
    assert key_token(KeyInput(key="BACKSPACE", modifiers=("Alt",))) == "alt+BACKSPACE"
    assert key_token(KeyInput(key="a", text="a")) == "a"


def test_post_command_hooks_skip_pending_prefixes() -> None:
    loop = make_loop()
    seen: List[str] = []
    loop.add_post_command_hook(lambda context, result: seen.append(result.status))

    pending = press(loop, "ESC")
    assert pending.status == "pending"
    assert pending.timeout_ms == 1000
    assert loop.pending_key is not None
    assert seen == []

    press(loop, "a", text="a")
    assert seen == ["self_insert"]
    assert loop.pending_key is None


def test_prefix_then_second_key_runs_the_sequence() -> None:
    loop = make_loop("foo bar")

    press(loop, "ESC")
    result = press(loop, "BACKSPACE")

    assert result.status == "kill_word"
    assert loop.context.buffer.text == "foo "


def test_expired_prefix_is_settled_once() -> None:
    loop = make_loop("ab", prefix_timeout_ms=50)
    seen: List[str] = []
    loop.add_post_command_hook(lambda context, result: seen.append(result.status))
    press(loop, "ESC")

    assert loop.process_timeout(now=0.0) is None

    result = loop.process_timeout(now=float("inf"))

    assert result is not None and result.status == "timeout"
    assert loop.process_timeout(now=float("inf")) is None
    assert seen == ["timeout"]
    assert loop.context.buffer.text == "ab"


def test_flush_pending_without_prefix_is_none() -> None:
    assert make_loop().flush_pending() is None


def test_hooks_register_once_and_can_be_removed() -> None:
    loop = make_loop()
    calls: List[int] = []

    def hook(context: ModeContext, result: ModeResult) -> None:
        calls.append(1)

    loop.add_post_command_hook(hook)
    loop.add_post_command_hook(hook)
    press(loop, "a", text="a")
    loop.remove_post_command_hook(hook)
    press(loop, "b", text="b")

    assert calls == [1]
    assert loop.post_command_hooks == ()
    assert loop.context.buffer.text == "ab"


def test_plain_editing_keys() -> None:
    loop = make_loop("ab\ncd")

    for key in ("HOME", "UP", "RIGHT", "BACKSPACE", "END", "ENTER"):
        press(loop, key)

    assert loop.context.buffer.text == "b\n\ncd"


def test_unprintable_keys_are_not_consumed() -> None:
    result = press(make_loop(), "F5")

    assert result.consumed is False
    assert result.status == "miss"


def test_digit_argument_repeats_the_next_command() -> None:
    loop = make_loop("one two three four")

    press(loop, "3", "alt", text="3")
    assert loop.context.prefix_count == 3

    press(loop, "BACKSPACE", "alt")

    assert loop.context.buffer.text == "one "
    assert loop.context.prefix_arg is None


def test_digits_accumulate() -> None:
    loop = make_loop()

    press(loop, "1", "alt")
    result = press(loop, "2", "alt")

    assert result.message == "arg 12"
    press(loop, "x", text="x")
    assert loop.context.buffer.text == "x" * 12


def test_universal_argument_multiplies_by_four() -> None:
    loop = make_loop()

    press(loop, "u", "ctrl")
    press(loop, "u", "ctrl")
    assert loop.context.prefix_count == 16

    press(loop, "a", text="a")
    press(loop, "b", text="b")

    assert loop.context.buffer.text == "a" * 16 + "b"


def test_negative_argument_kills_forward() -> None:
    loop = make_loop("foo bar")
    loop.context.host.goto_char(0)

    press(loop, "-", "alt")
    press(loop, "BACKSPACE", "alt")

    assert loop.context.buffer.text == " bar"


def test_argument_survives_a_pending_prefix() -> None:
    loop = make_loop("one two three")

    press(loop, "2", "alt")
    press(loop, "ESC")
    press(loop, "BACKSPACE")

    assert loop.context.buffer.text == "one "

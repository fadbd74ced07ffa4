from __future__ import annotations

from typing import Any, Sequence, Tuple

from clean_indent.config import IndentConfig
from clean_indent.host import BufferHost
from clean_indent.indent import BackwardUnindenter, IndentSession


def make_unindenter(
    lines: Sequence[str], row: int, col: int, **config: Any
) -> Tuple[BufferHost, BackwardUnindenter]:
    settings = IndentConfig(**config)
    host = BufferHost.from_text("\n".join(lines), config=settings)
    host.buffer.set_cursor(row, col)
    return host, BackwardUnindenter(IndentSession(host=host, config=settings))


def current_line(host: BufferHost) -> str:
    row, _ = host.buffer.cursor
    return host.buffer.lines()[row]


def test_inside_indent_region() -> None:
    host, unindenter = make_unindenter(["    foo"], 0, 2)
    assert unindenter.is_inside_indent_region() is True

    host.buffer.set_cursor(0, 4)
    assert unindenter.is_inside_indent_region() is True

    host.buffer.set_cursor(0, 5)
    assert unindenter.is_inside_indent_region() is False
    assert host.point() == 5


def test_unindent_stops_at_first_smaller_width() -> None:
    host, unindenter = make_unindenter(["a", "    b", "    c", "        d"], 3, 8)

    unindenter.on_backspace()

    assert current_line(host) == "    d"
    assert host.current_column() == 4


def test_unindent_walks_past_equal_widths() -> None:
    host, unindenter = make_unindenter(["a", "    b", "        c", "        d"], 3, 8)

    assert unindenter.find_smaller_indent(8) == 4
    unindenter.on_backspace()

    assert current_line(host) == "    d"


def test_unindent_from_start_of_line_aligns_first() -> None:
    host, unindenter = make_unindenter(["    a", "        b"], 1, 0)

    unindenter.on_backspace()

    assert host.buffer.text == "    a\n    b"
    assert host.current_column() == 4


def test_zero_length_lines_are_skipped() -> None:
    host, unindenter = make_unindenter(["x", "", "        b"], 2, 8)

    unindenter.on_backspace()

    assert current_line(host) == "b"


def test_whitespace_only_lines_are_not_blank() -> None:
    host, unindenter = make_unindenter(["a", "  b", "      ", "", "        d"], 4, 8)

    unindenter.on_backspace()

    assert current_line(host) == "      d"


def test_scan_stops_at_buffer_top() -> None:
    host, unindenter = make_unindenter(["        a"], 0, 8)

    with host.save_excursion():
        assert unindenter.previous_non_blank_line() is False
    assert unindenter.find_smaller_indent(8) == 8
    unindenter.on_backspace()

    assert host.buffer.text == "        a"
    assert host.point() == 8


def test_unindent_splits_tabs() -> None:
    host, unindenter = make_unindenter(["  a", "\t\tb"], 1, 2, tab_width=4)

    unindenter.on_backspace()

    assert current_line(host) == "  b"


def test_outside_indent_falls_back_to_word_kill() -> None:
    host, unindenter = make_unindenter(["    foo bar"], 0, 6)

    unindenter.on_backspace()

    assert host.buffer.text == "    o bar"
    assert host.buffer.registers.get().text == "fo"


def test_count_is_passed_to_word_kill() -> None:
    host, unindenter = make_unindenter(["foo bar baz"], 0, 11)

    unindenter.on_backspace(2)

    assert host.buffer.text == "foo "


def test_disabled_session_always_kills_words() -> None:
    host, unindenter = make_unindenter(["foo", "    "], 1, 4)
    unindenter.session.enabled = False

    unindenter.on_backspace()

    assert host.buffer.text == ""

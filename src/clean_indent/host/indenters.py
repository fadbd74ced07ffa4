"""Mode-specific indentation policies used by ``newline_and_indent``.

An indenter only answers one question: given the lines of a buffer and the
row of a freshly opened line, how many columns should that line be indented?
The host applies the answer.
"""

from __future__ import annotations

from typing import Callable, Sequence

BLOCK_OPENERS = (":", "(", "[", "{")
BLOCK_ENDERS = ("return", "pass", "break", "continue")
BLOCK_ENDER_PREFIXES = ("return ", "raise ")


def display_width(text: str, tab_width: int) -> int:
    """Column reached after ``text`` when tabs stop every ``tab_width`` columns."""

    column = 0
    for char in text:
        column = (column // tab_width + 1) * tab_width if char == "\t" else column + 1
    return column


def indentation_width(line: str, tab_width: int) -> int:
    """Display width of the leading blanks of ``line``.

    >>> indentation_width("\\t  x", 8)
    10
    """

    blanks = len(line) - len(line.lstrip(" \t"))
    return display_width(line[:blanks], tab_width)


class Indenter:
    """Copy the indentation of the previous line that has any text on it."""

    name = "basic"

    def __init__(self, *, tab_width: int = 8, indent_width: int = 4) -> None:
        self.tab_width = tab_width
        self.indent_width = indent_width

    def find_indent(self, lines: Sequence[str], row: int) -> int:
        previous = self.previous_code_line(lines, row)
        if previous is None:
            return 0
        return indentation_width(lines[previous], self.tab_width)

    def previous_code_line(self, lines: Sequence[str], row: int) -> int | None:
        for index in range(row - 1, -1, -1):
            if lines[index].strip():
                return index
        return None


class PythonIndenter(Indenter):
    """Indent after block openers, dedent after statements that end a block."""

    name = "python"

    def find_indent(self, lines: Sequence[str], row: int) -> int:
        previous = self.previous_code_line(lines, row)
        if previous is None:
            return 0
        indent = indentation_width(lines[previous], self.tab_width)
        stripped = lines[previous].strip()
        if stripped.endswith(BLOCK_OPENERS):
            return indent + self.indent_width
        if stripped in BLOCK_ENDERS or stripped.startswith(BLOCK_ENDER_PREFIXES):
            return max(0, indent - self.indent_width)
        return indent


IndenterFactory = Callable[..., Indenter]

INDENTERS: dict[str, IndenterFactory] = {
    Indenter.name: Indenter,
    PythonIndenter.name: PythonIndenter,
}


def create_indenter(name: str, *, tab_width: int = 8, indent_width: int = 4) -> Indenter:
    try:
        factory = INDENTERS[name]
    except KeyError as exc:
        raise KeyError(f"Unknown indenter '{name}'") from exc
    return factory(tab_width=tab_width, indent_width=indent_width)


__all__ = [
    "Indenter",
    "PythonIndenter",
    "INDENTERS",
    "create_indenter",
    "display_width",
    "indentation_width",
]

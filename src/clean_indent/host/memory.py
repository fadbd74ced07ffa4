"""In-memory ``TextHost`` backed by a :class:`~clean_indent.buffer.Buffer`."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, List, Optional

from clean_indent.buffer import Buffer
from clean_indent.config import IndentConfig
from clean_indent.runtime import telemetry

from .indenters import Indenter, display_width, indentation_width

BLANKS = " \t"


def _leading_blanks(line: str) -> int:
    return len(line) - len(line.lstrip(BLANKS))


def _is_word_char(char: str) -> bool:
    return char.isalnum()


class BufferHost:
    """Emacs-flavoured primitive editing API over a single buffer."""

    def __init__(
        self,
        buffer: Optional[Buffer] = None,
        *,
        config: Optional[IndentConfig] = None,
        indenter: Optional[Indenter] = None,
    ) -> None:
        self.buffer = buffer or Buffer()
        self.config = config or IndentConfig()
        self.indenter = indenter or Indenter(
            tab_width=self.config.tab_width,
            indent_width=self.config.indent_width,
        )
        self.messages: List[str] = []

    @classmethod
    def from_text(
        cls,
        text: str,
        *,
        point: int | None = None,
        config: Optional[IndentConfig] = None,
        indenter: Optional[Indenter] = None,
    ) -> "BufferHost":
        return cls(Buffer.from_text(text, point=point), config=config, indenter=indenter)

    @property
    def tab_width(self) -> int:
        return self.config.tab_width

    def _line(self) -> str:
        row, _ = self.buffer.cursor
        return self.buffer.document.get_line(row)

    # cursor -----------------------------------------------------------------

    def point(self) -> int:
        return self.buffer.point

    def point_min(self) -> int:
        return 0

    def point_max(self) -> int:
        return self.buffer.length

    def goto_char(self, offset: int) -> int:
        return self.buffer.goto(offset)

    def line_beginning_position(self) -> int:
        return self.buffer.line_bounds(self.point())[0]

    def line_end_position(self) -> int:
        return self.buffer.line_bounds(self.point())[1]

    def beginning_of_line(self) -> None:
        self.goto_char(self.line_beginning_position())

    def end_of_line(self) -> None:
        self.goto_char(self.line_end_position())

    def back_to_indentation(self) -> int:
        return self.goto_char(self.line_beginning_position() + _leading_blanks(self._line()))

    def forward_line(self, count: int) -> bool:
        row, _ = self.buffer.cursor
        target = row + count
        clamped = max(0, min(target, self.buffer.document.line_count - 1))
        self.buffer.set_cursor(clamped, 0)
        return clamped == target

    def forward_char(self, count: int) -> bool:
        target = self.point() + count
        return self.goto_char(target) == target

    def line_move(self, count: int) -> bool:
        column = self.current_column()
        moved = self.forward_line(count)
        self.move_to_column(column)
        return moved

    def current_column(self) -> int:
        start = self.line_beginning_position()
        return display_width(self._line()[: self.point() - start], self.tab_width)

    def move_to_column(self, column: int) -> int:
        start = self.line_beginning_position()
        line = self._line()
        index = 0
        reached = 0
        while index < len(line) and reached < column:
            reached = display_width(line[: index + 1], self.tab_width)
            index += 1
        self.goto_char(start + index)
        return reached

    @contextmanager
    def save_excursion(self) -> Iterator[None]:
        marker = self.buffer.create_marker(self.point())
        try:
            yield
        finally:
            self.buffer.release_marker(marker)
            self.goto_char(marker.offset)

    # text queries -------------------------------------------------------------

    def current_indentation(self) -> int:
        return indentation_width(self._line(), self.tab_width)

    def line_length(self) -> int:
        return len(self._line())

    def line_length_at(self, offset: int) -> Optional[int]:
        if offset < self.point_min() or offset > self.point_max():
            return None
        start, end = self.buffer.line_bounds(offset)
        return end - start

    # mutation -----------------------------------------------------------------

    def insert(self, text: str) -> None:
        self.buffer.insert_text(text)

    def delete_char(self, count: int) -> int:
        point = self.point()
        target = max(self.point_min(), min(point + count, self.point_max()))
        if target == point:
            return 0
        self.buffer.replace_range(point, target, "", label="delete_char")
        return abs(target - point)

    def newline(self) -> None:
        self.buffer.insert_text("\n")

    def newline_and_indent(self) -> None:
        self.delete_horizontal_space(backward_only=True)
        self.newline()
        row, _ = self.buffer.cursor
        self.indent_line_to(self.indenter.find_indent(self.buffer.lines(), row))

    def indent_string(self, column: int) -> str:
        if self.config.indent_tabs_mode:
            tabs, spaces = divmod(column, self.tab_width)
            return "\t" * tabs + " " * spaces
        return " " * column

    def indent_line_to(self, column: int) -> None:
        """Set the current line's indentation; point inside it moves to its end."""

        start = self.line_beginning_position()
        blanks = _leading_blanks(self._line())
        was_inside = self.point() - start <= blanks
        indent = self.indent_string(column)
        if self._line()[:blanks] != indent:
            self.buffer.replace_range(start, start + blanks, indent, label="indent_line")
        if was_inside:
            self.goto_char(start + len(indent))

    def delete_horizontal_space(self, backward_only: bool = False) -> int:
        start = self.line_beginning_position()
        line = self._line()
        left = right = self.point() - start
        while left > 0 and line[left - 1] in BLANKS:
            left -= 1
        if not backward_only:
            while right < len(line) and line[right] in BLANKS:
                right += 1
        if left == right:
            return 0
        self.buffer.replace_range(
            start + left, start + right, "", label="delete_horizontal_space"
        )
        return right - left

    def delete_trailing_whitespace(self) -> int:
        line = self._line()
        trailing = len(line) - len(line.rstrip(BLANKS))
        if not trailing:
            return 0
        end = self.line_end_position()
        self.buffer.replace_range(
            end - trailing, end, "", label="delete_trailing_whitespace"
        )
        return trailing

    def delete_backward_char_untabify(self, count: int) -> int:
        """Delete ``count`` columns backward, splitting tabs into spaces first."""

        deleted = 0
        for _ in range(count):
            point = self.point()
            if point <= self.point_min():
                break
            if self.buffer.text[point - 1] == "\t":
                after = self.current_column()
                self.goto_char(point - 1)
                before = self.current_column()
                self.goto_char(point)
                self.buffer.replace_range(
                    point - 1, point, " " * (after - before), label="untabify"
                )
                point = self.point()
            self.buffer.replace_range(point - 1, point, "", label="delete_backward_char")
            deleted += 1
        return deleted

    def kill_word(self, count: int) -> str:
        text = self.buffer.text
        point = self.point()
        position = point
        if count < 0:
            for _ in range(-count):
                while position > 0 and not _is_word_char(text[position - 1]):
                    position -= 1
                while position > 0 and _is_word_char(text[position - 1]):
                    position -= 1
            start, end = position, point
        else:
            for _ in range(count):
                while position < len(text) and not _is_word_char(text[position]):
                    position += 1
                while position < len(text) and _is_word_char(text[position]):
                    position += 1
            start, end = point, position
        killed = text[start:end]
        if killed:
            self.buffer.replace_range(start, end, "", label="kill_word")
            self.buffer.registers.kill(killed)
        return killed

    # diagnostics --------------------------------------------------------------

    def message(self, text: str) -> None:
        self.messages.append(text)
        telemetry.record_event(
            "host.message",
            data={"buffer": self.buffer.name, "text": text},
            logger_name="clean_indent.host",
        )


__all__ = ["BufferHost"]

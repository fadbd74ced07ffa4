"""Backspace inside leading whitespace jumps back to an outer indentation level."""

from __future__ import annotations

from clean_indent.host import TextHost
from clean_indent.runtime import telemetry

from .session import IndentSession


class BackwardUnindenter:
    """Context-sensitive backward delete.

    Outside the indentation of a line this is a plain backward word kill.
    Inside it, the line is dedented to the width of the nearest preceding
    non-blank line that is indented strictly less than the current one.
    """

    def __init__(self, session: IndentSession) -> None:
        self.session = session

    @property
    def host(self) -> TextHost:
        return self.session.host

    def is_inside_indent_region(self) -> bool:
        point = self.host.point()
        with self.host.save_excursion():
            first_text = self.host.back_to_indentation()
        return point <= first_text

    def on_backspace(self, count: int = 1) -> None:
        if not self.session.enabled or not self.is_inside_indent_region():
            self.host.kill_word(-count)
            return

        current = self.host.current_indentation()
        target = self.find_smaller_indent(current)
        # the scan can end on a deeper line when it hits the buffer top
        if target >= current:
            return

        self.host.move_to_column(current)
        self.host.delete_backward_char_untabify(current - target)
        telemetry.record_event(
            "indent.unindent",
            level="debug",
            data={"from": current, "to": target},
            logger_name="clean_indent.indent",
        )

    def find_smaller_indent(self, start: int) -> int:
        """Width of the closest earlier line indented less than ``start``.

        Lines indented exactly ``start`` are walked past. The scan ends at
        the first zero-width line or at the top of the buffer, whichever comes
        first, and reports the last width it read.
        """

        with self.host.save_excursion():
            width = self.host.current_indentation()
            while width > 0 and width >= start:
                if not self.previous_non_blank_line():
                    break
                width = self.host.current_indentation()
        return width

    def previous_non_blank_line(self) -> bool:
        """Step up past zero-length lines; report whether point moved at all.

        Whitespace-only lines are not skipped.
        """

        moved = False
        while self.host.forward_line(-1):
            moved = True
            if self.host.line_length() > 0:
                break
        return moved


__all__ = ["BackwardUnindenter"]

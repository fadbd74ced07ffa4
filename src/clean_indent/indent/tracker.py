"""Newline-and-indent that takes its indentation back when it goes unused."""

from __future__ import annotations

from clean_indent.host import TextHost
from clean_indent.runtime import telemetry

from .session import IndentSession
from .unindent import BackwardUnindenter


class IndentTracker:
    """Remembers the whitespace inserted by RET and trims it once abandoned.

    A line counts as abandoned when point has left it and its length still
    equals the length captured right after the indent. Only the length is
    compared, so replacing the whitespace with an equally long different run
    still counts as untouched.
    """

    def __init__(
        self,
        session: IndentSession,
        *,
        unindenter: BackwardUnindenter | None = None,
    ) -> None:
        self.session = session
        self.unindenter = unindenter or BackwardUnindenter(session)

    @property
    def host(self) -> TextHost:
        return self.session.host

    def on_return(self) -> None:
        if not self.session.enabled:
            self.host.newline()
            return

        # back-to-back RET presses never see a post-command check in between
        self.trim_abandoned()

        if self.session.config.simple_indent_mode:
            self.simple_insert_and_indent()
        else:
            self.host.newline_and_indent()

        position = self.host.point()
        length = self.host.line_length_at(position)
        mark = self.session.set_mark(position, length or 0)
        telemetry.record_event(
            "indent.mark",
            level="debug",
            data={"position": mark.position, "length": mark.length},
            logger_name="clean_indent.indent",
        )

    def check_abandoned(self) -> bool:
        mark = self.session.mark
        if mark is None or self.host.point() == mark.position:
            return False
        length = self.host.line_length_at(mark.position)
        if length is None:
            return False
        return length == mark.length

    def trim_abandoned(self) -> int:
        """Remove the whitespace of an abandoned auto-indent; return chars removed."""

        mark = self.session.mark
        if mark is None or not self.check_abandoned():
            return 0
        with self.host.save_excursion():
            self.host.goto_char(mark.position)
            trimmed = self.host.delete_trailing_whitespace()
            self.host.end_of_line()
        self.session.clear_mark()

        telemetry.record_event(
            "indent.trim",
            data={"position": mark.position, "trimmed": trimmed},
            logger_name="clean_indent.indent",
        )
        if trimmed and self.session.config.report_trims:
            self.host.message(f"auto trimmed {trimmed} chars")
        return trimmed

    def on_post_command(self) -> None:
        mark = self.session.mark
        if mark is None or self.host.point() == mark.position:
            return
        self.trim_abandoned()
        self.session.clear_mark()

    def simple_insert_and_indent(self) -> None:
        """Break the line and copy the indentation of the last non-blank line."""

        self.host.delete_horizontal_space(backward_only=True)
        self.host.newline()
        with self.host.save_excursion():
            self.unindenter.previous_non_blank_line()
            column = self.host.current_indentation()
        self.host.indent_line_to(column)


__all__ = ["IndentTracker"]

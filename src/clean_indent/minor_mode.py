"""Clean-indent minor mode: installs and removes the RET / M-Backspace overrides."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from clean_indent.buffer import Buffer
from clean_indent.config import IndentConfig
from clean_indent.host import BufferHost, Indenter, create_indenter
from clean_indent.indent import BackwardUnindenter, IndentSession, IndentTracker
from clean_indent.keymaps import CLEAN_INDENT_BINDINGS, CLEAN_INDENT_COMMANDS, Binding
from clean_indent.modes import ModeBus, ModeContext, ModeResult
from clean_indent.modes.command_loop import CommandLoop
from clean_indent.runtime import telemetry

MODE_FLAG = "clean_indent_mode"
TOGGLED_EVENT = "clean_indent.toggled"


class CleanIndentMode:
    """Buffer-local toggle for clean auto-indent and backspace-unindent.

    Enabling defines the two commands, rebinds ``ENTER``/``RETURN`` and
    ``alt+BACKSPACE`` (plus ``ESC BACKSPACE``), and hooks the abandonment
    check into the loop's post-command cycle. Whatever bindings were
    displaced are put back on disable.
    """

    def __init__(
        self,
        loop: CommandLoop,
        *,
        config: IndentConfig | None = None,
        session: IndentSession | None = None,
    ) -> None:
        self.loop = loop
        self.context = loop.context
        self.session = session or IndentSession(
            host=self.context.host,
            config=config or IndentConfig(),
            enabled=False,
        )
        self.unindenter = BackwardUnindenter(self.session)
        self.tracker = IndentTracker(self.session, unindenter=self.unindenter)
        self._displaced: List[Binding] = []
        self._installed = False
        self.context.extras[MODE_FLAG] = self

    @property
    def active(self) -> bool:
        return self._installed

    @property
    def config(self) -> IndentConfig:
        return self.session.config

    def enable(self) -> None:
        if self._installed:
            return
        keymap = self.loop.keymap
        with telemetry.span("clean_indent::enable", logger_name="clean_indent.mode"):
            for command in CLEAN_INDENT_COMMANDS:
                keymap.define(command, replace=True)
            for binding in CLEAN_INDENT_BINDINGS:
                displaced = keymap.bind(binding)
                if displaced is not None:
                    self._displaced.append(displaced)
            self.loop.add_post_command_hook(self._post_command)
        self.session.enabled = True
        self._installed = True
        self.context.bus.emit(TOGGLED_EVENT, True)
        telemetry.record_event(
            "mode.enable",
            data={"buffer": self.context.buffer.name, "displaced": len(self._displaced)},
        )

    def disable(self) -> None:
        if not self._installed:
            return
        keymap = self.loop.keymap
        self.session.enabled = False
        self.session.clear_mark()
        with telemetry.span("clean_indent::disable", logger_name="clean_indent.mode"):
            for binding in CLEAN_INDENT_BINDINGS:
                keymap.unbind(*binding.tokens)
            for binding in self._displaced:
                keymap.bind(binding)
            self.loop.remove_post_command_hook(self._post_command)
        restored = len(self._displaced)
        self._displaced.clear()
        self._installed = False
        self.context.bus.emit(TOGGLED_EVENT, False)
        telemetry.record_event(
            "mode.disable",
            data={"buffer": self.context.buffer.name, "restored": restored},
        )

    def toggle(self) -> bool:
        if self._installed:
            self.disable()
        else:
            self.enable()
        return self._installed

    def _post_command(self, context: ModeContext, result: ModeResult) -> None:
        del context, result
        if self.session.enabled:
            self.tracker.on_post_command()


@dataclass(slots=True)
class IndentEditor:
    """Everything needed to drive one buffer from key events."""

    buffer: Buffer
    host: BufferHost
    context: ModeContext
    loop: CommandLoop
    mode: CleanIndentMode


def create_editor(
    text: str = "",
    *,
    config: Optional[IndentConfig] = None,
    indenter: Indenter | str | None = None,
    point: int | None = None,
    enable: bool = True,
) -> IndentEditor:
    """Wire a buffer, host, command loop and clean-indent mode together."""

    config = config or IndentConfig()
    if isinstance(indenter, str):
        indenter = create_indenter(
            indenter, tab_width=config.tab_width, indent_width=config.indent_width
        )
    buffer = Buffer.from_text(text, point=point)
    host = BufferHost(buffer, config=config, indenter=indenter)
    context = ModeContext(buffer=buffer, bus=ModeBus(), host=host)
    loop = CommandLoop(context)
    mode = CleanIndentMode(loop, config=config)
    if enable:
        mode.enable()
    return IndentEditor(buffer=buffer, host=host, context=context, loop=loop, mode=mode)


__all__ = [
    "CleanIndentMode",
    "IndentEditor",
    "create_editor",
    "MODE_FLAG",
    "TOGGLED_EVENT",
]

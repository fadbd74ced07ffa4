"""Textual demo: edit one buffer with the clean-indent mode switched on."""

from __future__ import annotations

import argparse
from dataclasses import replace
from pathlib import Path
from typing import Optional, Sequence, Tuple

try:  # pragma: no cover - imported only when demo is run
    from textual import events
    from textual.app import App, ComposeResult
    from textual.widgets import Footer, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use clean_indent.adapters.textual.app"
    ) from exc

from clean_indent.buffer import BufferMirror
from clean_indent.config import IndentConfig
from clean_indent.host import INDENTERS
from clean_indent.minor_mode import IndentEditor, create_editor
from clean_indent.runtime import telemetry

from .controller import TextualIndentAdapter, TextualUIHooks

CURSOR_GLYPH = "█"
APP_KEYS = frozenset({"ctrl+c", "ctrl+q", "ctrl+t"})

KeyTriple = Tuple[str, Optional[str], Tuple[str, ...]]


class CleanIndentApp(App[None]):
    """Buffer view, a status row and a message row for trim reports."""

    CSS = """
	#buffer {
		height: 1fr;
		border: round $accent;
		padding: 0 1;
		overflow: auto;
	}

	.infoline {
		height: 1;
		padding: 0 1;
		background: $surface-darken-1;
	}
	"""

    BINDINGS = [
        ("ctrl+c", "quit", "Quit"),
        ("ctrl+q", "quit", "Quit"),
        ("ctrl+t", "toggle_clean_indent", "Toggle clean-indent"),
    ]

    def __init__(
        self,
        *,
        text: str = "",
        config: IndentConfig | None = None,
        indenter: str = "basic",
    ) -> None:
        super().__init__()
        self.editor: IndentEditor = create_editor(
            text, config=config or IndentConfig.from_env(), indenter=indenter
        )
        self.adapter: TextualIndentAdapter | None = None
        self._log = telemetry.get_logger("clean_indent.adapters.textual")

    def compose(self) -> ComposeResult:
        yield Static("", id="buffer", markup=False)
        yield Static("", id="status", classes="infoline", markup=False)
        yield Static("", id="message", classes="infoline", markup=False)
        yield Footer()

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            update_buffer=self._draw_buffer,
            update_status=lambda text: self._set_line("#status", text),
            show_message=lambda text: self._set_line("#message", text),
            log=self._log.debug,
        )
        self.adapter = TextualIndentAdapter(self.editor.loop, self.editor.mode, hooks)
        self.set_interval(0.1, self._tick)

    def action_toggle_clean_indent(self) -> None:
        if self.adapter:
            self.adapter.toggle_mode()

    def _tick(self) -> None:
        if self.adapter:
            self.adapter.process_timeout()

    def on_key(self, event: events.Key) -> None:
        translated = key_triple(event)
        if self.adapter is None or translated is None:
            return
        key, text, modifiers = translated
        self.adapter.handle_textual_key(key, text=text, modifiers=modifiers)
        event.stop()

    def _draw_buffer(self, mirror: BufferMirror) -> None:
        point = self.editor.buffer.point
        self._set_line("#buffer", mirror.text[:point] + CURSOR_GLYPH + mirror.text[point:])

    def _set_line(self, selector: str, text: str) -> None:
        self.query_one(selector, Static).update(text)


def key_triple(event: events.Key) -> Optional[KeyTriple]:
    """``(key, text, modifiers)`` for the adapter, or None for app-level keys."""

    if event.key in APP_KEYS:
        return None
    if event.key == "tab":
        return ("TAB", "\t", ())
    char = event.character
    if char and len(char) == 1 and char.isprintable():
        # modified printables ("alt+3") keep their name so bindings can match
        return (event.key if "+" in event.key[:-1] else char, char, ())
    return (event.key, None, ())


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the clean-indent Textual demo.")
    parser.add_argument("path", nargs="?", help="File to load into the buffer")
    parser.add_argument(
        "--indenter",
        choices=sorted(INDENTERS),
        default="basic",
        help="Indentation policy used by RET (default: basic)",
    )
    parser.add_argument(
        "--simple",
        action="store_true",
        help="Copy the previous non-blank line's indentation instead",
    )
    parser.add_argument(
        "--log-preset",
        choices=telemetry.PRESETS,
        help="telelog preset to configure before starting",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    if args.log_preset:
        telemetry.configure(preset=args.log_preset)
    config = IndentConfig.from_env()
    if args.simple:
        config = replace(config, simple_indent_mode=True)
    text = Path(args.path).read_text(encoding="utf-8") if args.path else ""
    CleanIndentApp(text=text, config=config, indenter=args.indenter).run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()

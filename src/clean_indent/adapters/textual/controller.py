"""Textual-facing adapter: key translation, redraw callbacks and status text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional

from clean_indent.buffer import BufferMirror
from clean_indent.minor_mode import TOGGLED_EVENT, CleanIndentMode
from clean_indent.modes import KeyInput, ModeResult
from clean_indent.modes.command_loop import CommandLoop


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_buffer: Callable[[BufferMirror], None]
    update_status: Callable[[str], None] = _noop
    show_message: Callable[[str], None] = _noop
    # Optional realtime log callback a host may use to surface debug lines
    log: Callable[[str], None] = _noop


class TextualIndentAdapter:
    """Feeds Textual keys to a CommandLoop and mirrors clean-indent state back."""

    def __init__(
        self,
        loop: CommandLoop,
        mode: CleanIndentMode,
        hooks: TextualUIHooks,
    ) -> None:
        self.loop = loop
        self.mode = mode
        self.hooks = hooks
        self._seen_messages = 0
        self.loop.context.bus.subscribe(TOGGLED_EVENT, self._on_toggled)
        self._refresh_buffer()
        self._refresh_status()

    def handle_textual_key(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> ModeResult:
        """Translate a Textual key event into a KeyInput and dispatch it."""

        key, parsed = _split_textual_key(key)
        normalized_modifiers = tuple(
            sorted({str(mod).lower() for mod in (*parsed, *modifiers)})
        )
        self._log_state("key ->", key=key, text=text, mods=normalized_modifiers)
        result = self.loop.handle_key(
            KeyInput(key=key, text=text, modifiers=normalized_modifiers)
        )
        self._after_mode_result(result)
        self._log_state(
            "result <-",
            consumed=result.consumed,
            status=result.status,
            message=result.message,
            timeout_ms=result.timeout_ms,
        )
        return result

    def toggle_mode(self) -> bool:
        return self.mode.toggle()

    def _on_toggled(self, payload: object | None) -> None:
        active = bool(payload)
        self._refresh_status("clean-indent on" if active else "clean-indent off")
        self._log_state("toggle ->", active=active)

    def process_timeout(self) -> Optional[ModeResult]:
        """Settle an expired prefix key and surface the outcome."""

        result = self.loop.process_timeout()
        if result is not None:
            self._log_state("timeout ->", status=result.status)
            self._after_mode_result(result)
        return result

    def _after_mode_result(self, result: ModeResult) -> None:
        self._refresh_buffer()
        self._flush_messages()
        self._refresh_status(result.message or result.status)

    def _flush_messages(self) -> None:
        messages: List[str] = getattr(self.loop.context.host, "messages", [])
        for message in messages[self._seen_messages :]:
            self.hooks.show_message(message)
        self._seen_messages = len(messages)

    def _refresh_buffer(self) -> None:
        mirror = self.loop.context.buffer.mirror()
        self.hooks.update_buffer(mirror)

    def _refresh_status(self, detail: str | None = None) -> None:
        row, col = self.loop.context.buffer.cursor
        parts = [
            "CleanIndent" if self.mode.active else "plain",
            f"{row + 1}:{col}",
        ]
        mark = self.mode.session.mark
        if mark is not None:
            parts.append(f"mark@{mark.position}")
        if detail:
            parts.append(detail)
        self.hooks.update_status("  ".join(parts))

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        buffer = self.loop.context.buffer
        pending = self.loop.pending_key
        return {
            "pending": pending.key if pending else None,
            "clean_indent": self.mode.active,
            "cursor": buffer.cursor,
            "mark": self.mode.session.mark,
            "buffer": buffer.name,
            "buffer_version": buffer.document.version,
        }


_TEXTUAL_KEYS = {
    "enter": "ENTER",
    "backspace": "BACKSPACE",
    "escape": "ESC",
    "left": "LEFT",
    "right": "RIGHT",
    "up": "UP",
    "down": "DOWN",
    "home": "HOME",
    "end": "END",
    "tab": "TAB",
    "minus": "-",
}


def _split_textual_key(key: str) -> tuple[str, tuple[str, ...]]:
    """Split Textual's ``alt+backspace`` style names into key and modifiers."""

    *modifiers, base = key.split("+") if key != "+" else [key]
    return _TEXTUAL_KEYS.get(base.lower(), base), tuple(modifiers)


__all__ = ["TextualIndentAdapter", "TextualUIHooks"]

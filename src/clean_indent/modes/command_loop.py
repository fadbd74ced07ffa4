"""Command loop: key events in, commands run, post-command hooks after."""

from __future__ import annotations

import time
from typing import Callable, List, Optional, Tuple

from clean_indent.keymaps import Binding, Keymap, KeyStroke, default_keymap
from clean_indent.runtime import telemetry

from .context import KeyInput, ModeContext, ModeResult

PostCommandHook = Callable[[ModeContext, ModeResult], None]


def key_token(key: KeyInput) -> str:
    return KeyStroke(key.key, tuple(key.modifiers)).token


class CommandLoop:
    """Runs one command per key and the post-command hooks after each.

    A prefix key (the first key of a two-key binding, such as ``ESC``) is
    held in a single slot until the next key arrives or the slot expires.
    Hooks do not run while a prefix is held. Unbound printable keys insert
    themselves, repeated by the prefix count.
    """

    def __init__(
        self,
        context: ModeContext,
        *,
        keymap: Keymap | None = None,
        prefix_timeout_ms: int = 1000,
    ) -> None:
        self.context = context
        self.keymap = keymap or default_keymap()
        self.prefix_timeout_ms = prefix_timeout_ms
        self._held: Optional[Tuple[KeyInput, float]] = None
        self._hooks: List[PostCommandHook] = []

    @property
    def pending_key(self) -> Optional[KeyInput]:
        return self._held[0] if self._held else None

    @property
    def post_command_hooks(self) -> tuple[PostCommandHook, ...]:
        return tuple(self._hooks)

    def add_post_command_hook(self, hook: PostCommandHook) -> None:
        if hook not in self._hooks:
            self._hooks.append(hook)

    def remove_post_command_hook(self, hook: PostCommandHook) -> None:
        if hook in self._hooks:
            self._hooks.remove(hook)

    def handle_key(self, key: KeyInput) -> ModeResult:
        token = key_token(key)
        if self._held is not None:
            prefix, _ = self._held
            self._held = None
            binding = self.keymap.lookup((key_token(prefix), token))
            if binding is not None:
                return self._finish(self._run(binding))
            # dead end: settle the prefix alone, then treat this key afresh
            settled = self._dispatch(prefix)
            if settled.consumed:
                self._finish(settled)

        if self.keymap.is_prefix(token):
            deadline = time.monotonic() + self.prefix_timeout_ms / 1000.0
            self._held = (key, deadline)
            return ModeResult(
                consumed=True,
                status="pending",
                message="awaiting_sequence",
                timeout_ms=self.prefix_timeout_ms,
            )
        return self._finish(self._dispatch(key))

    def process_timeout(self, now: float | None = None) -> Optional[ModeResult]:
        """Settle a held prefix whose deadline has passed."""

        if self._held is None:
            return None
        if (time.monotonic() if now is None else now) < self._held[1]:
            return None
        return self.flush_pending()

    def flush_pending(self) -> Optional[ModeResult]:
        if self._held is None:
            return None
        key, _ = self._held
        self._held = None
        result = self._dispatch(key)
        if not result.consumed:
            result = ModeResult(consumed=False, status="timeout", message="pending_timeout")
        return self._finish(result)

    def _dispatch(self, key: KeyInput) -> ModeResult:
        binding = self.keymap.lookup((key_token(key),))
        if binding is not None:
            return self._run(binding)
        if key.text and (key.text.isprintable() or key.text == "\t"):
            self.context.host.insert(key.text * max(self.context.prefix_count, 0))
            return ModeResult(consumed=True, status="self_insert")
        return ModeResult(consumed=False, status="miss", message="unhandled")

    def _run(self, binding: Binding) -> ModeResult:
        command = self.keymap.command(binding.command_id)
        with telemetry.span(
            f"command::{command.id}",
            logger_name="clean_indent.commands",
            metadata={"keys": binding.signature},
        ):
            outcome = command(self.context, binding)
        if isinstance(outcome, ModeResult):
            return outcome
        return ModeResult(consumed=True)

    def _finish(self, result: ModeResult) -> ModeResult:
        if result.status != "prefix_arg":
            self.context.prefix_arg = None
        for hook in list(self._hooks):
            hook(self.context, result)
        return result


__all__ = ["CommandLoop", "PostCommandHook", "key_token"]

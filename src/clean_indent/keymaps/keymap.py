"""A single editing keymap: commands by id, bindings by key tokens."""

from __future__ import annotations

from collections import Counter
from typing import Dict, Iterator, Optional, Sequence

from clean_indent.runtime import telemetry

from .models import Binding, Command, KeyStroke


class KeymapConflictError(RuntimeError):
    """A binding would shadow, or be shadowed by, a prefix key."""

    def __init__(self, binding: Binding, other: Binding) -> None:
        super().__init__(
            f"'{binding.signature}' clashes with prefix binding '{other.signature}'"
        )
        self.binding = binding
        self.other = other


class Keymap:
    """Bindings keyed by their token tuple.

    The first key of every two-key binding is a prefix key and cannot be
    bound on its own at the same time.
    """

    def __init__(self) -> None:
        self._commands: Dict[str, Command] = {}
        self._bindings: Dict[tuple[str, ...], Binding] = {}
        self._prefixes: Counter[str] = Counter()

    def __len__(self) -> int:
        return len(self._bindings)

    def __iter__(self) -> Iterator[Binding]:
        return iter(self._bindings.values())

    def define(self, command: Command, *, replace: bool = False) -> Command:
        if not replace and command.id in self._commands:
            raise ValueError(f"Command '{command.id}' already defined")
        self._commands[command.id] = command
        return command

    def command(self, command_id: str) -> Command:
        try:
            return self._commands[command_id]
        except KeyError as exc:
            raise KeyError(f"Command '{command_id}' is not defined") from exc

    def bind(self, binding: Binding) -> Optional[Binding]:
        """Install ``binding`` and return whatever it displaced from its keys."""

        self.command(binding.command_id)
        self._check_prefixes(binding)
        displaced = self._bindings.pop(binding.tokens, None)
        self._bindings[binding.tokens] = binding
        if displaced is None and len(binding.tokens) > 1:
            self._prefixes[binding.tokens[0]] += 1
        telemetry.record_event(
            "keymap.bind",
            level="debug",
            data={"keys": binding.signature, "command": binding.command_id},
            logger_name="clean_indent.keymaps",
        )
        return displaced

    def unbind(self, *keys: str) -> Optional[Binding]:
        tokens = _tokens(keys)
        binding = self._bindings.pop(tokens, None)
        if binding is not None and len(tokens) > 1:
            self._prefixes[tokens[0]] -= 1
            if not self._prefixes[tokens[0]]:
                del self._prefixes[tokens[0]]
        return binding

    def lookup(self, tokens: Sequence[str]) -> Optional[Binding]:
        return self._bindings.get(tuple(tokens))

    def is_prefix(self, token: str) -> bool:
        return token in self._prefixes

    def describe_key(self, *keys: str) -> Optional[str]:
        """Command id run by ``keys`` (written as in ``Binding.of``), if any."""

        binding = self.lookup(_tokens(keys))
        return binding.command_id if binding else None

    def _check_prefixes(self, binding: Binding) -> None:
        first = binding.tokens[0]
        if len(binding.tokens) == 1 and self.is_prefix(first):
            other = next(b for b in self if len(b.tokens) > 1 and b.tokens[0] == first)
            raise KeymapConflictError(binding, other)
        if len(binding.tokens) > 1 and (first,) in self._bindings:
            raise KeymapConflictError(binding, self._bindings[(first,)])


def _tokens(keys: Sequence[str]) -> tuple[str, ...]:
    return tuple(KeyStroke.parse(key).token for key in keys)


__all__ = ["Keymap", "KeymapConflictError"]

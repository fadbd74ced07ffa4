"""Key strokes, commands and the bindings that join them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable

MAX_SEQUENCE = 2


def normalize_modifiers(modifiers: Iterable[str]) -> tuple[str, ...]:
    cleaned = {m.strip().lower() for m in modifiers if m.strip()}
    return tuple(sorted(cleaned))


@dataclass(frozen=True, slots=True)
class KeyStroke:
    """One key press; ``token`` is the spelling used for keymap lookups.

    >>> KeyStroke.parse("meta+alt+BACKSPACE").token
    'alt+meta+BACKSPACE'
    """

    key: str
    modifiers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("key cannot be empty")
        object.__setattr__(self, "modifiers", normalize_modifiers(self.modifiers))

    @property
    def token(self) -> str:
        return "+".join((*self.modifiers, self.key))

    @classmethod
    def parse(cls, text: str) -> "KeyStroke":
        head, sep, key = text.rpartition("+")
        if sep and not key:
            # a trailing "+" names the plus key itself, as in "ctrl++"
            head, key = head.removesuffix("+"), "+"
        return cls(key=key, modifiers=tuple(head.split("+")))


@dataclass(frozen=True, slots=True)
class Command:
    """A named editing verb; handlers take ``(context, binding)``."""

    id: str
    handler: Callable[..., object]
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("command id cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")

    def __call__(self, *args: object) -> object:
        return self.handler(*args)


@dataclass(frozen=True, slots=True)
class Binding:
    """Runs ``command_id`` when ``keys`` are pressed in order.

    Only single keys and two-key sequences (a prefix key plus one more, as in
    ``ESC BACKSPACE``) are supported.
    """

    keys: tuple[KeyStroke, ...]
    command_id: str

    def __post_init__(self) -> None:
        if not 1 <= len(self.keys) <= MAX_SEQUENCE:
            raise ValueError(
                f"binding for '{self.command_id}' needs 1 to {MAX_SEQUENCE} keys"
            )
        if not self.command_id:
            raise ValueError("binding command_id cannot be empty")

    @classmethod
    def of(cls, command_id: str, *keys: str) -> "Binding":
        return cls(keys=tuple(KeyStroke.parse(k) for k in keys), command_id=command_id)

    @property
    def tokens(self) -> tuple[str, ...]:
        return tuple(stroke.token for stroke in self.keys)

    @property
    def signature(self) -> str:
        return " ".join(self.tokens)


__all__ = [
    "MAX_SEQUENCE",
    "KeyStroke",
    "Command",
    "Binding",
    "normalize_modifiers",
]

"""Values passed between the command loop, commands and adapters."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Optional, Tuple

from clean_indent.buffer import Buffer
from clean_indent.host import TextHost


@dataclass(slots=True)
class KeyInput:
    """Normalized key event handed to the command loop."""

    key: str
    modifiers: Tuple[str, ...] = ()
    text: Optional[str] = None


@dataclass(slots=True)
class ModeResult:
    """What a command (or the loop itself) did with a key."""

    consumed: bool
    status: str = "ok"
    message: Optional[str] = None
    timeout_ms: Optional[int] = None


@dataclass(slots=True)
class PrefixArgument:
    """Numeric argument typed before a command.

    ``ctrl+u`` multiplies by four, ``alt+<digit>`` spells the number and
    ``alt+-`` flips the sign. Typed digits win over the multiplier.
    """

    digits: str = ""
    multiplier: int = 1
    negative: bool = False

    @property
    def value(self) -> int:
        magnitude = int(self.digits) if self.digits else self.multiplier
        return -magnitude if self.negative else magnitude


@dataclass(slots=True)
class ModeContext:
    """Shared services every command can reach."""

    buffer: Buffer
    bus: "ModeBus"
    host: TextHost
    prefix_arg: Optional[PrefixArgument] = None
    extras: Dict[str, object] = field(default_factory=dict)

    @property
    def prefix_count(self) -> int:
        return self.prefix_arg.value if self.prefix_arg else 1


class ModeBus:
    """Minimal event bus for toggles and other UI-facing signals."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def unsubscribe(self, event: str, callback: Callable[[object], None]) -> None:
        callbacks = self._subscribers.get(event, [])
        if callback in callbacks:
            callbacks.remove(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in list(self._subscribers.get(event, [])):
            callback(payload)


__all__ = ["KeyInput", "ModeResult", "PrefixArgument", "ModeContext", "ModeBus"]

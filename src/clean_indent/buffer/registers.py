"""Kill registers filled by word deletions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

UNNAMED = '"'


@dataclass(slots=True)
class RegisterValue:
    text: str
    type: str = "character"


class RegisterBank:
    """Named registers; every write also lands in the unnamed register."""

    def __init__(self) -> None:
        self._registers: Dict[str, RegisterValue] = {UNNAMED: RegisterValue(text="")}

    def get(self, name: str = UNNAMED) -> RegisterValue:
        return self._registers.get(name, RegisterValue(text=""))

    def set(self, name: str, value: RegisterValue) -> None:
        self._registers[name] = value
        if name != UNNAMED:
            self._registers[UNNAMED] = value

    def kill(self, text: str, *, name: str = UNNAMED) -> None:
        if not text:
            return
        self.set(name, RegisterValue(text=text))

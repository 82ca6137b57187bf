"""Keystroke sound modes and the tone picked for each character."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class SoundMode(str, Enum):
    OFF = "off"
    BEEP = "beep"
    TYPEWRITER = "typewriter"

    @property
    def label(self) -> str:
        return {"off": "Off", "beep": "Beeps", "typewriter": "Typewriter"}[self.value]


@dataclass(frozen=True)
class Tone:
    frequency: int
    duration_ms: int = 50
    gain: float = 0.1


# (space, any other key)
_FREQUENCIES = {
    SoundMode.BEEP: (800, 600),
    SoundMode.TYPEWRITER: (200, 350),
}


def tone_for(char: str, mode: Union[SoundMode, str]) -> Optional[Tone]:
    """Tone for one typed character, or None when sound is off."""
    mode = SoundMode(mode)
    if mode is SoundMode.OFF:
        return None
    space, other = _FREQUENCIES[mode]
    return Tone(frequency=space if char == " " else other)

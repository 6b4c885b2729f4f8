from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Protocol

from packages.core.monitor.types import SoundType

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Tone:
    offset_ms: int  # from the start of the pattern
    frequency_hz: int
    duration_ms: int


TONE_PATTERNS: Dict[str, List[Tone]] = {
    # three rising beeps
    "beep": [
        Tone(0, 800, 300),
        Tone(350, 1000, 300),
        Tone(700, 1200, 300),
    ],
    # two-pitch siren
    "alarm": [
        Tone(0, 800, 200),
        Tone(250, 600, 300),
        Tone(600, 900, 500),
        Tone(1150, 600, 300),
        Tone(1500, 900, 500),
    ],
    "notification": [
        Tone(0, 1200, 150),
        Tone(175, 1600, 150),
    ],
}


def pattern_for(sound_type: str) -> List[Tone]:
    return TONE_PATTERNS.get(sound_type, TONE_PATTERNS["beep"])


class SoundPlayer(Protocol):
    def play(self, sound_type: SoundType) -> None:
        ...


class WinBeepSound:
    """
    Plays tone patterns with winsound.Beep. Beep blocks for the tone length,
    so patterns run on a daemon thread unless ``threaded`` is False.
    """

    def __init__(
        self,
        beep: Optional[Callable[[int, int], None]] = None,
        threaded: bool = True,
    ) -> None:
        self._beep = beep
        self._threaded = threaded

    def play(self, sound_type: SoundType) -> None:
        tones = pattern_for(sound_type)
        if not self._threaded:
            self._play_pattern(tones)
            return
        threading.Thread(
            target=self._play_pattern, args=(tones,), name="WinBeepSound", daemon=True
        ).start()

    def _play_pattern(self, tones: List[Tone]) -> None:
        try:
            beep = self._beep
            if beep is None:
                import winsound
                beep = winsound.Beep
            started = time.monotonic()
            for tone in tones:
                wait = tone.offset_ms / 1000.0 - (time.monotonic() - started)
                if wait > 0:
                    time.sleep(wait)
                beep(tone.frequency_hz, tone.duration_ms)
        except Exception:
            log.exception("Failed to play sound")

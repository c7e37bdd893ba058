# src/quadono/core/sound.py

from __future__ import annotations

import logging
import sys
import time

from .ports import Beeper

logger = logging.getLogger(__name__)


class TerminalBeeper:
    """
    Audible signal for the console.

    Windows gets a real tone via winsound; everything else rings the terminal bell
    and waits for the tone duration so consecutive beeps stay distinguishable.
    Both block the calling thread: async callers go through asyncio.to_thread.
    """

    def beep(self, frequency: int, duration_ms: int) -> None:
        if sys.platform == "win32":
            import winsound

            winsound.Beep(int(frequency), int(duration_ms))
            return
        sys.stdout.write("\a")
        sys.stdout.flush()
        time.sleep(max(0, duration_ms) / 1000.0)


class SilentBeeper:
    def beep(self, frequency: int, duration_ms: int) -> None:
        return


def make_beeper(enabled: bool) -> Beeper:
    return TerminalBeeper() if enabled else SilentBeeper()


def safe_beep(beeper: Beeper | None, *tones: tuple[int, int]) -> None:
    """
    Play tones and never raise.

    A missing speaker or a closed stdout must not change what the caller does next:
    an alarm still gets removed and a countdown still reports completion.
    """
    if beeper is None:
        return
    for frequency, duration_ms in tones:
        try:
            beeper.beep(frequency, duration_ms)
        except Exception:
            logger.debug("beep(%s, %s) failed; ignoring.", frequency, duration_ms, exc_info=True)
            return

# src/quadono/alarms/alarm_monitor.py

from __future__ import annotations

"""
Alarm monitor.

A small polling loop that:
- reads the current "HH:MM",
- loads the whole alarm file,
- fires (announces + removes) every alarm whose time equals the current minute,
- rewrites the file only when something fired,
- waits about a second, unless the shared cancellation event is set.

The alarm file is line-oriented ("HH:MM|note") and owned by this component.
"""

import asyncio
import logging
from datetime import datetime
from enum import StrEnum
from pathlib import Path

from ..core.ports import Beeper, Clock
from ..core.sound import safe_beep
from .alarm_models import Alarm

logger = logging.getLogger(__name__)

ALARM_TONE = (1000, 500)


class MonitorState(StrEnum):
    IDLE = "idle"
    RUNNING = "running"
    STOPPED = "stopped"


class AlarmMonitor:
    def __init__(
        self,
        path: str | Path = "alarms.txt",
        *,
        clock: Clock | None = None,
        beeper: Beeper | None = None,
        poll_seconds: float = 1.0,
    ) -> None:
        self._path = Path(path)
        self._clock = clock or datetime.now
        self._beeper = beeper
        self._poll_s = max(0.01, float(poll_seconds))
        self.state = MonitorState.IDLE

    @property
    def path(self) -> Path:
        return self._path

    # ---- file helpers ----

    def _ensure_file(self) -> None:
        if not self._path.exists():
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text("", "utf-8")

    def _read_lines(self) -> list[str]:
        if not self._path.exists():
            return []
        return [ln for ln in self._path.read_text("utf-8").splitlines() if ln.strip()]

    def _write_lines(self, lines: list[str]) -> None:
        self._path.write_text("".join(f"{ln}\n" for ln in lines), "utf-8")

    # ---- set command ----

    def add_alarm(self, time: str, note: str) -> Alarm:
        """
        Append one alarm to the file (the only writer besides the loop itself).

        Line breaks in the note become spaces; the file holds one alarm per line.
        """
        alarm = Alarm(time=time, note=" ".join(note.splitlines()))
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with self._path.open("a", encoding="utf-8") as f:
            f.write(alarm.to_line() + "\n")
        logger.info("Alarm set time=%s note=%r", alarm.time, alarm.note)
        return alarm

    def list_alarms(self) -> list[Alarm]:
        out: list[Alarm] = []
        for line in self._read_lines():
            alarm = Alarm.from_line(line)
            if alarm is not None:
                out.append(alarm)
        return out

    # ---- polling ----

    def check_once(self) -> list[Alarm]:
        """
        One iteration: fire every alarm due this minute.
        Announces and removes them; the audible signal is left to tick().

        The scan runs from the end of the file to the start, so same-minute alarms
        are announced in reverse file order. Lines that do not parse are kept as-is.
        """
        now = self._clock().strftime("%H:%M")
        lines = self._read_lines()
        fired: list[Alarm] = []

        for i in range(len(lines) - 1, -1, -1):
            alarm = Alarm.from_line(lines[i])
            if alarm is None or alarm.time != now:
                continue
            self._announce(alarm)
            del lines[i]
            fired.append(alarm)

        if fired:
            self._write_lines(lines)
        return fired

    def _announce(self, alarm: Alarm) -> None:
        print(f"\n[ALARM] {alarm.time} {alarm.note}", flush=True)
        logger.info("Alarm fired time=%s note=%r", alarm.time, alarm.note)

    async def tick(self) -> list[Alarm]:
        """check_once() plus one beep per fired alarm, played off the event loop."""
        fired = self.check_once()
        for _ in fired:
            await asyncio.to_thread(safe_beep, self._beeper, ALARM_TONE)
        return fired

    async def run(self, cancel: asyncio.Event) -> None:
        """
        Poll until `cancel` is set.

        Cancellation is cooperative: it is observed between iterations, and the
        wait between iterations returns early when the event is set.
        """
        self.state = MonitorState.RUNNING
        logger.info("Alarm monitor started file=%s interval=%.2fs", self._path, self._poll_s)
        try:
            self._ensure_file()
            while not cancel.is_set():
                try:
                    await self.tick()
                except (OSError, ValueError):
                    # ValueError covers UnicodeDecodeError from a file that is not UTF-8.
                    logger.exception("Alarm check failed file=%s", self._path)

                if cancel.is_set():
                    break
                try:
                    await asyncio.wait_for(cancel.wait(), timeout=self._poll_s)
                except asyncio.TimeoutError:
                    pass
        finally:
            self.state = MonitorState.STOPPED
            logger.info("Alarm monitor stopped.")

# src/quadono/focus/pomodoro.py

from __future__ import annotations

"""
Focus timer (pomodoro).

One session = one work countdown followed by one break countdown.
- An optional task ref is resolved up front; an unknown ref starts nothing.
- Any key press during a countdown ends that phase early, and the rest of the
  session (break, task completion, history line) is skipped.
- A session that runs both phases to the end marks the bound task done and
  appends one line to the history log.
"""

import asyncio
import csv
import logging
import sys
from datetime import datetime
from enum import StrEnum
from pathlib import Path
from typing import Any, TextIO

from ..core.ports import Beeper, Clock, KeyInput, Sleeper, TaskRepo
from ..core.sound import safe_beep

logger = logging.getLogger(__name__)

PHASE_DONE_TONES = ((800, 300), (1000, 300))
NO_TASK = "none"


class CountdownResult(StrEnum):
    COMPLETED = "completed"
    INTERRUPTED = "interrupted"


class SessionOutcome(StrEnum):
    TASK_NOT_FOUND = "task_not_found"
    INTERRUPTED = "interrupted"
    COMPLETED = "completed"


class _NoKeys:
    def open(self) -> None:
        return

    def poll(self) -> bool:
        return False

    def close(self) -> None:
        return


def _format_left(seconds: float) -> str:
    total = max(0, int(seconds + 0.999))
    minutes, secs = divmod(total, 60)
    return f"{minutes:02d}:{secs:02d}"


class FocusTimer:
    def __init__(
        self,
        task_store: TaskRepo | None,
        history_path: str | Path = "history.log",
        *,
        work_minutes: int = 25,
        break_minutes: int = 5,
        tick_seconds: float = 1.0,
        keys: KeyInput | None = None,
        beeper: Beeper | None = None,
        clock: Clock | None = None,
        sleep: Sleeper | None = None,
        out: TextIO | None = None,
    ) -> None:
        self._store = task_store
        self._history_path = Path(history_path)
        self.work_minutes = int(work_minutes)
        self.break_minutes = int(break_minutes)
        self._tick_s = max(0.01, float(tick_seconds))
        self._keys = keys or _NoKeys()
        self._beeper = beeper
        self._clock = clock or datetime.now
        self._sleep = sleep or asyncio.sleep
        self._out = out

    @property
    def history_path(self) -> Path:
        return self._history_path

    def _print(self, text: str = "", *, end: str = "\n") -> None:
        stream = self._out or sys.stdout
        stream.write(text + end)
        stream.flush()

    async def start(self, task_ref: str | None = None) -> SessionOutcome:
        task: Any | None = None
        if task_ref is not None:
            task = self._store.find(task_ref) if self._store is not None else None
            if task is None:
                self._print("Task not found.")
                logger.info("Focus session not started: no task matches %r", task_ref)
                return SessionOutcome.TASK_NOT_FOUND

        title = task.title if task is not None else NO_TASK
        logger.info("Focus session started task=%r work=%sm break=%sm", title, self.work_minutes, self.break_minutes)

        self._keys.open()
        try:
            self._print(f"[FOCUS] Work {self.work_minutes} min, task: {title}")
            if await self.countdown(self.work_minutes * 60, "Work") is CountdownResult.INTERRUPTED:
                return self._interrupted(title)

            self._print(f"[FOCUS] Break {self.break_minutes} min")
            if await self.countdown(self.break_minutes * 60, "Break") is CountdownResult.INTERRUPTED:
                return self._interrupted(title)
        finally:
            self._keys.close()

        if task is not None and self._store is not None:
            if self._store.done(task.id) is not None:
                self._print("Task marked as done.")
            else:
                self._print("Task no longer exists; nothing to mark done.")
                logger.info("Bound task id=%s vanished during the session", task.id)

        self._append_history(title)
        logger.info("Focus session completed task=%r", title)
        return SessionOutcome.COMPLETED

    def _interrupted(self, title: str) -> SessionOutcome:
        logger.info("Focus session interrupted task=%r", title)
        return SessionOutcome.INTERRUPTED

    async def countdown(self, duration_seconds: float, phase: str) -> CountdownResult:
        """
        Count down to now + duration_seconds, one tick at a time.

        Each tick checks for a pending key press before redrawing the display line
        and yielding for tick_seconds.
        """
        end = self._clock().timestamp() + max(0.0, float(duration_seconds))

        while True:
            left = end - self._clock().timestamp()
            if left <= 0:
                break
            if self._keys.poll():
                self._print()
                self._print(f"[FOCUS] {phase} stopped early by user.")
                return CountdownResult.INTERRUPTED
            self._print(f"\r{phase} {_format_left(left)} left  ", end="")
            await self._sleep(min(self._tick_s, left))

        self._print()
        self._print(f"[FOCUS] {phase} finished.")
        await asyncio.to_thread(safe_beep, self._beeper, *PHASE_DONE_TONES)
        return CountdownResult.COMPLETED

    def _append_history(self, title: str) -> None:
        """Append `timestamp, task title (or none), work minutes` as one CSV row."""
        stamp = self._clock().strftime("%Y-%m-%d %H:%M")
        self._history_path.parent.mkdir(parents=True, exist_ok=True)
        with self._history_path.open("a", encoding="utf-8", newline="") as f:
            csv.writer(f).writerow([stamp, title, self.work_minutes])

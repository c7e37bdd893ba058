# src/quadono/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the runtime.

The timer and the monitor depend on Protocols instead of concrete implementations.
This keeps the terminal, the clock and the speaker swappable and makes testing easier.
"""

from collections.abc import Awaitable, Callable
from datetime import datetime
from typing import Any, Protocol

Clock = Callable[[], datetime]
# Returns local wall-clock time (datetime.now by default).

Sleeper = Callable[[float], Awaitable[None]]
# Cooperative delay (asyncio.sleep by default).


class TaskRepo(Protocol):
    """The part of TaskStore the focus timer needs."""

    def find(self, ref: str) -> Any | None: ...
    def done(self, ref: str) -> Any | None: ...


class KeyInput(Protocol):
    """
    Non-blocking "did the user press something?" check.

    open()/close() bracket a polling session (e.g. switch the terminal into cbreak mode).
    poll() consumes at most one pending key and returns True if there was one.
    """

    def open(self) -> None: ...
    def poll(self) -> bool: ...
    def close(self) -> None: ...


class Beeper(Protocol):
    def beep(self, frequency: int, duration_ms: int) -> None: ...

# src/quadono/runtime/host.py

"""
Runtime host.

Runs one foreground unit of work next to the alarm monitor loop:
- both are asyncio tasks on the same loop,
- they share one cancellation event that only the monitor observes,
- the foreground finishes on its own schedule and is never cancelled by the host,
- stop() sets the event, waits for the monitor to leave its loop and returns.
  A foreground task still running at that point is abandoned with the process.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from ..alarms.alarm_monitor import AlarmMonitor

logger = logging.getLogger(__name__)

Foreground = Callable[[], Awaitable[Any]]


class RuntimeHost:
    def __init__(
        self,
        foreground: Foreground,
        monitor: AlarmMonitor,
        *,
        stop_timeout: float = 5.0,
    ) -> None:
        self._foreground = foreground
        self._monitor = monitor
        self._stop_timeout = float(stop_timeout)
        self._cancel = asyncio.Event()
        self._fg_task: asyncio.Task[Any] | None = None
        self._monitor_task: asyncio.Task[None] | None = None

    @property
    def cancel_event(self) -> asyncio.Event:
        return self._cancel

    @property
    def foreground_task(self) -> asyncio.Task[Any] | None:
        return self._fg_task

    @property
    def monitor_task(self) -> asyncio.Task[None] | None:
        return self._monitor_task

    async def start(self) -> None:
        if self._monitor_task is not None:
            raise RuntimeError("RuntimeHost already started")

        self._fg_task = asyncio.create_task(self._foreground(), name="quadono-foreground")
        self._fg_task.add_done_callback(_log_foreground_result)
        self._monitor_task = asyncio.create_task(self._monitor.run(self._cancel), name="quadono-alarms")
        self._monitor_task.add_done_callback(_log_monitor_exit)
        logger.info("Runtime host started.")

    async def stop(self) -> None:
        self._cancel.set()
        if self._monitor_task is None:
            return
        try:
            await asyncio.wait_for(asyncio.shield(self._monitor_task), timeout=self._stop_timeout)
        except asyncio.TimeoutError:
            logger.warning("Alarm monitor did not stop within %.1fs.", self._stop_timeout)
        except Exception:
            # _log_monitor_exit has already reported it at ERROR.
            logger.debug("Alarm monitor ended with an error.", exc_info=True)

        if self._fg_task is not None and not self._fg_task.done():
            logger.info("Foreground work still running at shutdown; abandoning it.")
        logger.info("Runtime host stopped.")

    async def run_until(self, stop: asyncio.Event) -> None:
        """start(), block until `stop` is set (e.g. by a signal handler), then stop()."""
        await self.start()
        try:
            await stop.wait()
        finally:
            await self.stop()


def _log_foreground_result(task: asyncio.Task[Any]) -> None:
    if task.cancelled():
        logger.debug("Foreground work cancelled.")
        return
    exc = task.exception()
    if exc is not None:
        logger.error("Foreground work failed.", exc_info=exc)
        return
    logger.info("Foreground work finished result=%s", task.result())


def _log_monitor_exit(task: asyncio.Task[None]) -> None:
    if task.cancelled():
        logger.debug("Alarm monitor task cancelled.")
        return
    exc = task.exception()
    if exc is not None:
        logger.error("Alarm monitor crashed; alarms will not fire.", exc_info=exc)

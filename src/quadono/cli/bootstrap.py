# src/quadono/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local directories exist,
- wires the task store, alarm monitor and focus timer into AppState.
"""

from __future__ import annotations

import logging

from ..alarms.alarm_monitor import AlarmMonitor
from ..config import get_settings
from ..core.keys import TerminalKeys
from ..core.sound import make_beeper
from ..core.state import AppState
from ..focus.pomodoro import FocusTimer
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.tasks_path.parent.mkdir(parents=True, exist_ok=True)
    settings.alarms_path.parent.mkdir(parents=True, exist_ok=True)
    settings.history_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    beeper = make_beeper(settings.bell_enabled)
    task_store = TaskStore(settings.tasks_path)

    return AppState(
        settings=settings,
        task_store=task_store,
        alarm_monitor=AlarmMonitor(
            settings.alarms_path,
            beeper=beeper,
            poll_seconds=settings.alarm_poll_seconds,
        ),
        focus_timer=FocusTimer(
            task_store,
            settings.history_path,
            work_minutes=settings.work_minutes,
            break_minutes=settings.break_minutes,
            tick_seconds=settings.tick_seconds,
            keys=TerminalKeys(),
            beeper=beeper,
        ),
    )

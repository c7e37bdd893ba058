# src/quadono/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..alarms.alarm_monitor import AlarmMonitor
from ..focus.pomodoro import FocusTimer
from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    # Store Settings on the state for easy access in command handlers.
    settings: object

    task_store: TaskStore
    alarm_monitor: AlarmMonitor
    focus_timer: FocusTimer

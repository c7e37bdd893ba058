# tests/conftest.py

from __future__ import annotations

import io
from pathlib import Path
from types import SimpleNamespace

import pytest

from quadono.alarms.alarm_monitor import AlarmMonitor
from quadono.core.state import AppState
from quadono.focus.pomodoro import FocusTimer
from quadono.tasks.task_store import TaskStore

from .fakes import FakeBeeper, FakeClock, FakeKeys


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and AppState.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="quadono",
        log_level="WARNING",
        log_dir=tmp_path / "logs",
        data_dir=tmp_path,
        tasks_path=tmp_path / "quadono.json",
        alarms_path=tmp_path / "alarms.txt",
        history_path=tmp_path / "history.log",
        work_minutes=25,
        break_minutes=5,
        tick_seconds=1.0,
        alarm_poll_seconds=0.01,
        bell_enabled=False,
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> TaskStore:
    return TaskStore(settings.tasks_path)


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def beeper() -> FakeBeeper:
    return FakeBeeper()


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore, clock: FakeClock, beeper: FakeBeeper) -> AppState:
    """
    AppState wired with deterministic fakes.

    NOTE: We keep the real file-backed stores because their behaviour on disk is
    part of what we want to test.
    """
    return AppState(
        settings=settings,
        task_store=store,
        alarm_monitor=AlarmMonitor(
            settings.alarms_path,
            clock=clock,
            beeper=beeper,
            poll_seconds=settings.alarm_poll_seconds,
        ),
        focus_timer=FocusTimer(
            store,
            settings.history_path,
            keys=FakeKeys(),
            beeper=beeper,
            clock=clock,
            sleep=clock.sleep,
            out=io.StringIO(),
        ),
    )

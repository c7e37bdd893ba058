# tests/test_commands.py

from __future__ import annotations

import asyncio
import json
import os
import signal
import sys

import pytest

from quadono.alarms.alarm_models import Alarm
from quadono.cli import commands
from quadono.cli.commands import CommandRegistry, registry


@pytest.fixture()
def inline_host(monkeypatch):
    """Run the foreground work to completion instead of blocking on signals."""
    calls: list[object] = []

    def fake_run_host(state, foreground) -> int:
        calls.append(asyncio.run(foreground()))
        return 0

    monkeypatch.setattr(commands, "run_host", fake_run_host)
    return calls


def test_no_arguments_prints_usage(state, capsys) -> None:
    assert registry.handle(state, []) == 0
    assert "Usage:" in capsys.readouterr().out


def test_unknown_command_fails(state, capsys) -> None:
    assert registry.handle(state, ["frobnicate"]) == 1
    assert "Unknown command: frobnicate" in capsys.readouterr().out


def test_registry_aliases_are_case_insensitive(state) -> None:
    reg = CommandRegistry()
    seen: list[list[str]] = []

    def handler(state, args):
        seen.append(args)
        return 0

    reg.register("pom", handler, "pom", aliases=["25"])

    assert reg.handle(state, ["POM", "x"]) == 0
    assert reg.handle(state, ["25"]) == 0
    assert seen == [["x"], []]


@pytest.mark.parametrize(
    "argv",
    [
        ["add", "only-title"],
        ["add", "t", "one", "10"],
        ["add", "t", "1", "-5"],
        ["done"],
        ["del"],
        ["pom", "--task"],
        ["alarm", "9am", "late"],
        ["alarm", "09:00"],
    ],
)
def test_malformed_arguments_fail(state, argv) -> None:
    assert registry.handle(state, argv) == 1


def test_add_list_done_del_flow(state, capsys) -> None:
    assert registry.handle(state, ["add", "Write report", "2", "45"]) == 0
    assert registry.handle(state, ["add", "Email", "1", "5"]) == 0
    capsys.readouterr()

    assert registry.handle(state, ["list"]) == 0
    out = capsys.readouterr().out
    assert out.index("[Quadrant 1]") < out.index("[Quadrant 2]")
    assert "Write report  est 45 min" in out

    assert registry.handle(state, ["done", "email"]) == 0
    assert "Task marked as done." in capsys.readouterr().out

    assert registry.handle(state, ["done", "nope"]) == 0
    assert "Task not found." in capsys.readouterr().out

    assert registry.handle(state, ["del", "write report"]) == 0
    assert "Tasks deleted: 1." in capsys.readouterr().out

    assert registry.handle(state, ["list"]) == 0
    assert "No open tasks." in capsys.readouterr().out

    on_disk = json.loads(state.settings.tasks_path.read_text("utf-8"))
    assert [(t["title"], t["done"]) for t in on_disk] == [("Email", True)]


def test_pom_with_bound_task_runs_in_host(state, inline_host) -> None:
    task = state.task_store.add("Focus me", 1, 25)

    assert registry.handle(state, ["pomodoro", "--task", "focus me"]) == 0

    assert [str(o) for o in inline_host] == ["completed"]
    assert state.task_store.find(task.id).done is True
    assert state.settings.history_path.read_text("utf-8").strip().endswith("Focus me,25")


def test_pom_with_unknown_task_reports_not_found(state, inline_host, capsys) -> None:
    assert registry.handle(state, ["25", "--task", "ghost"]) == 0

    assert [str(o) for o in inline_host] == ["task_not_found"]
    assert not state.settings.history_path.exists()


def test_alarm_command_appends_alarm(state, inline_host, capsys) -> None:
    assert registry.handle(state, ["alarm", "09:30", "Stand-up", "meeting"]) == 0

    assert state.alarm_monitor.list_alarms() == [Alarm("09:30", "Stand-up meeting")]
    assert "Alarm set for 09:30: Stand-up meeting" in capsys.readouterr().out

    assert registry.handle(state, ["alarms"]) == 0
    assert "09:30  Stand-up meeting" in capsys.readouterr().out


@pytest.mark.skipif(sys.platform == "win32", reason="loop signal handlers are POSIX-only")
def test_run_host_returns_on_sigterm(state) -> None:
    async def foreground() -> None:
        await asyncio.sleep(0.02)
        os.kill(os.getpid(), signal.SIGTERM)

    assert commands.run_host(state, foreground) == 0
    assert state.settings.alarms_path.exists()

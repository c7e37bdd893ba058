# src/quadono/cli/commands.py

from __future__ import annotations

import asyncio
import contextlib
import logging
import signal
from collections.abc import Callable

from ..alarms.alarm_models import is_valid_time
from ..core.state import AppState
from ..runtime.host import Foreground, RuntimeHost
from ..tasks.task_store import format_task_groups

CommandHandler = Callable[[AppState, list[str]], int]

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_USAGE = 1


class CommandRegistry:
    """Sub-command registry: `quadono <command> args...` -> handler -> exit code."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, argv: list[str]) -> int:
        """
        Dispatch argv (without the program name).
        No arguments prints usage and succeeds; an unknown command fails.
        """
        if not argv:
            print(self.build_help())
            return EXIT_OK

        name = argv[0].lower()
        handler = self._handlers.get(name)
        if not handler:
            print(f"Unknown command: {argv[0]}")
            print(self.build_help())
            return EXIT_USAGE

        return handler(state, argv[1:])

    def build_help(self) -> str:
        lines = ["Usage:"]
        for help_text in self._help.values():
            lines.append(f"  quadono {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _usage(text: str) -> int:
    print(f"Usage: quadono {text}")
    return EXIT_USAGE


def run_host(state: AppState, foreground: Foreground) -> int:
    """
    Run `foreground` next to the alarm monitor until SIGINT/SIGTERM.
    Blocks the calling thread; returns the exit code.
    """

    async def _main() -> None:
        stop = asyncio.Event()
        loop = asyncio.get_running_loop()
        for sig in (signal.SIGINT, signal.SIGTERM):
            # Some platforms (Windows) do not support loop signal handlers;
            # Ctrl+C then surfaces as KeyboardInterrupt below.
            with contextlib.suppress(NotImplementedError, RuntimeError, ValueError):
                loop.add_signal_handler(sig, stop.set)

        host = RuntimeHost(foreground, state.alarm_monitor)
        await host.run_until(stop)

    try:
        asyncio.run(_main())
    except KeyboardInterrupt:
        logger.info("KeyboardInterrupt, exiting.")
    return EXIT_OK


def cmd_add(state: AppState, args: list[str]) -> int:
    """add <title> <quadrant 1-4> <minutes>"""
    if len(args) < 3:
        return _usage("add <title> <quadrant 1-4> <minutes>")
    try:
        quadrant = int(args[1])
        minutes = int(args[2])
    except ValueError:
        return _usage("add <title> <quadrant 1-4> <minutes>")
    if not args[0].strip() or minutes < 0:
        return _usage("add <title> <quadrant 1-4> <minutes>")

    task = state.task_store.add(args[0], quadrant, minutes)
    print(f"Task added ({task.short_id}).")
    return EXIT_OK


def cmd_list(state: AppState, args: list[str]) -> int:
    lines = format_task_groups(state.task_store.list_open())
    if not lines:
        print("No open tasks.")
    for line in lines:
        print(line)
    return EXIT_OK


def cmd_done(state: AppState, args: list[str]) -> int:
    if not args or not args[0].strip():
        return _usage("done <id-prefix|title>")
    task = state.task_store.done(args[0])
    if task is None:
        print("Task not found.")
    else:
        print("Task marked as done.")
    return EXIT_OK


def cmd_del(state: AppState, args: list[str]) -> int:
    if not args or not args[0].strip():
        return _usage("del <id-prefix|title>")
    removed = state.task_store.delete(args[0])
    print(f"Tasks deleted: {len(removed)}.")
    return EXIT_OK


def cmd_focus(state: AppState, args: list[str]) -> int:
    """
    pom [--task <ref>]

    The session runs inside the runtime host, so alarms keep firing while it counts down.
    """
    task_ref: str | None = None
    if args:
        if args[0] != "--task" or len(args) < 2 or not args[1].strip():
            return _usage("pom [--task <id-prefix|title>]")
        task_ref = args[1]

    async def _session():
        outcome = await state.focus_timer.start(task_ref)
        print("Alarms stay active. Press Ctrl+C to exit.")
        return outcome

    return run_host(state, _session)


def cmd_alarm(state: AppState, args: list[str]) -> int:
    """alarm <HH:MM> <note...>: record the alarm, then stay alive to fire it."""
    if len(args) < 2 or not is_valid_time(args[0]):
        return _usage('alarm <HH:MM> "<note>"')
    time_str, note = args[0], " ".join(args[1:])

    async def _set_alarm():
        state.alarm_monitor.add_alarm(time_str, note)
        print(f"Alarm set for {time_str}: {note}")
        print("Waiting for alarms. Press Ctrl+C to stop.")

    return run_host(state, _set_alarm)


def cmd_alarms(state: AppState, args: list[str]) -> int:
    alarms = state.alarm_monitor.list_alarms()
    if not alarms:
        print("No pending alarms.")
    for alarm in alarms:
        print(f"  {alarm.time}  {alarm.note}")
    return EXIT_OK


registry.register("add", cmd_add, help_text="add <title> <quadrant 1-4> <minutes>   add a task")
registry.register("list", cmd_list, help_text="list                               list open tasks", aliases=["ls"])
registry.register("done", cmd_done, help_text="done <id-prefix|title>             mark a task done")
registry.register("del", cmd_del, help_text="del <id-prefix|title>              delete matching tasks", aliases=["delete"])
registry.register(
    "pom",
    cmd_focus,
    help_text="pom [--task <id-prefix|title>]     25 min focus + 5 min break",
    aliases=["pomodoro", "25"],
)
registry.register("alarm", cmd_alarm, help_text='alarm 09:00 "Stand-up"             set an alarm and wait for it')
registry.register("alarms", cmd_alarms, help_text="alarms                             list pending alarms")

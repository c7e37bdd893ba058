# src/quadono/tasks/task_store.py

from __future__ import annotations

import json
import logging
import os
import threading
from pathlib import Path

from .task_models import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    JSON-file task store.

    The file is the durable source of truth:
    - it is a JSON array of task objects, rewritten in full on every mutation
    - every read and every read-modify-write cycle reloads it first, so a second
      process editing the same file is never overwritten with a stale cache
    - a missing or corrupt file reads as an empty list; the next write recreates it

    Thread-safety:
    - one lock guards the cache and the load/mutate/write cycle
    - there is no cross-process locking; the last writer wins
    """

    def __init__(self, path: str | Path = "quadono.json") -> None:
        self._path = Path(path)
        self._lock = threading.Lock()
        self._cache: list[Task] = []
        with self._lock:
            self._reload()
        logger.info("TaskStore ready path=%s total=%s", self._path, len(self._cache))

    @property
    def path(self) -> Path:
        return self._path

    # ---- low-level helpers (call with the lock held) ----

    def _read_file(self) -> list[Task]:
        if not self._path.exists():
            return []
        try:
            data = json.loads(self._path.read_text("utf-8"))
        except (OSError, ValueError):
            logger.warning("Task file %s is unreadable or corrupt; treating it as empty.", self._path)
            return []
        if not isinstance(data, list):
            logger.warning("Task file %s does not hold a list; treating it as empty.", self._path)
            return []

        tasks: list[Task] = []
        seen: set[str] = set()
        for raw in data:
            if not isinstance(raw, dict):
                continue
            try:
                task = Task.from_dict(raw)
            except (TypeError, ValueError):
                logger.warning("Skipping malformed task entry: %r", raw)
                continue
            if task.id in seen:
                logger.warning("Skipping duplicate task id=%s", task.id)
                continue
            seen.add(task.id)
            tasks.append(task)
        return tasks

    def _reload(self) -> None:
        self._cache = self._read_file()

    def _save(self) -> None:
        """Full-file overwrite. OSError propagates to the caller of the mutation."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        payload = json.dumps([t.to_dict() for t in self._cache], ensure_ascii=False, indent=2)
        tmp = self._path.with_name(self._path.name + ".tmp")
        tmp.write_text(payload, "utf-8")
        os.replace(tmp, self._path)

    def _first_match(self, ref: str) -> Task | None:
        for task in self._cache:
            if task.matches(ref):
                return task
        return None

    # ---- public API ----

    def add(self, title: str, quadrant: int, estimate_minutes: int) -> Task:
        if not title or not title.strip():
            raise ValueError("title is required")
        if estimate_minutes < 0:
            raise ValueError("estimate_minutes must be non-negative")

        with self._lock:
            self._reload()
            existing = {t.id for t in self._cache}
            task = Task(title=title.strip(), quadrant=int(quadrant), estimate_minutes=int(estimate_minutes))
            while task.id in existing:
                task = Task(title=task.title, quadrant=task.quadrant, estimate_minutes=task.estimate_minutes)
            self._cache.append(task)
            self._save()

        logger.debug("Task added id=%s quadrant=%s", task.id, task.quadrant)
        return task

    def all_tasks(self) -> list[Task]:
        with self._lock:
            self._reload()
            return list(self._cache)

    def list_open(self) -> dict[int, list[Task]]:
        """
        Open (not done) tasks grouped by quadrant.

        Groups come back in ascending quadrant order; each group keeps insertion order.
        """
        with self._lock:
            self._reload()
            open_tasks = [t for t in self._cache if not t.done]

        groups: dict[int, list[Task]] = {}
        for quadrant in sorted({t.quadrant for t in open_tasks}):
            groups[quadrant] = [t for t in open_tasks if t.quadrant == quadrant]
        return groups

    def find(self, ref: str) -> Task | None:
        with self._lock:
            self._reload()
            return self._first_match(ref)

    def done(self, ref: str) -> Task | None:
        """Mark the first matching task done. No match is a silent no-op (no write)."""
        with self._lock:
            self._reload()
            task = self._first_match(ref)
            if task is None:
                return None
            task.done = True
            self._save()

        logger.debug("Task done id=%s", task.id)
        return task

    def delete(self, ref: str) -> list[Task]:
        """Remove every matching task. The file is rewritten even when nothing matched."""
        with self._lock:
            self._reload()
            removed = [t for t in self._cache if t.matches(ref)]
            self._cache = [t for t in self._cache if not t.matches(ref)]
            self._save()

        logger.debug("Task delete ref=%r removed=%s", ref, len(removed))
        return removed


def format_task_groups(groups: dict[int, list[Task]]) -> list[str]:
    lines: list[str] = []
    for quadrant, tasks in groups.items():
        lines.append(f"[Quadrant {quadrant}]")
        for t in tasks:
            lines.append(f"  {t.short_id}  {t.title}  est {t.estimate_minutes} min")
    return lines


# src/quadono/tasks/task_models.py

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Any


def new_task_id() -> str:
    return str(uuid.uuid4())


@dataclass(slots=True)
class Task:
    """
    One entry of the prioritized task list.

    quadrant is a 1-4 priority bucket used only for grouping; the range is documented,
    not enforced.
    """

    title: str
    quadrant: int
    estimate_minutes: int
    done: bool = False
    id: str = field(default_factory=new_task_id)

    @property
    def short_id(self) -> str:
        return self.id[:8]

    def matches(self, ref: str) -> bool:
        """Case-insensitive id prefix OR case-insensitive exact title."""
        needle = ref.casefold()
        return self.id.casefold().startswith(needle) or self.title.casefold() == needle

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "quadrant": self.quadrant,
            "estimate_minutes": self.estimate_minutes,
            "done": self.done,
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Task:
        """
        Accepts both the native snake_case keys and the PascalCase keys
        (Id, Title, Quadrant, EstimateMinutes, Done) of files written by older builds.
        """

        def pick(*keys: str, default: Any = None) -> Any:
            for k in keys:
                if k in raw and raw[k] is not None:
                    return raw[k]
            return default

        task_id = pick("id", "Id")
        if not task_id:
            raise ValueError("task entry has no id")

        return cls(
            id=str(task_id),
            title=str(pick("title", "Title", default="")),
            quadrant=int(pick("quadrant", "Quadrant", default=0)),
            estimate_minutes=int(pick("estimate_minutes", "EstimateMinutes", default=0)),
            done=bool(pick("done", "Done", default=False)),
        )

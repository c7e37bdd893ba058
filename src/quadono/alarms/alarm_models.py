# src/quadono/alarms/alarm_models.py

from __future__ import annotations

import re
from dataclasses import dataclass

TIME_RE = re.compile(r"^(?:[01]\d|2[0-3]):[0-5]\d$")


def is_valid_time(value: str) -> bool:
    return bool(TIME_RE.match(value or ""))


@dataclass(slots=True, frozen=True)
class Alarm:
    """A daily "HH:MM" reminder. It fires at most once: firing removes it."""

    time: str
    note: str

    def to_line(self) -> str:
        return f"{self.time}|{self.note}"

    @classmethod
    def from_line(cls, line: str) -> Alarm | None:
        """
        Parse "HH:MM|note". Anything else returns None.

        Only the first "|" separates the fields, so notes may contain "|".
        """
        time_part, sep, note = line.rstrip("\r\n").partition("|")
        if not sep or not time_part:
            return None
        return cls(time=time_part, note=note)

# tests/test_config.py

from __future__ import annotations

from pathlib import Path

from quadono.config import Settings


def test_defaults(monkeypatch) -> None:
    for name in (
        "QUADONO_DATA_DIR",
        "QUADONO_TASKS_PATH",
        "QUADONO_ALARMS_PATH",
        "QUADONO_HISTORY_PATH",
        "QUADONO_WORK_MINUTES",
        "QUADONO_BREAK_MINUTES",
        "QUADONO_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)

    s = Settings.from_env()

    assert s.tasks_path == Path("quadono.json")
    assert s.alarms_path == Path("alarms.txt")
    assert s.history_path == Path("history.log")
    assert s.work_minutes == 25
    assert s.break_minutes == 5
    assert s.log_level == "WARNING"


def test_paths_follow_data_dir_and_bad_numbers_fall_back(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("QUADONO_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("QUADONO_ALARMS_PATH", str(tmp_path / "other" / "alarms.txt"))
    monkeypatch.setenv("QUADONO_WORK_MINUTES", "fifty")
    monkeypatch.setenv("QUADONO_BREAK_MINUTES", "10")
    monkeypatch.setenv("QUADONO_BELL_ENABLED", "off")

    s = Settings.from_env()

    assert s.tasks_path == tmp_path / "quadono.json"
    assert s.alarms_path == tmp_path / "other" / "alarms.txt"
    assert s.log_dir == tmp_path / ".quadono"
    assert s.work_minutes == 25
    assert s.break_minutes == 10
    assert s.bell_enabled is False

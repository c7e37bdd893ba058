# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "QUADONO_APP_NAME": "App display name (default: quadono).",
    "QUADONO_LOG_LEVEL": "Console logging level (default: WARNING; the log file always gets DEBUG).",
    "QUADONO_LOG_DIR": "Directory for quadono.log (default: <data_dir>/.quadono).",
    # Paths
    "QUADONO_DATA_DIR": "Base directory for the data files (default: current directory).",
    "QUADONO_TASKS_PATH": "Task list JSON file (default: <data_dir>/quadono.json).",
    "QUADONO_ALARMS_PATH": "Alarm file, one 'HH:MM|note' per line (default: <data_dir>/alarms.txt).",
    "QUADONO_HISTORY_PATH": "Focus session history log (default: <data_dir>/history.log).",
    # Focus timer
    "QUADONO_WORK_MINUTES": "Work phase length in minutes (default: 25).",
    "QUADONO_BREAK_MINUTES": "Break phase length in minutes (default: 5).",
    "QUADONO_TICK_SECONDS": "Countdown refresh / key polling interval (default: 1.0).",
    # Alarms
    "QUADONO_ALARM_POLL_SECONDS": "Alarm check interval (default: 1.0).",
    "QUADONO_BELL_ENABLED": "Play audible signals (true/false, default: true).",
}

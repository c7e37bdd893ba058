"""
Alarm subsystem.

Components:
- alarm_models.py: Alarm dataclass and its "HH:MM|note" line format
- alarm_monitor.py: background polling loop that fires and removes due alarms
"""

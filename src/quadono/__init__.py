"""
quadono: prioritized task list, pomodoro focus timer and alarm monitor for the terminal.
"""

__version__ = "0.2.0"

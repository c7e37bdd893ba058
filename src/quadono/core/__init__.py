"""
Core plumbing shared by the subsystems.

Components:
- ports.py: Protocols for the clock, key input, beeper and task lookups
- sound.py: best-effort audible signal
- keys.py: non-blocking terminal key polling
- state.py: AppState (composition container)
"""

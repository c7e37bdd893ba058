"""Process lifecycle: one foreground unit of work plus the alarm monitor loop."""

"""Focus timer: one work interval, one break, optional task binding."""

# src/quadono/core/keys.py

from __future__ import annotations

import contextlib
import logging
import select
import sys
from typing import Any

try:
    import termios
    import tty
except ImportError:
    termios = None
    tty = None

try:
    import msvcrt
except ImportError:
    msvcrt = None

logger = logging.getLogger(__name__)


class TerminalKeys:
    """
    Poll the terminal for a pending key press without blocking.

    - On Windows, uses msvcrt.kbhit()/getwch().
    - On Unix-like TTYs, switches stdin to cbreak mode for the session and uses select().
    - On a non-TTY stdin (pipes), select() still works but a whole line is consumed.
    """

    def __init__(self, stream: Any = None) -> None:
        self._stream = stream if stream is not None else sys.stdin
        self._saved_attrs: Any = None

    def open(self) -> None:
        if msvcrt or termios is None or tty is None:
            return
        try:
            if not self._stream.isatty():
                return
            fd = self._stream.fileno()
            self._saved_attrs = termios.tcgetattr(fd)
            tty.setcbreak(fd)
        except Exception:
            logger.debug("Could not switch stdin to cbreak mode.", exc_info=True)
            self._saved_attrs = None

    def poll(self) -> bool:
        if msvcrt:
            if msvcrt.kbhit():
                msvcrt.getwch()
                return True
            return False

        try:
            ready, _, _ = select.select([self._stream], [], [], 0)
        except Exception:
            return False
        if not ready:
            return False

        if self._saved_attrs is not None:
            data = self._stream.read(1)
        else:
            data = self._stream.readline()
        # EOF on a closed pipe is "readable" forever; it is not a key press.
        return bool(data)

    def close(self) -> None:
        if self._saved_attrs is None or termios is None:
            return
        with contextlib.suppress(Exception):
            termios.tcsetattr(self._stream.fileno(), termios.TCSADRAIN, self._saved_attrs)
        self._saved_attrs = None

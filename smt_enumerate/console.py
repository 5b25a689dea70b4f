"""Single keypress input."""

from __future__ import annotations

import os
import sys
from typing import TextIO


def read_key(stream: TextIO | None = None) -> str:
    """
    Read exactly one key from ``stream`` (stdin by default).

    On a terminal the key is read without waiting for Enter. Otherwise one
    character is read from the stream. Returns "" at end of input.
    """
    if stream is None:
        stream = sys.stdin

    if not stream.isatty():
        return stream.read(1)

    if os.name == "nt":
        import msvcrt

        return msvcrt.getwch()

    import termios
    import tty

    fd = stream.fileno()
    saved = termios.tcgetattr(fd)
    try:
        tty.setcbreak(fd)
        data = os.read(fd, 1)
    finally:
        # Drop the tail of multi-byte keys (arrows, non-ASCII)
        termios.tcflush(fd, termios.TCIFLUSH)
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)
    return data.decode(errors="replace")

"""Tests for single-key input."""

import io
import os
from unittest.mock import patch

import pytest

from smt_enumerate.console import read_key


def test_reads_one_character():
    """Only one character is consumed from a non-terminal stream."""
    stream = io.StringIO(" q")
    assert read_key(stream) == " "
    assert read_key(stream) == "q"


def test_end_of_input():
    """End of input reads as an empty string."""
    assert read_key(io.StringIO("")) == ""


class FakeTerminal:
    """Stand-in for a TTY stdin."""

    def isatty(self):
        return True

    def fileno(self):
        return 7


@pytest.mark.skipif(os.name == "nt", reason="POSIX terminal handling")
def test_terminal_flushes_unread_input_before_restoring():
    """Leftover bytes of a multi-byte key are discarded, then the mode is restored."""
    termios = pytest.importorskip("termios")
    import tty

    calls = []
    with patch.object(termios, "tcgetattr", return_value=["saved"]), \
            patch.object(termios, "tcflush",
                         side_effect=lambda fd, queue: calls.append(("flush", fd, queue))), \
            patch.object(termios, "tcsetattr",
                         side_effect=lambda fd, when, attrs: calls.append(("restore", fd, attrs))), \
            patch.object(tty, "setcbreak"), \
            patch("os.read", return_value=b"\x1b"):
        assert read_key(FakeTerminal()) == "\x1b"

    assert calls == [("flush", 7, termios.TCIFLUSH), ("restore", 7, ["saved"])]

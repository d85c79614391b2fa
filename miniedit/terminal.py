"""Raw terminal mode, window size and byte input."""

from __future__ import annotations

import os
import termios


class RawTerminal:
    """Puts a terminal into raw mode; restores it on exit."""

    def __init__(self, fd: int) -> None:
        self.fd = fd
        self._original: list | None = None

    def __enter__(self) -> RawTerminal:
        self.enable()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.disable()

    def enable(self) -> None:
        """Switch to raw input with a 100 ms read timeout.

        Raises termios.error when the descriptor is not a terminal.
        """
        attrs = termios.tcgetattr(self.fd)
        if self._original is None:
            self._original = [list(a) if isinstance(a, list) else a for a in attrs]
        raw = [list(a) if isinstance(a, list) else a for a in attrs]
        raw[0] &= ~(
            termios.BRKINT | termios.ICRNL | termios.INPCK | termios.ISTRIP | termios.IXON
        )
        raw[1] &= ~termios.OPOST
        raw[2] |= termios.CS8
        raw[3] &= ~(termios.ECHO | termios.ICANON | termios.IEXTEN | termios.ISIG)
        raw[6][termios.VMIN] = 0
        raw[6][termios.VTIME] = 1
        termios.tcsetattr(self.fd, termios.TCSAFLUSH, raw)

    def disable(self) -> None:
        """Restore the settings saved by enable()."""
        if self._original is not None:
            termios.tcsetattr(self.fd, termios.TCSAFLUSH, self._original)


def window_size(fd: int) -> tuple[int, int]:
    """Return (rows, columns) of the terminal; raise OSError if unknown."""
    size = os.get_terminal_size(fd)
    if size.columns == 0:
        raise OSError("terminal reports zero columns")
    return size.lines, size.columns


def read_byte(fd: int) -> int | None:
    """Read one byte, or return None when nothing arrived in time."""
    try:
        data = os.read(fd, 1)
    except BlockingIOError:
        return None
    return data[0] if data else None
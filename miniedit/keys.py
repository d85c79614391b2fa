"""Key codes and decoding of raw terminal bytes into keys."""

from __future__ import annotations

from collections.abc import Callable
from enum import IntEnum

ESC = 0x1B


class Key(IntEnum):
    """Keys that do not map to a single byte."""

    BACKSPACE = 127
    ARROW_LEFT = 1000
    ARROW_RIGHT = 1001
    ARROW_UP = 1002
    ARROW_DOWN = 1003
    DEL_KEY = 1004
    HOME_KEY = 1005
    END_KEY = 1006
    PAGE_UP = 1007
    PAGE_DOWN = 1008


_TILDE_KEYS = {
    ord("1"): Key.HOME_KEY,
    ord("3"): Key.DEL_KEY,
    ord("4"): Key.END_KEY,
    ord("5"): Key.PAGE_UP,
    ord("6"): Key.PAGE_DOWN,
    ord("7"): Key.HOME_KEY,
    ord("8"): Key.END_KEY,
}

_CSI_KEYS = {
    ord("A"): Key.ARROW_UP,
    ord("B"): Key.ARROW_DOWN,
    ord("C"): Key.ARROW_RIGHT,
    ord("D"): Key.ARROW_LEFT,
    ord("H"): Key.HOME_KEY,
    ord("F"): Key.END_KEY,
}

_SS3_KEYS = {
    ord("H"): Key.HOME_KEY,
    ord("F"): Key.END_KEY,
}


def ctrl_key(k: str | int) -> int:
    """Return the code produced by pressing Ctrl together with ``k``."""
    code = ord(k) if isinstance(k, str) else k
    return code & 0x1F


def read_key(read_byte: Callable[[], int | None]) -> int:
    """Read one key press.

    ``read_byte`` returns the next input byte as an int, or None when no
    byte arrived in time. The first byte is waited for; a lone or unknown
    escape sequence yields the escape code itself.
    """
    while (c := read_byte()) is None:
        pass
    if c != ESC:
        return c

    first = read_byte()
    if first is None:
        return ESC
    second = read_byte()
    if second is None:
        return ESC

    if first == ord("["):
        if ord("0") <= second <= ord("9"):
            third = read_byte()
            if third is None:
                return ESC
            if third == ord("~"):
                return _TILDE_KEYS.get(second, ESC)
            return ESC
        return _CSI_KEYS.get(second, ESC)
    if first == ord("O"):
        return _SS3_KEYS.get(second, ESC)
    return ESC
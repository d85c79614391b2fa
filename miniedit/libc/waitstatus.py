"""Decoding of process wait status words."""

from __future__ import annotations


def exit_status(s: int) -> int:
    """Exit code of a process that exited normally."""
    return (s & 0xFF00) >> 8


def term_sig(s: int) -> int:
    """Signal that terminated the process."""
    return s & 0x7F


def stop_sig(s: int) -> int:
    """Signal that stopped the process."""
    return exit_status(s)


def if_exited(s: int) -> bool:
    """True when the process exited normally."""
    return term_sig(s) == 0


def if_stopped(s: int) -> bool:
    """True when the process is stopped."""
    v = (((s & 0xFFFF) * 0x10001) >> 8) & 0xFFFF
    if v >= 0x8000:
        v -= 0x10000
    return v > 0x7F00


def if_signaled(s: int) -> bool:
    """True when the process was killed by a signal."""
    return ((s & 0xFFFF) - 1) & 0xFFFFFFFF < 0xFF


def core_dumped(s: int) -> bool:
    """True when the terminated process left a core dump."""
    return bool(s & 0x80)


def if_continued(s: int) -> bool:
    """True when a stopped process was resumed."""
    return s == 0xFFFF
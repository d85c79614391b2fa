"""Process execution domains and their modifier flags."""

from __future__ import annotations

from enum import IntFlag

PER_MASK = 0xFF


class PersonalityFlag(IntFlag):
    """Modifier bits that sit above the personality type."""

    ADDR_NO_RANDOMIZE = 0x0040000
    MMAP_PAGE_ZERO = 0x0100000
    ADDR_COMPAT_LAYOUT = 0x0200000
    READ_IMPLIES_EXEC = 0x0400000
    ADDR_LIMIT_32BIT = 0x0800000
    SHORT_INODE = 0x1000000
    WHOLE_SECONDS = 0x2000000
    STICKY_TIMEOUTS = 0x4000000
    ADDR_LIMIT_3GB = 0x8000000


_F = PersonalityFlag

PER_LINUX = 0
PER_LINUX_32BIT = int(_F.ADDR_LIMIT_32BIT)
PER_SVR4 = 1 | _F.STICKY_TIMEOUTS | _F.MMAP_PAGE_ZERO
PER_SVR3 = 2 | _F.STICKY_TIMEOUTS | _F.SHORT_INODE
PER_SCOSVR3 = 3 | _F.STICKY_TIMEOUTS | _F.WHOLE_SECONDS | _F.SHORT_INODE
PER_OSR5 = 3 | _F.STICKY_TIMEOUTS | _F.WHOLE_SECONDS
PER_WYSEV386 = 4 | _F.STICKY_TIMEOUTS | _F.SHORT_INODE
PER_ISCR4 = 5 | _F.STICKY_TIMEOUTS
PER_BSD = 6
PER_SUNOS = 6 | _F.STICKY_TIMEOUTS
PER_XENIX = 7 | _F.STICKY_TIMEOUTS | _F.SHORT_INODE
PER_LINUX32 = 8
PER_LINUX32_3GB = 8 | _F.ADDR_LIMIT_3GB
PER_IRIX32 = 9 | _F.STICKY_TIMEOUTS
PER_IRIXN32 = 0xA | _F.STICKY_TIMEOUTS
PER_IRIX64 = 0x0B | _F.STICKY_TIMEOUTS
PER_RISCOS = 0xC
PER_SOLARIS = 0xD | _F.STICKY_TIMEOUTS
PER_UW7 = 0xE | _F.STICKY_TIMEOUTS | _F.MMAP_PAGE_ZERO
PER_OSF4 = 0xF
PER_HPUX = 0x10


def _check(value: int) -> None:
    if value < 0:
        raise ValueError("personality must not be negative")


def personality_type(value: int) -> int:
    """Return the execution domain number held in the low byte."""
    _check(value)
    return value & PER_MASK


def personality_flags(value: int) -> PersonalityFlag:
    """Return the modifier bits above the low byte."""
    _check(value)
    return PersonalityFlag(value & ~PER_MASK)
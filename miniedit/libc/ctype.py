"""Character classification on byte codes, ASCII only."""

from __future__ import annotations

_UINT_MASK = 0xFFFFFFFF


def _unsigned(c: int | str) -> int:
    code = ord(c) if isinstance(c, str) else c
    return code & _UINT_MASK


def isalpha(c: int | str) -> bool:
    """True for ASCII letters."""
    return ((_unsigned(c) | 32) - ord("a")) & _UINT_MASK < 26


def isdigit(c: int | str) -> bool:
    """True for the digits 0 to 9."""
    return (_unsigned(c) - ord("0")) & _UINT_MASK < 10


def islower(c: int | str) -> bool:
    """True for ASCII lower-case letters."""
    return (_unsigned(c) - ord("a")) & _UINT_MASK < 26


def isupper(c: int | str) -> bool:
    """True for ASCII upper-case letters."""
    return (_unsigned(c) - ord("A")) & _UINT_MASK < 26


def isprint(c: int | str) -> bool:
    """True for printable characters, space included."""
    return (_unsigned(c) - 0x20) & _UINT_MASK < 0x5F


def isgraph(c: int | str) -> bool:
    """True for printable characters other than space."""
    return (_unsigned(c) - 0x21) & _UINT_MASK < 0x5E


def isspace(c: int | str) -> bool:
    """True for space, tab, newline, vertical tab, form feed and return."""
    code = _unsigned(c)
    return code == ord(" ") or (code - ord("\t")) & _UINT_MASK < 5


def isascii(c: int | str) -> bool:
    """True for codes below 128."""
    return _unsigned(c) < 128


def fast_tolower(c: int | str) -> int:
    """Lower-case a letter by setting bit 5; meaningful for letters only."""
    code = ord(c) if isinstance(c, str) else c
    return code | 0x20


def fast_toupper(c: int | str) -> int:
    """Upper-case a letter by masking with 0x5f; meaningful for letters only."""
    code = ord(c) if isinstance(c, str) else c
    return code & 0x5F
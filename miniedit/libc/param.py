"""Arithmetic helpers and bit operations on byte arrays."""

from __future__ import annotations


def _cdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def howmany(n: int, d: int) -> int:
    """Number of ``d``-sized units needed to hold ``n``."""
    return _cdiv(n + d - 1, d)


def roundup(n: int, d: int) -> int:
    """Round ``n`` up to a multiple of ``d``."""
    return howmany(n, d) * d


def powerof2(n: int) -> bool:
    """True when ``n`` has at most one bit set (zero counts)."""
    return not ((n - 1) & n)


def setbit(bits: bytearray, i: int) -> None:
    """Set bit ``i`` of the byte array."""
    bits[i // 8] |= 1 << (i % 8)


def clrbit(bits: bytearray, i: int) -> None:
    """Clear bit ``i`` of the byte array."""
    bits[i // 8] &= ~(1 << (i % 8)) & 0xFF


def isset(bits: bytes | bytearray, i: int) -> bool:
    """True when bit ``i`` is set."""
    return bool(bits[i // 8] & (1 << (i % 8)))


def isclr(bits: bytes | bytearray, i: int) -> bool:
    """True when bit ``i`` is clear."""
    return not isset(bits, i)
"""Length modifiers for printing and scanning fixed-width integers."""

from __future__ import annotations

PRINTF_CONVERSIONS = frozenset("diouxX")
SCANF_CONVERSIONS = frozenset("diuox")
FIXED_WIDTHS = (8, 16, 32, 64)
VARIANTS = ("", "LEAST", "FAST")


def _prefixes(pointer_bits: int) -> tuple[str, str]:
    """Return the modifiers for 64-bit and pointer-sized integers."""
    if pointer_bits == 64:
        return "l", "l"
    if pointer_bits == 32:
        return "ll", ""
    raise ValueError(f"unsupported pointer size: {pointer_bits} bits")


def _check(conversion: str, width: int | str, variant: str, allowed: frozenset) -> None:
    if conversion not in allowed:
        raise ValueError(f"unsupported conversion: {conversion!r}")
    if variant not in VARIANTS:
        raise ValueError(f"unknown variant: {variant!r}")
    if width in ("MAX", "PTR"):
        if variant:
            raise ValueError(f"{width} has no {variant} variant")
    elif width not in FIXED_WIDTHS:
        raise ValueError(f"unsupported width: {width!r}")


def printf_spec(
    conversion: str, width: int | str, variant: str = "", pointer_bits: int = 64
) -> str:
    """Return the printf conversion text for an integer type.

    ``width`` is 8, 16, 32, 64, ``"MAX"`` or ``"PTR"``; ``variant`` is
    ``""``, ``"LEAST"`` or ``"FAST"``. Raises ValueError for other input.
    """
    _check(conversion, width, variant, PRINTF_CONVERSIONS)
    pri64, priptr = _prefixes(pointer_bits)
    if width in (64, "MAX"):
        return pri64 + conversion
    if width == "PTR":
        return priptr + conversion
    return conversion


def scanf_spec(
    conversion: str, width: int | str, variant: str = "", pointer_bits: int = 64
) -> str:
    """Return the scanf conversion text for an integer type.

    Arguments are as for printf_spec; ``X`` is not a scanf conversion.
    """
    _check(conversion, width, variant, SCANF_CONVERSIONS)
    pri64, priptr = _prefixes(pointer_bits)
    if width == 8:
        return "hh" + conversion
    if width == 16:
        return conversion if variant == "FAST" else "h" + conversion
    if width == 32:
        return conversion
    if width == "PTR":
        return priptr + conversion
    return pri64 + conversion
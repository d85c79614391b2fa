"""CPU affinity masks of a given byte size."""

from __future__ import annotations

LONG_BYTES = 8
LONG_BITS = 8 * LONG_BYTES
CPU_SET_BYTES = 128


def alloc_size(n: int) -> int:
    """Bytes needed for a mask of ``n`` CPUs, in whole longs."""
    return LONG_BYTES * (n // LONG_BITS + (n % LONG_BITS + LONG_BITS - 1) // LONG_BITS)


class CpuSet:
    """A set of CPU numbers stored in ``size`` bytes.

    CPUs that do not fit into the mask are ignored when added and are
    never members.
    """

    def __init__(self, size: int = CPU_SET_BYTES) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self.size = size
        self._bits = 0

    def _fits(self, cpu: int) -> bool:
        return cpu >= 0 and cpu // 8 < self.size

    def add(self, cpu: int) -> None:
        if self._fits(cpu):
            self._bits |= 1 << cpu

    def discard(self, cpu: int) -> None:
        if self._fits(cpu):
            self._bits &= ~(1 << cpu)

    def __contains__(self, cpu: object) -> bool:
        if not isinstance(cpu, int) or not self._fits(cpu):
            return False
        return bool(self._bits >> cpu & 1)

    def __len__(self) -> int:
        return bin(self._bits).count("1")

    def _combine(self, other: object, op) -> CpuSet:
        if not isinstance(other, CpuSet):
            return NotImplemented
        if other.size != self.size:
            raise ValueError("CPU sets differ in size")
        mask = (1 << ((self.size // LONG_BYTES) * LONG_BITS)) - 1
        result = CpuSet(self.size)
        result._bits = op(self._bits, other._bits) & mask
        return result

    def __and__(self, other: object) -> CpuSet:
        return self._combine(other, lambda a, b: a & b)

    def __or__(self, other: object) -> CpuSet:
        return self._combine(other, lambda a, b: a | b)

    def __xor__(self, other: object) -> CpuSet:
        return self._combine(other, lambda a, b: a ^ b)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CpuSet):
            return NotImplemented
        return self.size == other.size and self._bits == other._bits

    __hash__ = None  # type: ignore[assignment]

    def clear(self) -> None:
        self._bits = 0
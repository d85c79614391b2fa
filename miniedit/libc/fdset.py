"""A fixed-size set of file descriptors as used by select()."""

from __future__ import annotations

FD_SETSIZE = 1024


class FdSet:
    """Bit set of descriptors in the range 0 to FD_SETSIZE - 1."""

    def __init__(self) -> None:
        self._bits = 0

    @staticmethod
    def _check(fd: int) -> None:
        if not 0 <= fd < FD_SETSIZE:
            raise ValueError(f"descriptor {fd} outside 0..{FD_SETSIZE - 1}")

    def add(self, fd: int) -> None:
        self._check(fd)
        self._bits |= 1 << fd

    def discard(self, fd: int) -> None:
        self._check(fd)
        self._bits &= ~(1 << fd)

    def __contains__(self, fd: object) -> bool:
        if not isinstance(fd, int) or not 0 <= fd < FD_SETSIZE:
            return False
        return bool(self._bits >> fd & 1)

    def clear(self) -> None:
        self._bits = 0
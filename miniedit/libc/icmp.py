"""ICMP for IPv4: message types, codes and the 8-byte header."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from enum import IntEnum

ICMP_MINLEN = 8
ICMP_MASKLEN = 12
NR_ICMP_TYPES = 18
NR_ICMP_UNREACH = 15

ICMP_NET_UNREACH = 0
ICMP_HOST_UNREACH = 1
ICMP_PROT_UNREACH = 2
ICMP_PORT_UNREACH = 3
ICMP_FRAG_NEEDED = 4
ICMP_SR_FAILED = 5
ICMP_NET_UNKNOWN = 6
ICMP_HOST_UNKNOWN = 7
ICMP_HOST_ISOLATED = 8
ICMP_NET_ANO = 9
ICMP_HOST_ANO = 10
ICMP_NET_UNR_TOS = 11
ICMP_HOST_UNR_TOS = 12
ICMP_PKT_FILTERED = 13
ICMP_PREC_VIOLATION = 14
ICMP_PREC_CUTOFF = 15

ICMP_REDIR_NET = 0
ICMP_REDIR_HOST = 1
ICMP_REDIR_NETTOS = 2
ICMP_REDIR_HOSTTOS = 3

ICMP_EXC_TTL = 0
ICMP_EXC_FRAGTIME = 1

ICMP_PARAMPROB_OPTABSENT = 1

_HEADER = struct.Struct("!BBH4s")
_PAIR = struct.Struct("!HH")
_WORD = struct.Struct("!I")


class IcmpType(IntEnum):
    """ICMP message types."""

    ECHOREPLY = 0
    DEST_UNREACH = 3
    SOURCE_QUENCH = 4
    REDIRECT = 5
    ECHO = 8
    ROUTERADVERT = 9
    ROUTERSOLICIT = 10
    TIME_EXCEEDED = 11
    PARAMETERPROB = 12
    TIMESTAMP = 13
    TIMESTAMPREPLY = 14
    INFO_REQUEST = 15
    INFO_REPLY = 16
    ADDRESS = 17
    ADDRESSREPLY = 18


_INFO_TYPES = frozenset(
    {
        IcmpType.ECHOREPLY,
        IcmpType.ECHO,
        IcmpType.ROUTERADVERT,
        IcmpType.ROUTERSOLICIT,
        IcmpType.TIMESTAMP,
        IcmpType.TIMESTAMPREPLY,
        IcmpType.INFO_REQUEST,
        IcmpType.INFO_REPLY,
        IcmpType.ADDRESS,
        IcmpType.ADDRESSREPLY,
    }
)


def is_info_type(t: int) -> bool:
    """True for informational message types, as opposed to error reports."""
    return t in _INFO_TYPES


@dataclass
class IcmpHeader:
    """The fixed ICMP header; ``rest`` holds the type-specific four bytes."""

    type: int
    code: int = 0
    checksum: int = 0
    rest: bytes = field(default=bytes(4))

    @property
    def id(self) -> int:
        return _PAIR.unpack(self.rest)[0]

    @property
    def sequence(self) -> int:
        return _PAIR.unpack(self.rest)[1]

    @property
    def gateway(self) -> int:
        return _WORD.unpack(self.rest)[0]

    @property
    def mtu(self) -> int:
        return _PAIR.unpack(self.rest)[1]

    def pack(self) -> bytes:
        """Encode the header in network byte order.

        Raises ValueError when a field does not fit.
        """
        if len(self.rest) != 4:
            raise ValueError("rest of header must be exactly 4 bytes")
        try:
            return _HEADER.pack(self.type, self.code, self.checksum, bytes(self.rest))
        except struct.error as err:
            raise ValueError(str(err)) from err

    @classmethod
    def unpack(cls, data: bytes) -> IcmpHeader:
        """Decode the header from the start of ``data``."""
        if len(data) < _HEADER.size:
            raise ValueError(f"ICMP header needs {_HEADER.size} bytes, got {len(data)}")
        type_, code, checksum, rest = _HEADER.unpack_from(data)
        return cls(type_, code, checksum, rest)
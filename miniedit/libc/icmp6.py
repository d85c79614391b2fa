"""ICMPv6: message types, the type filter and the 8-byte header."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field

ICMP6_FILTER = 1
ICMP6_FILTER_BLOCK = 1
ICMP6_FILTER_PASS = 2
ICMP6_FILTER_BLOCKOTHERS = 3
ICMP6_FILTER_PASSONLY = 4

ICMP6_DST_UNREACH = 1
ICMP6_PACKET_TOO_BIG = 2
ICMP6_TIME_EXCEEDED = 3
ICMP6_PARAM_PROB = 4

ICMP6_INFOMSG_MASK = 0x80

ICMP6_ECHO_REQUEST = 128
ICMP6_ECHO_REPLY = 129
MLD_LISTENER_QUERY = 130
MLD_LISTENER_REPORT = 131
MLD_LISTENER_REDUCTION = 132

ICMP6_DST_UNREACH_NOROUTE = 0
ICMP6_DST_UNREACH_ADMIN = 1
ICMP6_DST_UNREACH_BEYONDSCOPE = 2
ICMP6_DST_UNREACH_ADDR = 3
ICMP6_DST_UNREACH_NOPORT = 4

ICMP6_TIME_EXCEED_TRANSIT = 0
ICMP6_TIME_EXCEED_REASSEMBLY = 1

ICMP6_PARAMPROB_HEADER = 0
ICMP6_PARAMPROB_NEXTHEADER = 1
ICMP6_PARAMPROB_OPTION = 2

ND_ROUTER_SOLICIT = 133
ND_ROUTER_ADVERT = 134
ND_NEIGHBOR_SOLICIT = 135
ND_NEIGHBOR_ADVERT = 136
ND_REDIRECT = 137
ICMP6_ROUTER_RENUMBERING = 138

ND_RA_FLAG_MANAGED = 0x80
ND_RA_FLAG_OTHER = 0x40
ND_RA_FLAG_HOME_AGENT = 0x20

ND_OPT_SOURCE_LINKADDR = 1
ND_OPT_TARGET_LINKADDR = 2
ND_OPT_PREFIX_INFORMATION = 3
ND_OPT_REDIRECTED_HEADER = 4
ND_OPT_MTU = 5
ND_OPT_RTR_ADV_INTERVAL = 7
ND_OPT_HOME_AGENT_INFO = 8

ND_OPT_PI_FLAG_ONLINK = 0x80
ND_OPT_PI_FLAG_AUTO = 0x40
ND_OPT_PI_FLAG_RADDR = 0x20

_WORDS = 8
_WORD_MASK = 0xFFFFFFFF
_HEADER = struct.Struct("!BBH4s")
_PAIR = struct.Struct("!HH")
_WORD = struct.Struct("!I")


def _check_type(icmp_type: int) -> None:
    if not 0 <= icmp_type < _WORDS * 32:
        raise ValueError(f"ICMPv6 type {icmp_type} outside 0..255")


class Icmp6Filter:
    """A bitmap of ICMPv6 types; a set bit blocks that type."""

    def __init__(self) -> None:
        self.words = [0] * _WORDS

    def will_pass(self, icmp_type: int) -> bool:
        _check_type(icmp_type)
        return self.words[icmp_type >> 5] & (1 << (icmp_type & 31)) == 0

    def will_block(self, icmp_type: int) -> bool:
        return not self.will_pass(icmp_type)

    def set_pass(self, icmp_type: int) -> None:
        _check_type(icmp_type)
        self.words[icmp_type >> 5] &= ~(1 << (icmp_type & 31)) & _WORD_MASK

    def set_block(self, icmp_type: int) -> None:
        _check_type(icmp_type)
        self.words[icmp_type >> 5] |= 1 << (icmp_type & 31)

    def pass_all(self) -> None:
        self.words = [0] * _WORDS

    def block_all(self) -> None:
        self.words = [_WORD_MASK] * _WORDS


@dataclass
class Icmp6Header:
    """The fixed ICMPv6 header; ``data`` holds the type-specific four bytes."""

    type: int
    code: int = 0
    checksum: int = 0
    data: bytes = field(default=bytes(4))

    @property
    def id(self) -> int:
        return _PAIR.unpack(self.data)[0]

    @property
    def seq(self) -> int:
        return _PAIR.unpack(self.data)[1]

    @property
    def mtu(self) -> int:
        return _WORD.unpack(self.data)[0]

    @property
    def pptr(self) -> int:
        return _WORD.unpack(self.data)[0]

    @property
    def is_info(self) -> bool:
        return bool(self.type & ICMP6_INFOMSG_MASK)

    def pack(self) -> bytes:
        """Encode the header in network byte order.

        Raises ValueError when a field does not fit.
        """
        if len(self.data) != 4:
            raise ValueError("header data must be exactly 4 bytes")
        try:
            return _HEADER.pack(self.type, self.code, self.checksum, bytes(self.data))
        except struct.error as err:
            raise ValueError(str(err)) from err

    @classmethod
    def unpack(cls, data: bytes) -> Icmp6Header:
        """Decode the header from the start of ``data``."""
        if len(data) < _HEADER.size:
            raise ValueError(
                f"ICMPv6 header needs {_HEADER.size} bytes, got {len(data)}"
            )
        type_, code, checksum, rest = _HEADER.unpack_from(data)
        return cls(type_, code, checksum, rest)
"""The IPv6 fixed header and option type helpers."""

from __future__ import annotations

import ipaddress
import struct
from dataclasses import dataclass

IP6_HEADER_SIZE = 40

IP6F_OFF_MASK = 0xFFF8
IP6F_RESERVED_MASK = 0x0006
IP6F_MORE_FRAG = 0x0001

IP6OPT_TYPE_SKIP = 0x00
IP6OPT_TYPE_DISCARD = 0x40
IP6OPT_TYPE_FORCEICMP = 0x80
IP6OPT_TYPE_ICMP = 0xC0
IP6OPT_TYPE_MUTABLE = 0x20

IP6OPT_PAD1 = 0
IP6OPT_PADN = 1

IP6OPT_JUMBO = 0xC2
IP6OPT_NSAP_ADDR = 0xC3
IP6OPT_TUNNEL_LIMIT = 0x04
IP6OPT_ROUTER_ALERT = 0x05
IP6OPT_JUMBO_LEN = 6

IP6_ALERT_MLD = 0x0000
IP6_ALERT_RSVP = 0x0001
IP6_ALERT_AN = 0x0002

_HEADER = struct.Struct("!IHBB16s16s")

Address = ipaddress.IPv6Address


def ip6opt_type(o: int) -> int:
    """The action bits of an option type: what to do when it is unknown."""
    return o & 0xC0


@dataclass
class Ip6Header:
    """IPv6 fixed header; ``flow`` holds version, traffic class and flow label."""

    flow: int
    plen: int
    nxt: int
    hlim: int
    src: Address
    dst: Address

    def __post_init__(self) -> None:
        self.src = ipaddress.IPv6Address(self.src)
        self.dst = ipaddress.IPv6Address(self.dst)

    @property
    def version(self) -> int:
        return self.flow >> 28

    @property
    def vfc(self) -> int:
        return self.flow >> 24

    @property
    def traffic_class(self) -> int:
        return (self.flow >> 20) & 0xFF

    @property
    def flow_label(self) -> int:
        return self.flow & 0xFFFFF

    def pack(self) -> bytes:
        """Encode the header in network byte order.

        Raises ValueError when a field does not fit.
        """
        try:
            return _HEADER.pack(
                self.flow,
                self.plen,
                self.nxt,
                self.hlim,
                self.src.packed,
                self.dst.packed,
            )
        except struct.error as err:
            raise ValueError(str(err)) from err

    @classmethod
    def unpack(cls, data: bytes) -> Ip6Header:
        """Decode the header from the start of ``data``."""
        if len(data) < _HEADER.size:
            raise ValueError(f"IPv6 header needs {_HEADER.size} bytes, got {len(data)}")
        flow, plen, nxt, hlim, src, dst = _HEADER.unpack_from(data)
        return cls(flow, plen, nxt, hlim, Address(src), Address(dst))
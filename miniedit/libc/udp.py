"""The UDP header and socket option numbers."""

from __future__ import annotations

import struct
from dataclasses import dataclass

UDP_HEADER_SIZE = 8

UDP_CORK = 1
UDP_ENCAP = 100
UDP_NO_CHECK6_TX = 101
UDP_NO_CHECK6_RX = 102
UDP_SEGMENT = 103
UDP_GRO = 104

UDP_ENCAP_ESPINUDP_NON_IKE = 1
UDP_ENCAP_ESPINUDP = 2
UDP_ENCAP_L2TPINUDP = 3
UDP_ENCAP_GTP0 = 4
UDP_ENCAP_GTP1U = 5
UDP_ENCAP_RXRPC = 6

SOL_UDP = 17

_HEADER = struct.Struct("!HHHH")


@dataclass
class UdpHeader:
    """Source port, destination port, length and checksum."""

    sport: int
    dport: int
    ulen: int = UDP_HEADER_SIZE
    sum: int = 0

    def pack(self) -> bytes:
        """Encode the header in network byte order.

        Raises ValueError when a field does not fit in 16 bits.
        """
        try:
            return _HEADER.pack(self.sport, self.dport, self.ulen, self.sum)
        except struct.error as err:
            raise ValueError(str(err)) from err

    @classmethod
    def unpack(cls, data: bytes) -> UdpHeader:
        """Decode the header from the start of ``data``."""
        if len(data) < _HEADER.size:
            raise ValueError(f"UDP header needs {_HEADER.size} bytes, got {len(data)}")
        return cls(*_HEADER.unpack_from(data))
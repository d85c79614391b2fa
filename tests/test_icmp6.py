import struct

import pytest

from miniedit.libc.icmp6 import (
    ICMP6_DST_UNREACH,
    ICMP6_ECHO_REPLY,
    ICMP6_ECHO_REQUEST,
    ICMP6_PACKET_TOO_BIG,
    ND_NEIGHBOR_ADVERT,
    ND_NEIGHBOR_SOLICIT,
    Icmp6Filter,
    Icmp6Header,
)


def test_new_filter_passes_everything():
    filt = Icmp6Filter()
    assert all(filt.will_pass(t) for t in range(256))


def test_set_block_only_blocks_that_type():
    filt = Icmp6Filter()
    filt.set_block(ND_NEIGHBOR_SOLICIT)
    assert filt.will_block(ND_NEIGHBOR_SOLICIT)
    assert filt.will_pass(ND_NEIGHBOR_ADVERT)
    assert [t for t in range(256) if filt.will_block(t)] == [ND_NEIGHBOR_SOLICIT]


def test_set_pass_undoes_block():
    filt = Icmp6Filter()
    filt.set_block(ICMP6_ECHO_REQUEST)
    filt.set_pass(ICMP6_ECHO_REQUEST)
    assert filt.will_pass(ICMP6_ECHO_REQUEST)
    assert filt.words == [0] * 8


def test_block_all_and_pass_all():
    filt = Icmp6Filter()
    filt.block_all()
    assert all(filt.will_block(t) for t in range(256))
    filt.set_pass(ICMP6_ECHO_REPLY)
    assert filt.will_pass(ICMP6_ECHO_REPLY)
    assert filt.will_block(ICMP6_ECHO_REQUEST)
    filt.pass_all()
    assert not any(filt.will_block(t) for t in range(256))


@pytest.mark.parametrize("t", [0, 31, 32, 255])
def test_pass_and_block_are_opposites(t):
    filt = Icmp6Filter()
    filt.set_block(t)
    assert filt.will_pass(t) is not filt.will_block(t)
    assert filt.will_block(t)


@pytest.mark.parametrize("t", [-1, 256])
def test_type_out_of_range_raises(t):
    filt = Icmp6Filter()
    with pytest.raises(ValueError):
        filt.set_block(t)
    with pytest.raises(ValueError):
        filt.will_pass(t)


def test_header_wire_bytes():
    header = Icmp6Header(ICMP6_ECHO_REQUEST, 0, 0, b"\x00\x01\x00\x02")
    assert header.pack() == b"\x80\x00\x00\x00\x00\x01\x00\x02"


def test_header_round_trip():
    header = Icmp6Header(ICMP6_DST_UNREACH, 4, 0x1234, b"\x00\x00\x00\x00")
    assert Icmp6Header.unpack(header.pack() + b"extra") == header


def test_header_fields():
    echo = Icmp6Header(ICMP6_ECHO_REQUEST, data=struct.pack("!HH", 5, 6))
    assert (echo.id, echo.seq) == (5, 6)
    big = Icmp6Header(ICMP6_PACKET_TOO_BIG, data=struct.pack("!I", 1280))
    assert big.mtu == 1280


def test_info_flag():
    assert Icmp6Header(ICMP6_ECHO_REPLY).is_info is True
    assert Icmp6Header(ICMP6_DST_UNREACH).is_info is False


def test_unpack_short_raises():
    with pytest.raises(ValueError):
        Icmp6Header.unpack(b"\x80\x00")


def test_pack_bad_data_raises():
    with pytest.raises(ValueError):
        Icmp6Header(ICMP6_ECHO_REQUEST, data=b"\x00\x00").pack()
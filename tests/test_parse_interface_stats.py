import pytest

from pcapng_decoder.blocks import InterfaceStatistics
from pcapng_decoder.exceptions import MalformedOption, UnknownOption


def test_read_block_interface_stats():
    block = InterfaceStatistics.decode(
        b"\x00\x00\x00\x00"  # interface id
        b"\x5f\x0b\x05\x00\x40\x14\xf8\x61"  # Timestamp (high, low)
        b"\x01\x00\x09\x00"
        b"A comment\x00\x00\x00"
        b"\x02\x00\x08\x00"
        b"\x80\xb9\xa6\x64\x5f\x0b\x05\x00"  # isb_starttime
        b"\x03\x00\x08\x00"
        b"\x40\x73\x44\x6b\x5f\x0b\x05\x00"  # isb_endtime
        b"\x04\x00\x08\x00"
        b"\x45\x23\x01\x00\x00\x00\x00\x00"  # isb_ifrecv
        b"\x05\x00\x08\x00"
        b"\x20\x00\x00\x00\x00\x00\x00\x00"  # isb_ifdrop
        b"\x06\x00\x08\x00"
        b"\xbc\x0a\x00\x00\x00\x00\x00\x00"  # isb_filteraccept
        b"\x07\x00\x08\x00"
        b"\x33\x00\x00\x00\x00\x00\x00\x00"  # isb_osdrop
        b"\x08\x00\x08\x00"
        b"\xde\xbc\x0a\x00\x00\x00\x00\x00"  # isb_usrdeliv
        b"\x00\x00\x00\x00"  # End of options
    )

    assert block.interface_id == 0
    assert block.timestamp == 0x050B5F61F81440
    assert block.options.get("opt_comment") == "A comment"
    assert block.options.get("isb_starttime") == 0x050B5F64A6B980
    assert block.options.get("isb_endtime") == 0x050B5F6B447340
    assert block.options.get("isb_ifrecv") == 0x12345
    assert block.options.get("isb_ifdrop") == 0x20
    assert block.options.get("isb_filteraccept") == 0xABC
    assert block.options.get("isb_osdrop") == 0x33
    assert block.options.get("isb_usrdeliv") == 0xABCDE
    assert len(block.options) == 8


def test_read_block_interface_stats_no_options():
    block = InterfaceStatistics.decode(
        b"\x02\x00\x00\x00"  # interface id
        b"\x00\x00\x00\x00\x01\x00\x00\x00"  # Timestamp (high, low)
    )

    assert block.interface_id == 2
    assert block.timestamp == 1
    assert len(block.options) == 0


def test_read_block_interface_stats_unknown_option():
    with pytest.raises(UnknownOption):
        InterfaceStatistics.decode(
            b"\x00\x00\x00\x00"  # interface id
            b"\x00\x00\x00\x00\x01\x00\x00\x00"  # Timestamp (high, low)
            b"\x09\x00\x08\x00"
            b"\x01\x00\x00\x00\x00\x00\x00\x00"  # option 9, unknown
            b"\x00\x00\x00\x00"  # End of options
        )


def test_read_block_interface_stats_short_counter():
    with pytest.raises(MalformedOption):
        InterfaceStatistics.decode(
            b"\x00\x00\x00\x00"  # interface id
            b"\x00\x00\x00\x00\x01\x00\x00\x00"  # Timestamp (high, low)
            b"\x04\x00\x04\x00"
            b"\x01\x00\x00\x00"  # isb_ifrecv, only 32 bits
            b"\x00\x00\x00\x00"  # End of options
        )

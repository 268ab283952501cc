import io

import pytest

from pcapng_decoder.blocks import SectionHeader, SectionHeaderOption
from pcapng_decoder.constants import SIZE_NOTSET
from pcapng_decoder.exceptions import BadMagic, InvalidText, PcapngStrictnessWarning
from pcapng_decoder.scanner import BlockScanner
from pcapng_decoder.structs import Options, read_block


def test_read_block_sectionheader_comment_option():
    stream = io.BytesIO(
        b"\x0a\x0d\x0d\x0a"  # Block type
        b"\x28\x00\x00\x00"  # Block size (40 bytes)
        b"\x4d\x3c\x2b\x1a"  # Byte order magic
        b"\x01\x00\x00\x00"  # Version
        b"\xff\xff\xff\xff\xff\xff\xff\xff"  # Undefined section length
        b"\x01\x00\x04\x00test"  # opt_comment
        b"\x00\x00\x00\x00"  # End of options
        b"\x28\x00\x00\x00"  # Block size (40 bytes)
    )

    block_type, payload = read_block(stream)
    assert block_type == SectionHeader.block_type
    block = SectionHeader.decode(payload)

    assert block.magic == 0x1A2B3C4D
    assert block.major_version == 1
    assert block.minor_version == 0
    assert block.version == (1, 0)
    assert block.section_length == SIZE_NOTSET
    assert block.length is None
    assert isinstance(block.options, Options)
    assert block.options == [SectionHeaderOption(1, "opt_comment", "test")]


def test_read_block_sectionheader_missing_options():
    block = SectionHeader.read(
        io.BytesIO(
            b"\x4d\x3c\x2b\x1a"  # Byte order magic
            b"\x01\x00\x00\x00"  # Version
            b"\x00\x10\x00\x00\x00\x00\x00\x00"  # Section length
        )
    )

    assert block.length == 0x1000
    assert len(block.options) == 0


def test_read_block_sectionheader_with_options():
    scanner = BlockScanner(
        io.BytesIO(
            b"\x0a\x0d\x0d\x0a"  # Block type
            b"\x60\x00\x00\x00"  # Block size (96 bytes)
            b"\x4d\x3c\x2b\x1a"  # Byte order magic
            b"\x01\x00\x00\x00"  # Version
            b"\xff\xff\xff\xff\xff\xff\xff\xff"  # Undefined section length
            # Options
            b"\x01\x00\x0e\x00Just a comment\x00\x00"
            b"\x02\x00\x0b\x00My Computer\x00"
            b"\x03\x00\x05\x00My OS\x00\x00\x00"
            b"\x04\x00\x0a\x00A fake app\x00\x00"
            b"\x00\x00\x00\x00"
            b"\x60\x00\x00\x00"  # Block size (96 bytes)
        )
    )

    blocks = list(scanner)
    assert len(blocks) == 1
    block = blocks[0]

    assert isinstance(block, SectionHeader)
    assert len(block.options) == 4
    assert block.options.get("opt_comment") == "Just a comment"
    assert block.options.get("shb_hardware") == "My Computer"
    assert block.options.get("shb_os") == "My OS"
    assert block.options.get("shb_userappl") == "A fake app"
    assert [opt.code for opt in block.options] == [1, 2, 3, 4]


def test_read_block_sectionheader_big_endian_magic():
    with pytest.raises(BadMagic) as ctx:
        SectionHeader.decode(
            b"\x1a\x2b\x3c\x4d"  # Byte order magic, big endian
            b"\x00\x01\x00\x00"  # Version
            b"\xff\xff\xff\xff\xff\xff\xff\xff"  # Undefined section length
            b"\x01\x00\x04\x00test"  # opt_comment
            b"\x00\x00\x00\x00"  # End of options
        )

    assert str(ctx.value) == (
        "Unsupported endianness: section is big-endian (byte order magic 0x4D3C2B1A)"
    )


def test_read_block_sectionheader_bad_magic():
    with pytest.raises(BadMagic) as ctx:
        SectionHeader.decode(
            b"\xef\xbe\xad\x0b"  # Byte order magic
            b"\x01\x00\x00\x00"  # Version
            b"\xff\xff\xff\xff\xff\xff\xff\xff"  # Undefined section length
        )

    assert str(ctx.value) == (
        "Wrong byte order magic: got 0x0BADBEEF, expected 0x1A2B3C4D"
    )


def test_read_block_sectionheader_invalid_comment():
    with pytest.raises(InvalidText) as ctx:
        SectionHeader.decode(
            b"\x4d\x3c\x2b\x1a"  # Byte order magic
            b"\x01\x00\x00\x00"  # Version
            b"\xff\xff\xff\xff\xff\xff\xff\xff"  # Undefined section length
            b"\x01\x00\x02\x00\xff\xfe\x00\x00"  # opt_comment, not UTF-8
            b"\x00\x00\x00\x00"  # End of options
        )

    assert ctx.value.code == 1


def test_read_block_sectionheader_unsupported_version():
    with pytest.warns(PcapngStrictnessWarning):
        block = SectionHeader.decode(
            b"\x4d\x3c\x2b\x1a"  # Byte order magic
            b"\x02\x00\x00\x00"  # Version 2.0
            b"\xff\xff\xff\xff\xff\xff\xff\xff"  # Undefined section length
        )

    assert block.version == (2, 0)


def test_sectionheader_is_immutable():
    block = SectionHeader.decode(
        b"\x4d\x3c\x2b\x1a" b"\x01\x00\x00\x00" b"\xff\xff\xff\xff\xff\xff\xff\xff"
    )

    with pytest.raises(AttributeError):
        block.major_version = 2
    with pytest.raises(AttributeError):
        block.does_not_exist = 1

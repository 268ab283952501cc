"""
Module containing the definition of known / supported "blocks" of the
pcap-ng format.

Each block is an immutable, tuple-like value with some fixed fields
followed by its options. The block kind is told apart by its class, and
by the ``block_type`` tag every class carries.

Blocks are decoded from their payload (the bytes the framer returns,
without the type and length fields), either from a stream positioned at
the start of the payload::

    block = InterfaceDescription.read(stream)

or from a byte string::

    block = InterfaceDescription.decode(payload)
"""

import io
from collections import namedtuple

from pcapng_decoder import strictness
from pcapng_decoder.constants import ORDER_MAGIC_BE, ORDER_MAGIC_LE, SIZE_NOTSET
from pcapng_decoder.constants import SUPPORTED_VERSION
from pcapng_decoder.constants.block_types import (
    BLK_ENHANCED_PACKET,
    BLK_INTERFACE,
    BLK_INTERFACE_STATS,
    BLK_SECTION_HEADER,
)
from pcapng_decoder.exceptions import BadMagic, UnknownBlockType
from pcapng_decoder.options import (
    OPT_EPB_DROPCOUNT,
    OPT_EPB_FLAGS,
    OPT_EPB_HASH,
    OPT_EPB_PACKETID,
    OPT_EPB_QUEUE,
    OPT_EPB_VERDICT,
    OPT_IF_DESCRIPTION,
    OPT_IF_EUIADDR,
    OPT_IF_FCSLEN,
    OPT_IF_FILTER,
    OPT_IF_HARDWARE,
    OPT_IF_IPV4ADDR,
    OPT_IF_IPV6ADDR,
    OPT_IF_MACADDR,
    OPT_IF_NAME,
    OPT_IF_OS,
    OPT_IF_RXSPEED,
    OPT_IF_SPEED,
    OPT_IF_TSOFFSET,
    OPT_IF_TSRESOL,
    OPT_IF_TXSPEED,
    OPT_IF_TZONE,
    OPT_ISB_ENDTIME,
    OPT_ISB_FILTERACCEPT,
    OPT_ISB_IFDROP,
    OPT_ISB_IFRECV,
    OPT_ISB_OSDROP,
    OPT_ISB_STARTTIME,
    OPT_ISB_USRDELIV,
    OPT_SHB_HARDWARE,
    OPT_SHB_OS,
    OPT_SHB_USERAPPL,
)
from pcapng_decoder.structs import (
    TYPE_EUIADDR,
    TYPE_IPV4_MASK,
    TYPE_IPV6_PREFIX,
    TYPE_MACADDR,
    TYPE_STRING,
    TYPE_TYPE_BYTES,
    TYPE_U8,
    TYPE_U32,
    TYPE_U64,
    OptionSpec,
    decode_options,
    inside_record,
    read_bytes_padded,
    read_int,
    read_timestamp,
)
from pcapng_decoder.utils import unpack_timestamp_resolution

KNOWN_BLOCKS = {}

# Per-block option records: (code, name, value). ``name`` is None for
# options not known to the block type (only kept when not strict).
SectionHeaderOption = namedtuple("SectionHeaderOption", ("code", "name", "value"))
InterfaceDescriptionOption = namedtuple(
    "InterfaceDescriptionOption", ("code", "name", "value")
)
InterfaceStatisticsOption = namedtuple(
    "InterfaceStatisticsOption", ("code", "name", "value")
)
EnhancedPacketOption = namedtuple("EnhancedPacketOption", ("code", "name", "value"))


def register_block(block):
    """Handy decorator to register a new known block type"""
    KNOWN_BLOCKS[block.block_type] = block
    return block


class BlockDecoderMixin(object):
    """
    Shared decoding helpers. Concrete blocks must define ``block_type``,
    ``options_schema``, ``option_class`` and a ``read()`` classmethod.
    """

    __slots__ = ()

    @classmethod
    def decode(cls, payload, strict=None):
        """Decode a block from its payload bytes"""
        return cls.read(io.BytesIO(payload), strict=strict)

    @classmethod
    def _read_options(cls, stream, strict):
        return decode_options(
            stream, cls.options_schema, cls.option_class, cls.__name__, strict
        )


@register_block
class SectionHeader(
    BlockDecoderMixin,
    namedtuple(
        "SectionHeader",
        ("magic", "major_version", "minor_version", "section_length", "options"),
    ),
):
    """
    "The Section Header Block (SHB) is mandatory. It identifies the beginning
    of a section of the capture file. The Section Header Block does not contain
    data but it rather identifies a list of blocks (interfaces, packets) that
    are logically correlated."
    - pcapng file format draft, section 4.1.

    ``section_length`` is :py:data:`~pcapng_decoder.constants.SIZE_NOTSET`
    when unspecified.
    """

    __slots__ = ()
    block_type = BLK_SECTION_HEADER
    option_class = SectionHeaderOption
    options_schema = [
        OptionSpec(OPT_SHB_HARDWARE, "shb_hardware", TYPE_STRING),
        OptionSpec(OPT_SHB_OS, "shb_os", TYPE_STRING),
        OptionSpec(OPT_SHB_USERAPPL, "shb_userappl", TYPE_STRING),
    ]

    @classmethod
    def read(cls, stream, strict=None):
        with inside_record("section header"):
            magic = read_int(stream, 32)
            if magic != ORDER_MAGIC_LE:
                if magic == ORDER_MAGIC_BE:
                    raise BadMagic(
                        "Unsupported endianness: section is big-endian "
                        "(byte order magic 0x{0:08X})".format(magic)
                    )
                raise BadMagic(
                    "Wrong byte order magic: got 0x{0:08X}, "
                    "expected 0x{1:08X}".format(magic, ORDER_MAGIC_LE)
                )

            major_version = read_int(stream, 16)
            minor_version = read_int(stream, 16)
            section_length = read_int(stream, 64)

        if major_version != SUPPORTED_VERSION[0]:
            strictness.warn(
                "unsupported section version {0}.{1}".format(
                    major_version, minor_version
                ),
                strict,
            )

        options = cls._read_options(stream, strict)
        return cls(magic, major_version, minor_version, section_length, options)

    @property
    def version(self):
        return (self.major_version, self.minor_version)

    @property
    def length(self):
        """Section length, or None if it wasn't specified"""
        if self.section_length == SIZE_NOTSET:
            return None
        return self.section_length


@register_block
class InterfaceDescription(
    BlockDecoderMixin,
    namedtuple("InterfaceDescription", ("link_type", "snaplen", "options")),
):
    """
    "An Interface Description Block (IDB) is the container for information
    describing an interface on which packet data is captured."
    - pcapng file format draft, section 4.2.
    """

    __slots__ = ()
    block_type = BLK_INTERFACE
    option_class = InterfaceDescriptionOption
    options_schema = [
        OptionSpec(OPT_IF_NAME, "if_name", TYPE_STRING),
        OptionSpec(OPT_IF_DESCRIPTION, "if_description", TYPE_STRING),
        OptionSpec(OPT_IF_IPV4ADDR, "if_IPv4addr", TYPE_IPV4_MASK, multiple=True),
        OptionSpec(OPT_IF_IPV6ADDR, "if_IPv6addr", TYPE_IPV6_PREFIX, multiple=True),
        OptionSpec(OPT_IF_MACADDR, "if_MACaddr", TYPE_MACADDR),
        OptionSpec(OPT_IF_EUIADDR, "if_EUIaddr", TYPE_EUIADDR),
        OptionSpec(OPT_IF_SPEED, "if_speed", TYPE_U64),
        OptionSpec(OPT_IF_TSRESOL, "if_tsresol", TYPE_U8),
        OptionSpec(OPT_IF_TZONE, "if_tzone", TYPE_U32),
        OptionSpec(OPT_IF_FILTER, "if_filter", TYPE_TYPE_BYTES),
        OptionSpec(OPT_IF_OS, "if_os", TYPE_STRING),
        OptionSpec(OPT_IF_FCSLEN, "if_fcslen", TYPE_U8),
        OptionSpec(OPT_IF_TSOFFSET, "if_tsoffset", TYPE_U64),
        OptionSpec(OPT_IF_HARDWARE, "if_hardware", TYPE_STRING),
        OptionSpec(OPT_IF_TXSPEED, "if_txspeed", TYPE_U64),
        OptionSpec(OPT_IF_RXSPEED, "if_rxspeed", TYPE_U64),
    ]

    @classmethod
    def read(cls, stream, strict=None):
        with inside_record("interface description"):
            link_type = read_int(stream, 16)
            read_int(stream, 16)  # reserved
            snaplen = read_int(stream, 32)

        options = cls._read_options(stream, strict)
        return cls(link_type, snaplen, options)

    @property
    def timestamp_resolution(self):
        # ------------------------------------------------------------
        # If the if_tsresol option is not present, a resolution of
        # 10^-6 is assumed (i.e. timestamps have the same resolution
        # of the standard 'libpcap' timestamps).
        # ------------------------------------------------------------

        if OPT_IF_TSRESOL in self.options:
            return unpack_timestamp_resolution(
                bytes((self.options.get(OPT_IF_TSRESOL),))
            )

        return 1e-6


@register_block
class InterfaceStatistics(
    BlockDecoderMixin,
    namedtuple("InterfaceStatistics", ("interface_id", "timestamp", "options")),
):
    """
    "The Interface Statistics Block (ISB) contains the capture statistics for a
    given interface [...]. The statistics are referred to the interface defined
    in the current Section identified by the Interface ID field."
    - pcapng file format draft, section 4.6.
    """

    __slots__ = ()
    block_type = BLK_INTERFACE_STATS
    option_class = InterfaceStatisticsOption
    options_schema = [
        OptionSpec(OPT_ISB_STARTTIME, "isb_starttime", TYPE_U64),
        OptionSpec(OPT_ISB_ENDTIME, "isb_endtime", TYPE_U64),
        OptionSpec(OPT_ISB_IFRECV, "isb_ifrecv", TYPE_U64),
        OptionSpec(OPT_ISB_IFDROP, "isb_ifdrop", TYPE_U64),
        OptionSpec(OPT_ISB_FILTERACCEPT, "isb_filteraccept", TYPE_U64),
        OptionSpec(OPT_ISB_OSDROP, "isb_osdrop", TYPE_U64),
        OptionSpec(OPT_ISB_USRDELIV, "isb_usrdeliv", TYPE_U64),
    ]

    @classmethod
    def read(cls, stream, strict=None):
        with inside_record("interface statistics"):
            interface_id = read_int(stream, 32)
            timestamp = read_timestamp(stream)

        options = cls._read_options(stream, strict)
        return cls(interface_id, timestamp, options)


@register_block
class EnhancedPacket(
    BlockDecoderMixin,
    namedtuple(
        "EnhancedPacket",
        (
            "interface_id",
            "timestamp",
            "captured_len",
            "packet_len",
            "packet_data",
            "options",
        ),
    ),
):
    """
    "An Enhanced Packet Block (EPB) is the standard container for storing the
    packets coming from the network."
    - pcapng file format draft, section 4.3.

    * ``captured_len`` is the amount of packet data stored in the block
    * ``packet_len`` is the original amount of data that was "on the wire"
    * ``packet_data`` is the actual binary packet data
    """

    __slots__ = ()
    block_type = BLK_ENHANCED_PACKET
    option_class = EnhancedPacketOption
    options_schema = [
        OptionSpec(OPT_EPB_FLAGS, "epb_flags", TYPE_U32),
        OptionSpec(OPT_EPB_HASH, "epb_hash", TYPE_TYPE_BYTES, multiple=True),
        OptionSpec(OPT_EPB_DROPCOUNT, "epb_dropcount", TYPE_U64),
        OptionSpec(OPT_EPB_PACKETID, "epb_packetid", TYPE_U64),
        OptionSpec(OPT_EPB_QUEUE, "epb_queue", TYPE_U32),
        OptionSpec(OPT_EPB_VERDICT, "epb_verdict", TYPE_TYPE_BYTES, multiple=True),
    ]

    @classmethod
    def read(cls, stream, strict=None):
        with inside_record("enhanced packet"):
            interface_id = read_int(stream, 32)
            timestamp = read_timestamp(stream)
            captured_len = read_int(stream, 32)
            packet_len = read_int(stream, 32)
            packet_data = read_bytes_padded(stream, captured_len)

        options = cls._read_options(stream, strict)
        return cls(
            interface_id, timestamp, captured_len, packet_len, packet_data, options
        )


class UnknownBlock(namedtuple("UnknownBlock", ("block_type", "data"))):
    """
    Class used to represent an unknown block.

    Its block type and raw data will be stored directly with no further
    processing.
    """

    __slots__ = ()

    def __repr__(self):
        return "UnknownBlock(0x{0:08X}, {1!r})".format(self.block_type, self.data)


def decode_block(block_type, payload, strict=None):
    """
    Decode a block payload, choosing the decoder by block type.

    :param block_type: the block type, as returned by
        :py:func:`~pcapng_decoder.structs.read_block`
    :param payload: the block payload bytes
    :param strict: strictness level for this call, or None for the
        configured default
    :raises: :py:exc:`~pcapng_decoder.exceptions.UnknownBlockType` if no
        decoder is registered for ``block_type``
    """
    try:
        block_class = KNOWN_BLOCKS[block_type]
    except KeyError:
        raise UnknownBlockType(block_type) from None
    return block_class.decode(payload, strict=strict)

"""
Module providing facilities for reading struct-like data out of
pcapng blocks: integers, padded byte strings, the block envelope
and option chains.
"""

import contextlib
import ipaddress
import logging
import struct
from collections import namedtuple
from collections.abc import Sequence

from pcapng_decoder import strictness
from pcapng_decoder.constants import BLOCK_ENVELOPE_SIZE, ENDIANNESS
from pcapng_decoder.exceptions import (
    CorruptedFile,
    InvalidText,
    MalformedOption,
    StreamEmpty,
    TransportError,
    TruncatedFile,
    UnknownOption,
)
from pcapng_decoder.options import (
    OPT_COMMENT,
    OPT_CUSTOM_BYTES,
    OPT_CUSTOM_BYTES_SAFE,
    OPT_CUSTOM_STR,
    OPT_CUSTOM_STR_SAFE,
    OPT_ENDOFOPT,
)
from pcapng_decoder.utils import align4, unpack_le_uint

logger = logging.getLogger(__name__)

INT_FORMATS = {8: "b", 16: "h", 32: "i", 64: "q"}

# Type name constants, to keep a list and prevent typos
TYPE_BYTES = "bytes"
TYPE_STRING = "string"
TYPE_IPV4_MASK = "ipv4+mask"
TYPE_IPV6_PREFIX = "ipv6+prefix"
TYPE_MACADDR = "macaddr"
TYPE_EUIADDR = "euiaddr"
TYPE_TYPE_BYTES = "type+bytes"
TYPE_OPT_CUSTOM_STR = "opt_custom_str"
TYPE_OPT_CUSTOM_BYTES = "opt_custom_bytes"

TYPE_U8 = "u8"  # Unsigned integer, 8 bits
TYPE_U16 = "u16"
TYPE_U32 = "u32"
TYPE_U64 = "u64"

_numeric_types = {
    TYPE_U8: "B",
    TYPE_U16: "H",
    TYPE_U32: "I",
    TYPE_U64: "Q",
}


@contextlib.contextmanager
def inside_record(what):
    """
    Context manager turning a :py:exc:`StreamEmpty` into a
    :py:exc:`TruncatedFile`.

    Reaching the end of the stream is fine *between* records, but once
    we started reading one, all of its bytes must be there.
    """
    try:
        yield
    except StreamEmpty as e:
        raise TruncatedFile("Stream ended while reading {0}".format(what)) from e


def read_int(stream, size, signed=False):
    """
    Read (and decode) a little-endian integer number from a binary stream.

    :param stream: an object providing a ``read()`` method
    :param size: the size, in bits, of the number to be read.
        Supported sizes are: 8, 16, 32 and 64 bits.
    :param signed: Whether a signed or unsigned number is required.
        Defaults to ``False`` (unsigned int).
    :return: the read integer number
    """
    fmt = INT_FORMATS.get(size)
    if fmt is None:
        raise ValueError("Unsupported integer size: {0}".format(size))
    fmt = ENDIANNESS + (fmt.lower() if signed else fmt.upper())
    data = read_bytes(stream, size // 8)
    return struct.unpack(fmt, data)[0]


def read_timestamp(stream):
    """
    Read a 64bit timestamp, stored as two 32bit words, the most
    significant one first.
    """
    timestamp_high = read_int(stream, 32)
    timestamp_low = read_int(stream, 32)
    return (timestamp_high << 32) | timestamp_low


def read_bytes(stream, size):
    """
    Read the given amount of raw bytes from a stream.

    Short reads from the stream are retried until either we have
    enough data, or the stream returns nothing.

    :param stream: the stream from which to read data
    :param size: the size to read, in bytes
    :returns: the read data
    :raises: :py:exc:`~pcapng_decoder.exceptions.StreamEmpty` if zero bytes
        were read
    :raises: :py:exc:`~pcapng_decoder.exceptions.TruncatedFile` if
        0 < bytes < size were read
    :raises: :py:exc:`~pcapng_decoder.exceptions.TransportError` if the
        stream itself failed
    """

    if size == 0:
        return b""

    data = b""
    while len(data) < size:
        try:
            chunk = stream.read(size - len(data))
        except OSError as e:
            raise TransportError(
                "Failed reading {0} bytes from stream: {1}".format(size, e)
            ) from e
        if not chunk:
            break
        data += chunk

    if len(data) == 0:
        raise StreamEmpty("Zero bytes read from stream")
    if len(data) < size:
        raise TruncatedFile(
            "Trying to read {0} bytes, only got {1}".format(size, len(data))
        )
    return data


def read_bytes_padded(stream, size):
    """
    Read the given amount of bytes from a stream, plus read and discard
    any necessary extra byte to align up to the next 32bit boundary.

    :param stream: the stream from which to read data
    :param size: the size to read, in bytes
    :returns: the read data, exactly ``size`` bytes long
    """
    return read_bytes(stream, align4(size))[:size]


def read_block(stream):
    """
    Read one block envelope from a stream.

    Each "block" is in the form:

    - 32bit integer indicating the block type
    - 32bit integer indicating the size (including header and size)
    - block payload (the above-specified number of bytes minus 12)
    - 32bit integer indicating the size (again)

    The payload is not interpreted in any way.

    :param stream: the stream from which to read data
    :returns: a ``(block_type, payload)`` tuple
    :raises: :py:exc:`~pcapng_decoder.exceptions.StreamEmpty` if the stream
        ended right before the block
    :raises: :py:exc:`~pcapng_decoder.exceptions.CorruptedFile` if the two
        length fields don't match
    """

    block_type = read_int(stream, 32)

    with inside_record("block 0x{0:08X}".format(block_type)):
        block_length = read_int(stream, 32)
        logger.debug("    block type: 0x{0:08x}".format(block_type))
        logger.debug("    block length: {0} (0x{0:08x})".format(block_length))

        if block_length < BLOCK_ENVELOPE_SIZE:
            raise CorruptedFile("Invalid block length: {0}".format(block_length))

        payload_length = block_length - BLOCK_ENVELOPE_SIZE
        block_data = read_bytes_padded(stream, payload_length)
        logger.debug("    payload length: {0}".format(payload_length))

        block_length2 = read_int(stream, 32)

    if block_length != block_length2:
        raise CorruptedFile(
            "Mismatching block lengths: {0} and {1}".format(block_length, block_length2)
        )
    return block_type, block_data


def read_options(stream):
    """
    Read "options" from a stream, until the stream is exhausted or an
    end marker is reached.

    Each option is composed by:

    - option_code (uint16)
    - value_length (uint16)
    - value (value_length-sized binary data, padded to 32 bits)

    The end marker is simply an option with code ``0x0000``; it is
    never yielded.

    :returns: a generator of ``(code, value)`` tuples
    """

    while True:
        try:
            option_code = read_int(stream, 16)
        except StreamEmpty:
            return

        with inside_record("option {0}".format(option_code)):
            option_length = read_int(stream, 16)
            payload = read_bytes_padded(stream, option_length)

        if option_code == OPT_ENDOFOPT:
            return
        yield option_code, payload


# Class representing a single option schema entry.
# require code and name; by default, raw bytes, forbid multiples
OptionSpec = namedtuple(
    "OptionSpec", ("code", "name", "ftype", "multiple"), defaults=(TYPE_BYTES, False)
)

# Options known by every block type
COMMON_OPTIONS = [
    OptionSpec(OPT_COMMENT, "opt_comment", TYPE_STRING, multiple=True),
    # The format calls all these next options ``opt_custom`` --
    # they're renamed here so they can be told apart
    OptionSpec(OPT_CUSTOM_STR_SAFE, "custom_str_safe", TYPE_OPT_CUSTOM_STR, True),
    OptionSpec(OPT_CUSTOM_BYTES_SAFE, "custom_bytes_safe", TYPE_OPT_CUSTOM_BYTES, True),
    OptionSpec(OPT_CUSTOM_STR, "custom_str", TYPE_OPT_CUSTOM_STR, True),
    OptionSpec(OPT_CUSTOM_BYTES, "custom_bytes", TYPE_OPT_CUSTOM_BYTES, True),
]


def _unpack(code, fmt, value):
    fmt = ENDIANNESS + fmt
    size = struct.calcsize(fmt)
    if len(value) < size:
        raise MalformedOption(code, size, len(value))
    unpacked = struct.unpack_from(fmt, value)
    if len(unpacked) == 1:
        return unpacked[0]
    return unpacked


def _require(code, value, size):
    if len(value) < size:
        raise MalformedOption(code, size, len(value))


def _decode_text(code, value):
    try:
        return value.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidText(code, e.reason) from e


def decode_option_value(code, value, ftype):
    """
    Convert the raw value of an option to a Python value.

    The following value types are currently supported:

    - ``bytes``: keep the raw value
    - ``string``: unicode string, using utf-8 encoding
    - ``u{8,16,32,64}``: unsigned integer of the specified length
    - ``ipv4+mask``: an ipv4 address followed by a netmask, as two
      integers [8 bytes]
    - ``ipv6+prefix``: an ipv6 address followed by prefix length [17 bytes]
    - ``macaddr``: a mac address, as an integer [6 bytes]
    - ``euiaddr``: a eui address, as an integer [8 bytes]
    - ``type+bytes``: field where the first byte is a type, and
      the remainder is bytes
    - ``opt_custom_str`` and ``opt_custom_bytes``: 4 bytes of Private
      Enterprise Number, followed by str or bytes
    """

    if ftype == TYPE_BYTES:
        return bytes(value)

    if ftype == TYPE_STRING:
        return _decode_text(code, value)

    if ftype in _numeric_types:
        return _unpack(code, _numeric_types[ftype], value)

    if ftype == TYPE_IPV4_MASK:
        return _unpack(code, "II", value)

    if ftype == TYPE_IPV6_PREFIX:
        _require(code, value, 17)
        return ipaddress.IPv6Address(bytes(value[:16])), value[16]

    if ftype == TYPE_MACADDR:
        _require(code, value, 6)
        return unpack_le_uint(value[:6])

    if ftype == TYPE_EUIADDR:
        _require(code, value, 8)
        return unpack_le_uint(value[:8])

    if ftype == TYPE_TYPE_BYTES:
        _require(code, value, 1)
        return value[0], bytes(value[1:])

    if ftype == TYPE_OPT_CUSTOM_STR:
        return _unpack(code, "I", value), _decode_text(code, value[4:])

    if ftype == TYPE_OPT_CUSTOM_BYTES:
        return _unpack(code, "I", value), bytes(value[4:])

    raise ValueError("Unsupported field type: {0}".format(ftype))


def decode_options(stream, schema, option_class, block_name, strict=None):
    """
    Read the option chain from a stream and decode it following a schema.

    :param stream: a stream positioned at the first option
    :param schema: list of :py:class:`OptionSpec` known by the block type,
        in addition to :py:data:`COMMON_OPTIONS`
    :param option_class: the ``(code, name, value)`` record type to build
    :param block_name: name of the block, used in error messages
    :param strict: a :py:class:`~pcapng_decoder.strictness.Strictness`
        level, or ``None`` for the configured default.
        Unknown option codes are an error when ``FORBID``, dropped when
        ``FIX`` and kept as raw bytes (with ``name=None``) otherwise.
    :return: an :py:class:`Options` instance
    """

    specs = {spec.code: spec for spec in COMMON_OPTIONS}
    specs.update((spec.code, spec) for spec in schema)

    decoded = []
    seen = set()
    for code, value in read_options(stream):
        spec = specs.get(code)

        if spec is None:
            strictness.problem(UnknownOption(code, block_name), strict)
            if strictness.should_fix(strict):
                continue
            decoded.append(option_class(code, None, bytes(value)))
            continue

        if code in seen and not spec.multiple:
            strictness.warn(
                "repeated option {0} '{1}' in {2} block should appear "
                "only once".format(code, spec.name, block_name),
                strict,
            )
            if strictness.should_fix(strict):
                continue
        seen.add(code)

        decoded.append(
            option_class(code, spec.name, decode_option_value(code, value, spec.ftype))
        )

    return Options(decoded)


class Options(Sequence):
    """
    Read-only, ordered collection of the options of a block.

    Items are ``(code, name, value)`` records, in the order they were
    found in the block; options allowed to appear more than once are
    all kept.

    Besides indexing by position, values can be looked up either by
    numeric code or by name::

        >>> block.options.get("if_name")
        'eth0'
        >>> block.options.get_all("opt_comment")
        ['first', 'second']
        >>> "if_tsresol" in block.options
        True
    """

    __slots__ = ["_items"]

    def __init__(self, items=()):
        self._items = tuple(items)

    def __getitem__(self, index):
        return self._items[index]

    def __len__(self):
        return len(self._items)

    def __contains__(self, key):
        if isinstance(key, (str, int)):
            return any(self._matches(item, key) for item in self._items)
        return key in self._items

    def __eq__(self, other):
        if isinstance(other, Options):
            return self._items == other._items
        if isinstance(other, (tuple, list)):
            return self._items == tuple(other)
        return NotImplemented

    def __hash__(self):
        return hash(self._items)

    def get(self, key, default=None):
        """Get the value of the first option with the given name or code"""
        for item in self._items:
            if self._matches(item, key):
                return item.value
        return default

    def get_all(self, key):
        """Get all the values for the given option"""
        return [item.value for item in self._items if self._matches(item, key)]

    def __repr__(self):
        return "{0}({1!r})".format(self.__class__.__name__, list(self._items))

    @staticmethod
    def _matches(item, key):
        if isinstance(key, str):
            return item.name == key
        return item.code == key

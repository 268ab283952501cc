"""Generic constants"""

# Byte order magic numbers
# ----------------------------------------

# What the section header magic looks like when read back as a
# little-endian number: the only byte order we decode.
ORDER_MAGIC_LE = 0x1A2B3C4D

# ..and what it looks like when the section was written big-endian.
ORDER_MAGIC_BE = 0x4D3C2B1A

SIZE_NOTSET = 0xFFFFFFFFFFFFFFFF  # 64bit "-1"

# Format version we know how to read
SUPPORTED_VERSION = (1, 0)

# All the multi-byte fields are little-endian, in :py:mod:`struct` notation
ENDIANNESS = "<"

# Block type, block length and trailing block length
BLOCK_ENVELOPE_SIZE = 12

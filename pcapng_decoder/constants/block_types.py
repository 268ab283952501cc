# PCAPNG Block types

BLK_RESERVED = 0x00000000  # Reserved
BLK_INTERFACE = 0x00000001  # Interface description block
BLK_PACKET = 0x00000002  # Packet Block (obsolete, not decoded)
BLK_PACKET_SIMPLE = 0x00000003  # Simple Packet block (not decoded)
BLK_NAME_RESOLUTION = 0x00000004  # Name Resolution Block (not decoded)
BLK_INTERFACE_STATS = 0x00000005  # Interface Statistics Block
BLK_ENHANCED_PACKET = 0x00000006  # Enhanced Packet Block

BLK_SECTION_HEADER = 0x0A0D0D0A  # Section Header Block

# Block types reserved to detect trace files corrupted because of
# file transfers using the HTTP protocol in text mode, as
# (mask, value) pairs: 0x0A0D0Axx, 0xxx0A0D0A, 0xxx0A0D0D, 0x0D0D0Axx
BLK_RESERVED_CORRUPTED = [
    (0xFFFFFF00, 0x0A0D0A00),
    (0x00FFFFFF, 0x000A0D0A),
    (0x00FFFFFF, 0x000A0D0D),
    (0xFFFFFF00, 0x0D0D0A00),
]


def is_reserved_corrupted(block_type):
    """Tell whether a block type is one of the "corrupted transfer" markers"""
    return any(block_type & mask == value for mask, value in BLK_RESERVED_CORRUPTED)

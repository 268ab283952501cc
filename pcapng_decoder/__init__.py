# ----------------------------------------------------------------------
# Library to decode the pcap-ng block format
#
# See: https://www.ietf.org/archive/id/draft-tuexen-opsawg-pcapng-05.html
# ----------------------------------------------------------------------

from .blocks import (  # noqa
    EnhancedPacket,
    InterfaceDescription,
    InterfaceStatistics,
    SectionHeader,
    UnknownBlock,
    decode_block,
)
from .scanner import BlockScanner  # noqa
from .structs import read_block, read_options  # noqa
from .utils import align4  # noqa

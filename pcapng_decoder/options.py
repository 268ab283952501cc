# Option codes, per block type
# ------------------------------------------------------------
#
# Each block type has its own option vocabulary: the same code
# means different things in different blocks (eg. code 2 is
# shb_hardware in a section header, but if_name in an interface
# description).

# Generic options
# ----------------------------------------

# It delimits the end of the optional fields. Never part of the
# decoded options.
OPT_ENDOFOPT = 0

# A UTF-8 string containing a comment that is associated to the
# current block. Valid in every block, can be repeated.
OPT_COMMENT = 1

# Custom options: a 32bit Private Enterprise Number followed by
# either a UTF-8 string or raw bytes. The "safe" variants may be
# copied to a new file by tools that don't understand them.
OPT_CUSTOM_STR_SAFE = 2988
OPT_CUSTOM_BYTES_SAFE = 2989
OPT_CUSTOM_STR = 19372
OPT_CUSTOM_BYTES = 19373

# Section header options
# ----------------------------------------

# Description of the hardware used to create this section.
OPT_SHB_HARDWARE = 2

# Name of the operating system used to create this section.
OPT_SHB_OS = 3

# Name of the application used to create this section.
OPT_SHB_USERAPPL = 4

# Interface description options
# ----------------------------------------

# Name of the device used to capture data.
OPT_IF_NAME = 2

# Description of the device used to capture data.
OPT_IF_DESCRIPTION = 3

# 8 bytes: IPv4 address and netmask. Can be repeated.
OPT_IF_IPV4ADDR = 4

# 17 bytes: IPv6 address and prefix length (stored in the last
# byte). Can be repeated.
OPT_IF_IPV6ADDR = 5

# 6 bytes: hardware MAC address (48 bits).
OPT_IF_MACADDR = 6

# 8 bytes: hardware EUI address (64 bits).
OPT_IF_EUIADDR = 7

# 8 bytes: interface speed, in bps.
OPT_IF_SPEED = 8

# 1 byte: resolution of timestamps. If the Most Significant Bit is
# zero, the remaining bits are a negative power of 10 (6 means
# microseconds); if it's one, a negative power of 2 (10 means 1/1024
# of second). Defaults to 10^-6 when missing.
OPT_IF_TSRESOL = 9

# 4 bytes: time zone for GMT support.
OPT_IF_TZONE = 10

# The filter used to capture traffic. The first byte tells the kind
# of filter (libpcap string, BPF bytecode, ...).
OPT_IF_FILTER = 11

# Operating system of the machine this interface is installed on;
# can differ from shb_os if the capture was done remotely.
OPT_IF_OS = 12

# 1 byte: length of the Frame Check Sequence, in bits.
OPT_IF_FCSLEN = 13

# 8 bytes: offset, in seconds, to add to every timestamp of this
# interface to get an absolute timestamp.
OPT_IF_TSOFFSET = 14

# Description of the interface hardware.
OPT_IF_HARDWARE = 15

# 8 bytes: transmit / receive speed, in bps.
OPT_IF_TXSPEED = 16
OPT_IF_RXSPEED = 17

# Enhanced packet options
# ----------------------------------------

# 4 bytes: link-layer flags word.
OPT_EPB_FLAGS = 2

# Hash of the packet: the first byte is the algorithm (2s
# complement, XOR, CRC32, MD5, SHA-1, ...), followed by the digest.
# Can be repeated.
OPT_EPB_HASH = 3

# 8 bytes: packets lost between this packet and the preceding one.
OPT_EPB_DROPCOUNT = 4

# 8 bytes: unique identifier of the packet.
OPT_EPB_PACKETID = 5

# 4 bytes: queue of the interface the packet was received on.
OPT_EPB_QUEUE = 6

# Verdict of the packet: one byte for the verdict type, followed by
# type-specific data. Can be repeated.
OPT_EPB_VERDICT = 7

# Interface statistics options
# ----------------------------------------
# All of them are 8 bytes wide.

# Time in which the capture started / ended.
OPT_ISB_STARTTIME = 2
OPT_ISB_ENDTIME = 3

# Packets received from the physical interface.
OPT_ISB_IFRECV = 4

# Packets dropped by the interface due to lack of resources.
OPT_ISB_IFDROP = 5

# Packets accepted by the filter.
OPT_ISB_FILTERACCEPT = 6

# Packets dropped by the operating system.
OPT_ISB_OSDROP = 7

# Packets delivered to the user. Can differ from
# 'isb_filteraccept - isb_osdrop' since some packets could still lay
# in the OS buffers when the capture ended.
OPT_ISB_USRDELIV = 8

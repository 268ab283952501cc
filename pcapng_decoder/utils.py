def align4(size):
    # type: (int) -> int
    """
    Round a byte count up to the next multiple of 4.

    Every length-prefixed field in the format is padded to a 32bit
    boundary, so this is how many bytes it takes on the wire.
    """
    return (size + 3) & ~3


def unpack_le_uint(data):
    # type: (bytes) -> int
    """
    Fold a little-endian sequence of bytes, of any length, into an
    unsigned integer.

    Used for 48bit MAC addresses and 64bit EUI addresses, which are
    stored right-aligned in the returned number.
    """
    return int.from_bytes(data, "little", signed=False)


def unpack_timestamp_resolution(data):
    # type: (bytes) -> float
    """
    Unpack a timestamp resolution.

    Returns a floating point number representing the timestamp
    resolution (multiplier).
    """
    if len(data) != 1:
        raise ValueError("Data must be exactly one byte")
    num = data[0]
    base = 2 if (num >> 7 & 1) else 10
    exponent = num & 0b01111111
    return float(base ** (-exponent))

class PcapngException(Exception):
    """Base for all the pcapng exceptions"""

    pass


class PcapngWarning(Warning):
    """Base for all the pcapng warnings"""

    pass


class PcapngLoadError(PcapngException):
    """Indicate an error while loading a pcapng block"""

    pass


class PcapngStrictnessWarning(PcapngWarning):
    """Indicate a condition about poorly formed pcapng data"""


# ----------------------------------------------------------------------
# Transport failures: the stream could not provide the bytes we needed
# ----------------------------------------------------------------------


class TransportError(PcapngLoadError):
    """
    Exception indicating the underlying stream failed to provide the
    requested data. When the stream itself raised, the original
    exception is available as ``__cause__``.
    """

    pass


class StreamEmpty(TransportError):  # End of stream
    """
    Exception indicating that the end of the stream was reached
    and exactly zero bytes were read; usually it simply indicates
    we reached the end of the stream and no further content is
    available for reading.
    """

    pass


class TruncatedFile(TransportError):
    """
    Exception used to indicate that not all the required bytes
    could be read before stream end, but the read length was
    non-zero, indicating a possibly truncated stream.
    """

    pass


# ----------------------------------------------------------------------
# Format failures: bytes were read, but they don't make sense
# ----------------------------------------------------------------------


class PcapngFormatError(PcapngLoadError):
    """Base for errors about the content of a block"""

    pass


class CorruptedFile(PcapngFormatError):
    """
    Exception used to indicate that something is wrong with the
    block structure, possibly due to data corruption.
    """

    pass


class BadMagic(PcapngFormatError):
    """
    Exception used to indicate a failure due to the section header
    byte order magic not matching, meaning either the section was
    written with a different byte order or the data is not pcapng.
    """

    pass


class UnknownBlockType(PcapngFormatError):
    """No decoder is registered for the requested block type"""

    def __init__(self, block_type):
        super(UnknownBlockType, self).__init__(
            "No decoder for block type 0x{0:08X}".format(block_type)
        )
        self.block_type = block_type


class UnknownOption(PcapngFormatError):
    """
    Exception raised when an option code is not part of the vocabulary
    of the block being decoded.
    """

    def __init__(self, code, block_name):
        super(UnknownOption, self).__init__(
            "Unknown option code {0} for {1} block".format(code, block_name)
        )
        self.code = code
        self.block_name = block_name


class InvalidText(PcapngFormatError):
    """
    Exception raised when a string option does not contain valid UTF-8.
    The :py:exc:`UnicodeDecodeError` is chained as ``__cause__``.
    """

    def __init__(self, code, reason):
        super(InvalidText, self).__init__(
            "Option {0} is not valid UTF-8: {1}".format(code, reason)
        )
        self.code = code


class MalformedOption(PcapngFormatError):
    """Option value is too short for its declared type"""

    def __init__(self, code, expected, got):
        super(MalformedOption, self).__init__(
            "Option {0} needs {1} bytes, got {2}".format(code, expected, got)
        )
        self.code = code

import logging

import pcapng_decoder.blocks as blocks
from pcapng_decoder.constants.block_types import BLK_RESERVED, is_reserved_corrupted
from pcapng_decoder.exceptions import CorruptedFile, StreamEmpty
from pcapng_decoder.structs import read_block

logger = logging.getLogger(__name__)


class BlockScanner(object):
    """
    pcap-ng block scanner.

    This object can be iterated to get decoded blocks out of a pcap-ng
    stream (a file or file-like object providing a .read() method).

    Example usage:

        .. code-block:: python

            from pcapng_decoder import BlockScanner

            with open('/tmp/mycapture.pcapng', 'rb') as fp:
                for block in BlockScanner(fp):
                    pass  # do something with the block...

    Iteration stops when the stream ends cleanly between two blocks.
    Any other error is raised to the caller, and the scanner should not
    be used any further: there is no way to find the start of the next
    block once the framing is broken.

    :param stream:
        a file-like object from which to read the data.
        If you need to parse data from some string you have entirely in-memory,
        just wrap it in a :py:class:`io.BytesIO` object.
    :param strict:
        a :py:class:`~pcapng_decoder.strictness.Strictness` level used for
        every block, or None to use the configured default.
    """

    __slots__ = ["stream", "strict"]

    def __init__(self, stream, strict=None):
        self.stream = stream
        self.strict = strict

    def __iter__(self):
        while True:
            try:
                block = self.read_next_block()
            except StreamEmpty:
                return
            yield block

    def read_next_block(self):
        """
        Read and decode the next block from the stream.

        :raises: :py:exc:`~pcapng_decoder.exceptions.StreamEmpty` if there
            are no more blocks
        """
        logger.debug("---- Reading next block from input ----")
        block_type, data = read_block(self.stream)

        if block_type in blocks.KNOWN_BLOCKS:
            return blocks.decode_block(block_type, data, strict=self.strict)

        if is_reserved_corrupted(block_type):
            raise CorruptedFile(
                "Block type 0x{0:08X} is reserved to detect a corrupted file".format(
                    block_type
                )
            )

        if block_type == BLK_RESERVED:
            raise CorruptedFile(
                "Block type 0x00000000 is reserved and should not be used "
                "in capture files!"
            )

        logger.warning(
            "Unrecognised block type 0x{0:08x} was not decoded".format(block_type)
        )
        return blocks.UnknownBlock(block_type, data)

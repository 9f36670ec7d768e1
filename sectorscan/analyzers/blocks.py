"""
Block Reader
=============

Partitions a binary stream into fixed-size blocks using a single
reusable buffer. Each block is handed out as a ``memoryview`` of the
bytes actually read; the view is only valid until the next read.
"""

from __future__ import annotations

from typing import BinaryIO, Iterator


class BlockReader:
    """Sequential fixed-size reader over a binary stream.

    A read keeps calling ``readinto`` until the buffer is full or the
    stream reports end of input, so a short chunk from a pipe or socket
    is not taken for the end of the data. :class:`OSError` from the
    stream propagates to the caller.

    Attributes:
        block_size: Capacity of the buffer in bytes.
        offset: Byte offset of the next block.
    """

    def __init__(self, stream: BinaryIO, block_size: int) -> None:
        if block_size <= 0:
            raise ValueError(f"block_size must be > 0, got {block_size}")
        self._stream = stream
        self.block_size = block_size
        self._buffer = bytearray(block_size)
        self._view = memoryview(self._buffer)
        self.offset = 0

    def read_block(self) -> memoryview:
        """Fill the buffer and return a view of the bytes read.

        Returns:
            A view of length ``block_size`` for a full block, shorter
            for the final partial block, empty at end of input.
        """
        filled = 0
        while filled < self.block_size:
            n = self._stream.readinto(self._view[filled:])
            if not n:
                break
            filled += n
        self.offset += filled
        return self._view[:filled]

    def __iter__(self) -> Iterator[tuple[int, memoryview]]:
        """Yield ``(offset, block)`` pairs until end of input."""
        while True:
            start = self.offset
            block = self.read_block()
            if not block:
                return
            yield start, block

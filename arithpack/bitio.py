"""Bit-level reading and writing used by the arithmetic coder."""

from __future__ import annotations

from typing import BinaryIO

WHOLE = 1 << 32
HALF = 1 << 31
QUARTER = 1 << 30


class ArchiveFormatError(Exception):
    """Raised when an archive does not follow the expected layout."""


class BitWriter:
    """Packs bits most-significant first into bytes written to a stream."""

    def __init__(self, stream: BinaryIO) -> None:
        self.stream = stream
        self._byte = 0
        self._filled = 0

    def reset(self) -> None:
        """Drop any partially filled byte."""
        self._byte = 0
        self._filled = 0

    def _put(self, bit: int) -> None:
        self._byte |= bit << (7 - self._filled)
        self._filled += 1
        if self._filled == 8:
            self.stream.write(bytes((self._byte,)))
            self._byte = 0
            self._filled = 0

    def emit(self, count: int, bit: int) -> int:
        """Write ``bit`` followed by ``count`` opposite bits.

        Returns the value of the byte currently being filled.
        """
        bit = 1 if bit else 0
        self._put(bit)
        opposite = 1 - bit
        for _ in range(count):
            self._put(opposite)
        return self._byte


class BitReader:
    """Reads bits most-significant first from a stream.

    When the stream runs out and ``last`` is true, the most recent byte is
    read again; otherwise running out is a format error.
    """

    def __init__(self, stream: BinaryIO, last: bool) -> None:
        self.stream = stream
        self.last = last
        self._byte = 0
        self._remaining = 0

    def next_bit(self) -> int:
        """Return the next bit of the stream."""
        if not self._remaining:
            chunk = self.stream.read(1)
            if chunk:
                self._byte = chunk[0]
            elif not self.last:
                raise ArchiveFormatError("unexpected end of archive")
            self._remaining = 8
        self._remaining -= 1
        return (self._byte >> self._remaining) & 1

    def read_sample(self) -> int:
        """Return the next 32 bits as an unsigned integer."""
        value = 0
        for _ in range(32):
            value = (value << 1) | self.next_bit()
        return value
"""Arithmetic decoder and archive reader."""

from __future__ import annotations

import io
import struct
from itertools import accumulate
from typing import BinaryIO, Sequence

from .bitio import HALF, QUARTER, WHOLE, ArchiveFormatError, BitReader
from .report import split_directory

# After a non-empty stream the reader has looked this many bytes too far ahead.
_REWIND = 3


def _read_exact(stream: BinaryIO, size: int, what: str) -> bytes:
    chunk = stream.read(size)
    if len(chunk) != size:
        raise ArchiveFormatError(f"truncated {what}")
    return chunk


def read_header(stream: BinaryIO, ascii_only: bool) -> list[int]:
    """Read a frequency table written in dense or sparse form."""
    flag = _read_exact(stream, 1, "table flag")[0]
    rate_format = "<H" if flag & 2 else "<I"
    rate_size = struct.calcsize(rate_format)
    rates = [0] * 256

    if flag & 1:
        count = 128 if ascii_only else 256
        raw = _read_exact(stream, rate_size * count, "frequency table")
        rates[:count] = [rate for (rate,) in struct.iter_unpack(rate_format, raw)]
        return rates

    (count,) = struct.unpack("<i", _read_exact(stream, 4, "frequency count"))
    if count < 0:
        raise ArchiveFormatError("negative frequency count")
    for _ in range(count):
        symbol = _read_exact(stream, 1, "frequency entry")[0]
        (rates[symbol],) = struct.unpack(
            rate_format, _read_exact(stream, rate_size, "frequency entry")
        )
    return rates


def decode_stream(stream: BinaryIO, out: BinaryIO, last: bool) -> int:
    """Decode one file from ``stream`` into ``out``.

    Returns the number of bytes decoded; zero means the file was empty.
    """
    ascii_flag = _read_exact(stream, 1, "mode flag")[0]
    rates = read_header(stream, bool(ascii_flag))

    rights = list(accumulate(rates))
    lefts = [0, *rights[:-1]]
    total = rights[-1]
    if not total:
        return 0

    symbols = [
        (symbol, lefts[symbol], rights[symbol])
        for symbol, rate in enumerate(rates)
        if rate
    ]
    reader = BitReader(stream, last)
    decoded = bytearray()
    try:
        left, right = 0, WHOLE
        sample = reader.read_sample()
        while True:
            width = right - left
            for symbol, low, high in symbols:
                high_candidate = left + width * high // total
                low_candidate = left + width * low // total
                if low_candidate <= sample < high_candidate:
                    decoded.append(symbol)
                    left, right = low_candidate, high_candidate
                    break
            else:
                if not (
                    right < HALF
                    or left > HALF
                    or (left > QUARTER and right < 3 * QUARTER)
                ):
                    raise ArchiveFormatError("corrupt encoded data")
            if len(decoded) == total:
                return total

            while right < HALF or left > HALF:
                if right < HALF:
                    left <<= 1
                    right <<= 1
                    sample <<= 1
                else:
                    left = 2 * (left - HALF)
                    right = 2 * (right - HALF)
                    sample = 2 * (sample - HALF)
                sample |= reader.next_bit()

            while left > QUARTER and right < 3 * QUARTER:
                left = 2 * (left - QUARTER)
                right = 2 * (right - QUARTER)
                sample = 2 * (sample - QUARTER)
                sample |= reader.next_bit()
    finally:
        out.write(decoded)


def _open_output(
    index: int, filenames: Sequence[str], directory: str
) -> tuple[str, BinaryIO]:
    if index < len(filenames):
        name = filenames[index]
        try:
            return name, open(name, "wb")
        except OSError:
            parent, base = split_directory(name)
            print(f"WARNING: No such directory: {parent}. Output file name is {base}")
            return base, open(base, "wb")
    name = f"file{index - len(filenames)}"
    if directory != ".":
        name = f"{directory}/{name}"
    return name, open(name, "wb")


def decode(
    archive_name: str, filenames: Sequence[str], directory: str = "."
) -> list[str]:
    """Extract every file of an archive and report on it.

    Returns the names of the files that were decoded successfully.
    """
    try:
        archive = open(archive_name, "rb")
    except OSError:
        print(f"ERROR: No such file: {archive_name}")
        return []

    written: list[str] = []
    with archive:
        head = archive.read(4)
        if len(head) != 4:
            print("Aborting: incorrect file format")
            return written
        (file_count,) = struct.unpack("<i", head)

        for index in range(file_count):
            name, out = _open_output(index, filenames, directory)
            print(f"Decoding into {name}...")
            with out:
                try:
                    decoded = decode_stream(archive, out, index == file_count - 1)
                except ArchiveFormatError:
                    print("Aborting: incorrect file format")
                    return written
            if decoded:
                archive.seek(-_REWIND, io.SEEK_CUR)
            print(f"Successfully decoded into {name}...")
            written.append(name)

    print(f"Successfully decoded from {archive_name}!")
    return written
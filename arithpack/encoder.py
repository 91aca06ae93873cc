"""Arithmetic encoder and archive writer."""

from __future__ import annotations

import struct
from itertools import accumulate
from typing import BinaryIO, Iterable, Sequence

from .bitio import HALF, QUARTER, WHOLE, BitWriter
from .report import format_size, split_directory

_DENSE_THRESHOLD = 1024 // 5
_RATE_MASK = 0xFFFFFFFF


def count_frequencies(data: Iterable[int], ascii_only: bool) -> list[int]:
    """Count occurrences of each byte value, skipping non-ASCII if asked."""
    rates = [0] * 256
    for byte in data:
        if ascii_only and byte >= 128:
            continue
        rates[byte] += 1
    return rates


def write_header(out: BinaryIO, rates: Sequence[int], ascii_only: bool) -> None:
    """Write the frequency table in dense or sparse form."""
    nonzero = sum(1 for rate in rates if rate)
    short = all(rate < (1 << 16) for rate in rates)
    rate_format = "<H" if short else "<I"
    mask = 0xFFFF if short else _RATE_MASK

    if nonzero > _DENSE_THRESHOLD:
        out.write(bytes((1 | (short << 1),)))
        limit = 128 if ascii_only else 256
        for rate in rates[:limit]:
            out.write(struct.pack(rate_format, rate & mask))
        return

    out.write(bytes((short << 1,)))
    out.write(struct.pack("<i", nonzero))
    for symbol, rate in enumerate(rates):
        if rate:
            out.write(bytes((symbol,)))
            out.write(struct.pack(rate_format, rate & mask))


def encode_stream(data: bytes, out: BinaryIO, ascii_only: bool) -> None:
    """Encode one file's contents into ``out``, header first."""
    rates = [rate & _RATE_MASK for rate in count_frequencies(data, ascii_only)]
    out.write(bytes((1 if ascii_only else 0,)))
    write_header(out, rates, ascii_only)

    rights = list(accumulate(rates))
    lefts = [0, *rights[:-1]]
    total = rights[-1]
    if not total:
        return

    writer = BitWriter(out)
    left, right, pending = 0, WHOLE, 0
    for symbol in data:
        if ascii_only and symbol >= 128:
            continue
        width = right - left
        right = left + width * rights[symbol] // total
        left = left + width * lefts[symbol] // total

        while right < HALF or left > HALF:
            if right < HALF:
                writer.emit(pending, 0)
                pending = 0
                left <<= 1
                right <<= 1
            else:
                writer.emit(pending, 1)
                pending = 0
                left = 2 * (left - HALF)
                right = 2 * (right - HALF)

        while left > QUARTER and right < 3 * QUARTER:
            pending += 1
            left = 2 * (left - QUARTER)
            right = 2 * (right - QUARTER)

    pending += 1
    final = writer.emit(pending, 0 if left <= QUARTER else 1)
    out.write(bytes((final,)))


def encode(filenames: Sequence[str], archive_name: str, ascii_only: bool) -> int:
    """Encode the given files into one archive and report on it.

    Returns the number of files stored in the archive.
    """
    try:
        out = open(archive_name, "wb")
    except OSError:
        directory, _ = split_directory(archive_name)
        print(f"ERROR: No such directory: {directory}")
        return 0

    with out:
        file_count = len(filenames)
        out.write(struct.pack("<i", file_count))
        failures = 0
        total_in = 0
        for name in filenames:
            try:
                with open(name, "rb") as source:
                    data = source.read()
            except OSError:
                print(f"WARNING: Skipping {name}: No such file")
                failures += 1
                continue
            print(f"Encoding {name}...")
            encode_stream(data, out, ascii_only)
            total_in += len(data)
            print(f"Successfully encoded {name}!")
        total_out = out.tell()

        if failures:
            print(f"Failed to encode {failures} file(s)")
            file_count -= failures
            out.seek(0)
            out.write(struct.pack("<i", file_count))

    rate = total_out / total_in * 100 if total_in else float("inf")
    print(f"Successfully encoded into {archive_name}!")
    print(f"Total input size: {format_size(total_in)}")
    print(f"Output size: {format_size(total_out)}")
    print(f"Compression rate: {rate:.1f}%")
    return file_count
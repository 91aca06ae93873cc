"""Command-line entry point for the archiver."""

from __future__ import annotations

import sys
from typing import Sequence

from .decoder import decode
from .encoder import encode
from .report import usage_text

_OUTPUT_PREFIX = "-output="
_MODE_FLAGS = ("-d", "-e")
_ASCII_FLAGS = ("-a", "--ascii-only")


def parse_output_flag(arg: str) -> str | None:
    """Return the value of a ``-output=`` argument, or None for other arguments."""
    if not arg.startswith(_OUTPUT_PREFIX):
        return None
    return arg[len(_OUTPUT_PREFIX):]


def _encode_command(args: Sequence[str]) -> int:
    ascii_only = False
    archive_name = "archive.ari"
    filenames: list[str] = []
    for arg in args:
        if arg in _MODE_FLAGS:
            continue
        if arg in _ASCII_FLAGS:
            ascii_only = True
            continue
        output = parse_output_flag(arg)
        if output is not None:
            if not output:
                print("ERROR: empty output name")
                return 1
            archive_name = output
            continue
        filenames.append(arg)
    encode(filenames, archive_name, ascii_only)
    return 0


def _decode_command(args: Sequence[str]) -> int:
    directory = "."
    filenames: list[str] = []
    for arg in args:
        if arg in _MODE_FLAGS or arg in _ASCII_FLAGS:
            continue
        output = parse_output_flag(arg)
        if output is not None:
            if not output:
                print("ERROR: empty output name")
            directory = output
            continue
        filenames.append(arg)

    if not filenames:
        print("ERROR: no archive given")
        return 1
    archive_name, *targets = filenames
    decode(archive_name, [f"{directory}/{name}" for name in targets], directory)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the archiver with the given arguments; returns the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if any(arg in ("-h", "--help") for arg in args):
        print(usage_text(), end="")
        return 0
    for arg in args:
        try:
            if arg == "-e":
                return _encode_command(args)
            if arg == "-d":
                return _decode_command(args)
        except OSError as exc:
            print(f"ERROR: {exc}")
            return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
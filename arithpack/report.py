"""Human-readable output helpers: sizes, paths and usage text."""

from __future__ import annotations

_UNITS = ("B", "KB", "MB", "GB")

_OPTIONS = (
    ("--help (-h)", "Display this information"),
    ("--ascii-only (-a)", "Encode only ascii characters"),
    (
        "-output=<name>",
        "Set output file name for encoding or output directory for decoding "
        "(default: archive.ari and current directory)",
    ),
    ("-e", "Encode mode (default)"),
    ("-d", "Decode mode"),
)


def format_size(size: float) -> str:
    """Format a byte count with one decimal and a decimal unit."""
    index = 0
    while index < len(_UNITS) - 1 and size >= 1000:
        size /= 1000
        index += 1
    return f"{size:.1f} {_UNITS[index]}"


def split_directory(path: str) -> tuple[str, str]:
    """Split a path at its last slash into (directory, name)."""
    directory, slash, name = path.rpartition("/")
    if not slash:
        return "", path
    return directory, name


def bit_string(value: int) -> str:
    """Return the eight bits of a byte value, most significant first."""
    return "".join(str((value >> (7 - shift)) & 1) for shift in range(8))


def usage_text() -> str:
    """Return the command-line help text."""
    lines = ["Usage: ari [options] file file1 file2 ...\nOptions:\n"]
    lines.extend(f"  {option:<20}  {description}\n" for option, description in _OPTIONS)
    lines.append(
        "\nEncode mode:\n"
        "  Encodes files <file>, <file1>, <file2> ...\n"
        "  Archive appears in the current directory\n"
        "  and has optionally specified name\n"
    )
    lines.append(
        "Decode mode:\n"
        "  Decodes archive <file> into files <file1> <file2> ...\n"
        "  If there are more files in the archive than names given,\n"
        "  all unspecified names get assigned a name of the form [file{n}],\n"
        "  where n is the index of current file\n"
        "  Files appear in the optionally specified directory\n"
    )
    return "".join(lines)
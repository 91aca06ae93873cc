# arithpack

arithpack packs one or more files into a single archive using static
arithmetic coding. For each file it counts how often every byte value occurs,
stores that table in the archive, and then writes the file as one arithmetic
code. Unpacking reads the table back and rebuilds the original bytes.

## Installation

```
pip install .
```

This installs the `arithpack` command. The package has no runtime
dependencies beyond the Python standard library (3.10 or newer).

## Command line

```
arithpack [options] file file1 file2 ...
```

Options:

| Option                 | Meaning                                                                                           |
|------------------------|---------------------------------------------------------------------------------------------------|
| `--help`, `-h`         | Print usage information and exit                                                                  |
| `--ascii-only`, `-a`   | When encoding, drop every byte of value 128 and above                                             |
| `-output=<name>`       | Archive name when encoding (default `archive.ari`), output directory when decoding (default `.`)  |
| `-e`                   | Encode mode                                                                                       |
| `-d`                   | Decode mode                                                                                       |

A mode flag, `-e` or `-d`, must be given; without one the command does nothing
and exits with status 0. If both are present, the first one on the command line
wins. The help text printed by `-h` names the program `ari`.

### Packing

```
arithpack -e notes.txt data.bin -output=backup.ari
```

Every listed file is encoded into `backup.ari`. Files that cannot be opened
are skipped with a warning, and the file count stored in the archive is
lowered to match. When done, the command prints the total input size, the
archive size and the compression rate. An empty `-output=` value is an error
(exit status 1).

### Unpacking

```
arithpack -d backup.ari notes.txt data.bin -output=restored
```

The first name is the archive. The names after it are used for the files
inside, in order, and are placed in the output directory. If a named file
cannot be created there, a warning is printed and the file is written under
its bare name in the current directory instead. If the archive holds more
files than names were given, the remaining files are named `file0`, `file1`,
... in the output directory. The ASCII-only setting is read from the archive,
so `-a` has no effect when decoding. Giving no archive name is an error
(exit status 1).

If the archive turns out to be damaged, decoding stops with
`Aborting: incorrect file format`; files finished before that point are kept.

## Library use

```python
import io
from arithpack.encoder import encode_stream
from arithpack.decoder import decode_stream

packed = io.BytesIO()
encode_stream(b"hello, world", packed, ascii_only=False)

packed.seek(0)
restored = io.BytesIO()
decode_stream(packed, restored, last=True)
assert restored.getvalue() == b"hello, world"
```

Modules:

- `arithpack.encoder` — `count_frequencies`, `write_header`, `encode_stream`,
  and `encode(filenames, archive_name, ascii_only)`, which writes a whole
  archive to disk and returns the number of files stored.
- `arithpack.decoder` — `read_header`, `decode_stream` (returns the number of
  bytes decoded), and `decode(archive_name, filenames, directory)`, which
  extracts a whole archive and returns the names of the files written.
- `arithpack.bitio` — `BitWriter`, `BitReader` and `ArchiveFormatError`.
  `read_header` and `decode_stream` raise `ArchiveFormatError` on a damaged
  or truncated stream; `decode` catches it and reports it instead.
- `arithpack.report` — `format_size`, `split_directory`, `bit_string` and
  `usage_text`.
- `arithpack.cli` — `main(argv=None)`, the command-line entry point, returning
  the exit status.

## Archive layout

An archive starts with the number of files as a 4-byte little-endian integer.
Each file then has a one-byte ASCII-only flag, a byte-frequency table, stored in
full or as a sparse list of (byte, count) pairs with 2- or 4-byte counts, and the
arithmetic-coded bit stream.

## Limitations

- Each input file is read into memory whole; there is no streaming of large
  files.
- Only the listed files are packed; directories are not walked, and no file
  names, permissions or timestamps are stored in the archive.
- The archive carries no checksum, so some kinds of damage go unnoticed.
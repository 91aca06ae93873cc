import io
import struct

from arithpack.encoder import count_frequencies, encode, encode_stream, write_header


def _header_bytes(rates, ascii_only=False):
    out = io.BytesIO()
    write_header(out, rates, ascii_only)
    return out.getvalue()


def test_count_frequencies_counts_bytes():
    rates = count_frequencies(b"aab\xff", False)
    assert rates[ord("a")] == 2
    assert rates[ord("b")] == 1
    assert rates[0xFF] == 1
    assert sum(rates) == 4


def test_count_frequencies_ascii_only_skips_high_bytes():
    rates = count_frequencies(b"ab\x80\xff", True)
    assert sum(rates) == 2
    assert all(rate == 0 for rate in rates[128:])


def test_sparse_header_layout():
    rates = [0] * 256
    rates[97] = 2
    rates[98] = 1
    expected = (
        bytes((2,))
        + struct.pack("<i", 2)
        + bytes((97,)) + struct.pack("<H", 2)
        + bytes((98,)) + struct.pack("<H", 1)
    )
    assert _header_bytes(rates) == expected


def test_sparse_header_long_rates():
    rates = [0] * 256
    rates[10] = 1 << 16
    expected = bytes((0,)) + struct.pack("<i", 1) + bytes((10,)) + struct.pack("<I", 1 << 16)
    assert _header_bytes(rates) == expected


def test_dense_header_short():
    data = _header_bytes([1] * 256)
    assert data[0] == 3
    assert len(data) == 1 + 256 * 2


def test_dense_header_long():
    rates = [1] * 256
    rates[0] = 1 << 20
    data = _header_bytes(rates)
    assert data[0] == 1
    assert len(data) == 1 + 256 * 4
    assert struct.unpack_from("<I", data, 1)[0] == 1 << 20


def test_dense_header_ascii_writes_half_table():
    data = _header_bytes([1] * 256, ascii_only=True)
    assert len(data) == 1 + 128 * 2


def test_empty_stream_writes_only_header():
    out = io.BytesIO()
    encode_stream(b"", out, False)
    assert out.getvalue() == bytes((0, 2)) + struct.pack("<i", 0)


def test_ascii_flag_is_first_byte():
    out = io.BytesIO()
    encode_stream(b"hello", out, True)
    assert out.getvalue()[0] == 1


def test_single_symbol_output_is_header_plus_one_byte():
    data = b"z" * 500
    out = io.BytesIO()
    encode_stream(data, out, False)
    header = bytes((0,)) + _header_bytes(count_frequencies(data, False))
    result = out.getvalue()
    assert result.startswith(header)
    assert len(result) == len(header) + 1


def test_repetitive_data_compresses():
    data = b"ab" * 5000 + b"c" * 100
    out = io.BytesIO()
    encode_stream(data, out, False)
    assert len(out.getvalue()) < len(data) // 4


def test_encoding_is_deterministic():
    data = bytes(range(256)) * 3 + b"arithmetic"
    first, second = io.BytesIO(), io.BytesIO()
    encode_stream(data, first, False)
    encode_stream(data, second, False)
    assert first.getvalue() == second.getvalue()


def test_ascii_mode_ignores_high_bytes():
    with_high, without_high = io.BytesIO(), io.BytesIO()
    encode_stream(b"ab\xf0c\x99d", with_high, True)
    encode_stream(b"abcd", without_high, True)
    assert with_high.getvalue() == without_high.getvalue()


def test_encode_archive_file_count(tmp_path, capsys):
    first = tmp_path / "one.txt"
    second = tmp_path / "two.txt"
    first.write_bytes(b"hello world")
    second.write_bytes(b"another file")
    archive = tmp_path / "out.ari"
    stored = encode([str(first), str(second)], str(archive), False)
    data = archive.read_bytes()
    assert stored == 2
    assert struct.unpack_from("<i", data, 0)[0] == 2
    out = capsys.readouterr().out
    assert f"Encoding {first}..." in out
    assert f"Successfully encoded into {archive}!" in out
    assert "Compression rate: " in out


def test_encode_archive_matches_stream(tmp_path, capsys):
    source = tmp_path / "data.bin"
    source.write_bytes(b"mississippi")
    archive = tmp_path / "out.ari"
    encode([str(source)], str(archive), False)
    body = io.BytesIO()
    encode_stream(b"mississippi", body, False)
    assert archive.read_bytes() == struct.pack("<i", 1) + body.getvalue()


def test_encode_skips_missing_file(tmp_path, capsys):
    present = tmp_path / "present.txt"
    present.write_bytes(b"content")
    archive = tmp_path / "out.ari"
    stored = encode([str(tmp_path / "missing.txt"), str(present)], str(archive), False)
    assert stored == 1
    assert struct.unpack_from("<i", archive.read_bytes(), 0)[0] == 1
    out = capsys.readouterr().out
    assert "WARNING: Skipping" in out
    assert "Failed to encode 1 file(s)" in out


def test_encode_reports_missing_directory(tmp_path, capsys):
    archive = tmp_path / "nowhere" / "out.ari"
    stored = encode([], str(archive), False)
    assert stored == 0
    assert not archive.exists()
    out = capsys.readouterr().out
    assert out.startswith(f"ERROR: No such directory: {tmp_path / 'nowhere'}")
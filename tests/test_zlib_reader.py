import pytest

from cdrills.zlib_reader import BUFFER_SIZE, compress, decompress, main, read_file

PAYLOADS = [b"", b"hello, world\n", b"abc" * 200, bytes(range(256))]


@pytest.mark.parametrize("data", PAYLOADS)
def test_round_trip(data):
    assert decompress(compress(data)) == data


def test_stream_starts_with_zlib_header():
    assert compress(b"")[0] == 0x78


def test_trailing_padding_is_ignored():
    data = b"blob 5\0hello"
    assert decompress(compress(data) + b"\0" * 100) == data


def test_truncated_stream_yields_prefix():
    data = b"tree contents " * 50
    partial = decompress(compress(data)[:-6])
    assert data.startswith(partial)


def test_corrupt_stream_raises():
    with pytest.raises(ValueError):
        decompress(b"this is not zlib data")


def test_read_file_returns_contents(tmp_path):
    path = tmp_path / "object"
    payload = compress(b"hello, world\n")
    path.write_bytes(payload)
    assert read_file(path) == payload


def test_read_file_accepts_exact_limit(tmp_path):
    path = tmp_path / "object"
    path.write_bytes(b"x" * 16)
    assert read_file(path, 16) == b"x" * 16


def test_read_file_rejects_oversized_file(tmp_path):
    path = tmp_path / "object"
    path.write_bytes(b"x" * (BUFFER_SIZE + 1))
    with pytest.raises(ValueError):
        read_file(path)


def test_read_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_file(tmp_path / "missing")


def test_main_prints_decompressed_content(tmp_path, capsys):
    path = tmp_path / "object"
    path.write_bytes(compress(b"hello, world"))
    assert main([str(path)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "File content compressed:"
    assert out[-2:] == ["File content decompressed:", "hello, world"]


def test_main_missing_file(tmp_path, capsys):
    path = tmp_path / "missing"
    assert main([str(path)]) == 1
    assert capsys.readouterr().out == f"Failed to open file_path: {path}.\n"


def test_main_corrupt_file(tmp_path, capsys):
    path = tmp_path / "object"
    path.write_bytes(b"not compressed")
    assert main([str(path)]) == 1
    assert capsys.readouterr().out.splitlines()[-1] == "Failed to decompress."
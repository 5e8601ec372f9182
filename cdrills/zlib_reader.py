"""Read a zlib-compressed file and show it before and after inflating."""

from __future__ import annotations

import argparse
import zlib
from os import PathLike

BUFFER_SIZE = 1024


def read_file(path: str | PathLike[str], limit: int = BUFFER_SIZE) -> bytes:
    """Return the contents of ``path``, which must be at most ``limit`` bytes."""
    with open(path, "rb") as handle:
        data = handle.read(limit)
        if handle.read(1):
            raise ValueError(f"Couldn't read to end of file for file_path: {path}.")
    return data


def compress(data: bytes) -> bytes:
    """Deflate ``data`` into a zlib stream at the default compression level."""
    return zlib.compress(data, zlib.Z_DEFAULT_COMPRESSION)


def decompress(data: bytes) -> bytes:
    """Inflate a zlib stream, ignoring anything after its end.

    A truncated stream yields what could be inflated; a corrupt one raises
    ``ValueError``.
    """
    try:
        return zlib.decompressobj().decompress(data)
    except zlib.error as exc:
        raise ValueError("Failed to decompress.") from exc


def _as_c_string(data: bytes) -> str:
    return data.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def main(argv: list[str] | None = None) -> int:
    """Print a compressed file's raw and inflated contents."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("path")
    args = parser.parse_args(argv)

    try:
        compressed = read_file(args.path)
    except OSError:
        print(f"Failed to open file_path: {args.path}.")
        return 1
    except ValueError as exc:
        print(exc)
        return 1
    print(f"File content compressed:\n{_as_c_string(compressed)}")

    try:
        decompressed = decompress(compressed)
    except ValueError as exc:
        print(exc)
        return 1
    print(f"File content decompressed:\n{_as_c_string(decompressed)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
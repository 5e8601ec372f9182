"""Encode a message as a table of its distinct characters plus indices."""

from __future__ import annotations

import argparse
import sys
from typing import NamedTuple

HISTOGRAM_CAPACITY = 256
DEFAULT_MESSAGE = "Hello, World!"


class Encoding(NamedTuple):
    """A character table and, for each message character, its table index."""

    table: str
    indices: tuple[int, ...]


def encode(message: str) -> Encoding:
    """Encode ``message`` into a sorted table of distinct characters and indices."""
    for character in message:
        if ord(character) >= HISTOGRAM_CAPACITY:
            raise ValueError(f"character {character!r} is outside the 8-bit range")
    table = "".join(sorted(set(message)))
    position = {character: index for index, character in enumerate(table)}
    return Encoding(table, tuple(position[character] for character in message))


def decode(table: str, indices) -> str:
    """Rebuild a message by looking each index up in ``table``."""
    characters = []
    for index in indices:
        if not 0 <= index < len(table):
            raise IndexError(f"index {index} is outside the table")
        characters.append(table[index])
    return "".join(characters)


def main(argv: list[str] | None = None) -> int:
    """Encode a message, print the encoding, then print it decoded."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("message", nargs="?", default=DEFAULT_MESSAGE)
    args = parser.parse_args(argv)
    try:
        table, indices = encode(args.message)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1

    print(f'Message: "{args.message}"')
    print(f'Table:   "{table}"')
    print("TIMC:    { " + "".join(f"{index}, " for index in indices) + "}")
    print("---")
    print(f"Decoded message: {decode(table, indices)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
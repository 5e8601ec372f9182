"""A tiny line editor: show a file with line numbers and replace one line."""

from __future__ import annotations

import sys
from pathlib import Path


def number_lines(text: str) -> str:
    """Prefix every line of ``text`` with ``"<n> - "``, counting from 1.

    A final newline ends the last line rather than starting a new one.
    """
    body, trailing = (text[:-1], "\n") if text.endswith("\n") else (text, "")
    numbered = (f"{number} - {line}" for number, line in enumerate(body.split("\n"), start=1))
    return "\n".join(numbered) + trailing


def edit_line(text: str, line_number: int, replacement: str) -> str:
    """Return ``text`` with line ``line_number`` (1-based; 0 means 1) replaced."""
    if line_number < 0:
        raise ValueError(f"line number must not be negative: {line_number}")
    index = max(line_number, 1) - 1
    lines = text.split("\n")
    if index >= len(lines):
        raise IndexError(f"line {line_number} does not exist")
    lines[index] = replacement
    return "\n".join(lines)


def _read_line_number(answer: str) -> int:
    tokens = answer.split()
    try:
        return int(tokens[0])
    except (IndexError, ValueError):
        return 0


def main(argv: list[str] | None = None) -> int:
    """Edit one line of the file named by the first argument."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("ERROR: Need to specify a file to edit!")
        return 1

    path = Path(args[0])
    text = path.read_text()
    sys.stdout.write(number_lines(text))

    line_number = _read_line_number(input("> Which line do you want to edit? "))
    tokens = input("> ").split()
    replacement = tokens[0] if tokens else ""

    try:
        edited = edit_line(text, line_number, replacement)
    except (IndexError, ValueError) as exc:
        print(f"ERROR: {exc}")
        return 1

    path.write_text(edited)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
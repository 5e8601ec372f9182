"""Fahrenheit and Celsius conversion tables."""

from __future__ import annotations

import argparse

LOWER = 0
UPPER = 300
STEP = 20


def _to_celsius(fahrenheit: float) -> float:
    return (fahrenheit - 32.0) * (5.0 / 9.0)


def _to_fahrenheit(celsius: float) -> float:
    return celsius * (9.0 / 5.0) + 32.0


def fahrenheit_to_celsius_table() -> list[tuple[float, float]]:
    """Return ``(fahrenheit, celsius)`` rows from 0 to 300 in steps of 20."""
    return [(float(f), _to_celsius(f)) for f in range(LOWER, UPPER + 1, STEP)]


def celsius_to_fahrenheit_table() -> list[tuple[float, float]]:
    """Return ``(celsius, fahrenheit)`` rows from 0 to 300 in steps of 20."""
    return [(float(c), _to_fahrenheit(c)) for c in range(LOWER, UPPER + 1, STEP)]


def reverse_fahrenheit_table() -> list[tuple[int, float]]:
    """Return ``(fahrenheit, celsius)`` rows from 300 down to 0 in steps of 20."""
    return [(f, _to_celsius(f)) for f in range(UPPER, LOWER - 1, -STEP)]


def _render(table: str) -> list[str]:
    if table == "celsius":
        rows = celsius_to_fahrenheit_table()
        return ["Celsius Fahrenheit"] + [f"{c:7.0f} {f:10.1f}" for c, f in rows]
    if table == "reverse":
        return [f"{f:3d} {c:6.1f}" for f, c in reverse_fahrenheit_table()]
    rows = fahrenheit_to_celsius_table()
    return ["Fahrenheit Celsius"] + [f"{f:10.0f} {c:7.1f}" for f, c in rows]


def main(argv: list[str] | None = None) -> int:
    """Print one of the conversion tables."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "table",
        nargs="?",
        choices=("fahrenheit", "celsius", "reverse"),
        default="fahrenheit",
    )
    args = parser.parse_args(argv)
    for line in _render(args.table):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
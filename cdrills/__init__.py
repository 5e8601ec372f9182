"""Small data structures (deque, queue, growable array) and text utilities."""

__version__ = "0.1.0"

__all__ = [
    "array_deque",
    "fifo",
    "growable_array",
    "string_encoder",
    "temperature",
    "line_editor",
    "zlib_reader",
]
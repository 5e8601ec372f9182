# cdrills

A handful of small, self-contained data structures and text utilities.
No third-party dependencies.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Library

### Data structures

- `cdrills.array_deque.ArrayDeque` — a double-ended queue with positional
  access. Supports `len()`, `get(index)`, `get_last()`, `prepend(item)`,
  `append(item)`, `remove_first()` and `remove_last()`. Reading or removing
  from an empty deque, or `get` with an index outside the deque, gives
  `None` instead of raising.
- `cdrills.fifo.Queue` — a first-in, first-out queue with `len()`,
  `peek()`, `enqueue(item)` and `dequeue()`. `peek()` and `dequeue()` give
  `None` when the queue is empty.
- `cdrills.growable_array.GrowableArray` — an append-only array built with
  a `printf`-style item format such as `"%d"` or `"%f"`. It reports a
  capacity that starts at four and doubles whenever an append finds it
  full (`capacity()`). Supports `len()`, iteration, `append(item)`, and
  `format()`, which renders the items as `[ 7, 8, 9, ]`, or `[ ]` when
  empty.

```python
from cdrills.array_deque import ArrayDeque

deque = ArrayDeque()
deque.append(1)
deque.append(2)
deque.prepend(0)
assert [deque.get(i) for i in range(len(deque))] == [0, 1, 2]
assert deque.remove_first() == 0
assert deque.remove_last() == 2
```

### Text utilities

- `cdrills.string_encoder` — `encode(message)` returns an `Encoding` named
  tuple of `table` (the message's distinct characters, sorted) and
  `indices` (the table index of every character of the message). Characters
  outside the 8-bit range raise `ValueError`. `decode(table, indices)`
  rebuilds the message and raises `IndexError` for an index outside the
  table.
- `cdrills.temperature` — `fahrenheit_to_celsius_table()` and
  `celsius_to_fahrenheit_table()` give `(from, to)` rows from 0 to 300
  degrees in steps of 20; `reverse_fahrenheit_table()` gives
  `(fahrenheit, celsius)` rows from 300 down to 0.
- `cdrills.line_editor` — `number_lines(text)` prefixes each line with
  `"<n> - "`, counting from 1; `edit_line(text, line_number, replacement)`
  returns the text with one line replaced (line 0 is taken as line 1; a
  negative number raises `ValueError`, a line past the end `IndexError`).
- `cdrills.zlib_reader` — `read_file(path, limit=1024)` reads a file and
  raises `ValueError` if it is longer than `limit` bytes; `compress(data)`
  deflates into a zlib stream; `decompress(data)` inflates one, ignoring
  trailing bytes, and raises `ValueError` on corrupt input.

```python
from cdrills.string_encoder import encode, decode

table, indices = encode("Hello, World!")
assert decode(table, indices) == "Hello, World!"
```

## Commands

```
cdrills-growable-array               # prints a sample int and float array
cdrills-string-encoder [MESSAGE]     # encodes and decodes MESSAGE (default "Hello, World!")
cdrills-temperature [fahrenheit|celsius|reverse]
                                     # prints one conversion table (default fahrenheit)
cdrills-line-editor FILE             # shows FILE numbered, asks for a line number
                                     # and a replacement word, writes FILE back
cdrills-zlib-reader FILE             # prints FILE raw and decompressed
```

The line editor takes only the first whitespace-separated word of the
replacement you type.

## What it does not do

- `cdrills-zlib-reader` only reads and inflates a single file of at most
  1024 bytes; it does not create or manage any repository or object store.
- The line editor replaces one line per run; it has no interactive
  session, undo, or search.
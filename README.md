# miniedit

The pieces of a small full-screen terminal text editor: a text buffer
with a cursor, key decoding, screen rendering and raw terminal mode.
It also ships a few pure-Python helpers for values and bit layouts from
common system headers.

## Installing

```
pip install .
```

The tests need the `test` extra:

```
pip install ".[test]"
pytest
```

## The editing model

`miniedit.buffer.TextBuffer` holds rows of text, a cursor (`cx`, `cy`)
and a `dirty` counter. It works without a terminal:

```python
from miniedit.buffer import TextBuffer

buf = TextBuffer()
for ch in "hello":
    buf.insert_char(ch)
buf.insert_newline()
print(buf.to_text())   # "hello\n\n"
```

The buffer has these operations:

- `insert_char`, `insert_newline` and `delete_char` edit at the cursor.
  `delete_char` joins lines when the cursor is at column 0.
- `move_cursor` takes an arrow key from `miniedit.keys.Key`.
- `load(path)` appends the lines of a file and marks the buffer clean.
  It raises `OSError` if the file cannot be read.
- `write(path)` saves the rows and returns the number of bytes written.
- `search(query, direction)` looks for text starting after the cursor
  row, wrapping around. It returns `(row, column)`, or `None` when there
  is no match.

`miniedit.buffer.cx_to_rx` turns a character index into a screen
column. It expands tabs to stops of 8.

## Keys

`miniedit.keys.read_key(read_byte)` decodes one key press. It reads
bytes from a callable, which returns an int or `None` on timeout.
Escape sequences become members of `Key`, such as `Key.ARROW_UP` and
`Key.PAGE_DOWN`:

```python
from miniedit.keys import Key, ctrl_key, read_key

assert read_key(iter([0x1B, ord("["), ord("A")]).__next__) == Key.ARROW_UP
assert ctrl_key("q") == 17
```

## Rendering

`miniedit.render` builds the escape sequences for a whole screen as a
string:

- `Viewport` holds the screen size and scroll offsets. `Viewport.scroll`
  keeps the cursor visible.
- `draw_rows` draws the text area. An empty buffer shows a welcome line,
  and line numbers are optional.
- `draw_status_bar` draws the inverted bar with the file name, the line
  count, the modified mark and the cursor line.
- `StatusMessage` and `draw_message_bar` handle a message that disappears
  after five seconds.
- `refresh_screen` puts these together and positions the cursor.

## Terminal

`miniedit.terminal` has the terminal helpers:

- `RawTerminal(fd)` is a context manager. It switches the terminal to raw
  input with a 100 ms read timeout and restores the old settings on exit.
- `window_size(fd)` returns `(rows, columns)`.
- `read_byte(fd)` returns one byte, or `None` when nothing arrived.

## System-header helpers

The `miniedit.libc` sub-package contains:

- `ctype`: ASCII character classification (`isalpha`, `isspace`, …).
- `param`: `howmany`, `roundup`, `powerof2`, and bit operations on byte
  arrays.
- `fdset`: `FdSet`, a descriptor set limited to 0–1023.
- `cpuset`: `CpuSet`, a CPU mask of a given byte size with `&`, `|` and
  `^`, plus `alloc_size`.
- `waitstatus`: decoding of wait status words (`exit_status`,
  `if_signaled`, …).
- `icmp`, `icmp6`, `ip6`, `udp`: protocol constants, and header classes
  with `pack` and `unpack`. `Icmp6Filter` is a type filter bitmap.
- `inttypes`: `printf_spec` and `scanf_spec` return length modifiers for
  fixed-width integers.
- `personality`: `PersonalityFlag`, the `PER_*` domains,
  `personality_type` and `personality_flags`.

## Sample program

```
miniedit-hello
```

This prints `Hello`.

## What is not included

There is no `miniedit` editor command. The package has no main loop
that reads keys and applies them to a buffer. It also has no save-as
prompt, interactive search, `:` command prompt, quit confirmation or
running of external commands. You get the buffer, key decoding,
rendering and terminal pieces, and you connect them yourself.
"""Text rows with a cursor, and the edits made on them."""

from __future__ import annotations

import os

from miniedit.keys import Key

TAB_STOP = 8
ENCODING = "latin-1"


def cx_to_rx(chars: str, cx: int) -> int:
    """Convert a character index into a render column, expanding tabs."""
    rx = 0
    for ch in chars[:cx]:
        if ch == "\t":
            rx += (TAB_STOP - 1) - (rx % TAB_STOP)
        rx += 1
    return rx


def _as_char(char: str | int) -> str:
    return chr(char) if isinstance(char, int) else char


class TextBuffer:
    """Rows of text, a cursor position and a modification counter."""

    def __init__(self) -> None:
        self.rows: list[str] = []
        self.cx = 0
        self.cy = 0
        self.dirty = 0

    @property
    def numrows(self) -> int:
        return len(self.rows)

    def insert_row(self, at: int, text: str) -> None:
        """Insert a row before index ``at``; out-of-range indexes are ignored."""
        if at < 0 or at > self.numrows:
            return
        self.rows.insert(at, text)
        self.dirty += 1

    def delete_row(self, at: int) -> None:
        """Remove the row at ``at``; out-of-range indexes are ignored."""
        if at < 0 or at >= self.numrows:
            return
        del self.rows[at]
        self.dirty += 1

    def row_insert_char(self, row: int, at: int, char: str | int) -> None:
        """Insert a character into a row, appending when ``at`` is out of range."""
        chars = self.rows[row]
        if at < 0 or at > len(chars):
            at = len(chars)
        self.rows[row] = chars[:at] + _as_char(char) + chars[at:]
        self.dirty += 1

    def row_delete_char(self, row: int, at: int) -> None:
        """Delete one character of a row; out-of-range positions are ignored."""
        chars = self.rows[row]
        if at < 0 or at >= len(chars):
            return
        self.rows[row] = chars[:at] + chars[at + 1 :]
        self.dirty += 1

    def insert_char(self, char: str | int) -> None:
        """Insert a character at the cursor and advance it."""
        if self.cy == self.numrows:
            self.insert_row(self.numrows, "")
        self.row_insert_char(self.cy, self.cx, char)
        self.cx += 1

    def insert_newline(self) -> None:
        """Split the current row at the cursor and move to the new line."""
        if self.cx == 0:
            self.insert_row(self.cy, "")
        else:
            chars = self.rows[self.cy]
            self.insert_row(self.cy + 1, chars[self.cx :])
            self.rows[self.cy] = chars[: self.cx]
        self.cy += 1
        self.cx = 0

    def delete_char(self) -> None:
        """Delete the character left of the cursor, joining lines at column 0."""
        if self.cy == self.numrows:
            return
        if self.cx == 0 and self.cy == 0:
            return
        if self.cx > 0:
            self.row_delete_char(self.cy, self.cx - 1)
            self.cx -= 1
        else:
            previous = self.rows[self.cy - 1]
            self.cx = len(previous)
            self.rows[self.cy - 1] = previous + self.rows[self.cy]
            self.delete_row(self.cy)
            self.cy -= 1

    def _current_row(self) -> str | None:
        return self.rows[self.cy] if self.cy < self.numrows else None

    def move_cursor(self, key: int) -> None:
        """Move the cursor for an arrow key, keeping it inside the text."""
        row = self._current_row()
        if key == Key.ARROW_LEFT:
            if self.cx != 0:
                self.cx -= 1
            elif self.cy > 0:
                self.cy -= 1
                self.cx = len(self.rows[self.cy])
        elif key == Key.ARROW_RIGHT:
            if row is not None and self.cx < len(row):
                self.cx += 1
            elif row is not None and self.cx == len(row):
                self.cy += 1
                self.cx = 0
        elif key == Key.ARROW_UP:
            if self.cy != 0:
                self.cy -= 1
        elif key == Key.ARROW_DOWN:
            if self.cy < self.numrows:
                self.cy += 1

        row = self._current_row()
        rowlen = len(row) if row is not None else 0
        if self.cx > rowlen:
            self.cx = rowlen

    def to_text(self) -> str:
        """Return all rows, each followed by a newline."""
        return "".join(f"{row}\n" for row in self.rows)

    def load(self, path: str | os.PathLike[str]) -> None:
        """Append the lines of a file, dropping line endings, and mark clean.

        Raises OSError (such as FileNotFoundError) when the file cannot be read.
        """
        with open(path, "rb") as fh:
            data = fh.read()
        lines = data.split(b"\n")
        if lines and lines[-1] == b"":
            lines.pop()
        for line in lines:
            self.insert_row(self.numrows, line.rstrip(b"\r").decode(ENCODING))
        self.dirty = 0

    def write(self, path: str | os.PathLike[str]) -> int:
        """Write the rows to ``path``, mark clean and return the byte count."""
        data = self.to_text().encode(ENCODING)
        with open(path, "wb") as fh:
            fh.write(data)
        self.dirty = 0
        return len(data)

    def search(self, query: str, direction: int) -> tuple[int, int] | None:
        """Find ``query`` starting after the cursor row, wrapping around.

        Returns ``(row, column)`` of the first match, or None.
        """
        if not self.rows:
            return None
        current = self.cy
        for _ in range(self.numrows):
            current = (current + direction) % self.numrows
            col = self.rows[current].find(query)
            if col != -1:
                return current, col
        return None
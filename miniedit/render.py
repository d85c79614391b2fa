"""Screen layout: scrolling, drawing rows, status bar and message bar."""

from __future__ import annotations

import os
from dataclasses import dataclass

from miniedit.buffer import TextBuffer, cx_to_rx

VERSION = "0.0.2"
MESSAGE_TIMEOUT = 5
STATUS_MAX = 79
LINENUM_WIDTH = 5

CLEAR_LINE = "\x1b[K"
HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"
CURSOR_HOME = "\x1b[H"
INVERT = "\x1b[7m"
RESET = "\x1b[m"


@dataclass
class Viewport:
    """The visible window onto the buffer."""

    screenrows: int
    screencols: int
    rowoff: int = 0
    coloff: int = 0
    rx: int = 0

    def scroll(self, buffer: TextBuffer) -> None:
        """Adjust the offsets so that the cursor is on screen."""
        self.rx = 0
        if buffer.cy < buffer.numrows:
            self.rx = cx_to_rx(buffer.rows[buffer.cy], buffer.cx)
        if buffer.cy < self.rowoff:
            self.rowoff = buffer.cy
        if buffer.cy >= self.rowoff + self.screenrows:
            self.rowoff = buffer.cy - self.screenrows + 1
        if self.rx < self.coloff:
            self.coloff = self.rx
        if self.rx >= self.coloff + self.screencols:
            self.coloff = self.rx - self.screencols + 1


@dataclass
class StatusMessage:
    """A short message shown below the status bar for a few seconds."""

    text: str = ""
    time: float = 0.0

    def set(self, text: str, now: float) -> None:
        self.text = text[:STATUS_MAX]
        self.time = now

    def visible(self, now: float) -> bool:
        return bool(self.text) and now - self.time < MESSAGE_TIMEOUT


def _welcome(screencols: int) -> str:
    welcome = f"MiniEdit editor -- version {VERSION}"[:screencols]
    padding = (screencols - len(welcome)) // 2
    line = ""
    if padding:
        line = "~"
        padding -= 1
    return line + " " * padding + welcome


def draw_rows(buffer: TextBuffer, view: Viewport, show_linenums: bool) -> str:
    """Render the text area, one terminal line per screen row."""
    out: list[str] = []
    for y in range(view.screenrows):
        filerow = y + view.rowoff
        if filerow >= buffer.numrows:
            if buffer.numrows == 0 and y == view.screenrows // 3:
                out.append(_welcome(view.screencols))
            else:
                out.append("~")
        else:
            width = 0
            if show_linenums:
                number = f"{filerow + 1:4d} "
                width = len(number)
                out.append(number)
            chars = buffer.rows[filerow]
            length = max(len(chars) - view.coloff, 0)
            length = max(min(length, view.screencols - width), 0)
            out.append(chars[view.coloff : view.coloff + length])
        out.append(CLEAR_LINE)
        out.append("\r\n")
    return "".join(out)


def draw_status_bar(buffer: TextBuffer, view: Viewport) -> str:
    """Render the inverted status line with file name and position."""
    filename = getattr(buffer, "filename", None)
    name = os.fspath(filename) if filename else "[No Name]"
    modified = "(modified)" if buffer.dirty else ""
    status = f"{name[:20]} - {buffer.numrows} lines {modified}"[:STATUS_MAX]
    rstatus = f"{buffer.cy + 1}/{buffer.numrows}"[:STATUS_MAX]
    status = status[: view.screencols]
    parts = [INVERT, status]
    length = len(status)
    while length < view.screencols:
        if view.screencols - length == len(rstatus):
            parts.append(rstatus)
            break
        parts.append(" ")
        length += 1
    parts.append(RESET)
    parts.append("\r\n")
    return "".join(parts)


def draw_message_bar(message: StatusMessage, screencols: int, now: float) -> str:
    """Render the message line; the message fades after a few seconds."""
    text = message.text[:screencols]
    if text and message.visible(now):
        return CLEAR_LINE + text
    return CLEAR_LINE


def refresh_screen(
    buffer: TextBuffer,
    view: Viewport,
    show_linenums: bool,
    message: StatusMessage,
    now: float,
) -> str:
    """Return the full escape sequence that redraws the screen."""
    view.scroll(buffer)
    width = LINENUM_WIDTH if show_linenums else 0
    row = buffer.cy - view.rowoff + 1
    col = view.rx - view.coloff + 1 + width
    return "".join(
        [
            HIDE_CURSOR,
            CURSOR_HOME,
            draw_rows(buffer, view, show_linenums),
            draw_status_bar(buffer, view),
            draw_message_bar(message, view.screencols, now),
            f"\x1b[{row};{col}H",
            SHOW_CURSOR,
        ]
    )
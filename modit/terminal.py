"""Terminal interface using Blessed for display and Curtsies for input."""

import select
import sys
from typing import Iterable, Optional

import blessed

from .view import DisplayRow

# Rounded frame glyphs
TOP_LEFT, TOP_RIGHT, BOTTOM_LEFT, BOTTOM_RIGHT = "╭", "╮", "╰", "╯"
HORIZONTAL, VERTICAL = "─", "│"


class TerminalInterface:
    """Handles terminal I/O using Blessed."""

    def __init__(self, terminal: Optional[blessed.Terminal] = None):
        """Initialize with a terminal instance (or create one)."""
        self.term = terminal or blessed.Terminal()
        self.is_fullscreen = False
        self._curtsies_input: Optional[object] = None
        self.top_line = 0  # First document line shown in the frame

    def setup(self):
        """Enter fullscreen mode and prepare terminal."""
        print(self.term.enter_fullscreen, end='')
        print(self.term.hide_cursor, end='')
        print(self.term.clear, end='', flush=True)
        self.is_fullscreen = True
        if self._curtsies_input is None:
            from curtsies import Input
            # Enter raw mode immediately so reads work
            self._curtsies_input = Input(keynames='curtsies')
            self._curtsies_input.__enter__()

    def cleanup(self):
        """Exit fullscreen mode and restore terminal."""
        if self._curtsies_input is not None:
            try:
                self._curtsies_input.__exit__(None, None, None)
            finally:
                self._curtsies_input = None
        if self.is_fullscreen:
            print(self.term.exit_fullscreen, end='')
            print(self.term.normal_cursor, end='', flush=True)
            self.is_fullscreen = False

    @property
    def width(self):
        """Terminal width in columns."""
        return self.term.width

    @property
    def height(self):
        """Terminal height in rows (excluding status line)."""
        return self.term.height - 1

    @property
    def text_rows(self) -> int:
        """Rows available for document lines inside the frame."""
        return max(self.height - 2, 1)

    def scroll_to(self, cursor_line: int) -> int:
        """Adjust the first visible line so ``cursor_line`` is on screen."""
        rows = self.text_rows
        if cursor_line < self.top_line:
            self.top_line = cursor_line
        elif cursor_line >= self.top_line + rows:
            self.top_line = cursor_line - rows + 1
        return self.top_line

    def _fit(self, text: str, room: int) -> str:
        """Longest prefix of ``text`` whose display width fits in ``room`` cells."""
        width = 0
        for index, ch in enumerate(text):
            width += self.term.length(ch)
            if width > room:
                return text[:index]
        return text

    def compose_row(self, row: DisplayRow, inner_width: int) -> str:
        """Render a display row to a styled string exactly ``inner_width`` cells wide."""
        out = []
        used = 0
        if row.label is not None:
            label = self._fit(row.label, inner_width)
            out.append(self.term.green(label))
            used = self.term.length(label)
        for segment in row.segments:
            if used >= inner_width:
                break
            text = self._fit(segment.text, inner_width - used)
            used += self.term.length(text)
            out.append(self.term.black_on_white(text) if segment.highlighted else text)
        out.append(" " * (inner_width - used))
        return "".join(out)

    def frame_lines(self, title: str, rows: Iterable[DisplayRow], cursor_line: int) -> list[str]:
        """Build the framed screen (without status line) as a list of strings."""
        width = max(self.width, 4)
        inner_width = width - 2
        top = self.scroll_to(cursor_line)
        shown = self._fit(title, inner_width)
        left_fill = (inner_width - self.term.length(shown)) // 2
        right_fill = inner_width - self.term.length(shown) - left_fill
        lines = [TOP_LEFT + HORIZONTAL * left_fill + shown + HORIZONTAL * right_fill + TOP_RIGHT]
        body = []
        for index, row in enumerate(rows):
            if index < top:
                continue
            if len(body) >= self.text_rows:
                break
            body.append(VERTICAL + self.compose_row(row, inner_width) + VERTICAL)
        while len(body) < self.text_rows:
            body.append(VERTICAL + " " * inner_width + VERTICAL)
        lines.extend(body)
        lines.append(BOTTOM_LEFT + HORIZONTAL * inner_width + BOTTOM_RIGHT)
        return lines

    def draw(self, title: str, rows: Iterable[DisplayRow], cursor_line: int,
             status: Optional[str] = None) -> None:
        """Clear the screen and draw the framed document plus a status line."""
        print(self.term.home + self.term.clear, end='')
        for y, line in enumerate(self.frame_lines(title, rows, cursor_line)):
            print(self.term.move(y, 0) + line, end='')
        print(self.term.move(self.term.height - 1, 0) + (status or "").ljust(self.width)[:self.width],
              end='', flush=True)

    def get_key(self, timeout=None):
        """Get a single keypress from the user.

        Args:
            timeout: Timeout in seconds (None for blocking, 0 for non-blocking)

        Returns:
            A curtsies key name, or None when nothing arrived in time.
        """
        if self._curtsies_input is None:
            return None
        if timeout is None:
            return str(next(self._curtsies_input))
        r, _, _ = select.select([sys.stdin], [], [], float(timeout))
        if not r:
            return None
        return str(next(self._curtsies_input))

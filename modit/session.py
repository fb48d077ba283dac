"""Editing session state.

A Session bundles everything a keystroke may change: the document, the
cursor, the current mode and a few bits of UI state. The editor owns one
session and hands it to each command; nothing is kept in module globals.
"""

import time
from dataclasses import dataclass, field
from typing import Optional

from .constants import EditorConstants
from .cursor import Cursor
from .document import Document
from .modes import Mode
from .narrator import LogNarrator, Narrator
from .settings import EditorSettings


@dataclass
class Session:
    document: Document = field(default_factory=Document)
    cursor: Cursor = field(default_factory=Cursor)
    mode: Mode = Mode.NORMAL
    path: Optional[str] = None
    settings: EditorSettings = field(default_factory=EditorSettings)
    narrator: Narrator = field(default_factory=LogNarrator)
    desired_column: int = 0  # Sticky column for up/down navigation
    status_message: Optional[str] = None
    modified: bool = False
    running: bool = True
    start_time: float = field(default_factory=time.monotonic)

    def set_cursor(self, cursor: Cursor, sticky: bool = True) -> None:
        """Store a clamped cursor; horizontal moves also reset the sticky column."""
        self.cursor = cursor.clamp(self.document)
        if sticky:
            self.desired_column = self.cursor.column_index

    def current_char(self) -> Optional[str]:
        """Character under the cursor, or None past the end of the line."""
        line = self.document.line(self.cursor.line_index)
        if self.cursor.column_index < len(line):
            return line[self.cursor.column_index]
        return None

    def elapsed_seconds(self) -> int:
        return int(time.monotonic() - self.start_time)

    def title(self) -> str:
        """Title summarizing mode, path and 1-based cursor position."""
        path = self.path or EditorConstants.UNNAMED_BUFFER
        return (f"<{self.mode.label}>-{path}-"
                f"|{self.cursor.line_index + 1}:{self.cursor.column_index + 1}|"
                f"-[{self.elapsed_seconds()}]")

"""Cursor position and navigation over a Document."""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from .constants import EditorConstants
from .document import Document


@dataclass
class Cursor:
    line_index: int = 0
    column_index: int = 0

    def clamp(self, document: Document) -> "Cursor":
        """Return a copy inside the document, allowing one past the line end."""
        line = min(max(self.line_index, 0), document.line_count() - 1)
        column = min(max(self.column_index, 0), document.line_length(line))
        return Cursor(line, column)


class VerticalMotion(Enum):
    """Column policy applied when moving between lines."""
    PRESERVE = EditorConstants.MOTION_PRESERVE
    LINE_END = EditorConstants.MOTION_LINE_END


def _last_column(document: Document, line_index: int) -> int:
    """Rightmost column reachable by navigation (0 on an empty line)."""
    return max(document.line_length(line_index) - 1, 0)


def move_left(document: Document, cursor: Cursor) -> Cursor:
    cursor = cursor.clamp(document)
    column = min(cursor.column_index - 1, _last_column(document, cursor.line_index))
    return replace(cursor, column_index=max(column, 0))


def move_right(document: Document, cursor: Cursor) -> Cursor:
    cursor = cursor.clamp(document)
    column = min(cursor.column_index + 1, _last_column(document, cursor.line_index))
    return replace(cursor, column_index=column)


def _vertical_column(document: Document, line_index: int,
                     motion: VerticalMotion, desired_column: int) -> int:
    if motion is VerticalMotion.LINE_END:
        return max(document.line_length(line_index) - 2, 0)
    return min(desired_column, _last_column(document, line_index))


def move_up(document: Document, cursor: Cursor,
            motion: VerticalMotion = VerticalMotion.PRESERVE,
            desired_column: Optional[int] = None) -> Cursor:
    """Move one line up.

    Args:
        document: Document being navigated
        cursor: Current cursor
        motion: Column policy for the new line
        desired_column: Sticky column to aim for; defaults to the
            cursor's current column

    Returns:
        New cursor on the previous line (or the first line)
    """
    cursor = cursor.clamp(document)
    if desired_column is None:
        desired_column = cursor.column_index
    line = max(cursor.line_index - 1, 0)
    return Cursor(line, _vertical_column(document, line, motion, desired_column))


def move_down(document: Document, cursor: Cursor,
              motion: VerticalMotion = VerticalMotion.PRESERVE,
              desired_column: Optional[int] = None) -> Cursor:
    """Move one line down. See move_up for arguments."""
    cursor = cursor.clamp(document)
    if desired_column is None:
        desired_column = cursor.column_index
    line = min(cursor.line_index + 1, document.line_count() - 1)
    return Cursor(line, _vertical_column(document, line, motion, desired_column))

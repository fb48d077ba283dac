"""Edit operations on a Document at a Cursor.

Each operation mutates the document in place and returns the cursor that
follows the edit. The incoming cursor is clamped first, so no operation
can index outside the document.
"""

from dataclasses import replace

from .cursor import Cursor
from .document import Document


def is_insertable(char: str) -> bool:
    """True for a single printable character (tab included)."""
    return len(char) == 1 and (ord(char) >= 32 or char == "\t") and char != "\x7f"


def insert_character(document: Document, cursor: Cursor, char: str) -> Cursor:
    cursor = cursor.clamp(document)
    document.insert_char(cursor.line_index, cursor.column_index, char)
    return replace(cursor, column_index=cursor.column_index + 1)


def insert_line_break(document: Document, cursor: Cursor) -> Cursor:
    """Open an empty line below the current one; the cursor stays put."""
    cursor = cursor.clamp(document)
    document.insert_line_after(cursor.line_index)
    return cursor


def delete_character_before_cursor(document: Document, cursor: Cursor) -> Cursor:
    """Backspace within the current line.

    At column 0 nothing happens: lines are never joined.
    """
    cursor = cursor.clamp(document)
    if cursor.column_index == 0:
        return cursor
    document.delete_char(cursor.line_index, cursor.column_index - 1)
    return replace(cursor, column_index=cursor.column_index - 1)

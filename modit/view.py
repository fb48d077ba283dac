"""Display projection of a document for the terminal renderer.

The projection is rebuilt from scratch on every draw. Glyphs it invents
(the empty-line placeholder and the end-of-line cursor cell) exist only in
the returned rows and are never written back into the document.
"""

from typing import Iterator, NamedTuple, Optional

from .constants import EditorConstants
from .cursor import Cursor
from .document import Document


class Segment(NamedTuple):
    text: str
    highlighted: bool = False


class DisplayRow(NamedTuple):
    label: Optional[str]
    segments: list[Segment]

    @property
    def text(self) -> str:
        return "".join(s.text for s in self.segments)


def line_label(number: int) -> str:
    """Return the gutter label for a 1-based line number.

    Labels are padded on the left with the placeholder glyph so that
    numbers below 100 line up: '⬞ 7 ', '⬞42 ', '128 '.
    """
    if number < EditorConstants.LABEL_NARROW_LIMIT:
        return f"{EditorConstants.LABEL_PAD} {number} "
    if number < EditorConstants.LABEL_WIDE_LIMIT:
        return f"{EditorConstants.LABEL_PAD}{number} "
    return f"{number} "


def project_line(line: str, cursor_column: Optional[int]) -> list[Segment]:
    """Split one line into segments, highlighting ``cursor_column`` if given."""
    if not line:
        return [Segment(EditorConstants.EMPTY_LINE_PLACEHOLDER, cursor_column is not None)]
    segments = [Segment(ch, i == cursor_column) for i, ch in enumerate(line)]
    if cursor_column is not None and cursor_column >= len(line):
        segments.append(Segment(EditorConstants.CURSOR_CELL, True))
    return segments


def project(document: Document, cursor: Cursor, line_numbers: bool = True) -> Iterator[DisplayRow]:
    """Yield one display row per document line."""
    cursor = cursor.clamp(document)
    for index, line in enumerate(document.lines):
        column = cursor.column_index if index == cursor.line_index else None
        label = line_label(index + 1) if line_numbers else None
        yield DisplayRow(label, project_line(line, column))

"""Line-oriented text storage for the editor.

The document is kept in split-line form for its whole lifetime. Text is
only flattened when it is written back to disk.
"""

from __future__ import annotations

from typing import Optional


class Document:
    """An ordered list of lines, each a string of codepoints without newlines.

    A newline terminates a line. Parsing ``"a\\nb"`` and ``"a\\nb\\n"`` both
    give ``["a", "b"]``; serializing always terminates the last line, so
    saving a file that already ends in a newline reproduces it exactly.
    """

    lines: list[str]

    def __init__(self, lines: Optional[list[str]] = None):
        self.lines = list(lines) if lines else [""]

    @classmethod
    def parse(cls, text: str) -> "Document":
        """Split flat text into a document with at least one line."""
        lines = text.split("\n")
        # A trailing newline terminates the last line rather than opening a new one
        if len(lines) > 1 and lines[-1] == "":
            lines.pop()
        return cls(lines)

    def serialize(self) -> str:
        """Join lines back into flat text, terminating every line."""
        return "".join(line + "\n" for line in self.lines)

    def line_count(self) -> int:
        return len(self.lines)

    def line_length(self, index: int) -> int:
        return len(self.lines[index])

    def line(self, index: int) -> str:
        return self.lines[index]

    def insert_char(self, line_index: int, column_index: int, char: str) -> None:
        line = self.lines[line_index]
        self.lines[line_index] = line[:column_index] + char + line[column_index:]

    def delete_char(self, line_index: int, column_index: int) -> None:
        line = self.lines[line_index]
        self.lines[line_index] = line[:column_index] + line[column_index + 1:]

    def insert_line_after(self, line_index: int, text: str = "") -> None:
        self.lines.insert(line_index + 1, text)

    def strip_glyph(self, glyph: str) -> "Document":
        """Return a copy with every occurrence of ``glyph`` removed."""
        return Document([line.replace(glyph, "") for line in self.lines])

    def __eq__(self, other):
        if not isinstance(other, Document):
            return NotImplemented
        return self.lines == other.lines

    def __repr__(self):
        return f"Document({self.lines!r})"

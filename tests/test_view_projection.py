"""Tests for the display projection of a document."""

import types

from modit.cursor import Cursor
from modit.document import Document
from modit.view import DisplayRow, Segment, line_label, project, project_line


def test_projection_is_lazy():
    rows = project(Document(["a"]), Cursor())
    assert isinstance(rows, types.GeneratorType)


def test_one_row_per_line():
    doc = Document(["one", "", "three"])
    rows = list(project(doc, Cursor()))
    assert len(rows) == 3
    assert [row.label for row in rows] == ["⬞ 1 ", "⬞ 2 ", "⬞ 3 "]


def test_cursor_character_is_highlighted():
    rows = list(project(Document(["abc", "def"]), Cursor(1, 1)))
    assert rows[0].segments == [Segment("a"), Segment("b"), Segment("c")]
    assert rows[1].segments == [Segment("d"), Segment("e", True), Segment("f")]


def test_empty_line_gets_placeholder():
    rows = list(project(Document(["", "x"]), Cursor(1, 0)))
    assert rows[0].segments == [Segment("⬞", False)]
    assert rows[0].text == "⬞"


def test_cursor_on_empty_line_highlights_placeholder():
    rows = list(project(Document([""]), Cursor(0, 0)))
    assert rows[0].segments == [Segment("⬞", True)]


def test_cursor_past_end_gets_highlighted_cell():
    segments = project_line("ab", 2)
    assert segments == [Segment("a"), Segment("b"), Segment(" ", True)]


def test_projection_never_touches_document():
    doc = Document(["", "ab", ""])
    list(project(doc, Cursor(0, 0)))
    list(project(doc, Cursor(1, 2)))
    assert doc.lines == ["", "ab", ""]
    assert doc.serialize() == "\nab\n\n"


def test_line_numbers_can_be_disabled():
    rows = list(project(Document(["a", "b"]), Cursor(), line_numbers=False))
    assert all(row.label is None for row in rows)


def test_line_label_widths():
    assert line_label(1) == "⬞ 1 "
    assert line_label(9) == "⬞ 9 "
    assert line_label(10) == "⬞10 "
    assert line_label(99) == "⬞99 "
    assert line_label(100) == "100 "
    assert line_label(1234) == "1234 "


def test_rows_are_recomputed_from_current_state():
    doc = Document(["ab"])
    first = list(project(doc, Cursor(0, 0)))
    doc.insert_char(0, 2, "c")
    second = list(project(doc, Cursor(0, 2)))
    assert first[0].text == "ab"
    assert second[0] == DisplayRow("⬞ 1 ", [Segment("a"), Segment("b"), Segment("c", True)])

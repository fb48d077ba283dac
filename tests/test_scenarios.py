"""End-to-end keystroke scenarios."""

from unittest.mock import MagicMock

from modit.cursor import Cursor
from modit.document import Document
from modit.editor import Editor
from modit.keyboard import KeyboardHandler
from modit.modes import Mode
from modit.narrator import LogNarrator, Narrator


class RecordingNarrator(Narrator):
    def __init__(self):
        self.spoken = []

    def say(self, text):
        self.spoken.append(text)


def type_keys(editor, *tokens):
    """Feed curtsies-style key tokens through the real key parser."""
    parser = KeyboardHandler(editor.terminal)
    for token in tokens:
        editor.handle_key_event(parser.parse_key(token))


def test_type_into_empty_buffer_then_navigate():
    editor = Editor(terminal=MagicMock())
    type_keys(editor, "i", "a", "b", "c")
    assert editor.session.document.lines == ["abc"]
    assert editor.session.cursor == Cursor(0, 3)

    type_keys(editor, "<ESC>", "<LEFT>", "<LEFT>")
    assert editor.session.mode is Mode.NORMAL
    assert editor.session.cursor == Cursor(0, 1)


def test_backspace_in_insert_mode():
    editor = Editor(terminal=MagicMock())
    editor.session.document = Document.parse("ab\ncd")
    editor.session.cursor = Cursor(0, 1)
    type_keys(editor, "i", "<BACKSPACE>")
    assert editor.session.document.lines == ["b", "cd"]
    assert editor.session.cursor == Cursor(0, 0)


def test_enter_then_move_down_and_type():
    editor = Editor(terminal=MagicMock())
    editor.session.document = Document.parse("title\n")
    type_keys(editor, "i", "<Ctrl-j>", "<DOWN>", "b", "o", "d", "y")
    assert editor.session.document.serialize() == "title\nbody\n"
    assert editor.session.cursor == Cursor(1, 4)


def test_typing_in_debug_mode_matches_insert():
    plain = Editor(terminal=MagicMock())
    debug = Editor(terminal=MagicMock())
    debug.session.narrator = RecordingNarrator()
    type_keys(plain, "i", "h", "i", "<SPACE>", "x", "<BACKSPACE>")
    type_keys(debug, "i", "<F12>", "h", "i", "<SPACE>", "x", "<BACKSPACE>")
    assert plain.session.document.lines == ["hi "]
    assert debug.session.document == plain.session.document
    assert debug.session.narrator.spoken == ["h", "i", " ", "x"]


def test_quit_key_stops_session():
    editor = Editor(terminal=MagicMock())
    type_keys(editor, "q")
    assert editor.session.running is False


def test_title_reflects_mode_and_position():
    editor = Editor(terminal=MagicMock())
    editor.session.path = "notes.txt"
    type_keys(editor, "i", "a", "b")
    title = editor.session.title()
    assert title.startswith("<INSERT>-notes.txt-|1:3|-[")
    assert title.endswith("]")


def test_default_narrator_writes_to_log(caplog):
    editor = Editor(terminal=MagicMock())
    assert isinstance(editor.session.narrator, LogNarrator)
    with caplog.at_level("INFO", logger="modit.narrator"):
        type_keys(editor, "i", "<F12>", "z")
    assert "narrate: 'z'" in caplog.text
    assert editor.session.document.lines == ["z"]

"""Command pattern implementation for editor actions.

Every mode has its own key table. A keystroke is looked up in the table of
the session's current mode only, so a key can mean different things in
NORMAL and INSERT without any cross-mode conditionals.
"""

import logging
from abc import ABC, abstractmethod
from typing import Callable, Dict, Tuple, Optional, TYPE_CHECKING

from . import cursor as nav
from . import edits
from .constants import EditorConstants
from .cursor import Cursor
from .keyboard import KeyType
from .modes import Mode

if TYPE_CHECKING:
    from .editor import Editor
    from .keyboard import KeyEvent
    from .session import Session

logger = logging.getLogger(__name__)

KeyBinding = Tuple[KeyType, str]


class EditorCommand(ABC):
    """Base class for editor commands."""

    @abstractmethod
    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """Execute the command.

        Args:
            editor: Editor instance
            key_event: The key event that triggered this command

        Returns:
            True if the command modified the document
        """
        pass


class MovementCommand(EditorCommand):
    """Base class for cursor movement commands."""

    # Horizontal moves reset the sticky column, vertical moves keep it
    sticky = True

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """Movement commands don't modify the document."""
        session = editor.session
        session.set_cursor(self._move(session), sticky=self.sticky)
        return False

    @abstractmethod
    def _move(self, session: 'Session') -> Cursor:
        """Return the cursor after the movement."""
        pass


class LeftCharCommand(MovementCommand):
    def _move(self, session):
        return nav.move_left(session.document, session.cursor)


class RightCharCommand(MovementCommand):
    def _move(self, session):
        return nav.move_right(session.document, session.cursor)


class UpLineCommand(MovementCommand):
    sticky = False

    def _move(self, session):
        return nav.move_up(session.document, session.cursor,
                           session.settings.vertical_motion, session.desired_column)


class DownLineCommand(MovementCommand):
    sticky = False

    def _move(self, session):
        return nav.move_down(session.document, session.cursor,
                             session.settings.vertical_motion, session.desired_column)


class EditCommand(EditorCommand):
    """Base class for editing commands."""

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """Editing commands modify the document."""
        session = editor.session
        changed = self._edit(session, key_event)
        if changed:
            session.modified = True
        return changed

    @abstractmethod
    def _edit(self, session: 'Session', key_event: 'KeyEvent') -> bool:
        """Perform the edit; return True if the document changed."""
        pass


class InsertTextCommand(EditCommand):
    def _edit(self, session, key_event):
        char = key_event.value
        # Filter out control characters
        if not edits.is_insertable(char):
            return False
        if session.mode is Mode.DEBUG:
            session.narrator.say(char)
        session.set_cursor(edits.insert_character(session.document, session.cursor, char))
        return True


class InsertNewlineCommand(EditCommand):
    def _edit(self, session, key_event):
        session.set_cursor(edits.insert_line_break(session.document, session.cursor),
                           sticky=False)
        return True


class BackspaceCommand(EditCommand):
    def _edit(self, session, key_event):
        before = session.cursor.clamp(session.document)
        session.set_cursor(edits.delete_character_before_cursor(session.document, before))
        return session.cursor != before


class ModeCommand(EditorCommand):
    """Base class for mode transitions."""

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        session = editor.session
        new_mode = self._next_mode(session.mode)
        if new_mode is not session.mode:
            logger.debug(f"mode {session.mode.label} -> {new_mode.label}")
            session.mode = new_mode
        return False

    @abstractmethod
    def _next_mode(self, mode: Mode) -> Mode:
        pass


class EnterInsertCommand(ModeCommand):
    def _next_mode(self, mode):
        return Mode.INSERT


class ExitInsertCommand(ModeCommand):
    def _next_mode(self, mode):
        return Mode.NORMAL


class ToggleDebugCommand(ModeCommand):
    def _next_mode(self, mode):
        return mode.toggled_debug()


class SystemCommand(EditorCommand):
    """Base class for system commands like save, quit and narration."""

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """System commands don't modify document content directly."""
        self._execute_system(editor, key_event)
        return False

    @abstractmethod
    def _execute_system(self, editor: 'Editor', key_event: 'KeyEvent'):
        """Perform the system action."""
        pass


class QuitCommand(SystemCommand):
    def _execute_system(self, editor, key_event):
        editor.session.running = False


class SaveCommand(SystemCommand):
    def _execute_system(self, editor, key_event):
        editor.handle_save()


class NarrateCurrentCommand(SystemCommand):
    def _execute_system(self, editor, key_event):
        char = editor.session.current_char()
        if char is not None:
            editor.session.narrator.say(char)


def _navigation_bindings() -> Dict[KeyBinding, EditorCommand]:
    return {
        (KeyType.SPECIAL, 'left'): LeftCharCommand(),
        (KeyType.SPECIAL, 'right'): RightCharCommand(),
        (KeyType.SPECIAL, 'up'): UpLineCommand(),
        (KeyType.SPECIAL, 'down'): DownLineCommand(),
    }


def _normal_bindings() -> Dict[KeyBinding, EditorCommand]:
    table = _navigation_bindings()
    table.update({
        (KeyType.REGULAR, 'h'): LeftCharCommand(),
        (KeyType.REGULAR, 'l'): RightCharCommand(),
        (KeyType.REGULAR, 'k'): UpLineCommand(),
        (KeyType.REGULAR, 'j'): DownLineCommand(),
        (KeyType.REGULAR, EditorConstants.KEY_ENTER_INSERT): EnterInsertCommand(),
        (KeyType.REGULAR, EditorConstants.KEY_SAVE): SaveCommand(),
        (KeyType.REGULAR, EditorConstants.KEY_QUIT): QuitCommand(),
    })
    return table


def _insert_bindings() -> Dict[KeyBinding, EditorCommand]:
    table = _navigation_bindings()
    table.update({
        (KeyType.SPECIAL, 'enter'): InsertNewlineCommand(),
        (KeyType.SPECIAL, 'backspace'): BackspaceCommand(),
        (KeyType.SPECIAL, 'escape'): ExitInsertCommand(),
        (KeyType.SPECIAL, EditorConstants.KEY_DEBUG_TOGGLE): ToggleDebugCommand(),
    })
    return table


def _debug_bindings() -> Dict[KeyBinding, EditorCommand]:
    table = _insert_bindings()
    table[(KeyType.SPECIAL, EditorConstants.KEY_NARRATE_CURRENT)] = NarrateCurrentCommand()
    return table


KEY_TABLES: Dict[Mode, Callable[[], Dict[KeyBinding, EditorCommand]]] = {
    Mode.NORMAL: _normal_bindings,
    Mode.INSERT: _insert_bindings,
    Mode.DEBUG: _debug_bindings,
}


class CommandRegistry:
    """Registry for mapping (mode, key) combinations to commands."""

    def __init__(self):
        missing = [mode.name for mode in Mode if mode not in KEY_TABLES]
        if missing:
            raise ValueError(f"No key table for modes: {missing}")
        self._tables = {mode: KEY_TABLES[mode]() for mode in Mode}
        self._insert_text = InsertTextCommand()

    def get_command(self, mode: Mode, key_type: KeyType, value: str) -> Optional[EditorCommand]:
        """Get the command for a key combination in the given mode."""
        command = self._tables[mode].get((key_type, value))
        if command is None and mode.is_editing and key_type == KeyType.REGULAR:
            return self._insert_text
        return command

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """Execute the command for the given key event.

        Returns:
            True if the document was modified
        """
        command = self.get_command(editor.session.mode, key_event.key_type, key_event.value)
        if command:
            return command.execute(editor, key_event)
        return False

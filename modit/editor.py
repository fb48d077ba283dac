"""Main editor controller for the modal text editor."""

import errno
import logging
import os
import shutil
import tempfile
from typing import Optional

from .commands import CommandRegistry
from .constants import EditorConstants
from .document import Document
from .keyboard import KeyboardHandler, KeyEvent
from .session import Session
from .settings import EditorSettings
from .terminal import TerminalInterface
from .view import project

logger = logging.getLogger(__name__)


class DocumentLoadError(Exception):
    """Raised when a file named on the command line cannot be read."""

    def __init__(self, filename: str, reason: str):
        super().__init__(f"Cannot read {filename}: {reason}")
        self.filename = filename
        self.reason = reason


class Editor:
    """Modal editor application controller."""

    def __init__(self, terminal: Optional[TerminalInterface] = None,
                 settings: Optional[EditorSettings] = None):
        """Initialize the editor components."""
        self.terminal = terminal or TerminalInterface()
        self.keyboard = KeyboardHandler(self.terminal)
        self.command_registry = CommandRegistry()
        self.session = Session(settings=settings or EditorSettings())

    @property
    def filename(self) -> Optional[str]:
        return self.session.path

    def run(self):
        """Run the main editor loop: draw, wait for a key, handle it."""
        self.terminal.setup()
        self.session.running = True
        try:
            while self.session.running:
                self._draw()
                key_event = self.keyboard.get_key_event(timeout=None)
                if key_event:
                    self.handle_key_event(key_event)
        finally:
            self.terminal.cleanup()

    def _draw(self):
        """Draw the current editor state to terminal."""
        session = self.session
        rows = project(session.document, session.cursor,
                       line_numbers=session.settings.line_numbers)
        status = f" {session.status_message}" if session.status_message else None
        self.terminal.draw(session.title(), rows, session.cursor.line_index, status)

    def handle_key_event(self, key_event: KeyEvent) -> bool:
        """Handle a keyboard event.

        Args:
            key_event: KeyEvent object with parsed key information

        Returns:
            True if the document was modified
        """
        # Clear status message on any keypress
        self.session.status_message = None
        return self.command_registry.execute(self, key_event)

    def load_file(self, filename: str):
        """Load a file into the editor.

        A missing file starts an empty buffer bound to ``filename``.

        Args:
            filename: Path to file to load

        Raises:
            DocumentLoadError: if the file exists but cannot be read
        """
        self.session.path = filename
        try:
            with open(filename, 'r', encoding='utf-8', newline='') as f:
                content = f.read()
        except FileNotFoundError:
            logger.info(f"{filename} does not exist, starting empty buffer")
            self.session.document = Document()
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Error loading {filename}: {e}")
            raise DocumentLoadError(filename, str(e)) from e
        else:
            self.session.document = Document.parse(content)
            logger.info(f"Loaded {filename} ({self.session.document.line_count()} lines)")
        self.session.set_cursor(self.session.cursor)
        self.session.modified = False

    def save_file(self, filename: str) -> bool:
        """Save the current document to a file atomically.

        Args:
            filename: Path to save file to

        Returns:
            True if save succeeded, False otherwise
        """
        document = self.session.document
        if self.session.settings.strip_placeholder_on_save:
            document = document.strip_glyph(EditorConstants.EMPTY_LINE_PLACEHOLDER)
        content = document.serialize()

        # Write to a temporary file in the same directory for atomic save
        dir_name = os.path.dirname(filename) or '.'
        base_name = os.path.basename(filename)
        temp_filename = None
        try:
            with tempfile.NamedTemporaryFile(mode='w', encoding='utf-8', newline='', dir=dir_name,
                                             prefix=EditorConstants.ATOMIC_SAVE_PREFIX + base_name,
                                             suffix=EditorConstants.ATOMIC_SAVE_SUFFIX,
                                             delete=False) as temp_file:
                temp_filename = temp_file.name
                temp_file.write(content)
                temp_file.flush()
                os.fsync(temp_file.fileno())
            if os.path.exists(filename):
                shutil.copymode(filename, temp_filename)
            os.replace(temp_filename, filename)
        except PermissionError as e:
            self._save_failed(filename, temp_filename, e,
                              f"Error: Permission denied saving {filename}")
            return False
        except OSError as e:
            if e.errno == errno.ENOSPC:
                message = "Error: No space left on device"
            else:
                message = f"Error: Cannot save to {filename}"
            self._save_failed(filename, temp_filename, e, message)
            return False

        logger.info(f"Saved {filename} ({len(content)} characters)")
        self.session.path = filename
        self.session.modified = False
        return True

    def _save_failed(self, filename: str, temp_filename: Optional[str],
                     error: Exception, message: str) -> None:
        logger.error(f"Saving {filename} failed: {error}")
        self.session.status_message = message
        if temp_filename and os.path.exists(temp_filename):
            try:
                os.remove(temp_filename)
            except OSError as cleanup_error:
                logger.warning(f"Could not remove {temp_filename}: {cleanup_error}")

    def handle_save(self):
        """Handle the save key in NORMAL mode."""
        if not self.session.path:
            self.session.status_message = EditorConstants.NO_FILENAME_MESSAGE
            return
        if self.save_file(self.session.path):
            self.session.status_message = f"Saved to {self.session.path}"

"""modit CLI entry point.

Allows running via `python -m modit` and provides the console script
defined in `pyproject.toml`.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

import platformdirs

from .constants import EditorConstants
from .version import get_version_string


def _escape_bytes(s: str) -> str:
    """Return a printable representation of raw key string."""
    return s.encode('unicode_escape').decode('ascii')


def configure_logging() -> Path:
    """Send log records to a file; the screen belongs to the editor.

    The level comes from MODIT_LOG_LEVEL (default WARNING).
    """
    log_dir = Path(platformdirs.user_log_dir("modit"))
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "modit.log"
    level_name = os.environ.get(EditorConstants.LOG_LEVEL_ENV_VAR, "WARNING").upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        filename=str(log_file),
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return log_file


def run_keyboard_test() -> None:
    """Run an interactive keyboard test using the editor's input stack.

    Uses TerminalInterface + KeyboardHandler. Quit with ESC.
    """
    from .terminal import TerminalInterface
    from .keyboard import KeyboardHandler, KeyEvent, KeyType

    print("Keyboard test mode - press keys to see parsed events.")
    print("Quit with ESC.")

    term = TerminalInterface()
    term.setup()
    kb = KeyboardHandler(term)
    try:
        while True:
            ev: KeyEvent | None = kb.get_key_event(timeout=None)
            if not ev:
                continue
            if ev.key_type == KeyType.SPECIAL and ev.value == 'escape':
                print("Exiting keyboard test.\r")
                break
            parts = [f"type={ev.key_type.value}", f"value={ev.value}", f"raw='{_escape_bytes(ev.raw)}'"]
            flags = [name for name, on in (('alt', ev.is_alt), ('ctrl', ev.is_ctrl),
                                           ('seq', ev.is_sequence)) if on]
            if flags:
                parts.append(f"flags={'+'.join(flags)}")
            print(' '.join(parts) + '\r')
    finally:
        term.cleanup()


def main() -> None:
    # Very small arg parsing to support keyboard test mode, version, and optional filename
    args = sys.argv[1:]
    if args and args[0] in ("--version", "-V"):
        print(get_version_string())
        return
    if args and args[0] in ('--keytest', '--keyboard-test'):
        run_keyboard_test()
        return

    configure_logging()

    # Lazy import to avoid importing UI deps for --version
    from .editor import Editor, DocumentLoadError
    from .settings import load_settings

    editor = Editor(settings=load_settings())
    if args:
        try:
            editor.load_file(args[0])
        except DocumentLoadError as e:
            print(f"modit: {e}", file=sys.stderr)
            sys.exit(1)
    editor.run()


if __name__ == "__main__":  # pragma: no cover
    main()

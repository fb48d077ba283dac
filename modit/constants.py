"""Constants and configuration for the modit editor."""

class EditorConstants:
    """Central configuration constants for the editor."""

    # View projection
    EMPTY_LINE_PLACEHOLDER = "⬞"  # Shown on empty lines, never stored
    CURSOR_CELL = " "  # Shown when the cursor sits past the last character
    UNNAMED_BUFFER = "[No Name]"

    # Line number labels
    LABEL_PAD = "⬞"
    LABEL_NARROW_LIMIT = 10
    LABEL_WIDE_LIMIT = 100

    # Key names (as produced by the keyboard handler)
    KEY_ENTER_INSERT = "i"
    KEY_SAVE = "w"
    KEY_QUIT = "q"
    KEY_DEBUG_TOGGLE = "f12"
    KEY_NARRATE_CURRENT = "f1"

    # Vertical motion policies
    MOTION_PRESERVE = "preserve"
    MOTION_LINE_END = "line_end"

    # File operations
    ATOMIC_SAVE_PREFIX = "."  # Prefix for temporary save files
    ATOMIC_SAVE_SUFFIX = ".tmp"  # Suffix for temporary save files

    # Environment
    CONFIG_ENV_VAR = "MODIT_CONFIG"
    LOG_LEVEL_ENV_VAR = "MODIT_LOG_LEVEL"

    # Status messages
    NO_FILENAME_MESSAGE = "No file name (start modit with a path to save)"

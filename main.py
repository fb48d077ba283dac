#!/usr/bin/env python3
"""modit - A small modal text editor.

Usage:
    python main.py [filename]

Controls (NORMAL mode):
    h/j/k/l or arrow keys: Navigate cursor
    i: Enter INSERT mode
    w: Save file
    q: Quit

Controls (INSERT mode):
    Type to insert text
    Enter: Open a new line below
    Backspace: Delete character before cursor
    F12: Toggle DEBUG narration
    Esc: Back to NORMAL mode
"""

from modit.__main__ import main


if __name__ == "__main__":
    main()

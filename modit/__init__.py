"""modit - A small modal text editor for the terminal."""

from .document import Document
from .cursor import Cursor, VerticalMotion
from .modes import Mode
from .session import Session
from .view import DisplayRow, Segment, project

__all__ = [
    'Document',
    'Cursor',
    'VerticalMotion',
    'Mode',
    'Session',
    'DisplayRow',
    'Segment',
    'project',
]

"""Editor modes."""

from enum import Enum


class Mode(Enum):
    """Interaction modes. DEBUG is INSERT with narration switched on."""
    NORMAL = "normal"
    INSERT = "insert"
    DEBUG = "debug"

    @property
    def is_editing(self) -> bool:
        return self is not Mode.NORMAL

    @property
    def label(self) -> str:
        return self.name

    def toggled_debug(self) -> "Mode":
        """Swap INSERT and DEBUG; NORMAL is unaffected."""
        if self is Mode.INSERT:
            return Mode.DEBUG
        if self is Mode.DEBUG:
            return Mode.INSERT
        return self

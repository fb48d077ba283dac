"""Narration hooks used by DEBUG mode."""

import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)


class Narrator(ABC):
    """Receives characters to announce while in DEBUG mode."""

    @abstractmethod
    def say(self, text: str) -> None:
        pass


class LogNarrator(Narrator):
    """Writes narration to the log instead of speaking it."""

    def say(self, text: str) -> None:
        logger.info(f"narrate: {text!r}")

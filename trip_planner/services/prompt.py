"""
Line Input Providers - Ask the user for one line of text.
Used when adding activities, expenses or companions to the draft trip.
"""
import logging
from typing import Iterable, Optional, Protocol

logger = logging.getLogger(__name__)


class LineInputProvider(Protocol):
    """Blocking prompt: returns the entered text, or None when cancelled."""

    def ask(self, message: str) -> Optional[str]: ...


class ConsolePrompt:
    """Prompt on the terminal. Blocks until the user answers."""

    def ask(self, message: str) -> Optional[str]:
        try:
            return input(f"{message} ")
        except (EOFError, KeyboardInterrupt):
            logger.debug(f"Prompt cancelled: {message}")
            return None


class ScriptedPrompt:
    """Answers prompts from a fixed list, then behaves as cancelled."""

    def __init__(self, answers: Iterable[Optional[str]] = ()):
        self._answers = list(answers)
        self.asked: list[str] = []

    def ask(self, message: str) -> Optional[str]:
        self.asked.append(message)
        if not self._answers:
            return None
        return self._answers.pop(0)

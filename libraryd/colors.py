"""ANSI colour codes used for terminal output."""

from enum import Enum


class Color(str, Enum):
    """ANSI escape sequences for the colours the tools print with."""

    RESET = "\033[0m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    CYAN = "\033[36m"

    def __str__(self) -> str:
        return self.value


def paint(text: str, color: Color) -> str:
    """Wrap ``text`` in ``color`` and a trailing reset sequence."""
    return f"{Color(color).value}{text}{Color.RESET.value}"
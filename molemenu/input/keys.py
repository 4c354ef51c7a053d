"""Semantic key events produced by the decoder."""

from __future__ import annotations

from dataclasses import dataclass

ENTER = "ENTER"
SPACE = "SPACE"
QUIT = "QUIT"
ALL = "ALL"
NONE = "NONE"
HELP = "HELP"
SORT = "SORT"
REVERSE = "REVERSE"
FILTER = "FILTER"
DELETE = "DELETE"
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
CHAR = "CHAR"
OTHER = "OTHER"


@dataclass(frozen=True)
class KeyEvent:
    name: str
    char: str = ""

    def __str__(self) -> str:
        if self.name == CHAR:
            return f"{CHAR}:{self.char}"
        return self.name


def char_event(ch: str) -> KeyEvent:
    return KeyEvent(CHAR, ch)

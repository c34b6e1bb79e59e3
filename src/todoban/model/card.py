"""Cards and the closed sets they are classified by."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


def parse_number(raw: str) -> int | None:
    """Parse a typed integer: optional sign, ASCII digits, surrounding blanks allowed.

    " 42 " → 42, "-1" → -1, "0_1" / "٣" / "2.0" / "" → None
    """
    text = raw.strip()
    digits = text[1:] if text[:1] in ("+", "-") else text
    if not (digits.isascii() and digits.isdigit()):
        return None
    return int(text)


class CardSize(Enum):
    """Card size. Values double as the menu tokens."""

    XS = 1
    S = 2
    M = 3
    L = 4
    XL = 5

    @classmethod
    def parse(cls, raw: str) -> CardSize | None:
        """Map a raw menu token to a size, or None if it isn't one.

        "3" → CardSize.M, " 5 " → CardSize.XL, "0" / "six" / "" → None
        """
        value = parse_number(raw)
        if value is None:
            return None
        try:
            return cls(value)
        except ValueError:
            return None

    @classmethod
    def menu(cls) -> str:
        """Render the choices as "XS(1),S(2),..."."""
        return ",".join(f"{size.name}({size.value})" for size in cls)


class BoardLine(Enum):
    """The three board columns, in display order."""

    TODO = ("1", "TODO")
    IN_PROGRESS = ("2", "IN PROGRESS")
    DONE = ("3", "DONE")

    def __init__(self, token: str, label: str) -> None:
        self.token = token
        self.label = label

    @classmethod
    def parse(cls, raw: str) -> BoardLine | None:
        """Map a menu token ("1".."3", exact match) to a line, or None."""
        for line in cls:
            if line.token == raw:
                return line
        return None


@dataclass(eq=False)
class Card:
    """One unit of work on the board.

    Identity is the object itself: titles aren't unique, so two cards with
    equal fields are still different cards.
    """

    title: str
    content: str
    assigned_person_id: int
    size: CardSize
    line: BoardLine = BoardLine.TODO

    def matches(self, title: str) -> bool:
        """Case-insensitive exact title comparison."""
        return self.title.casefold() == title.casefold()

"""Card and Color types for UNO."""

from dataclasses import dataclass
from enum import Enum
from typing import Union


class Color(str, Enum):
    """Card colors."""

    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    YELLOW = "yellow"


@dataclass(frozen=True)
class Number:
    """A numbered card, 0-9."""

    n: int
    color: Color

    def __post_init__(self) -> None:
        if not 0 <= self.n <= 9:
            raise ValueError(f"Invalid card number: {self.n}")

    def __str__(self) -> str:
        return f"{self.color.value}_{self.n}"


@dataclass(frozen=True)
class Draw2:
    color: Color

    def __str__(self) -> str:
        return f"{self.color.value}_draw_two"


@dataclass(frozen=True)
class Skip:
    color: Color

    def __str__(self) -> str:
        return f"{self.color.value}_skip"


@dataclass(frozen=True)
class Reverse:
    color: Color

    def __str__(self) -> str:
        return f"{self.color.value}_reverse"


@dataclass(frozen=True)
class ChangeColor:
    """Wild card: the player picks the next color."""

    def __str__(self) -> str:
        return "wild"


@dataclass(frozen=True)
class Draw4:
    """Wild draw four."""

    def __str__(self) -> str:
        return "wild_draw_four"


ColoredCard = Union[Number, Draw2, Skip, Reverse]
Wildcard = Union[ChangeColor, Draw4]
Card = Union[ColoredCard, Wildcard]

COLORED_TYPES = (Number, Draw2, Skip, Reverse)
WILDCARD_TYPES = (ChangeColor, Draw4)


def is_colored(card: Card) -> bool:
    """True for cards that carry their own color."""
    return isinstance(card, COLORED_TYPES)


def is_wildcard(card: Card) -> bool:
    return isinstance(card, WILDCARD_TYPES)

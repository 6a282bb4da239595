"""Opening-hand statistics."""

from collections import Counter
from dataclasses import dataclass, fields
from typing import Iterable

from unosim.engine import ChangeColor, Draw2, Draw4, Number, Reverse, Skip, is_colored


def _max_count(values: Iterable) -> int:
    counts = Counter(values)
    return max(counts.values(), default=0)


@dataclass(frozen=True)
class HandStats:
    """Card-type counts for a hand, or sums/averages of them."""

    special: float = 0.0
    number: float = 0.0
    draw2: float = 0.0
    draw4: float = 0.0
    change_color: float = 0.0
    skip: float = 0.0
    reverse: float = 0.0
    colors: float = 0.0
    color_streak: float = 0.0
    same_numbers: float = 0.0

    @classmethod
    def from_hand(cls, hand) -> "HandStats":
        hand = list(hand)

        def count(kind) -> float:
            return float(sum(1 for c in hand if isinstance(c, kind)))

        # Wildcards group together under color_streak, non-Number cards under same_numbers.
        return cls(
            special=float(sum(1 for c in hand if not isinstance(c, Number))),
            number=count(Number),
            draw2=count(Draw2),
            draw4=count(Draw4),
            change_color=count(ChangeColor),
            skip=count(Skip),
            reverse=count(Reverse),
            colors=float(len({c.color for c in hand if is_colored(c)})),
            color_streak=float(_max_count(c.color if is_colored(c) else None for c in hand)),
            same_numbers=float(_max_count(c.n if isinstance(c, Number) else None for c in hand)),
        )

    def __add__(self, other: "HandStats") -> "HandStats":
        return HandStats(**{f.name: getattr(self, f.name) + getattr(other, f.name) for f in fields(self)})

    def divide(self, n: int) -> "HandStats":
        return HandStats(**{f.name: getattr(self, f.name) / n for f in fields(self)})

    def __str__(self) -> str:
        best = self.draw2 + self.draw4 + self.change_color
        return (
            "HandStats("
            f"{self.special:.2f} special, "
            f"{self.number:.2f} Number, "
            f"{self.draw2:.2f} Draw2, "
            f"{self.draw4:.2f} Draw4, "
            f"{self.draw2 + self.draw4:.2f} total draw, "
            f"{self.change_color:.2f} ChangeColor, "
            f"{self.skip:.2f} Skip, "
            f"{self.reverse:.2f} Reverse, "
            f"{self.colors:.2f} colors, "
            f"{self.color_streak:.2f} of same color, "
            f"{self.same_numbers:.2f} same numbers, "
            f"{best:.2f} best cards"
            ")"
        )

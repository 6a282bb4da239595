"""UNO rules: turns, forced draws and legality."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Union

from unosim.engine.card import (
    Card,
    ChangeColor,
    Color,
    ColoredCard,
    Draw2,
    Draw4,
    Number,
    Reverse,
    Skip,
    Wildcard,
    is_colored,
)
from unosim.engine.errors import StrategyViolation


@dataclass(frozen=True)
class Play:
    """Turn: play a colored card."""

    card: ColoredCard

    def __str__(self) -> str:
        return f"play {self.card}"


@dataclass(frozen=True)
class PlayWildcard:
    """Turn: play a wildcard and pick the next color."""

    card: Wildcard
    new_color: Color

    def __str__(self) -> str:
        return f"play {self.card} (chose {self.new_color.value})"


@dataclass(frozen=True)
class Draw:
    """Turn: draw one card, or every card owed by a pending MustDraw."""

    def __str__(self) -> str:
        return "draw"


Turn = Union[Play, PlayWildcard, Draw]


class Rotation(Enum):
    CLOCKWISE = 1
    COUNTER_CLOCKWISE = -1

    def reversed(self) -> "Rotation":
        if self is Rotation.CLOCKWISE:
            return Rotation.COUNTER_CLOCKWISE
        return Rotation.CLOCKWISE


class DrawFactor(Enum):
    TWO = 2
    FOUR = 4


@dataclass(frozen=True)
class MustDraw:
    """Forced-draw obligation accumulated by Draw2/Draw4 plays."""

    factor: DrawFactor
    cards: int

    def __str__(self) -> str:
        return f"{self.factor.name.lower()}:{self.cards}"


def stack_must_draw(must_draw: Optional[MustDraw], card: Card) -> Optional[MustDraw]:
    """Return the obligation left after ``card`` is played on ``must_draw``.

    Draw2 adds 2 and keeps the factor; Draw4 adds 4 and escalates to FOUR.
    Any other card leaves the obligation untouched.
    """
    if isinstance(card, Draw2):
        if must_draw is None:
            return MustDraw(DrawFactor.TWO, 2)
        return MustDraw(must_draw.factor, must_draw.cards + 2)
    if isinstance(card, Draw4):
        if must_draw is None:
            return MustDraw(DrawFactor.FOUR, 4)
        return MustDraw(DrawFactor.FOUR, must_draw.cards + 4)
    return must_draw


def _matches(card: ColoredCard, last_card: Card, color: Color) -> bool:
    if card.color == color:
        return True
    if isinstance(card, Number) and isinstance(last_card, Number):
        return card.n == last_card.n
    for kind in (Skip, Reverse, Draw2):
        if isinstance(card, kind) and isinstance(last_card, kind):
            return True
    return False


def is_playable(
    card: Card,
    last_card: Card,
    color: Color,
    must_draw: Optional[MustDraw],
) -> bool:
    """Check if ``card`` may be played on ``last_card`` with ``color`` active."""
    if isinstance(card, Draw4):
        return True
    if isinstance(card, ChangeColor):
        return must_draw is None
    if must_draw is not None:
        return isinstance(card, Draw2) and must_draw.factor is DrawFactor.TWO
    return _matches(card, last_card, color)


def can_draw(
    hand: Iterable[Card],
    color: Color,
    must_draw: Optional[MustDraw],
) -> bool:
    """Drawing is allowed with an obligation pending or nothing of the active color."""
    if must_draw is not None:
        return True
    return not any(is_colored(c) and c.color == color for c in hand)


def legal_turns(
    hand: Iterable[Card],
    last_card: Card,
    color: Color,
    must_draw: Optional[MustDraw],
) -> List[Turn]:
    """Return every legal turn; wildcards appear once per color choice."""
    hand = list(hand)
    turns: List[Turn] = []
    seen = set()
    for card in hand:
        if card in seen or not is_playable(card, last_card, color, must_draw):
            continue
        seen.add(card)
        if is_colored(card):
            turns.append(Play(card))
        else:
            turns.extend(PlayWildcard(card, c) for c in Color)
    if can_draw(hand, color, must_draw):
        turns.append(Draw())
    return turns


def check_turn(
    turn: Turn,
    hand: Iterable[Card],
    last_card: Card,
    color: Color,
    must_draw: Optional[MustDraw],
) -> None:
    """Raise StrategyViolation unless ``turn`` is legal in this position."""

    def violation(reason: str) -> StrategyViolation:
        return StrategyViolation(reason, turn, last_card, color, must_draw)

    if isinstance(turn, Play):
        card = turn.card
        if not is_colored(card):
            raise violation("Play requires a colored card")
        if must_draw is not None:
            if must_draw.factor is DrawFactor.FOUR:
                raise violation("Draw 4 can be answered only by Draw 4")
            if not isinstance(card, Draw2):
                raise violation("Draw 2 can be answered only by Draw 2 or Draw 4")
        if not is_playable(card, last_card, color, must_draw):
            raise violation("Card doesn't match the last card or color")
    elif isinstance(turn, PlayWildcard):
        if is_colored(turn.card):
            raise violation("PlayWildcard requires a wildcard")
        if not isinstance(turn.new_color, Color):
            raise violation("Wildcard needs a new color")
        if not is_playable(turn.card, last_card, color, must_draw):
            raise violation("Draw 4 card required")
    elif isinstance(turn, Draw):
        if not can_draw(hand, color, must_draw):
            raise violation("Can't draw when you can match the color")
    else:
        raise violation("Unknown turn")

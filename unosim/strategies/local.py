"""Greedy strategy that ranks legal cards by how much they help the hand."""

from typing import List

from unosim.engine import (
    Card,
    ChangeColor,
    Draw,
    Draw2,
    Draw4,
    Number,
    PlayerView,
    Reverse,
    Skip,
    Turn,
    is_playable,
)
from unosim.strategies.heuristics import dominant_color, dominant_number, turn_for

ATTACK_CARDS = (Draw2, Draw4, Skip, ChangeColor, Reverse)


class LocalStrategy:
    """Keeps the dominant color going and saves draw cards for later.

    Answers a forced draw by stacking when possible, and attacks when the
    next player is down to one card.
    """

    def turn(self, view: PlayerView) -> Turn:
        color = dominant_color(view.hand)
        number = dominant_number(view.hand)

        def rank(card: Card) -> int:
            if isinstance(card, (Skip, Reverse)):
                return 0 if card.color == color else 1
            if isinstance(card, Number):
                if card.color != color:
                    return 4
                return 2 if card.n == number else 3
            if isinstance(card, ChangeColor):
                return 5
            if isinstance(card, Draw2):
                return 6 if card.color == color else 7
            if isinstance(card, Draw4):
                return 8
            raise TypeError(f"Unknown card: {card!r}")

        possible: List[Card] = sorted(
            (
                c
                for c in view.hand
                if is_playable(c, view.last_card, view.color, view.must_draw)
            ),
            key=rank,
        )

        priority = None
        if view.must_draw is not None:
            priority = next((c for c in possible if isinstance(c, (Draw2, Draw4))), None)
        if view.next_players and view.next_players[0] == 1:
            priority = next((c for c in possible if isinstance(c, ATTACK_CARDS)), None)

        candidate = priority or next(iter(possible), None)
        return turn_for(candidate, color) or Draw()

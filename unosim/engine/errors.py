"""Errors raised by the UNO engine.

All of them signal a broken contract (engine wiring or a strategy) and are
never recovered from inside a game.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from unosim.engine.card import Card, Color
    from unosim.engine.rules import MustDraw, Turn


class UnoError(Exception):
    """Base class for engine errors."""


class EmptyHand(UnoError):
    """A turn was requested from a player holding no cards."""


class CardNotInHand(UnoError):
    """A player tried to play a card they don't hold."""

    def __init__(self, player: str, card: "Card", hand: list["Card"]):
        self.player = player
        self.card = card
        self.hand = hand
        cards = " ".join(str(c) for c in hand)
        super().__init__(f"Player {player} doesn't have '{card}' in hand: [{cards}]")


class StrategyViolation(UnoError):
    """A strategy returned a turn the rules don't allow."""

    def __init__(
        self,
        reason: str,
        turn: "Turn",
        last_card: "Card",
        color: "Color",
        must_draw: Optional["MustDraw"],
    ):
        self.reason = reason
        self.turn = turn
        self.last_card = last_card
        self.color = color
        self.must_draw = must_draw
        super().__init__(
            f"{reason}: {turn} on '{last_card}' "
            f"(color={color.value}, must_draw={must_draw})"
        )


class EmptyDeck(UnoError):
    """draw() was called on an empty pile."""


class CardCountInvariantBroken(UnoError):
    """Cards were created or lost while applying a turn."""

    def __init__(self, total: int, expected: int):
        self.total = total
        self.expected = expected
        super().__init__(f"Cards invariant broken! Total cards = {total}, expected {expected}")

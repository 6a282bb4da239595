"""Players: hand ownership, turn validation and decision history."""

from __future__ import annotations

import random
from collections import Counter
from typing import TYPE_CHECKING, Iterator, List, Optional, Sequence, Tuple

from unosim.engine.card import Card, Color
from unosim.engine.errors import CardNotInHand, EmptyHand
from unosim.engine.game_state import HistoryEntry, PlayerView
from unosim.engine.rules import MustDraw, Play, PlayWildcard, Rotation, Turn, check_turn

if TYPE_CHECKING:
    from unosim.strategy.protocol import Strategy


class Hand:
    """Multiset of cards. Iteration follows first-insertion order of each card."""

    def __init__(self) -> None:
        self._counts: Counter = Counter()
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __contains__(self, card: object) -> bool:
        return self._counts.get(card, 0) > 0

    def __iter__(self) -> Iterator[Card]:
        for card, count in self._counts.items():
            for _ in range(count):
                yield card

    def count(self, card: Card) -> int:
        return self._counts.get(card, 0)

    def add(self, card: Card) -> None:
        self._counts[card] += 1
        self._size += 1

    def remove(self, card: Card) -> None:
        """Remove one copy of ``card``. Raises KeyError if absent."""
        if card not in self:
            raise KeyError(card)
        self._counts[card] -= 1
        if not self._counts[card]:
            del self._counts[card]
        self._size -= 1

    def snapshot(self) -> Tuple[Card, ...]:
        return tuple(self)

    def __str__(self) -> str:
        return "[" + " ".join(str(c) for c in self) + "]"


class Player:
    """A seat at the table driven by a Strategy."""

    def __init__(self, name: str, strategy: "Strategy"):
        self.name = name
        self._strategy = strategy
        self._hand = Hand()
        self._history: List[HistoryEntry] = []

    @property
    def hand(self) -> Hand:
        return self._hand

    @property
    def history(self) -> Tuple[HistoryEntry, ...]:
        return tuple(self._history)

    def turn(
        self,
        last_card: Card,
        rotation: Rotation,
        color: Color,
        must_draw: Optional[MustDraw],
        next_players: Sequence[int],
        rng: Optional[random.Random] = None,
    ) -> Turn:
        """Ask the strategy for a turn and validate it before returning."""
        if not len(self._hand):
            raise EmptyHand(f"Player {self.name} cannot play with an empty hand")
        hand = self._hand.snapshot()
        view = PlayerView(
            hand=hand,
            last_card=last_card,
            rotation=rotation,
            color=color,
            must_draw=must_draw,
            next_players=tuple(next_players),
            history=tuple(self._history),
            rng=rng or random.Random(),
        )
        turn = self._strategy.turn(view)
        check_turn(turn, hand, last_card, color, must_draw)
        if isinstance(turn, (Play, PlayWildcard)) and turn.card not in self._hand:
            raise CardNotInHand(self.name, turn.card, list(self._hand))
        self._history.append(HistoryEntry(hand=hand, turn=turn))
        return turn

    def play(self, card: Card) -> None:
        try:
            self._hand.remove(card)
        except KeyError:
            raise CardNotInHand(self.name, card, list(self._hand)) from None

    def draw(self, card: Card) -> None:
        self._hand.add(card)

    def __repr__(self) -> str:
        return f"Player({self.name!r}, {len(self._hand)} cards)"

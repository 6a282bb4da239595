"""Deck creation and shuffling."""

from __future__ import annotations

import random
from typing import Iterable, Iterator, List, Optional

from unosim.engine.card import (
    Card,
    ChangeColor,
    Color,
    Draw2,
    Draw4,
    Number,
    Reverse,
    Skip,
)
from unosim.engine.errors import EmptyDeck

DECK_SIZE = 108


class Deck:
    """A stack of cards. The top is the end of the underlying list."""

    def __init__(self, cards: Optional[Iterable[Card]] = None):
        self._cards: List[Card] = list(cards) if cards is not None else []

    @classmethod
    def standard(cls) -> "Deck":
        """Create an unshuffled standard 108-card UNO deck.

        - 4 colors x (one 0, two each of 1-9, Skip, Reverse, Draw Two): 100 cards
        - 4 Wild, 4 Wild Draw Four: 8 cards
        """
        cards: List[Card] = []
        for color in Color:
            cards.append(Number(0, color))
            for _ in range(2):
                for n in range(1, 10):
                    cards.append(Number(n, color))
                cards.append(Draw2(color))
                cards.append(Skip(color))
                cards.append(Reverse(color))
        for _ in range(4):
            cards.append(ChangeColor())
            cards.append(Draw4())
        return cls(cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        """Iterate from the top of the stack down."""
        return reversed(self._cards)

    def is_empty(self) -> bool:
        return not self._cards

    def draw(self) -> Card:
        if not self._cards:
            raise EmptyDeck("Cannot draw from an empty deck")
        return self._cards.pop()

    def push(self, card: Card) -> None:
        self._cards.append(card)

    def push_under(self, card: Card) -> None:
        self._cards.insert(0, card)

    def peek(self) -> Card:
        if not self._cards:
            raise EmptyDeck("Cannot peek at an empty deck")
        return self._cards[-1]

    def shuffle(self, rng: random.Random) -> None:
        rng.shuffle(self._cards)

    def clone(self) -> "Deck":
        return Deck(self._cards)

    def __str__(self) -> str:
        return f"{len(self)} cards: [{', '.join(str(c) for c in self)}]"


def create_deck(rng: random.Random) -> Deck:
    """Create a standard deck shuffled with ``rng``."""
    deck = Deck.standard()
    deck.shuffle(rng)
    return deck

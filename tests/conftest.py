"""Shared fixtures: scripted strategies and rigged game positions."""

import random
from collections import deque

import pytest

from unosim.engine import (
    Color,
    Deck,
    Player,
    Rotation,
    UnoGame,
)
from unosim.strategies import DumbStrategy


class ScriptedStrategy:
    """Returns queued turns, then falls back to DumbStrategy."""

    def __init__(self, *turns):
        self.turns = deque(turns)
        self.views = []

    def turn(self, view):
        self.views.append(view)
        if self.turns:
            return self.turns.popleft()
        return DumbStrategy().turn(view)


def _take(pool, card):
    pool.remove(card)
    return card


def rig_game(
    hands,
    top,
    color=None,
    must_draw=None,
    rotation=Rotation.CLOCKWISE,
    current=0,
    strategies=None,
    empty_draw_pile=False,
    names=("A", "B", "C", "D"),
):
    """Build a game whose position is fully specified.

    ``hands`` lists the cards of each seat. Every card not in a hand or on top
    of the discard pile goes to the draw pile, or under the top discard when
    ``empty_draw_pile`` is set, so the table still holds 108 cards.
    """
    strategies = strategies or [ScriptedStrategy() for _ in names]
    players = [Player(name, s) for name, s in zip(names, strategies)]
    game = UnoGame(players, rng=random.Random(0))

    pool = list(Deck.standard())
    for player, cards in zip(players, hands):
        for card in list(player.hand):
            player.play(card)
        for card in cards:
            player.draw(_take(pool, card))
    _take(pool, top)

    if empty_draw_pile:
        game._deck = Deck()
        game._discard = Deck(pool + [top])
    else:
        game._deck = Deck(pool)
        game._discard = Deck([top])
    game._color = color if color is not None else getattr(top, "color", Color.RED)
    game._must_draw = must_draw
    game._rotation = rotation
    game._current = current
    return game


@pytest.fixture
def rig():
    return rig_game


@pytest.fixture
def scripted():
    return ScriptedStrategy

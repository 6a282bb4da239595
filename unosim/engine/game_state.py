"""Game state snapshots and the per-turn view handed to strategies."""

import random
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from unosim.engine.card import Card, Color
from unosim.engine.rules import MustDraw, Rotation, Turn


@dataclass(frozen=True)
class HistoryEntry:
    """One decision of a player: the hand before the turn and the turn taken."""

    hand: Tuple[Card, ...]
    turn: Turn


@dataclass(frozen=True)
class TurnRecord:
    """One applied turn in a game."""

    player: str
    turn: Turn

    def __str__(self) -> str:
        return f"{self.player} {self.turn}"


@dataclass(frozen=True)
class PlayerView:
    """Everything a strategy may look at when deciding a turn.

    ``next_players`` holds the opponents' hand sizes in the order they will
    act. ``rng`` is the game's random source; randomized strategies draw from
    it so that a seeded game is reproducible.
    """

    hand: Tuple[Card, ...]
    last_card: Card
    rotation: Rotation
    color: Color
    must_draw: Optional[MustDraw]
    next_players: Tuple[int, ...]
    history: Tuple[HistoryEntry, ...]
    rng: random.Random


@dataclass(frozen=True)
class GameState:
    """Immutable snapshot of a running UNO game."""

    hands: Dict[str, Tuple[Card, ...]]  # player name -> cards, seat order
    draw_pile_size: int
    discard_pile_size: int
    top_discard: Card
    color: Color
    rotation: Rotation
    must_draw: Optional[MustDraw]
    current_player: str
    turn_count: int
    winner: Optional[str] = None

    @property
    def total_cards(self) -> int:
        return (
            self.draw_pile_size
            + self.discard_pile_size
            + sum(len(h) for h in self.hands.values())
        )

"""Single game runner."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Sequence

from unosim.engine import Draw, HistoryEntry, Player, TurnRecord, UnoGame

if TYPE_CHECKING:
    from unosim.strategy.protocol import Strategy


@dataclass
class GameResult:
    """Result of a completed game."""

    winner: str
    num_turns: int
    player_ids: tuple[str, ...]  # seat order
    turns: tuple[TurnRecord, ...]
    histories: dict[str, tuple[HistoryEntry, ...]]

    @property
    def losers(self) -> tuple[str, ...]:
        return tuple(pid for pid in self.player_ids if pid != self.winner)

    def draws(self, player_id: str) -> int:
        """How many times ``player_id`` chose to draw."""
        return sum(1 for entry in self.histories[player_id] if isinstance(entry.turn, Draw))


class GameRunner:
    """Runs a single UNO game to completion."""

    def __init__(
        self,
        players: Sequence[tuple[str, "Strategy"]],
        seed: Optional[int] = None,
        debug: bool = False,
    ):
        names = [name for name, _ in players]
        if len(set(names)) != len(names):
            raise ValueError(f"Player names must be unique: {names}")
        self._players = list(players)
        self._seed = seed
        self._debug = debug

    def run(self) -> GameResult:
        """Run the game and return the result."""
        players = [Player(name, strategy) for name, strategy in self._players]
        game = UnoGame(players, rng=random.Random(self._seed), debug=self._debug)
        winner = game.play()
        turns = tuple(game.turns)
        return GameResult(
            winner=winner.name,
            num_turns=len(turns),
            player_ids=tuple(p.name for p in players),
            turns=turns,
            histories={p.name: p.history for p in players},
        )

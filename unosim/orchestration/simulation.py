"""Simulation - run many games and aggregate results."""

from __future__ import annotations

import logging
import random
from collections import deque
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterator, Optional, Sequence

from unosim.orchestration.game_runner import GameResult, GameRunner
from unosim.orchestration.stats import HandStats

if TYPE_CHECKING:
    from unosim.strategy.protocol import Strategy

logger = logging.getLogger(__name__)

MAX_PENDING_PER_WORKER = 4


@dataclass
class SimulationReport:
    """Aggregated outcome of a batch of games."""

    games: int = 0
    shuffled: bool = True
    wins: dict[str, int] = field(default_factory=dict)
    total_turns: int = 0
    winner_stats: HandStats = field(default_factory=HandStats)
    losers_stats: HandStats = field(default_factory=HandStats)
    winner_draws: int = 0
    losers_draws: int = 0
    winner_was_first: int = 0
    last_was_loser: int = 0

    def add(self, result: GameResult) -> None:
        """Fold one game into the totals. Not thread-safe; call from one thread."""
        self.games += 1
        self.wins[result.winner] = self.wins.get(result.winner, 0) + 1
        self.total_turns += result.num_turns
        if result.player_ids[0] == result.winner:
            self.winner_was_first += 1
        if result.player_ids[-1] != result.winner:
            self.last_was_loser += 1

        self.winner_draws += result.draws(result.winner)
        self.winner_stats += HandStats.from_hand(result.histories[result.winner][0].hand)
        for loser in result.losers:
            history = result.histories[loser]
            if history:
                self.losers_stats += HandStats.from_hand(history[0].hand)
                self.losers_draws += result.draws(loser)

    def win_rate(self, player_id: str) -> float:
        return self.wins.get(player_id, 0) / self.games if self.games else 0.0

    def lines(self) -> list[str]:
        """Human-readable report."""
        games = self.games or 1
        num_players = len(self.wins) or 1
        num_losers = max(num_players - 1, 1)
        lines = [f"{self.games} games, shuffled={self.shuffled}"]
        for pid, w in sorted(self.wins.items(), key=lambda x: -x[1]):
            lines.append(f"{pid}: {w} wins ({w / games:.5f})")
        avg_game_turns = self.total_turns / games
        lines.append(
            f"Avg {avg_game_turns:.1f} turns in a game "
            f"({avg_game_turns / num_players:.1f} per player)"
        )
        lines.append(f"Winner: {self.winner_stats.divide(games)}")
        lines.append(f"Loser: {self.losers_stats.divide(games).divide(num_losers)}")
        lines.append(f"Winner draws: {self.winner_draws / games:.2f}")
        lines.append(f"Loser draws: {self.losers_draws / games / num_losers:.2f}")
        lines.append(
            f"Winner was first: {self.winner_was_first} games "
            f"({self.winner_was_first / games:.2f})"
        )
        lines.append(
            f"Last was loser: {self.last_was_loser} games "
            f"({self.last_was_loser / games:.2f})"
        )
        return lines


def _schedule(
    players: Sequence[tuple[str, "Strategy"]],
    games: int,
    shuffle_players: bool,
    rng: random.Random,
) -> Iterator[tuple[list[tuple[str, "Strategy"]], int]]:
    """Yield (seating, seed) for every game from one master random source."""
    for _ in range(games):
        seating = list(players)
        if shuffle_players:
            rng.shuffle(seating)
        yield seating, rng.randint(0, 2**31 - 1)


def simulate(
    players: Sequence[tuple[str, "Strategy"]],
    games: int = 1000,
    shuffle_players: bool = True,
    debug: bool = False,
    seed: Optional[int] = None,
    workers: int = 1,
) -> SimulationReport:
    """Run ``games`` independent games between the four named strategies.

    Seating (reshuffled per game when ``shuffle_players``) and per-game seeds
    are drawn from ``seed`` in the calling thread, in game order, so the report
    does not depend on ``workers``. Games are created lazily and at most
    ``workers * MAX_PENDING_PER_WORKER`` are in flight at once.

    Returns:
        SimulationReport with wins per player and hand/draw statistics.
    """
    if len(players) != 4:
        raise ValueError(f"Simulation needs exactly 4 players, got {len(players)}")
    if games < 1:
        raise ValueError("games must be positive")

    rng = random.Random(seed)
    runners = (
        GameRunner(seating, seed=game_seed, debug=debug)
        for seating, game_seed in _schedule(players, games, shuffle_players, rng)
    )
    report = SimulationReport(shuffled=shuffle_players, wins={name: 0 for name, _ in players})
    logger.info("Running %d games on %d worker(s), shuffled=%s", games, workers, shuffle_players)

    if workers > 1:
        with ThreadPoolExecutor(max_workers=workers) as executor:
            pending: deque[Future[GameResult]] = deque()
            for runner in runners:
                pending.append(executor.submit(runner.run))
                if len(pending) >= workers * MAX_PENDING_PER_WORKER:
                    report.add(pending.popleft().result())
            while pending:
                report.add(pending.popleft().result())
    else:
        for runner in runners:
            report.add(runner.run())
    return report

"""CLI entry point."""

from __future__ import annotations

from collections import Counter
from typing import Optional

import typer
from dotenv import load_dotenv

from unosim.config import SimulationConfig
from unosim.log import setup_logging

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(help="UNO strategy simulator")


def _parse_players(player_specs: str) -> list[tuple[str, "Strategy"]]:
    """Turn "local,dumb,random,local" into [("local1", ...), ..., ("local2", ...)]."""
    from unosim.strategies import STRATEGIES
    from unosim.strategy.protocol import Strategy

    kinds = [s.strip().lower() for s in player_specs.split(",") if s.strip()]
    if len(kinds) != 4:
        raise typer.BadParameter(f"Exactly 4 players are required, got {len(kinds)}.")
    seen: Counter = Counter()
    players: list[tuple[str, Strategy]] = []
    for kind in kinds:
        if kind not in STRATEGIES:
            known = ", ".join(sorted(STRATEGIES))
            raise typer.BadParameter(f"Unknown strategy: {kind}. Use one of: {known}.")
        seen[kind] += 1
        players.append((f"{kind}{seen[kind]}", STRATEGIES[kind]()))
    return players


@app.command()
def play(
    players: Optional[str] = typer.Option(
        None,
        "--players",
        "-p",
        help="Comma-separated strategies in seat order: dumb, random or local",
    ),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
    debug: bool = typer.Option(False, "--debug", "-d", help="Trace every turn"),
) -> None:
    """Run a single UNO game."""
    from unosim.orchestration.game_runner import GameRunner

    config = SimulationConfig.from_env()
    setup_logging("INFO" if debug else config.log_level)
    seating = _parse_players(players or config.players)
    runner = GameRunner(seating, seed=seed if seed is not None else config.seed, debug=debug)
    result = runner.run()
    typer.echo(f"Winner: {result.winner}")
    typer.echo(f"Turns: {result.num_turns}")


@app.command()
def simulate(
    players: Optional[str] = typer.Option(
        None,
        "--players",
        "-p",
        help="Comma-separated strategies: dumb, random or local",
    ),
    games: Optional[int] = typer.Option(None, "--games", "-g", min=1, help="Number of games"),
    shuffle: Optional[bool] = typer.Option(
        None, "--shuffle/--no-shuffle", help="Reshuffle seating before every game"
    ),
    workers: Optional[int] = typer.Option(None, "--workers", "-w", min=1, help="Worker threads"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
    debug: bool = typer.Option(False, "--debug", "-d", help="Trace every turn"),
) -> None:
    """Run many games and print win rates and hand statistics."""
    from unosim.orchestration.simulation import simulate as run_simulation

    config = SimulationConfig.from_env()
    setup_logging("INFO" if debug else config.log_level)
    report = run_simulation(
        _parse_players(players or config.players),
        games=games if games is not None else config.games,
        shuffle_players=shuffle if shuffle is not None else config.shuffle_players,
        debug=debug,
        seed=seed if seed is not None else config.seed,
        workers=workers if workers is not None else config.workers,
    )
    for line in report.lines():
        typer.echo(line)


if __name__ == "__main__":
    app()

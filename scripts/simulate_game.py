"""Simulate one traced game and a short batch with the built-in strategies."""

from unosim.log import setup_logging
from unosim.orchestration.game_runner import GameRunner
from unosim.orchestration.simulation import simulate
from unosim.strategies import DumbStrategy, LocalStrategy, RandomStrategy


def main():
    players = [
        ("local1", LocalStrategy()),
        ("dumb1", DumbStrategy()),
        ("random1", RandomStrategy()),
        ("local2", LocalStrategy()),
    ]

    setup_logging("INFO")
    result = GameRunner(players, seed=42, debug=True).run()
    print(f"Game finished! Winner: {result.winner}")
    print(f"Turns: {result.num_turns}")

    setup_logging("WARNING")
    report = simulate(players, games=1000, seed=42, workers=4)
    print("\n".join(report.lines()))


if __name__ == "__main__":
    main()

"""Game orchestration."""

from unosim.orchestration.game_runner import GameResult, GameRunner
from unosim.orchestration.simulation import SimulationReport, simulate
from unosim.orchestration.stats import HandStats

__all__ = ["GameResult", "GameRunner", "HandStats", "SimulationReport", "simulate"]

"""Built-in strategies."""

from unosim.strategies.dumb import DumbStrategy
from unosim.strategies.heuristics import dominant_color, dominant_number
from unosim.strategies.local import LocalStrategy
from unosim.strategies.random_strategy import RandomStrategy

STRATEGIES = {
    "dumb": DumbStrategy,
    "random": RandomStrategy,
    "local": LocalStrategy,
}

__all__ = [
    "DumbStrategy",
    "LocalStrategy",
    "RandomStrategy",
    "STRATEGIES",
    "dominant_color",
    "dominant_number",
]

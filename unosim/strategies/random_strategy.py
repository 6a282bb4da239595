"""Play a uniformly random legal card."""

from unosim.engine import Draw, PlayerView, Turn, is_playable
from unosim.strategies.heuristics import dominant_color, turn_for


class RandomStrategy:
    """Picks among legal cards using the game's random source."""

    def turn(self, view: PlayerView) -> Turn:
        possible = [
            c for c in view.hand
            if is_playable(c, view.last_card, view.color, view.must_draw)
        ]
        if not possible:
            return Draw()
        return turn_for(view.rng.choice(possible), dominant_color(view.hand))

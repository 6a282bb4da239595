"""Play the first legal card in hand."""

from unosim.engine import Draw, PlayerView, Turn, is_playable
from unosim.strategies.heuristics import dominant_color, turn_for


class DumbStrategy:
    def turn(self, view: PlayerView) -> Turn:
        card = next(
            (
                c
                for c in view.hand
                if is_playable(c, view.last_card, view.color, view.must_draw)
            ),
            None,
        )
        return turn_for(card, dominant_color(view.hand)) or Draw()

"""Strategy protocol - interface that every UNO strategy implements."""

from typing import Protocol

from unosim.engine import PlayerView, Turn


class Strategy(Protocol):
    """Decision function for an UNO player."""

    def turn(self, view: PlayerView) -> Turn:
        """Choose a turn given what the player can see.

        Args:
            view: The player's hand, the last played card, rotation, active
                color, pending forced draw, opponents' hand sizes in turn
                order and the player's own decision history.

        Returns:
            A legal Play, PlayWildcard or Draw. An illegal turn is a bug in
            the strategy and aborts the game with StrategyViolation.
        """
        ...

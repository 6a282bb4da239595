"""UNO game engine: setup, turn loop and effects."""

from __future__ import annotations

import logging
import random
from typing import List, Optional, Sequence

from unosim.engine.card import Card, Color, Reverse, Skip, is_colored
from unosim.engine.deck import DECK_SIZE, Deck, create_deck
from unosim.engine.errors import CardCountInvariantBroken
from unosim.engine.game_state import GameState, TurnRecord
from unosim.engine.player import Player
from unosim.engine.rules import (
    Draw,
    MustDraw,
    Play,
    PlayWildcard,
    Rotation,
    Turn,
    stack_must_draw,
)

logger = logging.getLogger(__name__)

NUM_PLAYERS = 4
HAND_SIZE = 7


class UnoGame:
    """A single four-player UNO game.

    The game is set up on construction and runs synchronously via play().
    """

    def __init__(
        self,
        players: Sequence[Player],
        rng: Optional[random.Random] = None,
        debug: bool = False,
    ):
        if len(players) != NUM_PLAYERS:
            raise ValueError("Only 4-player games are currently supported")
        self.players: List[Player] = list(players)
        self._rng = rng or random.Random()
        self._log_level = logging.INFO if debug else logging.DEBUG

        self._current = 0
        self._rotation = Rotation.CLOCKWISE
        self._must_draw: Optional[MustDraw] = None
        self._turns: List[TurnRecord] = []
        self._deck = create_deck(self._rng)
        self._discard = Deck()

        first_card = self._deck.draw()
        while not is_colored(first_card):
            self._deck.push_under(first_card)
            first_card = self._deck.draw()
        self._discard.push(first_card)
        self._color: Color = first_card.color
        for _ in range(HAND_SIZE):
            for player in self.players:
                self._give_card(player)
        logger.log(self._log_level, "First card: %s", first_card)

    @property
    def turns(self) -> List[TurnRecord]:
        return list(self._turns)

    @property
    def current_player(self) -> Player:
        return self.players[self._current]

    @property
    def winner(self) -> Optional[Player]:
        return next((p for p in self.players if not len(p.hand)), None)

    def state(self) -> GameState:
        winner = self.winner
        return GameState(
            hands={p.name: p.hand.snapshot() for p in self.players},
            draw_pile_size=len(self._deck),
            discard_pile_size=len(self._discard),
            top_discard=self._discard.peek(),
            color=self._color,
            rotation=self._rotation,
            must_draw=self._must_draw,
            current_player=self.current_player.name,
            turn_count=len(self._turns),
            winner=winner.name if winner else None,
        )

    def play(self) -> Player:
        """Run the game to completion and return the winner."""
        while self.winner is None:
            self.step()
        winner = self.winner
        logger.log(self._log_level, "%s won after %d turns", winner.name, len(self._turns))
        return winner

    def step(self) -> TurnRecord:
        """Play exactly one turn for the current player."""
        if self.winner is not None:
            raise RuntimeError(f"Game is over, {self.winner.name} already won")
        player = self.current_player
        turn = player.turn(
            last_card=self._discard.peek(),
            rotation=self._rotation,
            color=self._color,
            must_draw=self._must_draw,
            next_players=self._next_players(),
            rng=self._rng,
        )
        self._apply(player, turn)
        record = TurnRecord(player.name, turn)
        self._turns.append(record)
        self._check_card_count()
        if logger.isEnabledFor(self._log_level):
            logger.log(
                self._log_level,
                "%s (%d): %s; hand: %s deck: %d",
                player.name,
                len(player.hand),
                turn,
                player.hand,
                len(self._deck),
            )
        self._next_turn()
        return record

    def _apply(self, player: Player, turn: Turn) -> None:
        if isinstance(turn, Play):
            card = turn.card
            player.play(card)
            self._discard.push(card)
            self._color = card.color
            if isinstance(card, Reverse):
                self._rotation = self._rotation.reversed()
            if isinstance(card, Skip):
                self._next_turn()
            self._must_draw = stack_must_draw(self._must_draw, card)
        elif isinstance(turn, PlayWildcard):
            card = turn.card
            player.play(card)
            self._discard.push(card)
            self._color = turn.new_color
            self._must_draw = stack_must_draw(self._must_draw, card)
        elif isinstance(turn, Draw):
            count = self._must_draw.cards if self._must_draw else 1
            for _ in range(count):
                if self._deck.is_empty():
                    self._recycle_discard()
                self._give_card(player)
            self._must_draw = None
        else:
            raise TypeError(f"Unknown turn: {turn!r}")

    def _recycle_discard(self) -> None:
        """Shuffle all discards but the top card back into the draw pile."""
        pile = self._discard.clone()
        top = pile.draw()
        pile.shuffle(self._rng)
        logger.log(self._log_level, "[RESET] deck(%d); played(%d)", len(pile), len(self._discard))
        self._deck = pile
        self._discard = Deck([top])

    def _check_card_count(self) -> None:
        total = len(self._deck) + len(self._discard) + sum(len(p.hand) for p in self.players)
        if total != DECK_SIZE:
            raise CardCountInvariantBroken(total, DECK_SIZE)

    def _compute_next(self, index: int) -> int:
        return (index + self._rotation.value) % len(self.players)

    def _next_turn(self) -> None:
        self._current = self._compute_next(self._current)

    def _next_players(self) -> List[int]:
        """Opponents' hand sizes in the order they will act."""
        sizes = []
        i = self._compute_next(self._current)
        while i != self._current:
            sizes.append(len(self.players[i].hand))
            i = self._compute_next(i)
        return sizes

    def _give_card(self, player: Player) -> None:
        card: Card = self._deck.draw()
        player.draw(card)

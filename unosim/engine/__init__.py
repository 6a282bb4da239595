"""Game engine for UNO."""

from unosim.engine.card import (
    Card,
    ChangeColor,
    Color,
    ColoredCard,
    Draw2,
    Draw4,
    Number,
    Reverse,
    Skip,
    Wildcard,
    is_colored,
    is_wildcard,
)
from unosim.engine.deck import DECK_SIZE, Deck, create_deck
from unosim.engine.errors import (
    CardCountInvariantBroken,
    CardNotInHand,
    EmptyDeck,
    EmptyHand,
    StrategyViolation,
    UnoError,
)
from unosim.engine.game_state import GameState, HistoryEntry, PlayerView, TurnRecord
from unosim.engine.rules import (
    Draw,
    DrawFactor,
    MustDraw,
    Play,
    PlayWildcard,
    Rotation,
    Turn,
    can_draw,
    check_turn,
    is_playable,
    legal_turns,
    stack_must_draw,
)
from unosim.engine.player import Hand, Player
from unosim.engine.game import UnoGame

__all__ = [
    "Card",
    "ChangeColor",
    "Color",
    "ColoredCard",
    "Draw2",
    "Draw4",
    "Number",
    "Reverse",
    "Skip",
    "Wildcard",
    "is_colored",
    "is_wildcard",
    "DECK_SIZE",
    "Deck",
    "create_deck",
    "CardCountInvariantBroken",
    "CardNotInHand",
    "EmptyDeck",
    "EmptyHand",
    "StrategyViolation",
    "UnoError",
    "GameState",
    "HistoryEntry",
    "PlayerView",
    "TurnRecord",
    "Draw",
    "DrawFactor",
    "MustDraw",
    "Play",
    "PlayWildcard",
    "Rotation",
    "Turn",
    "can_draw",
    "check_turn",
    "is_playable",
    "legal_turns",
    "stack_must_draw",
    "Hand",
    "Player",
    "UnoGame",
]

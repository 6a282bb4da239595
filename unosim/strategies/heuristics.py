"""Hand analysis helpers shared by the built-in strategies."""

from collections import Counter
from typing import Iterable, Optional

from unosim.engine import Card, ChangeColor, Color, Draw4, Number, Play, PlayWildcard, Turn, is_colored


def dominant_color(cards: Iterable[Card]) -> Color:
    """Most frequent color among colored cards; ties go to the earlier Color."""
    counts = Counter(c.color for c in cards if is_colored(c))
    return max(Color, key=lambda color: counts[color])


def dominant_number(cards: Iterable[Card]) -> int:
    """Most frequent number among Number cards; ties go to the lower number."""
    counts = Counter(c.n for c in cards if isinstance(c, Number))
    return max(range(10), key=lambda n: counts[n])


def turn_for(card: Optional[Card], color: Color) -> Optional[Turn]:
    """Wrap a chosen card in the matching turn, using ``color`` for wildcards."""
    if card is None:
        return None
    if isinstance(card, (ChangeColor, Draw4)):
        return PlayWildcard(card, color)
    return Play(card)

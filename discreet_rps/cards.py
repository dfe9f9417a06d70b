"""
Card-related definitions for the discreet-channel rock-paper-scissors game.
"""

from enum import Enum
from typing import Union


class Card(Enum):
    """Rock-paper-scissors card states"""
    ROCK = 0
    SCISSORS = 1
    PAPER = 2

    @property
    def symbol(self) -> str:
        return CARD_SYMBOLS[self]


CARD_SYMBOLS = {
    Card.ROCK: "🪨",
    Card.SCISSORS: "✂️",
    Card.PAPER: "📄",
}


def _card_value(card: Union[Card, int]) -> int:
    if isinstance(card, Card):
        return card.value
    if card not in (0, 1, 2):
        raise ValueError(f"Card value must be 0, 1 or 2, got {card!r}")
    return card


def beats(a: Union[Card, int], b: Union[Card, int]) -> bool:
    """
    Cyclic dominance rule: rock beats scissors, scissors beats paper,
    paper beats rock.

    Card a beats card b iff (a + 1) mod 3 == b, so equal cards beat neither.

    Args:
        a: Card (or its integer value 0..2)
        b: Card (or its integer value 0..2)

    Returns:
        True if a beats b
    """
    return (_card_value(a) + 1) % 3 == _card_value(b)

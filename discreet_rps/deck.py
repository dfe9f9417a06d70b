"""
Card shuffling between the three participants.

The three cards never leave the table: shuffling only swaps cards between
seats, so the held cards stay a permutation of rock, scissors and paper.
"""

import random
from typing import Sequence, Tuple

from .cards import Card
from .players import Participant

SHUFFLE_PASSES = 99


def current_cards(participants: Sequence[Participant]) -> Tuple[Card, ...]:
    """Snapshot of the held cards in seat order."""
    return tuple(p.card for p in participants)


def shuffle_hands(participants: Sequence[Participant], rng: random.Random,
                  passes: int = SHUFFLE_PASSES) -> Tuple[Card, ...]:
    """
    Shuffle cards between participants in place.

    Each pass swaps every seat's card with the card of a random seat
    (itself included), in seat order.

    Args:
        participants: The three participants
        rng: Random source owned by the caller
        passes: Number of swap passes (default: 99)

    Returns:
        The new card assignment in seat order
    """
    count = len(participants)
    for _ in range(passes):
        for u in range(count):
            other = participants[(u + rng.randrange(count)) % count]
            participants[u].card, other.card = other.card, participants[u].card
    return current_cards(participants)


def is_full_deck(cards: Sequence[Card]) -> bool:
    """True if the cards are exactly one each of rock, scissors and paper."""
    return len(cards) == len(Card) and set(cards) == set(Card)

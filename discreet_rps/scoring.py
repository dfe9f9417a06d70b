from typing import List, Optional, Sequence

from .cards import Card, beats


def new_tallies(count: int = 3) -> List[int]:
    """Zeroed per-game win tallies, one entry per seat."""
    return [0] * count


def resolve_turn(tallies: List[int], actor: int, opponent: int, cards: Sequence[Card]) -> int:
    """
    Resolve one turn and credit its single win.

    The actor scores only if its card beats the opponent's card. Otherwise
    the opponent scores, which includes equal cards: a turn is never a draw.

    Args:
        tallies: Per-seat win tallies, updated in place
        actor: Seat index of the acting participant
        opponent: Seat index of the chosen opponent
        cards: Held cards in seat order

    Returns:
        Seat index credited with the win
    """
    if opponent == actor or not 0 <= opponent < len(tallies):
        raise ValueError(f"Invalid opponent {opponent} for actor {actor}")
    winner = actor if beats(cards[actor], cards[opponent]) else opponent
    tallies[winner] += 1
    return winner


def game_winner(tallies: Sequence[int]) -> Optional[int]:
    """
    Determine the winner of a completed game.

    Returns:
        Seat index whose tally is strictly greater than every other tally,
        or None if the game is a tie
    """
    for seat, wins in enumerate(tallies):
        if all(wins > other for i, other in enumerate(tallies) if i != seat):
            return seat
    return None

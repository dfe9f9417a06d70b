import random
from typing import Sequence, Tuple

from .cards import Card, beats
from .players import FIRST_HUMAN, SECOND_HUMAN, ROBOT, NUM_PARTICIPANTS

# -----------------------------------------------------------------------------
# Strategy interface
# -----------------------------------------------------------------------------


def other_seats(actor: int) -> Tuple[int, int]:
    """The two seats an actor can challenge, in ascending order."""
    return tuple(seat for seat in range(NUM_PARTICIPANTS) if seat != actor)


class BaseStrategy:
    """Interface for opponent-selection policies."""

    name: str = "BASE"

    def choose_opponent(self, actor: int, cards: Sequence[Card], rng: random.Random) -> int:
        """
        Pick which of the other two participants to play against.

        Args:
            actor: Seat index of the acting participant
            cards: Current held cards in seat order (after the shuffle)
            rng: Random source owned by the game

        Returns:
            Seat index of the chosen opponent (never the actor)
        """
        raise NotImplementedError

    def __repr__(self):
        return f"{type(self).__name__}()"


# -----------------------------------------------------------------------------
# Policies
# -----------------------------------------------------------------------------


class RandomChoice(BaseStrategy):
    """Picks one of the two other participants with equal probability."""

    name = "RANDOM"

    def choose_opponent(self, actor: int, cards: Sequence[Card], rng: random.Random) -> int:
        return rng.choice(other_seats(actor))


class GuessingHuman(RandomChoice):
    """
    Second human: no discreet channel, so every turn is a coin flip between
    the first human and the robot. Wins half of its own turns at best.
    """

    name = "GUESSING_HUMAN"


class HintedHuman(BaseStrategy):
    """
    First human: the robot discreetly shows its card before this turn.

    - If our card beats the robot's, challenge the robot.
    - Otherwise the robot's card beats ours, so the second human holds the
      card we beat; challenge the second human.
    Either way the turn is won.
    """

    name = "HINTED_HUMAN"

    def choose_opponent(self, actor: int, cards: Sequence[Card], rng: random.Random) -> int:
        if beats(cards[FIRST_HUMAN], cards[ROBOT]):
            return ROBOT
        return SECOND_HUMAN


class AskingRobot(BaseStrategy):
    """
    Robot: asks the first human for their card before this turn.

    Whether the robot wins or loses against the first human, it always plays
    the first human; it only turns to the second human when both hold the
    same card.
    """

    name = "ASKING_ROBOT"

    def choose_opponent(self, actor: int, cards: Sequence[Card], rng: random.Random) -> int:
        if beats(cards[FIRST_HUMAN], cards[ROBOT]):
            return FIRST_HUMAN
        if beats(cards[ROBOT], cards[FIRST_HUMAN]):
            return FIRST_HUMAN
        return SECOND_HUMAN


def build_policies(all_random: bool = False) -> Tuple[BaseStrategy, BaseStrategy, BaseStrategy]:
    """
    Policies for seats 0, 1, 2.

    Args:
        all_random: If True, the first human and the robot lose their discreet
            channel and guess like the second human

    Returns:
        Tuple of three policies indexed by seat
    """
    if all_random:
        return (RandomChoice(), GuessingHuman(), RandomChoice())
    return (HintedHuman(), GuessingHuman(), AskingRobot())

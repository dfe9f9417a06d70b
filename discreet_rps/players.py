from typing import List, Optional, Sequence

from .cards import Card
from .exceptions import InvalidConfiguration

NUM_PARTICIPANTS = 3

FIRST_HUMAN = 0
SECOND_HUMAN = 1
ROBOT = 2

DEFAULT_NAMES = ("Ade", "Cat", "Bot")


class Participant:
    """
    One of the three seats at the table.

    The sequence index fixes both the turn order and the role (first human,
    second human, robot). Only the held card changes during a run.
    """

    def __init__(self, name: str, seq: int, card: Card) -> None:
        self._name = name
        self._seq = seq
        self.card = card

    @property
    def name(self) -> str:
        return self._name

    @property
    def seq(self) -> int:
        return self._seq

    def __repr__(self):
        return f"Participant({self._name!r}, seq={self._seq}, card={self.card.name})"


def make_participants(names: Optional[Sequence[str]] = None) -> List[Participant]:
    """
    Build the fixed three-seat roster.

    Seat i starts with Card(i), so the held cards begin as a permutation of
    all three cards.

    Args:
        names: Optional participant names in seat order (defaults to Ade, Cat, Bot)

    Returns:
        List of three Participants indexed by seat
    """
    if names is None:
        names = DEFAULT_NAMES
    names = list(names)
    if len(names) != NUM_PARTICIPANTS:
        raise InvalidConfiguration(
            f"exactly {NUM_PARTICIPANTS} participants are required, got {len(names)}",
            config_key="names"
        )
    if len(set(names)) != NUM_PARTICIPANTS:
        raise InvalidConfiguration(f"participant names must be unique: {names}", config_key="names")
    return [Participant(name, seq, Card(seq)) for seq, name in enumerate(names)]


def validate_participants(participants: Sequence[Participant]) -> None:
    """Check that the roster holds seats 0, 1, 2 in order."""
    if len(participants) != NUM_PARTICIPANTS:
        raise InvalidConfiguration(
            f"exactly {NUM_PARTICIPANTS} participants are required, got {len(participants)}",
            config_key="participants"
        )
    for index, participant in enumerate(participants):
        if participant.seq != index:
            raise InvalidConfiguration(
                f"participant {participant.name!r} has index {participant.seq}, expected {index}",
                config_key="participants"
            )

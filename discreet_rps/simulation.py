"""
Monte Carlo simulation of the discreet-channel rock-paper-scissors card game.

Two humans and a robot take turns. On each turn the cards are reshuffled,
the acting participant challenges one of the other two, and the winner of
the card comparison scores a point. After a fixed number of turns the
participant with the strictly highest score wins the game; otherwise the
game is a tie.

Key design:
- One explicitly owned random source per run (no module-level random state)
- One policy object per seat, chosen once at construction
- An observer callback receives every turn; the default discards it
"""

import logging
import random
import time
from dataclasses import dataclass, asdict, replace
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, Union

import numpy as np

from .cards import Card
from .deck import SHUFFLE_PASSES, shuffle_hands
from .exceptions import InvalidConfiguration
from .players import NUM_PARTICIPANTS, Participant, make_participants, validate_participants
from .scoring import game_winner, new_tallies, resolve_turn
from .strategies import BaseStrategy, build_policies

logger = logging.getLogger("discreet_rps.Simulation")

DEFAULT_ROUNDS_PER_GAME = 9


# ============================================================================
# Configuration
# ============================================================================


def _is_int(value) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


@dataclass
class GameConfig:
    """
    Run configuration.

    rounds_per_game counts individual turns, not full rotations: the default
    of 9 turns is three turns for each participant.
    """
    total_games: int = 1000000
    rounds_per_game: int = DEFAULT_ROUNDS_PER_GAME
    all_random: bool = False
    random_seed: Optional[int] = None
    shuffle_passes: int = SHUFFLE_PASSES

    def validate(self) -> "GameConfig":
        """Raise InvalidConfiguration for any out-of-range field."""
        for key in ("total_games", "rounds_per_game", "shuffle_passes"):
            value = getattr(self, key)
            if not _is_int(value) or value <= 0:
                raise InvalidConfiguration(f"{key} must be a positive integer, got {value!r}", config_key=key)
        if not isinstance(self.all_random, bool):
            raise InvalidConfiguration(f"all_random must be a boolean, got {self.all_random!r}",
                                       config_key="all_random")
        if self.random_seed is not None and (not _is_int(self.random_seed) or self.random_seed < 0):
            raise InvalidConfiguration(f"random_seed must be a non-negative integer, got {self.random_seed!r}",
                                       config_key="random_seed")
        return self

    @classmethod
    def from_dict(cls, cfg: Dict[str, Any]) -> "GameConfig":
        """
        Build a config from a plain dict (e.g. the YAML config file).

        Missing keys take their defaults; unknown keys are ignored.
        """
        defaults = cls()
        return cls(
            total_games=cfg.get("total_games", defaults.total_games),
            rounds_per_game=cfg.get("rounds_per_game", defaults.rounds_per_game),
            all_random=cfg.get("all_random", defaults.all_random),
            random_seed=cfg.get("random_seed", defaults.random_seed),
            shuffle_passes=cfg.get("shuffle_passes", defaults.shuffle_passes),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _as_config(cfg: Union[GameConfig, Dict[str, Any]]) -> GameConfig:
    if isinstance(cfg, dict):
        cfg = GameConfig.from_dict(cfg)
    return cfg.validate()


# ============================================================================
# Game loop
# ============================================================================


class GameState(Enum):
    RESET = "reset"
    IN_PROGRESS = "in_progress"
    COMPLETE = "complete"


@dataclass(frozen=True)
class TurnEvent:
    """Observation of one resolved turn; never fed back into the game."""
    round_index: int
    actor: int
    cards: Tuple[Card, ...]
    opponent: int
    credited: int
    tallies: Tuple[int, ...]


TraceFn = Callable[[TurnEvent], None]


def _discard_trace(event: TurnEvent) -> None:
    pass


class DiscreetRpsGame:
    """A single game: a fixed number of turns taken in seat order 0, 1, 2, 0, ..."""

    def __init__(self, cfg: GameConfig, rng: random.Random,
                 participants: Optional[List[Participant]] = None,
                 policies: Optional[Sequence[BaseStrategy]] = None,
                 trace: Optional[TraceFn] = None):
        self.cfg = cfg
        self.rng = rng
        self.participants = participants if participants is not None else make_participants()
        validate_participants(self.participants)
        self.policies = tuple(policies) if policies is not None else build_policies(cfg.all_random)
        if len(self.policies) != NUM_PARTICIPANTS:
            raise InvalidConfiguration(
                f"exactly {NUM_PARTICIPANTS} policies are required, got {len(self.policies)}",
                config_key="policies"
            )
        self.trace = trace or _discard_trace
        self.state = GameState.RESET
        self.tallies = new_tallies(NUM_PARTICIPANTS)
        self.turn = 0

    def initialize_game(self):
        """Zero the tallies and deal a fresh starting assignment."""
        self.state = GameState.RESET
        self.tallies = new_tallies(NUM_PARTICIPANTS)
        self.turn = 0
        shuffle_hands(self.participants, self.rng, self.cfg.shuffle_passes)
        self.state = GameState.IN_PROGRESS

    def play_turn(self) -> TurnEvent:
        """Reshuffle, let the current participant pick an opponent and score the turn."""
        if self.state is not GameState.IN_PROGRESS:
            raise RuntimeError(f"Cannot play a turn in state {self.state.value}")

        cards = shuffle_hands(self.participants, self.rng, self.cfg.shuffle_passes)
        actor = self.turn % NUM_PARTICIPANTS
        opponent = self.policies[actor].choose_opponent(actor, cards, self.rng)
        credited = resolve_turn(self.tallies, actor, opponent, cards)

        event = TurnEvent(
            round_index=self.turn,
            actor=actor,
            cards=cards,
            opponent=opponent,
            credited=credited,
            tallies=tuple(self.tallies),
        )
        self.trace(event)

        self.turn += 1
        if self.turn >= self.cfg.rounds_per_game:
            self.state = GameState.COMPLETE
        return event

    def play(self) -> Dict[str, Any]:
        """
        Play a full game from a fresh reset.

        Returns:
            Dictionary with final tallies and winner (None for a tie)
        """
        self.initialize_game()
        while self.state is GameState.IN_PROGRESS:
            self.play_turn()
        return {
            "tallies": list(self.tallies),
            "winner": game_winner(self.tallies)
        }


def simulate_game(cfg: Union[GameConfig, Dict[str, Any]], rng: Optional[random.Random] = None,
                  trace: Optional[TraceFn] = None) -> Dict[str, Any]:
    """Play one game with the default roster."""
    cfg = _as_config(cfg)
    if rng is None:
        rng = random.Random(cfg.random_seed)
    return DiscreetRpsGame(cfg, rng, trace=trace).play()


# ============================================================================
# Statistics aggregation
# ============================================================================


def run_simulation(cfg: Union[GameConfig, Dict[str, Any]], trace: Optional[TraceFn] = None,
                   names: Optional[Sequence[str]] = None) -> Dict[str, Any]:
    """
    Run many independent games and count how often each participant wins.

    Args:
        cfg: GameConfig or config dictionary
        trace: Optional per-turn observer
        names: Optional participant names in seat order

    Returns:
        Dictionary with games_simulated, wins_per_participant, ties, names,
        the seed actually used and the validated config
    """
    cfg = _as_config(cfg)
    participants = make_participants(names)

    seed = cfg.random_seed if cfg.random_seed is not None else time.time_ns()
    rng = random.Random(seed)
    game = DiscreetRpsGame(cfg, rng, participants=participants, trace=trace)

    logger.info("Simulating %d games of %d turns (all_random=%s, seed=%d)",
                cfg.total_games, cfg.rounds_per_game, cfg.all_random, seed)
    start = time.perf_counter()

    wins = [0] * NUM_PARTICIPANTS
    ties = 0
    for game_index in range(cfg.total_games):
        result = game.play()
        if result["winner"] is None:
            ties += 1
        else:
            wins[result["winner"]] += 1
        logger.debug("Game %d: tallies=%s winner=%s", game_index, result["tallies"], result["winner"])

    logger.info("Finished %d games in %.2fs: wins=%s ties=%d",
                cfg.total_games, time.perf_counter() - start, wins, ties)

    return {
        "games_simulated": cfg.total_games,
        "wins_per_participant": wins,
        "ties": ties,
        "names": [p.name for p in participants],
        "seed": seed,
        "config": cfg.to_dict()
    }


def run_batched(cfg: Union[GameConfig, Dict[str, Any]], num_batches: int,
                names: Optional[Sequence[str]] = None, trace: Optional[TraceFn] = None) -> Dict[str, Any]:
    """
    Split a run into independently seeded batches and sum their tallies.

    Batch seeds are spawned from the run seed, so a fixed random_seed gives
    a reproducible result. Partial tallies are only combined once every
    batch has finished.

    Args:
        cfg: GameConfig or config dictionary
        num_batches: Number of batches (games are split as evenly as possible)
        names: Optional participant names in seat order
        trace: Optional per-turn observer, shared by all batches

    Returns:
        Same structure as run_simulation, plus the number of batches
    """
    cfg = _as_config(cfg)
    if not _is_int(num_batches) or num_batches <= 0:
        raise InvalidConfiguration(f"num_batches must be a positive integer, got {num_batches!r}",
                                   config_key="num_batches")

    seed = cfg.random_seed if cfg.random_seed is not None else time.time_ns()
    children = np.random.SeedSequence(seed).spawn(num_batches)
    base, extra = divmod(cfg.total_games, num_batches)

    partials = []
    for index, child in enumerate(children):
        batch_games = base + (1 if index < extra else 0)
        if batch_games == 0:
            continue
        batch_cfg = replace(cfg, total_games=batch_games, random_seed=int(child.generate_state(1)[0]))
        partials.append(run_simulation(batch_cfg, trace=trace, names=names))

    wins = np.sum([p["wins_per_participant"] for p in partials], axis=0)
    ties = sum(p["ties"] for p in partials)

    return {
        "games_simulated": cfg.total_games,
        "wins_per_participant": [int(w) for w in wins],
        "ties": int(ties),
        "names": partials[0]["names"],
        "seed": seed,
        "config": cfg.to_dict(),
        "batches": len(partials)
    }

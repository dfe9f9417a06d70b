"""Tests for discreet_rps.strategies module."""

import itertools
import random
from discreet_rps.cards import Card, beats
from discreet_rps.strategies import (
    AskingRobot,
    GuessingHuman,
    HintedHuman,
    RandomChoice,
    build_policies,
    other_seats
)

ALL_DEALS = list(itertools.permutations(Card))


def test_other_seats():
    assert other_seats(0) == (1, 2)
    assert other_seats(1) == (0, 2)
    assert other_seats(2) == (0, 1)


def test_hinted_human_always_wins_its_turn():
    """Knowing the robot's card, the first human can always pick a beatable opponent."""
    policy = HintedHuman()
    rng = random.Random(0)
    for cards in ALL_DEALS:
        opponent = policy.choose_opponent(0, cards, rng)
        assert opponent in (1, 2)
        assert beats(cards[0], cards[opponent])


def test_hinted_human_prefers_robot_when_it_can_beat_it():
    policy = HintedHuman()
    cards = (Card.ROCK, Card.PAPER, Card.SCISSORS)
    assert policy.choose_opponent(0, cards, random.Random(0)) == 2
    cards = (Card.ROCK, Card.SCISSORS, Card.PAPER)
    assert policy.choose_opponent(0, cards, random.Random(0)) == 1


def test_asking_robot_always_plays_first_human_on_distinct_cards():
    policy = AskingRobot()
    rng = random.Random(0)
    for cards in ALL_DEALS:
        assert policy.choose_opponent(2, cards, rng) == 0


def test_asking_robot_turns_to_second_human_on_equal_cards():
    cards = (Card.PAPER, Card.ROCK, Card.PAPER)
    assert AskingRobot().choose_opponent(2, cards, random.Random(0)) == 1


def test_random_policies_pick_both_other_seats():
    rng = random.Random(11)
    cards = ALL_DEALS[0]
    for policy in (RandomChoice(), GuessingHuman()):
        for actor in range(3):
            picks = [policy.choose_opponent(actor, cards, rng) for _ in range(200)]
            assert actor not in picks
            assert set(picks) == set(other_seats(actor))


def test_guessing_human_is_close_to_fifty_fifty():
    rng = random.Random(5)
    picks = [GuessingHuman().choose_opponent(1, ALL_DEALS[0], rng) for _ in range(4000)]
    assert 0.45 < picks.count(0) / len(picks) < 0.55


def test_build_policies():
    hinted = build_policies(all_random=False)
    assert [type(p) for p in hinted] == [HintedHuman, GuessingHuman, AskingRobot]
    uniform = build_policies(all_random=True)
    assert [type(p) for p in uniform] == [RandomChoice, GuessingHuman, RandomChoice]

"""Statistical properties of long runs and the statistics helpers."""

import numpy as np
import pytest
from discreet_rps.simulation import GameConfig, run_simulation
from discreet_rps.utils import compare_modes, compute_win_shares, outcome_counts

# Exact outcome probabilities of a 9-turn game with both discreet channels
# open and a uniform shuffle: 449/512, 0, 25/512, 38/512.
HINTED_FIRST_HUMAN = 449 / 512
HINTED_ROBOT = 25 / 512
HINTED_TIES = 38 / 512


@pytest.fixture(scope="module")
def hinted_result():
    return run_simulation(GameConfig(total_games=4000, random_seed=12345, shuffle_passes=20))


@pytest.fixture(scope="module")
def random_result():
    return run_simulation(GameConfig(total_games=4000, random_seed=54321, shuffle_passes=20, all_random=True))


def test_disadvantage_property(hinted_result):
    n = hinted_result["games_simulated"]
    wins = np.array(hinted_result["wins_per_participant"]) / n
    ties = hinted_result["ties"] / n
    assert wins[0] == pytest.approx(HINTED_FIRST_HUMAN, abs=0.03)
    assert wins[1] == 0
    assert wins[2] == pytest.approx(HINTED_ROBOT, abs=0.02)
    assert ties == pytest.approx(HINTED_TIES, abs=0.025)


def test_symmetry_property(random_result):
    n = random_result["games_simulated"]
    wins = np.array(random_result["wins_per_participant"]) / n
    ties = random_result["ties"] / n
    assert np.ptp(wins) < 0.06
    for share in wins:
        assert share == pytest.approx((1 - ties) / 3, abs=0.04)


def test_compute_win_shares(hinted_result):
    shares = compute_win_shares(hinted_result)
    assert list(shares) == ["Ade", "Cat", "Bot", "Ties"]
    assert sum(s["share"] for s in shares.values()) == pytest.approx(1.0)
    for s in shares.values():
        assert s["ci_lower"] <= s["share"] <= s["ci_upper"]
    assert shares["Cat"]["count"] == 0
    assert shares["Cat"]["ci_lower"] == 0


def test_compare_modes_detects_information_advantage(hinted_result, random_result):
    comparison = compare_modes(hinted_result, random_result)
    assert comparison["p_value"] < 1e-6
    assert comparison["labels"] == ["Ade", "Cat", "Bot", "Ties"]
    # The first human gains from the discreet channel, the second human loses
    assert comparison["difference"][0] > 0.4
    assert comparison["difference"][1] < 0


def test_compare_modes_identical_runs():
    result = {"games_simulated": 100, "wins_per_participant": [40, 20, 30], "ties": 10,
              "names": ["Ade", "Cat", "Bot"]}
    comparison = compare_modes(result, dict(result))
    assert comparison["chi2"] == pytest.approx(0.0)
    assert comparison["p_value"] == pytest.approx(1.0)
    assert np.allclose(comparison["difference"], 0.0)


def test_outcome_counts():
    result = {"games_simulated": 10, "wins_per_participant": [5, 0, 3], "ties": 2}
    assert list(outcome_counts(result)) == [5, 0, 3, 2]

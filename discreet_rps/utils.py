from typing import Dict, List, Union, Any
import numpy as np
from scipy import stats


def outcome_counts(result: Dict[str, Any]) -> np.ndarray:
    """Per-game outcome counts as [wins_0, wins_1, wins_2, ties]."""
    return np.array(list(result["wins_per_participant"]) + [result["ties"]], dtype=np.int64)


def outcome_labels(result: Dict[str, Any]) -> List[str]:
    return list(result.get("names", ["P0", "P1", "P2"])) + ["Ties"]


def compute_win_shares(result: Dict[str, Any], confidence: float = 0.95) -> Dict[str, Dict[str, Union[float, int]]]:
    """
    Compute the share of games won by each participant and the tie share.

    Each share comes with an exact (Clopper-Pearson) binomial confidence
    interval.

    Returns:
        Dictionary keyed by participant name (plus "Ties") with count, share,
        ci_lower and ci_upper
    """
    n = result["games_simulated"]
    shares = {}
    for label, count in zip(outcome_labels(result), outcome_counts(result)):
        ci = stats.binomtest(int(count), n).proportion_ci(confidence_level=confidence, method="exact")
        shares[label] = {
            "count": int(count),
            "share": count / n,
            "ci_lower": ci.low,
            "ci_upper": ci.high
        }
    return shares


def compare_modes(result_a: Dict[str, Any], result_b: Dict[str, Any]) -> Dict[str, Any]:
    """
    Compare the outcome distributions of two runs (e.g. hinted vs all-random)
    using a chi-square test of homogeneity.

    Outcomes that never occur in either run are left out of the test.

    Returns:
        Dictionary with chi2, p_value, dof and per-outcome share differences (a - b)
    """
    counts_a = outcome_counts(result_a)
    counts_b = outcome_counts(result_b)
    table = np.vstack([counts_a, counts_b])
    observed = table[:, table.sum(axis=0) > 0]

    chi2, p_value, dof, _ = stats.chi2_contingency(observed)

    shares_a = counts_a / counts_a.sum()
    shares_b = counts_b / counts_b.sum()
    return {
        "chi2": chi2,
        "p_value": p_value,
        "dof": dof,
        "labels": outcome_labels(result_a),
        "difference": shares_a - shares_b
    }

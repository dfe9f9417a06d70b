import os
import sys
import yaml
import numpy as np
from scipy import stats

# Add project root to Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from discreet_rps.simulation import GameConfig, run_simulation
from discreet_rps.plotting import ensure_dir, save_line_plot


def sweep_rounds(cfg, rounds_values, num_games, all_random=False):
    """
    Run one simulation per turns-per-game setting.

    Returns:
        Dictionary mapping outcome label to an array of shares (one per setting)
    """
    names = list(cfg.get("names") or ["Ade", "Cat", "Bot"])
    shares = {label: [] for label in names + ["Ties"]}
    for rounds in rounds_values:
        run_cfg = GameConfig.from_dict({
            **cfg,
            "total_games": num_games,
            "rounds_per_game": rounds,
            "all_random": all_random
        })
        result = run_simulation(run_cfg, names=names)
        n = result["games_simulated"]
        for label, count in zip(names, result["wins_per_participant"]):
            shares[label].append(count / n)
        shares["Ties"].append(result["ties"] / n)
    return {label: np.array(values) for label, values in shares.items()}


def main():
    config_path = os.path.join(project_root, "configs", "base.yaml")
    with open(config_path) as f:
        cfg = yaml.safe_load(f)

    exp_cfg = cfg.get("experiments", {})
    rounds_values = exp_cfg.get("rounds_sweep")
    if not rounds_values:
        raise ValueError("experiments.rounds_sweep must be specified in config")
    num_games = exp_cfg.get("games_per_setting")
    if num_games is None:
        raise ValueError("experiments.games_per_setting must be specified in config")

    print("=" * 60)
    print("Experiment 2: Effect of game length on the outcome distribution")
    print("=" * 60)
    print(f"\nTurns per game: {rounds_values}")
    print(f"Games per setting: {num_games}\n")

    plot_dir = os.path.join(project_root, "plots", "experiment_2")
    ensure_dir(plot_dir)

    for all_random in (False, True):
        mode = "all_random" if all_random else "discreet"
        shares = sweep_rounds(cfg, rounds_values, num_games, all_random=all_random)

        print(f"\n{'All-random' if all_random else 'Discreet channel'} mode:")
        header = "  Turns " + "".join(f"{label:>9}" for label in shares)
        print(header)
        for i, rounds in enumerate(rounds_values):
            row = "".join(f"{values[i]:>9.4f}" for values in shares.values())
            print(f"  {rounds:>5} {row}")

        # Trend of the tie rate with game length
        slope, intercept, r_value, p_value, std_err = stats.linregress(rounds_values, shares["Ties"])
        print(f"  Tie-rate slope per turn: {slope:+.5f} (r^2={r_value ** 2:.3f}, p={p_value:.4g})")

        save_line_plot(
            rounds_values,
            shares,
            f"Outcome Shares vs Turns per Game ({mode})",
            "Turns per game",
            "Share of games",
            os.path.join(plot_dir, f"shares_vs_turns_{mode}.png")
        )

    print(f"\nPlots saved to: {plot_dir}")


if __name__ == "__main__":
    main()

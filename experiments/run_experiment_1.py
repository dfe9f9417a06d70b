import os
import sys
import yaml
import numpy as np

# Add project root to Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from discreet_rps.simulation import GameConfig, run_simulation
from discreet_rps.plotting import ensure_dir, save_outcome_plot
from discreet_rps.utils import compare_modes, compute_win_shares


def build_configs(cfg, num_games):
    """Same rules and seed for both modes; only the discreet channels differ."""
    base = GameConfig.from_dict({**cfg, "total_games": num_games}).validate()
    hinted = GameConfig(**{**base.to_dict(), "all_random": False})
    uniform = GameConfig(**{**base.to_dict(), "all_random": True})
    return hinted, uniform


def print_shares(title, result):
    print(f"\n{title}:")
    for label, stats in compute_win_shares(result).items():
        print(f"  {label:<5} Share: {stats['share']:.4f}  "
              f"(95% CI {stats['ci_lower']:.4f} - {stats['ci_upper']:.4f})")


def main():
    config_path = os.path.join(project_root, "configs", "base.yaml")
    with open(config_path) as f:
        cfg = yaml.safe_load(f)

    num_games = cfg.get("experiments", {}).get("games_per_mode")
    if num_games is None:
        raise ValueError("experiments.games_per_mode must be specified in config")
    names = cfg.get("names")

    print("=" * 60)
    print("Experiment 1: Discreet channel vs all-random play")
    print("=" * 60)

    hinted_cfg, random_cfg = build_configs(cfg, num_games)
    print(f"\nRunning {num_games} games per mode, {hinted_cfg.rounds_per_game} turns per game")
    print(f"Total games: {2 * num_games}")
    print(f"Total turns: {2 * num_games * hinted_cfg.rounds_per_game}\n")

    hinted = run_simulation(hinted_cfg, names=names)
    uniform = run_simulation(random_cfg, names=names)

    print_shares("Discreet channel Results", hinted)
    print_shares("All-random Results", uniform)

    comparison = compare_modes(hinted, uniform)

    print("\n" + "-" * 60)
    print("OUTCOME COMPARISON:")
    print("-" * 60)
    for label, diff in zip(comparison["labels"], comparison["difference"]):
        print(f"{label} Difference (Discreet - Random): {diff:+.4f}")
    print(f"chi2: {comparison['chi2']:.4f}")
    print(f"dof: {comparison['dof']}")
    print(f"p-value: {comparison['p_value']:.6f}")

    # Spread of the three win shares; zero means perfectly even
    for title, result in (("Discreet", hinted), ("Random", uniform)):
        shares = np.array(result["wins_per_participant"]) / result["games_simulated"]
        print(f"{title} win-share spread (max - min): {np.ptp(shares):.4f}")

    print("\n" + "=" * 60)

    plot_dir = os.path.join(project_root, "plots", "experiment_1")
    ensure_dir(plot_dir)
    save_outcome_plot(
        hinted,
        "Outcome Distribution: Discreet Channel vs All Random",
        os.path.join(plot_dir, "outcome_comparison.png"),
        result2=uniform,
        label1="Discreet channel",
        label2="All random"
    )
    save_outcome_plot(
        hinted,
        "Outcome Distribution: Discreet Channel",
        os.path.join(plot_dir, "outcome_discreet.png")
    )

    print(f"\nPlots saved to: {plot_dir}")


if __name__ == "__main__":
    main()

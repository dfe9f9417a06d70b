import sys
import os
import argparse
import contextlib
import logging
import yaml
from discreet_rps.exceptions import InvalidConfiguration
from discreet_rps.logger import setup_logger_from_config
from discreet_rps.players import DEFAULT_NAMES
from discreet_rps.plotting import ensure_dir, save_outcome_plot
from discreet_rps.simulation import GameConfig, run_batched, run_simulation
from discreet_rps.utils import compare_modes, compute_win_shares

PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))
DEFAULT_CONFIG = os.path.join(PROJECT_ROOT, "configs", "base.yaml")

logger = logging.getLogger("discreet_rps.Main")


def load_config(path):
    """Load the YAML config; a missing default config yields an empty dict."""
    if path == DEFAULT_CONFIG and not os.path.exists(path):
        return {}
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def build_config(cfg, args):
    """Merge command-line overrides into the YAML config."""
    overrides = {
        "total_games": args.games,
        "rounds_per_game": args.rounds,
        "random_seed": args.seed,
        "shuffle_passes": args.passes,
    }
    merged = dict(cfg)
    merged.update({k: v for k, v in overrides.items() if v is not None})
    if args.all_random:
        merged["all_random"] = True
    return GameConfig.from_dict(merged).validate()


def print_turn(names):
    """Per-turn trace printer in the classic one-line format."""
    def trace(event):
        cards = " ".join(card.symbol for card in event.cards)
        tallies = " ".join(str(t) for t in event.tallies)
        print(f"[shuffled: {cards}] #{event.round_index}, {names[event.actor]}"
              f" -> {names[event.opponent]}: "
              f"{event.cards[event.actor].symbol} vs {event.cards[event.opponent].symbol}"
              f"\t\t{tallies}")
    return trace


def print_results(result, title):
    print("=" * 60)
    print(title)
    print("=" * 60)
    config = result["config"]
    print(f"Games: {result['games_simulated']}  Turns per game: {config['rounds_per_game']}  "
          f"All random: {config['all_random']}  Seed: {result['seed']}")
    print("\nTotal wins:")
    for label, stats in compute_win_shares(result).items():
        print(f"  {label:<6} {stats['count']:>10}  {stats['share']:.4f}  "
              f"(95% CI {stats['ci_lower']:.4f} - {stats['ci_upper']:.4f})")


def run_single(cfg, args, names):
    trace = print_turn(names) if args.verbose else None
    if args.batches != 1:
        result = run_batched(cfg, args.batches, names=names, trace=trace)
    else:
        result = run_simulation(cfg, trace=trace, names=names)
    mode = "all random" if cfg.all_random else "discreet channel"
    print_results(result, f"Discreet RPS simulation ({mode})")
    if args.plot:
        ensure_dir(args.plot)
        outfile = os.path.join(args.plot, "outcome_distribution.png")
        save_outcome_plot(result, f"Outcome distribution ({mode})", outfile)
        print(f"\nPlot saved to: {outfile}")
    return result


def run_comparison(cfg, args, names):
    trace = print_turn(names) if args.verbose else None
    hinted_cfg = GameConfig(**{**cfg.to_dict(), "all_random": False})
    random_cfg = GameConfig(**{**cfg.to_dict(), "all_random": True})
    hinted = run_simulation(hinted_cfg, trace=trace, names=names)
    uniform = run_simulation(random_cfg, trace=trace, names=names)
    print_results(hinted, "Discreet channel")
    print()
    print_results(uniform, "All random")

    comparison = compare_modes(hinted, uniform)
    print("\n" + "-" * 60)
    print("MODE COMPARISON (discreet - random):")
    print("-" * 60)
    for label, diff in zip(comparison["labels"], comparison["difference"]):
        print(f"  {label:<6} {diff:+.4f}")
    print(f"chi2: {comparison['chi2']:.2f}  dof: {comparison['dof']}  p-value: {comparison['p_value']:.6g}")

    if args.plot:
        ensure_dir(args.plot)
        outfile = os.path.join(args.plot, "mode_comparison.png")
        save_outcome_plot(hinted, "Outcome distribution by mode", outfile, result2=uniform,
                          label1="Discreet channel", label2="All random")
        print(f"\nPlot saved to: {outfile}")
    return comparison


def run_experiment(number):
    """Run one of the scripts under experiments/."""
    if number == 1:
        import experiments.run_experiment_1 as exp
    else:
        import experiments.run_experiment_2_rounds as exp
    exp.main()


class TeeStream:
    """Helper that duplicates stdout writes to multiple streams."""

    def __init__(self, *streams):
        self.streams = streams

    def write(self, data):
        for stream in self.streams:
            stream.write(data)

    def flush(self):
        for stream in self.streams:
            stream.flush()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Discreet-channel rock-paper-scissors simulation")
    parser.add_argument("--config", default=DEFAULT_CONFIG, help="YAML config file")
    parser.add_argument("--games", type=int, help="Total games to simulate")
    parser.add_argument("--rounds", type=int, help="Turns per game")
    parser.add_argument("--all-random", action="store_true",
                        help="Disable the discreet channels (everyone guesses)")
    parser.add_argument("--seed", type=int, help="Random seed")
    parser.add_argument("--passes", type=int, help="Shuffle passes before each turn")
    parser.add_argument("--batches", type=int, default=1, help="Split the run into independently seeded batches")
    parser.add_argument("--verbose", action="store_true", help="Print every turn")
    parser.add_argument("--experiment", type=int, choices=[1, 2], help="Run experiment 1 or 2")
    parser.add_argument("--compare", action="store_true", help="Run both modes and compare them")
    parser.add_argument("--plot", metavar="DIR", help="Save plots to this directory")
    parser.add_argument("--output", metavar="FILE", help="Also write the report to this file")
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING, ERROR")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    try:
        cfg_dict = load_config(args.config)
    except (OSError, yaml.YAMLError) as e:
        print(f"Error: cannot read config {args.config}: {e}", file=sys.stderr)
        return 2
    if not isinstance(cfg_dict, dict):
        print(f"Error: config {args.config} must be a mapping of settings", file=sys.stderr)
        return 2

    log_cfg = dict(cfg_dict.get("logging") or {})
    if args.log_level:
        log_cfg["level"] = args.log_level
    setup_logger_from_config(log_cfg)

    if args.experiment:
        run_experiment(args.experiment)
        return 0

    names = list(cfg_dict.get("names") or DEFAULT_NAMES)
    try:
        cfg = build_config(cfg_dict, args)
        func = run_comparison if args.compare else run_single
        if args.output:
            with open(args.output, "w", encoding="utf-8") as outfile:
                with contextlib.redirect_stdout(TeeStream(sys.stdout, outfile)):
                    func(cfg, args, names)
        else:
            func(cfg, args, names)
    except InvalidConfiguration as e:
        logger.error("Invalid configuration: %s", e.message)
        print(f"Error: {e.message}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
Plotting utilities for the rock-paper-scissors Monte-Carlo experiments.

All plots are saved as PNG files (dpi=200) in non-interactive mode.
"""

import os
import matplotlib
matplotlib.use('Agg')  # Non-interactive backend
import matplotlib.pyplot as plt
import numpy as np


def ensure_dir(path):
    """Ensure directory exists, create if it doesn't."""
    os.makedirs(path, exist_ok=True)


def save_bar_plot(labels, values, title, outfile, ylabel="Value", color=None, values2=None,
                  label1=None, label2=None):
    """
    Save a bar chart, optionally with a second series side by side.

    Args:
        labels: X-axis labels
        values: Y-axis values
        title: Plot title
        outfile: Output file path
        ylabel: Y-axis label
        color: Bar color (optional)
        values2: Optional second series (grouped bars)
        label1: Legend label for the first series
        label2: Legend label for the second series
    """
    plt.figure(figsize=(8, 6))
    x = np.arange(len(labels))
    width = 0.4 if values2 is not None else 0.8
    offset = width / 2 if values2 is not None else 0

    series = [(values, x - offset, label1, color)]
    if values2 is not None:
        series.append((values2, x + offset, label2, None))

    for vals, positions, label, bar_color in series:
        bars = plt.bar(positions, vals, width=width, color=bar_color, alpha=0.7,
                       edgecolor='black', linewidth=1.5, label=label)
        # Add value labels on bars
        for bar in bars:
            height = bar.get_height()
            plt.text(bar.get_x() + bar.get_width()/2., height,
                     f'{height:.3f}',
                     ha='center', va='bottom', fontsize=10)

    plt.xticks(x, labels)
    plt.xlabel('Outcome', fontsize=12)
    plt.ylabel(ylabel, fontsize=12)
    plt.title(title, fontsize=14, fontweight='bold')
    plt.grid(True, alpha=0.3, axis='y')
    if label1 or label2:
        plt.legend()
    plt.tight_layout()
    plt.savefig(outfile, dpi=200, bbox_inches='tight')
    plt.close()


def save_line_plot(x, series, title, xlabel, ylabel, outfile):
    """
    Save a line plot with one line per named series.

    Args:
        x: X-axis values
        series: Dict mapping line label to Y-axis values
        title: Plot title
        xlabel: X-axis label
        ylabel: Y-axis label
        outfile: Output file path
    """
    plt.figure(figsize=(8, 6))
    markers = ['o', 's', '^', 'D']
    for i, (label, y) in enumerate(series.items()):
        plt.plot(x, y, marker=markers[i % len(markers)], linewidth=2, markersize=6, label=label)

    plt.xlabel(xlabel, fontsize=12)
    plt.ylabel(ylabel, fontsize=12)
    plt.title(title, fontsize=14, fontweight='bold')
    plt.grid(True, alpha=0.3)
    plt.legend()
    plt.tight_layout()
    plt.savefig(outfile, dpi=200, bbox_inches='tight')
    plt.close()


def save_outcome_plot(result, title, outfile, result2=None, label1=None, label2=None):
    """Bar chart of win/tie shares for one run, or two runs side by side."""
    names = list(result["names"]) + ["Ties"]
    shares = _shares(result)
    shares2 = _shares(result2) if result2 is not None else None
    save_bar_plot(names, shares, title, outfile, ylabel="Share of games",
                  values2=shares2, label1=label1, label2=label2)


def _shares(result):
    counts = np.array(list(result["wins_per_participant"]) + [result["ties"]], dtype=float)
    return counts / result["games_simulated"]

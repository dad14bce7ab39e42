"""Plotting utilities for profiling reports."""

from pathlib import Path

import matplotlib.pyplot as plt
import seaborn as sns

from .report import ReportRow


def setup_style():
    """Set up consistent plot style."""
    sns.set_theme(style="whitegrid", font_scale=1.1)
    plt.rcParams["figure.figsize"] = (10, 6)
    plt.rcParams["figure.dpi"] = 100


def _finish(fig, save_path: Path | str | None):
    plt.tight_layout()
    if save_path:
        fig.savefig(save_path, bbox_inches="tight")
        print(f"Saved: {save_path}")
    else:
        plt.show()
    plt.close(fig)


def plot_label_totals(
    rows: list[ReportRow],
    save_path: Path | str | None = None,
    title: str | None = None,
):
    """Bar chart of total time per label, annotated with percent of run.

    Args:
        rows: Report rows from TimingRegistry.stop().
        save_path: Path to save figure. If None, shows interactively.
        title: Plot title.
    """
    setup_style()
    fig, ax = plt.subplots()

    labels = [r.label for r in rows]
    totals_ms = [r.stats.total / 1000 for r in rows]
    bars = ax.bar(labels, totals_ms, color="steelblue")
    ax.set_ylabel("Total time (ms)")
    ax.set_title(title or "Time per Label")

    for bar, r in zip(bars, rows):
        ax.text(bar.get_x() + bar.get_width() / 2, bar.get_height(),
                f"{r.percent:.1f}%", ha="center", va="bottom", fontsize=9)

    plt.xticks(rotation=30, ha="right")
    _finish(fig, save_path)


def plot_label_spread(
    rows: list[ReportRow],
    save_path: Path | str | None = None,
    title: str | None = None,
):
    """Mean call time per label with stdev error bars and min/max markers.

    Args:
        rows: Report rows from TimingRegistry.stop().
        save_path: Path to save figure.
        title: Plot title.
    """
    setup_style()
    fig, ax = plt.subplots()

    for r in rows:
        st = r.stats
        ax.errorbar(
            r.label, st.mean,
            yerr=st.stdev,
            fmt="o", capsize=5, capthick=2, markersize=8,
        )
        ax.scatter([r.label, r.label], [st.min, st.max], marker="_", s=200, color="gray")

    ax.set_ylabel("Call time (us)")
    ax.set_title(title or "Call Time Spread per Label")

    plt.xticks(rotation=30, ha="right")
    _finish(fig, save_path)

"""Final execution report: one fixed-width row per label."""

import sys
from dataclasses import dataclass
from typing import Mapping, Sequence, TextIO

from .metrics import SeriesStats, compute_stats, percent_of, relative_stdev

INDEX_WIDTH = 6
LABEL_WIDTH = 25
CALLS_WIDTH = 8
NUM_WIDTH = 16

NUMERIC_COLUMNS = ("total time", "percent", "mean", "min", "max", "stdev", "relative")


@dataclass
class ReportRow:
    """One line of the report."""

    index: int
    label: str
    stats: SeriesStats
    percent: float
    relative: float


def build_rows(series_map: Mapping[str, Sequence[int]], elapsed: int) -> list[ReportRow]:
    """Compute a report row per label, in the mapping's order.

    Args:
        series_map: label -> durations (microseconds).
        elapsed: Total run time in microseconds.

    Returns:
        Rows indexed 0..k-1.
    """
    rows = []
    for index, (label, series) in enumerate(series_map.items()):
        stats = compute_stats(series)
        rows.append(ReportRow(
            index=index,
            label=label,
            stats=stats,
            percent=percent_of(stats.total, elapsed),
            relative=relative_stdev(stats),
        ))
    return rows


def format_header() -> str:
    head = f"{'#No':<{INDEX_WIDTH}}{'function':<{LABEL_WIDTH}}{'calls':>{CALLS_WIDTH}}"
    return head + "".join(f"{name:>{NUM_WIDTH}}" for name in NUMERIC_COLUMNS)


def format_row(row: ReportRow) -> str:
    st = row.stats
    values = (st.total, row.percent, st.mean, st.min, st.max, st.stdev, row.relative)
    head = f"{row.index:<{INDEX_WIDTH}}{row.label:<{LABEL_WIDTH}}{st.count:>{CALLS_WIDTH}}"
    return head + "".join(f"{v:>{NUM_WIDTH}.2f}" for v in values)


def format_report(rows: Sequence[ReportRow], elapsed: int, rss_bytes: int | None = None) -> str:
    """Render the full report as text.

    Args:
        rows: Output of build_rows().
        elapsed: Total run time in microseconds.
        rss_bytes: Process memory to show in the title line, if any.

    Returns:
        Title line, column header and one line per row, newline-terminated.
    """
    title = f"# Final execution report: total time = {elapsed} us"
    if rss_bytes is not None:
        title += f", rss = {rss_bytes / 1024:.1f} KB"
    lines = [title, format_header()]
    lines.extend(format_row(r) for r in rows)
    return "\n".join(lines) + "\n"


def print_report(
    rows: Sequence[ReportRow],
    elapsed: int,
    rss_bytes: int | None = None,
    stream: TextIO | None = None,
) -> None:
    """Write the report to stream (stdout by default)."""
    stream = stream or sys.stdout
    stream.write(format_report(rows, elapsed, rss_bytes))
    stream.flush()

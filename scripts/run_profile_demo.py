#!/usr/bin/env python
"""Profile a set of numpy workloads and print the execution report."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import argparse
import json
import logging
from concurrent.futures import ThreadPoolExecutor, as_completed

import numpy as np
from tqdm import tqdm

from scopeprof.config import ProfilerConfig
from scopeprof.core.scope import timed
from scopeprof.core.session import profile_run
from scopeprof.evaluation.plotting import plot_label_totals, plot_label_spread
from scopeprof.utils.timer import timer


def build_workloads(registry, size: int, seed: int):
    """Return instrumented workload callables bound to registry."""
    rng = np.random.default_rng(seed)
    matrix = rng.standard_normal((size, size)).astype(np.float32)
    values = rng.standard_normal(size * size)

    @timed(registry)
    def matmul():
        return matrix @ matrix.T

    @timed(registry)
    def sort():
        return np.sort(values)

    @timed(registry, label="svd")
    def decompose():
        return np.linalg.svd(matrix, compute_uv=False)

    # Recursive: every level records its own sample under the same label.
    @timed(registry)
    def fib(n: int) -> int:
        return n if n < 2 else fib(n - 1) + fib(n - 2)

    return [matmul, sort, decompose, lambda: fib(10)]


def main():
    parser = argparse.ArgumentParser(description="Run instrumented workloads and report timings")
    parser.add_argument("--threads", type=int, default=4, help="Worker threads")
    parser.add_argument("--iterations", type=int, default=50, help="Calls per workload per thread")
    parser.add_argument("--size", type=int, default=128, help="Matrix side length")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument("--output-dir", type=str, default=None, help="Write JSON and plots here")
    parser.add_argument("--disable", action="store_true", help="Run with instrumentation off")
    parser.add_argument("--no-memory", action="store_true", help="Omit RSS from the report")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = ProfilerConfig(enabled=not args.disable, include_memory=not args.no_memory)

    with profile_run(config) as registry:
        workloads = build_workloads(registry, args.size, args.seed)

        def worker():
            with registry.scope("worker"):
                for _ in range(args.iterations):
                    for fn in workloads:
                        fn()

        with timer() as t_run, ThreadPoolExecutor(max_workers=args.threads) as pool:
            futures = [pool.submit(worker) for _ in range(args.threads)]
            for f in tqdm(as_completed(futures), total=len(futures), desc="Workers"):
                f.result()
        print(f"Workers finished in {t_run.seconds:.3f}s")

    rows = registry.report_rows
    if not args.output_dir or not rows:
        return

    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    rows_data = []
    for r in rows:
        rows_data.append({
            "index": r.index,
            "label": r.label,
            "calls": r.stats.count,
            "total_us": r.stats.total,
            "percent": r.percent,
            "mean_us": r.stats.mean,
            "min_us": r.stats.min,
            "max_us": r.stats.max,
            "stdev_us": r.stats.stdev,
            "relative": r.relative,
        })

    json_path = output_dir / "profile_report.json"
    with open(json_path, "w") as f:
        json.dump(rows_data, f, indent=2)
    print(f"\nReport saved to {json_path}")

    plot_label_totals(rows, save_path=output_dir / "label_totals.png")
    plot_label_spread(rows, save_path=output_dir / "label_spread.png")


if __name__ == "__main__":
    main()

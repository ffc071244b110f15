"""Profile permutation sampling across (n, alpha) combinations.

Measures wall-clock time and peak memory of
``generate_esf_permutation`` (one full permutation) and of the
vectorised ``sample_cycle_counts`` (cycle counts only) over a grid of
sizes and parameters.  Both should scale linearly in n.

Usage::

    python benchmarks/profile_sampling.py          # full grid
    python benchmarks/profile_sampling.py --quick  # reduced grid for smoke test

Outputs:
    benchmarks/results/sampling_profile.csv
"""

from __future__ import annotations

import argparse
import platform
import sys
import time
import tracemalloc
from pathlib import Path

import numpy as np
import pandas as pd

# Ensure the package is importable when running from the repo root.
sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))
from esf_permutations import (  # noqa: E402
    expected_cycle_count,
    generate_esf_permutation,
    sample_cycle_counts,
)

# ------------------------------------------------------------------ #
# Configuration
# ------------------------------------------------------------------ #

N_VALUES_FULL = [10, 100, 1_000, 10_000, 100_000]
N_VALUES_QUICK = [10, 100, 1_000]

ALPHAS = [0.1, 1.0, 10.0]

BATCH = 1_000
REPEATS = 3
SEED_BASE = 42

RESULTS_DIR = Path(__file__).resolve().parent / "results"


# ------------------------------------------------------------------ #
# Benchmark helpers
# ------------------------------------------------------------------ #


def _timed(fn, *args, **kwargs) -> tuple[float, int, object]:
    """Return (elapsed seconds, peak traced bytes, result) for one call."""
    tracemalloc.start()
    t0 = time.perf_counter()
    result = fn(*args, **kwargs)
    elapsed = time.perf_counter() - t0
    _, peak_bytes = tracemalloc.get_traced_memory()
    tracemalloc.stop()
    return elapsed, peak_bytes, result


def _benchmark_one(n: int, alpha: float, seed: int) -> dict:
    """Run a single (n, alpha) benchmark and return metrics."""
    perm_time, perm_peak, perm = _timed(
        generate_esf_permutation, n, alpha, random_state=seed
    )
    batch_time, batch_peak, counts = _timed(
        sample_cycle_counts, n, alpha, BATCH, random_state=seed
    )
    return {
        "n": n,
        "alpha": alpha,
        "perm_time_s": perm_time,
        "perm_peak_MB": perm_peak / (1024 * 1024),
        "perm_cycles": perm.n_cycles,
        "batch_time_s": batch_time,
        "batch_peak_MB": batch_peak / (1024 * 1024),
        "batch_mean_cycles": float(np.mean(counts)),
        "expected_cycles": expected_cycle_count(n, alpha),
    }


def run_grid(n_values: list[int], repeats: int = REPEATS) -> pd.DataFrame:
    """Run the benchmark grid and return one row per (n, alpha)."""
    rows: list[dict] = []
    total = len(n_values) * len(ALPHAS)
    done = 0

    for n in n_values:
        for alpha in ALPHAS:
            runs = [_benchmark_one(n, alpha, SEED_BASE + r) for r in range(repeats)]
            row = dict(runs[-1])
            row["perm_time_s"] = float(np.median([r["perm_time_s"] for r in runs]))
            row["batch_time_s"] = float(np.median([r["batch_time_s"] for r in runs]))
            rows.append(row)
            done += 1
            print(
                f"  [{done:>3}/{total}] n={n:<7} alpha={alpha:<5} "
                f"perm={row['perm_time_s']:.4f}s batch={row['batch_time_s']:.4f}s"
            )

    return pd.DataFrame(rows)


def main() -> None:
    parser = argparse.ArgumentParser(description="Profile ESF permutation sampling")
    parser.add_argument(
        "--quick",
        action="store_true",
        help="Run a reduced grid for quick smoke testing",
    )
    args = parser.parse_args()

    n_values = N_VALUES_QUICK if args.quick else N_VALUES_FULL

    print("=" * 60)
    print("ESF Sampling Profile")
    print("=" * 60)
    print(f"  Platform:    {platform.platform()}")
    print(f"  Python:      {platform.python_version()}")
    print(f"  NumPy:       {np.__version__}")
    print(f"  n values:    {n_values}")
    print(f"  alphas:      {ALPHAS}")
    print(f"  Batch:       {BATCH}")
    print(f"  Repeats:     {REPEATS}")
    print()

    print("Running benchmarks...")
    df = run_grid(n_values, repeats=REPEATS)

    RESULTS_DIR.mkdir(parents=True, exist_ok=True)
    csv_path = RESULTS_DIR / "sampling_profile.csv"
    df.to_csv(csv_path, index=False)
    print(f"\nSaved results to {csv_path}")

    print("\n" + "=" * 60)
    print("Summary")
    print("=" * 60)
    print(
        df[
            [
                "n",
                "alpha",
                "perm_time_s",
                "batch_time_s",
                "batch_mean_cycles",
                "expected_cycles",
            ]
        ].to_string(index=False)
    )


if __name__ == "__main__":
    main()

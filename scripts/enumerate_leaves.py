"""Classify every possible first-ball leave and summarise the splits.

Walks all combinations of 2–9 standing pins, runs each through the same
pipeline as the CLI, and prints how many leaves of each size are splits.

Usage:
    python scripts/enumerate_leaves.py
    python scripts/enumerate_leaves.py --csv leaves.csv
"""

from __future__ import annotations

import argparse
import csv
from collections import Counter
from itertools import combinations
from pathlib import Path

from bowling_split.constants import MAX_REMAINED, MIN_REMAINED, NUM_PINS
from bowling_split.pipeline import FrameResult, evaluate


def enumerate_leaves() -> list[FrameResult]:
    """Judge every leave whose size falls through to the column scan."""
    results: list[FrameResult] = []
    for size in range(MIN_REMAINED + 1, MAX_REMAINED):
        for leave in combinations(range(1, NUM_PINS + 1), size):
            results.append(evaluate([str(p) for p in leave]))
    return results


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Classify every possible leave of 2–9 standing pins."
    )
    p.add_argument(
        "--csv", type=Path, default=None, help="Write one row per leave to this CSV."
    )
    return p.parse_args()


def main() -> None:
    args = parse_args()
    results = enumerate_leaves()

    totals: Counter[int] = Counter()
    splits: Counter[int] = Counter()
    for r in results:
        totals[len(r.pins)] += 1
        splits[len(r.pins)] += int(r.is_split)

    print(f"{'pins':>4}  {'leaves':>6}  {'splits':>6}")
    for size in sorted(totals):
        print(f"{size:>4}  {totals[size]:>6}  {splits[size]:>6}")
    print(f"\nTotal: {sum(splits.values())} splits in {len(results)} leaves")

    if args.csv is not None:
        args.csv.parent.mkdir(parents=True, exist_ok=True)
        with open(args.csv, "w", newline="") as f:
            writer = csv.writer(f)
            writer.writerow(["pins", "columns", "outcome"])
            for r in results:
                writer.writerow([" ".join(r.pins), r.columns or "", r.outcome.name])
        print(f"Saved to {args.csv}")


if __name__ == "__main__":
    main()

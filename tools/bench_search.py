"""
Benchmark script comparing search strategies on random grids.
Checks every strategy agrees on each target and reports timings.

Usage:
    python tools/bench_search.py
    python tools/bench_search.py --rows 8 --cols 8 --alphabet ABCD --trials 50
"""

import sys
import argparse
from pathlib import Path

import numpy as np

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from katas.pathfinder import Grid, create_strategy, get_strategy_names, SearchContext


def random_grid(rng: np.random.Generator, rows: int, cols: int, alphabet: str) -> Grid:
    """Fill a grid with letters drawn uniformly from alphabet."""
    letters = rng.choice(list(alphabet), size=(rows, cols))
    return Grid.from_rows(["".join(row) for row in letters])


def random_target(rng: np.random.Generator, alphabet: str, length: int) -> str:
    """Draw a target word from the same alphabet."""
    return "".join(rng.choice(list(alphabet), size=length))


def run(rows: int, cols: int, alphabet: str, trials: int, length: int, seed: int) -> int:
    """Run the benchmark. Returns number of disagreements."""
    rng = np.random.default_rng(seed)
    names = get_strategy_names()
    timings = {name: [] for name in names}
    found_count = 0
    disagreements = 0

    print(f"\n{'='*60}")
    print(f"Benchmark: {trials} trials on {rows}x{cols} grids, alphabet '{alphabet}', length {length}")
    print(f"{'='*60}")

    for trial in range(trials):
        grid = random_grid(rng, rows, cols, alphabet)
        target = tuple(random_target(rng, alphabet, length))

        outcomes = {}
        for name in names:
            result = create_strategy(name).search(SearchContext(grid=grid, target=target))
            timings[name].append(result.metrics.computation_time_ms)
            outcomes[name] = result.path

        if len(set(outcomes.values())) != 1:
            disagreements += 1
            print(f"  Trial {trial}: strategies disagree on '{''.join(target)}'")
            print(grid)
        elif next(iter(outcomes.values())) is not None:
            found_count += 1

    print(f"\nFound in {found_count}/{trials} trials")
    for name in names:
        times = np.array(timings[name])
        print(f"  {name:<10} mean={times.mean():.3f}ms  p95={np.percentile(times, 95):.3f}ms  max={times.max():.3f}ms")

    if disagreements:
        print(f"\n[FAIL] {disagreements} disagreements")
    else:
        print("\n[PASS] All strategies agree")
    return disagreements


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Compare search strategies on random grids")
    parser.add_argument("--rows", type=int, default=6)
    parser.add_argument("--cols", type=int, default=6)
    parser.add_argument("--alphabet", default="ABCDE")
    parser.add_argument("--trials", type=int, default=100)
    parser.add_argument("--length", type=int, default=6)
    parser.add_argument("--seed", type=int, default=0)
    return parser.parse_args()


if __name__ == "__main__":
    args = parse_args()
    sys.exit(1 if run(args.rows, args.cols, args.alphabet, args.trials, args.length, args.seed) else 0)

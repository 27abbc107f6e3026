"""Sample simplex noise at random points and report the extremes seen."""

from __future__ import annotations

import argparse
import random
from typing import Iterator, Optional, Sequence

from .noise import simplex2d


def _samples(rng: random.Random, count: int) -> Iterator[tuple[float, float, float]]:
    for _ in range(count):
        x, y = rng.random() * 10000.0, rng.random() * 10000.0
        yield x, y, simplex2d(x, y)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--samples", type=int, default=200, help="number of points to sample")
    parser.add_argument("--seed", type=int, default=None, help="seed for the random points")
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    highest = float("-inf")
    lowest = float("inf")
    for x, y, value in _samples(rng, args.samples):
        print(f"{x}, {y}: {value}")
        highest = max(highest, value)
        lowest = min(lowest, value)

    print(f"Max val was: {highest} and min val was: {lowest}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
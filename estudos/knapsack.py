"""Santa's sack: choose gifts of greatest sentimental value within a weight limit.

Every subset of gifts is tried. Subsets are visited with the first gift
taken before it is left out; among subsets of equal value the one visited
last wins.
"""

from __future__ import annotations

import argparse
import random
import sys
import time
from dataclasses import dataclass
from itertools import compress, product
from typing import Iterator, Optional, Sequence, TextIO


@dataclass(frozen=True)
class Selection:
    """The chosen gifts as 0/1 flags, with their total value and weight."""

    chosen: tuple[int, ...]
    value: int
    weight: int


def best_selection(values: Sequence[int], weights: Sequence[int], capacity: int) -> Selection:
    """The subset of greatest value whose weight does not exceed ``capacity``.

    When no subset fits, every flag is 1 and value and weight are 0.
    """
    if len(values) != len(weights):
        raise ValueError("values and weights must have the same length")
    best = Selection(tuple(1 for _ in values), 0, 0)
    for flags in product((1, 0), repeat=len(values)):
        value = sum(compress(values, flags))
        weight = sum(compress(weights, flags))
        if value >= best.value and weight <= capacity:
            best = Selection(flags, value, weight)
    return best


def random_gifts(count: int, rng: random.Random) -> tuple[list[int], list[int]]:
    """Random values in 1..20 and weights in 1..15 for ``count`` gifts."""
    values = [1 + rng.randrange(20) for _ in range(count)]
    weights = [1 + rng.randrange(15) for _ in range(count)]
    return values, weights


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def main(argv: Optional[list[str]] = None) -> int:
    """Read the gift count and sack capacity, then print the best choice."""
    parser = argparse.ArgumentParser(prog="noel", description="Choose gifts for the sack.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the random gifts")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)
    tokens = _tokens(sys.stdin)
    try:
        print("Digite a quantidade de presentes:", flush=True)
        count = int(next(tokens))
        print("Digite peso maximo do saco do papai noel:", flush=True)
        capacity = int(next(tokens))
    except (StopIteration, ValueError):
        print("error: expected two integers", file=sys.stderr)
        return 1

    start = time.process_time()
    values, weights = random_gifts(count, rng)
    print("\n")
    selection = best_selection(values, weights, capacity)
    print()
    print(f"Peso total dos presentes: {selection.weight}")
    print(f"Valor sentimental dos presentes: {selection.value}")
    print("Vetor com os presentes que devem ser escolhidos")
    print("".join(f"{flag} " for flag in selection.chosen))
    print()
    elapsed = time.process_time() - start
    print(f"\nTempo total:{elapsed:f}")
    return 0
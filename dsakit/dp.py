"""Dynamic-programming solutions to classic counting and optimisation problems."""

from __future__ import annotations

import argparse
import math
import sys
from functools import lru_cache
from typing import Optional, Sequence

MOD = 1_000_000_007


def fibonacci(n: int) -> int:
    """The n-th Fibonacci number, with fibonacci(0) == 0 and fibonacci(1) == 1."""
    if n < 0:
        raise ValueError("n must be non-negative")
    previous, current = 0, 1
    for _ in range(n):
        previous, current = current, previous + current
    return previous


def min_steps_to_one(n: int) -> int:
    """Fewest steps (subtract 1, halve, or divide by 3) that take n down to 1."""
    if n < 1:
        raise ValueError("n must be at least 1")
    steps = [0] * (n + 1)
    for i in range(2, n + 1):
        best = steps[i - 1] + 1
        if i % 2 == 0:
            best = min(best, steps[i // 2] + 1)
        if i % 3 == 0:
            best = min(best, steps[i // 3] + 1)
        steps[i] = best
    return steps[n]


def staircase(n: int) -> int:
    """Ways to climb n stairs taking 1, 2 or 3 at a time, modulo 10**9 + 7."""
    if n < 0:
        return 0
    ways = [1, 1, 2]
    if n < len(ways):
        return ways[n]
    a, b, c = ways
    for _ in range(3, n + 1):
        a, b, c = b, c, (a + b + c) % MOD
    return c


def min_square_count(n: int) -> int:
    """Fewest perfect squares that add up to n."""
    if n < 0:
        raise ValueError("n must be non-negative")
    counts = [0] * (n + 1)
    for j in range(1, n + 1):
        counts[j] = 1 + min(counts[j - i * i] for i in range(1, math.isqrt(j) + 1))
    return counts[n]


def balanced_bt_count(h: int) -> int:
    """Number of balanced binary trees of height h, modulo 10**9 + 7."""
    if h < 0:
        raise ValueError("height must be non-negative")
    shorter, taller = 1, 1
    for _ in range(2, h + 1):
        shorter, taller = taller, (taller * taller + 2 * taller * shorter) % MOD
    return taller


def min_cost_path(grid: Sequence[Sequence[int]]) -> int:
    """Cheapest path cost from top-left to bottom-right moving right, down or diagonally."""
    rows = [list(row) for row in grid]
    if not rows or not rows[0]:
        raise ValueError("grid must be non-empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("grid rows must all have the same length")

    below: Optional[list[int]] = None
    for row in reversed(rows):
        current = [0] * width
        for j in range(width - 1, -1, -1):
            options = []
            if j + 1 < width:
                options.append(current[j + 1])
            if below is not None:
                options.append(below[j])
                if j + 1 < width:
                    options.append(below[j + 1])
            current[j] = row[j] + (min(options) if options else 0)
        below = current
    assert below is not None
    return below[0]


def lcs(s: str, t: str) -> int:
    """Length of the longest common subsequence of s and t."""
    previous = [0] * (len(t) + 1)
    for ch in s:
        current = [0]
        for j, other in enumerate(t, start=1):
            if ch == other:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(previous[j], current[j - 1]))
        previous = current
    return previous[-1]


def edit_distance(s: str, t: str) -> int:
    """Fewest insertions, deletions and replacements turning s into t."""
    previous = list(range(len(t) + 1))
    for i, ch in enumerate(s, start=1):
        current = [i]
        for j, other in enumerate(t, start=1):
            if ch == other:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(current[j - 1], previous[j], previous[j - 1]))
        previous = current
    return previous[-1]


def knapsack(weights: Sequence[int], values: Sequence[int], max_weight: int) -> int:
    """Greatest total value of items whose total weight fits within max_weight."""
    weights, values = list(weights), list(values)
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if max_weight < 0:
        raise ValueError("max_weight must be non-negative")

    best = [0] * (max_weight + 1)
    for weight, value in zip(reversed(weights), reversed(values)):
        updated = [0] * (max_weight + 1)
        for capacity in range(1, max_weight + 1):
            skip = best[capacity]
            if weight <= capacity:
                updated[capacity] = max(skip, best[capacity - weight] + value)
            else:
                updated[capacity] = skip
        best = updated
    return best[max_weight]


def max_money_looted(houses: Sequence[int]) -> int:
    """Largest sum from houses when no two adjacent houses may both be looted."""
    houses = list(houses)
    if not houses:
        return 0
    two_back, one_back = 0, houses[0]
    for amount in houses[1:]:
        two_back, one_back = one_back, max(two_back + amount, one_back)
    return one_back


def longest_increasing_subsequence(values: Sequence) -> int:
    """Length of the longest strictly increasing subsequence."""
    values = list(values)
    lengths: list[int] = []
    for i, value in enumerate(values):
        lengths.append(
            1 + max((lengths[j] for j in range(i) if values[j] < value), default=0)
        )
    return max(lengths, default=0)


def count_power_sums(a: int, b: int) -> int:
    """Ways to write a as a sum of distinct positive integers each raised to the power b."""
    if b < 1:
        raise ValueError("exponent must be at least 1")
    if a < 0:
        return 0

    @lru_cache(maxsize=None)
    def ways(remaining: int, smallest: int) -> int:
        if remaining == 0:
            return 1
        total = 0
        base = smallest
        while base**b <= remaining:
            total += ways(remaining - base**b, base + 1)
            base += 1
        return total

    return ways(a, 1)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the longest common subsequence length of two strings."""
    parser = argparse.ArgumentParser(
        description="Length of the longest common subsequence of two strings."
    )
    parser.add_argument(
        "strings", nargs="*", help="the two strings; read from standard input if omitted"
    )
    args = parser.parse_args(argv)
    words = args.strings or sys.stdin.read().split()
    if len(words) < 2:
        parser.error("two strings are required")
    print(lcs(words[0], words[1]))
    return 0
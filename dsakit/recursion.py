"""Recursive solutions to string, array and puzzle problems."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Iterator, Sequence


def check_ab(s: str) -> bool:
    """True if s follows the a/bb grammar.

    The string starts with 'a'; every 'a' is followed by nothing, an 'a' or
    "bb"; every "bb" is followed by nothing or an 'a'. The empty string passes.
    """
    i = 0
    while i < len(s):
        if s[i] != "a":
            return False
        if i + 1 == len(s) or s[i + 1] == "a":
            i += 1
        elif s.startswith("bb", i + 1):
            i += 3
        else:
            return False
    return True


def staircase_ways(n: int) -> int:
    """Ways to run up n steps hopping 1, 2 or 3 steps at a time."""
    if n < 0:
        return 0
    ways = [1, 0, 0]  # ways(n), ways(n-1), ways(n-2), starting from n == 0
    for _ in range(n):
        ways = [sum(ways), ways[0], ways[1]]
    return ways[0]


def binary_search(values: Sequence, element: Any) -> int:
    """Index of element in the ascending sequence values, or -1 if absent.

    When a range has an even length the first of the two middle items is probed.
    """
    low, high = 0, len(values)
    while low < high:
        mid = low + (high - low - 1) // 2
        if values[mid] == element:
            return mid
        if element > values[mid]:
            low = mid + 1
        else:
            high = mid
    return -1


def subsets(values: Sequence) -> list[list]:
    """Every subset of values, each keeping the input order."""
    result: list[list] = [[]]
    for value in values:
        result += [subset + [value] for subset in result]
    return result


def subsets_summing_to(values: Sequence, k: Any) -> list[list]:
    """Subsets of values (in input order) whose elements add up to k."""
    values = list(values)

    def walk(index: int, chosen: list) -> Iterator[list]:
        if index == len(values):
            if sum(chosen) == k:
                yield chosen
            return
        yield from walk(index + 1, chosen)
        yield from walk(index + 1, chosen + [values[index]])

    return list(walk(0, []))


def _letter(number: int) -> str:
    return chr(ord("a") + number - 1)


def codes(digits: str) -> list[str]:
    """All letter strings that encode to digits with a=1, b=2, ..., z=26."""
    if any(ch not in "123456789" for ch in digits):
        raise ValueError("digits must contain only the characters 1 to 9")

    @lru_cache(maxsize=None)
    def decode(start: int) -> tuple[str, ...]:
        if start == len(digits):
            return ("",)
        first = _letter(int(digits[start]))
        found = [first + rest for rest in decode(start + 1)]
        if start + 1 < len(digits):
            number = int(digits[start : start + 2])
            if number <= 26:
                pair = _letter(number)
                found.extend(pair + rest for rest in decode(start + 2))
        return tuple(found)

    return list(decode(0))


def permutations(s: str) -> list[str]:
    """All permutations of s; repeated characters give repeated permutations."""
    if len(s) <= 1:
        return [s]
    rest = permutations(s[1:])
    return [p[:i] + s[0] + p[i:] for i in range(len(s)) for p in rest]


def tower_of_hanoi(
    n: int, source: Any = "a", auxiliary: Any = "b", destination: Any = "c"
) -> list[tuple[Any, Any]]:
    """Moves (from, to) that carry n discs from source to destination."""
    if n < 0:
        raise ValueError("number of discs must be non-negative")

    def moves(count: int, src: Any, aux: Any, dst: Any) -> Iterator[tuple[Any, Any]]:
        if count == 0:
            return
        yield from moves(count - 1, src, dst, aux)
        yield (src, dst)
        yield from moves(count - 1, aux, src, dst)

    return list(moves(n, source, auxiliary, destination))
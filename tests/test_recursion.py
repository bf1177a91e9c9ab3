import itertools

import pytest

from dsakit.recursion import (
    binary_search,
    check_ab,
    codes,
    permutations,
    staircase_ways,
    subsets,
    subsets_summing_to,
    tower_of_hanoi,
)


@pytest.mark.parametrize("text", ["", "a", "abb", "abba", "aabbabb"])
def test_check_ab_accepts_grammar(text):
    assert check_ab(text) is True


@pytest.mark.parametrize("text", ["b", "ab", "abab", "abbb", "bba"])
def test_check_ab_rejects_other_strings(text):
    assert check_ab(text) is False


def test_staircase_base_cases():
    assert staircase_ways(0) == 1
    assert staircase_ways(-1) == 0


@pytest.mark.parametrize("n", range(3, 15))
def test_staircase_recurrence(n):
    assert staircase_ways(n) == (
        staircase_ways(n - 1) + staircase_ways(n - 2) + staircase_ways(n - 3)
    )


def test_binary_search_finds_every_element():
    values = [2, 5, 8, 11, 19, 23, 40]
    for expected, value in enumerate(values):
        assert binary_search(values, value) == expected


@pytest.mark.parametrize("missing", [0, 3, 12, 100])
def test_binary_search_missing(missing):
    assert binary_search([2, 5, 8, 11, 19, 23, 40], missing) == -1


def test_binary_search_empty():
    assert binary_search([], 4) == -1


def test_subsets_are_all_combinations_in_order():
    values = [4, 7, 9]
    result = subsets(values)
    assert len(result) == 2 ** len(values)
    expected = {
        combo
        for size in range(len(values) + 1)
        for combo in itertools.combinations(values, size)
    }
    assert {tuple(s) for s in result} == expected


def test_subsets_of_empty():
    assert subsets([]) == [[]]


def test_subsets_summing_to_matches_filter():
    values = [1, 2, 3, 4, 5]
    result = subsets_summing_to(values, 6)
    assert all(sum(s) == 6 for s in result)
    assert sorted(map(tuple, result)) == sorted(
        tuple(s) for s in subsets(values) if sum(s) == 6
    )


def test_codes_example():
    assert set(codes("1123")) == {"aabc", "kbc", "alc", "aaw", "kw"}


@pytest.mark.parametrize("digits", ["1", "26", "1212", "9876", "2611"])
def test_codes_round_trip(digits):
    found = codes(digits)
    assert len(found) == len(set(found))
    for word in found:
        assert "".join(str(ord(ch) - ord("a") + 1) for ch in word) == digits


def test_codes_empty_input():
    assert codes("") == [""]


@pytest.mark.parametrize("digits", ["102", "1a"])
def test_codes_rejects_bad_digits(digits):
    with pytest.raises(ValueError):
        codes(digits)


@pytest.mark.parametrize("text", ["a", "ab", "abc", "abcd", "aab"])
def test_permutations_match_itertools(text):
    assert sorted(permutations(text)) == sorted(
        "".join(p) for p in itertools.permutations(text)
    )


@pytest.mark.parametrize("n", range(0, 7))
def test_tower_of_hanoi_moves_are_legal(n):
    moves = tower_of_hanoi(n, "a", "b", "c")
    assert len(moves) == 2**n - 1
    pegs = {"a": list(range(n, 0, -1)), "b": [], "c": []}
    for src, dst in moves:
        disc = pegs[src].pop()
        assert not pegs[dst] or pegs[dst][-1] > disc
        pegs[dst].append(disc)
    assert pegs["c"] == list(range(n, 0, -1))


def test_tower_of_hanoi_rejects_negative():
    with pytest.raises(ValueError):
        tower_of_hanoi(-1)
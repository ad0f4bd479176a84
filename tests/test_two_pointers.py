from collections import Counter
from itertools import combinations

import pytest

from algokit.two_pointers import (
    append_characters,
    four_sum,
    intersect,
    is_subsequence,
    merge_sorted,
    min_swaps_to_balance,
    minimum_steps,
    move_zeroes,
    remove_duplicates,
    remove_duplicates_keep_two,
    reverse_in_place,
    sort_colors,
    three_sum,
    two_sum_sorted,
)


def test_three_sum_worked_example():
    assert three_sum([-1, 0, 1, 2, -1, -4]) == [[-1, -1, 2], [-1, 0, 1]]


@pytest.mark.parametrize(
    "nums",
    [[-1, 0, 1, 2, -1, -4], [0, 0, 0, 0], [-2, 0, 1, 1, 2], [3, -2, 1, 0, -1, -4, 4, 2]],
)
def test_three_sum_invariants(nums):
    result = three_sum(nums)
    expected = {tuple(sorted(c)) for c in combinations(nums, 3) if sum(c) == 0}
    assert all(sum(t) == 0 and t == sorted(t) for t in result)
    assert len(result) == len({tuple(t) for t in result})
    assert {tuple(t) for t in result} == expected
    assert result == sorted(result)


@pytest.mark.parametrize("nums", [[], [0], [0, 0]])
def test_three_sum_short(nums):
    assert three_sum(nums) == []


@pytest.mark.parametrize(
    "nums, target",
    [([1, 0, -1, 0, -2, 2], 0), ([2, 2, 2, 2, 2], 8), ([-3, -1, 0, 2, 4, 5], 2)],
)
def test_four_sum_invariants(nums, target):
    result = four_sum(nums, target)
    expected = {tuple(sorted(c)) for c in combinations(nums, 4) if sum(c) == target}
    assert {tuple(q) for q in result} == expected
    assert len(result) == len(expected)
    assert all(q == sorted(q) for q in result)


def test_four_sum_large_values():
    big = 1_000_000_000
    assert four_sum([big, big, big, big], -294967296) == []
    assert four_sum([big, big, big, big], 4 * big) == [[big, big, big, big]]


@pytest.mark.parametrize("numbers, target", [([2, 7, 11, 15], 9), ([2, 3, 4], 6), ([-1, 0], -1)])
def test_two_sum_sorted(numbers, target):
    i, j = two_sum_sorted(numbers, target)
    assert 1 <= i < j <= len(numbers)
    assert numbers[i - 1] + numbers[j - 1] == target


def test_two_sum_sorted_missing():
    with pytest.raises(ValueError):
        two_sum_sorted([1, 2, 3], 100)


@pytest.mark.parametrize("nums", [[], [1], [1, 1, 2], [0, 0, 1, 1, 1, 2, 2, 3, 3, 4]])
def test_remove_duplicates(nums):
    original = list(nums)
    length = remove_duplicates(nums)
    assert length == len(set(original))
    assert nums == sorted(set(original))


@pytest.mark.parametrize("nums", [[], [1], [1, 1, 1, 2, 2, 3], [0, 0, 1, 1, 1, 1, 2, 3, 3]])
def test_remove_duplicates_keep_two(nums):
    original = Counter(nums)
    length = remove_duplicates_keep_two(nums)
    assert length == len(nums)
    assert nums == sorted(nums)
    assert set(nums) == set(original)
    assert all(Counter(nums)[v] == min(c, 2) for v, c in original.items())


@pytest.mark.parametrize("nums", [[2, 0, 2, 1, 1, 0], [2, 0, 1], [], [1], [2, 2, 0, 0]])
def test_sort_colors(nums):
    expected = sorted(nums)
    sort_colors(nums)
    assert nums == expected


def test_merge_sorted():
    nums1 = [1, 2, 3, 0, 0, 0]
    nums2 = [2, 5, 6]
    merge_sorted(nums1, 3, nums2, 3)
    assert nums1 == sorted([1, 2, 3] + nums2)


def test_merge_sorted_into_empty():
    nums1 = [0]
    merge_sorted(nums1, 0, [1], 1)
    assert nums1 == [1]


def test_merge_sorted_without_room():
    with pytest.raises(ValueError):
        merge_sorted([1, 2], 2, [3], 1)


@pytest.mark.parametrize("nums", [[0, 1, 0, 3, 12], [0], [1, 2], [0, 0, 4, 0, -1]])
def test_move_zeroes(nums):
    nonzero = [v for v in nums if v != 0]
    zeros = len(nums) - len(nonzero)
    move_zeroes(nums)
    assert nums == nonzero + [0] * zeros


def test_reverse_in_place():
    chars = list("hello")
    reverse_in_place(chars)
    assert "".join(chars) == "hello"[::-1]


@pytest.mark.parametrize(
    "a, b", [([1, 2, 2, 1], [2, 2]), ([4, 9, 5], [9, 4, 9, 8, 4]), ([1], [2])]
)
def test_intersect(a, b):
    result = intersect(a, b)
    assert result == sorted(result)
    counts = Counter(result)
    assert all(counts[v] == min(a.count(v), b.count(v)) for v in set(a) | set(b))


def test_is_subsequence():
    assert is_subsequence("abc", "ahbgdc") is True
    assert is_subsequence("axc", "ahbgdc") is False
    assert is_subsequence("", "abc") is True
    assert is_subsequence("aa", "a") is False


@pytest.mark.parametrize(
    "s, t", [("coaching", "coding"), ("abcde", "a"), ("z", "abcde"), ("", "ab"), ("ab", "")]
)
def test_append_characters_is_minimal(s, t):
    needed = append_characters(s, t)
    assert 0 <= needed <= len(t)
    assert is_subsequence(t, s + t[len(t) - needed:])
    if needed > 0:
        assert not is_subsequence(t, s + t[len(t) - needed + 1:])


def test_min_swaps_to_balance_worked_example():
    assert min_swaps_to_balance("]]][[[") == 2


@pytest.mark.parametrize("s", ["", "[]", "[[]]", "[][]"])
def test_min_swaps_balanced_needs_none(s):
    assert min_swaps_to_balance(s) == 0


def test_minimum_steps_worked_example():
    assert minimum_steps("101") == 1


@pytest.mark.parametrize("s", ["", "0", "1", "100", "0111", "110010", "1010101"])
def test_minimum_steps_counts_inversions(s):
    inversions = sum(1 for i, j in combinations(range(len(s)), 2) if s[i] == "1" and s[j] == "0")
    assert minimum_steps(s) == inversions
"""Two-pointer techniques over sequences and strings."""

from __future__ import annotations

import heapq
from collections import Counter
from typing import Iterable, Iterator, MutableSequence, Sequence


def _pairs_summing_to(
    nums: Sequence[int], start: int, target: int
) -> Iterator[tuple[int, int]]:
    """Distinct value pairs from sorted ``nums[start:]`` that add up to ``target``."""
    low, high = start, len(nums) - 1
    while low < high:
        total = nums[low] + nums[high]
        if total == target:
            yield nums[low], nums[high]
            low += 1
            high -= 1
            while low < high and nums[low] == nums[low - 1]:
                low += 1
            while low < high and nums[high] == nums[high + 1]:
                high -= 1
        elif total > target:
            high -= 1
        else:
            low += 1


def three_sum(nums: Iterable[int]) -> list[list[int]]:
    """All distinct ascending triplets that add up to zero, in ascending order."""
    ordered = sorted(nums)
    result: list[list[int]] = []
    for i, first in enumerate(ordered):
        if i > 0 and first == ordered[i - 1]:
            continue
        result.extend([first, b, c] for b, c in _pairs_summing_to(ordered, i + 1, -first))
    return result


def four_sum(nums: Iterable[int], target: int) -> list[list[int]]:
    """All distinct ascending quadruplets that add up to ``target``, in ascending order."""
    ordered = sorted(nums)
    result: list[list[int]] = []
    for i, first in enumerate(ordered):
        if i > 0 and first == ordered[i - 1]:
            continue
        for j in range(i + 1, len(ordered)):
            second = ordered[j]
            if j > i + 1 and second == ordered[j - 1]:
                continue
            rest = target - first - second
            result.extend(
                [first, second, c, d] for c, d in _pairs_summing_to(ordered, j + 1, rest)
            )
    return result


def two_sum_sorted(numbers: Sequence[int], target: int) -> tuple[int, int]:
    """One-based positions of two entries of ascending ``numbers`` adding up to ``target``."""
    low, high = 0, len(numbers) - 1
    while low < high:
        total = numbers[low] + numbers[high]
        if total == target:
            return low + 1, high + 1
        if total > target:
            high -= 1
        else:
            low += 1
    raise ValueError(f"no two entries add up to {target}")


def _keep_at_most(nums: MutableSequence[int], copies: int) -> int:
    kept = 0
    for value in list(nums):
        if kept < copies or value > nums[kept - copies]:
            nums[kept] = value
            kept += 1
    del nums[kept:]
    return kept


def remove_duplicates(nums: MutableSequence[int]) -> int:
    """Keep one copy of each value of sorted ``nums`` in place; return the new length."""
    return _keep_at_most(nums, 1)


def remove_duplicates_keep_two(nums: MutableSequence[int]) -> int:
    """Keep at most two copies of each value of sorted ``nums`` in place; return the new length."""
    return _keep_at_most(nums, 2)


def sort_colors(nums: MutableSequence[int]) -> None:
    """Sort a sequence of 0s, 1s and 2s in place in a single pass."""
    low, mid, high = 0, 0, len(nums) - 1
    while mid <= high:
        if nums[mid] == 0:
            nums[low], nums[mid] = nums[mid], nums[low]
            low += 1
            mid += 1
        elif nums[mid] == 1:
            mid += 1
        else:
            nums[mid], nums[high] = nums[high], nums[mid]
            high -= 1


def merge_sorted(
    nums1: MutableSequence[int], m: int, nums2: Sequence[int], n: int
) -> None:
    """Merge the first ``n`` of ``nums2`` into the first ``m`` of ``nums1``, in place."""
    if len(nums1) < m + n:
        raise ValueError("first sequence has no room for the merged result")
    nums1[: m + n] = list(heapq.merge(nums1[:m], nums2[:n]))


def move_zeroes(nums: MutableSequence[int]) -> None:
    """Move every zero to the end in place, keeping the other values in order."""
    write = 0
    for read, value in enumerate(nums):
        if value != 0:
            nums[read], nums[write] = nums[write], nums[read]
            write += 1


def reverse_in_place(chars: MutableSequence[str]) -> None:
    """Reverse ``chars`` in place."""
    chars.reverse()


def intersect(nums1: Iterable[int], nums2: Iterable[int]) -> list[int]:
    """Values common to both inputs, as often as they occur in both, ascending."""
    return sorted((Counter(nums1) & Counter(nums2)).elements())


def is_subsequence(s: str, t: str) -> bool:
    """Whether ``s`` can be formed by deleting characters from ``t``."""
    remaining = iter(t)
    return all(ch in remaining for ch in s)


def append_characters(s: str, t: str) -> int:
    """How many characters must be appended to ``s`` to make ``t`` a subsequence of it."""
    matched = 0
    for ch in s:
        if matched < len(t) and ch == t[matched]:
            matched += 1
    return len(t) - matched


def min_swaps_to_balance(s: str) -> int:
    """Fewest swaps that turn an equal mix of '[' and ']' into a balanced string."""
    chars = list(s)
    swaps = 0
    balance = 0
    right = len(chars) - 1
    for left, ch in enumerate(chars):
        balance += 1 if ch == "[" else -1
        if balance < 0:
            while left < right and chars[right] != "[":
                right -= 1
            chars[left], chars[right] = chars[right], chars[left]
            swaps += 1
            balance = 1
    return swaps


def minimum_steps(s: str) -> int:
    """Adjacent swaps needed to gather every '1' to the right of every '0'."""
    ones = 0
    steps = 0
    for ch in s:
        if ch == "1":
            ones += 1
        else:
            steps += ones
    return steps
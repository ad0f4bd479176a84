"""Single-pass and greedy computations over integer sequences."""

from __future__ import annotations

from collections import Counter
from functools import reduce
from itertools import accumulate, pairwise
from operator import xor
from typing import Iterable, MutableSequence, Sequence


def trap(height: Sequence[int]) -> int:
    """Units of rain water held between bars of the given heights."""
    if not height:
        return 0
    left_max = list(accumulate(height, max))
    right_max = list(accumulate(reversed(height), max))[::-1]
    return sum(
        min(left, right) - bar
        for left, right, bar in zip(left_max[1:-1], right_max[1:-1], height[1:-1])
    )


def max_subarray(nums: Iterable[int]) -> int:
    """Largest sum of a non-empty contiguous run of values."""
    best: int | None = None
    current = 0
    for value in nums:
        current = max(current + value, value)
        best = current if best is None else max(best, current)
    if best is None:
        raise ValueError("sequence is empty")
    return best


def max_profit(prices: Sequence[int]) -> int:
    """Best gain from one purchase followed by one later sale, or 0."""
    if not prices:
        raise ValueError("no prices given")
    best = 0
    lowest = prices[0]
    for price in prices[1:]:
        best = max(best, price - lowest)
        lowest = min(lowest, price)
    return best


def max_profit_unlimited(prices: Sequence[int]) -> int:
    """Best gain when any number of non-overlapping trades is allowed."""
    return sum(max(later - earlier, 0) for earlier, later in pairwise(prices))


def single_number(nums: Iterable[int]) -> int:
    """The value that appears once when every other value appears twice."""
    return reduce(xor, nums, 0)


def majority_element(nums: Iterable[int]) -> int:
    """The value occurring in more than half the positions (Boyer-Moore vote)."""
    candidate: int | None = None
    count = 0
    for value in nums:
        if candidate is None:
            candidate, count = value, 1
            continue
        count += 1 if value == candidate else -1
        if count == 0:
            candidate, count = value, 1
    if candidate is None:
        raise ValueError("sequence is empty")
    return candidate


def majority_elements_third(nums: Sequence[int]) -> list[int]:
    """Every value occurring in more than a third of the positions."""
    first: int | None = None
    second: int | None = None
    count1 = count2 = 0
    for value in nums:
        if count1 == 0 and value != second:
            first, count1 = value, count1 + 1
        elif count2 == 0 and value != first:
            second, count2 = value, count2 + 1
        elif value == first:
            count1 += 1
        elif value == second:
            count2 += 1
        else:
            count1 -= 1
            count2 -= 1
    counts = Counter(nums)
    limit = len(nums) // 3
    return [
        candidate
        for candidate in (first, second)
        if candidate is not None and counts[candidate] > limit
    ]


def rotate(nums: MutableSequence[int], k: int) -> None:
    """Rotate ``nums`` to the right by ``k`` places, in place."""
    if not nums:
        return
    k %= len(nums)
    if k:
        nums[:] = list(nums[-k:]) + list(nums[:-k])


def contains_duplicate(nums: Iterable[int]) -> bool:
    """Whether any value occurs more than once."""
    seen: set[int] = set()
    for value in nums:
        if value in seen:
            return True
        seen.add(value)
    return False


def missing_number(nums: Sequence[int]) -> int:
    """The value of 0..len(nums) that does not occur in ``nums``."""
    n = len(nums)
    return n * (n + 1) // 2 - sum(nums)


def content_children(greed: Iterable[int], sizes: Iterable[int]) -> int:
    """Most children whose greed can be met by giving each at most one cookie."""
    wants = sorted(greed)
    served = 0
    for size in sorted(sizes):
        if served == len(wants):
            break
        if size >= wants[served]:
            served += 1
    return served


def max_consecutive_ones(nums: Iterable[int]) -> int:
    """Length of the longest run of 1s."""
    best = current = 0
    for value in nums:
        current = current + 1 if value == 1 else 0
        best = max(best, current)
    return best


def lemonade_change(bills: Iterable[int]) -> bool:
    """Whether change can be given to every customer for a 5-unit lemonade.

    Bills other than 5 and 10 are handled as 20s.
    """
    fives = tens = 0
    for bill in bills:
        if bill == 5:
            fives += 1
        elif bill == 10:
            if not fives:
                return False
            fives -= 1
            tens += 1
        elif tens and fives:
            tens -= 1
            fives -= 1
        elif fives >= 3:
            fives -= 3
        else:
            return False
    return True


def sort_array(nums: Iterable[int]) -> list[int]:
    """The values in ascending order."""
    return sorted(nums)


def min_increment_for_unique(nums: Iterable[int]) -> int:
    """Fewest unit increments that make every value distinct."""
    ordered = sorted(nums)
    moves = 0
    for i in range(1, len(ordered)):
        if ordered[i - 1] >= ordered[i]:
            raised = ordered[i - 1] + 1
            moves += raised - ordered[i]
            ordered[i] = raised
    return moves


def sorted_squares(nums: Iterable[int]) -> list[int]:
    """Squares of the values in ascending order."""
    return sorted(value * value for value in nums)


def shuffle(nums: Sequence[int], n: int) -> list[int]:
    """Interleave the leading values with those from index ``n`` onwards."""
    return [value for pair in zip(nums, nums[n:]) for value in pair]


def identical_pairs(nums: Iterable[int]) -> int:
    """Number of index pairs i < j holding equal values."""
    return sum(c * (c - 1) // 2 for c in Counter(nums).values())


def chalk_replacer(chalk: Sequence[int], k: int) -> int:
    """Index of the student who runs out of chalk while using ``k`` pieces in turns."""
    total = sum(chalk)
    if total == 0:
        raise ValueError("chalk use per round must be positive")
    left = k % total
    for index, need in enumerate(chalk):
        if left < need:
            return index
        left -= need
    return 0


def final_value_after_operations(operations: Iterable[str]) -> int:
    """Value of a counter starting at 0 after '++X', 'X++', '--X' and 'X--' steps."""
    return sum(1 if op[1] == "+" else -1 for op in operations)


def maximum_difference(nums: Sequence[int]) -> int:
    """Largest ``nums[j] - nums[i]`` with i < j and a positive result, else -1."""
    if not nums:
        raise ValueError("sequence is empty")
    best = -1
    lowest = nums[0]
    for value in nums[1:]:
        best = max(best, value - lowest)
        lowest = min(lowest, value)
    return -1 if best == 0 else best


def sort_people(names: Sequence[str], heights: Sequence[int]) -> list[str]:
    """Names ordered by descending height.

    When heights repeat, the last name given for a height fills every slot
    of that height.
    """
    if len(names) != len(heights):
        raise ValueError("names and heights differ in length")
    by_height = dict(zip(heights, names))
    return [by_height[h] for h in sorted(heights, reverse=True)]


def is_special(nums: Sequence[int]) -> bool:
    """Whether every pair of neighbours differs in parity."""
    return all(a % 2 != b % 2 for a, b in pairwise(nums))


def special_queries(
    nums: Sequence[int], queries: Iterable[Sequence[int]]
) -> list[bool]:
    """For each inclusive ``(left, right)`` range, whether that slice is special."""
    breaks = [0]
    for a, b in pairwise(nums):
        breaks.append(breaks[-1] + (a % 2 == b % 2))
    return [breaks[left] == breaks[right] for left, right, *_ in queries]


def max_score(a: Sequence[int], b: Sequence[int]) -> int:
    """Largest ``sum(a[t] * b[i_t])`` over increasing indices i_0 < i_1 < i_2 < i_3."""
    if len(a) != 4:
        raise ValueError("exactly four weights are required")
    if len(b) < 4:
        raise ValueError("at least four values are required")
    best: list[float] = [float("-inf")] * 4
    for i, value in enumerate(b):
        for t in range(min(i, 3), 0, -1):
            best[t] = max(best[t], best[t - 1] + a[t] * value)
        best[0] = max(best[0], a[0] * value)
    return int(best[3])


def results_array(nums: Sequence[int], k: int) -> list[int]:
    """Power of each window of ``k`` values: its last value if it rises by one each step, else -1."""
    if k < 1:
        raise ValueError("window size must be at least 1")
    if k == 1:
        return list(nums)
    powers = []
    for start in range(len(nums) - k + 1):
        window = nums[start : start + k]
        steady = all(b == a + 1 for a, b in pairwise(window))
        powers.append(window[-1] if steady else -1)
    return powers


def max_energy_boost(drink_a: Sequence[int], drink_b: Sequence[int]) -> int:
    """Most energy over all hours when switching drinks costs one hour."""
    if not drink_a or not drink_b:
        raise ValueError("no hours given")
    if len(drink_a) != len(drink_b):
        raise ValueError("drink sequences differ in length")
    best_a, best_b = drink_a[0], drink_b[0]
    for gain_a, gain_b in zip(drink_a[1:], drink_b[1:]):
        best_a, best_b = max(best_a + gain_a, best_b), max(best_b + gain_b, best_a)
    return max(best_a, best_b)


def final_state(nums: Sequence[int], k: int, multiplier: int) -> list[int]:
    """Values after ``k`` rounds of multiplying the first smallest value."""
    values = list(nums)
    if not values:
        return values
    for _ in range(k):
        index = values.index(min(values))
        values[index] *= multiplier
    return values


def sneaky_numbers(nums: Iterable[int]) -> list[int]:
    """Values occurring more than once, in order of first appearance."""
    return [value for value, count in Counter(nums).items() if count > 1]


def stable_mountains(height: Sequence[int], threshold: int) -> list[int]:
    """Indices whose preceding mountain is strictly higher than ``threshold``."""
    return [i for i, before in enumerate(height[:-1], start=1) if before > threshold]
"""Binary searches over sorted, rotated and two-dimensional data."""

from __future__ import annotations

from math import isqrt
from typing import Sequence


def binary_search(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in ascending ``nums``, or -1 when it is absent."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] > target:
            high = mid - 1
        else:
            low = mid + 1
    return -1


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in a rotated ascending sequence of distinct values, or -1."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if nums[mid] == target:
            return mid
        if nums[low] <= nums[mid]:
            if nums[low] <= target < nums[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif nums[mid] < target <= nums[high]:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def search_range(nums: Sequence[int], target: int) -> tuple[int, int]:
    """First and last index of ``target`` in ascending ``nums``, or (-1, -1)."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if nums[mid] == target:
            first = mid
            while first > 0 and nums[first - 1] == target:
                first -= 1
            last = mid
            while last < len(nums) - 1 and nums[last + 1] == target:
                last += 1
            return first, last
        if nums[mid] > target:
            high = mid - 1
        else:
            low = mid + 1
    return -1, -1


def _staircase(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Walk from the top-right corner, dropping a row or a column each step."""
    if not matrix or not matrix[0]:
        return False
    row, col = 0, len(matrix[0]) - 1
    while row < len(matrix) and col >= 0:
        value = matrix[row][col]
        if value == target:
            return True
        if value > target:
            col -= 1
        else:
            row += 1
    return False


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Whether ``target`` occurs in a matrix read row by row in ascending order."""
    return _staircase(matrix, target)


def search_sorted_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Whether ``target`` occurs in a matrix whose rows and columns each ascend."""
    return _staircase(matrix, target)


def find_min_rotated(nums: Sequence[int]) -> int:
    """Smallest value of a rotated ascending sequence of distinct values."""
    if not nums:
        raise ValueError("sequence is empty")
    low, high = 0, len(nums) - 1
    while True:
        if nums[low] <= nums[high]:
            return nums[low]
        mid = low + (high - low) // 2
        if nums[mid] >= nums[low]:
            low = mid + 1
        else:
            high = mid


def find_peak_element(nums: Sequence[int]) -> int:
    """Index of a value no smaller than its neighbours."""
    if not nums:
        raise ValueError("sequence is empty")
    last = len(nums) - 1
    low, high = 0, last
    while low <= high:
        mid = low + (high - low) // 2
        rises = mid == 0 or nums[mid] >= nums[mid - 1]
        falls = mid == last or nums[mid] >= nums[mid + 1]
        if rises and falls:
            return mid
        if mid > 0 and nums[mid] <= nums[mid - 1]:
            high = mid - 1
        else:
            low = mid + 1
    raise ValueError("no peak found")


def is_perfect_square(num: int) -> bool:
    """Whether ``num`` is the square of a positive integer."""
    low, high = 1, num
    while low <= high:
        mid = low + (high - low) // 2
        square = mid * mid
        if square == num:
            return True
        if square > num:
            high = mid - 1
        else:
            low = mid + 1
    return False


def single_non_duplicate(nums: Sequence[int]) -> int:
    """The one value of a sorted sequence that appears once while all others appear twice."""
    n = len(nums)
    if n == 0:
        raise ValueError("sequence is empty")
    if n == 1 or nums[0] != nums[1]:
        return nums[0]
    if nums[-1] != nums[-2]:
        return nums[-1]
    low, high = 1, n - 2
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] != nums[mid + 1] and nums[mid] != nums[mid - 1]:
            return nums[mid]
        paired_forward = (mid % 2 == 0 and nums[mid] == nums[mid + 1]) or (
            mid % 2 == 1 and nums[mid] == nums[mid - 1]
        )
        if paired_forward:
            low = mid + 1
        else:
            high = mid - 1
    raise ValueError("no single element found")


def is_sum_of_two_squares(c: int) -> bool:
    """Whether ``c`` equals a*a + b*b for some non-negative integers a and b."""
    if c < 0:
        raise ValueError("value must be non-negative")
    low, high = 0, isqrt(c)
    while low <= high:
        total = low * low + high * high
        if total < c:
            low += 1
        elif total > c:
            high -= 1
        else:
            return True
    return False
"""Counting, scanning and rewriting of strings."""

from __future__ import annotations

import string
from collections import Counter
from itertools import combinations, pairwise
from typing import Iterable, Sequence

_REMOVABLE = frozenset({"AB", "CD"})


def is_anagram(s: str, t: str) -> bool:
    """Whether ``t`` is a rearrangement of the characters of ``s``."""
    return len(s) == len(t) and Counter(s) == Counter(t)


def longest_palindrome(s: str) -> int:
    """Length of the longest palindrome that can be built from the characters of ``s``."""
    counts = Counter(s).values()
    paired = sum(count // 2 * 2 for count in counts)
    return paired + (1 if any(count % 2 for count in counts) else 0)


def min_add_to_make_valid(s: str) -> int:
    """Fewest parentheses to insert so that ``s`` becomes balanced.

    Every character other than '(' counts as a closing parenthesis.
    """
    open_count = 0
    unmatched_closes = 0
    for ch in s:
        if ch == "(":
            open_count += 1
        elif open_count:
            open_count -= 1
        else:
            unmatched_closes += 1
    return open_count + unmatched_closes


def defang_ip(address: str) -> str:
    """The address with every '.' replaced by '[.]'."""
    return address.replace(".", "[.]")


def get_lucky(s: str, k: int) -> int:
    """Write each letter as its alphabet position, then sum the digits ``k`` times."""
    if any(ch not in string.ascii_lowercase for ch in s):
        raise ValueError("only lowercase letters are allowed")
    digits = "".join(str(ord(ch) - ord("a") + 1) for ch in s)
    for _ in range(k):
        digits = str(sum(int(d) for d in digits))
    return int(digits)


def count_seniors(details: Iterable[str]) -> int:
    """Number of passenger records whose age field (characters 11-12) exceeds 60."""
    return sum(1 for record in details if int(record[11:13]) > 60)


def min_length(s: str) -> int:
    """Length left after repeatedly deleting "AB" and "CD" substrings."""
    stack: list[str] = []
    for ch in s:
        if stack and stack[-1] + ch in _REMOVABLE:
            stack.pop()
        else:
            stack.append(ch)
    return len(stack)


def score_of_string(s: str) -> int:
    """Sum of absolute code-point differences between neighbouring characters."""
    return sum(abs(ord(a) - ord(b)) for a, b in pairwise(s))


def string_hash(s: str, k: int) -> str:
    """Hash each block of ``k`` lowercase letters into one letter."""
    if k < 1:
        raise ValueError("block size must be at least 1")
    if len(s) % k:
        raise ValueError("string length must be a multiple of the block size")
    blocks = (s[start:start + k] for start in range(0, len(s), k))
    return "".join(
        chr(ord("a") + sum(ord(ch) - ord("a") for ch in block) % 26) for block in blocks
    )


def count_k_constraint_substrings(s: str, k: int) -> int:
    """Substrings holding at most ``k`` zeros or at most ``k`` ones.

    Characters other than '0' count as ones.
    """
    count = 0
    for start in range(len(s)):
        zeros = ones = 0
        for ch in s[start:]:
            if ch == "0":
                zeros += 1
            else:
                ones += 1
            if zeros > k and ones > k:
                break
            count += 1
    return count


def _square_parity(coordinate: str) -> int:
    return (ord(coordinate[0]) - ord("a") + ord(coordinate[1]) - ord("1")) % 2


def same_square_color(coordinate1: str, coordinate2: str) -> bool:
    """Whether two chessboard squares such as "a1" and "c3" share a colour."""
    return _square_parity(coordinate1) == _square_parity(coordinate2)


def almost_equal(x: int, y: int) -> bool:
    """Whether swapping at most two digits of one number yields the other.

    The shorter number is padded with leading zeros first.
    """
    a, b = str(x), str(y)
    width = max(len(a), len(b))
    a, b = a.zfill(width), b.zfill(width)
    differing = [i for i, (p, q) in enumerate(zip(a, b)) if p != q]
    if not differing:
        return True
    if len(differing) == 2:
        i, j = differing
        return a[i] == b[j] and a[j] == b[i]
    return False


def count_almost_equal_pairs(nums: Sequence[int]) -> int:
    """Number of index pairs i < j whose values are almost equal."""
    return sum(1 for x, y in combinations(nums, 2) if almost_equal(x, y))
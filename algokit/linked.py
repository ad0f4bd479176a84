"""Singly linked lists and the operations that rearrange or prune them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: Optional["ListNode"] = None

    @classmethod
    def from_values(cls, values: Iterable[int]) -> Optional["ListNode"]:
        """Build a list holding ``values`` in order; an empty input gives None."""
        head: Optional[ListNode] = None
        for value in reversed(list(values)):
            head = cls(value, head)
        return head

    def __iter__(self) -> Iterator[int]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next

    def to_list(self) -> list[int]:
        """Return the values from this node to the end of the list."""
        return list(self)

    def __repr__(self) -> str:
        return f"ListNode({self.to_list()!r})"


def _nodes(head: Optional[ListNode]) -> Iterator[ListNode]:
    while head is not None:
        yield head
        head = head.next


def _reverse(head: Optional[ListNode]) -> Optional[ListNode]:
    prev: Optional[ListNode] = None
    while head is not None:
        following = head.next
        head.next = prev
        prev = head
        head = following
    return prev


def _reverse_prefix(
    head: ListNode, count: int
) -> tuple[ListNode, ListNode, Optional[ListNode]]:
    """Reverse up to ``count`` leading nodes.

    Returns the new first node, the new last node of the reversed part and
    the first node that was not touched.
    """
    prev: Optional[ListNode] = None
    curr: Optional[ListNode] = head
    done = 0
    while curr is not None and done < count:
        following = curr.next
        curr.next = prev
        prev = curr
        curr = following
        done += 1
    assert prev is not None
    return prev, head, curr


def list_length(head: Optional[ListNode]) -> int:
    """Number of nodes reachable from ``head``."""
    return sum(1 for _ in _nodes(head))


def swap_pairs(head: Optional[ListNode]) -> Optional[ListNode]:
    """Swap every two adjacent nodes; a trailing odd node stays in place."""
    if head is None or head.next is None:
        return head
    new_head, tail, rest = _reverse_prefix(head, 2)
    while rest is not None:
        group_head, group_tail, rest = _reverse_prefix(rest, 2)
        tail.next = group_head
        tail = group_tail
    tail.next = None
    return new_head


def reverse_k_group(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Reverse the list in groups of ``k`` nodes.

    The first group is always reversed, even when the list is shorter than
    ``k``; later groups are reversed only when they are complete, and a
    short remainder keeps its order.
    """
    if k < 1:
        raise ValueError("group size must be at least 1")
    if head is None:
        return None
    remaining = list_length(head)
    new_head, tail, rest = _reverse_prefix(head, k)
    remaining -= k
    while rest is not None and remaining >= k:
        group_head, group_tail, rest = _reverse_prefix(rest, k)
        tail.next = group_head
        tail = group_tail
        remaining -= k
    tail.next = rest
    return new_head


def rotate_right(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Rotate the list to the right by ``k`` places; ``k <= 0`` leaves it alone."""
    if head is None or k <= 0:
        return head
    nodes = list(_nodes(head))
    k %= len(nodes)
    if k == 0:
        return head
    new_tail = nodes[-k - 1]
    new_head = new_tail.next
    new_tail.next = None
    nodes[-1].next = head
    return new_head


def delete_duplicates(head: Optional[ListNode]) -> Optional[ListNode]:
    """Drop repeated values from a sorted list, keeping one of each."""
    node = head
    while node is not None and node.next is not None:
        if node.val == node.next.val:
            node.next = node.next.next
        else:
            node = node.next
    return head


def is_palindrome(head: Optional[ListNode]) -> bool:
    """Whether the values read the same in both directions.

    The second half is reversed for the comparison and restored afterwards.
    """
    if head is None or head.next is None:
        return True
    slow: ListNode = head
    fast: Optional[ListNode] = head
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        assert slow.next is not None
        slow = slow.next
    second = _reverse(slow)
    try:
        return all(a == b for a, b in zip(head, second or ()))
    finally:
        _reverse(second)


def delete_middle(head: Optional[ListNode]) -> Optional[ListNode]:
    """Remove the node at index ``len // 2``; a list of one node becomes empty."""
    if head is None or head.next is None:
        return None
    prev: Optional[ListNode] = None
    slow: ListNode = head
    fast: Optional[ListNode] = head
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        prev = slow
        assert slow.next is not None
        slow = slow.next
    assert prev is not None
    prev.next = slow.next
    return head


def remove_values(nums: Iterable[int], head: Optional[ListNode]) -> Optional[ListNode]:
    """Remove every node whose value occurs in ``nums``."""
    banned = set(nums)
    sentinel = ListNode(-1, head)
    node = sentinel
    while node.next is not None:
        if node.next.val in banned:
            node.next = node.next.next
        else:
            node = node.next
    return sentinel.next
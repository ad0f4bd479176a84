"""Binary trees: construction, traversals and structural queries."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from itertools import groupby
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None

    @classmethod
    def from_level_order(cls, values: Iterable[Optional[int]]) -> Optional["TreeNode"]:
        """Build a tree from level-order values where None marks a missing child."""
        items = list(values)
        if not items or items[0] is None:
            return None
        root = cls(items[0])
        queue = deque([root])
        rest = iter(items[1:])
        missing = object()
        while queue:
            node = queue.popleft()
            left = next(rest, missing)
            if left is missing:
                break
            if left is not None:
                node.left = cls(left)
                queue.append(node.left)
            right = next(rest, missing)
            if right is missing:
                break
            if right is not None:
                node.right = cls(right)
                queue.append(node.right)
        return root


def is_same_tree(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    """Whether two trees have the same shape and values."""
    if p is None and q is None:
        return True
    if p is None or q is None or p.val != q.val:
        return False
    return is_same_tree(p.left, q.left) and is_same_tree(p.right, q.right)


def _mirrors(left: Optional[TreeNode], right: Optional[TreeNode]) -> bool:
    if left is None and right is None:
        return True
    if left is None or right is None:
        return False
    return (
        left.val == right.val
        and _mirrors(left.left, right.right)
        and _mirrors(left.right, right.left)
    )


def is_symmetric(root: Optional[TreeNode]) -> bool:
    """Whether the tree is a mirror image of itself."""
    return root is None or _mirrors(root.left, root.right)


def level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Values level by level, left to right."""
    levels: list[list[int]] = []
    level = [root] if root is not None else []
    while level:
        levels.append([node.val for node in level])
        level = [child for node in level for child in (node.left, node.right) if child]
    return levels


def _balanced_height(node: Optional[TreeNode]) -> Optional[int]:
    """Height of a balanced subtree, or None when it is not balanced."""
    if node is None:
        return 0
    left = _balanced_height(node.left)
    if left is None:
        return None
    right = _balanced_height(node.right)
    if right is None or abs(left - right) > 1:
        return None
    return max(left, right) + 1


def is_balanced(root: Optional[TreeNode]) -> bool:
    """Whether every node's subtrees differ in height by at most one."""
    return _balanced_height(root) is not None


def min_depth(root: Optional[TreeNode]) -> int:
    """Number of nodes on the shortest path from the root down to a leaf."""
    if root is None:
        return 0
    left = min_depth(root.left)
    right = min_depth(root.right)
    if left == 0 or right == 0:
        return max(left, right) + 1
    return min(left, right) + 1


def flatten(root: Optional[TreeNode]) -> None:
    """Rewire the tree in place into a right-leaning chain in preorder."""
    following: Optional[TreeNode] = None

    def visit(node: Optional[TreeNode]) -> None:
        nonlocal following
        if node is None:
            return
        visit(node.right)
        visit(node.left)
        node.right = following
        node.left = None
        following = node

    visit(root)


def _postorder(node: Optional[TreeNode]) -> Iterator[int]:
    if node is None:
        return
    yield from _postorder(node.left)
    yield from _postorder(node.right)
    yield node.val


def postorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Values in left, right, node order."""
    return list(_postorder(root))


def lowest_common_ancestor(
    root: Optional[TreeNode], p: TreeNode, q: TreeNode
) -> Optional[TreeNode]:
    """The deepest node that has both ``p`` and ``q`` as descendants (or is one)."""
    if root is None or root is p or root is q:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left is not None and right is not None:
        return root
    return left if left is not None else right


def diameter(root: Optional[TreeNode]) -> int:
    """Number of edges on the longest path between any two nodes."""
    best = 0

    def height(node: Optional[TreeNode]) -> int:
        nonlocal best
        if node is None:
            return 0
        left = height(node.left)
        right = height(node.right)
        best = max(best, left + right)
        return 1 + max(left, right)

    height(root)
    return best


def max_width(root: Optional[TreeNode]) -> int:
    """Widest level, counting the gaps between its outermost nodes."""
    if root is None:
        return 0
    width = 0
    level: list[tuple[TreeNode, int]] = [(root, 0)]
    while level:
        base = level[0][1]
        width = max(width, level[-1][1] - base + 1)
        next_level: list[tuple[TreeNode, int]] = []
        for node, position in level:
            offset = position - base
            if node.left is not None:
                next_level.append((node.left, offset * 2 + 1))
            if node.right is not None:
                next_level.append((node.right, offset * 2 + 2))
        level = next_level
    return width


def vertical_traversal(root: Optional[TreeNode]) -> list[list[int]]:
    """Values column by column from left to right.

    Within a column, values are ordered by depth, and values sharing both
    column and depth are ordered by value.
    """
    if root is None:
        return []
    placed: list[tuple[int, int, int]] = []
    queue = deque([(root, 0, 0)])
    while queue:
        node, column, row = queue.popleft()
        placed.append((column, row, node.val))
        if node.left is not None:
            queue.append((node.left, column - 1, row + 1))
        if node.right is not None:
            queue.append((node.right, column + 1, row + 1))
    placed.sort()
    return [
        [val for _, _, val in group]
        for _, group in groupby(placed, key=lambda entry: entry[0])
    ]
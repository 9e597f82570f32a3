"""Binary tree exercises."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence
from typing import Optional

from .structures import TreeNode


def _inorder(node: Optional[TreeNode]) -> Iterator[int]:
    if node is None:
        return
    yield from _inorder(node.left)
    yield node.val
    yield from _inorder(node.right)


def inorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """The values of the tree in left, node, right order."""
    return list(_inorder(root))


def is_valid_bst(root: Optional[TreeNode]) -> bool:
    """True if every node is strictly between all its left and right descendants."""

    def check(node: Optional[TreeNode], low: Optional[int], high: Optional[int]) -> bool:
        if node is None:
            return True
        if (low is not None and node.val <= low) or (high is not None and node.val >= high):
            return False
        return check(node.left, low, node.val) and check(node.right, node.val, high)

    return check(root, None, None)


def is_same_tree(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    """True if both trees have the same shape and values."""
    if p is None and q is None:
        return True
    if p is None or q is None or p.val != q.val:
        return False
    return is_same_tree(p.left, q.left) and is_same_tree(p.right, q.right)


def _levels(root: Optional[TreeNode]) -> Iterator[list[TreeNode]]:
    level = [root] if root is not None else []
    while level:
        yield level
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]


def level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """The values of each depth of the tree, from the root down, left to right."""
    return [[node.val for node in level] for level in _levels(root)]


def max_depth(root: Optional[TreeNode]) -> int:
    """The number of nodes on the longest path from the root down to a leaf."""
    return sum(1 for _ in _levels(root))


def build_tree(preorder: Sequence[int], inorder: Sequence[int]) -> Optional[TreeNode]:
    """Rebuild a tree of distinct values from its preorder and inorder listings."""
    if len(preorder) != len(inorder):
        raise ValueError("preorder and inorder must have the same length")
    position = {val: idx for idx, val in enumerate(inorder)}
    if len(position) != len(inorder) or set(preorder) != set(position):
        raise ValueError("listings must hold the same distinct values")
    values = iter(preorder)

    def build(lo: int, hi: int) -> Optional[TreeNode]:
        if lo >= hi:
            return None
        val = next(values)
        mid = position[val]
        if not lo <= mid < hi:
            raise ValueError("listings do not describe one tree")
        node = TreeNode(val)
        node.left = build(lo, mid)
        node.right = build(mid + 1, hi)
        return node

    return build(0, len(inorder))


def is_balanced(root: Optional[TreeNode]) -> bool:
    """True if at every node the two subtree depths differ by at most one."""

    def depth(node: Optional[TreeNode]) -> tuple[bool, int]:
        if node is None:
            return True, 0
        left_ok, left_depth = depth(node.left)
        right_ok, right_depth = depth(node.right)
        balanced = left_ok and right_ok and abs(left_depth - right_depth) <= 1
        return balanced, max(left_depth, right_depth) + 1

    return depth(root)[0]


def max_path_sum(root: Optional[TreeNode]) -> int:
    """The largest sum of values along any path between two nodes."""
    if root is None:
        raise ValueError("tree must not be empty")
    best = root.val

    def gain(node: Optional[TreeNode]) -> int:
        nonlocal best
        if node is None:
            return 0
        left = gain(node.left)
        right = gain(node.right)
        best = max(best, node.val + max(left, 0) + max(right, 0))
        return node.val + max(left, right, 0)

    gain(root)
    return best


def right_side_view(root: Optional[TreeNode]) -> list[int]:
    """The value of the rightmost node at each depth."""
    return [level[-1].val for level in _levels(root)]


def invert_tree(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Mirror the tree in place; return its root."""
    pending: deque[Optional[TreeNode]] = deque([root])
    while pending:
        node = pending.popleft()
        if node is None:
            continue
        node.left, node.right = node.right, node.left
        pending.extend((node.left, node.right))
    return root


def kth_smallest(root: Optional[TreeNode], k: int) -> int:
    """The ``k``-th smallest value of a binary search tree, counting from one."""
    if k < 1:
        raise ValueError("k must be at least 1")
    for count, val in enumerate(_inorder(root), start=1):
        if count == k:
            return val
    raise ValueError("k is larger than the number of nodes")


def diameter_of_binary_tree(root: Optional[TreeNode]) -> int:
    """The number of edges on the longest path between any two nodes."""
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


def is_subtree(root: Optional[TreeNode], sub_root: Optional[TreeNode]) -> bool:
    """True if some node of ``root`` starts a tree identical to ``sub_root``."""
    if root is None:
        return False
    if is_same_tree(root, sub_root):
        return True
    return is_subtree(root.left, sub_root) or is_subtree(root.right, sub_root)


def good_nodes(root: Optional[TreeNode]) -> int:
    """How many nodes are at least as large as every value above them."""

    def count(node: Optional[TreeNode], path_max: Optional[int]) -> int:
        if node is None:
            return 0
        good = path_max is None or node.val >= path_max
        top = node.val if path_max is None else max(path_max, node.val)
        return int(good) + count(node.left, top) + count(node.right, top)

    return count(root, None)
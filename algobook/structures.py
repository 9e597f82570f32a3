"""Linked-list and binary-tree node types with helpers to build and read them."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: Optional["ListNode"] = None

    def __iter__(self) -> Iterator[int]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def list_from_values(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order; empty input gives None."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def values_of_list(head: Optional[ListNode]) -> list[int]:
    """Return the values of a linked list from head to tail."""
    return [] if head is None else list(head)


def tree_from_level_order(values: Iterable[Optional[int]]) -> Optional[TreeNode]:
    """Build a tree from a level-order listing where None marks a missing child."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    pending: deque[TreeNode] = deque([root])
    while pending:
        node = pending.popleft()
        for side in ("left", "right"):
            try:
                value = next(items)
            except StopIteration:
                return root
            if value is not None:
                child = TreeNode(value)
                setattr(node, side, child)
                pending.append(child)
    return root


def tree_to_level_order(root: Optional[TreeNode]) -> list[Optional[int]]:
    """List a tree in level order with None for missing children, trailing Nones dropped."""
    result: list[Optional[int]] = []
    pending: deque[Optional[TreeNode]] = deque([root])
    while pending:
        node = pending.popleft()
        if node is None:
            result.append(None)
            continue
        result.append(node.val)
        pending.append(node.left)
        pending.append(node.right)
    while result and result[-1] is None:
        result.pop()
    return result
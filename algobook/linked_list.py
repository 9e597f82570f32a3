"""Singly linked list exercises."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from itertools import zip_longest
from typing import Optional

from .structures import ListNode


@dataclass(eq=False)
class RandomNode:
    """A list node that also points at an arbitrary node of the same list."""

    val: int = 0
    next: Optional["RandomNode"] = None
    random: Optional["RandomNode"] = None


def add_two_numbers(
    l1: Optional[ListNode], l2: Optional[ListNode]
) -> Optional[ListNode]:
    """Add two numbers stored as lists of decimal digits, least significant first."""
    dummy = ListNode()
    tail = dummy
    carry = 0
    while l1 is not None or l2 is not None or carry:
        total = carry
        if l1 is not None:
            total += l1.val
            l1 = l1.next
        if l2 is not None:
            total += l2.val
            l2 = l2.next
        carry, digit = divmod(total, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    return dummy.next


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Unlink the ``n``-th node counted from the end; return the new head."""
    if n < 1:
        raise ValueError("n must be at least 1")
    dummy = ListNode(next=head)
    lead = head
    for _ in range(n - 1):
        if lead is None:
            break
        lead = lead.next
    if lead is None:
        raise ValueError("n is larger than the length of the list")
    trail = dummy
    while lead.next is not None:
        trail = trail.next
        lead = lead.next
    trail.next = trail.next.next
    return dummy.next


def merge_two_lists(
    list1: Optional[ListNode], list2: Optional[ListNode]
) -> Optional[ListNode]:
    """Splice two sorted lists into one sorted list; ties take from ``list1`` first."""
    dummy = ListNode()
    tail = dummy
    while list1 is not None and list2 is not None:
        if list1.val <= list2.val:
            tail.next, list1 = list1, list1.next
        else:
            tail.next, list2 = list2, list2.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return dummy.next


def merge_k_lists(lists: Iterable[Optional[ListNode]]) -> Optional[ListNode]:
    """Merge any number of sorted lists by merging them in pairs."""
    pending = list(lists)
    if not pending:
        return None
    while len(pending) > 1:
        pending = [
            merge_two_lists(first, second)
            for first, second in zip_longest(pending[::2], pending[1::2])
        ]
    return pending[0]


def _kth(node: Optional[ListNode], k: int) -> Optional[ListNode]:
    while node is not None and k > 0:
        node = node.next
        k -= 1
    return node


def reverse_k_group(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Reverse each full group of ``k`` nodes; a short tail group stays as it is."""
    if k < 1:
        raise ValueError("k must be at least 1")
    dummy = ListNode(next=head)
    group_prev = dummy
    while True:
        kth = _kth(group_prev, k)
        if kth is None:
            break
        group_next = kth.next
        prev, cur = group_next, group_prev.next
        while cur is not group_next:
            following = cur.next
            cur.next = prev
            prev, cur = cur, following
        first = group_prev.next
        group_prev.next = kth
        group_prev = first
    return dummy.next


def copy_random_list(head: Optional[RandomNode]) -> Optional[RandomNode]:
    """A deep copy of a list whose nodes also carry a random pointer."""
    copies: dict[RandomNode, RandomNode] = {}
    node = head
    while node is not None:
        copies[node] = RandomNode(node.val)
        node = node.next
    for original, copy in copies.items():
        copy.next = copies.get(original.next) if original.next is not None else None
        copy.random = (
            copies.get(original.random) if original.random is not None else None
        )
    return copies.get(head) if head is not None else None


def has_cycle(head: Optional[ListNode]) -> bool:
    """True if following ``next`` from ``head`` never ends."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse a list in place; return the new head."""
    prev: Optional[ListNode] = None
    cur = head
    while cur is not None:
        following = cur.next
        cur.next = prev
        prev, cur = cur, following
    return prev


def reorder_list(head: Optional[ListNode]) -> None:
    """Reorder in place to first, last, second, second to last, and so on."""
    if head is None:
        return
    slow, fast = head, head.next
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    right = reverse_list(slow.next)
    slow.next = None
    left = head
    while right is not None:
        left_next, right_next = left.next, right.next
        left.next = right
        right.next = left_next
        left, right = left_next, right_next


def find_duplicate(nums: list[int]) -> int:
    """The repeated value in a list of ``n + 1`` values drawn from ``1..n``."""
    slow = fast = nums[0]
    while True:
        slow = nums[slow]
        fast = nums[nums[fast]]
        if slow == fast:
            break
    fast = nums[0]
    while slow != fast:
        slow = nums[slow]
        fast = nums[fast]
    return slow


def rotate_right(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Rotate the list ``k`` places to the right; return the new head."""
    if k < 0:
        raise ValueError("k must not be negative")
    if head is None or head.next is None or k == 0:
        return head
    length = 1
    tail = head
    while tail.next is not None:
        tail = tail.next
        length += 1
    k %= length
    if k == 0:
        return head
    new_tail = head
    for _ in range(length - k - 1):
        new_tail = new_tail.next
    new_head = new_tail.next
    new_tail.next = None
    tail.next = head
    return new_head


def delete_duplicates(head: Optional[ListNode]) -> Optional[ListNode]:
    """Drop repeated values from a sorted list in place, keeping one of each."""
    cur = head
    while cur is not None and cur.next is not None:
        if cur.val == cur.next.val:
            cur.next = cur.next.next
        else:
            cur = cur.next
    return head


def reverse_between(
    head: Optional[ListNode], left: int, right: int
) -> Optional[ListNode]:
    """Reverse the nodes at one-based positions ``left`` through ``right``."""
    length = 0 if head is None else sum(1 for _ in head)
    if not 1 <= left <= right <= length:
        raise ValueError("positions must satisfy 1 <= left <= right <= length")
    dummy = ListNode(next=head)
    before = dummy
    for _ in range(left - 1):
        before = before.next
    prev: Optional[ListNode] = None
    cur = before.next
    for _ in range(right - left + 1):
        following = cur.next
        cur.next = prev
        prev, cur = cur, following
    before.next.next = cur
    before.next = prev
    return dummy.next
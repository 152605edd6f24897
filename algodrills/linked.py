"""Singly linked lists: building, copying, pairing and merging."""

import heapq
from dataclasses import dataclass, field


@dataclass(eq=False)
class ListNode:
    """Node of a singly linked list."""

    val: int
    next: "ListNode | None" = None


@dataclass(eq=False)
class RandomNode:
    """List node that also holds a pointer to any node of the same list."""

    val: int
    next: "RandomNode | None" = None
    random: "RandomNode | None" = field(default=None, repr=False)


def build_list(values):
    """Return the head of a new list holding ``values``, or None if empty."""
    head = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def _walk(head):
    while head is not None:
        yield head
        head = head.next


def list_values(head):
    """Return the values of the list starting at ``head``."""
    return [node.val for node in _walk(head)]


def copy_random_list(head):
    """Return a deep copy of a list whose nodes also carry random pointers."""
    copies = {id(node): RandomNode(node.val) for node in _walk(head)}
    for node in _walk(head):
        copy = copies[id(node)]
        if node.next is not None:
            copy.next = copies[id(node.next)]
        if node.random is not None:
            copy.random = copies[id(node.random)]
    return None if head is None else copies[id(head)]


def pair_sum(head):
    """Return the largest sum of a node and its twin, the node at the
    mirrored position from the other end; 0 for an empty list."""
    values = list_values(head)
    return max(
        (front + back for front, back in zip(values, reversed(values))),
        default=0,
    )


def merge_k_lists(lists):
    """Merge sorted lists into one sorted list by relinking their nodes.

    ``None`` entries stand for empty lists; the merged head is returned.
    """
    heap = [(node.val, order, node) for order, node in enumerate(lists) if node]
    heapq.heapify(heap)
    head = tail = None
    while heap:
        _, order, node = heapq.heappop(heap)
        following = node.next
        node.next = None
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
        if following is not None:
            heapq.heappush(heap, (following.val, order, following))
    return head
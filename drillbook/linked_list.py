"""Singly linked list nodes and in-place list edits."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class ListNode:
    """One node of a singly linked list."""

    val: int = 0
    next: Optional[ListNode] = None

    @classmethod
    def from_values(cls, values: Iterable[int]) -> Optional[ListNode]:
        """Build a list from ``values`` and return its head, or None if empty."""
        head: Optional[ListNode] = None
        for value in reversed(list(values)):
            head = cls(value, head)
        return head

    def __iter__(self) -> Iterator[int]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next

    def __repr__(self) -> str:
        return f"ListNode({list(self)!r})"


def delete_node(node: ListNode) -> None:
    """Remove ``node`` from its list without access to the head.

    The node takes over its successor's value and link, so it cannot be
    the last node.
    """
    successor = node.next
    if successor is None:
        raise ValueError("cannot delete the last node of a list")
    node.val = successor.val
    node.next = successor.next


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Unlink the ``n``-th node from the end and return the list's head."""
    if n < 1:
        raise ValueError("n must be at least 1")
    lead = head
    for _ in range(n):
        if lead is None:
            raise ValueError("n exceeds the length of the list")
        lead = lead.next
    assert head is not None
    if lead is None:
        return head.next
    # Keep trail one node behind the node to remove.
    trail = head
    lead = lead.next
    while lead is not None:
        lead = lead.next
        assert trail.next is not None
        trail = trail.next
    assert trail.next is not None
    trail.next = trail.next.next
    return head
"""Singly linked list of integers."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass, field
from itertools import islice
from typing import Iterator, Optional

_LEADING_INT = re.compile(r"[+-]?\d+")


@dataclass(eq=False)
class Node:
    """A node of a singly linked list."""

    data: int
    next: Optional[Node] = field(default=None, repr=False)


class LinkedList:
    """Singly linked list that keeps head, tail and length."""

    def __init__(self, value: int) -> None:
        node = Node(value)
        self._head: Optional[Node] = node
        self._tail: Optional[Node] = node
        self._length = 1

    @classmethod
    def _empty(cls) -> LinkedList:
        instance = cls.__new__(cls)
        instance._head = None
        instance._tail = None
        instance._length = 0
        return instance

    @property
    def head(self) -> Optional[Node]:
        """First node, or None when the list is empty."""
        return self._head

    @property
    def tail(self) -> Optional[Node]:
        """Last node, or None when the list is empty."""
        return self._tail

    def __len__(self) -> int:
        return self._length

    def _nodes(self) -> Iterator[Node]:
        current = self._head
        while current is not None:
            yield current
            current = current.next

    def __iter__(self) -> Iterator[int]:
        for node in self._nodes():
            yield node.data

    def __str__(self) -> str:
        return "{" + ", ".join(str(value) for value in self) + "}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self})"

    def display(self) -> None:
        """Write the values to standard output as {a, b, c} and a newline."""
        sys.stdout.write(f"{self}\n")

    def __copy__(self) -> LinkedList:
        duplicate = LinkedList._empty()
        for value in self:
            duplicate.append(value)
        return duplicate

    def take(self) -> LinkedList:
        """Move all nodes into a new list, leaving this one empty."""
        moved = LinkedList._empty()
        moved._head, moved._tail, moved._length = self._head, self._tail, self._length
        self.clear()
        return moved

    def load(self, text: str) -> None:
        """Replace the contents with the integers read from the start of text.

        Reading stops at the first token that does not begin with an integer.
        """
        self.clear()
        for token in text.split():
            match = _LEADING_INT.match(token)
            if match is None:
                break
            self.append(int(match.group()))
            if match.end() != len(token):
                break

    def clear(self) -> None:
        """Remove every node."""
        self._head = self._tail = None
        self._length = 0

    def _check_index(self, index: int, size: int) -> None:
        if not 0 <= index < size:
            raise IndexError(f"index {index} out of range for length {self._length}")

    def append(self, value: int) -> None:
        """Add a node at the end."""
        node = Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._length += 1

    def prepend(self, value: int) -> None:
        """Add a node at the front."""
        node = Node(value, self._head)
        if self._head is None:
            self._tail = node
        self._head = node
        self._length += 1

    def delete_first(self) -> None:
        """Remove the first node; does nothing on an empty list."""
        if self._length <= 1:
            self.clear()
            return
        self._head = self._head.next
        self._length -= 1

    def delete_last(self) -> None:
        """Remove the last node; does nothing on an empty list."""
        if self._length <= 1:
            self.clear()
            return
        previous = self._head
        while previous.next is not self._tail:
            previous = previous.next
        previous.next = None
        self._tail = previous
        self._length -= 1

    def delete_node(self, index: int) -> None:
        """Remove the node at index; an index out of range is ignored."""
        if not 0 <= index < self._length:
            return
        if index == 0:
            self.delete_first()
        elif index == self._length - 1:
            self.delete_last()
        else:
            before = self.get(index - 1)
            before.next = before.next.next
            self._length -= 1

    def get(self, index: int) -> Node:
        """Return the node at index; raise IndexError when out of range."""
        self._check_index(index, self._length)
        return next(islice(self._nodes(), index, None))

    def set(self, index: int, value: int) -> None:
        """Replace the value at index; raise IndexError when out of range."""
        self.get(index).data = value

    def insert(self, index: int, value: int) -> None:
        """Insert value so that it ends up at index (0 to len inclusive)."""
        self._check_index(index, self._length + 1)
        if index == 0:
            self.prepend(value)
        elif index == self._length:
            self.append(value)
        else:
            before = self.get(index - 1)
            before.next = Node(value, before.next)
            self._length += 1

    def reverse(self) -> None:
        """Reverse the list in place."""
        before: Optional[Node] = None
        current = self._head
        self._head, self._tail = self._tail, self._head
        while current is not None:
            after = current.next
            current.next = before
            before = current
            current = after

    def find_middle_node(self) -> Optional[Node]:
        """Return the middle node (the second of two for even lengths), or None if empty."""
        slow = fast = self._head
        while fast is not None and fast.next is not None:
            slow = slow.next
            fast = fast.next.next
        return slow

    def has_loop(self) -> bool:
        """Tell whether following next links ever revisits a node."""
        slow = fast = self._head
        while fast is not None and fast.next is not None:
            slow = slow.next
            fast = fast.next.next
            if slow is fast:
                return True
        return False

    def find_kth_from_end(self, k: int) -> Node:
        """Return the k-th node counted from the end, k starting at 1."""
        if k < 1:
            raise ValueError(f"k must be at least 1, got {k}")
        slow = fast = self._head
        for _ in range(k):
            if fast is None:
                raise IndexError(f"k {k} exceeds the list length")
            fast = fast.next
        while fast is not None:
            slow = slow.next
            fast = fast.next
        return slow

    def remove_duplicates(self) -> None:
        """Keep only the first node of each value."""
        seen: set[int] = set()
        previous: Optional[Node] = None
        current = self._head
        while current is not None:
            if current.data in seen:
                previous.next = current.next
                self._length -= 1
            else:
                seen.add(current.data)
                previous = current
            current = current.next
        self._tail = previous

    def binary_to_decimal(self) -> int:
        """Read the values, head first, as binary digits."""
        number = 0
        for digit in self:
            number = number * 2 + digit
        return number

    def partition_list(self, limit: int) -> None:
        """Move values below limit before the rest, keeping relative order."""
        if self._head is None:
            return
        less_dummy, greater_dummy = Node(0), Node(0)
        less_tail, greater_tail = less_dummy, greater_dummy
        current = self._head
        while current is not None:
            following = current.next
            current.next = None
            if current.data < limit:
                less_tail.next = current
                less_tail = current
            else:
                greater_tail.next = current
                greater_tail = current
            current = following
        less_tail.next = greater_dummy.next
        self._head = less_dummy.next
        self._tail = greater_tail if greater_tail is not greater_dummy else less_tail

    def _refresh_tail(self) -> None:
        node = self._head
        while node is not None and node.next is not None:
            node = node.next
        self._tail = node

    def reverse_between(self, m: int, n: int) -> None:
        """Reverse the nodes from index m to index n inclusive."""
        if self._head is None or m == n:
            return
        if m < 0 or n >= self._length or m > n:
            raise IndexError(f"invalid range {m}..{n} for length {self._length}")
        dummy = Node(0, self._head)
        previous = dummy
        for _ in range(m):
            previous = previous.next
        start = previous.next
        for _ in range(n - m):
            moving = start.next
            start.next = moving.next
            moving.next = previous.next
            previous.next = moving
        self._head = dummy.next
        self._refresh_tail()

    def swap_pairs(self) -> None:
        """Swap every two adjacent nodes."""
        if self._head is None or self._head.next is None:
            return
        dummy = Node(0, self._head)
        previous = dummy
        while previous.next is not None and previous.next.next is not None:
            first = previous.next
            second = first.next
            first.next = second.next
            second.next = first
            previous.next = second
            previous = first
        self._head = dummy.next
        self._refresh_tail()
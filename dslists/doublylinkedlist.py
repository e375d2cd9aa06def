"""Doubly linked list of integers."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Iterator, Optional


@dataclass(eq=False)
class DNode:
    """A node of a doubly linked list."""

    value: int
    next: Optional[DNode] = field(default=None, repr=False)
    prev: Optional[DNode] = field(default=None, repr=False)

    @property
    def data(self) -> int:
        """The value held by the node."""
        return self.value

    @data.setter
    def data(self, value: int) -> None:
        self.value = value


class DoublyLinkedList:
    """Doubly linked list that keeps head, tail and length."""

    def __init__(self, value: int) -> None:
        node = DNode(value)
        self._head: Optional[DNode] = node
        self._tail: Optional[DNode] = node
        self._length = 1

    @property
    def head(self) -> Optional[DNode]:
        """First node, or None when the list is empty."""
        return self._head

    @property
    def tail(self) -> Optional[DNode]:
        """Last node, or None when the list is empty."""
        return self._tail

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[int]:
        current = self._head
        while current is not None:
            yield current.value
            current = current.next

    def __str__(self) -> str:
        return "{" + ", ".join(str(value) for value in self) + "}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self})"

    def display(self) -> None:
        """Write the values to standard output as {a, b, c} and a newline."""
        sys.stdout.write(f"{self}\n")

    def clear(self) -> None:
        """Remove every node."""
        self._head = self._tail = None
        self._length = 0

    def _check_index(self, index: int, size: int) -> None:
        if not 0 <= index < size:
            raise IndexError(f"index {index} out of range for length {self._length}")

    def append(self, value: int) -> None:
        """Add a node at the end."""
        node = DNode(value, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._length += 1

    def prepend(self, value: int) -> None:
        """Add a node at the front."""
        node = DNode(value, next=self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._length += 1

    def delete_first(self) -> None:
        """Remove the first node; does nothing on an empty list."""
        if self._length <= 1:
            self.clear()
            return
        self._head = self._head.next
        self._head.prev = None
        self._length -= 1

    def delete_last(self) -> None:
        """Remove the last node; does nothing on an empty list."""
        if self._length <= 1:
            self.clear()
            return
        self._tail = self._tail.prev
        self._tail.next = None
        self._length -= 1

    def get(self, index: int) -> DNode:
        """Return the node at index, walking from the nearer end.

        Raise IndexError when index is out of range.
        """
        self._check_index(index, self._length)
        if index < self._length // 2:
            node = self._head
            for _ in range(index):
                node = node.next
        else:
            node = self._tail
            for _ in range(self._length - 1 - index):
                node = node.prev
        return node

    def set(self, index: int, value: int) -> None:
        """Replace the value at index; raise IndexError when out of range."""
        self.get(index).value = value

    def insert_node(self, index: int, value: int) -> None:
        """Insert value so that it ends up at index (0 to len inclusive)."""
        self._check_index(index, self._length + 1)
        if index == 0:
            self.prepend(value)
        elif index == self._length:
            self.append(value)
        else:
            before = self.get(index - 1)
            after = before.next
            node = DNode(value, next=after, prev=before)
            before.next = node
            after.prev = node
            self._length += 1

    def delete_node(self, index: int) -> None:
        """Remove the node at index; an index out of range is ignored."""
        if not 0 <= index < self._length:
            return
        if index == 0:
            self.delete_first()
        elif index == self._length - 1:
            self.delete_last()
        else:
            target = self.get(index)
            target.prev.next = target.next
            target.next.prev = target.prev
            self._length -= 1
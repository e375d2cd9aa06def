"""First-in, first-out queue of integers."""

from __future__ import annotations

import sys
from collections import deque
from typing import Iterator


class Queue:
    """Queue created holding one value; iterates from front to back."""

    def __init__(self, value: int) -> None:
        self._items: deque[int] = deque([value])

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        """Yield values from front to back."""
        return iter(self._items)

    def __str__(self) -> str:
        return "{" + ", ".join(str(value) for value in self._items) + "}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self})"

    def display(self) -> None:
        """Write the values, front first, to standard output as {a, b, c} and a newline."""
        sys.stdout.write(f"{self}\n")

    def clear(self) -> None:
        """Remove every value."""
        self._items.clear()

    @property
    def size(self) -> int:
        """Number of values in the queue."""
        return len(self._items)

    def enqueue(self, value: int) -> None:
        """Add value at the back."""
        self._items.append(value)

    def dequeue(self) -> int:
        """Remove and return the front value; raise IndexError when empty."""
        if not self._items:
            raise IndexError("dequeue on an empty queue")
        return self._items.popleft()

    def peek(self) -> int:
        """Return the front value; raise IndexError when empty."""
        if not self._items:
            raise IndexError("peek on an empty queue")
        return self._items[0]
"""Last-in, first-out stack of integers."""

from __future__ import annotations

import sys
from collections import deque
from typing import Iterator


class Stack:
    """Stack created holding one value; iterates from top to bottom."""

    def __init__(self, value: int) -> None:
        self._items: deque[int] = deque([value])

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        """Yield values from top to bottom."""
        return iter(self._items)

    def __str__(self) -> str:
        return "{" + ", ".join(str(value) for value in self._items) + "}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self})"

    def display(self) -> None:
        """Write the values, top first, to standard output as {a, b, c} and a newline."""
        sys.stdout.write(f"{self}\n")

    def clear(self) -> None:
        """Remove every value."""
        self._items.clear()

    @property
    def height(self) -> int:
        """Number of values on the stack."""
        return len(self._items)

    def push(self, value: int) -> None:
        """Put value on top."""
        self._items.appendleft(value)

    def pop(self) -> int:
        """Remove and return the top value; raise IndexError when empty."""
        if not self._items:
            raise IndexError("pop on an empty stack")
        return self._items.popleft()

    def peek(self) -> int:
        """Return the top value; raise IndexError when empty."""
        if not self._items:
            raise IndexError("peek on an empty stack")
        return self._items[0]
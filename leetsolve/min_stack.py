"""A stack that reports its minimum in constant time."""

from __future__ import annotations


class MinStack:
    """Stack of integers that tracks the smallest value held."""

    def __init__(self) -> None:
        self._entries: list[tuple[int, int]] = []

    def __len__(self) -> int:
        return len(self._entries)

    def push(self, val: int) -> None:
        """Push a value onto the stack."""
        smallest = min(val, self._entries[-1][1]) if self._entries else val
        self._entries.append((val, smallest))

    def pop(self) -> None:
        """Remove the top value; raise IndexError if the stack is empty."""
        if not self._entries:
            raise IndexError("pop from empty stack")
        self._entries.pop()

    def top(self) -> int:
        """Return the top value; raise IndexError if the stack is empty."""
        if not self._entries:
            raise IndexError("top of empty stack")
        return self._entries[-1][0]

    def get_min(self) -> int:
        """Return the smallest value held; raise IndexError if empty."""
        if not self._entries:
            raise IndexError("minimum of empty stack")
        return self._entries[-1][1]
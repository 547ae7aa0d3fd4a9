"""Sixteen-level call stack of return addresses."""

from __future__ import annotations

STACK_SIZE = 16
"""Maximum stack depth."""


class StackError(Exception):
    """Raised on stack overflow or underflow."""


class Stack:
    """Fixed-size LIFO stack of 16-bit addresses."""

    def __init__(self) -> None:
        self._data = [0] * STACK_SIZE
        self._sp = 0

    def push(self, value: int) -> None:
        """Push an address; raises StackError when full."""
        if self._sp >= STACK_SIZE:
            raise StackError("Stack overflow!")
        self._data[self._sp] = value
        self._sp += 1

    def pop(self) -> int:
        """Pop the most recent address; raises StackError when empty."""
        if self._sp == 0:
            raise StackError("Stack underflow!")
        self._sp -= 1
        return self._data[self._sp]

    def reset(self) -> None:
        """Clear all entries and the stack pointer."""
        self._data = [0] * STACK_SIZE
        self._sp = 0

    def is_empty(self) -> bool:
        return self._sp == 0

    def is_full(self) -> bool:
        return self._sp == STACK_SIZE

    @property
    def sp(self) -> int:
        """Index of the next free slot."""
        return self._sp

    @property
    def data(self) -> tuple[int, ...]:
        """All sixteen slots, including ones above the stack pointer."""
        return tuple(self._data)

    def __len__(self) -> int:
        return self._sp
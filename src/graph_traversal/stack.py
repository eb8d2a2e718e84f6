"""
Fixed-capacity LIFO stack.

The capacity is set once at construction and never grows. Pushing onto a
full stack raises instead of overwriting the bottom slot.
"""

from __future__ import annotations

from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class StackError(Exception):
    """Base exception for stack contract violations."""

    pass


class CapacityExceededError(StackError):
    """Raised when pushing onto a stack that is already full."""

    pass


class EmptyStackError(StackError, IndexError):
    """Raised when popping or peeking an empty stack."""

    pass


class ArrayStack(Generic[T]):
    """
    Last-in-first-out container backed by a preallocated slot list.

    Example:
        stack: ArrayStack[int] = ArrayStack(3)
        stack.push(1)
        stack.push(2)
        stack.pop()   # 2
        stack.peek()  # 1
    """

    def __init__(self, capacity: int) -> None:
        """
        Initialize an empty stack.

        Args:
            capacity: Maximum number of items the stack can hold

        Raises:
            ValueError: If capacity is negative or not an integer
        """
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise ValueError(f"capacity must be an integer, got {capacity!r}")
        if capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {capacity}")

        self._items: list[Optional[T]] = [None] * capacity
        self._top = -1

    @property
    def capacity(self) -> int:
        """Maximum number of items."""
        return len(self._items)

    def __len__(self) -> int:
        return self._top + 1

    def __repr__(self) -> str:
        return f"ArrayStack(size={len(self)}, capacity={self.capacity})"

    def push(self, item: T) -> None:
        """Add item at the top of the stack."""
        if self._top + 1 >= len(self._items):
            raise CapacityExceededError(
                f"cannot push onto a full stack (capacity {self.capacity})"
            )
        self._top += 1
        self._items[self._top] = item

    def pop(self) -> T:
        """Remove and return the item at the top of the stack."""
        item = self.peek()
        self._items[self._top] = None
        self._top -= 1
        return item

    def peek(self) -> T:
        """Return the item at the top of the stack without removing it."""
        if self._top < 0:
            raise EmptyStackError("stack is empty")
        return self._items[self._top]  # type: ignore[return-value]

    def is_empty(self) -> bool:
        return self._top < 0

    def is_full(self) -> bool:
        return self._top + 1 == len(self._items)

    def clear(self) -> None:
        """Remove all items."""
        for i in range(self._top + 1):
            self._items[i] = None
        self._top = -1


__all__ = [
    "ArrayStack",
    "StackError",
    "CapacityExceededError",
    "EmptyStackError",
]

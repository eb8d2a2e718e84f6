"""Tests for the fixed-capacity stack."""

import pytest

from graph_traversal.stack import (
    ArrayStack,
    CapacityExceededError,
    EmptyStackError,
    StackError,
)


class TestArrayStack:
    """Tests for push/pop/peek ordering."""

    def test_new_stack_is_empty(self):
        """A fresh stack holds nothing."""
        stack = ArrayStack(4)
        assert stack.is_empty()
        assert len(stack) == 0
        assert stack.capacity == 4

    def test_lifo_order(self):
        """Items come back in reverse push order."""
        stack = ArrayStack(3)
        for item in (1, 2, 3):
            stack.push(item)
        assert [stack.pop(), stack.pop(), stack.pop()] == [3, 2, 1]
        assert stack.is_empty()

    def test_peek_does_not_remove(self):
        """peek returns the top without changing the size."""
        stack = ArrayStack(2)
        stack.push("a")
        stack.push("b")
        assert stack.peek() == "b"
        assert stack.peek() == "b"
        assert len(stack) == 2

    def test_clear(self):
        """clear empties the stack and allows reuse up to capacity."""
        stack = ArrayStack(2)
        stack.push(1)
        stack.push(2)
        stack.clear()
        assert stack.is_empty()
        stack.push(3)
        stack.push(4)
        assert stack.is_full()
        assert stack.pop() == 4

    def test_zero_capacity(self):
        """A zero-capacity stack is both empty and full."""
        stack = ArrayStack(0)
        assert stack.is_empty()
        assert stack.is_full()


class TestArrayStackErrors:
    """Tests for contract violations."""

    def test_push_beyond_capacity_raises(self):
        """Pushing onto a full stack fails instead of wrapping around."""
        stack = ArrayStack(2)
        stack.push(1)
        stack.push(2)
        with pytest.raises(CapacityExceededError, match="capacity 2"):
            stack.push(3)
        # Existing contents are untouched
        assert stack.pop() == 2
        assert stack.pop() == 1

    def test_pop_empty_raises(self):
        """Popping an empty stack raises EmptyStackError."""
        with pytest.raises(EmptyStackError):
            ArrayStack(1).pop()

    def test_peek_empty_raises(self):
        """Peeking an empty stack raises EmptyStackError."""
        with pytest.raises(EmptyStackError):
            ArrayStack(1).peek()

    def test_empty_error_is_index_error(self):
        """EmptyStackError can be caught as IndexError."""
        with pytest.raises(IndexError):
            ArrayStack(0).pop()

    def test_errors_share_base(self):
        """Both stack errors derive from StackError."""
        assert issubclass(CapacityExceededError, StackError)
        assert issubclass(EmptyStackError, StackError)

    @pytest.mark.parametrize("capacity", [-1, 1.5, "3", True])
    def test_invalid_capacity(self, capacity):
        """Negative or non-integer capacities are rejected."""
        with pytest.raises(ValueError):
            ArrayStack(capacity)

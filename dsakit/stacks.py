"""Stacks backed by a bounded array, a growing array and a linked list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

_INITIAL_CAPACITY = 4


class StackOverflowError(OverflowError):
    """Raised when pushing onto a full fixed-capacity stack."""


class ArrayStack:
    """A stack holding at most ``capacity`` elements."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self._capacity = capacity
        self._items: list = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def push(self, value: Any) -> None:
        """Place value on top; raises StackOverflowError when full."""
        if len(self._items) == self._capacity:
            raise StackOverflowError("stack is full")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top element."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def top(self) -> Any:
        """The top element, left in place."""
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


class DynamicStack:
    """A stack whose capacity starts at four and doubles whenever it fills."""

    def __init__(self) -> None:
        self._capacity = _INITIAL_CAPACITY
        self._items: list = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def push(self, value: Any) -> None:
        """Place value on top, doubling the capacity if needed."""
        if len(self._items) == self._capacity:
            self._capacity *= 2
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top element."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def top(self) -> Any:
        """The top element, left in place."""
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


@dataclass
class _Node:
    value: Any
    below: Optional["_Node"]


class LinkedStack:
    """A stack built from singly linked nodes, the head being the top."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._size = 0

    def push(self, value: Any) -> None:
        """Place value on top."""
        self._head = _Node(value, self._head)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top element."""
        if self._head is None:
            raise IndexError("pop from an empty stack")
        value = self._head.value
        self._head = self._head.below
        self._size -= 1
        return value

    def top(self) -> Any:
        """The top element, left in place."""
        if self._head is None:
            raise IndexError("top of an empty stack")
        return self._head.value

    def is_empty(self) -> bool:
        return self._head is None

    def __len__(self) -> int:
        return self._size
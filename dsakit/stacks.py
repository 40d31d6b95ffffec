"""Stack and queue utilities: next greater element, stack reversal, linked stack and queue."""

from __future__ import annotations

from collections.abc import Iterator, MutableSequence, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


def next_greater_elements(values: Sequence[int]) -> list[int]:
    """Return, for each element, the next larger element to its right, or -1."""
    result = [-1] * len(values)
    pending: list[int] = []
    for index, value in enumerate(values):
        while pending and value > values[pending[-1]]:
            result[pending.pop()] = value
        pending.append(index)
    return result


def insert_at_bottom(stack: MutableSequence[Any], item: Any) -> None:
    """Put ``item`` at the bottom of a list used as a stack (top at the end)."""
    stack.insert(0, item)


def reverse_stack(stack: MutableSequence[Any]) -> None:
    """Reverse a list used as a stack in place, moving each item to the bottom."""
    items = list(stack)
    del stack[:]
    for item in items:
        insert_at_bottom(stack, item)


@dataclass
class _Node(Generic[T]):
    item: T
    next: _Node[T] | None = None


def _walk(node: _Node[T] | None) -> Iterator[T]:
    while node is not None:
        yield node.item
        node = node.next


class LinkedStack(Generic[T]):
    """A last-in first-out stack built from linked nodes."""

    def __init__(self) -> None:
        self._top: _Node[T] | None = None
        self._size = 0

    def push(self, item: T) -> None:
        """Put ``item`` on top."""
        self._top = _Node(item, self._top)
        self._size += 1

    def pop(self) -> T:
        """Remove and return the top item; IndexError when empty."""
        if self._top is None:
            raise IndexError("stack underflow")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.item

    def peek(self) -> T:
        """Return the top item without removing it; IndexError when empty."""
        if self._top is None:
            raise IndexError("stack is empty")
        return self._top.item

    def is_empty(self) -> bool:
        return self._top is None

    def __iter__(self) -> Iterator[T]:
        """Iterate from top to bottom."""
        return _walk(self._top)

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return " -> ".join(str(item) for item in self)


class LinkedQueue(Generic[T]):
    """A first-in first-out queue built from linked nodes."""

    def __init__(self) -> None:
        self._front: _Node[T] | None = None
        self._rear: _Node[T] | None = None
        self._size = 0

    def enqueue(self, item: T) -> None:
        """Add ``item`` at the rear."""
        node = _Node(item)
        if self._rear is None:
            self._front = self._rear = node
        else:
            self._rear.next = node
            self._rear = node
        self._size += 1

    def dequeue(self) -> T | None:
        """Remove and return the front item; an empty queue is left as is and gives None."""
        if self._front is None:
            return None
        node = self._front
        self._front = node.next
        if self._front is None:
            self._rear = None
        self._size -= 1
        return node.item

    def front(self) -> T | None:
        """Return the front item, or None when empty."""
        return None if self._front is None else self._front.item

    def rear(self) -> T | None:
        """Return the rear item, or None when empty."""
        return None if self._rear is None else self._rear.item

    def is_empty(self) -> bool:
        return self._front is None

    def __iter__(self) -> Iterator[T]:
        """Iterate from front to rear."""
        return _walk(self._front)

    def __len__(self) -> int:
        return self._size
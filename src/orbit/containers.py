"""Ordered containers used for per-user logs and graph adjacency.

Both containers own their elements and support independent copies plus
non-destructive iteration, so read-only queries never drain live state.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from typing import Any, Generic, TypeVar

from orbit.errors import EmptyContainerError

T = TypeVar("T")


class OrderedStack(Generic[T]):
    """LIFO stack.

    Iteration and ``snapshot()`` run from the top (most recent) to the bottom.
    """

    def __init__(self, items: Iterable[T] = ()) -> None:
        # Right end is the top.
        self._items: deque[T] = deque(items)

    def push(self, value: T) -> None:
        self._items.append(value)

    def pop(self) -> T:
        """Remove and return the top element.

        Raises:
            EmptyContainerError: If the stack is empty.
        """
        if not self._items:
            raise EmptyContainerError("Stack underflow: pop from an empty stack")
        return self._items.pop()

    def peek(self) -> T:
        """Return the top element without removing it.

        Raises:
            EmptyContainerError: If the stack is empty.
        """
        if not self._items:
            raise EmptyContainerError("Stack is empty: cannot peek")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def size(self) -> int:
        return len(self._items)

    def clear(self) -> None:
        self._items.clear()

    def copy(self) -> OrderedStack[T]:
        return OrderedStack(self._items)

    def snapshot(self) -> list[T]:
        """Elements from top to bottom, without mutating the stack."""
        return list(reversed(self._items))

    def __copy__(self) -> OrderedStack[T]:
        return self.copy()

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[T]:
        return reversed(list(self._items))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrderedStack):
            return NotImplemented
        return list(self._items) == list(other._items)

    def __repr__(self) -> str:
        return f"OrderedStack({self.snapshot()!r})"


class OrderedQueue(Generic[T]):
    """FIFO queue.

    Iteration and ``snapshot()`` run from the front (oldest) to the rear.
    """

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: deque[T] = deque(items)

    def enqueue(self, value: T) -> None:
        self._items.append(value)

    def dequeue(self) -> T:
        """Remove and return the front element.

        Raises:
            EmptyContainerError: If the queue is empty.
        """
        if not self._items:
            raise EmptyContainerError("Queue is empty: cannot dequeue")
        return self._items.popleft()

    def peek(self) -> T:
        """Return the front element without removing it.

        Raises:
            EmptyContainerError: If the queue is empty.
        """
        if not self._items:
            raise EmptyContainerError("Queue is empty: cannot peek")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def size(self) -> int:
        return len(self._items)

    def clear(self) -> None:
        self._items.clear()

    def copy(self) -> OrderedQueue[T]:
        return OrderedQueue(self._items)

    def snapshot(self) -> list[T]:
        """Elements from front to rear, without mutating the queue."""
        return list(self._items)

    def count(self, value: Any) -> int:
        return self._items.count(value)

    def __copy__(self) -> OrderedQueue[T]:
        return self.copy()

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[T]:
        # Iterate a frozen copy so callers may enqueue while looping.
        return iter(list(self._items))

    def __contains__(self, value: object) -> bool:
        return value in self._items

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrderedQueue):
            return NotImplemented
        return list(self._items) == list(other._items)

    def __repr__(self) -> str:
        return f"OrderedQueue({self.snapshot()!r})"

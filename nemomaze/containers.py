"""Stack and queue adapters built on :class:`DLList`."""

from __future__ import annotations

from typing import Generic, TypeVar

from nemomaze.dllist import DLList

T = TypeVar("T")


class Stack(Generic[T]):
    """Last-in, first-out collection."""

    def __init__(self) -> None:
        self._list: DLList[T] = DLList()

    def push(self, item: T) -> None:
        self._list.add_front(item)

    def pop(self) -> None:
        """Discard the top item; does nothing when the stack is empty."""
        self._list.remove_front()

    def peek(self) -> T:
        """Return the top item; raises IndexError when empty."""
        return self._list.front()

    def empty(self) -> bool:
        return self._list.empty()

    def __str__(self) -> str:
        return str(self._list)


class Queue(Generic[T]):
    """First-in, first-out collection."""

    def __init__(self) -> None:
        self._list: DLList[T] = DLList()

    def enqueue(self, item: T) -> None:
        self._list.add_rear(item)

    def dequeue(self) -> None:
        """Discard the front item; does nothing when the queue is empty."""
        self._list.remove_front()

    def peek(self) -> T:
        """Return the front item; raises IndexError when empty."""
        return self._list.front()

    def empty(self) -> bool:
        return self._list.empty()

    def __str__(self) -> str:
        return str(self._list)
"""A double-ended list with the search and removal operations the maze uses."""

from __future__ import annotations

from collections import deque
from typing import Any, Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")

NOT_FOUND = -42
"""Index reported by :meth:`DLList.search` when an item is absent."""


class DLList(Generic[T]):
    """An ordered sequence with cheap insertion and removal at both ends."""

    def __init__(self, items: Iterable[T] | None = None) -> None:
        self._items: deque[T] = deque(items if items is not None else ())

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __str__(self) -> str:
        return " ".join(str(item) for item in self._items)

    def __repr__(self) -> str:
        return f"DLList({list(self._items)!r})"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, DLList):
            return NotImplemented
        return self._items == other._items

    def copy(self) -> DLList[T]:
        """Return an independent list holding the same items in order."""
        return DLList(self._items)

    def empty(self) -> bool:
        return not self._items

    def add_front(self, item: T) -> None:
        self._items.appendleft(item)

    def add_rear(self, item: T) -> None:
        self._items.append(item)

    def add(self, index: int, item: T) -> None:
        """Insert before ``index``; out-of-range indices clamp to either end."""
        if index <= 0:
            self.add_front(item)
        elif index >= len(self._items):
            self.add_rear(item)
        else:
            self._items.insert(index, item)

    def front(self) -> T:
        if not self._items:
            raise IndexError("front of an empty list")
        return self._items[0]

    def rear(self) -> T:
        if not self._items:
            raise IndexError("rear of an empty list")
        return self._items[-1]

    def peek(self, index: int) -> T:
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range")
        return self._items[index]

    def items(self, item: T) -> int:
        """Count how many times ``item`` occurs."""
        return self._items.count(item)

    def search(self, item: T) -> int:
        """Return the index of the first ``item``, or ``NOT_FOUND``."""
        for index, value in enumerate(self._items):
            if value == item:
                return index
        return NOT_FOUND

    def remove_front(self) -> bool:
        if not self._items:
            return False
        self._items.popleft()
        return True

    def remove_rear(self) -> bool:
        if not self._items:
            return False
        self._items.pop()
        return True

    def remove_index(self, index: int) -> bool:
        if not 0 <= index < len(self._items):
            return False
        del self._items[index]
        return True

    def remove_item(self, item: T) -> int:
        """Remove the first ``item``; return its former index or ``NOT_FOUND``."""
        index = self.search(item)
        if index >= 0:
            self.remove_index(index)
        return index

    def sub_list(self, sub: DLList[T]) -> bool:
        """Report whether ``sub`` appears as a run of consecutive items.

        The scan restarts the match at the current item after a mismatch
        rather than rewinding, so overlapping partial matches can be missed.
        """
        if sub.empty():
            return True
        if self.empty() or len(sub) > len(self):
            return False
        pattern = list(sub)
        matched = 0
        for value in self._items:
            if pattern[matched] == value:
                matched += 1
            else:
                matched = 1 if pattern[0] == value else 0
            if matched == len(pattern):
                return True
        return False
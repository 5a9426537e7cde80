"""A bounded max-heap kept in a flat list."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = ["MaxHeap"]

DEFAULT_CAPACITY = 999


class MaxHeap:
    """Max-heap of integers with a fixed capacity."""

    def __init__(self, values: Iterable[int] = (), capacity: int = DEFAULT_CAPACITY):
        self._items: list[int] = []
        self.capacity = capacity
        for value in values:
            self.push(value)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"MaxHeap({self._items!r})"

    def push(self, value: int) -> None:
        """Add ``value``, sifting it up to its place."""
        if len(self._items) >= self.capacity:
            raise OverflowError("heap is full")
        items = self._items
        items.append(value)
        i = len(items) - 1
        while i > 0:
            parent = (i - 1) // 2
            if items[parent] >= items[i]:
                break
            items[parent], items[i] = items[i], items[parent]
            i = parent

    def pop(self) -> int:
        """Remove and return the largest value."""
        items = self._items
        if not items:
            raise IndexError("pop from empty heap")
        top = items[0]
        last = items.pop()
        if items:
            items[0] = last
            self._sift_down(0)
        return top

    def _sift_down(self, i: int) -> None:
        items = self._items
        size = len(items)
        while True:
            left = 2 * i + 1
            if left >= size:
                return
            child = left
            right = left + 1
            if right < size and items[right] > items[left]:
                child = right
            if items[child] <= items[i]:
                return
            items[child], items[i] = items[i], items[child]
            i = child

    def top(self) -> int:
        """Return the largest value without removing it."""
        if not self._items:
            raise IndexError("top of empty heap")
        return self._items[0]

    def items(self) -> list[int]:
        """Return the stored values in heap order."""
        return list(self._items)
"""Circular doubly linked list over 0..size-1 stored as relative link offsets."""

from __future__ import annotations


class LargeDoubleLinkedList:
    """Holds the indices 0..size-1 and hands them out while removing them.

    Each element keeps the distance to its predecessor and to its successor
    in a flat list; removing an element merges those distances.
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._links = [1] * (size * 2)
        self._current: int | None = None if size == 0 else 0

    def get(self) -> int:
        """Remove and return the current element."""
        if self._current is None:
            raise IndexError("get from an empty list")
        value = self._current
        self.remove(value)
        return value

    def remove(self, idx: int) -> int:
        """Remove ``idx``; return the new current element, or ``idx`` if it was the last."""
        if self._current is None:
            raise IndexError("remove from an empty list")
        links = self._links
        n = len(links)
        actual = idx * 2
        prev = (actual - links[actual] * 2) % n
        if prev == actual:
            self._current = None
            return idx
        links[prev + 1] += links[actual + 1]
        nxt = (actual + links[actual + 1] * 2) % n
        links[nxt] += links[actual]
        self._current = nxt // 2
        return self._current

    def is_empty(self) -> bool:
        return self._current is None

    def __bool__(self) -> bool:
        return not self.is_empty()
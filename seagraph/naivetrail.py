"""Straightforward trail bookkeeping for one vertex during Hierholzer's algorithm."""

from __future__ import annotations

from collections import deque


class NaiveTrailStructure:
    """Tracks which arcs of a vertex are used and how they pair into trails.

    The vertex is white until an arc is used, grey afterwards, and black once
    every arc is used.
    """

    def __init__(self, degree: int) -> None:
        self._paired: dict[int, int | None] = {}
        self._unused: deque[int] = deque(range(degree))
        self._current_degree = degree
        self._black = degree == 0
        self._grey = False

    def leave(self) -> int | None:
        """Use the first unused arc to leave the vertex; None if none is left."""
        if not self._unused:
            return None
        arc = self._unused.popleft()
        if not self._unused:
            self._black = True
        self._grey = True
        self._paired[arc] = None
        self._current_degree -= 1
        return arc

    def enter(self, idx: int) -> int | None:
        """Enter by arc ``idx`` and leave by the next unused arc, pairing the two.

        Returns the arc left by, or None if ``idx`` was not unused or no arc remains.
        """
        if not self._unused:
            return None
        try:
            self._unused.remove(idx)
        except ValueError:
            return None
        self._current_degree -= 1
        if not self._unused:
            self._black = True
            self._paired[idx] = None
            return None
        self._grey = True
        nxt = self.leave()
        if nxt is not None:
            self._paired[nxt] = idx
            self._paired[idx] = nxt
        return nxt

    def is_black(self) -> bool:
        return self._black

    def is_white(self) -> bool:
        return not self.is_grey()

    def is_grey(self) -> bool:
        return self._grey

    def is_even(self) -> bool:
        return self._current_degree % 2 == 0

    def get_matched(self, i: int) -> int | None:
        """The arc paired with ``i``, or None if it has no partner."""
        return self._paired.get(i)
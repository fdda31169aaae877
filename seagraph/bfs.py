"""Breadth-first search over a graph, one visited vertex per step."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from enum import IntEnum

from .compactarray import CompactArray


class Color(IntEnum):
    WHITE = 0
    GRAY1 = 1
    GRAY2 = 2
    BLACK = 3


class BFS:
    """Stepwise BFS using two gray colours to tell the current layer from the next.

    ``preprocess(u)`` runs when a vertex is discovered and ``preexplore(u, v)``
    for every arc that is looked at.
    """

    def __init__(
        self,
        graph,
        preprocess: Callable[[int], object] | None = None,
        preexplore: Callable[[int, int], object] | None = None,
    ) -> None:
        self._graph = graph
        self._n = graph.order()
        self._color = CompactArray(self._n, len(Color))
        for a in range(self._n):
            self._color.insert(a, Color.WHITE)
        self._preprocess = preprocess
        self._preexplore = preexplore
        self._u = 0
        self._dist = 0
        self._inner = Color.GRAY1
        self._outer = Color.GRAY2

    def _discover(self, u: int, color: Color) -> None:
        if self._preprocess is not None:
            self._preprocess(u)
        self._color.insert(u, color)

    def init(self) -> None:
        """Start the search at vertex 0."""
        self._u = 0
        self._dist = 0
        self._inner = Color.GRAY1
        self._outer = Color.GRAY2
        self._discover(0, self._inner)

    def next_component(self) -> bool:
        """Start at the first white vertex; False if every vertex was reached."""
        for a in range(self._n):
            if self._color.get(a) == Color.WHITE:
                self._u = a
                self._dist = 0
                self._discover(a, self._inner)
                return True
        return False

    def _gray_node(self) -> int:
        for wanted in (self._inner, self._outer):
            for a in range(self._n):
                if self._color.get(a) == wanted:
                    return a
        raise RuntimeError(
            "BFS: no more gray nodes found; did you forget to call next_component()?"
        )

    def more(self) -> bool:
        return any(
            self._color.get(a) in (Color.GRAY1, Color.GRAY2) for a in range(self._n)
        )

    def next(self) -> tuple[int, int]:
        """Process the next gray vertex; return it with its distance from the start."""
        u = self._gray_node()
        self._u = u
        if self._color.get(u) == self._outer:
            self._inner, self._outer = self._outer, self._inner
            self._dist += 1
        for k in range(self._graph.node_degree(u)):
            v = self._graph.head(u, k)
            if self._preexplore is not None:
                self._preexplore(u, v)
            if self._color.get(v) == Color.WHITE:
                self._discover(v, self._outer)
        self._color.insert(u, Color.BLACK)
        return u, self._dist

    def __iter__(self) -> Iterator[tuple[int, int]]:
        """Run a fresh search over all components, yielding (vertex, distance)."""
        self.init()
        while True:
            while self.more():
                yield self.next()
            if not self.next_component():
                return
"""Subgraphs addressed by 1-based vertices and arcs through rank and select."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .bitset import Bitset
from .graph import BasicGraph
from .rankselect import RankSelect


def _select(structure: RankSelect, i: int | None) -> int | None:
    return None if i is None else structure.select(i)


class SubGraph(ABC):
    """A graph view whose vertices 1..n and arcs 1..m are numbered consecutively.

    ``q`` marks vertices with at least one arc; ``p`` marks the last arc of
    each such vertex.
    """

    def __init__(self, sidx: int, ridx: int, q_select: RankSelect, p_select: RankSelect) -> None:
        self.sidx = sidx
        self.ridx = ridx
        self._q = q_select
        self._p = p_select

    def _rank_q(self, i: int) -> int | None:
        return self._q.rank(i)

    def _rank_p(self, i: int) -> int | None:
        return self._p.rank(i)

    def degree(self, u: int) -> int:
        if u == 0:
            raise ValueError("u needs to be > 0")
        if u > self.order():
            raise IndexError(f"vertex {u} out of range for order {self.order()}")
        a = _select(self._p, self._rank_q(u))
        b = _select(self._p, self._rank_q(u - 1))
        if a == b:
            return 0
        if b is None:
            return a  # type: ignore[return-value]
        return a - b  # type: ignore[operator]

    @abstractmethod
    def head(self, u: int, k: int) -> int:
        """Head of the k-th arc of u."""

    @abstractmethod
    def mate(self, u: int, k: int) -> tuple[int, int]:
        """Head of the k-th arc of u and the index of the reverse arc there."""

    def order(self) -> int:
        return self._q.size()

    def g(self, j: int, k: int) -> int:
        """Number of the k-th arc of vertex j among all arcs."""
        if j == 0 or k == 0:
            raise ValueError(f"j and k need to be > 0! (j,k)=({j},{k})")
        deg = self.degree(j)
        if deg == 0 or k > deg:
            raise IndexError(f"node j has a degree < k! (j,k)=({j},{k})")
        q_rank = self._rank_q(j)
        before = 0
        if q_rank is not None and q_rank > 1:
            before = self._p.select(q_rank - 1) or 0
        return before + k

    def g_max(self) -> int:
        """Number of arcs."""
        return self._p.size()

    def g_inv(self, r: int) -> tuple[int, int]:
        """The (vertex, arc index) pair of arc number r."""
        if r == 0:
            raise ValueError(f"r needs to be > 0 (r = {r})")
        j = 0 if r == 1 else self._rank_p(r - 1)
        if j is None:
            raise IndexError(f"out of range - no arc r exists! (r = {r})")
        j += 1
        a = self._q.select(j)
        if a is None:
            raise IndexError(f"out of range - no arc r exists! (r = {r})")
        b = _select(self._p, j - 1) or 0
        return a, r - b

    @abstractmethod
    def phi(self, u: int) -> int:
        """Vertex of the underlying graph for vertex u."""

    @abstractmethod
    def psi(self, a: int) -> int:
        """Arc of the underlying graph for arc a."""

    @abstractmethod
    def phi_inv(self, u: int) -> int:
        """Vertex of this subgraph for vertex u of the underlying graph."""

    @abstractmethod
    def psi_inv(self, a: int) -> int:
        """Arc of this subgraph for arc a of the underlying graph."""


class BaseSubGraph(SubGraph):
    """The whole of a :class:`BasicGraph`, seen as a subgraph of itself."""

    def __init__(self, graph: BasicGraph) -> None:
        degrees = [graph.node_degree(i) for i in range(graph.order())]
        q = Bitset(len(degrees))
        p = Bitset(sum(degrees))
        end = 0
        for i, deg in enumerate(degrees):
            if deg > 0:
                q[i] = True
                end += deg
                p[end - 1] = True
        super().__init__(0, 0, RankSelect(q), RankSelect(p))
        self._graph = graph

    def head(self, u: int, k: int) -> int:
        if u == 0 or k == 0:
            raise ValueError("u and k need to be > 0")
        return self._graph.head(u - 1, k - 1) + 1

    def mate(self, u: int, k: int) -> tuple[int, int]:
        if u == 0 or k == 0:
            raise ValueError("u and k need to be > 0")
        v, cross = self._graph.mate(u - 1, k - 1)
        if cross is None:
            raise ValueError(f"arc ({u},{k}) has no reverse arc")
        return v + 1, cross + 1

    def phi(self, u: int) -> int:
        if u == 0:
            raise ValueError("u needs to be > 0")
        return u

    def psi(self, a: int) -> int:
        if a == 0:
            raise ValueError("a needs to be > 0")
        return a

    def phi_inv(self, u: int) -> int:
        if u == 0:
            raise ValueError("u needs to be > 0")
        return u

    def psi_inv(self, a: int) -> int:
        if a == 0:
            raise ValueError("a needs to be > 0")
        return a
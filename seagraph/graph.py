"""Graph types: adjacency-list graphs with cross indices, and the compact array form."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence
from dataclasses import dataclass


@dataclass
class Adjacency:
    """One arc to ``vertex``; ``cross_index`` is the position of the reverse arc, if known."""

    vertex: int | None = None
    cross_index: int | None = None


class Node:
    """A vertex holding its list of outgoing adjacencies."""

    def __init__(self, adj: Iterable[Adjacency] = ()) -> None:
        self.adj = [Adjacency(a.vertex, a.cross_index) for a in adj]

    def degree(self) -> int:
        return len(self.adj)

    def set_cross_index(self, adj_index: int, cross_index: int) -> None:
        self.adj[adj_index].cross_index = cross_index

    def add_adjacency(self, vertex: int) -> None:
        self.adj.append(Adjacency(vertex))

    def __repr__(self) -> str:
        return f"Node({self.adj!r})"


class BasicGraph:
    """Graph as a list of nodes with adjacency lists."""

    def __init__(self, nodes: Iterable[Node] = ()) -> None:
        self.nodes = list(nodes)

    @classmethod
    def with_order(cls, order: int) -> BasicGraph:
        """A graph of ``order`` vertices without arcs."""
        return cls(Node() for _ in range(order))

    def add_node(self, node: Node) -> None:
        self.nodes.append(node)

    def node(self, u: int) -> Node:
        return self.nodes[u]

    def node_degree(self, u: int) -> int:
        return self.nodes[u].degree()

    def head(self, u: int, k: int) -> int:
        return self.nodes[u].adj[k].vertex

    def order(self) -> int:
        return len(self.nodes)

    def mate(self, u: int, k: int) -> tuple[int, int | None]:
        """Head of arc ``k`` of ``u`` and the index of the reverse arc there."""
        arc = self.nodes[u].adj[k]
        return arc.vertex, arc.cross_index


class Compactgraph:
    """Graph in the standard array form.

    ``data[0]`` is the order n, ``data[1..n]`` point to each vertex's adjacency
    run (a vertex without arcs points to itself), ``data[n+1]`` is the arc
    count and the runs follow, holding 1-based vertex names.
    """

    def __init__(self, data: MutableSequence[int]) -> None:
        self.data = data

    def node_degree(self, u: int) -> int:
        a = self.data
        u += 1
        if a[u] == u:
            return 0
        if u != self.order():
            return a[u + 1] - a[u]
        return (a[0] + a[a[0] + 1] + 2) - a[u]

    def head(self, u: int, k: int) -> int:
        return self.data[self.data[u + 1] + k]

    def order(self) -> int:
        return self.data[0]
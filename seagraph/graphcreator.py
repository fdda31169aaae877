"""Builders for adjacency-list graphs: from a matrix and several random shapes."""

from __future__ import annotations

import math
import random
from collections.abc import Sequence

from .graph import Adjacency, BasicGraph, Node


def _source(rng: random.Random | None) -> random.Random:
    return rng if rng is not None else random.Random()


def graph_from_adjacency_matrix(matrix: Sequence[Sequence[int]]) -> BasicGraph:
    """Build a graph where ``matrix[i][j]`` is the number of arcs from i to j.

    Arcs are paired with reverse arcs in order of appearance, and each arc's
    cross index names the position of its partner in the head's list.
    """
    order = len(matrix)
    nodes = []
    for row in matrix:
        if len(row) != order:
            raise ValueError("adjacency matrix must be square")
        adj = [Adjacency(j) for j, count in enumerate(row) for _ in range(count)]
        nodes.append(Node(adj))

    for i, node in enumerate(nodes):
        for j, arc in enumerate(node.adj):
            if arc.cross_index is not None:
                continue
            other = nodes[arc.vertex]
            for back_j, back in enumerate(other.adj):
                if back.cross_index is None and back.vertex == i:
                    other.set_cross_index(back_j, j)
                    node.set_cross_index(j, back_j)
                    break
    return BasicGraph(nodes)


def random_imbalanced(order: int, rng: random.Random | None = None) -> BasicGraph:
    """Random directed graph with a few vertices of very high out-degree.

    About ``order / (2 log2 order)`` vertices get between order² and 2·order²
    arcs; all others get at most ``ceil(log2 order)``.
    """
    if order < 2:
        raise ValueError("order must be at least 2")
    rng = _source(rng)
    log_order = math.log2(order)
    small_max = math.ceil(log_order)
    big = {rng.randint(0, order - 1) for _ in range(math.ceil(order / (2 * log_order)))}
    nodes = []
    for a in range(order):
        if a in big:
            degree = rng.randint(order * order, 2 * order * order)
        else:
            degree = rng.randint(0, small_max)
        nodes.append(Node(Adjacency(rng.randint(0, order - 1)) for _ in range(degree)))
    return BasicGraph(nodes)


def random_bipartite(order1: int, order2: int, p: float, seed: int) -> BasicGraph:
    """Graph of ``order1 + order2`` vertices with random undirected edges.

    Each pair ``(n1, n2)`` with ``n1 < order1`` and ``order1 <= n2 < order2``
    is joined with probability ``p``.
    """
    graph = BasicGraph.with_order(order1 + order2)
    rng = random.Random(seed)
    for n1 in range(order1):
        for n2 in range(order1, order2):
            if rng.random() < p:
                node1 = graph.node(n1)
                node2 = graph.node(n2)
                idx1 = node1.degree()
                idx2 = node2.degree()
                node1.add_adjacency(n2)
                node1.set_cross_index(idx1, idx2)
                node2.add_adjacency(n1)
                node2.set_cross_index(idx2, idx1)
    return graph


def random_fixed(
    order: int, degree_per_node: int, rng: random.Random | None = None
) -> BasicGraph:
    """Random directed graph where every vertex has exactly ``degree_per_node`` arcs."""
    rng = _source(rng)
    nodes = [
        Node(Adjacency(rng.randint(0, order - 1)) for _ in range(degree_per_node))
        for _ in range(order)
    ]
    return BasicGraph(nodes)


def random_generated(order: int, rng: random.Random | None = None) -> BasicGraph:
    """Random directed graph where each vertex has a random out-degree below ``order``."""
    rng = _source(rng)
    nodes = []
    for _ in range(order):
        degree = rng.randint(0, order - 1)
        nodes.append(Node(Adjacency(rng.randint(0, order - 1)) for _ in range(degree)))
    return BasicGraph(nodes)


def random_undirected(
    order: int, approx_degree: int, rng: random.Random | None = None
) -> tuple[BasicGraph, int]:
    """Random undirected graph where each vertex gets at least ``approx_degree`` arcs.

    Returns the graph and the number of arcs added.
    """
    rng = _source(rng)
    graph = BasicGraph.with_order(order)
    total = 0
    for a in range(order):
        while graph.node_degree(a) < approx_degree:
            b = rng.randint(0, order - 1)
            n1 = graph.node(a)
            n2 = graph.node(b)
            i1 = graph.node_degree(a)
            i2 = graph.node_degree(b)
            n1.add_adjacency(b)
            n1.set_cross_index(i1, i2)
            n2.add_adjacency(a)
            n2.set_cross_index(i2, i1)
            total += 2
    return graph, total
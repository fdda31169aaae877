"""Graphs as flat integer arrays, and in-place changes between their forms.

In the standard form ``a[0]`` is the order n, ``a[1..n]`` point to the start
of each vertex's adjacency run (a vertex without arcs points to itself),
``a[n + 1]`` is the number of arcs and the runs follow, holding 1-based
vertex names.
"""

from __future__ import annotations

import random
from collections.abc import MutableSequence

from .graph import Compactgraph

_DEFAULT_SEED = 5489


def fast_graph_generation(n: int, m_per_n: int, seed: int = _DEFAULT_SEED) -> list[int]:
    """Random graph in standard form where each vertex has ``m_per_n`` distinct heads.

    Each adjacency run is sorted. The same seed gives the same graph.
    """
    if n < 0 or m_per_n < 0:
        raise ValueError("n and m_per_n must not be negative")
    if m_per_n > n:
        raise ValueError("m_per_n must not exceed n: heads of a vertex are distinct")
    m = n * m_per_n
    a = [0] * (n + m + 2)
    a[0] = n
    a[n + 1] = m
    rng = random.Random(seed)
    for v in range(1, n + 1):
        start = n + 2 + (v - 1) * m_per_n
        a[v] = start
        a[start:start + m_per_n] = sorted(rng.sample(range(1, n + 1), m_per_n))
    return a


def generate_raw_gilbert_graph(
    order: int, p: float, rng: random.Random | None = None
) -> list[int]:
    """Random directed graph in standard form where each arc u→v (u ≠ v) exists with probability p.

    Each vertex's out-degree is drawn from a binomial distribution over
    ``order - 1`` trials; its heads are then chosen uniformly and listed in
    increasing order.
    """
    if order < 0:
        raise ValueError("order must not be negative")
    if not 0.0 <= p <= 1.0:
        raise ValueError("p must lie between 0 and 1")
    if rng is None:
        rng = random.Random()
    counts = [sum(rng.random() < p for _ in range(order - 1)) for _ in range(order)]
    size = sum(counts)
    graph = [0] * (order + size + 2)
    graph[0] = order
    graph[order + 1] = size

    position = order + 2
    for vertex, count in enumerate(counts, start=1):
        if count == 0:
            graph[vertex] = vertex
        else:
            graph[vertex] = position
            position += count

    for vertex, count in enumerate(counts):
        if not count:
            continue
        others = [j for j in range(order) if j != vertex]
        heads = sorted(rng.sample(others, count))
        start = graph[vertex + 1]
        graph[start:start + count] = [h + 1 for h in heads]
    return graph


def generate_gilbert_graph(
    order: int, p: float, rng: random.Random | None = None
) -> Compactgraph:
    """Like :func:`generate_raw_gilbert_graph`, wrapped as a :class:`Compactgraph`."""
    return Compactgraph(generate_raw_gilbert_graph(order, p, rng))


def standard_to_crosspointer(a: MutableSequence[int]) -> None:
    """Turn an undirected graph in standard form into cross-pointer form, in place.

    Afterwards every arc slot holds the position of its reverse arc.
    """
    n = a[0]
    u = 1
    while u < n:
        while not (a[a[u]] > n or a[u] == a[u + 1]):
            pu = a[u]
            v = a[pu]
            pv = a[v]
            a[pu] = pv
            a[pv] = pu
            a[v] += 1
            a[u] += 1
        u += 1
    for v in range(n, 1, -1):
        a[v] = a[v - 1]
    if n >= 1:
        a[1] = n + 2


def standard_to_beginpointer(a: MutableSequence[int]) -> None:
    """Replace every head in the arc runs by the start of that head's run, in place."""
    order = a[0]
    size = order + a[order + 1] + 2
    for i in range(order + 2, size):
        if a[a[i]] != a[a[i] - 1] or i == order + 2:
            a[i] = a[a[i]]


def swap_representation(a: MutableSequence[int]) -> None:
    """Swap each vertex pointer with the first entry of its run, in place.

    Turns cross- or begin-pointer form into its swapped variant.
    """
    order = a[0]
    for i in range(1, order + 1):
        start = a[i]
        first = a[start]
        a[start] = i
        a[i] = first


def swapped_beginpointer_to_standard(a: MutableSequence[int]) -> None:
    """Undo :func:`standard_to_beginpointer` followed by :func:`swap_representation`."""
    order = a[0]
    size = order + a[order + 1] + 2
    for i in range(order + 2, size):
        if a[i] > order:
            a[i] = a[a[i]]
    for i in range(1, order + 1):
        a[i] = a[a[i]]

    v = order
    while a[v] == v:
        v -= 1
    for i in range(size - 1, order + 1, -1):
        if a[i] == v:
            a[i] = a[v]
            a[v] = i
            v -= 1
            while a[v] == v:
                v -= 1
"""Depth-first search with user callbacks."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence

from .inplace import LinearTimeInplaceDFSRunner

_WHITE = 0
_GRAY = 1
_BLACK = 2

Process = Callable[[int], object]
Explore = Callable[[int, int], object]


def _process_standard(
    u0: int,
    graph,
    color: list[int],
    preprocess: Process | None,
    preexplore: Explore | None,
    postexplore: Explore | None,
    postprocess: Process | None,
) -> None:
    stack: list[tuple[int, int]] = [(u0, 0)]
    while stack:
        u, k = stack.pop()
        if color[u] == _WHITE:
            if preprocess is not None:
                preprocess(u)
            color[u] = _GRAY
        if k < graph.node_degree(u):
            stack.append((u, k + 1))
            v = graph.head(u, k)
            if preexplore is not None:
                preexplore(u, v)
            if color[v] == _WHITE:
                stack.append((v, 0))
            elif postexplore is not None:
                postexplore(u, v)
        else:
            color[u] = _BLACK
            if postprocess is not None:
                postprocess(u)
            if postexplore is not None and u != u0:
                parent = stack[-1][0]
                postexplore(parent, u)


def standard_dfs(
    graph,
    preprocess: Process | None = None,
    preexplore: Explore | None = None,
    postexplore: Explore | None = None,
    postprocess: Process | None = None,
) -> None:
    """Depth-first search over every component, with an explicit stack.

    ``preprocess(u)`` runs on discovery, ``postprocess(u)`` on finishing.
    ``preexplore(u, v)`` runs before each arc is followed; ``postexplore(u, v)``
    runs for each arc once it is done with, immediately for arcs to
    non-white vertices.
    """
    order = graph.order()
    color = [_WHITE] * order
    for u in range(order):
        if color[u] == _WHITE:
            _process_standard(u, graph, color, preprocess, preexplore, postexplore, postprocess)


def run_linear_time_inplace_dfs(
    graph: MutableSequence[int],
    preprocess: Process | None = None,
    postprocess: Process | None = None,
    start_vertex: int = 1,
) -> None:
    """Run the in-place DFS on a graph array in swapped begin-pointer form."""
    LinearTimeInplaceDFSRunner(graph, preprocess, postprocess).run(start_vertex)
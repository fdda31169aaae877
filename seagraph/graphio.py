"""Reading and writing graphs in a small subset of GML."""

from __future__ import annotations

import os
import re
from pathlib import Path

from .graph import BasicGraph, Node


class GMLFormatError(ValueError):
    """Raised when a GML document does not have the expected shape."""


def export_gml(graph, path: str | os.PathLike[str]) -> None:
    """Write ``graph`` as a directed GML graph; edge ids continue after the node ids."""
    lines = ["graph [", "directed 1"]
    order = graph.order()
    for u in range(order):
        lines += ["node [", f"id {u}", "]"]
    edge_id = order
    for u in range(order):
        for k in range(graph.node_degree(u)):
            lines += ["edge [", f"id {edge_id}", f"source {u}", f"target {graph.head(u, k)}", "]"]
            edge_id += 1
    lines.append("]")
    Path(path).write_text("\n".join(lines) + "\n")


class _Tokens:
    def __init__(self, text: str) -> None:
        self._tokens = [t for t in re.split(r"[ \n]", text) if t]
        self._pos = 0

    def peek(self) -> str:
        if self._pos >= len(self._tokens):
            raise GMLFormatError("Input file is malformed: unexpected end of input")
        return self._tokens[self._pos]

    def skip(self) -> None:
        self.peek()
        self._pos += 1

    def expect(self, word: str) -> None:
        token = self.peek()
        if token != word:
            raise GMLFormatError(f"Input file is malformed: expected '{word}', got '{token}'")
        self._pos += 1

    def accept(self, word: str) -> bool:
        if self._pos < len(self._tokens) and self._tokens[self._pos] == word:
            self._pos += 1
            return True
        return False

    def integer(self) -> int:
        token = self.peek()
        try:
            value = int(token)
        except ValueError:
            raise GMLFormatError(f"Input file is malformed: expected a number, got '{token}'") from None
        self._pos += 1
        return value

    def skip_block(self) -> None:
        depth = 1
        while depth > 0:
            token = self.peek()
            if token == "[":
                depth += 1
            elif token == "]":
                depth -= 1
            self._pos += 1


def import_gml(path: str | os.PathLike[str]) -> BasicGraph:
    """Read a graph written by :func:`export_gml` or of the same shape.

    Undirected graphs get a reverse arc for every edge, with cross indices set.
    """
    tokens = _Tokens(Path(path).read_text())
    graph = BasicGraph()
    tokens.expect("graph")
    tokens.expect("[")
    while not tokens.accept("directed"):
        tokens.skip()
    directed = bool(tokens.integer())

    while tokens.accept("node"):
        tokens.expect("[")
        tokens.expect("id")
        tokens.skip()
        graph.add_node(Node())
        tokens.skip_block()

    while tokens.accept("edge"):
        tokens.expect("[")
        tokens.expect("id")
        tokens.skip()
        tokens.expect("source")
        u = tokens.integer()
        tokens.expect("target")
        v = tokens.integer()
        for w in (u, v):
            if not 0 <= w < graph.order():
                raise GMLFormatError(f"Input file is malformed: unknown node {w}")
        graph.node(u).add_adjacency(v)
        if not directed:
            graph.node(v).add_adjacency(u)
            graph.node(u).set_cross_index(graph.node_degree(u) - 1, graph.node_degree(v) - 1)
            graph.node(v).set_cross_index(graph.node_degree(v) - 1, graph.node_degree(u) - 1)
        tokens.skip_block()

    tokens.expect("]")
    return graph
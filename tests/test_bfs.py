import random

import pytest

from seagraph.bfs import BFS
from seagraph.graph import Adjacency, BasicGraph, Node
from seagraph.graphcreator import random_fixed

ORDER = 500
DEGREE = 20


class Counter:
    def __init__(self):
        self.processed = 0
        self.explored = 0

    def process(self, u):
        self.processed += 1

    def explore(self, u, v):
        self.explored += 1


@pytest.mark.parametrize("seed", [0, 1])
def test_userproc(seed):
    counter = Counter()
    bfs = BFS(random_fixed(ORDER, DEGREE, random.Random(seed)), counter.process, counter.explore)
    bfs.init()
    while True:
        while bfs.more():
            bfs.next()
        if not bfs.next_component():
            break
    assert counter.processed == ORDER
    assert counter.explored == ORDER * DEGREE


def test_next_component():
    counter = Counter()
    bfs = BFS(random_fixed(ORDER, 0, random.Random(2)), counter.process, counter.explore)
    rounds = 0
    bfs.init()
    while True:
        rounds += 1
        while bfs.more():
            bfs.next()
        if not bfs.next_component():
            break
    assert rounds == ORDER
    assert counter.processed == ORDER
    assert counter.explored == 0


def _path():
    return BasicGraph([Node([Adjacency(1)]), Node([Adjacency(2)]), Node()])


def test_distances_on_path():
    assert list(BFS(_path())) == [(0, 0), (1, 1), (2, 2)]


def test_iteration_visits_every_vertex_once():
    g = random_fixed(60, 2, random.Random(9))
    visited = [u for u, _ in BFS(g)]
    assert sorted(visited) == list(range(60))


def test_next_without_gray_node_raises():
    bfs = BFS(_path())
    for _ in bfs:
        pass
    with pytest.raises(RuntimeError, match="no more gray nodes"):
        bfs.next()
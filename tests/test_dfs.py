import random

import pytest

from seagraph.dfs import run_linear_time_inplace_dfs, standard_dfs
from seagraph.graph import Adjacency, BasicGraph, Node
from seagraph.graphcreator import graph_from_adjacency_matrix, random_fixed

ORDER = 200
DEGREE = 15


class Recorder:
    def __init__(self):
        self.events = []

    def pre(self, u):
        self.events.append(("pre", u))

    def post(self, u):
        self.events.append(("post", u))

    def pre_explore(self, u, v):
        self.events.append(("pe", u, v))

    def post_explore(self, u, v):
        self.events.append(("po", u, v))

    def count(self, kind):
        return sum(1 for e in self.events if e[0] == kind)


def _graph(*lists):
    return BasicGraph(Node(Adjacency(v) for v in heads) for heads in lists)


def _run_standard(graph):
    rec = Recorder()
    standard_dfs(graph, rec.pre, rec.pre_explore, rec.post_explore, rec.post)
    return rec


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_standard_userproc_counts(seed):
    graph = random_fixed(ORDER, DEGREE, random.Random(seed))
    rec = _run_standard(graph)
    assert rec.count("pre") == ORDER
    assert rec.count("pe") == DEGREE * ORDER
    assert rec.count("po") == DEGREE * ORDER
    assert rec.count("post") == ORDER


@pytest.mark.parametrize("seed", [4, 5])
def test_standard_pre_post_nest(seed):
    graph = random_fixed(50, 4, random.Random(seed))
    rec = _run_standard(graph)
    stack = []
    for event in rec.events:
        if event[0] == "pre":
            stack.append(event[1])
        elif event[0] == "post":
            assert stack.pop() == event[1]
    assert stack == []


def test_standard_path_order():
    rec = _run_standard(_graph([1], [2], []))
    assert rec.events == [
        ("pre", 0),
        ("pe", 0, 1),
        ("pre", 1),
        ("pe", 1, 2),
        ("pre", 2),
        ("post", 2),
        ("po", 1, 2),
        ("post", 1),
        ("po", 0, 1),
        ("post", 0),
    ]


def test_standard_back_arc():
    rec = _run_standard(_graph([1], [0]))
    assert rec.events == [
        ("pre", 0),
        ("pe", 0, 1),
        ("pre", 1),
        ("pe", 1, 0),
        ("po", 1, 0),
        ("post", 1),
        ("po", 0, 1),
        ("post", 0),
    ]


def test_standard_isolated_vertices():
    rec = _run_standard(_graph([], [], []))
    assert rec.events == [("pre", 0), ("post", 0), ("pre", 1), ("post", 1), ("pre", 2), ("post", 2)]


def test_standard_only_some_callbacks():
    graph = graph_from_adjacency_matrix([[0, 1, 1], [1, 0, 1], [1, 1, 0]])
    seen = []
    standard_dfs(graph, preprocess=seen.append)
    assert seen == [0, 1, 2]


SAMPLE = [5, 9, 7, 9, 9, 7, 12, 1, 17, 2, 12, 14, 3, 14, 4, 12, 17, 5, 14]


def test_inplace_dfs_all_of_grade_ge_2():
    control = 2 * (1 + 2 + 3 + 4 + 5)
    stack = []
    mismatches = []
    pre_seen = []
    post_seen = []

    def pre(a):
        nonlocal control
        control -= a
        stack.append(a)
        pre_seen.append(a)

    def post(a):
        nonlocal control
        control -= a
        post_seen.append(a)
        expected = stack.pop()
        if expected != a:
            mismatches.append((expected, a))

    graph = list(SAMPLE)
    run_linear_time_inplace_dfs(graph, pre, post, 1)
    assert sorted(pre_seen) == [1, 2, 3, 4, 5]
    assert sorted(post_seen) == [1, 2, 3, 4, 5]
    assert control == 0
    assert mismatches == []
    assert stack == []
    assert graph[0] == 5
    assert len(graph) == len(SAMPLE)


def test_inplace_dfs_bad_start_vertex():
    with pytest.raises(ValueError):
        run_linear_time_inplace_dfs(list(SAMPLE), None, None, 42)
import random

import pytest

from seagraph.graph import Compactgraph
from seagraph.graphrepresentations import (
    fast_graph_generation,
    generate_gilbert_graph,
    generate_raw_gilbert_graph,
    standard_to_beginpointer,
    standard_to_crosspointer,
    swap_representation,
    swapped_beginpointer_to_standard,
)

SAMPLE = [5, 7, 9, 11, 13, 15, 9, 2, 4, 3, 4, 1, 2, 2, 3, 3]


def test_graph_generation():
    g = Compactgraph(fast_graph_generation(5, 2))
    assert g.order() == 5
    for u in range(5):
        assert g.head(u, 0) <= 5
        assert g.head(u, 1) <= 5
        assert g.node_degree(u) == 2


def test_generation_runs_are_sorted_and_distinct():
    a = fast_graph_generation(8, 3, seed=7)
    assert len(a) == 8 + 24 + 2
    assert a[9] == 24
    for v in range(1, 9):
        run = a[a[v]:a[v] + 3]
        assert run == sorted(set(run))
        assert all(1 <= h <= 8 for h in run)


def test_generation_is_deterministic_per_seed():
    first = fast_graph_generation(10, 4, seed=3)
    second = fast_graph_generation(10, 4, seed=3)
    assert len(first) == 10 + 40 + 2
    assert first[0] == 10
    assert first[11] == 40
    assert first[1:11] == [12 + 4 * v for v in range(10)]
    assert first == second


def test_generation_rejects_too_many_heads():
    with pytest.raises(ValueError):
        fast_graph_generation(3, 4)


def test_graph_beginpointer():
    a = list(SAMPLE)
    standard_to_beginpointer(a)
    assert a[0] == 5
    assert a[7] == 9
    assert a[9] == 11
    assert a[11] == 7
    assert a[13] == 9
    assert a[15] == 11


def test_graph_swapped():
    a = list(SAMPLE)
    standard_to_beginpointer(a)
    swap_representation(a)
    assert a[0] == 5
    assert [a[7], a[9], a[11], a[13], a[15]] == [1, 2, 3, 4, 5]
    assert a[1:6] == [9, 11, 7, 9, 11]


def test_swapped_beginpointer_round_trip():
    a = list(SAMPLE)
    standard_to_beginpointer(a)
    swap_representation(a)
    swapped_beginpointer_to_standard(a)
    assert a == SAMPLE


def test_crosspointer_single_edge():
    a = [2, 4, 5, 2, 2, 1]
    standard_to_crosspointer(a)
    assert a == [2, 4, 5, 2, 5, 4]


def test_crosspointer_path():
    a = [3, 5, 6, 8, 4, 2, 1, 3, 2]
    standard_to_crosspointer(a)
    assert a == [3, 5, 6, 8, 4, 6, 5, 8, 7]
    for i in range(5, 9):
        assert a[a[i]] == i


def test_gilbert_empty():
    assert generate_raw_gilbert_graph(4, 0.0, random.Random(1)) == [4, 1, 2, 3, 4, 0]


def test_gilbert_complete():
    a = generate_raw_gilbert_graph(3, 1.0, random.Random(1))
    assert a == [3, 5, 7, 9, 6, 2, 3, 1, 3, 1, 2]


def test_gilbert_invariants():
    order = 30
    a = generate_raw_gilbert_graph(order, 0.3, random.Random(11))
    size = a[order + 1]
    assert len(a) == order + size + 2
    g = Compactgraph(a)
    total = 0
    for u in range(order):
        if a[u + 1] == u + 1:
            continue
        nxt = next((a[w] for w in range(u + 2, order + 1) if a[w] != w), order + size + 2)
        run = a[a[u + 1]:nxt]
        total += len(run)
        assert run == sorted(set(run))
        assert u + 1 not in run
    assert total == size
    assert g.order() == order


def test_gilbert_graph_wrapper():
    g = generate_gilbert_graph(3, 1.0, random.Random(2))
    assert g.order() == 3
    assert [g.node_degree(u) for u in range(3)] == [2, 2, 2]


def test_gilbert_rejects_bad_probability():
    with pytest.raises(ValueError):
        generate_raw_gilbert_graph(3, 1.5)
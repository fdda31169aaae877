import pytest

from seagraph.inplace import LinearTimeInplaceDFSRunner

SAMPLE = [5, 9, 7, 9, 9, 7, 12, 1, 17, 2, 12, 14, 3, 14, 4, 12, 17, 5, 14]


def _run(start=1):
    graph = list(SAMPLE)
    events = []
    runner = LinearTimeInplaceDFSRunner(
        graph,
        lambda u: events.append(("pre", u)),
        lambda u: events.append(("post", u)),
    )
    runner.run(start)
    return graph, events


def test_event_sequence():
    _, events = _run()
    assert events == [
        ("pre", 1),
        ("pre", 2),
        ("pre", 3),
        ("pre", 4),
        ("pre", 5),
        ("post", 5),
        ("post", 4),
        ("post", 3),
        ("post", 2),
        ("post", 1),
    ]


def test_control_sum_reaches_zero():
    _, events = _run()
    control = 2 * (1 + 2 + 3 + 4 + 5)
    for _, vertex in events:
        control -= vertex
    assert control == 0


def test_pre_and_post_nest_like_a_stack():
    _, events = _run()
    stack = []
    for kind, vertex in events:
        if kind == "pre":
            stack.append(vertex)
        else:
            assert stack.pop() == vertex
    assert stack == []


def test_vertex_pointers_are_restored():
    graph, _ = _run()
    assert graph[:9] == SAMPLE[:9]


def test_runs_without_callbacks():
    graph = list(SAMPLE)
    LinearTimeInplaceDFSRunner(graph).run(1)
    assert graph[1:6] == [9, 7, 9, 9, 7]


def test_unknown_start_vertex_raises():
    graph = list(SAMPLE)
    runner = LinearTimeInplaceDFSRunner(graph, lambda u: None, lambda u: None)
    with pytest.raises(ValueError):
        runner.run(9)
"""Depth-first search that runs inside the graph array itself, in linear time."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from enum import IntEnum
from typing import Optional, Tuple

_Step = Optional[Tuple[Callable[..., object], Tuple[object, ...]]]


class _Grade(IntEnum):
    ZERO = 0
    ONE = 1
    AT_LEAST_TWO = 2


def _drive(func: Callable[..., _Step], *args: object) -> None:
    """Run a chain of steps, each returning the next call or None."""
    step: _Step = (func, args)
    while step is not None:
        func, args = step
        step = func(*args)


def _bad_grade(grade: int) -> ValueError:
    return ValueError(
        f"Grade type calculation gone wrong, grade type: {grade} found, only {{0, 1, 2}} allowed"
    )


class LinearTimeInplaceDFSRunner:
    """DFS over a graph in swapped begin-pointer form, using the array as its only storage.

    ``graph[0]`` is the order n, ``graph[n + 1]`` the arc count; vertices are
    named 1..n. Reverse pointers are written into the array during the search
    and undone afterwards. ``preprocess(v)`` runs when a vertex is discovered,
    ``postprocess(v)`` when it is finished. Only the component of the start
    vertex is searched.
    """

    def __init__(
        self,
        graph: MutableSequence[int],
        preprocess: Callable[[int], object] | None = None,
        postprocess: Callable[[int], object] | None = None,
    ) -> None:
        self._a = graph
        self._n = graph[0]
        self._big_n = self._n + graph[self._n + 1] + 1
        self._pre_callback = preprocess
        self._post_callback = postprocess
        self._start_vertex = 0
        self._start_pos = 0
        self._p_bar = 0

    def run(self, start_vertex: int) -> None:
        """Search from ``start_vertex``, then restore the array."""
        a = self._a
        self._start_vertex = start_vertex
        p = self._n + 2
        while p <= self._big_n and a[p] != start_vertex:
            p += 1
        self._start_pos = p
        _drive(self._visit, p)
        self._restore()

    def _pre(self, vertex: int) -> None:
        if self._pre_callback is not None:
            self._pre_callback(vertex)

    def _post(self, vertex: int) -> None:
        if self._post_callback is not None:
            self._post_callback(vertex)

    # Positions in the array that U(i) and R(i) refer to.

    def _name(self, i: int) -> int:
        a, n = self._a, self._n
        if i == 0 or i == n + 1 or i > self._big_n:
            raise ValueError(f"Never access 0 or n + 1, i = {i} n: {n} N: {self._big_n}")
        x = a[i]
        if a[x] == i and x != i:
            return 0
        if i > n and x <= n:
            return 0 if x == a[x] else x
        if i <= n:
            return i
        if i == x:
            return x
        if x <= n and a[x] != x and a[x] != 0:
            return a[i]
        return 0

    def _upos(self, i: int) -> int:
        return self._a[i] if self._name(i) != 0 else i

    def _u(self, i: int) -> int:
        return self._a[self._upos(i)]

    def _rpos(self, i: int) -> int:
        a, n = self._a, self._n
        if self._name(i) == 0 or a[i] == a[a[i]]:
            return self._upos(i)
        ppos = self._upos(i)
        p = a[ppos]
        if self._name(p) > 0:
            return self._upos(i)
        if p <= n and a[p] != p:
            # The walk writes each step back into the slot it started from.
            while a[ppos] <= n and a[a[ppos]] != a[ppos]:
                a[ppos] = a[self._upos(a[ppos])]
            return ppos
        return self._upos(p)

    def _r(self, i: int) -> int:
        return self._a[self._rpos(i)]

    def _is_white(self, vertex: int) -> bool:
        a, n = self._a, self._n
        if vertex == 0 or vertex > n:
            return False
        if vertex == self._start_vertex:
            return False
        v = a[vertex]
        if v == vertex:
            return True
        if a[vertex] <= n and a[a[vertex]] == vertex:
            return False
        return v != 0 and a[v] <= n

    def _grade_of(self, x: int) -> _Grade:
        a, n = self._a, self._n
        if a[x] == x:
            return _Grade.ZERO
        ax1 = a[x + 1]
        if n >= a[x] and ax1 <= n and ax1 != self._u(ax1):
            return _Grade.ONE
        return _Grade.AT_LEAST_TWO

    def _grade_at_position(self, q: int) -> _Grade:
        return self._grade_of(q)

    def _points_at_node_of_grade(self, p: int) -> _Grade:
        return self._grade_of(self._u(p))

    def _swap(self, first: int, second: int) -> None:
        value_first = self._r(first)
        value_second = self._r(second)
        self._a[self._rpos(second)] = value_first
        self._a[self._rpos(first)] = value_second

    # Search steps; each returns the next step to take.

    def _visit(self, p: int) -> _Step:
        v = self._name(p)
        if v == 0:
            raise ValueError(
                f"Position p: {p} does not contain a vertex name, it contains the value: {self._a[p]}"
            )
        self._pre(v)
        return (self._next_neighbor, (p, True))

    def _next_neighbor(self, p: int, ignore_check: bool) -> _Step:
        if p > self._big_n or (self._name(p) != 0 and not ignore_check):
            q = p - 1
            while self._name(q) == 0:
                q -= 1
            if self._start_pos == q:
                self._post(self._start_vertex)
                return None
            return (self._go_to_parent, (q,))

        p1 = p2 = 0
        swapped = False
        if self._name(p) != 0:
            p1, p2 = p, p + 1
            swapped = self._r(p2) < self._r(p1)
        elif self._name(p - 1) != 0:
            p1, p2 = p - 1, p
            swapped = self._r(p2) < self._r(p1)

        if p == p1:
            p += 1
            self._swap(p1, p2)
        elif p2 == p and swapped:
            self._swap(p1, p2)

        if self._is_white(self._name(self._r(p))):
            return (self._go_to_child, (p,))
        if p2 == p and self._r(p2) < self._r(p1):
            return (self._next_neighbor, (p, False))
        return (self._next_neighbor, (p + 1, False))

    def _go_to_parent(self, q: int) -> _Step:
        a = self._a
        grade = self._points_at_node_of_grade(q)
        if grade == _Grade.ONE:
            p = a[self._name(q)]
            while p <= self._n:
                self._post(p)
                p = a[self._name(q)]
            _drive(self._next_neighbor, p, False)
            grade = _Grade.AT_LEAST_TWO  # continues with the general case
        if grade == _Grade.AT_LEAST_TWO:
            self._post(self._name(q))
            original = self._r(q)
            p = self._u(q)
            a[self._upos(q)] = original + 1
            a[self._upos(p)] = q
            return (self._next_neighbor, (p, False))
        raise _bad_grade(grade)

    def _go_to_child(self, p: int) -> _Step:
        a = self._a
        q = self._r(p)
        grade = self._points_at_node_of_grade(p)

        if grade == _Grade.ZERO:
            self._pre(q)
            self._post(q)
            a[q] = p
            return (self._next_neighbor, (p, False))

        if grade == _Grade.ONE:
            current, nxt = p, q
            while True:
                if not self._is_white(self._name(nxt)):
                    return (self._go_to_parent, (current,))
                if grade == _Grade.ZERO:
                    self._pre(nxt)
                    self._post(nxt)
                    if self._name(nxt) != 0:
                        a[nxt] = self._name(current)
                    else:
                        a[nxt] = current
                    self._p_bar = 0
                    return (self._go_to_parent, (current,))
                if grade == _Grade.ONE:
                    if self._p_bar == 0:
                        v = self._name(nxt)
                        self._pre(v)
                        self._p_bar = current
                        following = self._u(nxt)
                        a[v] = current
                    else:
                        u = self._name(current)
                        self._pre(u)
                        following = self._u(nxt)
                        a[self._upos(nxt)] = u
                    current, nxt = nxt, following
                elif grade == _Grade.AT_LEAST_TWO:
                    u = self._name(current)
                    a[self._upos(self._p_bar)] = self._u(nxt)
                    a[self._upos(nxt)] = u
                    self._p_bar = 0
                    return (self._visit, (nxt,))
                else:
                    raise _bad_grade(grade)
                grade = self._grade_at_position(nxt)

        if grade == _Grade.AT_LEAST_TWO:
            a[self._upos(p)] = self._u(q)
            a[self._upos(q)] = p
            return (self._visit, (q,))
        raise _bad_grade(grade)

    def _restore(self) -> None:
        a, n = self._a, self._n
        for v in range(1, n + 1):
            if v != self._start_vertex and not self._is_white(v):
                a[v] -= 1

        for p in range(n + 2, self._big_n + 1):
            v = self._u(p)
            if self._is_white(v):
                continue
            if v <= n and self._name(p) == 0:
                a[v] = v
                continue
            u = a[v]
            if u and self._name(u) != 0:
                a[v] = v
                continue
            u = self._name(p)
            if u and a[v] == p + 1:
                a[v] = v
import random

import pytest

from puzzle import GOAL, InvalidBoardError, manhattan, neighbors, scramble
from search import AStar, EmptyFrontierError, Frontier, Node, reconstruct_path, solve, solve_moves
from bfs import bfs

HARD_CODED = (4, 5, 1, 2, 0, 3, 7, 8, 6)


def _is_single_move(a, b):
    diff = [i for i in range(9) if a[i] != b[i]]
    if len(diff) != 2 or 0 not in (a[diff[0]], a[diff[1]]):
        return False
    (r1, c1), (r2, c2) = divmod(diff[0], 3), divmod(diff[1], 3)
    return abs(r1 - r2) + abs(c1 - c2) == 1


def _check_path(start, path):
    assert path[0] == tuple(start)
    assert path[-1] == GOAL
    for a, b in zip(path, path[1:]):
        assert _is_single_move(a, b)


def test_node_f():
    n = Node(state=GOAL, g=3, h=4)
    assert n.f == 7
    assert n.parent is None


def test_frontier_orders_by_f():
    q = Frontier()
    for g, h in [(5, 5), (0, 3), (2, 2), (1, 0)]:
        q.enqueue(Node(state=GOAL, g=g, h=h))
    assert [q.dequeue().f for _ in range(4)] == [1, 3, 4, 10]
    assert q.is_empty()


def test_frontier_ties_are_fifo():
    q = Frontier()
    nodes = [Node(state=GOAL, g=i, h=6 - i, action=str(i)) for i in range(5)]
    for n in nodes:
        q.enqueue(n)
    assert [q.dequeue() for _ in range(5)] == nodes


def test_frontier_len_and_peak():
    q = Frontier()
    q.enqueue(Node(state=GOAL, g=0, h=0))
    q.enqueue(Node(state=GOAL, g=0, h=1))
    q.dequeue()
    assert len(q) == 1
    assert q.peak == 2


def test_dequeue_empty_raises():
    with pytest.raises(EmptyFrontierError):
        Frontier().dequeue()


def test_reconstruct_path():
    a = Node(state=(0,), g=0, h=0)
    b = Node(state=(1,), g=1, h=0, parent=a, action="R")
    c = Node(state=(2,), g=2, h=0, parent=b, action="D")
    assert reconstruct_path(c) == [((0,), None), ((1,), "R"), ((2,), "D")]


def test_solve_goal_is_zero_moves():
    assert solve(GOAL) == [GOAL]
    assert solve_moves(GOAL) == []


def test_solve_one_move():
    path = solve([1, 2, 3, 4, 5, 6, 7, 0, 8])
    assert path == [(1, 2, 3, 4, 5, 6, 7, 0, 8), GOAL]
    assert solve_moves([1, 2, 3, 4, 5, 6, 7, 0, 8]) == ["R"]


def test_solve_hard_coded_board():
    path = solve(list(HARD_CODED))
    _check_path(HARD_CODED, path)
    moves = len(path) - 1
    # manhattan is 8 and no 8-move path exists
    assert moves >= 10 and moves % 2 == 0
    assert moves == bfs(HARD_CODED, GOAL, neighbors)["depth"]
    assert len(solve_moves(HARD_CODED)) == moves


def test_solve_matches_bfs_on_scrambles():
    rng = random.Random(42)
    for _ in range(15):
        start = scramble(rng.randint(1, 18), rng=rng)
        path = solve(start)
        _check_path(start, path)
        assert len(path) - 1 == bfs(start, GOAL, neighbors)["depth"]


def test_solve_returns_none_when_unreachable():
    # odd permutation: not reachable from the goal
    assert solve([2, 1, 3, 4, 5, 6, 7, 8, 0]) is None


def test_solve_rejects_invalid_board():
    with pytest.raises(InvalidBoardError):
        solve([1, 2, 3, 4, 5, 6, 7, 8])
    with pytest.raises(InvalidBoardError):
        solve([0, 0, 1, 2, 3, 4, 5, 6, 7])


def test_search_result_keys():
    r = AStar(manhattan, neighbors).search((1, 2, 3, 4, 5, 6, 0, 7, 8), GOAL)
    assert r["depth"] == 2
    assert [a for (_, a) in r["solution"]] == [None, "R", "R"]
    assert r["nodes_expanded"] >= 2
    assert r["nodes_generated"] >= r["nodes_expanded"]
    assert r["max_frontier"] >= 1
    assert r["runtime_s"] >= 0


def test_children_scored_before_enqueue():
    seen = []

    def h(state):
        seen.append(state)
        return manhattan(state)

    AStar(h, neighbors).search((1, 2, 3, 4, 5, 6, 7, 0, 8), GOAL)
    # start plus every generated child of the expanded start node
    assert (1, 2, 3, 4, 5, 6, 7, 0, 8) in seen
    assert GOAL in seen


def test_exhausted_search_stats():
    def two_state_graph(state):
        return [("X", (1,))] if state == (0,) else [("X", (0,))]

    r = AStar(lambda s: 0, two_state_graph).search((0,), (9,))
    assert r["solution"] is None
    assert r["depth"] is None
    assert r["nodes_expanded"] == 2

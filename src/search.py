
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Tuple, List, Optional, Callable, Any, Sequence, Set
import heapq
import itertools
import time

from puzzle import GOAL, State, manhattan, neighbors, validate

NeighborFn = Callable[[State], List[Tuple[str, State]]]


class EmptyFrontierError(RuntimeError):
    """Dequeue on an empty frontier. The search loop guards against this."""


@dataclass
class Node:
    state: State
    g: int
    h: int
    parent: Optional["Node"] = field(default=None, repr=False)
    action: Optional[str] = None

    @property
    def f(self) -> int:
        return self.g + self.h


class Frontier:
    """
    Open set ordered by f = g + h.

    Entries are (f, seq, node); seq is an insertion counter, so nodes with
    equal f leave in the order they arrived and Node objects are never compared.
    """
    def __init__(self):
        self._heap: List[Tuple[int, int, Node]] = []
        self._counter = itertools.count()
        self.peak = 0

    def enqueue(self, node: Node) -> None:
        heapq.heappush(self._heap, (node.f, next(self._counter), node))
        if len(self._heap) > self.peak:
            self.peak = len(self._heap)

    def dequeue(self) -> Node:
        if not self._heap:
            raise EmptyFrontierError("dequeue from empty frontier")
        return heapq.heappop(self._heap)[2]

    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)


class AStar:
    def __init__(self, h_fn: Callable[[State], int],
                 neighbor_fn: NeighborFn):
        self.h_fn = h_fn
        self.neighbor_fn = neighbor_fn

    def search(self, start: State, goal: State) -> Dict[str,Any]:
        start_time = time.time()
        frontier = Frontier()
        frontier.enqueue(Node(state=start, g=0, h=self.h_fn(start)))
        visited: Set[State] = set()
        expansions = 0
        generated = 1

        while not frontier.is_empty():
            node = frontier.dequeue()

            if node.state == goal:
                path = reconstruct_path(node)
                return {
                    "solution": path,
                    "nodes_expanded": expansions,
                    "nodes_generated": generated,
                    "max_frontier": frontier.peak,
                    "runtime_s": time.time() - start_time,
                    "depth": len(path)-1,
                }

            # same board can sit in the frontier more than once
            if node.state in visited:
                continue
            visited.add(node.state)

            expansions += 1
            for action, nxt in self.neighbor_fn(node.state):
                if nxt in visited:
                    continue
                child = Node(state=nxt, g=node.g + 1, h=self.h_fn(nxt),
                             parent=node, action=action)
                frontier.enqueue(child)
                generated += 1

        # No solution
        return {
            "solution": None,
            "nodes_expanded": expansions,
            "nodes_generated": generated,
            "max_frontier": frontier.peak,
            "runtime_s": time.time() - start_time,
            "depth": None,
        }


def reconstruct_path(node: Node) -> List[Tuple[State, Optional[str]]]:
    seq = []
    cur = node
    while cur:
        seq.append((cur.state, cur.action))
        cur = cur.parent
    seq.reverse()
    return seq


def solve(board: Sequence[int]) -> Optional[List[State]]:
    """
    Optimal sequence of boards from `board` to GOAL, both inclusive.

    Returns None if the search space is exhausted without reaching the goal.
    Raises InvalidBoardError if `board` is not a permutation of 0..8.
    """
    start = validate(board)
    result = AStar(manhattan, neighbors).search(start, GOAL)
    if result["solution"] is None:
        return None
    return [s for (s, _) in result["solution"]]


def solve_moves(board: Sequence[int]) -> Optional[List[str]]:
    """Blank-move letters (U/D/L/R) of the optimal solution, or None."""
    start = validate(board)
    result = AStar(manhattan, neighbors).search(start, GOAL)
    if result["solution"] is None:
        return None
    return [a for (_, a) in result["solution"] if a is not None]

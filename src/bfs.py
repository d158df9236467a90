from __future__ import annotations
from typing import Any, Dict, Deque
from collections import deque
import time

from puzzle import State
from search import Node, NeighborFn, reconstruct_path

def bfs(start: State, goal: State, neighbor_fn: NeighborFn) -> Dict[str, Any]:
    """Breadth-first graph search; same result keys as AStar.search."""
    start_time = time.time()
    root = Node(state=start, g=0, h=0)

    def done(node, expanded, generated, max_frontier):
        path = reconstruct_path(node) if node is not None else None
        return {"solution": path, "nodes_expanded": expanded, "nodes_generated": generated,
                "max_frontier": max_frontier, "runtime_s": time.time() - start_time,
                "depth": len(path)-1 if path is not None else None}

    if start == goal:
        return done(root, 0, 1, 1)

    frontier: Deque[Node] = deque([root])
    visited = {start}

    expanded = 0
    generated = 1
    max_frontier = len(frontier)

    while frontier:
        if len(frontier) > max_frontier:
            max_frontier = len(frontier)

        node = frontier.popleft()
        expanded += 1

        for action, s2 in neighbor_fn(node.state):
            if s2 in visited:
                continue
            n2 = Node(state=s2, g=node.g + 1, h=0, parent=node, action=action); generated += 1

            if s2 == goal:
                return done(n2, expanded, generated, max_frontier)

            visited.add(s2)
            frontier.append(n2)

    return done(None, expanded, generated, max_frontier)

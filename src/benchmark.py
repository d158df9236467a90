#!/usr/bin/env python3
"""
Benchmark A* on random scrambles of the 8-puzzle.

Run:
  python benchmark.py --n 50 --depth 20 --seed 7
  python benchmark.py --n 20 --verify --log-dir ./logs
"""

from __future__ import annotations
import argparse
import random
from contextlib import redirect_stdout, nullcontext
from datetime import datetime
from typing import List, Optional

from puzzle import GOAL, manhattan, neighbors, pretty, scramble
from search import AStar
from bfs import bfs
from metrics import calculate_percentiles, print_metrics
from teelog import TeeLogger, log_path

DEFAULT_DEPTH = 20


def run(n: int, depth: int, seed: int, verify: bool = False) -> int:
    """Solve `n` scrambles and print stats. Returns the number of non-optimal results."""
    rng = random.Random(seed)
    solver = AStar(manhattan, neighbors)

    latencies: List[float] = []
    expanded: List[float] = []
    mismatches = 0

    print("=" * 70)
    print(f"8-Puzzle A* Benchmark - {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    print(f"boards={n} scramble_depth={depth} seed={seed} verify={verify}")
    print("=" * 70)

    for i in range(n):
        start = scramble(depth, rng=rng)
        r = solver.search(start, GOAL)
        latencies.append(r["runtime_s"] * 1000)
        expanded.append(r["nodes_expanded"])

        line = (f"[{i+1:>3}] depth={r['depth']:<3} nodes={r['nodes_expanded']:<6} "
                f"frontier={r['max_frontier']:<6} time={r['runtime_s']:.4f}s")
        if verify:
            ref = bfs(start, GOAL, neighbors)
            ok = ref["depth"] == r["depth"]
            if not ok:
                mismatches += 1
                print("Non-optimal result for:")
                print(pretty(start))
            line += f" bfs_depth={ref['depth']:<3} {'OK' if ok else 'MISMATCH'}"
        print(line)

    if latencies:
        print("\nPerformance Metrics:")
        print("=" * 50)
        print_metrics(calculate_percentiles(latencies), label="Solve time", unit="ms")
        print_metrics(calculate_percentiles(expanded), label="Nodes expanded", unit="nodes")
        print("=" * 50)

    if verify:
        print(f"\nOptimality check: {n - mismatches}/{n} boards match BFS depth")
    return mismatches


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Benchmark A* on random 8-puzzle scrambles")
    ap.add_argument("--n", type=int, default=25, help="number of boards")
    ap.add_argument("--depth", type=int, default=DEFAULT_DEPTH, help="random moves per scramble")
    ap.add_argument("--seed", type=int, default=0)
    ap.add_argument("--verify", action="store_true", help="cross-check each depth against BFS")
    ap.add_argument("--log-dir", default=None, help="also write console output to a timestamped log here")
    args = ap.parse_args(argv)

    if args.n < 1:
        ap.error("--n must be at least 1")
    if args.depth < 0:
        ap.error("--depth must be non-negative")

    logger = TeeLogger(str(log_path(args.log_dir, "benchmark_run"))) if args.log_dir else None
    with (logger or nullcontext()), redirect_stdout(logger) if logger else nullcontext():
        mismatches = run(args.n, args.depth, args.seed, verify=args.verify)
    return 1 if mismatches else 0


if __name__ == "__main__":
    raise SystemExit(main())

#!/usr/bin/env python3
"""
Solve one 8-puzzle board with A* and print every step.

Run:
  python demo.py
  python demo.py --board 1,2,3,4,5,6,7,0,8 --log-dir ./logs
"""

from __future__ import annotations
import argparse
from contextlib import redirect_stdout, nullcontext
from typing import List, Optional

from puzzle import InvalidBoardError, State, format_rows, validate
from search import solve
from teelog import TeeLogger, log_path

START_BOARD: State = (4,5,1,2,0,3,7,8,6)


def parse_board(text: str) -> State:
    try:
        return validate(int(v) for v in text.replace(" ", "").split(","))
    except ValueError as e:
        # argparse turns ArgumentTypeError into a usage error (exit 2)
        raise argparse.ArgumentTypeError(str(e))


def print_solution(path: Optional[List[State]]) -> None:
    if path is None:
        print("No solution found!")
        return
    print(f"Solution found in {len(path) - 1} moves:")
    for i, step in enumerate(path):
        print(f"Step {i}:")
        for row in format_rows(step):
            print(row)
        print()


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Solve an 8-puzzle board with A*")
    ap.add_argument("--board", type=parse_board, default=START_BOARD,
                    help="comma-separated tiles, 0 is the blank (default: 4,5,1,2,0,3,7,8,6)")
    ap.add_argument("--log-dir", default=None, help="also write console output to a timestamped log here")
    args = ap.parse_args(argv)

    logger = TeeLogger(str(log_path(args.log_dir, "solve_run"))) if args.log_dir else None
    with (logger or nullcontext()), redirect_stdout(logger) if logger else nullcontext():
        try:
            path = solve(args.board)
        except InvalidBoardError as e:
            print(f"Invalid board: {e}")
            return 2
        print_solution(path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

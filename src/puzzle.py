
from __future__ import annotations
import random
from typing import List, Tuple, Optional, Sequence

# 8-puzzle representation:
# state is a tuple of length 9 with values 0..8, where 0 is the blank.
# Goal is (1,2,3,4,5,6,7,8,0)

State = Tuple[int,...]

SIZE = 3
GOAL: State = (1,2,3,4,5,6,7,8,0)
IDX_TO_POS = {i: (i//3, i%3) for i in range(9)}
POS_TO_IDX = {(r,c): r*3 + c for r in range(3) for c in range(3)}
GOAL_POS = {tile: IDX_TO_POS[i] for i, tile in enumerate(GOAL)}

# up, down, left, right
MOVES = {
    'U': (-1, 0),
    'D': ( 1, 0),
    'L': ( 0,-1),
    'R': ( 0, 1),
}
INVERSE = {'U':'D','D':'U','L':'R','R':'L'}


class InvalidBoardError(ValueError):
    """Raised when a board is not a permutation of 0..8."""


def validate(board: Sequence[int]) -> State:
    """
    Check that board is a valid 3x3 configuration and return it as a tuple.

    Raises:
        InvalidBoardError: wrong length, non-integer entries, or not a permutation of 0..8
    """
    try:
        state = tuple(board)
    except TypeError:
        raise InvalidBoardError(f"board must be a sequence of 9 integers, got {board!r}") from None
    if len(state) != SIZE * SIZE:
        raise InvalidBoardError(f"board must have {SIZE * SIZE} tiles, got {len(state)}")
    for v in state:
        if isinstance(v, bool) or not isinstance(v, int):
            raise InvalidBoardError(f"tiles must be integers, got {v!r}")
    if sorted(state) != list(range(SIZE * SIZE)):
        missing = sorted(set(range(SIZE * SIZE)) - set(state))
        raise InvalidBoardError(f"board must contain each of 0..8 exactly once (missing {missing})")
    return state

def find_blank(state: State) -> int:
    try:
        return state.index(0)
    except ValueError:
        raise InvalidBoardError(f"board has no blank tile: {state!r}") from None

def manhattan(state: State) -> int:
    """Sum of Manhattan distances for all tiles except blank."""
    dist = 0
    for i, tile in enumerate(state):
        if tile == 0:
            continue
        r, c = IDX_TO_POS[i]
        gr, gc = GOAL_POS[tile]
        dist += abs(r-gr) + abs(c-gc)
    return dist

def is_goal(state: State) -> bool:
    return tuple(state) == GOAL

def neighbors(state: State) -> List[Tuple[str, State]]:
    """Return list of (action, next_state) pairs, one per legal blank move."""
    zi = find_blank(state)
    zr, zc = IDX_TO_POS[zi]
    result = []
    for a, (dr, dc) in MOVES.items():
        nr, nc = zr + dr, zc + dc
        if 0 <= nr < 3 and 0 <= nc < 3:
            nzi = POS_TO_IDX[(nr, nc)]
            new_state = list(state)
            new_state[zi], new_state[nzi] = new_state[nzi], new_state[zi]
            result.append((a, tuple(new_state)))
    return result

def pretty(state: State) -> str:
    """ASCII rendering."""
    s = ""
    for r in range(3):
        row = []
        for c in range(3):
            v = state[r*3+c]
            row.append(" " if v==0 else str(v))
        s += " ".join(x.rjust(2) for x in row) + "\n"
    return s

def format_rows(state: State) -> List[str]:
    """Three rows of three values, e.g. ['[4, 5, 1]', ...]."""
    return [str(list(state[r*3:r*3+3])) for r in range(3)]

def scramble(depth: int = 25, rng: Optional[random.Random] = None, start: State = GOAL) -> State:
    """Random walk of `depth` blank moves from `start`, never undoing the previous move."""
    rng = rng or random.Random()
    state = start
    last = None
    for _ in range(depth):
        choices = [(a, s) for (a, s) in neighbors(state) if last is None or a != INVERSE[last]]
        last, state = rng.choice(choices)
    return state

"""
Move generator — one pusher step, with crate pushing.
"""

from __future__ import annotations

from typing import NamedTuple

from board import CRATE, EMPTY, PUSHER, Board, State, clone_items


# ---------------------------------------------------------------------------
# Direction helpers
# ---------------------------------------------------------------------------

class Dir(NamedTuple):
    dr: int
    dc: int
    char: str

UP    = Dir(-1,  0, "u")
DOWN  = Dir( 1,  0, "d")
LEFT  = Dir( 0, -1, "l")
RIGHT = Dir( 0,  1, "r")
DIRS  = (UP, DOWN, LEFT, RIGHT)

BY_CHAR = {d.char: d for d in DIRS}


# ---------------------------------------------------------------------------
# Single step
# ---------------------------------------------------------------------------

def step(board: Board, state: State, d: Dir) -> State | None:
    """Move the pusher one cell in direction `d`.

    Returns the successor state on a fresh item grid, or None if the move
    is illegal: the target is a wall or off the board, or the target holds
    a crate whose far side is a wall, off the board, or another crate.
    The parent grid is never modified.
    """
    pr, pc = state.pusher
    tr, tc = pr + d.dr, pc + d.dc
    if board.is_wall(tr, tc):
        return None

    pushing = state.items[tr][tc] == CRATE
    if pushing:
        br, bc = tr + d.dr, tc + d.dc
        if board.is_wall(br, bc) or state.items[br][bc] == CRATE:
            return None

    items = clone_items(state.items)
    items[pr][pc] = EMPTY
    items[tr][tc] = PUSHER
    if pushing:
        items[br][bc] = CRATE
    return State((tr, tc), items)


def apply_moves(board: Board, state: State, moves: str) -> State:
    """Replay a move string from `state` and return the final state.

    Raises ValueError on an unknown move character or an illegal move.
    """
    for i, ch in enumerate(moves):
        d = BY_CHAR.get(ch)
        if d is None:
            raise ValueError(f"Unknown move {ch!r} at index {i}")
        nxt = step(board, state, d)
        if nxt is None:
            raise ValueError(
                f"Illegal move {ch!r} at index {i} from {state.pusher}"
            )
        state = nxt
    return state

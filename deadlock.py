"""
Deadlock detection.

Every detector here answers "can this state never be solved?" and only
says yes when that is certain, so pruning never loses a solution.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from board import CRATE, Board, crates


# ---------------------------------------------------------------------------
# Corner deadlock
# ---------------------------------------------------------------------------

def is_corner(board: Board, r: int, c: int) -> bool:
    """True if (r, c) has a wall on the vertical axis and one on the
    horizontal axis.  Off-board neighbours count as walls."""
    vertical = board.is_wall(r - 1, c) or board.is_wall(r + 1, c)
    horizontal = board.is_wall(r, c - 1) or board.is_wall(r, c + 1)
    return vertical and horizontal


def is_dead(board: Board, items: Sequence[Sequence[str]]) -> bool:
    """True if some crate off a goal sits in a corner."""
    for r, c in crates(items):
        if is_corner(board, r, c) and not board.is_goal(r, c):
            return True
    return False


# ---------------------------------------------------------------------------
# Frozen 2x2 squares
# ---------------------------------------------------------------------------

def has_frozen_square(board: Board, items: Sequence[Sequence[str]]) -> bool:
    """True if a 2x2 square made only of walls and crates holds a crate
    that is not on a goal.  None of those crates can ever move again."""
    for r, c in crates(items):
        for top in (r - 1, r):
            for left in (c - 1, c):
                square = [(top, left), (top, left + 1),
                          (top + 1, left), (top + 1, left + 1)]

                def blocked(pos):
                    rr, cc = pos
                    return board.is_wall(rr, cc) or items[rr][cc] == CRATE

                if not all(blocked(p) for p in square):
                    continue
                if any(not board.is_wall(rr, cc)
                       and not board.is_goal(rr, cc)
                       for rr, cc in square):
                    return True
    return False


def is_frozen(board: Board, items: Sequence[Sequence[str]]) -> bool:
    """Corner rule plus the frozen-square rule."""
    return is_dead(board, items) or has_frozen_square(board, items)


DETECTORS: dict[str, Callable[[Board, Sequence[Sequence[str]]], bool]] = {
    "corner": is_dead,
    "freeze": is_frozen,
}

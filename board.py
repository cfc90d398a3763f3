"""
Board model — the static map and the dynamic item layer.

The static map (walls, floors, goals) never changes during a solve.  The
dynamic layer holds the pusher and the crates and is copied for every
child state, so a grid that has been handed to the search is never
mutated again.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import NamedTuple


# ---------------------------------------------------------------------------
# Cell characters
# ---------------------------------------------------------------------------

WALL = "#"
FLOOR = " "
GOAL = "."

PUSHER = "@"
CRATE = "$"
EMPTY = " "

STATIC_CHARS = frozenset((WALL, FLOOR, GOAL))
ITEM_CHARS = frozenset((PUSHER, CRATE, EMPTY))

Pos = tuple[int, int]
Items = list[list[str]]


# ---------------------------------------------------------------------------
# Static map
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Board:
    """Static, immutable data about a board: size and the cell kinds."""
    width: int
    height: int
    rows: tuple[str, ...]
    goals: tuple[Pos, ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        goals = tuple(
            (r, c)
            for r, row in enumerate(self.rows)
            for c, ch in enumerate(row)
            if ch == GOAL
        )
        object.__setattr__(self, "goals", goals)

    @classmethod
    def from_map(cls, width: int, height: int,
                 static_map: Sequence[Sequence[str]]) -> Board:
        """Build a Board from a height x width grid of map characters."""
        rows = tuple("".join(row) for row in static_map)
        return cls(width=width, height=height, rows=rows)

    def in_bounds(self, r: int, c: int) -> bool:
        return 0 <= r < self.height and 0 <= c < self.width

    def is_wall(self, r: int, c: int) -> bool:
        """True for wall cells.  Cells outside the board count as walls."""
        if not self.in_bounds(r, c):
            return True
        return self.rows[r][c] == WALL

    def is_goal(self, r: int, c: int) -> bool:
        return self.in_bounds(r, c) and self.rows[r][c] == GOAL


# ---------------------------------------------------------------------------
# Dynamic layer
# ---------------------------------------------------------------------------

class State(NamedTuple):
    """Pusher position plus the item grid it was read from."""
    pusher: Pos
    items: Items


def clone_items(items: Sequence[Sequence[str]]) -> Items:
    """Deep copy of an item grid; rows of the copy are fresh lists."""
    return [list(row) for row in items]


def find_pusher(items: Sequence[Sequence[str]]) -> Pos:
    """Return the (row, col) of the pusher, scanning row-major."""
    for r, row in enumerate(items):
        for c, ch in enumerate(row):
            if ch == PUSHER:
                return (r, c)
    raise ValueError("Item grid has no pusher (@)")


def crates(items: Sequence[Sequence[str]]) -> list[Pos]:
    """All crate positions in row-major order."""
    return [
        (r, c)
        for r, row in enumerate(items)
        for c, ch in enumerate(row)
        if ch == CRATE
    ]

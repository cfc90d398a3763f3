"""
Level text handling for callers of the engine.

Standard notation:
  # = wall, ' ' = floor, . = goal, $ = crate, @ = pusher,
  * = crate on goal, + = pusher on goal

parse_level() splits a level into the two grids the engine takes: the
static map ('#', '.', ' ') and the items ('@', '$', ' ').
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import NamedTuple

from board import (
    CRATE,
    EMPTY,
    FLOOR,
    GOAL,
    ITEM_CHARS,
    PUSHER,
    STATIC_CHARS,
    WALL,
    Board,
)


class Puzzle(NamedTuple):
    width: int
    height: int
    static_map: tuple[str, ...]
    items: tuple[str, ...]


# char -> (static, item)
_SPLIT = {
    WALL: (WALL, EMPTY),
    FLOOR: (FLOOR, EMPTY),
    GOAL: (GOAL, EMPTY),
    CRATE: (FLOOR, CRATE),
    PUSHER: (FLOOR, PUSHER),
    "*": (GOAL, CRATE),
    "+": (GOAL, PUSHER),
}


def parse_level(text: str) -> Puzzle:
    """Parse a standard Sokoban level string into a validated Puzzle.

    Short rows are padded with floor.  Raises ValueError on unknown
    characters or an inconsistent level.
    """
    lines = text.rstrip("\n").split("\n")
    height = len(lines)
    width = max(len(line) for line in lines)

    static_rows: list[str] = []
    item_rows: list[str] = []
    for r, line in enumerate(lines):
        static_row: list[str] = []
        item_row: list[str] = []
        for c, ch in enumerate(line.ljust(width)):
            if ch not in _SPLIT:
                raise ValueError(f"Unknown character {ch!r} at ({r}, {c})")
            s, i = _SPLIT[ch]
            static_row.append(s)
            item_row.append(i)
        static_rows.append("".join(static_row))
        item_rows.append("".join(item_row))

    puzzle = Puzzle(width, height, tuple(static_rows), tuple(item_rows))
    validate(*puzzle)
    return puzzle


def validate(width: int, height: int,
             static_map: Sequence[Sequence[str]],
             items: Sequence[Sequence[str]]) -> None:
    """Raise ValueError unless the two grids describe a well-formed board."""
    for name, grid in (("static map", static_map), ("items", items)):
        if len(grid) != height:
            raise ValueError(
                f"{name} has {len(grid)} rows, expected {height}"
            )
        for r, row in enumerate(grid):
            if len(row) != width:
                raise ValueError(
                    f"{name} row {r} has {len(row)} cells, expected {width}"
                )

    pushers = 0
    crate_count = 0
    goal_count = 0
    for r in range(height):
        for c in range(width):
            s = static_map[r][c]
            i = items[r][c]
            if s not in STATIC_CHARS:
                raise ValueError(f"Unknown map character {s!r} at ({r}, {c})")
            if i not in ITEM_CHARS:
                raise ValueError(f"Unknown item character {i!r} at ({r}, {c})")
            if s == WALL and i != EMPTY:
                raise ValueError(f"Item {i!r} on a wall at ({r}, {c})")
            if s == GOAL:
                goal_count += 1
            if i == CRATE:
                crate_count += 1
            elif i == PUSHER:
                pushers += 1

    if pushers != 1:
        raise ValueError(f"Expected exactly one pusher (@), found {pushers}")
    if crate_count != goal_count:
        raise ValueError(
            f"Crate count ({crate_count}) != goal count ({goal_count})"
        )


def render(board: Board, items: Sequence[Sequence[str]]) -> str:
    """Render a board and item grid back into standard notation."""
    lines = []
    for r in range(board.height):
        row = []
        for c in range(board.width):
            item = items[r][c]
            goal = board.is_goal(r, c)
            if board.is_wall(r, c):
                row.append(WALL)
            elif item == CRATE:
                row.append("*" if goal else CRATE)
            elif item == PUSHER:
                row.append("+" if goal else PUSHER)
            elif goal:
                row.append(GOAL)
            else:
                row.append(FLOOR)
        lines.append("".join(row).rstrip())
    return "\n".join(lines)

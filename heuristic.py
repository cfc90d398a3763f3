"""
Heuristics — admissible lower bounds on the remaining pusher moves.

Each crate needs at least its Manhattan distance to some goal in pushes,
and every push is one pusher move.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from itertools import permutations

from board import Board, Pos, crates

# Above this many crates the assignment search is too slow; fall back.
MATCHING_LIMIT = 6


def manhattan(a: Pos, b: Pos) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def nearest_goal_sum(board: Board, items: Sequence[Sequence[str]]) -> int:
    """Sum over crates of the distance to the nearest goal.  Goals are
    shared, so two crates may count the same goal."""
    goals = board.goals
    if not goals:
        return 0
    return sum(
        min(manhattan(crate, goal) for goal in goals)
        for crate in crates(items)
    )


def matching_sum(board: Board, items: Sequence[Sequence[str]]) -> int:
    """Minimum total Manhattan distance over one-to-one crate→goal
    assignments."""
    crate_list = crates(items)
    goal_list = list(board.goals)
    n = len(crate_list)
    if n == 0:
        return 0
    if n > MATCHING_LIMIT or n != len(goal_list):
        return nearest_goal_sum(board, items)

    dists = [
        [manhattan(crate_list[i], goal_list[j]) for j in range(n)]
        for i in range(n)
    ]

    best = min(
        sum(dists[i][perm[i]] for i in range(n))
        for perm in permutations(range(n))
    )
    return best


HEURISTICS: dict[str, Callable[[Board, Sequence[Sequence[str]]], int]] = {
    "nearest": nearest_goal_sum,
    "matching": matching_sum,
}

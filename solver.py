"""
Sokobot — best-first Sokoban search engine.

Explores single pusher moves (walks and pushes alike cost one), ordered by
path length plus a Manhattan-distance heuristic, and prunes children that
the deadlock detector proves unsolvable.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from board import CRATE, Board, Pos, State, clone_items, find_pusher
from deadlock import DETECTORS
from heuristic import HEURISTICS
from moves import DIRS, step

logger = logging.getLogger(__name__)

NO_SOLUTION = "No solution found"

# Log a progress line every this many expanded states.
LOG_EVERY = 10_000


# ---------------------------------------------------------------------------
# Search nodes
# ---------------------------------------------------------------------------

@dataclass
class Node:
    state: State
    path: str
    g: int
    h: int

    @property
    def priority(self) -> int:
        return self.g + self.h


StateKey = tuple[Pos, tuple[str, ...]]


def state_key(state: State) -> StateKey:
    """Hashable fingerprint: pusher position plus the item rows."""
    return state.pusher, tuple("".join(row) for row in state.items)


def is_solved(board: Board, items: Sequence[Sequence[str]]) -> bool:
    """Every goal cell holds a crate."""
    return all(items[r][c] == CRATE for r, c in board.goals)


# ---------------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------------

@dataclass
class SearchResult:
    moves: str | None
    states_explored: int
    exhausted: bool        # frontier drained without a solution

    @property
    def solved(self) -> bool:
        return self.moves is not None


def search(board: Board, items: Sequence[Sequence[str]], *,
           heuristic: str = "nearest", deadlock: str = "corner",
           max_states: int | None = None,
           progress_callback: Callable[[int], None] | None = None,
           progress_every: int = LOG_EVERY) -> SearchResult:
    """Best-first search from the given item grid.

    `heuristic` and `deadlock` name entries in HEURISTICS and DETECTORS.
    `max_states` bounds the number of expanded states; None means no
    bound.  If given, `progress_callback` is called with the number of
    expanded states every `progress_every` expansions.  The input grid is
    copied and left untouched.
    """
    try:
        h = HEURISTICS[heuristic]
    except KeyError:
        raise ValueError(f"Unknown heuristic {heuristic!r}") from None
    try:
        is_dead = DETECTORS[deadlock]
    except KeyError:
        raise ValueError(f"Unknown deadlock detector {deadlock!r}") from None

    start = State(find_pusher(items), clone_items(items))
    root = Node(start, "", 0, h(board, start.items))

    # Entries are (priority, insertion order, node); the counter keeps
    # equal priorities FIFO and stops heapq from comparing nodes.
    counter = itertools.count()
    frontier: list[tuple[int, int, Node]] = [(root.priority, next(counter), root)]
    visited: set[StateKey] = set()

    logger.info("search start: %dx%d board, %d goals, h0=%d",
                board.width, board.height, len(board.goals), root.h)

    while frontier:
        _, _, node = heapq.heappop(frontier)

        if is_solved(board, node.state.items):
            logger.info("solved: %d moves, %d states explored",
                        node.g, len(visited))
            return SearchResult(node.path, len(visited), exhausted=False)

        key = state_key(node.state)
        if key in visited:
            continue
        if max_states is not None and len(visited) >= max_states:
            logger.info("state limit %d reached", max_states)
            return SearchResult(None, len(visited), exhausted=False)
        visited.add(key)

        if len(visited) % LOG_EVERY == 0:
            logger.debug("%d states explored, frontier %d, f=%d",
                         len(visited), len(frontier), node.priority)
        if progress_callback and len(visited) % progress_every == 0:
            progress_callback(len(visited))

        for d in DIRS:
            child = step(board, node.state, d)
            if child is None:
                continue
            if is_dead(board, child.items):
                continue
            child_node = Node(child, node.path + d.char, node.g + 1,
                              h(board, child.items))
            heapq.heappush(
                frontier, (child_node.priority, next(counter), child_node)
            )

    logger.info("no solution: frontier drained after %d states", len(visited))
    return SearchResult(None, len(visited), exhausted=True)


def solve(width: int, height: int,
          static_map: Sequence[Sequence[str]],
          initial_items: Sequence[Sequence[str]]) -> str:
    """Solve a puzzle given as two height x width character grids.

    `static_map` uses '#', '.', ' '; `initial_items` uses '@', '$', ' '.
    Returns the move string over u/d/l/r, "" if already solved, or
    NO_SOLUTION.
    """
    board = Board.from_map(width, height, static_map)
    result = search(board, initial_items)
    return result.moves if result.solved else NO_SOLUTION


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    # Quick smoke test with a trivial puzzle
    from level import parse_level

    test_level = """\
######
#.   #
# $  #
#  @ #
######"""

    logging.basicConfig(level=logging.INFO)
    print("Solving:")
    print(test_level)
    print()

    puzzle = parse_level(test_level)
    print(solve(*puzzle))

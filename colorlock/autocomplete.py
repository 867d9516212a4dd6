"""Finish a practically won board in one step.

Once the locked region is the target color and covers all but a few cells,
the remaining work is mechanical: every leftover region of another color
needs exactly one move.
"""

from __future__ import annotations

import logging
from typing import FrozenSet, Sequence, Set, Tuple

from .flood import region_from
from .grid import Color, Coord, Grid, copy_grid
from .regions import locked_color
from .session import PuzzleSession

logger = logging.getLogger(__name__)


def can_autocomplete(session: PuzzleSession) -> bool:
    if session.status.is_terminal:
        return False
    size = session.size
    if len(session.locked) < size * size - session.config.autocomplete_margin:
        return False
    return locked_color(session.grid, session.locked) == session.puzzle.target_color


def complete_grid(grid: Sequence[Sequence[Color]], locked: FrozenSet[Coord], target: Color) -> Tuple[Grid, int]:
    """Recolor every unlocked non-target region to ``target``.

    Returns the finished grid and the number of moves it took, one per region.
    """
    out = copy_grid(grid)
    n = len(out)
    seen: Set[Coord] = set(locked)
    moves = 0
    for r in range(n):
        for c in range(n):
            if (r, c) in seen:
                continue
            color = grid[r][c]
            _, cells = region_from(grid, r, c, color)
            cells -= locked
            seen |= cells
            if color == target:
                continue
            moves += 1
            for rr, cc in cells:
                out[rr][cc] = target
    return out, moves


def autocomplete(session: PuzzleSession) -> int:
    if not can_autocomplete(session):
        raise ValueError("autocomplete needs a target-colored locked region covering nearly the whole board")
    grid, moves = complete_grid(session.grid, session.locked, session.puzzle.target_color)
    state = session.finish(grid, moves)
    logger.info("autocomplete added %d moves, status %s", moves, state.status.value)
    return moves

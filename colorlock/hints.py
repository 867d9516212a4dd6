from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import FrozenSet, List, Optional, Sequence, Tuple

import numpy as np

from .codec import ActionCodec
from .config import LOCK_THRESHOLD
from .flood import region_from
from .grid import Color, Coord, copy_grid, in_bounds, neighbors4
from .trace import SolutionTrace

logger = logging.getLogger(__name__)

REJECTED_SCORE = -999999.0


@dataclass(frozen=True)
class Hint:
    row: int
    col: int
    color: Color
    # Cells the suggested move would recolor
    connected_cells: FrozenSet[Coord]
    source: str  # "trace" or "solver"
    score: Optional[float] = None

    def to_dict(self) -> dict:
        return {
            "row": self.row,
            "col": self.col,
            "color": self.color.value,
            "connected_cells": sorted([r, c] for r, c in self.connected_cells),
            "source": self.source,
            "score": self.score,
        }


def valid_actions(grid: Sequence[Sequence[Color]], locked: FrozenSet[Coord], codec: ActionCodec) -> List[int]:
    """All live action ids in encode order, minus locked cells and no-op colors."""
    valid: List[int] = []
    for action_id in range(codec.action_space_size):
        row, col, color = codec.decode(action_id)
        if (row, col) in locked:
            continue
        if grid[row][col] == color:
            continue
        valid.append(action_id)
    return valid


def score_action(
    grid: Sequence[Sequence[Color]],
    locked: FrozenSet[Coord],
    target: Color,
    action_id: int,
    codec: ActionCodec,
    lock_threshold: int = LOCK_THRESHOLD,
) -> float:
    """Score a live candidate by simulating it on a scratch copy.

    The score is the net growth of the largest region involved in the move,
    plus a small bonus when the move joins several blocks of the new color.
    Moves that are impossible, or that would immediately lose, get
    ``REJECTED_SCORE``.
    """
    n = len(grid)
    if not 0 <= action_id < codec.action_space_size:
        return REJECTED_SCORE
    row, col, new_color = codec.decode(action_id)
    if not in_bounds(n, row, col):
        return REJECTED_SCORE
    old_color = grid[row][col]
    if new_color == old_color or (row, col) in locked:
        return REJECTED_SCORE

    scratch = copy_grid(grid)
    old_size, changed = region_from(scratch, row, col, old_color)

    # Distinct blocks of the new color touching the moved region
    block_sizes: List[int] = []
    claimed = set()
    for r, c in sorted(changed):
        for nr, nc in neighbors4(r, c):
            if (nr, nc) in claimed or not in_bounds(n, nr, nc):
                continue
            if scratch[nr][nc] == new_color:
                size, cells = region_from(scratch, nr, nc, new_color)
                block_sizes.append(size)
                claimed |= cells

    largest_involved = max(old_size, max(block_sizes) if block_sizes else 0)

    for r, c in changed:
        scratch[r][c] = new_color
    after_size, _ = region_from(scratch, row, col, new_color)

    if after_size >= lock_threshold and new_color != target:
        return REJECTED_SCORE

    score = float(after_size - largest_involved)
    if len(block_sizes) >= 2:
        avg_block = sum(block_sizes) / len(block_sizes)
        score += (len(block_sizes) - 1) * (0.1 / avg_block)
    return score


class HintSolver:
    """Suggests the next move, from the trace when on it or by one-ply search otherwise."""

    def __init__(self, codec: ActionCodec, rng: Optional[np.random.Generator] = None, lock_threshold: int = LOCK_THRESHOLD):
        self.codec = codec
        self.rng = rng if rng is not None else np.random.default_rng()
        self.lock_threshold = lock_threshold

    def score_all(self, grid: Sequence[Sequence[Color]], locked: FrozenSet[Coord], target: Color) -> List[Tuple[int, float]]:
        return [
            (action_id, score_action(grid, locked, target, action_id, self.codec, self.lock_threshold))
            for action_id in valid_actions(grid, locked, self.codec)
        ]

    def best_actions(self, grid: Sequence[Sequence[Color]], locked: FrozenSet[Coord], target: Color) -> Tuple[float, List[int]]:
        best_score = REJECTED_SCORE
        best: List[int] = []
        for action_id, score in self.score_all(grid, locked, target):
            if score > best_score or not best:
                best_score = score
                best = [action_id]
            elif score == best_score:
                best.append(action_id)
        return best_score, best

    def suggest(self, grid: Sequence[Sequence[Color]], locked: FrozenSet[Coord], target: Color) -> Optional[Hint]:
        best_score, best = self.best_actions(grid, locked, target)
        if not best:
            logger.debug("no valid actions, no hint")
            return None
        if best_score == REJECTED_SCORE:
            logger.debug("every valid action loses immediately, no hint")
            return None
        action_id = best[int(self.rng.integers(len(best)))]
        row, col, color = self.codec.decode(action_id)
        logger.debug("solver hint %s (score=%.4f, ties=%d)", (row, col, color.value), best_score, len(best))
        _, cells = region_from(grid, row, col, grid[row][col])
        return Hint(row, col, color, frozenset(cells), "solver", best_score)

    def from_trace(
        self,
        grid: Sequence[Sequence[Color]],
        locked: FrozenSet[Coord],
        trace: SolutionTrace,
        move_index: int,
    ) -> Optional[Hint]:
        action_id = trace.action_at(move_index)
        if action_id is None:
            logger.debug("trace exhausted at move %d, no hint", move_index)
            return None
        row, col, color = self.codec.decode_for_trace(action_id)
        if grid[row][col] == color:
            logger.warning("trace action %d at move %d is a no-op on (%d, %d)", action_id, move_index, row, col)
            return None
        if (row, col) in locked:
            logger.warning("trace action %d at move %d targets locked cell (%d, %d)", action_id, move_index, row, col)
            return None
        _, cells = region_from(grid, row, col, grid[row][col])
        return Hint(row, col, color, frozenset(cells), "trace")

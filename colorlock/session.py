from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional, Tuple

import numpy as np

from .codec import ActionCodec
from .config import GameConfig
from .errors import Rejection
from .flood import apply_move
from .grid import Color, Coord, FrozenGrid, Grid, copy_grid, freeze_grid, in_bounds, parse_color
from .hints import Hint, HintSolver
from .io import PuzzleDefinition
from .regions import (
    GameStatus,
    evaluate_status,
    find_largest_region,
    locked_color,
    locked_regions_info,
    update_locks,
)
from .trace import is_on_trace

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionState:
    grid: FrozenGrid
    locked: FrozenSet[Coord]
    move_count: int
    status: GameStatus
    on_trace: bool
    locked_color: Optional[Color] = None
    # sizes of the 4-connected pieces of the locked set, largest first
    locked_regions: Tuple[int, ...] = ()

    def to_dict(self) -> dict:
        return {
            "grid": [[cell.value for cell in row] for row in self.grid],
            "locked": sorted([r, c] for r, c in self.locked),
            "move_count": self.move_count,
            "status": self.status.value,
            "on_trace": self.on_trace,
            "locked_color": self.locked_color.value if self.locked_color is not None else None,
            "locked_regions": list(self.locked_regions),
        }


@dataclass(frozen=True)
class MoveResult:
    accepted: bool
    state: SessionState
    reason: Optional[Rejection] = None
    changed: FrozenSet[Coord] = field(default_factory=frozenset)


class PuzzleSession:
    """One player's run through a puzzle.

    Grids handed out are never mutated afterwards: each accepted move works on
    a fresh copy and the previous board stays in ``history``.
    """

    def __init__(self, puzzle: PuzzleDefinition, config: Optional[GameConfig] = None, rng: Optional[np.random.Generator] = None):
        self.puzzle = puzzle
        self.config = config or GameConfig()
        self.size = len(puzzle.starting_grid)
        self.codec = ActionCodec(grid_size=self.size, color_map=puzzle.color_map)
        if rng is None:
            rng = np.random.default_rng(self.config.seed)
        self.solver = HintSolver(self.codec, rng, self.config.loss_threshold)
        self.start_grid, self.start_offset = self._starting_position()

        self.grid: Grid = []
        self.locked: FrozenSet[Coord] = frozenset()
        self.move_count = 0
        self.status = GameStatus.IN_PROGRESS
        self.on_trace = False
        self.history: List[FrozenGrid] = []
        # Player moves as trace-convention action ids
        self.moves: List[int] = []
        self.restart()

    def _starting_position(self) -> Tuple[FrozenGrid, int]:
        grid = copy_grid(self.puzzle.starting_grid)
        wanted = self.config.head_start
        actions = self.puzzle.trace.actions
        applied = 0
        for action_id in actions[:wanted]:
            row, col, color = self.codec.decode_for_trace(action_id)
            if not in_bounds(self.size, row, col) or grid[row][col] == color:
                logger.warning("head start stopped at unusable trace action %d", action_id)
                break
            apply_move(grid, row, col, color)
            applied += 1
        if applied < wanted:
            logger.warning("head start wanted %d trace moves, applied %d", wanted, applied)
        return freeze_grid(grid), applied

    @property
    def trace_index(self) -> int:
        return self.start_offset + self.move_count

    def restart(self) -> SessionState:
        self.grid = copy_grid(self.start_grid)
        self.locked = frozenset()
        self.move_count = 0
        self.status = GameStatus.IN_PROGRESS
        self.history = [freeze_grid(self.grid)]
        self.moves = []
        self._settle()
        return self.state()

    def _settle(self) -> None:
        largest, _ = find_largest_region(self.grid)
        self.locked = update_locks(self.locked, largest)
        self.status = evaluate_status(self.grid, largest, self.puzzle.target_color, self.config.loss_threshold)
        if self.status is GameStatus.SOLVED:
            self.locked = frozenset()
            logger.info("puzzle solved in %d moves", self.move_count)
        elif self.status is GameStatus.LOST:
            logger.info("puzzle lost after %d moves", self.move_count)
        self.on_trace = is_on_trace(self.grid, self.puzzle.trace, self.trace_index)

    def check_move(self, row: int, col: int, color: Color) -> Optional[Rejection]:
        color = parse_color(color)
        if self.status.is_terminal:
            return Rejection.GAME_OVER
        if not in_bounds(self.size, row, col):
            return Rejection.OUT_OF_BOUNDS
        if self.grid[row][col] == color:
            return Rejection.NO_OP
        if (row, col) in self.locked:
            return Rejection.LOCKED_CELL
        return None

    def move(self, row: int, col: int, color: Color) -> MoveResult:
        color = parse_color(color)
        reason = self.check_move(row, col, color)
        if reason is not None:
            logger.debug("declined move %s: %s", (row, col, color.value), reason.value)
            return MoveResult(False, self.state(), reason)

        grid = copy_grid(self.grid)
        changed = apply_move(grid, row, col, color)
        self.grid = grid
        self.move_count += 1
        self.history.append(freeze_grid(grid))
        self.moves.append(self.codec.encode_for_trace(row, col, color))
        self._settle()
        logger.debug("move %d: %s recolored %d cells", self.move_count, (row, col, color.value), len(changed))
        return MoveResult(True, self.state(), None, frozenset(changed))

    def hint(self) -> Optional[Hint]:
        if self.status.is_terminal:
            return None
        if self.on_trace:
            return self.solver.from_trace(self.grid, self.locked, self.puzzle.trace, self.trace_index)
        return self.solver.suggest(self.grid, self.locked, self.puzzle.target_color)

    def finish(self, grid: Grid, extra_moves: int) -> SessionState:
        """Install a completed board produced outside the move loop."""
        self.grid = grid
        self.move_count += extra_moves
        self.history.append(freeze_grid(grid))
        self._settle()
        return self.state()

    def state(self) -> SessionState:
        return SessionState(
            grid=freeze_grid(self.grid),
            locked=self.locked,
            move_count=self.move_count,
            status=self.status,
            on_trace=self.on_trace,
            locked_color=locked_color(self.grid, self.locked),
            locked_regions=tuple(locked_regions_info(self.locked)),
        )

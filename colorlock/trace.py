from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from .grid import Color, FrozenGrid


@dataclass(frozen=True)
class SolutionTrace:
    """Precomputed optimal play: snapshots[i] is the board before actions[i]."""

    snapshots: Tuple[FrozenGrid, ...]
    actions: Tuple[int, ...]

    @property
    def num_actions(self) -> int:
        return len(self.actions)

    def action_at(self, move_index: int) -> Optional[int]:
        if 0 <= move_index < self.num_actions:
            return self.actions[move_index]
        return None


def is_on_trace(grid: Sequence[Sequence[Color]], trace: SolutionTrace, move_index: int) -> bool:
    """True when ``grid`` matches the trace snapshot at ``move_index``.

    An index past the end of the trace is simply off-trace.
    """
    if move_index < 0 or move_index >= len(trace.snapshots):
        return False
    expected = trace.snapshots[move_index]
    if len(expected) != len(grid):
        return False
    for r, row in enumerate(grid):
        if len(expected[r]) != len(row):
            return False
        for c, cell in enumerate(row):
            if cell != expected[r][c]:
                return False
    return True

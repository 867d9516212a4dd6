from __future__ import annotations

from enum import Enum
from typing import FrozenSet, List, Optional, Sequence, Set, Tuple

from .flood import region_from
from .grid import Color, Coord, is_unified, neighbors4


class GameStatus(str, Enum):
    IN_PROGRESS = "in_progress"
    SOLVED = "solved"
    LOST = "lost"

    @property
    def is_terminal(self) -> bool:
        return self is not GameStatus.IN_PROGRESS


def find_largest_region(grid: Sequence[Sequence[Color]]) -> Tuple[Set[Coord], int]:
    """Find the largest monochromatic 4-connected region.

    Cells are scanned row-major and each region is measured once; on equal
    sizes the region found first wins.
    """
    n = len(grid)
    visited: Set[Coord] = set()
    largest: Set[Coord] = set()
    for r in range(n):
        for c in range(n):
            if (r, c) in visited:
                continue
            size, cells = region_from(grid, r, c, grid[r][c])
            visited |= cells
            if size > len(largest):
                largest = cells
    return largest, len(largest)


def update_locks(locked: FrozenSet[Coord], largest: Set[Coord]) -> FrozenSet[Coord]:
    # Replace only when the new region is not smaller
    if len(largest) >= len(locked):
        return frozenset(largest)
    return locked


def region_color(grid: Sequence[Sequence[Color]], cells: Set[Coord]) -> Optional[Color]:
    if not cells:
        return None
    r, c = min(cells)
    return grid[r][c]


def evaluate_status(
    grid: Sequence[Sequence[Color]],
    largest: Set[Coord],
    target: Color,
    lock_threshold: int,
) -> GameStatus:
    """Apply the termination rules in order.

    1. a region of ``lock_threshold`` cells or more in a non-target color loses;
    2. a fully unified board wins if it is the target color, otherwise loses;
    3. otherwise the game continues.
    """
    if len(largest) >= lock_threshold and region_color(grid, largest) != target:
        return GameStatus.LOST
    if is_unified(grid):
        return GameStatus.SOLVED if grid[0][0] == target else GameStatus.LOST
    return GameStatus.IN_PROGRESS


def locked_color(grid: Sequence[Sequence[Color]], locked: FrozenSet[Coord]) -> Optional[Color]:
    return region_color(grid, set(locked))


def locked_regions_info(locked: FrozenSet[Coord]) -> List[int]:
    """Sizes of the 4-connected pieces of the locked set, largest first."""
    visited: Set[Coord] = set()
    sizes: List[int] = []
    for start in sorted(locked):
        if start in visited:
            continue
        stack = [start]
        visited.add(start)
        size = 0
        while stack:
            cr, cc = stack.pop()
            size += 1
            for nb in neighbors4(cr, cc):
                if nb in locked and nb not in visited:
                    visited.add(nb)
                    stack.append(nb)
        sizes.append(size)
    sizes.sort(reverse=True)
    return sizes

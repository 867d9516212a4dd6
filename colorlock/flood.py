from __future__ import annotations

from typing import List, Sequence, Set, Tuple

from .grid import Color, Coord, Grid, in_bounds, neighbors4


def region_from(grid: Sequence[Sequence[Color]], row: int, col: int, color: Color) -> Tuple[int, Set[Coord]]:
    """Collect the 4-connected cells of ``color`` reachable from (row, col).

    Returns (size, cells). The origin must itself hold ``color``, otherwise the
    region is empty. The grid is only read.
    """
    n = len(grid)
    if not in_bounds(n, row, col) or grid[row][col] != color:
        return 0, set()
    visited: Set[Coord] = {(row, col)}
    stack: List[Coord] = [(row, col)]
    while stack:
        cr, cc = stack.pop()
        for nr, nc in neighbors4(cr, cc):
            if in_bounds(n, nr, nc) and (nr, nc) not in visited and grid[nr][nc] == color:
                visited.add((nr, nc))
                stack.append((nr, nc))
    return len(visited), visited


def apply_move(grid: Grid, row: int, col: int, new_color: Color) -> Set[Coord]:
    """Recolor the region containing (row, col) to ``new_color`` in place.

    Callers reject out-of-bounds, no-op and locked-cell moves beforehand.
    """
    old_color = grid[row][col]
    _, changed = region_from(grid, row, col, old_color)
    for r, c in changed:
        grid[r][c] = new_color
    return changed

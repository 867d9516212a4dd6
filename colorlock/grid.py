from __future__ import annotations

from enum import Enum
from typing import Iterable, List, Optional, Sequence, Tuple

from .errors import PuzzleDefinitionError


class Color(str, Enum):
    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    YELLOW = "yellow"
    PURPLE = "purple"
    ORANGE = "orange"


# Index order used by the action codec
CANONICAL_ORDER: Tuple[Color, ...] = tuple(Color)

# Grid represented as list of rows, each row a list of Color
Grid = List[List[Color]]
FrozenGrid = Tuple[Tuple[Color, ...], ...]
Coord = Tuple[int, int]


def copy_grid(grid: Sequence[Sequence[Color]]) -> Grid:
    return [list(row) for row in grid]


def freeze_grid(grid: Sequence[Sequence[Color]]) -> FrozenGrid:
    return tuple(tuple(row) for row in grid)


def in_bounds(size: int, r: int, c: int) -> bool:
    return 0 <= r < size and 0 <= c < size


def neighbors4(r: int, c: int) -> Iterable[Coord]:
    yield r + 1, c
    yield r - 1, c
    yield r, c + 1
    yield r, c - 1


def is_unified(grid: Sequence[Sequence[Color]]) -> bool:
    if not grid or not grid[0]:
        return True
    first = grid[0][0]
    return all(cell == first for row in grid for cell in row)


def parse_color(value: object, field: str = "color") -> Color:
    """Accept a Color, its string value ("red") or its name ("RED")."""
    if isinstance(value, Color):
        return value
    if isinstance(value, str):
        try:
            return Color(value.lower())
        except ValueError:
            pass
    raise PuzzleDefinitionError(f"unknown color {value!r}", field=field)


def validate_grid(rows: Sequence[Sequence[object]], size: Optional[int] = None, field: str = "grid") -> Grid:
    """Convert raw rows to a square Grid of Color, rejecting malformed input."""
    if not rows:
        raise PuzzleDefinitionError("grid is empty", field=field)
    n = len(rows)
    if size is not None and n != size:
        raise PuzzleDefinitionError(f"expected {size} rows, got {n}", field=field)
    out: Grid = []
    for r, row in enumerate(rows):
        if len(row) != n:
            raise PuzzleDefinitionError(f"row {r} has {len(row)} cells, expected {n}", field=field)
        out.append([parse_color(v, field=field) for v in row])
    return out

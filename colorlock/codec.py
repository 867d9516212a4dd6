from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from .errors import PuzzleDefinitionError
from .grid import CANONICAL_ORDER, Color


Move = Tuple[int, int, Color]


@dataclass(frozen=True)
class ActionCodec:
    """Maps (row, col, color) moves to integer action ids and back.

    Two row conventions exist and each belongs to one context:

    - live: ``row * N*C + col * C + color_index`` with rows top to bottom and
      color indices in canonical order. Used to enumerate and score candidates.
    - trace: rows stored bottom to top, and color indices in the solver's own
      order, related to the canonical order through ``color_map``. Used only to
      read and write ids of the precomputed solution trace.

    ``color_map[i]`` is the solver color index of canonical slot ``i``.
    """

    grid_size: int = 5
    palette: Tuple[Color, ...] = CANONICAL_ORDER
    color_map: Optional[Tuple[int, ...]] = None

    @property
    def num_colors(self) -> int:
        return len(self.palette)

    @property
    def action_space_size(self) -> int:
        return self.grid_size * self.grid_size * self.num_colors

    def color_index(self, color: Color) -> int:
        return self.palette.index(color)

    # live convention

    def encode(self, row: int, col: int, color_index: int) -> int:
        n, k = self.grid_size, self.num_colors
        return row * (n * k) + col * k + color_index

    def encode_move(self, row: int, col: int, color: Color) -> int:
        return self.encode(row, col, self.color_index(color))

    def decode(self, action_id: int) -> Move:
        n, k = self.grid_size, self.num_colors
        row = action_id // (n * k)
        rem = action_id % (n * k)
        return row, rem // k, self.palette[rem % k]

    # trace convention

    def _trace_to_canonical(self, trace_index: int) -> int:
        if self.color_map is not None and trace_index in self.color_map:
            return self.color_map.index(trace_index)
        return trace_index

    def _canonical_to_trace(self, canonical_index: int) -> int:
        if self.color_map is not None and canonical_index < len(self.color_map):
            return self.color_map[canonical_index]
        return canonical_index

    def encode_for_trace(self, row: int, col: int, color: Color) -> int:
        n, k = self.grid_size, self.num_colors
        flipped = (n - 1) - row
        return flipped * (n * k) + col * k + self._canonical_to_trace(self.color_index(color))

    def decode_for_trace(self, action_id: int) -> Move:
        n, k = self.grid_size, self.num_colors
        row = (n - 1) - action_id // (n * k)
        rem = action_id % (n * k)
        col = rem // k
        return row, col, self.palette[self._trace_to_canonical(rem % k)]


def validate_color_map(color_map: Optional[Sequence[int]], num_colors: int) -> Optional[Tuple[int, ...]]:
    if color_map is None:
        return None
    mapped = tuple(int(v) for v in color_map)
    if sorted(mapped) != list(range(num_colors)):
        raise PuzzleDefinitionError(f"not a permutation of 0..{num_colors - 1}: {list(color_map)}", field="colorMap")
    return mapped

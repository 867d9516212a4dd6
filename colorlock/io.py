from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from .codec import validate_color_map
from .errors import PuzzleDefinitionError
from .grid import CANONICAL_ORDER, Color, FrozenGrid, freeze_grid, parse_color, validate_grid
from .trace import SolutionTrace

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PuzzleDefinition:
    starting_grid: FrozenGrid
    target_color: Color
    trace: SolutionTrace
    color_map: Optional[Tuple[int, ...]] = None
    algo_score: Optional[int] = None
    date: Optional[str] = None

    @property
    def size(self) -> int:
        return len(self.starting_grid)


def _state_rows(state: Any, field: str) -> List[Sequence[Any]]:
    # States come either as a list of rows or as {"0": row0, "1": row1, ...}
    if isinstance(state, Mapping):
        try:
            return [state[str(i)] for i in range(len(state))]
        except KeyError as e:
            raise PuzzleDefinitionError(f"missing row {e.args[0]}", field=field) from e
    if isinstance(state, list):
        return state
    raise PuzzleDefinitionError(f"unsupported state type {type(state).__name__}", field=field)


def parse_puzzle(data: Mapping[str, Any], date: Optional[str] = None) -> PuzzleDefinition:
    """Validate a raw puzzle object and build a PuzzleDefinition."""
    if "states" not in data or not data["states"]:
        raise PuzzleDefinitionError("at least the starting state is required", field="states")
    if "targetColor" not in data:
        raise PuzzleDefinitionError("missing", field="targetColor")

    start = validate_grid(_state_rows(data["states"][0], "states[0]"), field="states[0]")
    size = len(start)
    snapshots = [freeze_grid(start)]
    for i, state in enumerate(data["states"][1:], start=1):
        field = f"states[{i}]"
        snapshots.append(freeze_grid(validate_grid(_state_rows(state, field), size=size, field=field)))

    num_colors = len(CANONICAL_ORDER)
    action_space = size * size * num_colors
    actions: List[int] = []
    for i, raw in enumerate(data.get("actions") or []):
        if isinstance(raw, bool) or not isinstance(raw, int) or not 0 <= raw < action_space:
            raise PuzzleDefinitionError(f"action id {raw!r} outside 0..{action_space - 1}", field=f"actions[{i}]")
        actions.append(raw)

    algo_score = data.get("algoScore")
    return PuzzleDefinition(
        starting_grid=snapshots[0],
        target_color=parse_color(data["targetColor"], field="targetColor"),
        trace=SolutionTrace(snapshots=tuple(snapshots), actions=tuple(actions)),
        color_map=validate_color_map(data.get("colorMap"), num_colors),
        algo_score=int(algo_score) if algo_score is not None else None,
        date=date,
    )


def _is_single_puzzle(data: Mapping[str, Any]) -> bool:
    return "states" in data


def load_puzzles(json_path: str) -> Dict[str, PuzzleDefinition]:
    """Load every puzzle in a file keyed by date.

    A file holding one bare puzzle object yields a single entry keyed "".
    """
    with open(json_path, "r") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise PuzzleDefinitionError("top level must be an object", field=json_path)
    if _is_single_puzzle(data):
        return {"": parse_puzzle(data)}
    puzzles = {key: parse_puzzle(value, date=key) for key, value in data.items()}
    logger.info("loaded %d puzzles from %s", len(puzzles), json_path)
    return puzzles


def load_puzzle(json_path: str, date: Optional[str] = None) -> PuzzleDefinition:
    """Load a single puzzle from a JSON file.

    With a date-keyed file, ``date`` picks the puzzle; without it the file must
    hold exactly one.
    """
    with open(json_path, "r") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise PuzzleDefinitionError("top level must be an object", field=json_path)
    if _is_single_puzzle(data):
        return parse_puzzle(data, date=date)
    if date is None:
        if len(data) != 1:
            raise PuzzleDefinitionError(f"file holds {len(data)} puzzles, pick one by date", field=json_path)
        date = next(iter(data))
    if date not in data:
        raise PuzzleDefinitionError(f"no puzzle for {date}", field=json_path)
    logger.info("loaded puzzle %s from %s", date, json_path)
    return parse_puzzle(data[date], date=date)

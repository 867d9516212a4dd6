"""Color-lock puzzle engine: flood-fill moves, region locking and hints.

Modules:
- grid: colors, grid type and helpers
- flood: region discovery and move application
- regions: largest-region scan, lock and win/loss rules
- codec: action id encoding (live and trace conventions)
- trace: adherence to the precomputed solution
- hints: one-ply hint search
- session: a player's run through one puzzle
- autocomplete: finishing a practically won board
- io: puzzle definition loader
- cli: command-line entrypoint
"""

from .codec import ActionCodec
from .config import Difficulty, GameConfig
from .errors import PuzzleDefinitionError, Rejection
from .grid import CANONICAL_ORDER, Color, Grid
from .hints import Hint, HintSolver
from .io import PuzzleDefinition, load_puzzle, load_puzzles
from .regions import GameStatus, find_largest_region
from .session import MoveResult, PuzzleSession, SessionState
from .trace import SolutionTrace, is_on_trace

__all__ = [
    "ActionCodec",
    "CANONICAL_ORDER",
    "Color",
    "Difficulty",
    "GameConfig",
    "GameStatus",
    "Grid",
    "Hint",
    "HintSolver",
    "MoveResult",
    "PuzzleDefinition",
    "PuzzleDefinitionError",
    "PuzzleSession",
    "Rejection",
    "SessionState",
    "SolutionTrace",
    "find_largest_region",
    "is_on_trace",
    "load_puzzle",
    "load_puzzles",
]

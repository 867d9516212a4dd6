"""Rejection taxonomy for player input and errors for malformed puzzle data."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class Rejection(str, Enum):
    """Why a move was declined. A declined move never changes game state."""

    OUT_OF_BOUNDS = "out_of_bounds"
    NO_OP = "no_op"
    LOCKED_CELL = "locked_cell"
    GAME_OVER = "game_over"


class PuzzleDefinitionError(ValueError):
    """
    Raised when a puzzle definition supplied by the data provider is malformed.
    """

    def __init__(self, message: str, *, field: Optional[str] = None) -> None:
        if field:
            message = f"{field}: {message}"
        super().__init__(message)
        self.field = field

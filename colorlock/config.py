from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional


GRID_SIZE = 5
LOCK_THRESHOLD = 13


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


LOSS_THRESHOLD_BY_DIFFICULTY: Dict[Difficulty, int] = {
    Difficulty.EASY: 8,
    Difficulty.MEDIUM: 13,
    Difficulty.HARD: 18,
}

# Trace moves played for the player before their first move
HEAD_START_BY_DIFFICULTY: Dict[Difficulty, int] = {
    Difficulty.EASY: 3,
    Difficulty.MEDIUM: 1,
    Difficulty.HARD: 0,
}


@dataclass(frozen=True)
class GameConfig:
    lock_threshold: int = LOCK_THRESHOLD
    difficulty: Optional[Difficulty] = None
    seed: Optional[int] = None
    autocomplete_margin: int = 3

    @property
    def loss_threshold(self) -> int:
        if self.difficulty is not None:
            return LOSS_THRESHOLD_BY_DIFFICULTY[self.difficulty]
        return self.lock_threshold

    @property
    def head_start(self) -> int:
        if self.difficulty is not None:
            return HEAD_START_BY_DIFFICULTY[self.difficulty]
        return 0

"""Shared constants and enumerations for the word-search engine."""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


class Difficulty(str, Enum):
    """Word-search difficulty tiers."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class SessionStatus(str, Enum):
    """Lifecycle states of a single puzzle instance."""

    GENERATING = "GENERATING"
    PLAYING = "PLAYING"
    COMPLETED = "COMPLETED"


# All eight unit steps: horizontal, vertical and both diagonals, each way.
PLACEMENT_STEPS: Tuple[Tuple[int, int], ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1),
)

ALPHABET = string.ascii_uppercase
MAX_PLACEMENT_ATTEMPTS = 100
# A selection needs two cells, so shorter words could never be found.
MIN_WORD_LENGTH = 2

POINTS_PER_WORD: Dict[Difficulty, int] = {
    Difficulty.BEGINNER: 10,
    Difficulty.INTERMEDIATE: 15,
    Difficulty.ADVANCED: 20,
}
TIME_BONUS_BUDGET_SECONDS = 300
TICK_INTERVAL_SECONDS = 1.0


@dataclass(frozen=True)
class Bounds:
    """Square grid bounds helper."""

    size: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

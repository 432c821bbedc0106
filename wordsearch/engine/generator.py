"""Randomized word placement producing a dense letter grid.

Each word gets a bounded number of placement attempts. A word that cannot
be placed is dropped from the puzzle rather than failing generation, so
``generate`` always terminates with a fully lettered grid.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from ..core.constants import ALPHABET, MAX_PLACEMENT_ATTEMPTS, PLACEMENT_STEPS
from ..core.models import PlacedWord, WordSpec
from ..utils.logger import get_logger
from .grid import LetterGrid


LOGGER = get_logger(__name__)


@dataclass
class GeneratorConfig:
    max_attempts: int = MAX_PLACEMENT_ATTEMPTS
    alphabet: str = ALPHABET


@dataclass
class GenerationResult:
    grid: LetterGrid
    placed_words: List[PlacedWord]
    dropped_words: List[WordSpec] = field(default_factory=list)

    @property
    def dropped_count(self) -> int:
        return len(self.dropped_words)


class GridGenerator:
    """Places a word list into a square grid without destructive collisions."""

    def __init__(self, config: Optional[GeneratorConfig] = None) -> None:
        self.config = config or GeneratorConfig()

    def generate(
        self,
        words: Sequence[WordSpec],
        grid_size: int,
        rng: Optional[random.Random] = None,
    ) -> GenerationResult:
        rng = rng or random.Random()
        grid = LetterGrid(grid_size)
        placed: List[PlacedWord] = []
        dropped: List[WordSpec] = []

        for spec in words:
            placement = self._place(grid, spec, rng)
            if placement is None:
                LOGGER.warning(
                    "Dropping %r after %s placement attempts", spec.word, self.config.max_attempts
                )
                dropped.append(spec)
                continue
            placed.append(placement)

        grid.fill_empty(rng, self.config.alphabet)
        LOGGER.info(
            "Generated %sx%s grid with %s/%s words placed",
            grid_size,
            grid_size,
            len(placed),
            len(words),
        )
        return GenerationResult(grid=grid, placed_words=placed, dropped_words=dropped)

    def _place(self, grid: LetterGrid, spec: WordSpec, rng: random.Random) -> Optional[PlacedWord]:
        word = spec.word
        for attempt in range(1, self.config.max_attempts + 1):
            start = (rng.randrange(grid.size), rng.randrange(grid.size))
            step = rng.choice(PLACEMENT_STEPS)
            cells = grid.line_cells(start, step, len(word))
            if not grid.can_place(word, cells):
                continue
            grid.place_word(word, cells)
            LOGGER.debug("Placed %r at %s step %s (attempt %s)", word, start, step, attempt)
            return PlacedWord(word=word, hint=spec.hint, cells=tuple(cells))
        return None


def generate(
    words: Sequence[WordSpec],
    grid_size: int,
    rng: Optional[random.Random] = None,
) -> Tuple[LetterGrid, List[PlacedWord]]:
    """Convenience wrapper returning only the grid and the placed words."""

    result = GridGenerator().generate(words, grid_size, rng)
    return result.grid, result.placed_words

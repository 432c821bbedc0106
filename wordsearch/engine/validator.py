"""Deterministic rule validation for generated puzzles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Sequence

from ..core.exceptions import ValidationError
from ..core.models import Cell, PlacedWord
from ..utils.logger import get_logger
from .grid import LetterGrid
from .selection import line_path


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class PuzzleValidator:
    """Runs the placement invariants over a finished grid."""

    def validate(self, grid: LetterGrid, placed_words: Sequence[PlacedWord]) -> ValidationResult:
        messages: List[str] = []
        try:
            self._check_dense(grid)
            self._check_letters_valid(grid)
            self._check_words_on_grid(grid, placed_words)
            self._check_straight_lines(placed_words)
            self._check_shared_cells(placed_words)
        except ValidationError as exc:
            messages.append(str(exc))
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=messages)
        return ValidationResult(ok=True, messages=[])

    def _check_dense(self, grid: LetterGrid) -> None:
        if len(grid.cells) != grid.size or any(len(row) != grid.size for row in grid.cells):
            raise ValidationError(f"Grid is not {grid.size}x{grid.size}")
        for r in range(grid.size):
            for c in range(grid.size):
                if grid.letter(r, c) is None:
                    raise ValidationError(f"Empty cell at ({r},{c})")

    def _check_letters_valid(self, grid: LetterGrid) -> None:
        for r in range(grid.size):
            for c in range(grid.size):
                letter = grid.letter(r, c)
                if not letter or len(letter) != 1 or not letter.isalpha() or not letter.isupper():
                    raise ValidationError(f"Invalid letter '{letter}' at ({r},{c})")

    def _check_words_on_grid(self, grid: LetterGrid, placed_words: Sequence[PlacedWord]) -> None:
        for placed in placed_words:
            if len(placed.cells) != len(placed.word):
                raise ValidationError(f"{placed.word} has {len(placed.cells)} cells")
            for index, (row, col) in enumerate(placed.cells):
                if not grid.bounds.contains(row, col):
                    raise ValidationError(f"{placed.word} leaves the grid at ({row},{col})")
                if grid.letter(row, col) != placed.word[index]:
                    raise ValidationError(
                        f"{placed.word}[{index}] expects {placed.word[index]} at ({row},{col}), "
                        f"grid has {grid.letter(row, col)}"
                    )

    def _check_straight_lines(self, placed_words: Sequence[PlacedWord]) -> None:
        for placed in placed_words:
            if not placed.cells:
                continue
            if line_path(placed.cells[0], placed.cells[-1]) != placed.cells:
                raise ValidationError(f"{placed.word} is not on a straight line")

    def _check_shared_cells(self, placed_words: Sequence[PlacedWord]) -> None:
        required: Dict[Cell, str] = {}
        for placed in placed_words:
            for index, cell in enumerate(placed.cells):
                letter = placed.word[index]
                existing = required.setdefault(cell, letter)
                if existing != letter:
                    raise ValidationError(
                        f"Cell {cell} needs both {existing} and {letter} ({placed.word})"
                    )

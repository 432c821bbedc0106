"""Letter grid representation and placement helpers."""

from __future__ import annotations

import random
from typing import Iterable, List, Optional, Sequence, Tuple

from ..core.constants import ALPHABET, Bounds
from ..core.models import Cell
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


class LetterGrid:
    """Square matrix of single uppercase letters.

    Cells start empty (``None``) while words are being placed and are all
    filled once :meth:`fill_empty` has run.
    """

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError(f"Grid size must be positive, got {size}")
        self.size = size
        self.bounds = Bounds(size=size)
        self.cells: List[List[Optional[str]]] = [[None for _ in range(size)] for _ in range(size)]
        self._filled_count = 0

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "LetterGrid":
        """Build a dense grid from strings, one per row."""

        grid = cls(len(rows))
        for r, row in enumerate(rows):
            if len(row) != grid.size:
                raise ValueError(f"Row {r} has {len(row)} letters, expected {grid.size}")
            for c, letter in enumerate(row.upper()):
                grid._set(r, c, letter)
        return grid

    # ------------------------------------------------------------------
    # Placement
    # ------------------------------------------------------------------
    @staticmethod
    def line_cells(start: Cell, step: Tuple[int, int], length: int) -> List[Cell]:
        row, col = start
        dr, dc = step
        return [(row + dr * i, col + dc * i) for i in range(length)]

    def can_place(self, word: str, cells: Sequence[Cell]) -> bool:
        """Return whether ``word`` fits on ``cells`` without a letter conflict."""

        for index, (row, col) in enumerate(cells):
            if not self.bounds.contains(row, col):
                return False
            existing = self.cells[row][col]
            if existing is not None and existing != word[index]:
                return False
        return True

    def place_word(self, word: str, cells: Sequence[Cell]) -> None:
        if len(word) != len(cells):
            raise ValueError("Word length mismatch")
        if not self.can_place(word, cells):
            raise ValueError(f"Cannot place {word!r} on {list(cells)}")
        for index, (row, col) in enumerate(cells):
            self._set(row, col, word[index])

    def fill_empty(self, rng: random.Random, alphabet: str = ALPHABET) -> int:
        """Assign an independent random letter to every empty cell."""

        filled = 0
        for r in range(self.size):
            for c in range(self.size):
                if self.cells[r][c] is None:
                    self._set(r, c, rng.choice(alphabet))
                    filled += 1
        LOGGER.debug("Filled %s empty cells with random letters", filled)
        return filled

    def _set(self, row: int, col: int, letter: str) -> None:
        if self.cells[row][col] is None:
            self._filled_count += 1
        self.cells[row][col] = letter

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def letter(self, row: int, col: int) -> Optional[str]:
        return self.cells[row][col]

    def letters_along(self, cells: Iterable[Cell]) -> str:
        return "".join(self.cells[row][col] or "" for row, col in cells)

    @property
    def is_dense(self) -> bool:
        return self._filled_count == self.size * self.size

    def rows(self) -> List[str]:
        return ["".join(letter or "." for letter in row) for row in self.cells]

    # ------------------------------------------------------------------
    # Serialization helpers
    # ------------------------------------------------------------------
    def to_jsonable(self) -> List[List[Optional[str]]]:
        return [list(row) for row in self.cells]

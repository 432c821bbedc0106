"""Checks a finished selection against the words still hidden in the grid."""

from __future__ import annotations

from typing import Optional, Sequence

from ..core.models import PlacedWord, SelectionPath
from ..utils.logger import get_logger
from .grid import LetterGrid


LOGGER = get_logger(__name__)


class WordMatcher:
    """Matches by letters and by exact coordinates, in either orientation.

    Requiring both avoids crediting a word when the same letters happen to
    appear elsewhere in the grid on a different line.
    """

    def __init__(self, grid: LetterGrid) -> None:
        self.grid = grid

    def match(self, path: SelectionPath, placed_words: Sequence[PlacedWord]) -> Optional[PlacedWord]:
        if not path:
            return None
        forward_cells = tuple(path)
        reverse_cells = forward_cells[::-1]
        forward = self.grid.letters_along(forward_cells)
        reverse = forward[::-1]

        for candidate in placed_words:
            if candidate.found:
                continue
            if candidate.word != forward and candidate.word != reverse:
                continue
            if candidate.cells != forward_cells and candidate.cells != reverse_cells:
                continue
            candidate.found = True
            LOGGER.debug("Matched %r on %s", candidate.word, forward_cells)
            return candidate
        return None

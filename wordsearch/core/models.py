"""Data models supporting the word-search engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional, Tuple

from .constants import Difficulty, SessionStatus

if TYPE_CHECKING:
    from ..engine.grid import LetterGrid


Cell = Tuple[int, int]
SelectionPath = Tuple[Cell, ...]


@dataclass(frozen=True)
class WordSpec:
    """A word to hide in the grid together with the hint shown to the player."""

    word: str
    hint: str = ""


@dataclass
class PlacedWord:
    """A word committed to the grid; ``cells[i]`` holds ``word[i]``."""

    word: str
    hint: str
    cells: Tuple[Cell, ...]
    found: bool = False

    @property
    def length(self) -> int:
        return len(self.word)


@dataclass
class GameSession:
    """All mutable state of one puzzle instance, owned by the controller."""

    difficulty: Difficulty
    grid: Optional["LetterGrid"] = None
    placed_words: List[PlacedWord] = field(default_factory=list)
    dropped_words: List[WordSpec] = field(default_factory=list)
    found_count: int = 0
    score: int = 0
    elapsed_seconds: int = 0
    status: SessionStatus = SessionStatus.GENERATING

    @property
    def total_words(self) -> int:
        return len(self.placed_words)

    @property
    def is_complete(self) -> bool:
        return self.status == SessionStatus.COMPLETED


@dataclass(frozen=True)
class LevelResult:
    """Payload emitted to the host when every placed word has been found."""

    score: int
    elapsed_seconds: int
    found_count: int
    total_words: int
    difficulty: Difficulty

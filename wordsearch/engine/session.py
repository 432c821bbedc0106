"""Session orchestration: generation, play and completion of one puzzle.

The controller owns a single :class:`GameSession` at a time and walks it
through ``GENERATING -> PLAYING -> COMPLETED``. Starting a new game, changing
difficulty or advancing to the next level replaces the session and re-enters
``GENERATING``.
"""

from __future__ import annotations

import functools
import random
import threading
from typing import Any, Callable, Dict, List, Optional, Set

from ..core.constants import TICK_INTERVAL_SECONDS, Difficulty, SessionStatus
from ..core.models import Cell, GameSession, LevelResult, PlacedWord, SelectionPath
from ..data.catalog import LevelConfig, get_level, next_level
from ..utils.logger import get_logger
from .generator import GridGenerator
from .grid import LetterGrid
from .matcher import WordMatcher
from .scoring import ScoreEngine
from .selection import SelectionTracker
from .timer import ManualScheduler, Scheduler, TimerHandle


LOGGER = get_logger(__name__)

LevelCompleteCallback = Callable[[LevelResult], None]


class SessionController:
    """Drives one word-search puzzle instance for a host UI."""

    def __init__(
        self,
        level: LevelConfig,
        *,
        generator: Optional[GridGenerator] = None,
        scheduler: Optional[Scheduler] = None,
        rng: Optional[random.Random] = None,
        on_level_complete: Optional[LevelCompleteCallback] = None,
    ) -> None:
        self.generator = generator or GridGenerator()
        self.scheduler = scheduler or ManualScheduler()
        self.rng = rng or random.Random()
        self.on_level_complete = on_level_complete
        self.scores = ScoreEngine()
        self.level = level
        self.session = GameSession(difficulty=level.difficulty)
        self.tracker = SelectionTracker(level.grid_size)
        self.matcher: Optional[WordMatcher] = None
        self.last_result: Optional[LevelResult] = None
        self._timer: Optional[TimerHandle] = None
        self._lock = threading.RLock()
        self._start(level)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def new_game(self) -> None:
        """Start a fresh puzzle for the current level."""
        self._start(self.level)

    def change_difficulty(self, difficulty: Difficulty) -> None:
        self.change_level(get_level(difficulty))

    def change_level(self, level: LevelConfig) -> None:
        self._start(level)

    def next_level(self) -> bool:
        """Advance to the next tier; returns ``False`` when already on the last one."""
        upcoming = next_level(self.level.difficulty)
        if upcoming is None:
            return False
        self.change_level(get_level(upcoming))
        return True

    def close(self) -> None:
        with self._lock:
            self._stop_timer()
            self.tracker.cancel()

    def _start(self, level: LevelConfig) -> None:
        with self._lock:
            self._stop_timer()
            self.level = level
            self.session = GameSession(difficulty=level.difficulty, status=SessionStatus.GENERATING)
            self.last_result = None
            LOGGER.info(
                "Generating %s puzzle (%sx%s)", level.difficulty.value, level.grid_size, level.grid_size
            )

            result = self.generator.generate(level.word_specs(), level.grid_size, self.rng)
            self.session.grid = result.grid
            self.session.placed_words = result.placed_words
            self.session.dropped_words = result.dropped_words
            self.tracker = SelectionTracker(level.grid_size)
            self.matcher = WordMatcher(result.grid)

            self.session.status = SessionStatus.PLAYING
            if self._check_completion():
                return
            self._timer = self.scheduler.call_every(
                TICK_INTERVAL_SECONDS, functools.partial(self.tick, self.session)
            )

    def _stop_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------
    def tick(self, session: Optional[GameSession] = None) -> None:
        """Advance the clock by one second.

        Timer callbacks pass the session they were started for; a tick that
        fires after that session was replaced is dropped.
        """
        with self._lock:
            if session is not None and session is not self.session:
                LOGGER.debug("Dropping tick from a replaced session")
                return
            if self.session.status != SessionStatus.PLAYING:
                return
            self.session.elapsed_seconds += 1

    def drag_start(self, cell: Cell) -> SelectionPath:
        with self._lock:
            if not self._playing("drag start"):
                return ()
            return self.tracker.drag_start(cell)

    def drag_over(self, cell: Cell) -> SelectionPath:
        with self._lock:
            if not self._playing("drag over"):
                return ()
            return self.tracker.drag_over(cell)

    def drag_cancel(self) -> None:
        with self._lock:
            self.tracker.cancel()

    def drag_end(self) -> Optional[PlacedWord]:
        """Finish the gesture; returns the word found by it, if any."""
        with self._lock:
            if not self._playing("drag end"):
                return None
            path = self.tracker.drag_end()
            if len(path) < 2 or self.matcher is None:
                return None
            found = self.matcher.match(path, self.session.placed_words)
            if found is None:
                return None

            self.session.found_count += 1
            self.session.score += self.scores.points_for_word(self.session.difficulty)
            LOGGER.info(
                "Found %s (%s/%s)", found.word, self.session.found_count, self.session.total_words
            )
            self._check_completion()
            return found

    def select(self, start: Cell, end: Cell) -> Optional[PlacedWord]:
        """Perform a full drag from ``start`` straight to ``end``."""
        self.drag_start(start)
        self.drag_over(end)
        return self.drag_end()

    def _playing(self, event: str) -> bool:
        if self.session.status == SessionStatus.PLAYING:
            return True
        LOGGER.debug("Ignoring %s while %s", event, self.session.status.value)
        return False

    def _check_completion(self) -> bool:
        session = self.session
        if session.found_count < session.total_words:
            return False
        self._stop_timer()
        self.tracker.cancel()
        session.score = self.scores.final_score(
            session.found_count, session.difficulty, session.elapsed_seconds
        )
        session.status = SessionStatus.COMPLETED
        self.last_result = LevelResult(
            score=session.score,
            elapsed_seconds=session.elapsed_seconds,
            found_count=session.found_count,
            total_words=session.total_words,
            difficulty=session.difficulty,
        )
        LOGGER.info(
            "Level %s complete: score %s in %ss",
            session.difficulty.value,
            session.score,
            session.elapsed_seconds,
        )
        if self.on_level_complete is not None:
            self.on_level_complete(self.last_result)
        return True

    # ------------------------------------------------------------------
    # Host-facing state
    # ------------------------------------------------------------------
    @property
    def grid(self) -> LetterGrid:
        assert self.session.grid is not None
        return self.session.grid

    @property
    def placed_words(self) -> List[PlacedWord]:
        return self.session.placed_words

    @property
    def status(self) -> SessionStatus:
        return self.session.status

    @property
    def found_count(self) -> int:
        return self.session.found_count

    @property
    def score(self) -> int:
        return self.session.score

    @property
    def elapsed_seconds(self) -> int:
        return self.session.elapsed_seconds

    @property
    def dropped_count(self) -> int:
        return len(self.session.dropped_words)

    def found_cells(self) -> Set[Cell]:
        return {cell for word in self.session.placed_words if word.found for cell in word.cells}

    def to_jsonable(self, reveal: bool = False) -> Dict[str, Any]:
        session = self.session
        return {
            "difficulty": session.difficulty.value,
            "status": session.status.value,
            "grid": self.grid.to_jsonable(),
            "words": [
                {
                    "word": word.word if (reveal or word.found) else None,
                    "length": word.length,
                    "hint": word.hint,
                    "found": word.found,
                    "cells": [list(cell) for cell in word.cells] if (reveal or word.found) else None,
                }
                for word in session.placed_words
            ],
            "found_count": session.found_count,
            "total_words": session.total_words,
            "score": session.score,
            "elapsed_seconds": session.elapsed_seconds,
            "dropped_words": [spec.word for spec in session.dropped_words],
        }

"""Difficulty-tiered word points, time bonus and completion rating."""

from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import POINTS_PER_WORD, TIME_BONUS_BUDGET_SECONDS, Difficulty


@dataclass(frozen=True)
class PerformanceRating:
    label: str
    message: str
    stars: int


class ScoreEngine:
    """Fixed scoring table shared by every puzzle of a tier."""

    @staticmethod
    def points_for_word(difficulty: Difficulty) -> int:
        return POINTS_PER_WORD[Difficulty(difficulty)]

    @staticmethod
    def time_bonus(elapsed_seconds: int) -> int:
        return max(0, TIME_BONUS_BUDGET_SECONDS - elapsed_seconds)

    @classmethod
    def final_score(cls, words_found: int, difficulty: Difficulty, elapsed_seconds: int) -> int:
        return words_found * cls.points_for_word(difficulty) + cls.time_bonus(elapsed_seconds)

    @classmethod
    def performance_rating(
        cls, words_found: int, total_words: int, elapsed_seconds: int
    ) -> PerformanceRating:
        """Star rating shown on the level summary."""

        completion = (words_found / total_words * 100) if total_words else 100.0
        bonus = cls.time_bonus(elapsed_seconds)
        if completion == 100 and bonus > 180:
            return PerformanceRating(
                "Excellent!", "Outstanding performance! You're a word search master!", 5
            )
        if completion == 100 and bonus > 60:
            return PerformanceRating("Great Job!", "Well done! You found all words efficiently.", 4)
        if completion == 100:
            return PerformanceRating("Good Work!", "Nice! You found all the words.", 3)
        if completion >= 80:
            return PerformanceRating(
                "Not Bad!", "Good effort! Try to find more words next time.", 2
            )
        return PerformanceRating("Keep Trying!", "Practice makes perfect! Don't give up!", 1)

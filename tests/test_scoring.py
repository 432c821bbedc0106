import unittest

from wordsearch.core.constants import Difficulty
from wordsearch.engine.scoring import ScoreEngine


class ScoreEngineTests(unittest.TestCase):
    def test_points_per_tier(self) -> None:
        self.assertEqual(ScoreEngine.points_for_word(Difficulty.BEGINNER), 10)
        self.assertEqual(ScoreEngine.points_for_word(Difficulty.INTERMEDIATE), 15)
        self.assertEqual(ScoreEngine.points_for_word(Difficulty.ADVANCED), 20)
        self.assertEqual(ScoreEngine.points_for_word("advanced"), 20)

    def test_time_bonus_floors_at_zero(self) -> None:
        self.assertEqual(ScoreEngine.time_bonus(0), 300)
        self.assertEqual(ScoreEngine.time_bonus(299), 1)
        self.assertEqual(ScoreEngine.time_bonus(300), 0)
        self.assertEqual(ScoreEngine.time_bonus(1000), 0)

    def test_beginner_five_words_in_45_seconds(self) -> None:
        self.assertEqual(ScoreEngine.final_score(5, Difficulty.BEGINNER, 45), 305)

    def test_advanced_ten_words_after_budget(self) -> None:
        self.assertEqual(ScoreEngine.time_bonus(320), 0)
        self.assertEqual(ScoreEngine.final_score(10, Difficulty.ADVANCED, 320), 200)

    def test_final_score_monotonic(self) -> None:
        for difficulty in Difficulty:
            for elapsed in (0, 120, 299, 300, 450):
                scores = [ScoreEngine.final_score(n, difficulty, elapsed) for n in range(12)]
                self.assertEqual(scores, sorted(scores))
            for found in (0, 4, 10):
                scores = [ScoreEngine.final_score(found, difficulty, t) for t in range(0, 400, 7)]
                self.assertEqual(scores, sorted(scores, reverse=True))

    def test_performance_rating_tiers(self) -> None:
        self.assertEqual(ScoreEngine.performance_rating(10, 10, 60).stars, 5)
        self.assertEqual(ScoreEngine.performance_rating(10, 10, 200).stars, 4)
        self.assertEqual(ScoreEngine.performance_rating(10, 10, 280).stars, 3)
        self.assertEqual(ScoreEngine.performance_rating(8, 10, 30).stars, 2)
        rating = ScoreEngine.performance_rating(3, 10, 30)
        self.assertEqual(rating.stars, 1)
        self.assertEqual(rating.label, "Keep Trying!")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()

import unittest

from wordsearch.core.constants import Difficulty
from wordsearch.core.exceptions import CatalogError, WordTooLongError, WordTooShortError
from wordsearch.core.models import WordSpec
from wordsearch.data.catalog import (
    LEVELS,
    get_level,
    is_last_level,
    next_level,
    prepare_word_specs,
)
from wordsearch.data.normalization import clean_word


class NormalizationTests(unittest.TestCase):
    def test_clean_word_folds_accents_and_strips_symbols(self) -> None:
        self.assertEqual(clean_word("café"), "CAFE")
        self.assertEqual(clean_word("ice-cream"), "ICECREAM")
        self.assertEqual(clean_word("rock 'n' roll 2"), "ROCKNROLL")
        self.assertEqual(clean_word(""), "")


class PrepareWordSpecsTests(unittest.TestCase):
    def test_normalizes_and_deduplicates(self) -> None:
        specs = prepare_word_specs(
            [WordSpec("tiger", " Striped big cat "), WordSpec("Tiger", "dup"), WordSpec("  ", "x")],
            8,
        )
        self.assertEqual(specs, [WordSpec("TIGER", "Striped big cat")])

    def test_lenient_mode_skips_words_longer_than_grid(self) -> None:
        with self.assertLogs("wordsearch.data.catalog", level="WARNING"):
            specs = prepare_word_specs([WordSpec("ELEPHANT"), WordSpec("OWL")], 5)
        self.assertEqual([s.word for s in specs], ["OWL"])

    def test_strict_mode_raises(self) -> None:
        with self.assertRaises(WordTooLongError):
            prepare_word_specs([WordSpec("ELEPHANT")], 5, strict=True)

    def test_lenient_mode_skips_one_letter_words(self) -> None:
        with self.assertLogs("wordsearch.data.catalog", level="WARNING"):
            specs = prepare_word_specs([WordSpec("A"), WordSpec("CAT")], 8)
        self.assertEqual([s.word for s in specs], ["CAT"])

    def test_strict_mode_rejects_one_letter_words(self) -> None:
        with self.assertRaises(WordTooShortError):
            prepare_word_specs([WordSpec("I", "Me"), WordSpec("CAT")], 8, strict=True)

    def test_two_letter_word_is_kept(self) -> None:
        specs = prepare_word_specs([WordSpec("OX")], 8, strict=True)
        self.assertEqual(specs, [WordSpec("OX")])

    def test_word_equal_to_grid_size_is_kept(self) -> None:
        specs = prepare_word_specs([WordSpec("MONKEY")], 6, strict=True)
        self.assertEqual(len(specs), 1)

    def test_non_positive_grid_size_rejected(self) -> None:
        with self.assertRaises(CatalogError):
            prepare_word_specs([WordSpec("CAT")], 0)


class LevelCatalogTests(unittest.TestCase):
    def test_tier_grid_sizes(self) -> None:
        self.assertEqual(get_level(Difficulty.BEGINNER).grid_size, 8)
        self.assertEqual(get_level("intermediate").grid_size, 10)
        self.assertEqual(get_level(Difficulty.ADVANCED).grid_size, 12)

    def test_every_tier_has_ten_hinted_words(self) -> None:
        for level in LEVELS.values():
            self.assertEqual(len(level.words), 10)
            for spec in level.words:
                self.assertTrue(spec.word.isalpha() and spec.word.isupper())
                self.assertTrue(spec.hint)

    def test_word_specs_drop_overlong_catalog_entries(self) -> None:
        level = get_level(Difficulty.INTERMEDIATE)
        words = [spec.word for spec in level.word_specs()]
        self.assertNotIn("PHOTOSYNTHESIS", words)
        self.assertEqual(len(words), 7)
        self.assertIn("HABITAT", words)
        self.assertTrue(all(len(w) <= level.grid_size for w in words))

    def test_level_progression(self) -> None:
        self.assertEqual(next_level(Difficulty.BEGINNER), Difficulty.INTERMEDIATE)
        self.assertEqual(next_level("intermediate"), Difficulty.ADVANCED)
        self.assertIsNone(next_level(Difficulty.ADVANCED))
        self.assertTrue(is_last_level(Difficulty.ADVANCED))
        self.assertFalse(is_last_level(Difficulty.BEGINNER))

    def test_unknown_tier(self) -> None:
        with self.assertRaises(CatalogError):
            get_level("expert")

    def test_with_words_keeps_tier_metadata(self) -> None:
        level = get_level(Difficulty.BEGINNER).with_words([WordSpec("OWL", "Night bird")], 6)
        self.assertEqual(level.grid_size, 6)
        self.assertEqual(level.title, "Beginner")
        self.assertEqual(level.word_specs(), [WordSpec("OWL", "Night bird")])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()

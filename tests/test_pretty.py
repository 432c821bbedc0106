import io
import unittest

from wordsearch.core.constants import Difficulty
from wordsearch.core.models import LevelResult, PlacedWord
from wordsearch.data.catalog import LevelConfig, get_level
from wordsearch.engine.grid import LetterGrid
from wordsearch.utils.pretty import (
    format_grid,
    format_hints,
    format_level_header,
    format_time,
    print_level_result,
)


class PrettyTests(unittest.TestCase):
    def test_format_time(self) -> None:
        self.assertEqual(format_time(0), "0:00")
        self.assertEqual(format_time(65), "1:05")
        self.assertEqual(format_time(600), "10:00")

    def test_format_grid_marks_found_and_selected_cells(self) -> None:
        grid = LetterGrid.from_rows(["CAT", "XYZ", "QRS"])
        rendered = format_grid(grid, found={(0, 0)}, selected={(1, 1)})
        lines = rendered.splitlines()
        self.assertEqual(len(lines), 5)
        self.assertIn("c", lines[2])
        self.assertIn("[Y]", lines[3])

    def test_format_hints_hides_unfound_words(self) -> None:
        words = [
            PlacedWord("CAT", "A small pet", ((0, 0), (0, 1), (0, 2)), found=True),
            PlacedWord("OWL", "Night bird", ((1, 0), (1, 1), (1, 2))),
        ]
        rendered = format_hints(words)
        self.assertIn("CAT", rendered)
        self.assertIn("[found]", rendered)
        self.assertNotIn("OWL", rendered)
        self.assertIn("3 letters", rendered)
        self.assertIn("OWL", format_hints(words, reveal=True))

    def test_format_level_header_shows_tier_description(self) -> None:
        header = format_level_header(get_level(Difficulty.BEGINNER))
        self.assertTrue(header.startswith("Beginner (8x8)"))
        self.assertIn("Perfect for starting your word search journey", header)
        self.assertIn("Basic Science, English", header)
        self.assertIn("5-10 min", header)

        bare = LevelConfig(difficulty=Difficulty.ADVANCED, grid_size=5, words=())
        self.assertEqual(format_level_header(bare), "Advanced (5x5)")

    def test_print_level_result(self) -> None:
        stream = io.StringIO()
        result = LevelResult(
            score=305, elapsed_seconds=45, found_count=5, total_words=5,
            difficulty=Difficulty.BEGINNER,
        )
        print_level_result(result, is_last_level=False, stream=stream)
        output = stream.getvalue()
        self.assertIn("Beginner", output)
        self.assertIn("Excellent!", output)
        self.assertIn("305", output)
        self.assertIn("0:45", output)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()

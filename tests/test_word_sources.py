import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import MagicMock, patch

import requests

from wordsearch.core.exceptions import WordSourceError
from wordsearch.core.models import WordSpec
from wordsearch.data.word_sources import (
    CatalogWordSource,
    GeminiWordSource,
    UserWordListSource,
    merge_word_sources,
    parse_words_file,
)
from wordsearch.io.gemini_client import GeminiAPIError, GeminiClient


class UserWordListSourceTests(unittest.TestCase):
    def test_parses_words_with_optional_hints(self) -> None:
        source = UserWordListSource(["elephant:Large gray animal", "tiger", "  ", "penguin : Bird"])
        self.assertEqual(
            source.generate("animals"),
            [
                WordSpec("ELEPHANT", "Large gray animal"),
                WordSpec("TIGER", ""),
                WordSpec("PENGUIN", "Bird"),
            ],
        )

    def test_from_pairs_ignores_blank_words(self) -> None:
        source = UserWordListSource.from_pairs(
            ["gravity", "", "energy"], ["Force that pulls objects down", "orphan", "Power to do work"]
        )
        self.assertEqual(
            [(s.word, s.hint) for s in source.generate("science")],
            [("GRAVITY", "Force that pulls objects down"), ("ENERGY", "Power to do work")],
        )

    def test_limit_is_respected(self) -> None:
        source = UserWordListSource(["a", "b", "c"])
        self.assertEqual(len(source.generate("x", limit=2)), 2)

    def test_parse_words_file_skips_comments(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "words.txt"
            path.write_text("# animals\nLION:King of beasts\n\nZEBRA\n", encoding="utf-8")
            self.assertEqual(parse_words_file(path), ["LION:King of beasts", "ZEBRA"])


class CatalogWordSourceTests(unittest.TestCase):
    def test_returns_tier_words(self) -> None:
        words = CatalogWordSource().generate("", limit=3, difficulty="advanced")
        self.assertEqual([w.word for w in words], ["MITOCHONDRIA", "CHROMOSOME", "BIOCHEMISTRY"])


class GeminiWordSourceTests(unittest.TestCase):
    def test_generate_parses_json_lines(self) -> None:
        client = MagicMock()
        client.generate_text.return_value = (
            "```json\n"
            '{"word": "orbit", "hint": "Curved path around a planet"},\n'
            "not json\n"
            '{"word": "comet"}\n'
            '["bad"]\n'
            "```"
        )
        source = GeminiWordSource(client=client)
        words = source.generate("space", limit=5, difficulty="intermediate")
        self.assertEqual(
            words,
            [WordSpec("ORBIT", "Curved path around a planet"), WordSpec("COMET", "")],
        )
        prompt = client.generate_text.call_args[0][0]
        self.assertIn("space", prompt)
        self.assertIn("subject vocabulary", prompt)

    def test_parse_response_handles_empty_text(self) -> None:
        self.assertEqual(GeminiWordSource.parse_response(""), [])


class MergeWordSourcesTests(unittest.TestCase):
    def test_deduplicates_and_stops_at_target(self) -> None:
        primary = UserWordListSource(["owl", "fox"])
        fallback = UserWordListSource(["Owl", "bear", "deer"])
        merged = merge_word_sources(primary, [fallback], "forest", target=3)
        self.assertEqual([w.word for w in merged], ["OWL", "FOX", "BEAR"])

    def test_failing_primary_falls_back(self) -> None:
        class BrokenSource:
            def generate(self, topic, limit=10, difficulty="beginner"):
                raise RuntimeError("offline")

        with self.assertLogs("wordsearch.data.word_sources", level="WARNING"):
            merged = merge_word_sources(BrokenSource(), [CatalogWordSource()], "", target=2)
        self.assertEqual([w.word for w in merged], ["HEART", "BRAIN"])

    def test_no_words_raises(self) -> None:
        with self.assertRaises(WordSourceError):
            merge_word_sources(None, [UserWordListSource([])], "nothing", target=5)


class GeminiClientTests(unittest.TestCase):
    def test_missing_api_key_raises(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            with self.assertRaises(RuntimeError):
                GeminiClient()

    def test_generate_text_returns_first_candidate(self) -> None:
        session = MagicMock()
        session.post.return_value.json.return_value = {
            "candidates": [{"content": {"parts": [{"text": "hello"}]}}]
        }
        with patch.dict(os.environ, {"GEMINI_API_KEY": "test-key"}, clear=True):
            client = GeminiClient(session=session)
        self.assertEqual(client.generate_text("prompt"), "hello")
        _, kwargs = session.post.call_args
        self.assertEqual(kwargs["params"], {"key": "test-key"})

    def test_request_failure_is_wrapped(self) -> None:
        session = MagicMock()
        session.post.side_effect = requests.ConnectionError("boom")
        with patch.dict(os.environ, {"GEMINI_API_KEY": "test-key"}, clear=True):
            client = GeminiClient(session=session)
        with self.assertRaises(GeminiAPIError):
            client.generate_text("prompt")

    def test_missing_candidates_raise(self) -> None:
        session = MagicMock()
        session.post.return_value.json.return_value = {"candidates": []}
        with patch.dict(os.environ, {"GEMINI_API_KEY": "test-key"}, clear=True):
            client = GeminiClient(session=session)
        with self.assertRaises(GeminiAPIError):
            client.generate_text("prompt")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()

"""Word list providers feeding the puzzle generator."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Iterable, List, Optional, Protocol, Sequence, Set

from ..core.constants import Difficulty
from ..core.exceptions import WordSourceError
from ..core.models import WordSpec
from ..utils.logger import get_logger
from .catalog import get_level
from .normalization import clean_word

if TYPE_CHECKING:
    from ..io.gemini_client import GeminiClient


LOGGER = get_logger(__name__)


class WordSource(Protocol):
    """Protocol implemented by all word list providers."""

    def generate(self, topic: str, limit: int = 10, difficulty: str = "beginner") -> List[WordSpec]:
        ...


def parse_words_file(path: Path) -> List[str]:
    """Read entries from a file, one per line. Blank lines and # comments are skipped."""
    entries: List[str] = []
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        entries.append(line)
    return entries


class UserWordListSource:
    """Returns a teacher-supplied list of ``WORD`` or ``WORD:Hint`` entries."""

    def __init__(self, raw_words: Iterable[str]) -> None:
        self._specs: List[WordSpec] = []
        for item in raw_words:
            item = item.strip()
            if not item:
                continue
            word, _, hint = item.partition(":")
            self._specs.append(WordSpec(word.strip().upper(), hint.strip()))

    @classmethod
    def from_pairs(cls, words: Sequence[str], hints: Sequence[str]) -> "UserWordListSource":
        """Build from parallel word and hint columns, ignoring blank words."""
        source = cls([])
        for index, word in enumerate(words):
            if not word.strip():
                continue
            hint = hints[index] if index < len(hints) else ""
            source._specs.append(WordSpec(word.strip().upper(), hint.strip()))
        return source

    def generate(self, topic: str, limit: int = 10, difficulty: str = "beginner") -> List[WordSpec]:
        return list(self._specs[:limit])


class CatalogWordSource:
    """Serves the built-in tier word lists."""

    def generate(self, topic: str, limit: int = 10, difficulty: str = "beginner") -> List[WordSpec]:
        return list(get_level(difficulty).words[:limit])


class GeminiWordSource:
    """LLM-powered vocabulary list using the Gemini API."""

    PROMPT = (
        "You are helping an English teacher build a word search puzzle. "
        "Topic: '{topic}'. Audience: {audience}. "
        "Generate {limit} unique English words, each between 3 and {max_length} letters, "
        "letters only, no spaces or hyphens. "
        "Respond with JSON lines, one object per line, each with fields: word, hint. "
        "The hint must be one short sentence that defines the word without using it."
    )

    AUDIENCE = {
        Difficulty.BEGINNER: "young learners, everyday vocabulary",
        Difficulty.INTERMEDIATE: "middle-school learners, subject vocabulary",
        Difficulty.ADVANCED: "advanced learners, technical vocabulary",
    }

    def __init__(self, client: Optional["GeminiClient"] = None, max_length: int = 12) -> None:
        self._client = client
        self.max_length = max_length

    def generate(self, topic: str, limit: int = 10, difficulty: str = "beginner") -> List[WordSpec]:
        if self._client is None:
            from ..io.gemini_client import GeminiClient

            self._client = GeminiClient()
        prompt = self.render_prompt(topic, limit, difficulty)
        return self.parse_response(self._client.generate_text(prompt))

    def render_prompt(self, topic: str, limit: int, difficulty: str = "beginner") -> str:
        audience = self.AUDIENCE[Difficulty(difficulty)]
        return self.PROMPT.format(
            topic=topic, audience=audience, limit=limit, max_length=self.max_length
        )

    @staticmethod
    def parse_response(text: str) -> List[WordSpec]:
        """Parse JSON lines, tolerating markdown fences and malformed lines."""
        entries: List[WordSpec] = []
        for line in (text or "").splitlines():
            line = line.strip().strip(",")
            if not line or line.startswith("```"):
                continue
            try:
                data = json.loads(line)
            except json.JSONDecodeError:
                continue
            if not isinstance(data, dict):
                continue
            word = data.get("word")
            hint = data.get("hint", "")
            if isinstance(word, str) and isinstance(hint, str):
                entries.append(WordSpec(word=word.upper(), hint=hint))
        return entries


def merge_word_sources(
    primary: Optional[WordSource],
    fallbacks: Sequence[WordSource],
    topic: str,
    target: int,
    difficulty: str = "beginner",
) -> List[WordSpec]:
    """Query the primary source, then fallbacks, deduplicating by normalized word."""

    collected: List[WordSpec] = []
    seen: Set[str] = set()

    def extend(specs: Iterable[WordSpec]) -> None:
        for spec in specs:
            key = clean_word(spec.word)
            if not key or key in seen:
                continue
            collected.append(spec)
            seen.add(key)
            if len(collected) >= target:
                break

    sources = ([primary] if primary else []) + list(fallbacks)
    for source in sources:
        if len(collected) >= target:
            break
        try:
            extend(source.generate(topic, limit=target, difficulty=difficulty))
        except Exception as exc:
            LOGGER.warning("Word source %s failed: %s", type(source).__name__, exc)

    if not collected:
        raise WordSourceError(f"No words available for topic {topic!r}")
    return collected[:target]

"""Built-in difficulty tiers and the word-list boundary checks."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Set, Tuple

from ..core.constants import MIN_WORD_LENGTH, Difficulty
from ..core.exceptions import CatalogError, WordTooLongError, WordTooShortError
from ..core.models import WordSpec
from ..utils.logger import get_logger
from .normalization import clean_word


LOGGER = get_logger(__name__)


def prepare_word_specs(
    entries: Iterable[WordSpec],
    grid_size: int,
    strict: bool = False,
) -> List[WordSpec]:
    """Normalize a raw word list and reject words that cannot fit the grid.

    Blank entries and duplicates are skipped. A word longer than
    ``grid_size`` raises :class:`WordTooLongError` when ``strict`` is set and
    is omitted with a warning otherwise; one-letter words get the same
    treatment with :class:`WordTooShortError`.
    """

    if grid_size <= 0:
        raise CatalogError(f"Grid size must be positive, got {grid_size}")

    prepared: List[WordSpec] = []
    seen: Set[str] = set()
    for entry in entries:
        word = clean_word(entry.word)
        if not word or word in seen:
            continue
        if len(word) < MIN_WORD_LENGTH:
            if strict:
                raise WordTooShortError(
                    f"{word!r} is shorter than {MIN_WORD_LENGTH} letters"
                )
            LOGGER.warning("Skipping %r: shorter than %s letters", word, MIN_WORD_LENGTH)
            continue
        if len(word) > grid_size:
            if strict:
                raise WordTooLongError(
                    f"{word!r} has {len(word)} letters but the grid is {grid_size}x{grid_size}"
                )
            LOGGER.warning("Skipping %r: longer than the %sx%s grid", word, grid_size, grid_size)
            continue
        seen.add(word)
        prepared.append(WordSpec(word=word, hint=entry.hint.strip()))
    return prepared


@dataclass(frozen=True)
class LevelConfig:
    """Grid size, word list and descriptive text for one difficulty tier."""

    difficulty: Difficulty
    grid_size: int
    words: Tuple[WordSpec, ...]
    title: str = ""
    description: str = ""
    subjects: Tuple[str, ...] = field(default_factory=tuple)
    time_estimate: str = ""

    def word_specs(self) -> List[WordSpec]:
        return prepare_word_specs(self.words, self.grid_size)

    def with_words(self, words: Iterable[WordSpec], grid_size: Optional[int] = None) -> "LevelConfig":
        return LevelConfig(
            difficulty=self.difficulty,
            grid_size=grid_size or self.grid_size,
            words=tuple(words),
            title=self.title,
            description=self.description,
            subjects=self.subjects,
            time_estimate=self.time_estimate,
        )


def _specs(*pairs: Tuple[str, str]) -> Tuple[WordSpec, ...]:
    return tuple(WordSpec(word, hint) for word, hint in pairs)


LEVELS: Dict[Difficulty, LevelConfig] = {
    Difficulty.BEGINNER: LevelConfig(
        difficulty=Difficulty.BEGINNER,
        grid_size=8,
        title="Beginner",
        description="Perfect for starting your word search journey",
        subjects=("Basic Science", "English"),
        time_estimate="5-10 min",
        words=_specs(
            ("HEART", "This organ pumps blood through your body"),
            ("BRAIN", "The control center of your nervous system"),
            ("PLANT", "Living organisms that make their own food"),
            ("WATER", "Essential liquid for all life on Earth"),
            ("EARTH", "The planet we live on"),
            ("SOUND", "Vibrations that travel through air to your ears"),
            ("LIGHT", "Energy that allows us to see"),
            ("FORCE", "A push or pull that can change motion"),
            ("ENERGY", "The ability to do work or cause change"),
            ("MATTER", "Anything that has mass and takes up space"),
        ),
    ),
    Difficulty.INTERMEDIATE: LevelConfig(
        difficulty=Difficulty.INTERMEDIATE,
        grid_size=10,
        title="Intermediate",
        description="Ready for a greater challenge",
        subjects=("Biology", "Environment"),
        time_estimate="10-15 min",
        words=_specs(
            ("PHOTOSYNTHESIS", "The process by which plants make their food using sunlight"),
            ("ECOSYSTEM", "A community of living and non-living things interacting"),
            ("RESPIRATION", "The process of breathing and exchanging gases"),
            ("BIODIVERSITY", "The variety of life in an ecosystem"),
            ("ADAPTATION", "How organisms change to survive in their environment"),
            ("EVOLUTION", "The gradual change of species over time"),
            ("GENETICS", "The study of heredity and variation in organisms"),
            ("MOLECULE", "The smallest unit of a chemical compound"),
            ("ORGANISM", "Any individual living thing"),
            ("HABITAT", "The natural home of an organism"),
        ),
    ),
    Difficulty.ADVANCED: LevelConfig(
        difficulty=Difficulty.ADVANCED,
        grid_size=12,
        title="Advanced",
        description="For word search masters",
        subjects=("Chemistry", "Space Science", "Technology"),
        time_estimate="15-25 min",
        words=_specs(
            ("MITOCHONDRIA", "The powerhouse of the cell that produces energy"),
            ("CHROMOSOME", "Structure containing DNA and genetic information"),
            ("BIOCHEMISTRY", "The study of chemical processes in living organisms"),
            ("THERMODYNAMICS", "The study of heat, energy, and their transformations"),
            ("ELECTROMAGNETIC", "Relating to electric and magnetic fields"),
            ("NANOTECHNOLOGY", "Technology dealing with structures smaller than 100 nanometers"),
            ("QUANTUM", "Related to the smallest discrete units of energy"),
            ("CRYSTALLINE", "Having a regular, repeating atomic structure"),
            ("CATALYSIS", "The acceleration of a chemical reaction by a catalyst"),
            ("POLYMER", "Large molecules made of repeating subunits"),
        ),
    ),
}

LEVEL_ORDER: Tuple[Difficulty, ...] = (
    Difficulty.BEGINNER,
    Difficulty.INTERMEDIATE,
    Difficulty.ADVANCED,
)


def get_level(difficulty: Difficulty | str) -> LevelConfig:
    try:
        return LEVELS[Difficulty(difficulty)]
    except ValueError as exc:
        raise CatalogError(f"Unknown difficulty {difficulty!r}") from exc


def next_level(difficulty: Difficulty | str) -> Optional[Difficulty]:
    index = LEVEL_ORDER.index(Difficulty(difficulty))
    if index + 1 >= len(LEVEL_ORDER):
        return None
    return LEVEL_ORDER[index + 1]


def is_last_level(difficulty: Difficulty | str) -> bool:
    return next_level(difficulty) is None

"""Word-search puzzle engine for vocabulary practice.

This package exposes the public API surface via:

- ``wordsearch.engine.generator.GridGenerator``: places words into a letter grid.
- ``wordsearch.engine.session.SessionController``: runs one puzzle from start to completion.
- ``wordsearch.data.catalog`` helpers: built-in difficulty tiers and word-list checks.
"""

from .core.constants import Difficulty, SessionStatus
from .core.models import LevelResult, PlacedWord, WordSpec
from .data.catalog import LevelConfig, get_level
from .engine.generator import GeneratorConfig, GridGenerator
from .engine.session import SessionController

__all__ = [
    "Difficulty",
    "GeneratorConfig",
    "GridGenerator",
    "LevelConfig",
    "LevelResult",
    "PlacedWord",
    "SessionController",
    "SessionStatus",
    "WordSpec",
    "get_level",
]

__version__ = "0.1.0"

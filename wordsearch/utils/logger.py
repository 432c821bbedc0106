"""Logging utilities tailored for word-search sessions."""

from __future__ import annotations

import logging
import os
from typing import Optional, Union

LOG_LEVEL_ENV = "WORDSEARCH_LOG_LEVEL"


def resolve_level(level: Union[int, str, None]) -> int:
    """Turn a level name, number or ``None`` (environment default) into a logging level."""

    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "INFO")
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(level: Union[int, str, None] = None) -> None:
    """Configure root logging with a sensible formatter.

    Placement retries and pointer events are logged at DEBUG; generation
    summaries and level completion at INFO. Without an explicit level the
    ``WORDSEARCH_LOG_LEVEL`` environment variable is used.
    """

    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(resolve_level(level))


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a namespaced logger, configuring defaults if needed."""

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name or "wordsearch")

"""Pretty-print helpers for word-search grids and results."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Collection, Sequence

from ..engine.scoring import ScoreEngine

if TYPE_CHECKING:
    from ..core.models import Cell, LevelResult, PlacedWord
    from ..data.catalog import LevelConfig
    from ..engine.grid import LetterGrid


def format_time(seconds: int) -> str:
    minutes, secs = divmod(max(0, seconds), 60)
    return f"{minutes}:{secs:02d}"


def format_grid(
    grid: LetterGrid,
    *,
    found: Collection[Cell] = (),
    selected: Collection[Cell] = (),
) -> str:
    """Render the grid with coordinates; found cells are lowercase, selected ones bracketed."""

    header_cells = [f"{c:>3}" for c in range(grid.size)]
    lines = ["    " + "".join(header_cells)]
    lines.append("    " + "-" * (3 * grid.size))
    for r in range(grid.size):
        rendered = []
        for c in range(grid.size):
            letter = grid.letter(r, c) or "."
            if (r, c) in found:
                letter = letter.lower()
            if (r, c) in selected:
                rendered.append(f"[{letter}]")
            else:
                rendered.append(f"{letter:>3}")
        lines.append(f"{r:>2} |" + "".join(rendered))
    return "\n".join(lines)


def format_level_header(level: LevelConfig) -> str:
    """One-line banner with the tier's title, description, subjects and time estimate."""

    title = level.title or level.difficulty.value.capitalize()
    parts = [f"{title} ({level.grid_size}x{level.grid_size})"]
    if level.description:
        parts.append(level.description)
    if level.subjects:
        parts.append(", ".join(level.subjects))
    if level.time_estimate:
        parts.append(level.time_estimate)
    return " | ".join(parts)


def format_hints(placed_words: Sequence[PlacedWord], reveal: bool = False) -> str:
    lines = []
    for index, placed in enumerate(placed_words, start=1):
        if placed.found or reveal:
            label = placed.word
        else:
            label = f"{placed.length} letters"
        mark = " [found]" if placed.found else ""
        lines.append(f"{index:>2}. {label:<16} {placed.hint}{mark}")
    return "\n".join(lines)


def print_level_result(result: LevelResult, *, is_last_level: bool = False, stream=None) -> None:
    """Print the level summary shown once every word has been found."""

    stream = stream or sys.stdout
    rating = ScoreEngine.performance_rating(
        result.found_count, result.total_words, result.elapsed_seconds
    )
    print(file=stream)
    print(f"--- Level Complete: {result.difficulty.value.capitalize()} ---", file=stream)
    print(f"  {rating.label} {'*' * rating.stars}", file=stream)
    print(f"  {rating.message}", file=stream)
    print(f"  Score:       {result.score}", file=stream)
    print(f"  Time:        {format_time(result.elapsed_seconds)}", file=stream)
    print(f"  Words found: {result.found_count}/{result.total_words}", file=stream)
    print(f"  Time bonus:  {ScoreEngine.time_bonus(result.elapsed_seconds)}", file=stream)
    if is_last_level:
        print("  You have completed every level!", file=stream)


def print_hud(found_count: int, total_words: int, score: int, elapsed: int, *, stream=None) -> None:
    stream = stream or sys.stdout
    print(
        f"Time {format_time(elapsed)} | Score {score} | Found {found_count}/{total_words}",
        file=stream,
    )


__all__ = [
    "format_grid",
    "format_hints",
    "format_level_header",
    "format_time",
    "print_hud",
    "print_level_result",
]

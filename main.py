"""CLI entrypoint for the word-search puzzle engine."""

from __future__ import annotations

import argparse
import json
import random
from pathlib import Path
from typing import Any, Dict, List, Optional

from wordsearch.core.constants import Difficulty, SessionStatus
from wordsearch.core.exceptions import CatalogError, SelectionError, WordSourceError
from wordsearch.core.models import LevelResult, WordSpec
from wordsearch.data.catalog import LevelConfig, get_level, is_last_level, prepare_word_specs
from wordsearch.data.word_sources import (
    GeminiWordSource,
    UserWordListSource,
    WordSource,
    merge_word_sources,
    parse_words_file,
)
from wordsearch.engine.generator import GridGenerator
from wordsearch.engine.session import SessionController
from wordsearch.engine.timer import ThreadingScheduler
from wordsearch.engine.validator import PuzzleValidator
from wordsearch.utils.logger import configure_logging
from wordsearch.utils.pretty import (
    format_grid,
    format_hints,
    format_level_header,
    print_hud,
    print_level_result,
)


HELP_TEXT = (
    "Commands:\n"
    "  r1 c1 r2 c2   drag from (r1,c1) to (r2,c2)\n"
    "  hint          reveal the first unfound word's length and hint\n"
    "  new           start a new puzzle at this level\n"
    "  next          move to the next level (after completion)\n"
    "  quit          leave the game"
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate and play word-search vocabulary puzzles",
    )
    parser.add_argument(
        "--level",
        type=str,
        choices=[d.value for d in Difficulty],
        default=Difficulty.BEGINNER.value,
        help="Difficulty tier (sets grid size, word list and points per word)",
    )
    parser.add_argument("--grid-size", type=int, help="Override the tier's grid size")
    parser.add_argument(
        "--words",
        nargs="+",
        metavar="WORD",
        help="Explicit words (format: WORD or WORD:Hint)",
    )
    parser.add_argument(
        "--words-file",
        type=Path,
        metavar="FILE",
        help="File with one WORD or WORD:Hint entry per line (# comments and blank lines ignored)",
    )
    parser.add_argument("--topic", type=str, default="", help="Topic for LLM-generated words")
    parser.add_argument(
        "--llm",
        action="store_true",
        help="Request words from Gemini (requires --topic and GEMINI_API_KEY)",
    )
    parser.add_argument(
        "--word-count", type=int, default=10, help="Number of words to request from sources"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail instead of skipping words longer than the grid",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument("--play", action="store_true", help="Play interactively in the terminal")
    parser.add_argument(
        "--reveal", action="store_true", help="Include answers and cells in the JSON output"
    )
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def collect_words(args: argparse.Namespace) -> Optional[List[WordSpec]]:
    """Resolve custom words from the CLI flags; ``None`` means use the tier's catalog."""

    entries: List[str] = []
    if args.words:
        entries.extend(args.words)
    if args.words_file:
        entries.extend(parse_words_file(args.words_file))

    primary: Optional[WordSource] = None
    fallbacks: List[WordSource] = []
    if entries:
        primary = UserWordListSource(entries)
        if args.llm:
            fallbacks.append(GeminiWordSource())
    elif args.llm:
        primary = GeminiWordSource()
    else:
        return None

    return merge_word_sources(
        primary, fallbacks, args.topic, target=args.word_count, difficulty=args.level
    )


def build_level(args: argparse.Namespace, parser: argparse.ArgumentParser) -> LevelConfig:
    level = get_level(args.level)
    grid_size = args.grid_size or level.grid_size
    try:
        words = collect_words(args)
    except WordSourceError as exc:
        parser.error(str(exc))
    if words is None:
        words = list(level.words)
    try:
        prepared = prepare_word_specs(words, grid_size, strict=args.strict)
    except CatalogError as exc:
        parser.error(str(exc))
    return level.with_words(prepared, grid_size)


def export_puzzle(level: LevelConfig, rng: random.Random, reveal: bool) -> Dict[str, Any]:
    result = GridGenerator().generate(level.word_specs(), level.grid_size, rng)
    validation = PuzzleValidator().validate(result.grid, result.placed_words)
    return {
        "difficulty": level.difficulty.value,
        "grid_size": level.grid_size,
        "grid": result.grid.to_jsonable(),
        "words": [
            {
                "word": placed.word if reveal else None,
                "length": placed.length,
                "hint": placed.hint,
                "cells": [list(cell) for cell in placed.cells] if reveal else None,
            }
            for placed in result.placed_words
        ],
        "dropped_words": [spec.word for spec in result.dropped_words],
        "validation": validation.messages,
    }


def _parse_drag(line: str) -> Optional[List[int]]:
    parts = line.replace(",", " ").split()
    if len(parts) != 4:
        return None
    try:
        return [int(part) for part in parts]
    except ValueError:
        return None


def play(level: LevelConfig, rng: random.Random) -> None:
    """Run an interactive session until the player quits."""

    completed: List[LevelResult] = []
    controller = SessionController(
        level,
        scheduler=ThreadingScheduler(),
        rng=rng,
        on_level_complete=completed.append,
    )
    print(HELP_TEXT)
    try:
        while True:
            print()
            print(format_level_header(controller.level))
            print(format_grid(controller.grid, found=controller.found_cells()))
            print(format_hints(controller.placed_words))
            print_hud(
                controller.found_count,
                len(controller.placed_words),
                controller.score,
                controller.elapsed_seconds,
            )
            if controller.status == SessionStatus.COMPLETED and completed:
                print_level_result(
                    completed.pop(), is_last_level=is_last_level(controller.level.difficulty)
                )

            try:
                line = input("> ").strip().lower()
            except EOFError:
                break
            if line in {"quit", "exit", "q"}:
                break
            if line == "new":
                controller.new_game()
                continue
            if line == "next":
                if controller.status != SessionStatus.COMPLETED:
                    print("Finish this level first.")
                elif not controller.next_level():
                    print("This is the last level.")
                continue
            if line == "hint":
                hidden = [w for w in controller.placed_words if not w.found]
                if hidden:
                    print(f"Look for a {hidden[0].length}-letter word: {hidden[0].hint}")
                continue

            coords = _parse_drag(line)
            if coords is None:
                print(HELP_TEXT)
                continue
            try:
                found = controller.select((coords[0], coords[1]), (coords[2], coords[3]))
            except SelectionError as exc:
                print(exc)
                continue
            if found is not None:
                print(f"Word found: {found.word} - {found.hint}")
            else:
                print("No word there.")
    finally:
        controller.close()


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if args.llm and not args.topic:
        parser.error("--llm requires --topic")
    if args.grid_size is not None and args.grid_size <= 0:
        parser.error("--grid-size must be positive")

    level = build_level(args, parser)
    rng = random.Random(args.seed)

    if args.play:
        play(level, rng)
        return

    payload = export_puzzle(level, rng, reveal=args.reveal)
    output_text = json.dumps(payload, ensure_ascii=False, indent=2)
    if args.output:
        args.output.write_text(output_text, encoding="utf-8")
    else:
        print(output_text)


if __name__ == "__main__":  # pragma: no cover
    main()

"""Puzzle generation entry points.

Pipeline: word bank selection, intersection placement (with reshuffled
retries), then grid materialization into an immutable :class:`Puzzle`.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from ..core.constants import (DEFAULT_GRID_SIZE, DEFAULT_MIN_WORD_LENGTH, DEFAULT_TARGET_WORDS,
                              DISCARD_KEYS)
from ..core.models import PlacedWord, Puzzle
from ..data.word_bank import WordBank, WordBankConfig
from ..utils.logger import get_logger
from .builder import GridBuilder
from .placement import PlacementConfig, PlacementEngine


LOGGER = get_logger(__name__)


@dataclass
class PuzzleConfig:
    grid_size: int = DEFAULT_GRID_SIZE
    target_word_count: int = DEFAULT_TARGET_WORDS
    min_word_length: int = DEFAULT_MIN_WORD_LENGTH
    max_attempts: int = 10
    pool_size: Optional[int] = None
    categories: Optional[Sequence[str]] = None
    strategy: str = "balanced"
    seed: Optional[int] = None

    def resolved_pool_size(self) -> int:
        return self.pool_size if self.pool_size is not None else self.target_word_count * 3

    def to_placement_config(self) -> PlacementConfig:
        return PlacementConfig(
            grid_size=self.grid_size,
            target_word_count=self.target_word_count,
            max_attempts=self.max_attempts,
            seed=self.seed,
        )

    def to_word_bank_config(self) -> WordBankConfig:
        return WordBankConfig(
            min_length=self.min_word_length,
            max_length=self.grid_size,
            categories=self.categories,
            strategy=self.strategy,
            rng=random.Random(self.seed),
        )


@dataclass
class GenerationResult:
    puzzle: Puzzle
    placed_words: List[PlacedWord]
    attempts: int
    skipped: List[str] = field(default_factory=list)
    seed: Optional[int] = None


@dataclass
class NewPuzzle:
    """A freshly generated puzzle and the stored keys the caller must drop first."""

    puzzle: Puzzle
    discard_keys: Tuple[str, ...] = DISCARD_KEYS


class PuzzleGenerator:
    """Orchestrates word selection, placement and grid building."""

    def __init__(self, config: PuzzleConfig, word_bank: Optional[WordBank] = None) -> None:
        self.config = config
        self.word_bank = word_bank or WordBank(config=config.to_word_bank_config())

    def generate(self) -> GenerationResult:
        config = self.config
        LOGGER.info(
            "Generating %sx%s puzzle with up to %s words",
            config.grid_size,
            config.grid_size,
            config.target_word_count,
        )
        candidates = self.word_bank.select_words(
            config.resolved_pool_size(),
            min_length=config.min_word_length,
            max_length=config.grid_size,
        )
        placement = PlacementEngine(config.to_placement_config()).place(candidates)
        puzzle = GridBuilder(config.grid_size).build(placement.placed_words)
        LOGGER.info(
            "Puzzle ready: %s across, %s down after %s attempt(s)",
            len(puzzle.across_clues),
            len(puzzle.down_clues),
            placement.attempts,
        )
        return GenerationResult(
            puzzle=puzzle,
            placed_words=placement.placed_words,
            attempts=placement.attempts,
            skipped=placement.skipped,
            seed=config.seed,
        )


def generate_puzzle(config: PuzzleConfig, word_bank: Optional[WordBank] = None) -> Puzzle:
    return PuzzleGenerator(config, word_bank).generate().puzzle


def new_puzzle(config: PuzzleConfig, word_bank: Optional[WordBank] = None) -> NewPuzzle:
    """Generate a replacement puzzle.

    The caller must remove every key in ``discard_keys`` (stored document,
    started flag, completed-word count) before installing the new puzzle.
    """

    return NewPuzzle(puzzle=generate_puzzle(config, word_bank))

"""Intersection-driven word placement.

The engine anchors the longest candidate across the middle of the grid and
then, word by word, scans every letter shared with an already placed word.
Each shared letter yields one perpendicular insertion point; the valid point
with the most crossings wins, ties going to the top-most, then left-most
start, then to Across over Down. Words with no valid point are skipped.

When an attempt places too few words the candidate order is reshuffled and
the attempt repeated, up to ``max_attempts`` times.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ..core.constants import (DEFAULT_GRID_SIZE, DEFAULT_TARGET_WORDS, MIN_PLACED_WORDS,
                              Direction)
from ..core.exceptions import GenerationFailed
from ..core.models import IntersectionCandidate, PlacedWord
from ..data.word_bank import WordEntry
from ..utils.logger import get_logger
from .grid import PlacementGrid


LOGGER = get_logger(__name__)


@dataclass
class PlacementConfig:
    grid_size: int = DEFAULT_GRID_SIZE
    target_word_count: int = DEFAULT_TARGET_WORDS
    max_attempts: int = 10
    min_placed_words: int = MIN_PLACED_WORDS
    seed: Optional[int] = None


@dataclass
class PlacementResult:
    placed_words: List[PlacedWord]
    attempts: int
    skipped: List[str] = field(default_factory=list)


class PlacementEngine:
    """Turns an ordered candidate list into non-conflicting placed words."""

    def __init__(self, config: PlacementConfig, rng: Optional[random.Random] = None) -> None:
        if config.grid_size <= 0:
            raise ValueError("grid_size must be positive")
        if config.target_word_count <= 0:
            raise ValueError("target_word_count must be positive")
        if config.max_attempts <= 0:
            raise ValueError("max_attempts must be positive")
        self.config = config
        self.rng = rng or random.Random(config.seed)

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def place(self, candidates: Sequence[WordEntry]) -> PlacementResult:
        size = self.config.grid_size
        fitting = [entry for entry in candidates if 0 < len(entry.word) <= size]
        too_long = [entry.word for entry in candidates if len(entry.word) > size]
        if too_long:
            LOGGER.info("Skipping %d words longer than the %dx%d grid: %s", len(too_long), size, size, too_long)
        if not fitting:
            raise GenerationFailed(f"No candidate word fits a {size}x{size} grid")

        required = min(self.config.min_placed_words, len(fitting), self.config.target_word_count)
        order = sorted(fitting, key=lambda entry: -len(entry.word))
        best_count = 0
        for attempt in range(1, self.config.max_attempts + 1):
            grid, skipped = self._attempt(order)
            placed = len(grid.placed_words)
            LOGGER.info(
                "Placement attempt %s/%s placed %s/%s words",
                attempt,
                self.config.max_attempts,
                placed,
                min(self.config.target_word_count, len(fitting)),
            )
            if placed >= required:
                return PlacementResult(
                    placed_words=list(grid.placed_words), attempts=attempt, skipped=skipped
                )
            best_count = max(best_count, placed)
            LOGGER.warning("Only %s words placed (need %s); reshuffling candidates", placed, required)
            order = list(fitting)
            self.rng.shuffle(order)

        raise GenerationFailed(
            f"Placed at most {best_count} of {required} required words after "
            f"{self.config.max_attempts} attempts; use fewer words or a larger grid"
        )

    # ------------------------------------------------------------------
    # Attempt helpers
    # ------------------------------------------------------------------
    def _attempt(self, order: Sequence[WordEntry]):
        grid = PlacementGrid(self.config.grid_size)
        skipped: List[str] = []
        used = set()
        for entry in order:
            if len(grid.placed_words) >= self.config.target_word_count:
                break
            if entry.word in used:
                continue
            candidate = self.best_candidate(grid, entry.word)
            if candidate is None:
                LOGGER.debug("No valid placement for '%s'", entry.word)
                skipped.append(entry.word)
                continue
            grid.place(
                PlacedWord(
                    word=entry.word,
                    clue=entry.clue,
                    row=candidate.row,
                    col=candidate.col,
                    direction=candidate.direction,
                )
            )
            used.add(entry.word)
        return grid, skipped

    def best_candidate(self, grid: PlacementGrid, word: str) -> Optional[IntersectionCandidate]:
        if not grid.placed_words:
            row = grid.size // 2
            col = (grid.size - len(word)) // 2
            if grid.intersection_count(word, row, col, Direction.ACROSS) is None:
                return None
            return IntersectionCandidate(row, col, Direction.ACROSS, 0)

        candidates = self.candidates_for(grid, word)
        if not candidates:
            return None
        return min(candidates, key=IntersectionCandidate.rank)

    @staticmethod
    def candidates_for(grid: PlacementGrid, word: str) -> List[IntersectionCandidate]:
        """Every valid crossing placement of ``word`` with its intersection count."""

        candidates: List[IntersectionCandidate] = []
        for row, col, direction in grid.crossing_starts(word):
            count = grid.intersection_count(word, row, col, direction)
            if count:
                candidates.append(IntersectionCandidate(row, col, direction, count))
        return candidates

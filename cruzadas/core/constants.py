"""Shared constants and enumerations for the crossword engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Direction(str, Enum):
    """Word directions supported by the grid."""

    ACROSS = "across"
    DOWN = "down"

    @property
    def step(self) -> Tuple[int, int]:
        return (0, 1) if self is Direction.ACROSS else (1, 0)

    @property
    def perpendicular(self) -> "Direction":
        return Direction.DOWN if self is Direction.ACROSS else Direction.ACROSS


DEFAULT_GRID_SIZE = 13
DEFAULT_TARGET_WORDS = 10
DEFAULT_MIN_WORD_LENGTH = 3
MIN_PLACED_WORDS = 2

PUZZLE_KEY = "crossword_puzzle"
STARTED_KEY = "crossword_game_started"
COMPLETED_WORDS_KEY = "crossword_completed_words"
DISCARD_KEYS: Tuple[str, ...] = (PUZZLE_KEY, STARTED_KEY, COMPLETED_WORDS_KEY)


@dataclass(frozen=True)
class Bounds:
    """Square grid bounds helper."""

    size: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

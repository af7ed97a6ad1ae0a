"""Working grid used while placing words."""

from __future__ import annotations

from typing import Iterable, List, Optional, Set, Tuple

from ..core.constants import Bounds, Direction
from ..core.exceptions import SlotPlacementError
from ..core.models import PlacedWord, span_cells
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


class PlacementGrid:
    """Letter matrix with per-cell direction occupancy and placement checks."""

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError("Grid size must be positive")
        self.size = size
        self.bounds = Bounds(size)
        self.letters: List[List[Optional[str]]] = [[None] * size for _ in range(size)]
        self.occupancy: List[List[Set[Direction]]] = [
            [set() for _ in range(size)] for _ in range(size)
        ]
        self.placed_words: List[PlacedWord] = []

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def letter_at(self, row: int, col: int) -> Optional[str]:
        if not self.bounds.contains(row, col):
            return None
        return self.letters[row][col]

    def is_occupied(self, row: int, col: int) -> bool:
        return self.letter_at(row, col) is not None

    def intersection_count(self, word: str, row: int, col: int, direction: Direction) -> Optional[int]:
        """Return how many existing cells ``word`` would cross, or ``None`` if invalid.

        A placement is rejected when it leaves the grid, disagrees with an
        existing letter, runs into a letter directly before or after its span,
        reuses a cell already holding a word in the same direction, or puts a
        new letter next to an occupied perpendicular neighbour.
        """

        dr, dc = direction.step
        cells = span_cells(row, col, direction, len(word))
        if not all(self.bounds.contains(r, c) for r, c in cells):
            return None

        if self.is_occupied(row - dr, col - dc):
            return None
        end_row, end_col = cells[-1]
        if self.is_occupied(end_row + dr, end_col + dc):
            return None

        pr, pc = direction.perpendicular.step
        crossings = 0
        for letter, (r, c) in zip(word, cells):
            existing = self.letters[r][c]
            if existing is not None:
                if existing != letter or direction in self.occupancy[r][c]:
                    return None
                crossings += 1
                continue
            if self.is_occupied(r - pr, c - pc) or self.is_occupied(r + pr, c + pc):
                return None
        return crossings

    def crossing_starts(self, word: str) -> Iterable[Tuple[int, int, Direction]]:
        """Yield perpendicular starts where ``word`` shares a letter with a placed word."""

        seen: Set[Tuple[int, int, Direction]] = set()
        for placed in self.placed_words:
            direction = placed.direction.perpendicular
            dr, dc = direction.step
            for j, (r, c) in enumerate(placed.cells):
                placed_letter = placed.word[j]
                for i, letter in enumerate(word):
                    if letter != placed_letter:
                        continue
                    start = (r - dr * i, c - dc * i, direction)
                    if start not in seen:
                        seen.add(start)
                        yield start

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def place(self, placed: PlacedWord) -> None:
        if self.intersection_count(placed.word, placed.row, placed.col, placed.direction) is None:
            raise SlotPlacementError(
                f"Cannot place '{placed.word}' at ({placed.row},{placed.col}) {placed.direction.value}"
            )
        for letter, (r, c) in zip(placed.word, placed.cells):
            self.letters[r][c] = letter
            self.occupancy[r][c].add(placed.direction)
        self.placed_words.append(placed)
        LOGGER.debug(
            "Placed '%s' at (%s,%s) %s", placed.word, placed.row, placed.col, placed.direction.value
        )

    def filled_cells(self) -> int:
        return sum(1 for row in self.letters for letter in row if letter is not None)

"""Materialize placed words into a numbered puzzle."""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

from ..core.constants import Bounds, Direction
from ..core.exceptions import ValidationError
from ..core.models import Cell, Clue, PlacedWord, Puzzle
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


class GridBuilder:
    """Builds the cell matrix, clue numbering and per-direction clue lists."""

    def __init__(self, size: int) -> None:
        self.size = size
        self.bounds = Bounds(size)

    def build(self, placed_words: Sequence[PlacedWord]) -> Puzzle:
        letters: List[List[Optional[str]]] = [[None] * self.size for _ in range(self.size)]
        members: Dict[Direction, Dict[Tuple[int, int], int]] = {
            Direction.ACROSS: {},
            Direction.DOWN: {},
        }
        starts: Dict[Tuple[int, int], List[int]] = {}

        for index, placed in enumerate(placed_words):
            for letter, (row, col) in zip(placed.word, placed.cells):
                if not self.bounds.contains(row, col):
                    raise ValidationError(f"'{placed.word}' leaves the grid at ({row},{col})")
                existing = letters[row][col]
                if existing is not None and existing != letter:
                    raise ValidationError(
                        f"'{placed.word}' writes '{letter}' over '{existing}' at ({row},{col})"
                    )
                if (row, col) in members[placed.direction]:
                    raise ValidationError(
                        f"Two {placed.direction.value} words share cell ({row},{col})"
                    )
                letters[row][col] = letter
                members[placed.direction][(row, col)] = index
            starts.setdefault((placed.row, placed.col), []).append(index)

        numbers: Dict[Tuple[int, int], int] = {}
        next_number = 1
        for row in range(self.size):
            for col in range(self.size):
                if (row, col) in starts:
                    numbers[(row, col)] = next_number
                    next_number += 1

        word_numbers = [numbers[(placed.row, placed.col)] for placed in placed_words]

        def owner(direction: Direction, key: Tuple[int, int]) -> Optional[int]:
            index = members[direction].get(key)
            return None if index is None else word_numbers[index]

        grid = tuple(
            tuple(
                Cell()
                if letters[row][col] is None
                else Cell(
                    letter=letters[row][col],
                    is_blocked=False,
                    number=numbers.get((row, col)),
                    across=owner(Direction.ACROSS, (row, col)),
                    down=owner(Direction.DOWN, (row, col)),
                )
                for col in range(self.size)
            )
            for row in range(self.size)
        )

        clues = [
            Clue(
                number=word_numbers[index],
                text=placed.clue,
                answer=placed.word,
                start_row=placed.row,
                start_col=placed.col,
                direction=placed.direction,
                length=placed.length,
            )
            for index, placed in enumerate(placed_words)
        ]
        across = tuple(sorted((c for c in clues if c.direction == Direction.ACROSS), key=lambda c: c.number))
        down = tuple(sorted((c for c in clues if c.direction == Direction.DOWN), key=lambda c: c.number))
        LOGGER.debug("Built %sx%s grid with %s across / %s down clues", self.size, self.size, len(across), len(down))
        return Puzzle(grid=grid, across_clues=across, down_clues=down, size=self.size)

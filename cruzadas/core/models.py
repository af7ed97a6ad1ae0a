"""Data models shared by the placement engine, grid builder and tracker."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, Iterator, List, Optional, Tuple

from .constants import Direction


def span_cells(row: int, col: int, direction: Direction, length: int) -> List[Tuple[int, int]]:
    dr, dc = direction.step
    return [(row + dr * i, col + dc * i) for i in range(length)]


def word_id(direction: Direction, number: int) -> str:
    return f"{direction.value}-{number}"


@dataclass(frozen=True)
class Cell:
    """A single grid square.

    ``across`` / ``down`` hold the clue number of the word passing through
    the cell in that direction. ``is_correct`` is display-only and derived
    by :func:`cruzadas.engine.completion.refresh_cell_correctness`.
    """

    letter: str = ""
    is_blocked: bool = True
    number: Optional[int] = None
    user_input: str = ""
    across: Optional[int] = None
    down: Optional[int] = None
    is_correct: bool = False

    def word_number(self, direction: Direction) -> Optional[int]:
        return self.across if direction == Direction.ACROSS else self.down

    def word_ids(self) -> List[str]:
        ids = []
        if self.across is not None:
            ids.append(word_id(Direction.ACROSS, self.across))
        if self.down is not None:
            ids.append(word_id(Direction.DOWN, self.down))
        return ids


@dataclass(frozen=True)
class Clue:
    """A numbered clue and the answer span it describes."""

    number: int
    text: str
    answer: str
    start_row: int
    start_col: int
    direction: Direction
    length: int

    @property
    def word_id(self) -> str:
        return word_id(self.direction, self.number)

    def cells(self) -> List[Tuple[int, int]]:
        return span_cells(self.start_row, self.start_col, self.direction, self.length)


@dataclass(frozen=True)
class Puzzle:
    """Immutable puzzle value. Player input produces a new instance."""

    grid: Tuple[Tuple[Cell, ...], ...]
    across_clues: Tuple[Clue, ...]
    down_clues: Tuple[Clue, ...]
    size: int

    def cell(self, row: int, col: int) -> Cell:
        return self.grid[row][col]

    @property
    def clues(self) -> Tuple[Clue, ...]:
        return self.across_clues + self.down_clues

    def clues_by_id(self) -> Dict[str, Clue]:
        return {clue.word_id: clue for clue in self.clues}

    def iter_cells(self) -> Iterator[Tuple[int, int, Cell]]:
        for r, row in enumerate(self.grid):
            for c, cell in enumerate(row):
                yield r, c, cell

    def with_cell(self, row: int, col: int, cell: Cell) -> "Puzzle":
        new_row = self.grid[row][:col] + (cell,) + self.grid[row][col + 1:]
        new_grid = self.grid[:row] + (new_row,) + self.grid[row + 1:]
        return replace(self, grid=new_grid)

    def with_user_input(self, row: int, col: int, value: str) -> "Puzzle":
        return self.with_cell(row, col, replace(self.grid[row][col], user_input=value))

    def cleared(self) -> "Puzzle":
        """Return a copy with every ``user_input`` and ``is_correct`` reset."""

        grid = tuple(
            tuple(replace(cell, user_input="", is_correct=False) for cell in row)
            for row in self.grid
        )
        return replace(self, grid=grid)


@dataclass(frozen=True)
class PlacedWord:
    """A word fixed at a start cell and direction during generation."""

    word: str
    clue: str
    row: int
    col: int
    direction: Direction

    @property
    def length(self) -> int:
        return len(self.word)

    @property
    def cells(self) -> List[Tuple[int, int]]:
        return span_cells(self.row, self.col, self.direction, len(self.word))


@dataclass(frozen=True)
class IntersectionCandidate:
    """A scored insertion point evaluated during placement."""

    row: int
    col: int
    direction: Direction
    intersection_count: int

    def rank(self) -> Tuple[int, int, int, int]:
        """Sort key: most intersections, then top-most, left-most, across first."""

        return (
            -self.intersection_count,
            self.row,
            self.col,
            0 if self.direction == Direction.ACROSS else 1,
        )

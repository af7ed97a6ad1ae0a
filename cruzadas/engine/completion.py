"""Completion tracking over a puzzle snapshot.

Every function here is pure: it reads a :class:`Puzzle` and returns derived
state without touching ``letter`` or ``user_input``.
"""

from __future__ import annotations

from dataclasses import replace
from typing import AbstractSet, Dict, Set, Tuple

from ..core.models import Cell, Clue, Puzzle
from ..data.normalization import clean_letter


def _cell_matches(cell: Cell) -> bool:
    return bool(cell.user_input) and clean_letter(cell.user_input) == cell.letter.lower()


def is_word_complete(puzzle: Puzzle, clue: Clue) -> bool:
    return all(_cell_matches(puzzle.cell(row, col)) for row, col in clue.cells())


def completed_word_ids(puzzle: Puzzle) -> Set[str]:
    return {clue.word_id for clue in puzzle.clues if is_word_complete(puzzle, clue)}


def is_puzzle_complete(puzzle: Puzzle) -> bool:
    """True when every playable cell holds its letter, checked cell by cell."""

    return all(cell.is_blocked or _cell_matches(cell) for _, _, cell in puzzle.iter_cells())


def refresh_cell_correctness(puzzle: Puzzle, completed: AbstractSet[str]) -> Puzzle:
    """Flag each playable cell that belongs to a word in ``completed``."""

    grid = tuple(
        tuple(
            cell
            if cell.is_blocked
            else replace(cell, is_correct=any(wid in completed for wid in cell.word_ids()))
            for cell in row
        )
        for row in puzzle.grid
    )
    return replace(puzzle, grid=grid)


def count_completed_words(puzzle: Puzzle) -> int:
    return len(completed_word_ids(puzzle))


def total_words(puzzle: Puzzle) -> int:
    return len(puzzle.across_clues) + len(puzzle.down_clues)


def word_progress(puzzle: Puzzle) -> Dict[str, Tuple[int, int]]:
    """Map word id to ``(filled_cells, correct_cells)``."""

    progress: Dict[str, Tuple[int, int]] = {}
    for clue in puzzle.clues:
        cells = [puzzle.cell(row, col) for row, col in clue.cells()]
        filled = sum(1 for cell in cells if cell.user_input)
        correct = sum(1 for cell in cells if _cell_matches(cell))
        progress[clue.word_id] = (filled, correct)
    return progress

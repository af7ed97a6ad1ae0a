"""Deterministic invariant checks for generated puzzles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Set, Tuple

from ..core.constants import Bounds, Direction
from ..core.exceptions import ValidationError
from ..core.models import Puzzle
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class PuzzleValidator:
    """Runs structural validation over a finished puzzle."""

    def validate(self, puzzle: Puzzle) -> ValidationResult:
        try:
            self._check_square(puzzle)
            self._check_cells(puzzle)
            self._check_clue_spans(puzzle)
            self._check_numbering(puzzle)
            self._check_no_duplicate_words(puzzle)
        except ValidationError as exc:
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=[str(exc)])
        return ValidationResult(ok=True, messages=[])

    def _check_square(self, puzzle: Puzzle) -> None:
        if len(puzzle.grid) != puzzle.size:
            raise ValidationError(f"Grid has {len(puzzle.grid)} rows, expected {puzzle.size}")
        for r, row in enumerate(puzzle.grid):
            if len(row) != puzzle.size:
                raise ValidationError(f"Row {r} has {len(row)} cells, expected {puzzle.size}")

    def _check_cells(self, puzzle: Puzzle) -> None:
        for r, c, cell in puzzle.iter_cells():
            if cell.is_blocked:
                if cell.across is not None or cell.down is not None:
                    raise ValidationError(f"Blocked cell ({r},{c}) belongs to a word")
                if cell.letter or cell.number is not None:
                    raise ValidationError(f"Blocked cell ({r},{c}) carries a letter or number")
                continue
            if cell.across is None and cell.down is None:
                raise ValidationError(f"Open cell ({r},{c}) belongs to no word")
            if len(cell.letter) != 1 or not cell.letter.isalpha():
                raise ValidationError(f"Invalid letter '{cell.letter}' at ({r},{c})")

    def _check_clue_spans(self, puzzle: Puzzle) -> None:
        bounds = Bounds(puzzle.size)
        claimed: Dict[Tuple[int, int], str] = {}
        for clue in puzzle.clues:
            if clue.length != len(clue.answer):
                raise ValidationError(
                    f"Clue {clue.word_id} length {clue.length} != answer '{clue.answer}'"
                )
            for index, (r, c) in enumerate(clue.cells()):
                if not bounds.contains(r, c):
                    raise ValidationError(f"Clue {clue.word_id} leaves the grid at ({r},{c})")
                cell = puzzle.cell(r, c)
                letter = clue.answer[index]
                if cell.is_blocked or cell.letter != letter:
                    raise ValidationError(
                        f"Clue {clue.word_id} expects '{letter}' at ({r},{c}), grid has '{cell.letter}'"
                    )
                if cell.word_number(clue.direction) != clue.number:
                    raise ValidationError(f"Cell ({r},{c}) is not linked to clue {clue.word_id}")
                previous = claimed.setdefault((r, c), letter)
                if previous != letter:
                    raise ValidationError(f"Clues disagree at ({r},{c}): '{previous}' vs '{letter}'")

    def _check_numbering(self, puzzle: Puzzle) -> None:
        starts: Dict[Tuple[int, int], Set[int]] = {}
        for clue in puzzle.clues:
            starts.setdefault((clue.start_row, clue.start_col), set()).add(clue.number)

        expected = 1
        for r, c, cell in puzzle.iter_cells():
            numbers = starts.get((r, c))
            if numbers is None:
                if cell.number is not None:
                    raise ValidationError(f"Orphan number {cell.number} at ({r},{c})")
                continue
            if len(numbers) != 1:
                raise ValidationError(f"Cell ({r},{c}) starts words with numbers {sorted(numbers)}")
            (number,) = numbers
            if number != expected or cell.number != number:
                raise ValidationError(
                    f"Cell ({r},{c}) numbered {cell.number}, clue {number}, expected {expected}"
                )
            expected += 1

        for direction, clues in ((Direction.ACROSS, puzzle.across_clues), (Direction.DOWN, puzzle.down_clues)):
            numbers = [clue.number for clue in clues]
            if numbers != sorted(set(numbers)):
                raise ValidationError(f"{direction.value} clues are not strictly ordered: {numbers}")
            if any(clue.direction != direction for clue in clues):
                raise ValidationError(f"{direction.value} list holds a clue of the wrong direction")

    def _check_no_duplicate_words(self, puzzle: Puzzle) -> None:
        seen: Set[str] = set()
        for clue in puzzle.clues:
            if clue.answer in seen:
                raise ValidationError(f"Duplicate word '{clue.answer}'")
            seen.add(clue.answer)

"""Persisted puzzle document format.

The document mirrors the puzzle model with camelCase keys::

    {"version": 1, "size": 13,
     "grid": [[{"letter": "g", "isBlocked": false, "number": 1,
                "userInput": "", "across": 1, "down": null,
                "isCorrect": false}, ...], ...],
     "acrossClues": [{"number": 1, "text": "...", "answer": "gato",
                      "startRow": 6, "startCol": 4, "direction": "across",
                      "length": 4}, ...],
     "downClues": [...]}
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

from ..core.constants import Direction
from ..core.exceptions import PuzzleFormatError
from ..core.models import Cell, Clue, Puzzle

FORMAT_VERSION = 1


def cell_to_jsonable(cell: Cell) -> Dict[str, Any]:
    return {
        "letter": cell.letter,
        "isBlocked": cell.is_blocked,
        "number": cell.number,
        "userInput": cell.user_input,
        "across": cell.across,
        "down": cell.down,
        "isCorrect": cell.is_correct,
    }


def clue_to_jsonable(clue: Clue) -> Dict[str, Any]:
    return {
        "number": clue.number,
        "text": clue.text,
        "answer": clue.answer,
        "startRow": clue.start_row,
        "startCol": clue.start_col,
        "direction": clue.direction.value,
        "length": clue.length,
    }


def puzzle_to_jsonable(puzzle: Puzzle) -> Dict[str, Any]:
    return {
        "version": FORMAT_VERSION,
        "size": puzzle.size,
        "grid": [[cell_to_jsonable(cell) for cell in row] for row in puzzle.grid],
        "acrossClues": [clue_to_jsonable(clue) for clue in puzzle.across_clues],
        "downClues": [clue_to_jsonable(clue) for clue in puzzle.down_clues],
    }


def dumps(puzzle: Puzzle) -> str:
    return json.dumps(puzzle_to_jsonable(puzzle), ensure_ascii=False, indent=2)


# ----------------------------------------------------------------------
# Parsing
# ----------------------------------------------------------------------
def _require(data: Dict[str, Any], key: str, kind: type) -> Any:
    if key not in data:
        raise PuzzleFormatError(f"Missing field '{key}'")
    value = data[key]
    # bool is an int subclass; keep numeric fields strict.
    if kind is int and isinstance(value, bool):
        raise PuzzleFormatError(f"Field '{key}' must be int, got bool")
    if not isinstance(value, kind):
        raise PuzzleFormatError(f"Field '{key}' must be {kind.__name__}, got {type(value).__name__}")
    return value


def _optional_int(data: Dict[str, Any], key: str) -> Optional[int]:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise PuzzleFormatError(f"Field '{key}' must be int or null")
    return value


def cell_from_jsonable(data: Any) -> Cell:
    if not isinstance(data, dict):
        raise PuzzleFormatError("Cell entry must be an object")
    user_input = data.get("userInput", "")
    if not isinstance(user_input, str) or len(user_input) > 1:
        raise PuzzleFormatError(f"Invalid userInput {user_input!r}")
    return Cell(
        letter=_require(data, "letter", str),
        is_blocked=_require(data, "isBlocked", bool),
        number=_optional_int(data, "number"),
        user_input=user_input,
        across=_optional_int(data, "across"),
        down=_optional_int(data, "down"),
        is_correct=bool(data.get("isCorrect", False)),
    )


def clue_from_jsonable(data: Any) -> Clue:
    if not isinstance(data, dict):
        raise PuzzleFormatError("Clue entry must be an object")
    direction_value = _require(data, "direction", str)
    try:
        direction = Direction(direction_value)
    except ValueError as exc:
        raise PuzzleFormatError(f"Unknown direction '{direction_value}'") from exc
    return Clue(
        number=_require(data, "number", int),
        text=_require(data, "text", str),
        answer=_require(data, "answer", str),
        start_row=_require(data, "startRow", int),
        start_col=_require(data, "startCol", int),
        direction=direction,
        length=_require(data, "length", int),
    )


def puzzle_from_jsonable(data: Any) -> Puzzle:
    """Rebuild a :class:`Puzzle`; raises :class:`PuzzleFormatError` on any malformed input."""

    if not isinstance(data, dict):
        raise PuzzleFormatError("Puzzle document must be an object")
    version = data.get("version", FORMAT_VERSION)
    if version != FORMAT_VERSION:
        raise PuzzleFormatError(f"Unsupported puzzle document version {version!r}")
    size = _require(data, "size", int)
    raw_grid = _require(data, "grid", list)
    if size <= 0 or len(raw_grid) != size:
        raise PuzzleFormatError(f"Grid has {len(raw_grid)} rows for size {size}")
    rows: List[tuple] = []
    for raw_row in raw_grid:
        if not isinstance(raw_row, list) or len(raw_row) != size:
            raise PuzzleFormatError("Grid rows must be lists of length size")
        rows.append(tuple(cell_from_jsonable(item) for item in raw_row))

    across = tuple(clue_from_jsonable(item) for item in _require(data, "acrossClues", list))
    down = tuple(clue_from_jsonable(item) for item in _require(data, "downClues", list))
    if any(clue.direction != Direction.ACROSS for clue in across) or any(
        clue.direction != Direction.DOWN for clue in down
    ):
        raise PuzzleFormatError("Clue list holds a clue of the wrong direction")
    return Puzzle(grid=tuple(rows), across_clues=across, down_clues=down, size=size)


def loads(text: str) -> Puzzle:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise PuzzleFormatError(f"Puzzle document is not JSON: {exc}") from exc
    return puzzle_from_jsonable(data)

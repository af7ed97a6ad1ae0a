"""Pretty-print helpers for crossword puzzles."""

from __future__ import annotations

import sys
from collections import Counter
from typing import TYPE_CHECKING, Optional

from ..engine.completion import completed_word_ids, total_words

if TYPE_CHECKING:
    from ..core.models import Cell, Puzzle


BLOCKED_SYMBOL = "#"
EMPTY_SYMBOL = "."


def cell_symbol(cell: Cell, show_solution: bool = True) -> str:
    if cell.is_blocked:
        return BLOCKED_SYMBOL
    if show_solution:
        return cell.letter.upper() or "?"
    return cell.user_input.upper() or EMPTY_SYMBOL


def format_puzzle(puzzle: Puzzle, show_solution: bool = True) -> str:
    size = puzzle.size
    header_cells = [f"{c:>2}" for c in range(size)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * size - 1))
    for r, row in enumerate(puzzle.grid):
        row_render = " ".join(f"{cell_symbol(cell, show_solution):>2}" for cell in row)
        lines.append(f"{r:>2} | {row_render}")
    return "\n".join(lines)


def format_clues(puzzle: Puzzle) -> str:
    lines = ["Horizontais:"]
    for clue in puzzle.across_clues:
        lines.append(f"  {clue.number:>2}. {clue.text} ({clue.length})")
    lines.append("Verticais:")
    for clue in puzzle.down_clues:
        lines.append(f"  {clue.number:>2}. {clue.text} ({clue.length})")
    return "\n".join(lines)


def pretty_print_puzzle(
    puzzle: Puzzle,
    *,
    label: Optional[str] = None,
    show_solution: bool = True,
    stream=None,
) -> None:
    """Print the grid followed by the numbered clue lists."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_puzzle(puzzle, show_solution), file=stream)
    print(file=stream)
    print(format_clues(puzzle), file=stream)


def print_puzzle_stats(puzzle: Puzzle, *, stream=None) -> None:
    """Print grid geometry, word length distribution and player progress."""

    stream = stream or sys.stdout
    total_cells = puzzle.size * puzzle.size
    open_cells = sum(1 for _, _, cell in puzzle.iter_cells() if not cell.is_blocked)
    filled_cells = sum(
        1 for _, _, cell in puzzle.iter_cells() if not cell.is_blocked and cell.user_input
    )

    print(file=stream)
    print("--- Grid ---", file=stream)
    print(f"  Size:          {puzzle.size} x {puzzle.size} ({total_cells} cells)", file=stream)
    print(f"  Letters:       {open_cells} ({open_cells / total_cells * 100:.0f}%)", file=stream)
    print(f"  Blocked:       {total_cells - open_cells}", file=stream)

    lengths = [clue.length for clue in puzzle.clues]
    print(file=stream)
    print("--- Words ---", file=stream)
    print(
        f"  Total words:   {len(lengths)} ({len(puzzle.across_clues)} across, "
        f"{len(puzzle.down_clues)} down)",
        file=stream,
    )
    if lengths:
        print(
            f"  Length range:  {min(lengths)}-{max(lengths)} (avg {sum(lengths) / len(lengths):.1f})",
            file=stream,
        )
        dist_parts = [f"{l}:{c}" for l, c in sorted(Counter(lengths).items())]
        print(f"  Distribution:  {' '.join(dist_parts)}", file=stream)

    if filled_cells:
        print(file=stream)
        print("--- Progress ---", file=stream)
        print(f"  Filled cells:  {filled_cells}/{open_cells}", file=stream)
        print(
            f"  Completed:     {len(completed_word_ids(puzzle))}/{total_words(puzzle)} words",
            file=stream,
        )

"""Single owner of the in-play puzzle value.

All player edits go through :meth:`PuzzleSession.enter_letter`, which
applies one cell change, recomputes completion and hands the new snapshot to
the background :class:`PersistenceWriter`. The results sink fires once, the
first time the puzzle becomes complete after the player has started.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, Set

from ..core.constants import COMPLETED_WORDS_KEY, DISCARD_KEYS, PUZZLE_KEY, STARTED_KEY, Bounds
from ..core.exceptions import CellInputError, PuzzleFormatError, ResultsSinkError
from ..core.models import Puzzle
from ..data.normalization import clean_letter
from ..data.word_bank import WordBank
from ..io.results import PuzzleResult, ResultsSink
from ..io.serialization import puzzle_from_jsonable, puzzle_to_jsonable
from ..io.store import KeyValueStore, PersistenceWriter
from ..utils.logger import get_logger
from .completion import (completed_word_ids, is_puzzle_complete, refresh_cell_correctness,
                         total_words)
from .generator import PuzzleConfig, generate_puzzle, new_puzzle
from .validator import PuzzleValidator


LOGGER = get_logger(__name__)


@dataclass
class SessionConfig:
    puzzle: PuzzleConfig = field(default_factory=PuzzleConfig)
    persist_retries: int = 2


class PuzzleSession:
    def __init__(
        self,
        config: SessionConfig,
        store: KeyValueStore,
        word_bank: Optional[WordBank] = None,
        results_sink: Optional[ResultsSink] = None,
        writer: Optional[PersistenceWriter] = None,
    ) -> None:
        self.config = config
        self.store = store
        self.word_bank = word_bank
        self.results_sink = results_sink
        self.writer = writer or PersistenceWriter(retries=config.persist_retries)
        self.validator = PuzzleValidator()
        self.puzzle: Optional[Puzzle] = None
        self.has_started = False
        self.is_completed = False
        self.completed_words: Set[str] = set()
        self._reported = False

    def __enter__(self) -> "PuzzleSession":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(self) -> Puzzle:
        """Resume the stored puzzle or generate a fresh one."""

        saved = self._load_saved()
        if saved is None:
            puzzle = generate_puzzle(self.config.puzzle, self.word_bank)
            self._discard_stored(DISCARD_KEYS)
            return self._install_fresh(puzzle)

        self.has_started = self._load_key(STARTED_KEY) is True
        self._apply(saved, allow_report=False)
        # A puzzle restored already solved was reported when it was solved.
        self._reported = self.is_completed
        LOGGER.info(
            "Resumed stored puzzle (%s/%s words complete)",
            len(self.completed_words),
            total_words(saved),
        )
        return self.puzzle

    def new_puzzle(self) -> Puzzle:
        """Replace the current puzzle, dropping stored document and flags."""

        replacement = new_puzzle(self.config.puzzle, self.word_bank)
        self._discard_stored(replacement.discard_keys)
        return self._install_fresh(replacement.puzzle)

    def flush(self) -> None:
        self.writer.flush()

    def close(self) -> None:
        self.writer.close()

    # ------------------------------------------------------------------
    # Player input
    # ------------------------------------------------------------------
    def enter_letter(self, row: int, col: int, value: str) -> Puzzle:
        puzzle = self._require_puzzle()
        if not Bounds(puzzle.size).contains(row, col):
            raise CellInputError(f"Cell ({row},{col}) outside {puzzle.size}x{puzzle.size} grid")
        if puzzle.cell(row, col).is_blocked:
            LOGGER.debug("Ignoring input on blocked cell (%s,%s)", row, col)
            return puzzle

        letter = clean_letter(value)
        if value and not letter:
            LOGGER.debug("Ignoring non-letter input %r at (%s,%s)", value, row, col)
            return puzzle
        if letter and not self.has_started:
            self.has_started = True
            self._persist(STARTED_KEY, True)

        self._apply(puzzle.with_user_input(row, col, letter), allow_report=True)
        self._persist_puzzle()
        return self.puzzle

    def clear_cell(self, row: int, col: int) -> Puzzle:
        return self.enter_letter(row, col, "")

    @property
    def progress(self) -> tuple:
        puzzle = self._require_puzzle()
        return len(self.completed_words), total_words(puzzle)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _require_puzzle(self) -> Puzzle:
        if self.puzzle is None:
            raise RuntimeError("Session has no puzzle; call start() first")
        return self.puzzle

    def _load_key(self, key: str):
        """Read one stored value; any adapter failure counts as a miss."""

        try:
            return self.store.load(key)
        except Exception as exc:
            LOGGER.warning("Cannot read stored %s: %s", key, exc)
            return None

    def _load_saved(self) -> Optional[Puzzle]:
        data = self._load_key(PUZZLE_KEY)
        if data is None:
            return None
        try:
            puzzle = puzzle_from_jsonable(data)
            validation = self.validator.validate(puzzle)
            if not validation.ok:
                raise PuzzleFormatError("; ".join(validation.messages))
        except PuzzleFormatError as exc:
            LOGGER.warning("Discarding stored puzzle: %s", exc)
            return None
        return puzzle

    def _discard_stored(self, keys) -> None:
        for key in keys:
            self.writer.submit(f"removal of {key}", lambda key=key: self.store.remove(key))

    def _install_fresh(self, puzzle: Puzzle) -> Puzzle:
        self.has_started = False
        self.is_completed = False
        self._reported = False
        self._apply(puzzle.cleared(), allow_report=False)
        self._persist_puzzle()
        return self.puzzle

    def _apply(self, puzzle: Puzzle, allow_report: bool) -> None:
        completed = completed_word_ids(puzzle)
        self.puzzle = refresh_cell_correctness(puzzle, completed)
        self.completed_words = completed
        complete = is_puzzle_complete(self.puzzle)
        if complete and allow_report and self.has_started and not self._reported:
            self._report()
        self.is_completed = complete

    def _report(self) -> None:
        puzzle = self._require_puzzle()
        result = PuzzleResult(
            completed_words=len(self.completed_words),
            total_words=total_words(puzzle),
            size=puzzle.size,
            finished_at=datetime.now(timezone.utc).isoformat(),
        )
        self._reported = True
        self._persist(COMPLETED_WORDS_KEY, result.completed_words)
        if self.results_sink is None:
            return
        try:
            self.results_sink.report(result)
        except ResultsSinkError as exc:
            LOGGER.warning("Results sink failed: %s", exc)

    def _persist_puzzle(self) -> None:
        self._persist(PUZZLE_KEY, puzzle_to_jsonable(self._require_puzzle()))

    def _persist(self, key: str, value) -> None:
        self.writer.submit(key, lambda: self.store.save(key, value))

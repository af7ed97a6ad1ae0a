"""Curated word bank and candidate selection."""

from __future__ import annotations

import csv
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

from ..core.constants import DEFAULT_MIN_WORD_LENGTH, MIN_PLACED_WORDS
from ..core.exceptions import InsufficientWords, WordBankLoadError
from ..utils.logger import get_logger
from .default_words import DEFAULT_WORDS
from .normalization import clean_word


LOGGER = get_logger(__name__)

STRATEGIES = ("balanced", "random", "ordered")

# Short (<=4), medium (5-7) and long (>=8) words, mirroring a 4/8/3 mix of 15.
_BALANCE_RATIO = (4, 8, 3)

RawEntry = Union["WordEntry", Tuple[str, str], Tuple[str, str, str]]


@dataclass
class WordBankConfig:
    """Configuration for word filtering and selection."""

    min_length: int = DEFAULT_MIN_WORD_LENGTH
    max_length: Optional[int] = None
    categories: Optional[Sequence[str]] = None
    strategy: str = "balanced"
    seed: Optional[int] = None
    rng: Optional[random.Random] = None


@dataclass(frozen=True)
class WordEntry:
    """A normalized word with its clue."""

    word: str
    clue: str
    category: str = ""
    display: str = ""

    @property
    def length(self) -> int:
        return len(self.word)


def template_clue(word: str) -> str:
    return f"Palavra com {len(word)} letras"


def parse_word_entries(raw_words: Iterable[str]) -> List[Tuple[str, str]]:
    """Parse ``WORD`` or ``WORD:Clue`` items, skipping blanks."""

    entries: List[Tuple[str, str]] = []
    for item in raw_words:
        item = item.strip()
        if not item:
            continue
        if ":" in item:
            word, _, clue = item.partition(":")
            entries.append((word.strip(), clue.strip()))
        else:
            entries.append((item, ""))
    return entries


def read_word_file(path: Path | str) -> List[Tuple[str, str]]:
    """Read one ``WORD`` / ``WORD:Clue`` entry per line. ``#`` comments are skipped."""

    source = Path(path)
    try:
        text = source.read_text(encoding="utf-8")
    except OSError as exc:
        raise WordBankLoadError(f"Cannot read word file {source}: {exc}") from exc
    lines = []
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        lines.append(line)
    return parse_word_entries(lines)


class WordBank:
    """Holds the candidate ``(word, clue)`` pool and picks words per puzzle."""

    def __init__(
        self,
        entries: Optional[Iterable[RawEntry]] = None,
        config: Optional[WordBankConfig] = None,
    ) -> None:
        self.config = config or WordBankConfig()
        if self.config.strategy not in STRATEGIES:
            raise ValueError(
                f"Unknown selection strategy '{self.config.strategy}'; expected one of {STRATEGIES}"
            )
        self._rng = self.config.rng or random.Random(self.config.seed)
        self._entries: List[WordEntry] = []
        self._by_word: Dict[str, WordEntry] = {}
        self._load(DEFAULT_WORDS if entries is None else entries)

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------
    @classmethod
    def from_tsv(cls, path: Path | str, config: Optional[WordBankConfig] = None) -> "WordBank":
        """Load a tab-separated file with ``word``, ``clue`` and optional ``category`` columns."""

        source = Path(path)
        if not source.exists():
            raise WordBankLoadError(f"Missing word list TSV: {source}")
        try:
            with source.open("r", encoding="utf-8", newline="") as handle:
                reader = csv.DictReader(handle, delimiter="\t")
                if not reader.fieldnames or "word" not in reader.fieldnames:
                    raise WordBankLoadError(f"Word list {source} has no 'word' column")
                rows = [
                    (
                        (row.get("word") or "").strip(),
                        (row.get("clue") or "").strip(),
                        (row.get("category") or "").strip(),
                    )
                    for row in reader
                ]
        except (OSError, csv.Error, UnicodeDecodeError) as exc:
            raise WordBankLoadError(f"Cannot read word list {source}: {exc}") from exc
        LOGGER.info("Loaded %d rows from %s", len(rows), source)
        return cls(rows, config)

    @classmethod
    def from_word_file(cls, path: Path | str, config: Optional[WordBankConfig] = None) -> "WordBank":
        return cls(read_word_file(path), config)

    def _load(self, entries: Iterable[RawEntry]) -> None:
        for raw in entries:
            entry = self._coerce(raw)
            if entry is None:
                continue
            if entry.word in self._by_word:
                LOGGER.debug("Skipping duplicate word '%s'", entry.word)
                continue
            self._by_word[entry.word] = entry
            self._entries.append(entry)

    @staticmethod
    def _coerce(raw: RawEntry) -> Optional[WordEntry]:
        if isinstance(raw, WordEntry):
            display, clue, category = raw.display or raw.word, raw.clue, raw.category
        else:
            display = raw[0]
            clue = raw[1] if len(raw) > 1 else ""
            category = raw[2] if len(raw) > 2 else ""
        word = clean_word(display)
        if not word:
            return None
        return WordEntry(
            word=word,
            clue=clue.strip() or template_clue(word),
            category=category.strip().lower(),
            display=display.strip(),
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> List[WordEntry]:
        return list(self._entries)

    def contains(self, word: str) -> bool:
        return clean_word(word) in self._by_word

    def get(self, word: str) -> Optional[WordEntry]:
        return self._by_word.get(clean_word(word))

    def usable(self, min_length: Optional[int] = None, max_length: Optional[int] = None) -> List[WordEntry]:
        min_len = self.config.min_length if min_length is None else min_length
        max_len = self.config.max_length if max_length is None else max_length
        categories = {c.lower() for c in self.config.categories} if self.config.categories else None
        return [
            entry
            for entry in self._entries
            if entry.length >= min_len
            and (max_len is None or entry.length <= max_len)
            and (categories is None or entry.category in categories)
        ]

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------
    def select_words(
        self,
        pool_size: Optional[int] = None,
        min_length: Optional[int] = None,
        max_length: Optional[int] = None,
    ) -> List[WordEntry]:
        """Return up to ``pool_size`` distinct candidates of usable length.

        Raises :class:`InsufficientWords` when fewer than two usable words
        exist; a bank holding a single entry only needs that entry.
        """

        usable = self.usable(min_length, max_length)
        required = min(MIN_PLACED_WORDS, max(1, len(self._entries)))
        if len(usable) < required:
            raise InsufficientWords(
                f"Word bank offers {len(usable)} usable words, need at least {required}"
            )
        if pool_size is None or pool_size >= len(usable):
            pool_size = len(usable)
        if pool_size <= 0:
            raise ValueError("pool_size must be positive")

        strategy = self.config.strategy
        if strategy == "ordered":
            selected = usable[:pool_size]
        elif strategy == "random":
            selected = self._rng.sample(usable, pool_size)
        else:
            selected = self._balanced(usable, pool_size)
        LOGGER.debug("Selected %d/%d words (%s)", len(selected), len(usable), strategy)
        return selected

    def _balanced(self, usable: List[WordEntry], pool_size: int) -> List[WordEntry]:
        buckets: Tuple[List[WordEntry], List[WordEntry], List[WordEntry]] = ([], [], [])
        for entry in usable:
            if entry.length <= 4:
                buckets[0].append(entry)
            elif entry.length <= 7:
                buckets[1].append(entry)
            else:
                buckets[2].append(entry)

        total = sum(_BALANCE_RATIO)
        short_quota = pool_size * _BALANCE_RATIO[0] // total
        long_quota = pool_size * _BALANCE_RATIO[2] // total
        quotas = (short_quota, pool_size - short_quota - long_quota, long_quota)

        selected: List[WordEntry] = []
        leftovers: List[WordEntry] = []
        for bucket, quota in zip(buckets, quotas):
            shuffled = list(bucket)
            self._rng.shuffle(shuffled)
            selected.extend(shuffled[:quota])
            leftovers.extend(shuffled[quota:])

        if len(selected) < pool_size:
            self._rng.shuffle(leftovers)
            selected.extend(leftovers[: pool_size - len(selected)])

        self._rng.shuffle(selected)
        return selected

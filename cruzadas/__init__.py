"""Portuguese crossword generator and play session.

This package exposes the public API surface via:

- ``cruzadas.engine.generator``: ``generate_puzzle`` / ``new_puzzle`` build puzzles.
- ``cruzadas.data.word_bank.WordBank``: holds and selects candidate words.
- ``cruzadas.engine.session.PuzzleSession``: owns an in-play puzzle and persists it.
"""

from .data.word_bank import WordBank, WordBankConfig
from .engine.generator import PuzzleConfig, generate_puzzle, new_puzzle
from .engine.session import PuzzleSession, SessionConfig

__all__ = [
    "PuzzleConfig",
    "PuzzleSession",
    "SessionConfig",
    "WordBank",
    "WordBankConfig",
    "generate_puzzle",
    "new_puzzle",
]

__version__ = "0.1.0"

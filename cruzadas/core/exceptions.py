"""Custom exception hierarchy for crossword generation and play."""


class CrosswordError(Exception):
    """Base exception for crossword failures."""


class WordBankLoadError(CrosswordError):
    """Raised when a word list file cannot be parsed."""


class InsufficientWords(CrosswordError):
    """Raised when the word bank cannot offer enough usable words."""


class GenerationFailed(CrosswordError):
    """Raised when too few words could be placed after every retry."""


class ValidationError(CrosswordError):
    """Raised when puzzle integrity checks fail."""


class PuzzleFormatError(CrosswordError):
    """Raised when a persisted puzzle document is malformed."""


class StoreError(CrosswordError):
    """Raised when the key-value store cannot write or delete an entry."""


class ResultsSinkError(CrosswordError):
    """Raised when a results sink fails to deliver a report."""


class CellInputError(CrosswordError):
    """Raised when player input targets a cell outside the grid."""


class SlotPlacementError(CrosswordError):
    """Raised when a word cannot be written into the working grid."""

"""Shared helpers for Portuguese word normalization."""

from __future__ import annotations

import re

PORTUGUESE_ACCENTS = {
    "á": "a",
    "à": "a",
    "â": "a",
    "ã": "a",
    "ä": "a",
    "é": "e",
    "ê": "e",
    "è": "e",
    "í": "i",
    "ì": "i",
    "ó": "o",
    "ô": "o",
    "õ": "o",
    "ò": "o",
    "ú": "u",
    "ü": "u",
    "ù": "u",
    "ç": "c",
    "ñ": "n",
}

WORD_RE = re.compile(r"[^a-z]")


def clean_word(text: str) -> str:
    """Return a normalized lowercase ASCII representation of ``text``."""

    if not text:
        return ""
    transformed = []
    for char in text.lower():
        transformed.append(PORTUGUESE_ACCENTS.get(char, char))
    return WORD_RE.sub("", "".join(transformed))


def clean_letter(text: str) -> str:
    """Normalize a single player keystroke; empty when nothing usable remains."""

    cleaned = clean_word(text)
    return cleaned[:1]


__all__ = ["clean_word", "clean_letter", "PORTUGUESE_ACCENTS"]

"""
Word shape checks shared by the pool and the round.

A well-formed word is exactly `length` ASCII letters a-z after
normalization (strip + lowercase). Membership in a dictionary is the
pool's job, not this module's.
"""

from __future__ import annotations

from ..config import WORD_LENGTH


def normalize_word(word: str) -> str:
    return word.strip().lower()


def is_letter(ch: str) -> bool:
    """True for a single ASCII letter, either case."""
    return isinstance(ch, str) and len(ch) == 1 and ch.isascii() and ch.isalpha()


def is_well_formed(word: str, length: int = WORD_LENGTH) -> bool:
    """
    Return True if `word` (already normalized) is `length` letters a-z.
    """
    if not isinstance(word, str):
        return False
    return len(word) == length and word.isascii() and word.isalpha()

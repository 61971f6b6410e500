"""
Candidate filtering given a round's feedback so far.

A word stays a candidate only if scoring each past guess against it would
reproduce exactly the pattern the player saw. The autoplay solver uses this
to keep its guesses consistent with everything revealed.
"""

from __future__ import annotations

from typing import Iterable, List, Tuple

from .scoring import evaluate, to_pattern
from .validation import is_well_formed

# (guess, pattern) pairs, pattern as rendered by to_pattern()
History = Iterable[Tuple[str, str]]


def filter_candidates(words: Iterable[str], history: History, length: int) -> List[str]:
    """
    Keep only words (length == `length`) consistent with every (guess, pattern).

    Order of `words` is preserved.
    """
    history = list(history)
    out: List[str] = []
    for w in words:
        if not is_well_formed(w, length):
            continue
        if all(to_pattern(evaluate(g, w)) == patt for g, patt in history):
            out.append(w)
    return out

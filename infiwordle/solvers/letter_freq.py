"""
Letter-Frequency solver (distinct-letter coverage).

Scores each candidate by the summed frequency of its DISTINCT letters over
the current candidate set and plays the best one; ties are broken with the
seeded RNG. Only candidates are ever played, so every guess could still win.
"""

from __future__ import annotations
from collections import Counter
from typing import List
from .base import BaseSolver, register


@register
class LetterFreqSolver(BaseSolver):
    id = "letter_freq"
    name = "Letter Frequency (distinct)"
    version = "1.0.0"

    def _score_word(self, w: str, counts: Counter) -> int:
        # each letter counted once: prefer 'slate' over 'sleet'
        return sum(counts[ch] for ch in set(w))

    def next_guess(self, state: dict) -> str:
        candidates: List[str] = state["candidates"] or state["allowed"]
        if not candidates:
            return "a" * self.length

        counts = Counter("".join(candidates))
        best_score = None
        best_words: List[str] = []
        for w in candidates:
            s = self._score_word(w, counts)
            if best_score is None or s > best_score:
                best_score, best_words = s, [w]
            elif s == best_score:
                best_words.append(w)

        return best_words[self.rng.randrange(len(best_words))]

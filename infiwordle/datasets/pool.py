"""
The word pool: secret candidates plus the acceptable-guess dictionary.

Both sets only ever grow. Each ingest feeds exactly one of them; the loader
feeds every secret list into both, so the dictionary stays a superset of
the secrets. An empty acceptable set means no dictionary is available and
any well-formed word is accepted.
"""

from __future__ import annotations

import logging
import random
import threading
from typing import Iterable, Literal, Set

from ..config import WORD_LENGTH
from ..engine.validation import is_well_formed, normalize_word
from ..errors import EmptyPoolError

logger = logging.getLogger(__name__)

Role = Literal["secret", "guess"]

SECRET: Role = "secret"
GUESS: Role = "guess"


class WordPool:
    def __init__(self, *, length: int = WORD_LENGTH, rng: random.Random | None = None):
        self.length = int(length)
        self.rng = rng or random.Random()
        self.valid_secrets: Set[str] = set()
        self.acceptable_guesses: Set[str] = set()
        # ingest may run on a loader thread while a session draws secrets
        self._lock = threading.Lock()

    def ingest(self, candidates: Iterable[str], role: Role = SECRET) -> int:
        """
        Normalize `candidates`, drop anything that is not `length` letters,
        and union the survivors into the set for `role`.

        Never raises on empty or malformed input. Returns how many words
        survived the filter (before de-duplication against the pool).
        """
        if role not in (SECRET, GUESS):
            raise ValueError(f"unknown role: {role!r}")

        words = set()
        for raw in candidates:
            if not isinstance(raw, str):
                continue
            w = normalize_word(raw)
            if is_well_formed(w, self.length):
                words.add(w)

        with self._lock:
            if role == SECRET:
                self.valid_secrets |= words
            else:
                self.acceptable_guesses |= words
        logger.debug("ingested %d %s word(s)", len(words), role)
        return len(words)

    def pick_secret(self) -> str:
        """Uniformly random secret; EmptyPoolError if there are none."""
        with self._lock:
            if not self.valid_secrets:
                raise EmptyPoolError()
            # sorted so a seeded rng draws the same sequence whatever the ingest order
            return self.rng.choice(sorted(self.valid_secrets))

    def is_acceptable_guess(self, word: str) -> bool:
        with self._lock:
            if not self.acceptable_guesses:
                return True
            return normalize_word(word) in self.acceptable_guesses

    def __len__(self) -> int:
        return len(self.valid_secrets)

    def __repr__(self) -> str:
        return (f"WordPool(secrets={len(self.valid_secrets)}, "
                f"guesses={len(self.acceptable_guesses)})")

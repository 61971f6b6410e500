"""
One round: a single secret word and up to MAX_GUESSES scored guesses.

States:
  in_progress -> won   (a guess equal to the secret)
  in_progress -> lost  (MAX_GUESSES guesses used without a win)
Both end states are terminal: typing is ignored and submissions are
rejected with RoundOverError.

The round never scores or rotates words itself; SessionController reacts to
the transition. A rejected submission leaves history, the pending entry and
the status exactly as they were.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Literal, Tuple

from ..config import MAX_GUESSES, WORD_LENGTH
from ..engine import aggregate, evaluate, is_letter, normalize_word, revealed_letters, to_pattern
from ..engine.scoring import Verdict
from ..errors import IncompleteWordError, InvalidWordError, RoundOverError

logger = logging.getLogger(__name__)

RoundStatus = Literal["in_progress", "won", "lost"]

IN_PROGRESS: RoundStatus = "in_progress"
WON: RoundStatus = "won"
LOST: RoundStatus = "lost"


@dataclass(frozen=True)
class GuessRecord:
    """A submitted guess and its per-letter verdicts."""
    word: str
    verdicts: Tuple[Verdict, ...]

    @property
    def pattern(self) -> str:
        return to_pattern(self.verdicts)


class RoundStateMachine:
    def __init__(self, secret: str, is_acceptable: Callable[[str], bool], *,
                 length: int = WORD_LENGTH, max_guesses: int = MAX_GUESSES):
        """
        Args:
            secret:        the hidden word (normalized here)
            is_acceptable: dictionary check, usually WordPool.is_acceptable_guess
            length:        word length
            max_guesses:   attempts before the round is lost
        """
        self.secret = normalize_word(secret)
        if len(self.secret) != length:
            raise ValueError(f"secret must have {length} letters; got {secret!r}")
        self.is_acceptable = is_acceptable
        self.length = int(length)
        self.max_guesses = int(max_guesses)
        self._history: List[GuessRecord] = []
        self._pending: List[str] = []
        self.status: RoundStatus = IN_PROGRESS

    # ---- read-only views ----

    @property
    def history(self) -> Tuple[GuessRecord, ...]:
        return tuple(self._history)

    @property
    def pending_entry(self) -> str:
        return "".join(self._pending)

    @property
    def is_over(self) -> bool:
        return self.status != IN_PROGRESS

    @property
    def guesses_left(self) -> int:
        return self.max_guesses - len(self._history)

    def keyboard_status(self) -> Dict[str, Verdict]:
        return aggregate(self._history)

    def revealed_letters(self) -> List[str]:
        return revealed_letters(self._history, self.length)

    # ---- input events ----

    def append_letter(self, ch: str) -> None:
        """Add a letter to the pending entry; ignored when full, over, or not a letter."""
        if self.is_over or len(self._pending) >= self.length:
            return
        if not is_letter(ch):
            return
        self._pending.append(ch.lower())

    def backspace(self) -> None:
        if self.is_over:
            return
        if self._pending:
            self._pending.pop()

    def submit_guess(self) -> GuessRecord:
        """
        Score the pending entry and record it.

        Raises:
            RoundOverError:      the round already ended
            IncompleteWordError: fewer than `length` letters typed
            InvalidWordError:    the dictionary rejects the word
        """
        guess = self.pending_entry
        if self.is_over:
            raise RoundOverError(guess)
        if len(guess) != self.length:
            raise IncompleteWordError(guess)
        if not self.is_acceptable(guess):
            raise InvalidWordError(guess)

        record = GuessRecord(guess, evaluate(guess, self.secret))
        self._history.append(record)
        self._pending.clear()

        if guess == self.secret:
            self.status = WON
        elif len(self._history) >= self.max_guesses:
            self.status = LOST
        logger.debug("guess %d: %s -> %s (%s)", len(self._history), guess,
                     record.pattern, self.status)
        return record

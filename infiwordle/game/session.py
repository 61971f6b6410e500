"""
A play session: consecutive rounds sharing one word pool and a running score.

Score rules:
  - +1 exactly once per won round, at the moment the winning guess is
    accepted (before any "next round" transition a UI may delay).
  - start_new_round(reset_score=False) keeps the score.
  - start_new_round(reset_score=True) / reset_session() zero it.

Every public method holds the session lock, so a UI timer thread calling
start_new_round cannot interleave with a submission. The pool guards its
own sets, so a loader thread may widen it while rounds are being played.
"""

from __future__ import annotations

import logging
import threading
from typing import Dict, List, Optional, Tuple

from ..config import MAX_GUESSES
from ..datasets.pool import WordPool
from ..engine.scoring import Verdict
from .round import LOST, WON, GuessRecord, RoundStateMachine, RoundStatus

logger = logging.getLogger(__name__)


class SessionController:
    def __init__(self, pool: WordPool, *, max_guesses: int = MAX_GUESSES):
        """
        Start a session and its first round.

        Raises EmptyPoolError if the pool has no secret words.
        """
        self.pool = pool
        self.max_guesses = int(max_guesses)
        self.score = 0
        self.round_number = 0
        self.round: RoundStateMachine
        self._round_counted = False
        self._lock = threading.RLock()
        self.start_new_round(reset_score=True)

    # ---- transitions ----

    def start_new_round(self, reset_score: bool = False) -> None:
        """
        Draw a fresh secret and replace the current round.

        Raises EmptyPoolError (leaving the current round in place) if there is
        nothing to draw.
        """
        with self._lock:
            secret = self.pool.pick_secret()
            self.round = RoundStateMachine(
                secret, self.pool.is_acceptable_guess,
                length=self.pool.length, max_guesses=self.max_guesses,
            )
            self._round_counted = False
            if reset_score:
                self.score = 0
                self.round_number = 0
            self.round_number += 1
            logger.debug("round %d started (secret=%s)", self.round_number, secret)

    def reset_session(self) -> None:
        """New game: fresh word and score back to zero."""
        self.start_new_round(reset_score=True)

    def on_round_won(self) -> None:
        """Credit the current round's win; repeated calls for the same round are ignored."""
        with self._lock:
            if self.round.status != WON or self._round_counted:
                return
            self._round_counted = True
            self.score += 1

    # ---- input events ----

    def append_letter(self, ch: str) -> None:
        with self._lock:
            self.round.append_letter(ch)

    def backspace(self) -> None:
        with self._lock:
            self.round.backspace()

    def submit_guess(self) -> GuessRecord:
        """
        Forward to the round; rejections propagate unchanged.
        A winning guess updates the score before this returns.
        """
        with self._lock:
            record = self.round.submit_guess()
            if self.round.status == WON:
                self.on_round_won()
            return record

    # ---- snapshots for the presentation layer ----

    @property
    def history(self) -> Tuple[GuessRecord, ...]:
        return self.round.history

    @property
    def pending_entry(self) -> str:
        return self.round.pending_entry

    @property
    def status(self) -> RoundStatus:
        return self.round.status

    @property
    def keyboard_status(self) -> Dict[str, Verdict]:
        return self.round.keyboard_status()

    @property
    def revealed_letters(self) -> List[str]:
        return self.round.revealed_letters()

    @property
    def revealed_secret(self) -> Optional[str]:
        """The secret, but only once the round is lost."""
        return self.round.secret if self.round.status == LOST else None

"""
Error kinds raised by the game.

Submission rejections are recoverable: the player keeps typing or tries a
different word, and nothing in the round changes. EmptyPoolError is the only
one that blocks play (no round can start without a secret).
"""

from __future__ import annotations

from .config import MSG_INCOMPLETE, MSG_INVALID, MSG_ROUND_OVER


class InfiWordleError(Exception):
    """Root of every error raised by infiwordle."""


class SubmitError(InfiWordleError, ValueError):
    """A guess submission was rejected; the round is left untouched."""

    message = "Guess rejected"

    def __init__(self, word: str = "", message: str | None = None):
        self.word = word
        if message is not None:
            self.message = message
        super().__init__(f"{self.message}: {word!r}" if word else self.message)


class IncompleteWordError(SubmitError):
    message = MSG_INCOMPLETE


class InvalidWordError(SubmitError):
    message = MSG_INVALID


class RoundOverError(SubmitError):
    message = MSG_ROUND_OVER


class EmptyPoolError(InfiWordleError, LookupError):
    """No secret words are available, so no round can start."""

    def __init__(self, message: str = "word pool has no secret words"):
        super().__init__(message)

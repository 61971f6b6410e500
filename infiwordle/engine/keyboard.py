"""
Keyboard status derived from the guess history.

Each letter the player has typed gets the strongest verdict seen for it
across all guesses (exact > present > absent). Once a letter is exact it
stays exact. Letters that were never typed are left out of the mapping so a
UI can tell "never tried" apart from "tried and absent".
"""

from __future__ import annotations

from typing import Dict, Iterable, List

from .scoring import EXACT, PRIORITY, Verdict


def aggregate(history: Iterable) -> Dict[str, Verdict]:
    """
    Fold a guess history into a letter -> best verdict mapping.

    Args:
      history : iterable of records exposing `.word` and `.verdicts`
                (GuessRecord), in submission order.
    """
    status: Dict[str, Verdict] = {}
    for record in history:
        for letter, verdict in zip(record.word, record.verdicts):
            prev = status.get(letter)
            if prev == EXACT:
                continue
            if prev is None or PRIORITY[verdict] > PRIORITY[prev]:
                status[letter] = verdict
    return status


def revealed_letters(history: Iterable, length: int) -> List[str]:
    """
    Per-position letters confirmed exact so far, "_" where still unknown.
    """
    mask = ["_"] * length
    for record in history:
        for i, (letter, verdict) in enumerate(zip(record.word, record.verdicts)):
            if verdict == EXACT:
                mask[i] = letter
    return mask

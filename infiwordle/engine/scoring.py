"""
Guess evaluation for a single (guess, secret) pair.

Verdicts:
  - "exact"   : right letter, right position ("green")
  - "present" : letter occurs elsewhere in the secret ("yellow")
  - "absent"  : no unmatched occurrence left in the secret ("gray")

Algorithm (two-pass, duplicate-safe):
  1) Mark every exact match and count the secret letters that were NOT
     matched exactly; those form the pool of letters still available.
  2) Walk the remaining positions left to right; a letter is "present" only
     while the pool still holds an unconsumed copy of it.

So the number of exact+present verdicts for a letter never exceeds how many
times that letter occurs in the secret.
"""

from __future__ import annotations

from collections import Counter
from typing import Literal, Sequence, Tuple

Verdict = Literal["exact", "present", "absent"]

EXACT: Verdict = "exact"
PRESENT: Verdict = "present"
ABSENT: Verdict = "absent"

# Higher wins when several guesses disagree about a letter.
PRIORITY = {ABSENT: 0, PRESENT: 1, EXACT: 2}

_PATTERN_CHARS = {EXACT: "G", PRESENT: "Y", ABSENT: "-"}


def evaluate(guess: str, secret: str) -> Tuple[Verdict, ...]:
    """
    Score `guess` against `secret`.

    Both words are expected to be normalized already (lowercase, same
    length); the function is pure and never raises for such inputs.

    Examples:
      evaluate("error", "rarer") -> (present, present, exact, absent, exact)
      evaluate("speed", "erase") -> (present, absent, present, present, absent)
    """
    verdicts = [ABSENT] * len(guess)

    # Pass 1: exact matches; everything else in the secret stays available.
    remaining: Counter = Counter()
    for i, (g, s) in enumerate(zip(guess, secret)):
        if g == s:
            verdicts[i] = EXACT
        else:
            remaining[s] += 1

    # Pass 2: position-agnostic matches, capped by what is left.
    for i, g in enumerate(guess):
        if verdicts[i] == EXACT:
            continue
        if remaining[g] > 0:
            verdicts[i] = PRESENT
            remaining[g] -= 1

    return tuple(verdicts)


def to_pattern(verdicts: Sequence[Verdict]) -> str:
    """Render verdicts as a compact 'G'/'Y'/'-' string, e.g. 'YYG-G'."""
    return "".join(_PATTERN_CHARS[v] for v in verdicts)


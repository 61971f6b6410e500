"""
Game constants and default word sources.

The constants are fixed for this game; components accept them as keyword
parameters that default to the values below.
"""

from __future__ import annotations

from pathlib import Path

# Single source of truth for the board shape.
WORD_LENGTH = 5
MAX_GUESSES = 5

DATA_DIR = Path(__file__).resolve().parent / "datasets" / "data"
LOCAL_WORDS_CSV = DATA_DIR / "5_letters.csv"

SOLUTIONS_URL = "https://raw.githubusercontent.com/tabatkins/wordle-list/main/solutions"
ALLOWED_URL = "https://raw.githubusercontent.com/tabatkins/wordle-list/main/words"

# seconds
FETCH_TIMEOUT = 10

# Player-facing messages
MSG_INCOMPLETE = f"Enter a {WORD_LENGTH}-letter word"
MSG_INVALID = "Not a valid word"
MSG_ROUND_OVER = "This round is over"
MSG_WIN = "You win!"
MSG_LOSS = "Out of guesses. The word was {secret}"

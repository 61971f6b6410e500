"""
infiwordle: an endless word-guessing game engine.

Layers:
  - engine   : pure scoring, keyboard aggregation, word shape checks
  - datasets : word sources, the word pool, and the loading policy
  - game     : round state machine and the multi-round session
  - solvers / harness : autoplay used by the simulation CLI
"""

from .config import WORD_LENGTH, MAX_GUESSES

__version__ = "0.1.0"

__all__ = ["WORD_LENGTH", "MAX_GUESSES", "__version__"]

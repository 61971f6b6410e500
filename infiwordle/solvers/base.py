from __future__ import annotations
import random
from typing import Dict, List, Type

from ..config import WORD_LENGTH

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


class BaseSolver:
    """
    Autoplay player. The harness calls reset() once per round, then
    next_guess(state) until the round ends. `state` holds:
      - "turn":       1-based guess number
      - "length":     word length
      - "candidates": secrets still consistent with the feedback so far
      - "allowed":    sorted acceptable guesses ([] when any word is accepted)
      - "history":    list of (guess, pattern) pairs
    """
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.length: int = WORD_LENGTH
        self.rng = random.Random()

    def reset(self, *, length: int = WORD_LENGTH, seed: int | None = None) -> None:
        self.length = int(length)
        if seed is not None:
            self.rng.seed(seed)

    def next_guess(self, state: dict) -> str:
        raise NotImplementedError("Override in subclass")

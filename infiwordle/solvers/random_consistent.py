"""
Random Consistent solver.

Strategy:
  - Choose uniformly at random from the current candidate set (secrets
    still consistent with all feedback so far).
  - If the candidate set is somehow empty, fall back to the allowed list.
"""

from __future__ import annotations

from typing import List
from .base import BaseSolver, register


@register
class RandomConsistentSolver(BaseSolver):
    id = "random_consistent"
    name = "Random Consistent"
    version = "1.0.0"

    def next_guess(self, state: dict) -> str:
        candidates: List[str] = state["candidates"]
        pool: List[str] = candidates if candidates else state["allowed"]

        # Degenerate but well-formed; the round scores it and moves on.
        if not pool:
            return "a" * self.length

        return pool[self.rng.randrange(len(pool))]

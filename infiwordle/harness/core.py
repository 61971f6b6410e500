"""
Autoplay harness.

- play_round: let a solver finish the session's current round.
- run_batch:  play many consecutive rounds through one session, so the
              score bookkeeping is exercised exactly as a player would.

The solver types its guess letter by letter into the session, like a UI
would. Guesses the dictionary rejects don't cost a turn; they are dropped
from the solver's lists and it tries again.
"""

from __future__ import annotations

import time
from typing import Dict, List, Tuple

from ..engine import filter_candidates
from ..errors import InvalidWordError
from ..game import IN_PROGRESS, LOST, WON, SessionController


def _clear_entry(session: SessionController) -> None:
    while session.pending_entry:
        session.backspace()


def play_round(session: SessionController, solver, *, seed: int | None = None) -> Dict:
    """
    Drive the current round of `session` to its end.

    Returns:
        dict with keys:
            answer, success, guesses, rejected, time_ms,
            history (list[(guess, pattern)]), score_after
    """
    pool = session.pool
    length = pool.length
    solver.reset(length=length, seed=seed)

    candidates = sorted(pool.valid_secrets)
    allowed = sorted(pool.acceptable_guesses)
    history: List[Tuple[str, str]] = []
    rejected = 0

    t0 = time.perf_counter_ns()
    while session.status == IN_PROGRESS:
        state = {
            "turn": len(history) + 1,
            "length": length,
            "candidates": candidates,
            "allowed": allowed,
            "history": list(history),
        }
        guess = solver.next_guess(state).lower()

        _clear_entry(session)
        for ch in guess:
            session.append_letter(ch)

        try:
            record = session.submit_guess()
        except InvalidWordError:
            rejected += 1
            candidates = [w for w in candidates if w != guess]
            allowed = [w for w in allowed if w != guess]
            if not candidates and not allowed:
                break  # nothing left the solver could type
            continue

        history.append((record.word, record.pattern))
        candidates = filter_candidates(candidates, [(record.word, record.pattern)], length)

    _clear_entry(session)
    dt = (time.perf_counter_ns() - t0) / 1_000_000.0
    return {
        "answer": session.round.secret,
        "success": session.status == WON,
        "guesses": len(history),
        "rejected": rejected,
        "time_ms": dt,
        "history": history,
        "score_after": session.score,
    }


def run_batch(
        session: SessionController,
        solver,
        rounds: int,
        *,
        seed: int | None = None,
        reset_on_loss: bool = True,
        progress=None,
) -> List[Dict]:
    """
    Play `rounds` consecutive rounds, starting with the session's current one.

    After a win the next round keeps the score; after a loss the score is
    reset when `reset_on_loss` (the score then reads as a win streak).
    `progress`, if given, is called with no arguments after each round.
    """
    out: List[Dict] = []
    for idx in range(1, rounds + 1):
        round_seed = None if seed is None else (seed + idx)
        r = play_round(session, solver, seed=round_seed)
        r["round"] = session.round_number
        out.append(r)
        if progress is not None:
            progress()
        if idx < rounds:
            session.start_new_round(reset_score=reset_on_loss and session.status == LOST)
    return out

import random
import threading

import pytest

from infiwordle.config import MAX_GUESSES
from infiwordle.datasets import WordPool, WordSource, extend_pool, SECRET, GUESS
from infiwordle.errors import EmptyPoolError, InvalidWordError, RoundOverError
from infiwordle.game import SessionController, IN_PROGRESS, WON, LOST


def _pool(secrets=("crane",), guesses=("crane", "slate", "plant", "trace")):
    pool = WordPool(rng=random.Random(1))
    pool.ingest(secrets, SECRET)
    pool.ingest(guesses, GUESS)
    return pool


def _guess(session, word):
    for ch in word:
        session.append_letter(ch)
    return session.submit_guess()


def test_session_starts_with_round_and_zero_score():
    s = SessionController(_pool())
    assert s.score == 0
    assert s.round_number == 1
    assert s.status == IN_PROGRESS
    assert s.history == () and s.pending_entry == ""


def test_empty_pool_blocks_session_start():
    with pytest.raises(EmptyPoolError):
        SessionController(WordPool())


def test_score_increments_at_winning_guess():
    s = SessionController(_pool())
    _guess(s, "slate")
    assert s.score == 0
    _guess(s, "crane")
    assert s.status == WON
    assert s.score == 1  # before any new round starts


def test_score_counted_once_per_win():
    s = SessionController(_pool())
    _guess(s, "crane")
    s.on_round_won()
    s.on_round_won()
    with pytest.raises(RoundOverError):
        s.submit_guess()
    assert s.score == 1


def test_on_round_won_ignored_while_in_progress():
    s = SessionController(_pool())
    s.on_round_won()
    assert s.score == 0


def test_next_round_keeps_score_and_reset_zeroes_it():
    s = SessionController(_pool())
    _guess(s, "crane")
    s.start_new_round(reset_score=False)
    assert s.score == 1 and s.round_number == 2
    assert s.status == IN_PROGRESS and s.history == ()
    _guess(s, "crane")
    assert s.score == 2
    s.reset_session()
    assert s.score == 0 and s.round_number == 1
    assert s.status == IN_PROGRESS


def test_start_new_round_with_reset_score():
    s = SessionController(_pool())
    _guess(s, "crane")
    s.start_new_round(reset_score=True)
    assert s.score == 0


def test_loss_reveals_secret():
    s = SessionController(_pool())
    assert s.revealed_secret is None
    for _ in range(MAX_GUESSES):
        _guess(s, "slate")
    assert s.status == LOST
    assert s.revealed_secret == "crane"
    assert s.score == 0


def test_invalid_word_propagates_and_changes_nothing():
    s = SessionController(_pool())
    with pytest.raises(InvalidWordError):
        _guess(s, "zzzzz")
    assert s.history == () and s.round.guesses_left == MAX_GUESSES


def test_snapshots_follow_round():
    s = SessionController(_pool(secrets=("trace",)))
    _guess(s, "crane")
    assert s.revealed_letters == ["_", "r", "a", "_", "e"]
    assert s.keyboard_status["c"] == "present"


def test_failed_new_round_keeps_current_round():
    pool = _pool()
    s = SessionController(pool)
    current = s.round
    pool.valid_secrets.clear()
    with pytest.raises(EmptyPoolError):
        s.start_new_round()
    assert s.round is current


def test_concurrent_typing_keeps_entry_bounded():
    s = SessionController(_pool())

    def hammer():
        for _ in range(200):
            s.append_letter("a")
            s.backspace()

    threads = [threading.Thread(target=hammer) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(s.pending_entry) <= 5


def test_widening_mid_round_keeps_accepted_guesses(tmp_path):
    pool = WordPool(rng=random.Random(2))
    pool.ingest(["crane"], SECRET)  # no dictionary yet: any word goes
    s = SessionController(pool)
    _guess(s, "zzzzz")

    extra = tmp_path / "allowed.txt"
    extra.write_text("slate\n", encoding="utf-8")
    extend_pool(pool, [WordSource(str(extra), role=GUESS),
                       WordSource(str(tmp_path / "missing.txt"), role=GUESS)])

    assert [r.word for r in s.history] == ["zzzzz"]
    assert s.status == IN_PROGRESS
    assert pool.acceptable_guesses == {"slate"}
    with pytest.raises(InvalidWordError):
        _guess(s, "zzzzz")
    assert len(s.history) == 1
    while s.pending_entry:
        s.backspace()
    _guess(s, "slate")
    assert [r.word for r in s.history] == ["zzzzz", "slate"]


def test_pool_widened_from_loader_thread_while_rounds_start():
    pool = WordPool(rng=random.Random(5))
    pool.ingest(["crane"], SECRET)
    s = SessionController(pool)
    late = ["ab" + a + b + c for a in "cdefg" for b in "hijkl" for c in "mnopqrst"]

    def widen():
        for w in late:
            pool.ingest([w], SECRET)
            pool.ingest([w], GUESS)

    loader = threading.Thread(target=widen)
    loader.start()
    for _ in range(300):
        s.start_new_round(reset_score=False)
        assert s.round.secret in pool.valid_secrets
    loader.join()

    assert pool.valid_secrets == {"crane", *late}
    drawn = {pool.pick_secret() for _ in range(5000)}
    assert drawn == pool.valid_secrets

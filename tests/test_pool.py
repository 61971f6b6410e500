import random

import pytest
from infiwordle.datasets import WordPool, SECRET, GUESS
from infiwordle.errors import EmptyPoolError


def test_ingest_normalizes_and_filters():
    pool = WordPool()
    n = pool.ingest(["CRANE", " slate ", "toolong", "cat", "cr4ne", "", None, "crane"], SECRET)
    assert n == 2
    assert pool.valid_secrets == {"crane", "slate"}
    assert pool.acceptable_guesses == set()


def test_ingest_empty_or_malformed_never_raises():
    pool = WordPool()
    assert pool.ingest([], SECRET) == 0
    assert pool.ingest(["x", "??", "abcdef"], GUESS) == 0
    assert len(pool) == 0


def test_ingest_rejects_unknown_role():
    with pytest.raises(ValueError):
        WordPool().ingest(["crane"], "answers")


def test_ingest_is_monotonic():
    pool = WordPool()
    pool.ingest(["crane", "slate"], GUESS)
    pool.ingest(["plant"], GUESS)
    pool.ingest([], GUESS)
    assert pool.acceptable_guesses == {"crane", "slate", "plant"}


def test_pick_secret_empty_pool():
    with pytest.raises(EmptyPoolError):
        WordPool().pick_secret()


def test_pick_secret_only_from_secrets():
    pool = WordPool(rng=random.Random(3))
    pool.ingest(["crane", "slate"], SECRET)
    pool.ingest(["plant", "trace"], GUESS)
    picks = {pool.pick_secret() for _ in range(50)}
    assert picks == {"crane", "slate"}


def test_pick_secret_reproducible_with_seed():
    words = ["crane", "slate", "plant", "trace", "cared"]
    a, b = WordPool(rng=random.Random(9)), WordPool(rng=random.Random(9))
    a.ingest(words, SECRET)
    b.ingest(reversed(words), SECRET)
    assert [a.pick_secret() for _ in range(5)] == [b.pick_secret() for _ in range(5)]


def test_acceptable_guess_permissive_when_no_dictionary():
    pool = WordPool()
    pool.ingest(["crane"], SECRET)
    assert pool.is_acceptable_guess("zzzzz") is True


def test_acceptable_guess_membership():
    pool = WordPool()
    pool.ingest(["crane", "slate"], GUESS)
    assert pool.is_acceptable_guess("CRANE") is True
    assert pool.is_acceptable_guess("zzzzz") is False


def test_pick_secret_sees_words_added_after_first_draw():
    pool = WordPool(rng=random.Random(4))
    pool.ingest(["crane"], SECRET)
    assert pool.pick_secret() == "crane"
    pool.valid_secrets.discard("crane")
    pool.valid_secrets.add("slate")
    assert {pool.pick_secret() for _ in range(10)} == {"slate"}

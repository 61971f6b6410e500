from collections import Counter

import pytest
from infiwordle.engine import (
    evaluate, to_pattern, filter_candidates, aggregate, revealed_letters,
    EXACT, PRESENT, ABSENT,
)
from infiwordle.game import GuessRecord

WORDS = ["error", "rarer", "speed", "erase", "belle", "level", "lemon", "cools",
         "scoop", "crane", "raise", "stare", "eerie", "geese", "llama", "aaaaa"]


# --- golden tests (duplicates + placements) ---
@pytest.mark.parametrize("guess,secret,expected", [
    ("error", "rarer", "YYG-G"),
    ("speed", "erase", "Y-YY-"),
    ("belle", "level", "-GYYY"),
    ("level", "level", "GGGGG"),
    ("lemon", "level", "GG---"),
    ("cools", "scoop", "YYG-Y"),
    ("raise", "crane", "YY--G"),
    ("stare", "crane", "--GYG"),
    ("geese", "eerie", "-GY-G"),
])
def test_evaluate_golden(guess, secret, expected):
    assert to_pattern(evaluate(guess, secret)) == expected


def test_evaluate_canonical_duplicate_case():
    assert evaluate("error", "rarer") == (PRESENT, PRESENT, EXACT, ABSENT, EXACT)


def test_evaluate_other_lengths():
    assert to_pattern(evaluate("settle", "letter")) == "-GGGYY"


@pytest.mark.parametrize("secret", WORDS)
def test_evaluate_self_is_all_exact(secret):
    verdicts = evaluate(secret, secret)
    assert verdicts == (EXACT,) * 5


def test_matches_never_exceed_secret_multiplicity():
    for secret in WORDS:
        in_secret = Counter(secret)
        for guess in WORDS:
            matched = Counter(
                g for g, v in zip(guess, evaluate(guess, secret)) if v != ABSENT
            )
            for letter, n in matched.items():
                assert n <= in_secret[letter], (guess, secret, letter)


def test_filter_candidates_history():
    words = ["crane", "raise", "stare", "trace", "cared", "racer", "scoop"]
    history = [("raise", "YY--G")]
    cand = filter_candidates(words, history, 5)
    assert "crane" in cand and "stare" not in cand and "scoop" not in cand


def test_filter_candidates_skips_malformed():
    assert filter_candidates(["crane", "cranes", "cr4ne"], [], 5) == ["crane"]


# --- keyboard aggregation ---

def test_keyboard_exact_is_never_downgraded():
    history = [
        GuessRecord("eerie", (EXACT, ABSENT, ABSENT, PRESENT, ABSENT)),
        GuessRecord("there", (ABSENT, ABSENT, ABSENT, PRESENT, PRESENT)),
    ]
    status = aggregate(history)
    assert status["e"] == EXACT
    assert status["i"] == PRESENT
    assert status["r"] == PRESENT


def test_keyboard_upgrades_and_leaves_untyped_letters_out():
    history = [
        GuessRecord("crane", (ABSENT, ABSENT, ABSENT, ABSENT, ABSENT)),
        GuessRecord("slate", (ABSENT, PRESENT, EXACT, ABSENT, ABSENT)),
    ]
    status = aggregate(history)
    assert status["a"] == EXACT
    assert status["l"] == PRESENT
    assert status["c"] == ABSENT
    assert "z" not in status
    assert aggregate([]) == {}


def test_revealed_letters_mask():
    history = [
        GuessRecord("crane", evaluate("crane", "crate")),
        GuessRecord("slate", evaluate("slate", "crate")),
    ]
    assert revealed_letters(history, 5) == ["c", "r", "a", "t", "e"]
    assert revealed_letters(history[:1], 5) == ["c", "r", "a", "_", "e"]

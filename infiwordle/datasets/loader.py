"""
Build a WordPool from any number of independent word sources.

Policy:
  - Every source is tried on its own; a failure (missing file, HTTP error,
    timeout) is logged and skipped, never fatal.
  - Sources marked `fallback` are the baseline for secret selection. If any
    non-fallback secret source yields at least one word, those words become
    the secret pool instead; the fallback words still count as acceptable
    guesses.
  - Every secret list also widens the acceptable guesses; "guess" sources
    only widen the acceptable guesses.

Typical use:
    from infiwordle.datasets import load_pool, DEFAULT_SOURCES
    pool = load_pool(DEFAULT_SOURCES)
    pool.pick_secret()

Loading after play has started is fine: `extend_pool` only ever widens the
acceptable set, so guesses already accepted stay valid.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence

import requests

from ..config import ALLOWED_URL, FETCH_TIMEOUT, LOCAL_WORDS_CSV, SOLUTIONS_URL, WORD_LENGTH
from .io import fetch_text, parse_word_lines
from .pool import GUESS, SECRET, Role, WordPool

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WordSource:
    """One list of candidate words: a local path or an http(s) URL."""
    location: str
    role: Role = SECRET
    fallback: bool = False


DEFAULT_SOURCES: List[WordSource] = [
    WordSource(str(LOCAL_WORDS_CSV), role=SECRET, fallback=True),
    WordSource(SOLUTIONS_URL, role=SECRET),
    WordSource(ALLOWED_URL, role=GUESS),
]


def parse_source_arg(arg: str) -> WordSource:
    """
    Parse a --source argument: "PATH_OR_URL" or "PATH_OR_URL@role".

    Role is "secret" (default) or "guess".
    """
    location, sep, role = arg.rpartition("@")
    if not sep or role not in (SECRET, GUESS):
        return WordSource(arg)
    return WordSource(location, role=role)  # type: ignore[arg-type]


def read_source(source: WordSource, *, timeout: float = FETCH_TIMEOUT) -> List[str]:
    """
    Fetch and parse one source. Returns [] (and logs) on failure.
    """
    try:
        text = fetch_text(source.location, timeout=timeout)
    except (OSError, UnicodeDecodeError, requests.RequestException) as e:
        logger.warning("failed to load word list %s: %s", source.location, e)
        return []
    words = parse_word_lines(text)
    if not words:
        logger.warning("word list %s yielded no words", source.location)
    else:
        logger.info("loaded %d line(s) from %s", len(words), source.location)
    return words


def extend_pool(pool: WordPool, sources: Iterable[WordSource], *,
                timeout: float = FETCH_TIMEOUT) -> Dict[str, int]:
    """
    Apply the loading policy to `pool` and return per-source word counts
    keyed "location@role" (words of the right shape, 0 for failed sources).
    """
    fallback_secrets: List[str] = []
    preferred_secrets: List[str] = []
    counts: Dict[str, int] = {}

    for source in sources:
        words = read_source(source, timeout=timeout)
        key = f"{source.location}@{source.role}"
        # acceptable guesses: every list that loaded, whatever its role
        counts[key] = n = pool.ingest(words, GUESS)
        if source.role == SECRET and n:
            (fallback_secrets if source.fallback else preferred_secrets).extend(words)

    pool.ingest(preferred_secrets or fallback_secrets, SECRET)
    logger.info("word pool ready: %d secret(s), %d acceptable guess(es)",
                len(pool.valid_secrets), len(pool.acceptable_guesses))
    return counts


def load_pool(sources: Sequence[WordSource] = tuple(DEFAULT_SOURCES), *,
              length: int = WORD_LENGTH, rng: random.Random | None = None,
              timeout: float = FETCH_TIMEOUT) -> WordPool:
    """
    Build a fresh WordPool from `sources`.

    The returned pool may be empty if every source failed; the first
    `pick_secret()` then raises EmptyPoolError, which is the caller's cue
    not to start play.
    """
    pool = WordPool(length=length, rng=rng)
    extend_pool(pool, sources, timeout=timeout)
    return pool

# apps/cli/play.py
"""
Terminal front-end for infiwordle.

Each input line is either a guess (typed into the session letter by letter,
then submitted) or a command:
  :new    next word, keep score
  :reset  new game, score back to 0
  :quit   leave

After a win the next word starts automatically with the score kept. After a
loss the secret is revealed and the player picks :new or :reset.

Usage:
    python -m apps.cli.play                 # local list + online lists
    python -m apps.cli.play --offline --seed 7
    python -m apps.cli.play --source words.txt@guess
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import Callable, Iterable, Iterator, List

from infiwordle.config import MAX_GUESSES, MSG_LOSS, MSG_WIN
from infiwordle.datasets import DEFAULT_SOURCES, WordSource, load_pool, parse_source_arg
from infiwordle.datasets.io import is_remote
from infiwordle.engine.scoring import EXACT, PRESENT
from infiwordle.errors import EmptyPoolError, IncompleteWordError, SubmitError
from infiwordle.game import LOST, WON, GuessRecord, SessionController

KEY_ROWS = ("qwertyuiop", "asdfghjkl", "zxcvbnm")

Writer = Callable[[str], None]


def render_row(record: GuessRecord) -> str:
    """'CRANE' scored 'G-Y--' -> 'C R A N E   G - Y - -'"""
    return f"{' '.join(record.word.upper())}   {' '.join(record.pattern)}"


def render_keyboard(status: dict) -> List[str]:
    """
    One line per keyboard row. Exact letters are uppercase in brackets,
    present in parentheses, absent shown as '.', untried as lowercase.
    """
    lines = []
    for row in KEY_ROWS:
        keys = []
        for k in row:
            v = status.get(k)
            if v == EXACT:
                keys.append(f"[{k.upper()}]")
            elif v == PRESENT:
                keys.append(f"({k.upper()})")
            elif v is None:
                keys.append(f" {k} ")
            else:
                keys.append(" . ")
        lines.append("".join(keys))
    return lines


def _announce_round(session: SessionController, write: Writer) -> None:
    write(f"-- round {session.round_number} | score {session.score} | "
          f"{session.round.max_guesses} guesses --")


def _type_word(session: SessionController, word: str) -> None:
    while session.pending_entry:
        session.backspace()
    for ch in word:
        session.append_letter(ch)


def handle_line(session: SessionController, line: str, write: Writer = print) -> bool:
    """
    Apply one line of player input. Returns False when the player quits.
    """
    text = line.strip().lower()
    if text in (":quit", ":q"):
        return False
    if text == ":new":
        session.start_new_round(reset_score=False)
        _announce_round(session, write)
        return True
    if text == ":reset":
        session.reset_session()
        _announce_round(session, write)
        return True
    if not text:
        return True

    length = session.round.length
    if len(text) > length:
        write(IncompleteWordError.message)
        return True

    _type_word(session, text)
    try:
        record = session.submit_guess()
    except SubmitError as e:
        write(e.message)
        return True

    write(render_row(record))
    if session.status == WON:
        write(f"{MSG_WIN} score {session.score}")
        session.start_new_round(reset_score=False)
        _announce_round(session, write)
    elif session.status == LOST:
        write(MSG_LOSS.format(secret=session.revealed_secret))
        write(":reset for a new word (score back to 0), :new to try another word (keep score)")
    else:
        write(f"{''.join(session.revealed_letters)}   "
              f"{session.round.guesses_left} guess(es) left")
        for kb in render_keyboard(session.keyboard_status):
            write(kb)
    return True


def run_loop(session: SessionController, lines: Iterable[str], write: Writer = print) -> int:
    """Feed lines until input ends or :quit. Returns the final score."""
    _announce_round(session, write)
    for line in lines:
        if not handle_line(session, line, write):
            break
    return session.score


def _stdin_lines(prompt: str = "> ") -> Iterator[str]:
    while True:
        try:
            yield input(prompt)
        except EOFError:
            return


def _build_sources(args) -> List[WordSource]:
    sources = [s for s in DEFAULT_SOURCES if not (args.offline and is_remote(s.location))]
    sources += [parse_source_arg(s) for s in args.source]
    return sources


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="infiwordle — endless word guessing in the terminal")
    ap.add_argument("--offline", action="store_true",
                    help="skip the online word lists; use the bundled list only")
    ap.add_argument("--source", action="append", default=[],
                    help="extra word list PATH_OR_URL[@secret|@guess] (repeatable)")
    ap.add_argument("--seed", type=int, help="RNG seed for secret selection")
    ap.add_argument("--verbose", action="store_true", help="debug logging to stderr")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    pool = load_pool(_build_sources(args), rng=random.Random(args.seed))
    try:
        session = SessionController(pool, max_guesses=MAX_GUESSES)
    except EmptyPoolError as e:
        print(f"Cannot start: {e}. Check the word sources.", file=sys.stderr)
        return 1

    final = run_loop(session, _stdin_lines())
    print(f"Final score: {final}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

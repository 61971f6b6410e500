from __future__ import annotations

import re
from pathlib import Path
from typing import List

import requests

from ..config import FETCH_TIMEOUT

_HEADER_RE = re.compile(r"^\s*1,2,3,4,5")
_LINE_SPLIT_RE = re.compile(r"\r?\n")


def is_remote(location: str) -> bool:
    return location.startswith(("http://", "https://"))


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def fetch_text(location: str, *, timeout: float = FETCH_TIMEOUT) -> str:
    """
    Return the raw text of a word source.

    `location` is either an http(s) URL (fetched with requests) or a local
    path. Raises requests.RequestException / OSError on failure; the loader
    decides what a failure means.
    """
    if is_remote(location):
        r = requests.get(location, timeout=timeout)
        r.raise_for_status()
        return r.text
    return "\n".join(read_lines(location))


def parse_word_lines(text: str) -> List[str]:
    """
    Turn raw source text into candidate strings, one per line.

    Rules:
      - blank lines are dropped
      - a CSV header row ("1,2,3,4,5,...") is dropped
      - comma-segmented rows are rejoined: "c,r,a,n,e" -> "crane"
      - everything is lowercased

    No length check here: malformed entries are dropped by WordPool.ingest.
    """
    out: List[str] = []
    for raw in _LINE_SPLIT_RE.split(text):
        line = raw.strip()
        if not line or _HEADER_RE.match(line):
            continue
        out.append("".join(part.strip() for part in line.split(",")).lower())
    return out


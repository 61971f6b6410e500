"""
Report writers for autoplay runs.

- write_csv:      one row per round, with fixed guess/pattern columns.
- write_manifest: JSON manifest with config and pool sizes.
- timestamp_id:   compact UTC run id for file names.

Patterns are prefixed with an apostrophe so spreadsheet apps keep strings
like "-GYY-" as text instead of parsing them as formulas.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt


def _excel_safe_pattern(patt: str) -> str:
    return "'" + patt if patt else patt


def write_csv(results: List[Dict], path: str, max_guesses: int) -> str:
    """
    Serialize per-round results to CSV.

    Columns:
      solver, round, answer, success, guesses, rejected, score_after, time_ms,
      guess_1, patt_1, ..., guess_<max_guesses>, patt_<max_guesses>

    Returns the path written.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["solver", "round", "answer", "success", "guesses", "rejected",
              "score_after", "time_ms"]
    for i in range(1, max_guesses + 1):
        fields += [f"guess_{i}", f"patt_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "solver": r.get("solver_id", "?"),
                "round": r.get("round", ""),
                "answer": r["answer"],
                "success": r["success"],
                "guesses": r["guesses"],
                "rejected": r.get("rejected", 0),
                "score_after": r["score_after"],
                "time_ms": round(float(r["time_ms"]), 3),
            }
            hist = r.get("history", [])
            for i in range(1, max_guesses + 1):
                if i <= len(hist):
                    g, patt = hist[i - 1]
                    row[f"guess_{i}"] = g
                    row[f"patt_{i}"] = _excel_safe_pattern(patt)
                else:
                    row[f"guess_{i}"] = ""
                    row[f"patt_{i}"] = ""
            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2, default=str)
    return str(p)


def timestamp_id() -> str:
    """
    Compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state, 'unknown' otherwise.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"

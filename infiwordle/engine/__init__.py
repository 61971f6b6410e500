from .scoring import evaluate, to_pattern, Verdict, EXACT, PRESENT, ABSENT
from .keyboard import aggregate, revealed_letters
from .constraints import filter_candidates
from .validation import normalize_word, is_letter, is_well_formed

__all__ = [
    "evaluate", "to_pattern", "Verdict", "EXACT", "PRESENT", "ABSENT",
    "aggregate", "revealed_letters", "filter_candidates",
    "normalize_word", "is_letter", "is_well_formed",
]

from .pool import WordPool, Role, SECRET, GUESS
from .loader import WordSource, DEFAULT_SOURCES, load_pool, extend_pool, read_source, parse_source_arg
from .io import read_lines, fetch_text, parse_word_lines

__all__ = [
    "WordPool", "Role", "SECRET", "GUESS",
    "WordSource", "DEFAULT_SOURCES", "load_pool", "extend_pool", "read_source", "parse_source_arg",
    "read_lines", "fetch_text", "parse_word_lines",
]

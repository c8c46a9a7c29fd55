from .validator import validate_wordlist, pretty_summary
from .io import DEFAULT_WORDLIST, read_lines, write_lines, normalize_words, load_wordlist

__all__ = ["validate_wordlist", "pretty_summary", "DEFAULT_WORDLIST",
           "read_lines", "write_lines", "normalize_words", "load_wordlist"]

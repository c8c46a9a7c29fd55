from __future__ import annotations
from pathlib import Path
from typing import Iterable, List

DATA_DIR = Path(__file__).parent / "data"
DEFAULT_WORDLIST = DATA_DIR / "words_5.txt"


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def normalize_words(lines: Iterable[str], N: int) -> List[str]:
    """
    Uppercase, drop blanks and anything that isn't an N-letter alphabetic
    token, and de-duplicate while keeping first-seen order.
    """
    seen, out = set(), []
    for ln in lines:
        w = ln.strip().upper()
        if len(w) != N or not w.isalpha() or w in seen:
            continue
        seen.add(w)
        out.append(w)
    return out


def load_wordlist(p: Path | str = DEFAULT_WORDLIST, N: int = 5) -> List[str]:
    """Dictionary file -> ordered, unique, uppercase N-letter words."""
    return normalize_words(read_lines(p), N)

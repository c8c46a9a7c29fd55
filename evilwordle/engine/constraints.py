"""
Candidate filtering given game history.

Given:
  - a word (or a pool of words)
  - a history of GuessRecord entries (guess + the feedback shown for it)

Return:
  - whether the word could have produced ALL of that feedback, or the subset
    of the pool that could.

This is the check that keeps a persistent candidate pool valid across turns:
every word left in the pool must reproduce every recorded feedback exactly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

from .scoring import Results, evaluate, normalize, pattern_key


@dataclass(frozen=True)
class GuessRecord:
    """One submitted guess and the feedback that was shown for it."""
    guess: str
    results: Results

    @property
    def pattern(self) -> str:
        return pattern_key(self.results)


def is_consistent(word: str, history: Iterable[GuessRecord]) -> bool:
    """
    True iff scoring each recorded guess against `word` reproduces the
    recorded states position by position. Stops at the first mismatch.
    """
    for record in history:
        replay = evaluate(record.guess, word)
        if len(replay) != len(record.results):
            return False
        for got, want in zip(replay, record.results):
            if got.state is not want.state:
                return False
    return True


def filter_candidates(words: Iterable[str], history: Iterable[GuessRecord]) -> List[str]:
    """
    Keep only words consistent with every record in `history`.

    Args:
      words   : iterable of candidate words (often the full dictionary)
      history : iterable of GuessRecord seen so far

    Returns:
      List[str] of consistent candidates (order preserved as in `words`).
    """
    history = list(history)
    out: List[str] = []
    for w in words:
        w = normalize(w)
        if is_consistent(w, history):
            out.append(w)
    return out

"""
Wordle-style feedback for a single (guess, reference) pair.

Conventions (one tag per letter state, used as the compact pattern key):
  - 'G'  : correct = right letter in the right position
  - 'Y'  : present = right letter in the wrong position
  - '-'  : absent  = letter not present (or present fewer times than guessed)

Algorithm (two-pass, canonical for Wordle):
  1) First pass marks every exact match as correct and consumes that
     reference position.
  2) Second pass scans the reference left to right among unconsumed positions
     for each remaining guess letter; a hit is present and consumes it.

A reference letter can satisfy at most one guess position, and correct matches
always win over present ones, which gives the usual "limited yellow" behaviour
for duplicate letters.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Tuple


class LetterState(Enum):
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"
    EMPTY = "empty"  # UI placeholder only; never produced by evaluate()

    @property
    def tag(self) -> str:
        return _TAGS[self]


_TAGS = {
    LetterState.CORRECT: "G",
    LetterState.PRESENT: "Y",
    LetterState.ABSENT: "-",
    LetterState.EMPTY: " ",
}


@dataclass(frozen=True)
class LetterResult:
    letter: str
    state: LetterState


Results = Tuple[LetterResult, ...]


def normalize(word: str) -> str:
    """Words are compared uppercase with surrounding whitespace removed."""
    return word.strip().upper()


def evaluate(guess: str, reference: str) -> Results:
    """
    Score `guess` against `reference`.

    Preconditions:
      - len(guess) == len(reference) after normalization

    Returns:
      - tuple of LetterResult, one per position

    Examples:
      pattern_key(evaluate("SPEED", "ERASE")) -> "Y-YY-"
      pattern_key(evaluate("BELLE", "LEVEL")) -> "-GYYY"
    """
    guess = normalize(guess)
    reference = normalize(reference)
    if len(guess) != len(reference):
        raise ValueError(
            f"guess and reference must be the same length: {guess!r} vs {reference!r}")

    n = len(guess)
    states: List[LetterState | None] = [None] * n
    consumed = [False] * n

    # Pass 1: exact matches take their reference letter first.
    for i in range(n):
        if guess[i] == reference[i]:
            states[i] = LetterState.CORRECT
            consumed[i] = True

    # Pass 2: leftmost unconsumed reference letter, if any.
    for i in range(n):
        if states[i] is not None:
            continue
        states[i] = LetterState.ABSENT
        for j in range(n):
            if not consumed[j] and reference[j] == guess[i]:
                states[i] = LetterState.PRESENT
                consumed[j] = True
                break

    return tuple(LetterResult(ch, st) for ch, st in zip(guess, states))


def pattern_key(results: Iterable[LetterResult]) -> str:
    """Compact grouping key, e.g. 'GY--G'."""
    return "".join(r.state.tag for r in results)


def score(guess: str, reference: str) -> str:
    """Shortcut for pattern_key(evaluate(guess, reference))."""
    return pattern_key(evaluate(guess, reference))


def is_all_correct(results: Iterable[LetterResult]) -> bool:
    results = tuple(results)
    return bool(results) and all(r.state is LetterState.CORRECT for r in results)

"""
Error taxonomy for the game core.

  - ValidationError : a submitted guess was rejected (too short, too long, or not a
                      dictionary word). State is left unchanged.
  - ExhaustionError : the candidate pool became empty. This means the
                      consistency invariant was broken and is never recovered.
"""

from __future__ import annotations

NOT_ENOUGH_LETTERS = "not_enough_letters"
TOO_MANY_LETTERS = "too_many_letters"
NOT_IN_WORD_LIST = "not_in_word_list"


class WordleError(Exception):
    """Base class for all game errors."""


class ValidationError(WordleError, ValueError):
    def __init__(self, reason: str, guess: str):
        self.reason = reason
        self.guess = guess
        super().__init__(f"{reason}: {guess!r}")


class ExhaustionError(WordleError, RuntimeError):
    pass

"""
Lightweight guess validation.

This module answers the question: "Can this guess be submitted right now?"
A guess is valid iff:
  - it has exact length N
  - it is alphabetic only
  - it exists in the dictionary

Rejections raise ValidationError with a reason the UI can turn into a notice.
"""

from __future__ import annotations

from typing import AbstractSet, Iterable

from .errors import NOT_ENOUGH_LETTERS, NOT_IN_WORD_LIST, TOO_MANY_LETTERS, ValidationError
from .scoring import normalize


def check_guess(word: str, allowed: AbstractSet[str], N: int) -> str:
    """
    Return the normalized guess, or raise ValidationError.

    Args:
      word    : proposed guess
      allowed : set of uppercase dictionary words (precomputed by the caller)
      N       : required word length
    """
    w = normalize(word)
    if len(w) < N:
        raise ValidationError(NOT_ENOUGH_LETTERS, w)
    if len(w) > N:
        raise ValidationError(TOO_MANY_LETTERS, w)
    if not w.isalpha() or w not in allowed:
        raise ValidationError(NOT_IN_WORD_LIST, w)
    return w


def validate_guess(word: str, allowed: Iterable[str], N: int) -> bool:
    """
    Boolean form of check_guess().

    Notes:
      - The `allowed` parameter can be a large list; we build a local set
        here for O(1) membership checks. Sessions keep their own set and call
        check_guess() directly.
    """
    if not isinstance(word, str):
        return False
    allowed_set = {normalize(a) for a in allowed}
    try:
        check_guess(word, allowed_set, N)
    except ValidationError:
        return False
    return True

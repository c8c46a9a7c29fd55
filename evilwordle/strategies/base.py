from __future__ import annotations

import random
from typing import Dict, Sequence, Type

from evilwordle.engine.partition import AdversarialResponse

# ---- Global strategy registry ----
REGISTRY: Dict[str, Type["BaseStrategy"]] = {}


def register(cls: Type["BaseStrategy"]) -> Type["BaseStrategy"]:
    """
    Decorator: @register on a strategy class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate strategy id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that response strategies inherit ----
class BaseStrategy:
    """
    Decides what feedback the game shows for a guess.

    respond() gets the guess and the current candidate pool and returns the
    feedback plus the pool words that agree with it. Returning a pool that
    disagrees with the feedback breaks the session invariant.
    """
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.words: Sequence[str] = ()
        self.rng = random.Random()

    def reset(self, *, words: Sequence[str], seed: int | None = None,
              rng: random.Random | None = None) -> None:
        self.words = tuple(words)
        if rng is not None:
            self.rng = rng
        elif seed is not None:
            self.rng.seed(seed)

    def respond(self, guess: str, candidates: Sequence[str]) -> AdversarialResponse:
        raise NotImplementedError("Override in subclass")

    def representative(self, remaining: Sequence[str]) -> str:
        """Word to reveal as 'the answer' once the game ends without a win."""
        return remaining[0] if remaining else ""

from __future__ import annotations
import random
from typing import Dict, List, Type

from evilwordle.session.state import SessionState

# ---- Global guesser registry ----
REGISTRY: Dict[str, Type["BaseGuesser"]] = {}


def register(cls: Type["BaseGuesser"]) -> Type["BaseGuesser"]:
    """
    Decorator: @register on a guesser class adds it to REGISTRY by its `id`.
    """
    gid = getattr(cls, "id", None)
    if not gid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if gid in REGISTRY:
        raise ValueError(f"Duplicate guesser id: {gid}")
    REGISTRY[gid] = cls
    return cls


# ---- Base class for automated players ----
class BaseGuesser:
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.N: int = 5
        self.words: List[str] = []
        self.rng = random.Random()

    def reset(self, *, words: List[str], N: int, seed: int | None = None) -> None:
        self.words = list(words)
        self.N = int(N)
        if seed is not None:
            self.rng.seed(seed)

    def next_guess(self, state: SessionState) -> str:
        raise NotImplementedError("Override in subclass")

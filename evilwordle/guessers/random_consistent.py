"""
Random Consistent guesser.

Strategy:
  - Choose uniformly at random from the CURRENT candidate pool (words still
    consistent with all feedback so far).

Notes:
  - Deterministic across runs with the same seed (via BaseGuesser.rng).
  - Always guessing a pool word guarantees progress against the adversary:
    either the guess is the last word left (win) or it drops out of the pool.
"""

from __future__ import annotations

from .base import BaseGuesser, register
from evilwordle.session.state import SessionState


@register
class RandomConsistentGuesser(BaseGuesser):
    id = "random_consistent"
    name = "Random Consistent"
    version = "1.0.0"

    def next_guess(self, state: SessionState) -> str:
        pool = state.pool or tuple(self.words)
        return pool[self.rng.randrange(len(pool))]

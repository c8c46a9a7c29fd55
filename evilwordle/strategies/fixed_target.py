"""
Fixed-target strategy (classic Wordle).

A secret is drawn from the word list when the game is reset, using the
strategy's RNG (seeded or injected, so tests can pin it). Every guess is
scored against that secret; the pool keeps the words that agree with the
feedback, which always includes the secret itself.
"""

from __future__ import annotations

import logging
import random
from typing import Sequence

from .base import BaseStrategy, register
from evilwordle.engine.errors import ExhaustionError
from evilwordle.engine.partition import AdversarialResponse
from evilwordle.engine.scoring import evaluate, normalize, pattern_key

log = logging.getLogger(__name__)


@register
class FixedTargetStrategy(BaseStrategy):
    id = "fixed_target"
    name = "Fixed Target"
    version = "1.0.0"

    def __init__(self):
        super().__init__()
        self.target: str = ""

    def reset(self, *, words: Sequence[str], seed: int | None = None,
              rng: random.Random | None = None, target: str | None = None) -> None:
        super().reset(words=words, seed=seed, rng=rng)
        if target is not None:
            self.target = normalize(target)
        elif self.words:
            self.target = self.rng.choice(self.words)
        else:
            self.target = ""

    def respond(self, guess: str, candidates: Sequence[str]) -> AdversarialResponse:
        if not self.target:
            raise ExhaustionError("fixed-target strategy has no target; call reset() first")

        results = evaluate(guess, self.target)
        key = pattern_key(results)
        remaining = tuple(w for w in candidates if pattern_key(evaluate(guess, w)) == key)

        # The target always reproduces its own feedback, so an empty pool
        # means the pool and the target went out of sync.
        if not remaining:
            log.error("pool emptied after %r (target %r, %d candidates before)",
                      guess, self.target, len(candidates))
            raise ExhaustionError(f"no candidate agrees with feedback {key} for {guess!r}")

        return AdversarialResponse(results, remaining)

    def representative(self, remaining: Sequence[str]) -> str:
        return self.target

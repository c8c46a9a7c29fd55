"""
Adversarial strategy (the canonical game).

No secret word is ever chosen. Each guess is answered with the feedback
pattern shared by the largest group of remaining candidates, so the player
learns as little as possible. No randomness is involved.
"""

from __future__ import annotations

from typing import Sequence

from .base import BaseStrategy, register
from evilwordle.engine.partition import AdversarialResponse, select_adversarial_response


@register
class AdversarialStrategy(BaseStrategy):
    id = "adversarial"
    name = "Adversarial (largest bucket)"
    version = "1.0.0"

    def respond(self, guess: str, candidates: Sequence[str]) -> AdversarialResponse:
        return select_adversarial_response(guess, candidates)

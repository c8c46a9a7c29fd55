"""
Minimax guesser.

Idea:
  The adversary always keeps the LARGEST feedback bucket, so the useful
  number for a guess g is its worst bucket size over the current pool.
  Pick the guess with the SMALLEST worst bucket.
  Tie-break: prefer words still in the pool (they can win outright), then
  more distinct patterns, then RNG.

Pool selection mirrors the prefilter used for large candidate sets: rank the
dictionary by distinct-letter coverage of the pool and evaluate only the top
POOL_CAP words.
"""

from __future__ import annotations
from collections import Counter, defaultdict
from typing import Dict, List, Tuple
from .base import BaseGuesser, register
from evilwordle.engine import score as score_fn
from evilwordle.session.state import SessionState


def _bucket_stats(guess: str, candidates) -> Tuple[int, int]:
    """
    Return (worst_bucket_size, num_distinct_patterns) for guess.
    """
    buckets: Dict[str, int] = defaultdict(int)
    _score = score_fn
    for ans in candidates:
        buckets[_score(guess, ans)] += 1
    if not buckets:
        return 0, 0
    return max(buckets.values()), len(buckets)


@register
class MinimaxGuesser(BaseGuesser):
    id = "minimax"
    name = "Minimax (smallest worst bucket)"
    version = "1.0.0"

    CANDIDATE_ONLY_LIMIT = 2
    POOL_CAP = 150

    def _distinct_score(self, w: str, counts: Counter) -> int:
        return sum(counts[ch] for ch in set(w))

    def _select_pool(self, candidates: List[str]) -> List[str]:
        if len(candidates) <= self.CANDIDATE_ONLY_LIMIT:
            return candidates
        counts = Counter(ch for w in candidates for ch in set(w))
        ranked = sorted(self.words, key=lambda w: self._distinct_score(w, counts), reverse=True)
        seen = set()
        out: List[str] = []
        for w in list(candidates[: self.POOL_CAP]) + ranked[: self.POOL_CAP]:
            if w not in seen:
                seen.add(w)
                out.append(w)
        return out

    def next_guess(self, state: SessionState) -> str:
        candidates = list(state.pool)
        if not candidates:
            return self.words[self.rng.randrange(len(self.words))]

        in_pool = set(candidates)
        best_key = None
        best: List[str] = []

        for g in self._select_pool(candidates):
            worst, distinct = _bucket_stats(g, candidates)
            key = (worst, 0 if g in in_pool else 1, -distinct)
            if best_key is None or key < best_key:
                best_key, best = key, [g]
            elif key == best_key:
                best.append(g)

        return best[self.rng.randrange(len(best))]

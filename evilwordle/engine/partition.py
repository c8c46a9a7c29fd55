"""
Candidate partitioning and the adversarial response.

For a guess g and the CURRENT candidate pool:
  1) score g against every candidate and bucket candidates by pattern key
  2) answer with the pattern of the LARGEST bucket, so the player eliminates
     as few words as possible

Every answer is the true feedback for at least one still-possible word, so
the game never contradicts itself. Equal-sized buckets resolve to the one
seen first while walking the pool in order, which keeps responses
deterministic for a given dictionary order.

Cost is O(len(candidates) * word_length) per call.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple

from .errors import ExhaustionError
from .scoring import Results, evaluate, is_all_correct, pattern_key

log = logging.getLogger(__name__)


@dataclass
class CandidateGroup:
    key: str
    results: Results
    words: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class AdversarialResponse:
    results: Results
    remaining: Tuple[str, ...]

    @property
    def pattern(self) -> str:
        return pattern_key(self.results)

    @property
    def solved(self) -> bool:
        return is_all_correct(self.results)


def partition_candidates(guess: str, candidates: Iterable[str]) -> List[CandidateGroup]:
    """Bucket candidates by pattern; groups come back in first-encountered order."""
    groups: Dict[str, CandidateGroup] = {}
    for word in candidates:
        results = evaluate(guess, word)
        key = pattern_key(results)
        group = groups.get(key)
        if group is None:
            group = groups[key] = CandidateGroup(key, results)
        group.words.append(word)
    return list(groups.values())


def select_adversarial_response(guess: str, candidates: Iterable[str]) -> AdversarialResponse:
    """
    Return the feedback that keeps the most candidates alive, and those
    candidates.

    Raises:
      ExhaustionError if `candidates` is empty.
    """
    groups = partition_candidates(guess, candidates)
    if not groups:
        log.error("adversarial response requested for %r with an empty pool", guess)
        raise ExhaustionError(f"no candidates left to answer {guess!r}")

    best = groups[0]
    for group in groups[1:]:
        # strict '>' keeps the earliest group on ties
        if len(group.words) > len(best.words):
            best = group

    log.debug("guess %s: %d patterns, keeping %s (%d words)",
              guess, len(groups), best.key, len(best.words))
    return AdversarialResponse(best.results, tuple(best.words))

from __future__ import annotations

from typing import Dict, Iterable

from .constraints import GuessRecord
from .scoring import LetterState

_RANK = {LetterState.ABSENT: 1, LetterState.PRESENT: 2, LetterState.CORRECT: 3}


def keyboard_states(history: Iterable[GuessRecord]) -> Dict[str, LetterState]:
    """
    Best state seen for each guessed letter (correct > present > absent).
    Letters never guessed are absent from the mapping.
    """
    states: Dict[str, LetterState] = {}
    for record in history:
        for r in record.results:
            current = states.get(r.letter)
            if current is None or _RANK[r.state] > _RANK[current]:
                states[r.letter] = r.state
    return states

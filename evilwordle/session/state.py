from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from evilwordle.engine.constraints import GuessRecord


class GameStatus(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class SessionState:
    """
    Snapshot of one game. Never mutated: every transition builds a new one,
    so a renderer holding an old snapshot still sees a consistent turn.
    """
    word_length: int
    pool: Tuple[str, ...]
    history: Tuple[GuessRecord, ...] = ()
    buffer: str = ""
    status: GameStatus = GameStatus.IN_PROGRESS
    max_guesses: Optional[int] = None
    target: str = ""  # representative word; final once the game is over

    @property
    def game_over(self) -> bool:
        return self.status is not GameStatus.IN_PROGRESS

    @property
    def won(self) -> bool:
        return self.status is GameStatus.WON

    @property
    def pool_size(self) -> int:
        return len(self.pool)

    @property
    def turn(self) -> int:
        """1-based number of the guess being typed."""
        return len(self.history) + 1

    @property
    def guesses_left(self) -> Optional[int]:
        if self.max_guesses is None:
            return None
        return max(self.max_guesses - len(self.history), 0)

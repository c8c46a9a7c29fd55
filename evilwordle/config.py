"""
Game configuration.

  - mode        : response strategy id ("adversarial" or "fixed_target")
  - word_length : letters per word (every dictionary word must match)
  - max_guesses : guess limit; None means unbounded. Defaults to unbounded
                  for the adversarial game and to 6 for the fixed-target game.
  - seed        : RNG seed for strategies that draw randomly (fixed target)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

ADVERSARIAL = "adversarial"
FIXED_TARGET = "fixed_target"
MODES = (ADVERSARIAL, FIXED_TARGET)

# Classic Wordle turn budget, used when the fixed-target game has no explicit limit.
WORDLE_MAX_TURNS = 6

_UNSET: Any = object()


@dataclass(frozen=True)
class GameConfig:
    mode: str = ADVERSARIAL
    word_length: int = 5
    max_guesses: Optional[int] = _UNSET
    seed: Optional[int] = None

    def __post_init__(self):
        if self.mode not in MODES:
            raise ValueError(f"Unknown mode: {self.mode}. Available: {list(MODES)}")
        if self.word_length <= 0:
            raise ValueError(f"word_length must be positive; got {self.word_length}")
        if self.max_guesses is _UNSET:
            default = WORDLE_MAX_TURNS if self.mode == FIXED_TARGET else None
            object.__setattr__(self, "max_guesses", default)
        elif self.max_guesses is not None and self.max_guesses <= 0:
            raise ValueError(f"max_guesses must be positive or None; got {self.max_guesses}")

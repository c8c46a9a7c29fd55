"""
Turn-by-turn game driver.

GameSession holds the dictionary, the response strategy and the current
SessionState. Every public method returns the new state and also stores it
as `session.state`; old states are left untouched.

  - reset()          : fresh IN_PROGRESS game, pool = whole dictionary
  - append_letter()  : type one letter (ignored when full or game over)
  - delete_letter()  : erase one letter (ignored when empty or game over)
  - submit_guess()   : score the buffer; raises ValidationError when the
                       buffer is short or not a dictionary word

Actions that the UI would have disabled are no-ops rather than errors.
"""

from __future__ import annotations

import logging
import random
from dataclasses import replace
from typing import Iterable, Sequence

from .state import GameStatus, SessionState
from evilwordle.config import GameConfig
from evilwordle.engine.constraints import GuessRecord
from evilwordle.engine.errors import (
    NOT_ENOUGH_LETTERS, TOO_MANY_LETTERS, ExhaustionError, ValidationError,
)
from evilwordle.engine.scoring import normalize
from evilwordle.engine.validation import check_guess
from evilwordle.strategies import BaseStrategy, create_strategy

log = logging.getLogger(__name__)


def _prepare_words(words: Iterable[str], N: int) -> tuple:
    out = tuple(normalize(w) for w in words)
    if not out:
        raise ValueError("word list is empty")
    bad = [w for w in out if len(w) != N or not w.isalpha()]
    if bad:
        raise ValueError(f"word list has {len(bad)} word(s) that are not {N} letters "
                         f"(e.g., {bad[:5]})")
    return out


class GameSession:
    def __init__(self, words: Sequence[str], *, config: GameConfig | None = None,
                 strategy: BaseStrategy | None = None, rng: random.Random | None = None):
        self.config = config or GameConfig()
        self.strategy = strategy or create_strategy(self.config.mode)
        # seeded once so each reset() of a seeded session draws a new secret
        if rng is None and self.config.seed is not None:
            rng = random.Random(self.config.seed)
        self.rng = rng
        self.words: tuple = ()
        self._allowed: frozenset = frozenset()
        self.state: SessionState = self.reset(words)

    @property
    def N(self) -> int:
        return self.config.word_length

    def reset(self, words: Sequence[str] | None = None) -> SessionState:
        if words is not None:
            self.words = _prepare_words(words, self.N)
            self._allowed = frozenset(self.words)

        self.strategy.reset(words=self.words, seed=self.config.seed, rng=self.rng)
        self.state = SessionState(
            word_length=self.N,
            pool=self.words,
            max_guesses=self.config.max_guesses,
        )
        log.debug("new %s game: %d words, limit=%s",
                  self.strategy.id, len(self.words), self.config.max_guesses)
        return self.state

    def append_letter(self, ch: str) -> SessionState:
        s = self.state
        if s.game_over or len(s.buffer) >= self.N:
            return s
        if not isinstance(ch, str) or len(ch) != 1 or not ch.isalpha():
            return s
        # some letters uppercase to two characters (e.g. "ß" -> "SS")
        up = ch.upper()
        if len(up) != 1:
            return s
        self.state = replace(s, buffer=s.buffer + up)
        return self.state

    def delete_letter(self) -> SessionState:
        s = self.state
        if s.game_over or not s.buffer:
            return s
        self.state = replace(s, buffer=s.buffer[:-1])
        return self.state

    def submit_guess(self) -> SessionState:
        s = self.state
        if s.game_over:
            return s

        guess = check_guess(s.buffer, self._allowed, self.N)

        response = self.strategy.respond(guess, s.pool)
        if not response.remaining:
            log.error("candidate pool exhausted by %r (strategy=%s)", guess, self.strategy.id)
            raise ExhaustionError(f"candidate pool exhausted by {guess!r}")

        history = s.history + (GuessRecord(guess, response.results),)
        remaining = response.remaining

        if response.solved:
            status, target = GameStatus.WON, guess
        elif s.max_guesses is not None and len(history) >= s.max_guesses:
            status, target = GameStatus.LOST, self.strategy.representative(remaining)
        else:
            status, target = GameStatus.IN_PROGRESS, self.strategy.representative(remaining)

        log.debug("turn %d: %s -> %s, pool %d -> %d, %s",
                  len(history), guess, response.pattern, len(s.pool), len(remaining),
                  status.value)

        self.state = replace(
            s,
            history=history,
            buffer="",
            pool=remaining,
            status=status,
            target=target,
        )
        return self.state

    def type_word(self, word: str) -> SessionState:
        """Clear the buffer, type `word` letter by letter and submit it."""
        word = normalize(word)
        if len(word) < self.N:
            raise ValidationError(NOT_ENOUGH_LETTERS, word)
        if len(word) > self.N:
            raise ValidationError(TOO_MANY_LETTERS, word)
        while self.state.buffer and not self.state.game_over:
            self.delete_letter()
        for ch in word:
            self.append_letter(ch)
        return self.submit_guess()

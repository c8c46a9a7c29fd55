"""
Simulation harness core primitives.

- play_game:  one game of an automated guesser against a response strategy.
- run_batch:  many games in sequence with derived per-game seeds.
- summarize:  win rate and guess-count statistics for a batch.

Games are driven through GameSession exactly as the terminal UI drives them
(letters typed one by one, then submit), so the harness exercises the same
state machine a human player does.

These functions are intentionally UI-agnostic so they can be reused by
a CLI app, a notebook, or tests without changes.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Dict, Iterable, List, Sequence

import numpy as np

from evilwordle.config import GameConfig
from evilwordle.session import GameSession

log = logging.getLogger(__name__)

# Adversarial games are unbounded; stop runaway guessers here.
DEFAULT_TURN_CAP = 100


def play_game(
        guesser,
        words: Sequence[str],
        *,
        config: GameConfig | None = None,
        seed: int | None = None,
        turn_cap: int = DEFAULT_TURN_CAP,
) -> Dict:
    """
    Play until the game ends or `turn_cap` guesses have been made.

    Args:
        guesser:  an object implementing BaseGuesser with next_guess(state)
        words:    the dictionary (ordered, unique, uppercase)
        config:   game configuration; its seed is overridden by `seed`
        seed:     seed for both the guesser and the strategy's RNG
        turn_cap: safety stop for unbounded games

    Returns:
        dict with keys:
            success (bool), guesses (int), time_ms (float), target (str),
            history (list[(guess, pattern)]), pool_sizes (list[int])
    """
    if turn_cap <= 0:
        raise ValueError(f"turn_cap must be positive; got {turn_cap}")

    config = config or GameConfig()
    if seed is not None:
        config = GameConfig(mode=config.mode, word_length=config.word_length,
                            max_guesses=config.max_guesses, seed=seed)

    session = GameSession(words, config=config)
    guesser.reset(words=session.words, N=config.word_length, seed=seed)

    pool_sizes: List[int] = [session.state.pool_size]
    t0 = time.perf_counter_ns()
    while not session.state.game_over and len(session.state.history) < turn_cap:
        guess = guesser.next_guess(session.state)
        state = session.type_word(guess)
        pool_sizes.append(state.pool_size)
    dt = (time.perf_counter_ns() - t0) / 1_000_000.0

    state = session.state
    if not state.game_over:
        log.warning("%s stopped after %d guesses with %d candidates left",
                    guesser.id, len(state.history), state.pool_size)

    return {
        "success": state.won,
        "guesses": len(state.history),
        "time_ms": dt,
        "target": state.target,
        "history": [(r.guess, r.pattern) for r in state.history],
        "pool_sizes": pool_sizes,
    }


def run_batch(
        guesser,
        words: Sequence[str],
        *,
        games: int,
        config: GameConfig | None = None,
        seed: int | None = None,
        turn_cap: int = DEFAULT_TURN_CAP,
        wrap: Callable[[Iterable[int]], Iterable[int]] | None = None,
) -> List[Dict]:
    """
    Run `games` games back-to-back. Each game's seed is derived from the base
    seed (seed + index) so runs are reproducible but not identical.

    `wrap` decorates the game index iterator (e.g. with a tqdm progress bar).
    """
    config = config or GameConfig()
    indices: Iterable[int] = range(1, games + 1)
    if wrap is not None:
        indices = wrap(indices)

    out: List[Dict] = []
    for idx in indices:
        game_seed = None if seed is None else (seed + idx)
        r = play_game(guesser, words, config=config, seed=game_seed, turn_cap=turn_cap)
        r["seed"] = game_seed
        r["guesser_id"] = guesser.id
        r["strategy_id"] = config.mode
        out.append(r)
    return out


def summarize(results: List[Dict]) -> Dict:
    """
    Batch statistics: win rate plus mean / median / p90 / max guesses
    (over all games, won or not).
    """
    if not results:
        return {"games": 0, "win_rate": 0.0, "mean_guesses": 0.0,
                "median_guesses": 0.0, "p90_guesses": 0.0, "max_guesses": 0}

    guesses = np.array([r["guesses"] for r in results], dtype=float)
    wins = np.array([bool(r["success"]) for r in results])
    return {
        "games": len(results),
        "win_rate": float(wins.mean()),
        "mean_guesses": float(guesses.mean()),
        "median_guesses": float(np.median(guesses)),
        "p90_guesses": float(np.percentile(guesses, 90)),
        "max_guesses": int(guesses.max()),
    }

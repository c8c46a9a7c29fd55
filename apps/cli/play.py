# apps/cli/play.py
"""
Interactive terminal game.

Type letters and press Enter to submit them. A short guess stays in the
buffer so the next line can finish it. Other commands:
  -       delete the last letter (repeat the dash to delete more)
  !new    start a new game
  !quit   leave

Each guess is printed with its feedback (G = correct, Y = present,
- = absent) followed by the keyboard summary.
"""

from __future__ import annotations

import argparse
import logging
import random
import sys

from evilwordle.config import ADVERSARIAL, MODES, GameConfig
from evilwordle.datasets import DEFAULT_WORDLIST, load_wordlist, pretty_summary, validate_wordlist
from evilwordle.engine import LetterState, ValidationError, keyboard_states
from evilwordle.engine.errors import NOT_ENOUGH_LETTERS, TOO_MANY_LETTERS
from evilwordle.session import GameSession, SessionState

NOTICES = {
    NOT_ENOUGH_LETTERS: "Not enough letters",
    TOO_MANY_LETTERS: "Too many letters",
}
DEFAULT_NOTICE = "Not in word list"


def _render(state: SessionState) -> str:
    lines = []
    for record in state.history:
        lines.append(f"  {' '.join(record.guess)}   {record.pattern}")
    if not state.game_over:
        typed = state.buffer.ljust(state.word_length, "_")
        lines.append(f"  {' '.join(typed)}")

    keys = keyboard_states(state.history)
    if keys:
        def row(st: LetterState) -> str:
            return "".join(sorted(k for k, v in keys.items() if v is st)) or "-"
        lines.append(f"  correct: {row(LetterState.CORRECT)}  "
                     f"present: {row(LetterState.PRESENT)}  "
                     f"absent: {row(LetterState.ABSENT)}")
    return "\n".join(lines)


def _status_message(state: SessionState) -> str:
    if state.won:
        return "Genius!"
    if state.game_over:
        return f"The word was {state.target}"
    return f"{state.pool_size} possible words remain"


def _handle(session: GameSession, line: str) -> str | None:
    """Apply one input line; return a notice to show, if any."""
    if set(line) == {"-"}:
        for _ in line:
            session.delete_letter()
        return None

    for ch in line:
        session.append_letter(ch)
    try:
        state = session.submit_guess()
    except ValidationError as e:
        # the buffer is kept so the player can finish or fix it
        return NOTICES.get(e.reason, DEFAULT_NOTICE)
    return _status_message(state)


def main():
    ap = argparse.ArgumentParser(description="evilwordle: play in the terminal")
    ap.add_argument("--mode", choices=MODES, default=ADVERSARIAL,
                    help="adversarial (no secret word) or fixed_target (classic)")
    ap.add_argument("--wordlist", default=str(DEFAULT_WORDLIST), help="dictionary file")
    ap.add_argument("--N", type=int, default=5, help="word length")
    ap.add_argument("--max-guesses", type=int, help="guess limit (default: none for "
                                                    "adversarial, 6 for fixed_target)")
    ap.add_argument("--seed", type=int, help="RNG seed for the fixed_target secret")
    ap.add_argument("--verbose", action="store_true", help="log every transition")
    args = ap.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    rep = validate_wordlist(args.N, args.wordlist)
    print(pretty_summary(rep))
    words = load_wordlist(args.wordlist, args.N)

    kwargs = {} if args.max_guesses is None else {"max_guesses": args.max_guesses}
    config = GameConfig(mode=args.mode, word_length=args.N, seed=args.seed, **kwargs)
    session = GameSession(words, config=config, rng=random.Random(args.seed))

    print(f"{session.state.pool_size} possible words. Enter a guess, '-' to delete, "
          f"'!new' or '!quit'.")
    for raw in sys.stdin:
        line = raw.strip()
        if line == "!quit":
            break
        if line == "!new":
            session.reset()
            print(f"New game: {session.state.pool_size} possible words")
            continue
        if not line:
            continue

        notice = _handle(session, line)
        print(_render(session.state))
        if notice:
            print(notice)
        if session.state.game_over:
            print("Type '!new' to play again or '!quit' to leave.")


if __name__ == "__main__":
    main()

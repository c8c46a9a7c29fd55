import itertools

import pytest
from evilwordle.engine import (
    GuessRecord, LetterState, ValidationError, check_guess, evaluate, filter_candidates,
    is_all_correct, is_consistent, score, validate_guess,
)
from evilwordle.engine.errors import NOT_ENOUGH_LETTERS, NOT_IN_WORD_LIST, TOO_MANY_LETTERS

WORDS = ["CRANE", "RAISE", "STARE", "TRACE", "CARED", "RACER", "SCOOP",
         "SPEED", "ERASE", "BELLE", "LEVEL", "EERIE", "ABBEY", "LLAMA"]


# --- N=5 golden tests (duplicates + placements) ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("SPEED", "ERASE", "Y-YY-"),
    ("BELLE", "LEVEL", "-GYYY"),
    ("LEVEL", "LEVEL", "GGGGG"),
    ("LEMON", "LEVEL", "GG---"),
    ("COOLS", "SCOOP", "YYG-Y"),
    ("RAISE", "CRANE", "YY--G"),
    ("STARE", "CRANE", "--GYG"),
    ("CRATE", "CRANE", "GGG-G"),
    ("CRATE", "GRATE", "-GGGG"),
])
def test_score_n5_golden(guess, answer, expected):
    assert score(guess, answer) == expected


# --- N=6: the evaluator itself is length-agnostic ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("SETTLE", "LETTER", "-GGGYY"),
    ("KITTEN", "TINKET", "YGYYGY"),
])
def test_score_n6_samples(guess, answer, expected):
    assert score(guess, answer) == expected


def test_evaluate_returns_letters_and_states():
    res = evaluate("speed", "erase")
    assert [r.letter for r in res] == list("SPEED")
    assert [r.state for r in res] == [
        LetterState.PRESENT, LetterState.ABSENT, LetterState.PRESENT,
        LetterState.PRESENT, LetterState.ABSENT,
    ]
    assert LetterState.EMPTY not in {r.state for r in res}


def test_evaluate_rejects_length_mismatch():
    with pytest.raises(ValueError):
        evaluate("CRANES", "CRANE")


def test_correct_takes_priority_over_present():
    # THEME has two Es; the exact match claims one, so only one yellow is left
    assert score("EERIE", "THEME") == "Y---G"


def test_marks_never_exceed_letter_count():
    for guess, ref in itertools.product(WORDS, repeat=2):
        res = evaluate(guess, ref)
        for letter in set(guess):
            marked = sum(1 for r in res
                         if r.letter == letter and r.state is not LetterState.ABSENT)
            assert marked <= ref.count(letter), (guess, ref, letter)


def test_is_all_correct():
    assert is_all_correct(evaluate("CRANE", "CRANE"))
    assert not is_all_correct(evaluate("CRATE", "CRANE"))
    assert not is_all_correct(())


def test_self_consistency():
    for guess, ref in itertools.product(WORDS, repeat=2):
        assert is_consistent(ref, [GuessRecord(guess, evaluate(guess, ref))])


def test_consistency_is_order_independent():
    history = [GuessRecord("RAISE", evaluate("RAISE", "CRANE")),
               GuessRecord("TRACE", evaluate("TRACE", "CRANE"))]
    for w in WORDS:
        assert is_consistent(w, history) == is_consistent(w, list(reversed(history)))
    assert is_consistent("CRANE", history)


def test_filter_candidates_history():
    history = [GuessRecord("RAISE", evaluate("RAISE", "CRANE"))]
    assert history[0].pattern == "YY--G"
    cand = filter_candidates([w.lower() for w in WORDS], history)
    assert "CRANE" in cand and "STARE" not in cand and "SCOOP" not in cand
    # order preserved
    assert cand == [w for w in WORDS if w in cand]


def test_validate_guess_n5():
    allowed = ["crane", "raise", "stare"]
    assert validate_guess("CRANE", allowed, N=5) is True
    assert validate_guess("cranes", allowed, N=5) is False
    assert validate_guess("???", allowed, N=5) is False
    assert validate_guess(None, allowed, N=5) is False


def test_check_guess_reasons():
    allowed = {"CRANE", "RAISE"}
    assert check_guess(" crane ", allowed, 5) == "CRANE"
    with pytest.raises(ValidationError) as e:
        check_guess("CRA", allowed, 5)
    assert e.value.reason == NOT_ENOUGH_LETTERS
    with pytest.raises(ValidationError) as e:
        check_guess("CRANES", allowed, 5)
    assert e.value.reason == TOO_MANY_LETTERS and e.value.guess == "CRANES"
    with pytest.raises(ValidationError) as e:
        check_guess("ZZZZZ", allowed, 5)
    assert e.value.reason == NOT_IN_WORD_LIST and e.value.guess == "ZZZZZ"

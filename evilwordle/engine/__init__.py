from .scoring import LetterState, LetterResult, evaluate, score, pattern_key, is_all_correct
from .constraints import GuessRecord, is_consistent, filter_candidates
from .partition import AdversarialResponse, partition_candidates, select_adversarial_response
from .validation import check_guess, validate_guess
from .keyboard import keyboard_states
from .errors import WordleError, ValidationError, ExhaustionError

__all__ = [
    "LetterState", "LetterResult", "evaluate", "score", "pattern_key", "is_all_correct",
    "GuessRecord", "is_consistent", "filter_candidates",
    "AdversarialResponse", "partition_candidates", "select_adversarial_response",
    "check_guess", "validate_guess", "keyboard_states",
    "WordleError", "ValidationError", "ExhaustionError",
]

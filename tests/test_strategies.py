import random

import pytest
from evilwordle.engine import ExhaustionError, evaluate, select_adversarial_response
from evilwordle.strategies import create_strategy, get_strategy_ids, register
from evilwordle.strategies.adversarial import AdversarialStrategy
from evilwordle.strategies.fixed_target import FixedTargetStrategy

WORDS = ["CRANE", "CRATE", "GRATE", "SLATE", "BAKER", "HATER", "WATER", "LATER"]


def test_registry_ids():
    assert get_strategy_ids() == ["adversarial", "fixed_target"]
    assert isinstance(create_strategy("adversarial"), AdversarialStrategy)
    with pytest.raises(ValueError):
        create_strategy("nope")


def test_register_rejects_duplicates():
    with pytest.raises(ValueError):
        register(AdversarialStrategy)


def test_adversarial_matches_partitioner():
    s = create_strategy("adversarial")
    s.reset(words=WORDS)
    assert s.respond("LATER", WORDS) == select_adversarial_response("LATER", WORDS)
    assert s.representative(("HATER", "WATER")) == "HATER"


def test_fixed_target_uses_injected_rng():
    a, b = FixedTargetStrategy(), FixedTargetStrategy()
    a.reset(words=WORDS, rng=random.Random(3))
    b.reset(words=WORDS, rng=random.Random(3))
    assert a.target == b.target and a.target in WORDS


def test_fixed_target_response_keeps_target():
    s = FixedTargetStrategy()
    s.reset(words=WORDS, target="crane")
    r = s.respond("CRATE", WORDS)
    assert r.results == evaluate("CRATE", "CRANE")
    assert r.remaining == ("CRANE",)
    assert s.representative(r.remaining) == "CRANE"


def test_fixed_target_out_of_sync_pool_is_exhaustion():
    s = FixedTargetStrategy()
    s.reset(words=WORDS, target="CRANE")
    with pytest.raises(ExhaustionError):
        s.respond("CRATE", ["SLATE"])

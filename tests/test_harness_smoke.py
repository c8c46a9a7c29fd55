import csv
import json
from pathlib import Path

from evilwordle.config import FIXED_TARGET, GameConfig
from evilwordle.guessers import create_guesser, get_guesser_ids
from evilwordle.harness import play_game, run_batch, summarize, write_csv, write_manifest

WORDS = ["CRANE", "CRATE", "GRATE", "SLATE", "BAKER", "HATER", "WATER", "LATER",
         "CATER", "PLATE", "STALE", "TASTE", "WASTE", "PASTE", "HASTE", "SCOOP"]


def test_guesser_registry():
    assert get_guesser_ids() == ["minimax", "random_consistent"]


def test_random_consistent_beats_the_adversary():
    guesser = create_guesser("random_consistent")
    r = play_game(guesser, WORDS, seed=42)
    assert r["success"] is True
    assert r["guesses"] <= len(WORDS)
    assert r["target"] == r["history"][-1][0]
    assert r["history"][-1][1] == "GGGGG"
    sizes = r["pool_sizes"]
    assert all(a >= b for a, b in zip(sizes, sizes[1:]))


def test_minimax_beats_the_adversary():
    guesser = create_guesser("minimax")
    r = play_game(guesser, WORDS, seed=7)
    assert r["success"] is True
    assert r["pool_sizes"][-1] == 1


def test_fixed_target_smoke():
    guesser = create_guesser("random_consistent")
    r = play_game(guesser, ["CRANE", "RAISE", "STARE"],
                  config=GameConfig(mode=FIXED_TARGET), seed=42)
    assert r["success"] is True and r["guesses"] <= 3


def test_turn_cap_stops_the_game():
    guesser = create_guesser("random_consistent")
    r = play_game(guesser, WORDS, seed=1, turn_cap=1)
    assert r["guesses"] == 1


def test_batch_summary_and_outputs(tmp_path: Path):
    guesser = create_guesser("random_consistent")
    results = run_batch(guesser, WORDS, games=4, seed=100)
    assert [r["seed"] for r in results] == [101, 102, 103, 104]
    assert all(r["guesser_id"] == "random_consistent" for r in results)

    summary = summarize(results)
    assert summary["games"] == 4 and summary["win_rate"] == 1.0
    assert summary["max_guesses"] >= summary["median_guesses"] >= 1

    csv_path = write_csv(results, str(tmp_path / "out" / "run.csv"), N=5)
    with open(csv_path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 4
    assert rows[0]["strategy"] == "adversarial"
    assert rows[0]["patt_1"].startswith("'")

    manifest_path = write_manifest({"summary": summary}, str(tmp_path / "m.json"))
    assert json.loads(Path(manifest_path).read_text(encoding="utf-8"))["summary"]["games"] == 4


def test_summarize_empty():
    assert summarize([])["games"] == 0

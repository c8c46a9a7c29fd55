from pathlib import Path
from evilwordle.datasets import (
    DEFAULT_WORDLIST, load_wordlist, normalize_words, pretty_summary, validate_wordlist,
)


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlist_happy_path(tmp_path: Path):
    words = tmp_path / "words_5.txt"
    _write(words, ["CRANE", "RAISE", "STARE"])

    rep = validate_wordlist(5, str(words))
    assert rep["passed"] is True
    assert rep["count"] == 3 and rep["unique_count"] == 3
    assert len(rep["sha256"]) == 64
    s = pretty_summary(rep)
    assert "N=5" in s and s.endswith("OK")


def test_validate_wordlist_flags_errors(tmp_path: Path):
    # lowercase, wrong length and non-letters are all invalid lines
    words = tmp_path / "words_6.txt"
    words.write_text("RAISER\ncrane\n??????\nPLANET\n", encoding="utf-8")

    rep = validate_wordlist(6, str(words))
    assert rep["passed"] is False
    assert rep["invalid_lines"] == 2
    assert any("invalid" in msg for msg in rep["issues"])


def test_validate_wordlist_duplicates(tmp_path: Path):
    words = tmp_path / "words_5.txt"
    _write(words, ["CRANE", "STARE", "CRANE"])

    rep = validate_wordlist(5, str(words))
    assert rep["passed"] is False
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_wordlist_missing_file(tmp_path: Path):
    rep = validate_wordlist(5, str(tmp_path / "nope.txt"))
    assert rep["exists"] is False and rep["passed"] is False
    assert "FAIL" in pretty_summary(rep)


def test_normalize_words_keeps_first_seen_order():
    assert normalize_words([" crane", "", "Stare", "CRANE", "cranes", "cr4ne"], 5) == \
        ["CRANE", "STARE"]


def test_load_wordlist(tmp_path: Path):
    words = tmp_path / "words.txt"
    _write(words, ["crane", "Slate", "", "crane"])
    assert load_wordlist(words, 5) == ["CRANE", "SLATE"]


def test_bundled_wordlist_is_valid():
    rep = validate_wordlist(5, str(DEFAULT_WORDLIST))
    assert rep["passed"] is True, rep["issues"]
    assert rep["count"] > 100

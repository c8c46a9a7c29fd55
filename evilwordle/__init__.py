"""Evil Wordle: a word game that never commits to a secret word."""

__version__ = "0.1.0"

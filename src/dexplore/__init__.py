"""Dictionary Explorer: pattern and Scrabble-style searches over a word list."""

__version__ = "0.1.0"

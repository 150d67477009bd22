"""Centralized configuration for the dictionary explorer: word source, query limits and display settings."""

import os

# ============================================================================
# PATH SETTINGS
# ============================================================================
DEFAULT_DICTIONARY_PATH = "/usr/share/dict/words"
DICTIONARY_PATH = os.environ.get("DEXPLORE_WORDS", DEFAULT_DICTIONARY_PATH)

# ============================================================================
# QUERY SETTINGS
# ============================================================================
# Single letters are never returned as Scrabble matches.
MIN_SIGNATURE_LENGTH = 2
# Inputs longer than this report progress while candidates are enumerated.
PROGRESS_THRESHOLD = 10
# Optional cap on Scrabble input length; None means unbounded.
_max_letters = os.environ.get("DEXPLORE_MAX_LETTERS")
MAX_SCRAB_LETTERS = int(_max_letters) if _max_letters else None

# ============================================================================
# DISPLAY SETTINGS
# ============================================================================
PAGER_THRESHOLD = 400  # More results than this go through the system pager
WRAP_WIDTH = 78

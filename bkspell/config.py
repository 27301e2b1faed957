# bkspell/config.py
"""
Configuration for the BK-tree spell checker.

Values defined here are defaults; the getters in :mod:`bkspell.utils` let
environment variables override them.
"""

# === INFORMATIONS APPLICATION ===
APP_NAME = "BK-Tree Spell Checker"
APP_VERSION = "1.0.0"
APP_DESCRIPTION = "Approximate word lookup with a Burkhard-Keller tree"
APP_LICENSE = "MIT"

# === DICTIONARY ===
DEFAULT_WORD_LIST = "words.txt"
LOWERCASE_WORDS = True

# === SEARCH ===
DEFAULT_TOLERANCE = 1
MAX_UI_TOLERANCE = 5
DISTANCE_ALGORITHMS = ["rapidfuzz", "levenshtein"]
DEFAULT_DISTANCE_ALGORITHM = "rapidfuzz"

# === TERMINAL SESSION ===
# 0 means "read queries until end of input"
DEFAULT_MAX_QUERIES = 5
PROMPT = "Enter word: "

# === MESSAGES ===
MESSAGES = {
    "building": "Building structure... ",
    "done": "Done.",
    "correct": "Word is spelled correctly.",
    "no_suggestions": "No suggestions found.",
    "suggestions_prefix": "Did you mean: ",
    "timing": "Results found in {elapsed}s",
}

# === ENVIRONMENT VARIABLES ===
ENV_TOLERANCE = "BKSPELL_TOLERANCE"
ENV_WORD_LIST = "BKSPELL_WORD_LIST"
ENV_DISTANCE_ALGORITHM = "BKSPELL_DISTANCE_ALGORITHM"
ENV_MAX_QUERIES = "BKSPELL_MAX_QUERIES"

# === LOGGING ===
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

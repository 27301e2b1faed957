"""
BK-Tree Spell Checker
=====================

In-memory approximate word lookup: a Burkhard-Keller tree indexes a
dictionary by Levenshtein distance so that tolerance-bounded searches can
skip whole subtrees thanks to the triangle inequality.

Modules principaux:
- distance: Levenshtein distance and backend selection
- bktree: the BK-tree and its search result
- dictionary: word list loading and normalization
- spell_checker: build-once, check-many facade
- config / utils: configuration and helpers

Usage:
    from bkspell import SpellChecker

    checker = SpellChecker.from_word_list("words.txt", tolerance=1)
    print(checker.suggest("speling"))
"""

__version__ = "1.0.0"
__license__ = "MIT"

from .bktree import BKTree, SearchResult
from .distance import get_distance_function, levenshtein_distance
from .dictionary import build_tree, load_words, normalize_word
from .spell_checker import CheckReport, SpellChecker
from .utils import format_suggestions

__all__ = [
    # Structure
    "BKTree",
    "SearchResult",

    # Distance
    "levenshtein_distance",
    "get_distance_function",

    # Dictionnaire
    "load_words",
    "normalize_word",
    "build_tree",

    # Correcteur
    "SpellChecker",
    "CheckReport",
    "format_suggestions",
]

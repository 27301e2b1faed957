"""
Load and normalize the word list the spell checker is built from.

The file holds one word per line. Blank lines are skipped and every word is
stripped and, by default, lower-cased before it reaches the tree.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from .bktree import BKTree
from .config import LOWERCASE_WORDS
from .distance import DistanceFunc, levenshtein_distance
from .utils import ensure_unicode


def normalize_word(word: str, *, lowercase: bool = LOWERCASE_WORDS) -> str:
    """Strip surrounding whitespace and optionally lower-case ``word``."""
    word = word.strip()
    return word.lower() if lowercase else word


def load_words(
    path: Union[str, Path], *, lowercase: bool = LOWERCASE_WORDS
) -> List[str]:
    """Read ``path`` and return its normalized words in file order.

    Args:
        path: Word list, one entry per line, in any encoding ``chardet`` can
            recognise.
        lowercase: Fold words to lower case.

    Returns:
        list[str]: Normalized, non-empty words. Duplicates are kept; the tree
        ignores them on insertion.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        UnicodeDecodeError: If the file encoding cannot be determined.
    """

    file_path = Path(path)
    try:
        raw = file_path.read_bytes()
    except OSError as e:
        logging.error(f"Error reading word list {file_path}: {e}")
        raise

    words: List[str] = []
    for line in ensure_unicode(raw).splitlines():
        word = normalize_word(line, lowercase=lowercase)
        if word:
            words.append(word)

    logging.info(f"Loaded {len(words)} words from {file_path}")
    return words


def build_tree(
    words: Iterable[str], distance_func: Optional[DistanceFunc] = None
) -> BKTree:
    """Insert ``words`` into a new :class:`BKTree` in iteration order."""
    tree = BKTree(distance_func or levenshtein_distance)
    for word in words:
        tree.insert(word)
    return tree

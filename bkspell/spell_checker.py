"""High level spell checker built on :class:`bkspell.bktree.BKTree`."""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Union

from .bktree import BKTree, SearchResult
from .dictionary import load_words, normalize_word
from .distance import get_distance_function
from .utils import format_suggestions, get_default_tolerance, get_distance_algorithm


@dataclass
class CheckReport:
    """Result of checking one word, with the time the lookup took."""

    query: str
    result: SearchResult
    elapsed: float

    @property
    def message(self) -> str:
        return format_suggestions(self.result)


class SpellChecker:
    """Build a BK-tree from a dictionary once, then check words against it.

    Words are normalized with :func:`bkspell.dictionary.normalize_word`
    before insertion and before every lookup, so callers may pass raw user
    input.
    """

    def __init__(
        self,
        tolerance: Optional[int] = None,
        algorithm: Optional[str] = None,
        *,
        lowercase: bool = True,
    ) -> None:
        self.tolerance = tolerance if tolerance is not None else get_default_tolerance()
        self.algorithm = algorithm or get_distance_algorithm()
        self.lowercase = lowercase
        self.tree = BKTree(get_distance_function(self.algorithm))
        logging.info(
            f"SpellChecker initialised (algorithm={self.algorithm}, tolerance={self.tolerance})"
        )

    @classmethod
    def from_word_list(
        cls,
        path: Union[str, Path],
        tolerance: Optional[int] = None,
        algorithm: Optional[str] = None,
    ) -> "SpellChecker":
        checker = cls(tolerance=tolerance, algorithm=algorithm)
        checker.add_words(load_words(path, lowercase=checker.lowercase))
        return checker

    def add_words(self, words: Iterable[str]) -> int:
        """Insert ``words`` and return how many new entries were stored."""
        start = time.perf_counter()
        added = 0
        for word in words:
            if self.tree.insert(normalize_word(word, lowercase=self.lowercase)):
                added += 1
        logging.info(
            f"Indexed {added} new words ({len(self.tree)} total) in "
            f"{time.perf_counter() - start:.2f}s"
        )
        return added

    def check(self, word: str, tolerance: Optional[int] = None) -> CheckReport:
        query = normalize_word(word, lowercase=self.lowercase)
        limit = self.tolerance if tolerance is None else tolerance
        start = time.perf_counter()
        result = self.tree.search(query, limit)
        elapsed = time.perf_counter() - start
        logging.debug(
            f"Checked {query!r} (tolerance={limit}): exact={result.exact_match}, "
            f"{len(result.candidates)} candidates"
        )
        return CheckReport(query=query, result=result, elapsed=elapsed)

    def suggest(self, word: str, tolerance: Optional[int] = None) -> str:
        return self.check(word, tolerance).message

    def __len__(self) -> int:
        return len(self.tree)

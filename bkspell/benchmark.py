#!/usr/bin/env python3
"""Script CLI to time the spell checker over a batch of query words."""
import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, List, Optional, Union

import pandas as pd

from .config import DISTANCE_ALGORITHMS
from .dictionary import load_words
from .spell_checker import SpellChecker
from .utils import (
    get_default_tolerance,
    get_distance_algorithm,
    get_word_list_path,
    setup_logging,
)

REPORT_COLUMNS = ["query", "exact_match", "candidates", "candidate_count", "elapsed_seconds"]


def evaluate(
    checker: SpellChecker,
    queries: Iterable[str],
    tolerance: Optional[int] = None,
) -> pd.DataFrame:
    """Check every query and collect one report row per word.

    Parameters
    ----------
    checker:
        Spell checker already loaded with a dictionary.
    queries:
        Words to look up, in the order they should appear in the report.
    tolerance:
        Overrides ``checker.tolerance`` when given.

    Returns
    -------
    pandas.DataFrame
        Columns ``query``, ``exact_match``, ``candidates`` (comma joined),
        ``candidate_count`` and ``elapsed_seconds``.
    """
    rows = []
    for word in queries:
        report = checker.check(word, tolerance)
        rows.append(
            {
                "query": report.query,
                "exact_match": report.result.exact_match,
                "candidates": ", ".join(report.result.candidates),
                "candidate_count": len(report.result.candidates),
                "elapsed_seconds": report.elapsed,
            }
        )
    return pd.DataFrame(rows, columns=REPORT_COLUMNS)


def evaluate_files(
    words_path: Union[str, Path],
    queries_path: Union[str, Path],
    tolerance: Optional[int] = None,
    algorithm: Optional[str] = None,
) -> pd.DataFrame:
    checker = SpellChecker.from_word_list(words_path, tolerance=tolerance, algorithm=algorithm)
    return evaluate(checker, load_words(queries_path))


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Benchmark du correcteur BK-tree")
    parser.add_argument("--words", default=get_word_list_path(), help="Word list used to build the tree")
    parser.add_argument("--queries", required=True, help="File of words to check, one per line")
    parser.add_argument("--tolerance", type=int, default=get_default_tolerance(), help="Maximum edit distance")
    parser.add_argument("--algorithm", choices=DISTANCE_ALGORITHMS, default=get_distance_algorithm())
    parser.add_argument("--output", default="benchmark_report.csv", help="Fichier de sortie CSV")
    args = parser.parse_args(argv)
    setup_logging()

    try:
        df = evaluate_files(args.words, args.queries, args.tolerance, args.algorithm)
    except (OSError, UnicodeDecodeError) as e:
        logging.error(f"Benchmark aborted: {e}")
        return 1

    df.to_csv(args.output, index=False)
    logging.info(
        f"{len(df)} queries, mean {df['elapsed_seconds'].mean() if len(df) else 0.0:.6f}s per query"
    )
    print(f"Rapport sauvegardé dans {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

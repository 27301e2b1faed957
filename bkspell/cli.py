#!/usr/bin/env python3
"""
Interactive terminal spell checker.

Usage: bkspell [--words PATH] [--tolerance N] [--queries N] [--algorithm NAME]
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import APP_DESCRIPTION, DISTANCE_ALGORITHMS, MESSAGES, PROMPT
from .spell_checker import SpellChecker
from .utils import (
    format_elapsed,
    get_default_tolerance,
    get_distance_algorithm,
    get_max_queries,
    get_word_list_path,
    setup_logging,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=APP_DESCRIPTION)
    parser.add_argument("--words", default=get_word_list_path(), help="Word list, one word per line")
    parser.add_argument("--tolerance", type=int, default=get_default_tolerance(), help="Maximum edit distance for suggestions")
    parser.add_argument("--queries", type=int, default=get_max_queries(), help="Number of words to check (0 = until end of input)")
    parser.add_argument("--algorithm", choices=DISTANCE_ALGORITHMS, default=get_distance_algorithm(), help="Edit distance backend")
    parser.add_argument("--verbose", action="store_true", help="Show debug logs")
    return parser


def run_session(checker: SpellChecker, max_queries: int) -> int:
    """Prompt for words until ``max_queries`` are answered or input ends.

    Only the first whitespace separated token of each line is checked; blank
    lines are prompted again without counting. Returns the number of words
    checked.
    """
    count = 0
    while max_queries <= 0 or count < max_queries:
        try:
            line = input(PROMPT)
        except EOFError:
            print()
            break
        tokens = line.split()
        if not tokens:
            continue

        report = checker.check(tokens[0])
        print(report.message)
        print(format_elapsed(report.elapsed))
        print()
        count += 1
    return count


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    if args.tolerance < 0:
        logging.warning(f"Negative tolerance {args.tolerance} treated as 0")
        args.tolerance = 0

    print(MESSAGES["building"])
    try:
        checker = SpellChecker.from_word_list(
            args.words, tolerance=args.tolerance, algorithm=args.algorithm
        )
    except (OSError, UnicodeDecodeError) as e:
        logging.error(f"Could not load word list {args.words}: {e}")
        return 1
    print(MESSAGES["done"])
    print()

    run_session(checker, args.queries)
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Levenshtein edit distance and distance backend selection.

The BK-tree relies on the metric properties of the distance (symmetry,
identity and the triangle inequality) to prune subtrees, so every backend
returned by :func:`get_distance_function` must compute the exact unit-cost
Levenshtein distance.
"""

from __future__ import annotations

from typing import Callable, Hashable, Sequence

from rapidfuzz.distance import Levenshtein as RFLevenshtein

DistanceFunc = Callable[[Sequence[Hashable], Sequence[Hashable]], int]


def levenshtein_distance(a: Sequence[Hashable], b: Sequence[Hashable]) -> int:
    """Return the edit distance between ``a`` and ``b``.

    Insertions, deletions and substitutions each cost 1. Any indexable
    sequence works (``str``, ``bytes``, tuples of symbols); symbols are only
    compared with ``==``.

    Parameters
    ----------
    a, b:
        Sequences to compare.

    Returns
    -------
    int
        Minimum number of single-symbol edits turning ``a`` into ``b``.
    """
    n_a = len(a)
    n_b = len(b)
    if n_a == 0:
        return n_b
    if n_b == 0:
        return n_a

    table = [[0] * (n_b + 1) for _ in range(n_a + 1)]
    for i in range(n_a + 1):
        table[i][0] = i
    for j in range(n_b + 1):
        table[0][j] = j

    for i in range(1, n_a + 1):
        row = table[i]
        previous = table[i - 1]
        symbol = a[i - 1]
        for j in range(1, n_b + 1):
            cost = 0 if symbol == b[j - 1] else 1
            row[j] = min(
                previous[j] + 1,  # deletion
                row[j - 1] + 1,  # insertion
                previous[j - 1] + cost,  # substitution / match
            )

    return table[n_a][n_b]


def get_distance_function(algorithm: str = "levenshtein") -> DistanceFunc:
    """Return the distance callable registered under ``algorithm``.

    ``"levenshtein"`` selects the pure-Python implementation above and
    ``"rapidfuzz"`` the C implementation shipped with ``rapidfuzz``.

    Raises:
        ValueError: If ``algorithm`` is not a known backend.
    """
    name = (algorithm or "").strip().lower()
    if name == "levenshtein":
        return levenshtein_distance
    if name == "rapidfuzz":
        return RFLevenshtein.distance
    raise ValueError(f"Unknown distance algorithm: {algorithm!r}")

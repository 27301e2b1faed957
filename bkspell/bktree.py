from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Hashable, Iterator, List, Optional, Sequence, Tuple

from .distance import DistanceFunc, levenshtein_distance

Word = Sequence[Hashable]


@dataclass
class SearchResult:
    """Outcome of a tolerance-bounded lookup."""

    exact_match: bool = False
    candidates: List[Word] = field(default_factory=list)


class _BKTreeNode:
    __slots__ = ("word", "edge_distance", "children")

    def __init__(self, word: Word, edge_distance: Optional[int] = None) -> None:
        self.word = word
        # None for the root, which has no parent
        self.edge_distance = edge_distance
        self.children: Dict[int, _BKTreeNode] = {}

    def ordered_children(self) -> List[_BKTreeNode]:
        return [self.children[d] for d in sorted(self.children)]


class BKTree:
    """BK-tree implementation for approximate string matching.

    Every node keeps at most one child per distance to its own word. Searches
    walk children in ascending edge distance, so candidate order depends only
    on the tree shape and never on dict ordering.
    """

    def __init__(self, distance_func: DistanceFunc = levenshtein_distance) -> None:
        self.distance_func = distance_func
        self.root: Optional[_BKTreeNode] = None
        self._size = 0

    def insert(self, word: Word) -> bool:
        """Add ``word`` to the tree; return ``False`` if it was already stored."""
        if self.root is None:
            self.root = _BKTreeNode(word)
            self._size = 1
            return True
        node = self.root
        while True:
            dist = self.distance_func(node.word, word)
            if dist == 0:
                return False
            child = node.children.get(dist)
            if child is not None:
                node = child
            else:
                node.children[dist] = _BKTreeNode(word, dist)
                self._size += 1
                return True

    add = insert

    def search(
        self, word: Word, tolerance: int, *, stop_on_exact: bool = True
    ) -> SearchResult:
        """Find stored words within ``tolerance`` edits of ``word``.

        The first node at distance 0 sets ``exact_match`` and, unless
        ``stop_on_exact`` is false, ends the whole search. Candidates found
        before that point are kept. A child subtree is visited only when its
        edge distance lies in ``[d - tolerance, d + tolerance]`` where ``d``
        is the distance from the query to the parent's word.
        """
        result = SearchResult()
        if self.root is None:
            return result
        tolerance = max(0, tolerance)

        nodes = [self.root]
        while nodes:
            node = nodes.pop()
            dist = self.distance_func(node.word, word)
            if dist == 0:
                result.exact_match = True
                if stop_on_exact:
                    break
            elif dist <= tolerance:
                result.candidates.append(node.word)
            low = max(0, dist - tolerance)
            high = dist + tolerance
            # pushed in reverse so the smallest edge distance is visited first
            for d in sorted(node.children, reverse=True):
                if low <= d <= high:
                    nodes.append(node.children[d])
        return result

    def edges(self) -> Iterator[Tuple[Word, Word, int]]:
        """Yield ``(parent_word, child_word, edge_distance)`` in traversal order."""
        if self.root is None:
            return
        nodes = [self.root]
        while nodes:
            node = nodes.pop()
            for child in node.ordered_children():
                yield node.word, child.word, child.edge_distance
            nodes.extend(reversed(node.ordered_children()))

    def __iter__(self) -> Iterator[Word]:
        if self.root is None:
            return
        nodes = [self.root]
        while nodes:
            node = nodes.pop()
            yield node.word
            nodes.extend(reversed(node.ordered_children()))

    def __contains__(self, word: object) -> bool:
        return self.search(word, 0).exact_match  # type: ignore[arg-type]

    def __len__(self) -> int:
        return self._size

"""
BK-tree for approximate string lookup.

Nodes live in an arena: node i holds ``_tokens[i]`` and ``_children[i]``,
a mapping from exact edit distance to the index of the child node. The
root is node 0.
"""

import logging
from typing import Dict, Iterator, List, Optional, Set

from .distance import DistanceFunction, levenshtein_distance

logger = logging.getLogger(__name__)


class BKTree:
    """Metric tree answering "all stored strings within distance d"."""

    def __init__(self, distance: Optional[DistanceFunction] = None):
        """
        Initialize an empty tree.

        Args:
            distance: Metric used to place and find strings. Defaults to the
                Levenshtein distance table.
        """
        self.distance = distance or levenshtein_distance
        self._tokens: List[str] = []
        self._children: List[Dict[int, int]] = []

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[str]:
        return iter(self._tokens)

    def __contains__(self, token: str) -> bool:
        return token in self.search(token, 0)

    def _new_node(self, token: str) -> int:
        self._tokens.append(token)
        self._children.append({})
        return len(self._tokens) - 1

    def insert(self, token: str) -> bool:
        """
        Insert a string into the tree.

        Each node is visited by following the child stored under the exact
        distance between the new string and the node, until a free bucket
        is found.

        Args:
            token: String to store.

        Returns:
            True if the string was added, False if it was already present.
        """
        if not self._tokens:
            self._new_node(token)
            return True

        node = 0
        while True:
            dist = self.distance(token, self._tokens[node])
            if dist == 0:
                return False
            child = self._children[node].get(dist)
            if child is None:
                self._children[node][dist] = self._new_node(token)
                return True
            node = child

    def search(self, query: str, max_distance: int) -> Set[str]:
        """
        Find all stored strings within max_distance of the query.

        Children are only visited when their bucket k satisfies
        ``d - max_distance <= k <= d + max_distance``, where d is the
        distance from the query to the parent.

        Args:
            query: String to look up.
            max_distance: Largest edit distance accepted.

        Returns:
            Set of matching stored strings (empty for an empty tree).
        """
        matches: Set[str] = set()
        if not self._tokens or max_distance < 0:
            return matches

        visited = 0
        stack = [0]
        while stack:
            node = stack.pop()
            visited += 1
            dist = self.distance(query, self._tokens[node])
            if dist <= max_distance:
                matches.add(self._tokens[node])
            low, high = dist - max_distance, dist + max_distance
            for bucket, child in self._children[node].items():
                if low <= bucket <= high:
                    stack.append(child)

        logger.debug(
            "BK-tree search %r (d<=%d): visited %d/%d nodes, %d matches",
            query, max_distance, visited, len(self._tokens), len(matches),
        )
        return matches

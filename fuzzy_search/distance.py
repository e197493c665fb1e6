"""
Edit distance functions.

The BK-tree only needs a metric, so the distance backend is pluggable:
the dynamic-programming table below, or the compiled implementation
from rapidfuzz. Both compute the same Levenshtein distance.
"""

from typing import Callable

from rapidfuzz.distance import Levenshtein

DistanceFunction = Callable[[str, str], int]


def levenshtein_distance(s1: str, s2: str) -> int:
    """
    Compute the Levenshtein distance with the classic O(m*n) table.

    Args:
        s1: First string.
        s2: Second string.

    Returns:
        Minimum number of single-character insertions, deletions and
        substitutions turning s1 into s2.
    """
    m, n = len(s1), len(s2)
    dp = [[0] * (n + 1) for _ in range(m + 1)]
    for i in range(m + 1):
        dp[i][0] = i
    for j in range(n + 1):
        dp[0][j] = j

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            cost = 0 if s1[i - 1] == s2[j - 1] else 1
            dp[i][j] = min(
                dp[i - 1][j] + 1,         # deletion
                dp[i][j - 1] + 1,         # insertion
                dp[i - 1][j - 1] + cost,  # substitution
            )
    return dp[m][n]


def _rapidfuzz_distance(s1: str, s2: str) -> int:
    return Levenshtein.distance(s1, s2)


_BACKENDS = {
    "table": levenshtein_distance,
    "rapidfuzz": _rapidfuzz_distance,
}


def get_distance_function(backend: str = "table") -> DistanceFunction:
    """
    Look up a distance function by backend name.

    Args:
        backend: "table" or "rapidfuzz".

    Returns:
        The distance function.

    Raises:
        ValueError: If the backend is unknown.
    """
    try:
        return _BACKENDS[backend]
    except KeyError:
        raise ValueError(
            f"Unknown distance backend {backend!r}; expected one of {sorted(_BACKENDS)}"
        ) from None

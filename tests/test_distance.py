import random

import pytest
from rapidfuzz.distance import Levenshtein

import config
from fuzzy_search import get_distance_function, levenshtein_distance


@pytest.mark.parametrize("a,b,expected", [
    ("", "", 0),
    ("", "abc", 3),
    ("kitten", "sitting", 3),
    ("flaw", "lawn", 2),
    ("code", "coder", 1),
    ("clean", "clena", 2),  # a transposition is two substitutions
    ("clean", "clran", 1),
])
def test_known_distances(a, b, expected):
    assert levenshtein_distance(a, b) == expected


def _random_words(rng, n, alphabet="abcd", max_len=7):
    return ["".join(rng.choice(alphabet) for _ in range(rng.randint(0, max_len))) for _ in range(n)]


def test_identity_symmetry_and_rapidfuzz_agreement():
    rng = random.Random(config.RANDOM_SEED)
    words = _random_words(rng, 60)
    for a in words:
        assert levenshtein_distance(a, a) == 0
        for b in words[:20]:
            d = levenshtein_distance(a, b)
            assert d == levenshtein_distance(b, a)
            assert d == Levenshtein.distance(a, b)


def test_triangle_inequality():
    rng = random.Random(config.RANDOM_SEED + 1)
    words = _random_words(rng, 25)
    for a in words:
        for b in words:
            for c in words[:10]:
                assert levenshtein_distance(a, c) <= levenshtein_distance(a, b) + levenshtein_distance(b, c)


def test_backend_lookup():
    assert get_distance_function("table") is levenshtein_distance
    rf = get_distance_function("rapidfuzz")
    assert rf("kitten", "sitting") == 3
    with pytest.raises(ValueError):
        get_distance_function("hamming")

import random

import pytest

import config
from fuzzy_search import BKTree, get_distance_function, levenshtein_distance


def _vocabulary(seed, n=200, alphabet="abcde", min_len=1, max_len=8):
    rng = random.Random(seed)
    return ["".join(rng.choice(alphabet) for _ in range(rng.randint(min_len, max_len))) for _ in range(n)]


def test_empty_tree_returns_empty_set():
    tree = BKTree()
    assert len(tree) == 0
    assert tree.search("anything", 3) == set()
    assert "anything" not in tree


def test_first_insert_becomes_root_and_duplicates_are_ignored():
    tree = BKTree()
    assert tree.insert("book") is True
    assert tree.insert("book") is False
    assert tree.insert("books") is True
    assert len(tree) == 2
    assert list(tree) == ["book", "books"]


def test_every_inserted_token_found_at_distance_zero():
    tree = BKTree()
    words = _vocabulary(config.RANDOM_SEED)
    for w in words:
        tree.insert(w)
    for w in words:
        assert w in tree.search(w, 0)
        assert w in tree


def test_children_bucketed_by_exact_distance():
    tree = BKTree()
    for w in _vocabulary(config.RANDOM_SEED, n=80):
        tree.insert(w)
    # Every descendant under bucket k was placed at exact distance k from its parent
    for node, children in enumerate(tree._children):
        for bucket, child in children.items():
            assert levenshtein_distance(tree._tokens[node], tree._tokens[child]) == bucket


@pytest.mark.parametrize("backend", ["table", "rapidfuzz"])
def test_search_matches_brute_force(backend):
    words = _vocabulary(config.RANDOM_SEED + 7)
    tree = BKTree(get_distance_function(backend))
    for w in words:
        tree.insert(w)
    stored = set(words)

    queries = _vocabulary(config.RANDOM_SEED + 8, n=30, min_len=0)
    for q in queries:
        for d in range(0, 4):
            expected = {s for s in stored if levenshtein_distance(q, s) <= d}
            assert tree.search(q, d) == expected, f"query={q!r} d={d}"


def test_negative_distance_returns_empty():
    tree = BKTree()
    tree.insert("abc")
    assert tree.search("abc", -1) == set()


def test_pruning_skips_subtrees():
    calls = []

    def counting(a, b):
        calls.append((a, b))
        return levenshtein_distance(a, b)

    tree = BKTree(counting)
    words = _vocabulary(config.RANDOM_SEED + 3)
    for w in words:
        tree.insert(w)

    calls.clear()
    tree.search(words[0], 0)
    assert len(calls) < len(tree)

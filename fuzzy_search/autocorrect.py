"""
Auto-correction module for query processing.

This module suggests vocabulary words for misspelled query words using the
vocabulary BK-tree and document frequency information.
"""

from typing import Iterable, List, Optional, Tuple

from .indexer import Indexer


class AutoCorrect:
    """Suggests corrections using edit distance and document frequency."""

    def __init__(self, config, indexer: Indexer):
        """Initialize with configuration and the index holding the vocabulary."""
        self.config = config
        self.indexer = indexer

    def rank_candidates(self, word: str, candidates: Iterable[str]) -> List[Tuple[str, int, int]]:
        """
        Order vocabulary candidates for a word.

        Args:
            word: Input word.
            candidates: Vocabulary words near the input word.

        Returns:
            List of (word, distance, document_frequency) tuples, smallest
            distance first, then higher frequency, then alphabetical.
        """
        distance = self.indexer.vocabulary.distance
        ranked = [(cand, distance(word, cand), self.indexer.document_frequency(cand)) for cand in candidates]
        ranked.sort(key=lambda x: (x[1], -x[2], x[0]))
        return ranked

    def _ranked_candidates(self, word: str, max_dist: int) -> List[Tuple[str, int, int]]:
        return self.rank_candidates(word, self.indexer.vocabulary.search(word, max_dist))

    def suggest_correction(self, word: str, max_dist: Optional[int] = None) -> Tuple[Optional[str], Optional[int]]:
        """
        Suggest a correction for a word using edit distance and frequency.

        Args:
            word: Word to correct.
            max_dist: Maximum edit distance to consider.

        Returns:
            Tuple of (best_word, best_distance) or (None, None) if no good match.
        """
        if max_dist is None:
            max_dist = self.config.MAX_EDIT_DISTANCE

        candidates = self._ranked_candidates(word, max_dist)
        if not candidates:
            return None, None
        best_word, best_dist, _ = candidates[0]
        return best_word, best_dist

    def get_corrections(self, words: List[str], max_dist: Optional[int] = None) -> List[Tuple[str, str]]:
        """
        Suggest replacements for out-of-vocabulary words.

        Args:
            words: List of words to check.
            max_dist: Maximum edit distance to consider.

        Returns:
            List of (original, corrected) pairs, in query order.
        """
        changes = []
        for w in words:
            if self.indexer.document_frequency(w) > 0:
                continue
            suggestion, _dist = self.suggest_correction(w, max_dist=max_dist)
            if suggestion is not None:
                changes.append((w, suggestion))
        return changes

    def autocorrect_query_words(self, words: List[str], max_dist: Optional[int] = None) -> Tuple[List[str], List[Tuple[str, str]], List[str]]:
        """
        Auto-correct a list of query words.

        Args:
            words: List of words to correct.
            max_dist: Maximum edit distance to consider.

        Returns:
            Tuple of (corrected_words, changes, oov_no_suggest).
            - corrected_words: List of corrected words
            - changes: List of (original, corrected) pairs
            - oov_no_suggest: List of words with no viable suggestions
        """
        changes = self.get_corrections(words, max_dist=max_dist)
        replacements = dict(changes)

        corrected = [replacements.get(w, w) for w in words]
        oov_no_suggest = [
            w for w in words
            if w not in replacements and self.indexer.document_frequency(w) == 0
        ]
        return corrected, changes, oov_no_suggest

    def get_similar_words(self, word: str, max_dist: Optional[int] = None, top_k: int = 5) -> List[Tuple[str, int, int]]:
        """
        Get similar words to a given word.

        Args:
            word: Input word.
            max_dist: Maximum edit distance to consider.
            top_k: Number of top similar words to return.

        Returns:
            List of (word, distance, document_frequency) tuples sorted by
            distance then frequency.
        """
        if max_dist is None:
            max_dist = self.config.MAX_EDIT_DISTANCE
        return self._ranked_candidates(word, max_dist)[:top_k]

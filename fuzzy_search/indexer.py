"""
Inverted index construction and management.

This module maps vocabulary tokens to the set of documents containing them
and keeps the per-document length statistics needed for ranking. Every
indexed token is also registered in a BK-tree so that misspelled query
words can be matched against the vocabulary.
"""

import logging
from collections import defaultdict
from typing import Any, Dict, FrozenSet, Optional, Set

from .bktree import BKTree
from .distance import get_distance_function
from .models import Document
from .tokenizer import Tokenizer

logger = logging.getLogger(__name__)

_EMPTY: FrozenSet[str] = frozenset()


class Indexer:
    """Handles inverted index construction and corpus statistics."""

    def __init__(self, config, tokenizer: Optional[Tokenizer] = None):
        """Initialize an empty index with configuration."""
        self.config = config
        self.tokenizer = tokenizer or Tokenizer(config)
        distance = get_distance_function(config.DISTANCE_BACKEND)

        self.vocabulary = BKTree(distance)
        self.postings: Dict[str, Set[str]] = defaultdict(set)
        self.field_lengths: Dict[str, int] = {}

        # Whole-title matching
        self.title_tree = BKTree(distance)
        self.title_postings: Dict[str, Set[str]] = defaultdict(set)

        self._avg_field_length: Optional[float] = None

    @property
    def num_documents(self) -> int:
        """Number of distinct documents indexed."""
        return len(self.field_lengths)

    def index_document(self, document: Document) -> None:
        """
        Add a document's composite field to the index.

        Every token is inserted into the vocabulary tree and the document id
        is added to that token's posting set. Indexing the same document
        twice leaves the postings unchanged.

        Args:
            document: The document to index.
        """
        tokens = list(self.tokenizer.tokenize(document.indexed_text))
        for tok in tokens:
            self.vocabulary.insert(tok)
            self.postings[tok].add(document.id)

        self.field_lengths[document.id] = len(tokens)
        self._avg_field_length = None
        logger.debug("Indexed document %s: %d tokens", document.id, len(tokens))

        title = self.tokenizer.normalize(document.title)
        if title:
            self.title_tree.insert(title)
            self.title_postings[title].add(document.id)

    def postings_for(self, token: str) -> FrozenSet[str]:
        """
        Get the posting set for a token.

        Args:
            token: Token to look up.

        Returns:
            Document ids containing the token (empty if unknown).
        """
        postings = self.postings.get(token)
        return frozenset(postings) if postings else _EMPTY

    def title_postings_for(self, title: str) -> FrozenSet[str]:
        """Get the ids of documents whose normalized title equals ``title``."""
        postings = self.title_postings.get(title)
        return frozenset(postings) if postings else _EMPTY

    def document_frequency(self, token: str) -> int:
        """
        Get the document frequency (number of documents containing the token).

        Args:
            token: Token to look up.

        Returns:
            Document frequency of the token.
        """
        postings = self.postings.get(token)
        return len(postings) if postings else 0

    def field_length(self, doc_id: str) -> int:
        """Token count of a document's composite field (0 if unknown)."""
        return self.field_lengths.get(doc_id, 0)

    def average_field_length(self) -> float:
        """
        Mean composite field length over all indexed documents.

        Returns:
            Average field length.

        Raises:
            ValueError: If no document has been indexed.
        """
        if not self.field_lengths:
            raise ValueError("Average field length is undefined for an empty index")
        if self._avg_field_length is None:
            self._avg_field_length = sum(self.field_lengths.values()) / len(self.field_lengths)
        return self._avg_field_length

    def get_index_stats(self) -> Dict[str, Any]:
        """
        Summarize the inverted index.

        Returns:
            Dictionary with vocabulary, posting and length statistics.
        """
        posting_lengths = sorted(len(p) for p in self.postings.values())
        stats: Dict[str, Any] = {
            "num_documents": self.num_documents,
            "unique_tokens": len(self.postings),
            "total_postings": sum(posting_lengths),
            "unique_titles": len(self.title_postings),
        }
        if posting_lengths:
            stats["avg_postings_per_token"] = round(stats["total_postings"] / len(posting_lengths), 2)
            stats["min_posting_length"] = posting_lengths[0]
            stats["max_posting_length"] = posting_lengths[-1]
            stats["median_posting_length"] = posting_lengths[len(posting_lengths) // 2]
        if self.field_lengths:
            stats["avg_field_length"] = round(self.average_field_length(), 2)
        return stats

"""
Document ranking and scoring module.

This module computes BM25 relevance scores from the statistics kept by
the inverted index.
"""

import math
from typing import Iterable

from .indexer import Indexer


class Ranker:
    """Handles document scoring using BM25."""

    def __init__(self, config, indexer: Indexer):
        """Initialize with configuration and the index to read statistics from."""
        self.config = config
        self.indexer = indexer
        self.k1 = config.BM25_K1
        self.b = config.BM25_B

    def idf(self, token: str) -> float:
        """
        Compute the inverse document frequency of a token.

        IDF formula: idf = ln((N - df + 0.5) / (df + 0.5) + 1)  (always positive)

        Args:
            token: The token.

        Returns:
            IDF score.
        """
        n = self.indexer.num_documents
        df = self.indexer.document_frequency(token)
        return math.log((n - df + 0.5) / (df + 0.5) + 1.0)

    def score_term(self, token: str, doc_id: str) -> float:
        """
        Compute the BM25 contribution of one token to one document.

        Postings are sets, so the term frequency is 1 when the document
        contains the token and 0 otherwise.

        Args:
            token: The token.
            doc_id: Document ID.

        Returns:
            BM25 term score (0.0 if the document lacks the token).
        """
        if doc_id not in self.indexer.postings_for(token):
            return 0.0

        tf = 1.0
        avg_len = self.indexer.average_field_length()
        norm = 1.0 - self.b + self.b * self.indexer.field_length(doc_id) / avg_len
        tfw = (tf * (self.k1 + 1.0)) / (tf + self.k1 * norm)
        return self.idf(token) * tfw

    def score(self, query_tokens: Iterable[str], doc_id: str) -> float:
        """
        Sum BM25 term scores over the query tokens.

        Args:
            query_tokens: Tokens of the query (repeats count once each).
            doc_id: Document ID.

        Returns:
            Relevance score; only comparable within a single query.
        """
        if self.indexer.num_documents == 0:
            return 0.0
        return sum(self.score_term(tok, doc_id) for tok in query_tokens)

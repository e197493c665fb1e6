"""
Main FuzzySearchEngine class that orchestrates the entire search pipeline.

This module contains the main FuzzySearchEngine class that coordinates
all components of the search system: document ingestion, indexing,
typo-tolerant candidate lookup and BM25 ranking.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Set, Tuple, Union

from .autocorrect import AutoCorrect
from .indexer import Indexer
from .loader import DocumentLoader
from .models import Document
from .ranker import Ranker
from .tokenizer import Tokenizer
from .utils import ResultFormatter
import config

logger = logging.getLogger(__name__)

MATCH_MODES = ("token", "title")


class FuzzySearchEngine:
    """
    Main search engine class that provides a unified interface for fuzzy search.

    Queries are matched against the vocabulary with an edit-distance radius
    that grows from 0 until enough documents are found or the radius cap is
    reached. Matches are ranked by BM25.
    """

    def __init__(self, config_dict: Optional[Dict] = None):
        """
        Initialize an empty FuzzySearchEngine.

        Args:
            config_dict: Optional configuration dictionary overriding defaults.

        Raises:
            ValueError: If the match mode or distance backend is unknown.
        """
        self.config = self._load_config(config_dict)
        if self.config.MATCH_MODE not in MATCH_MODES:
            raise ValueError(
                f"Unknown match mode {self.config.MATCH_MODE!r}; expected one of {MATCH_MODES}"
            )

        # Initialize components
        self.tokenizer = Tokenizer(self.config)
        self.indexer = Indexer(self.config, self.tokenizer)
        self.ranker = Ranker(self.config, self.indexer)
        self.auto_correct = AutoCorrect(self.config, self.indexer)
        self.result_formatter = ResultFormatter(self.config)

        # Corpus: id -> Document
        self.documents: Dict[str, Document] = {}

    def _load_config(self, config_dict: Optional[Dict]) -> Any:
        """Load configuration from config module, overlaid with a provided dictionary."""
        if config_dict:
            class Config:
                def __init__(self, settings):
                    for key, value in settings.items():
                        setattr(self, key, value)

            settings = {key: getattr(config, key) for key in dir(config) if key.isupper()}
            settings.update(config_dict)
            return Config(settings)
        return config

    def add_document(self, document: Document) -> None:
        """
        Add a document to the corpus and index it.

        Args:
            document: The document to add.
        """
        if document.id in self.documents and self.documents[document.id] != document:
            logger.debug("Replacing stored record for id %s", document.id)
        self.documents[document.id] = document
        self.indexer.index_document(document)

    def add_documents(self, documents: Iterable[Document]) -> int:
        """
        Add several documents.

        Args:
            documents: Documents to add.

        Returns:
            Number of documents consumed.
        """
        count = 0
        for doc in documents:
            self.add_document(doc)
            count += 1
        logger.info(
            "Indexed %d documents (%d in corpus, %d vocabulary tokens)",
            count, len(self.documents), len(self.indexer.vocabulary),
        )
        return count

    def load_documents(self, path: Union[str, Path], delimiter: Optional[str] = None) -> int:
        """
        Load and index a delimited catalogue file.

        Args:
            path: Path to the catalogue.
            delimiter: Field delimiter. If None, uses config default.

        Returns:
            Number of documents indexed.
        """
        loader = DocumentLoader(self.config, delimiter=delimiter)
        return self.add_documents(loader.iter_documents(path))

    def get_document(self, doc_id: str) -> Optional[Document]:
        """Look up a document by id."""
        return self.documents.get(doc_id)

    def _token_candidates(self, query_tokens: List[str], radius: int) -> Tuple[Set[str], List[str]]:
        """
        Documents matched by any query token at a radius, and the scoring terms.

        Each query token contributes one scoring term: itself when it is in
        the vocabulary, otherwise its closest vocabulary match.
        """
        doc_ids: Set[str] = set()
        terms: List[str] = []
        for tok in query_tokens:
            matches = self.indexer.vocabulary.search(tok, radius)
            for term in matches:
                doc_ids.update(self.indexer.postings_for(term))
            ranked = self.auto_correct.rank_candidates(tok, matches)
            if ranked:
                terms.append(ranked[0][0])
        return doc_ids, terms

    def _title_candidates(self, query_tokens: List[str], radius: int) -> Tuple[Set[str], List[str]]:
        """Documents whose whole normalized title lies within a radius of the query."""
        doc_ids: Set[str] = set()
        for title in self.indexer.title_tree.search(" ".join(query_tokens), radius):
            doc_ids.update(self.indexer.title_postings_for(title))
        return doc_ids, query_tokens

    def _search(self, query: str, top_k: Optional[int],
                max_radius: Optional[int]) -> Tuple[List[Tuple[Document, float]], List[str]]:
        """Run the widening search; also return the terms the results were scored on."""
        if top_k is None:
            top_k = self.config.TOP_K_RESULTS
        if max_radius is None:
            max_radius = self.config.MAX_RADIUS

        query_tokens = list(self.tokenizer.tokenize(query))
        if not query_tokens or top_k <= 0 or not self.documents:
            return [], []

        if self.config.MATCH_MODE == "title":
            candidates = self._title_candidates
        else:
            candidates = self._token_candidates

        # doc id -> radius at which it was first found
        found: Dict[str, int] = {}
        terms: List[str] = []
        for radius in range(max_radius + 1):
            doc_ids, terms = candidates(query_tokens, radius)
            new_ids = sorted(doc_ids.difference(found))
            for doc_id in new_ids:
                found[doc_id] = radius
            logger.debug("Radius %d: %d new documents, %d total", radius, len(new_ids), len(found))
            if len(found) >= top_k:
                break

        scores = {doc_id: self.ranker.score(terms, doc_id) for doc_id in found}
        ranked = sorted(scores.items(), key=lambda x: (-x[1], x[0]))[:top_k]
        return [(self.documents[doc_id], score) for doc_id, score in ranked], terms

    def search(self, query: str, top_k: Optional[int] = None,
               max_radius: Optional[int] = None) -> List[Tuple[Document, float]]:
        """
        Search for documents matching the given query.

        The edit-distance radius starts at 0 and grows by one until at least
        top_k distinct documents have been found or max_radius has been
        searched. Every document found is then scored once against the same
        terms, one per query token, so documents containing a query word
        rank at or above documents that only contain a near miss.

        Args:
            query: Search query string.
            top_k: Number of results to return. If None, uses config default.
            max_radius: Largest radius to try. If None, uses config default.

        Returns:
            List of (document, score) tuples sorted by descending score, ties
            broken by document id.
        """
        results, _terms = self._search(query, top_k, max_radius)
        return results

    def suggest_corrections(self, query: str) -> List[Tuple[str, str]]:
        """
        Suggest vocabulary words for misspelled query words.

        Args:
            query: Search query string.

        Returns:
            List of (original, suggestion) pairs.
        """
        return self.auto_correct.get_corrections(list(self.tokenizer.tokenize(query)))

    def interactive_search(self, top_k: Optional[int] = None, max_radius: Optional[int] = None) -> None:
        """
        Start an interactive search session.

        This method provides a command-line interface for searching.
        Type 'exit' or 'quit' to end the session.
        """
        print("\n=== Interactive Search ===")
        print("Type 'exit' or 'quit' to quit.")

        while True:
            try:
                query = input("Enter a book title to search: ").strip()
            except (EOFError, KeyboardInterrupt):
                print("\nExiting.")
                break

            if not query:
                continue
            if query.lower() in ("exit", "quit"):
                print("Goodbye!")
                break

            self.run_query(query, top_k=top_k, max_radius=max_radius)

    def run_query(self, query: str, top_k: Optional[int] = None,
                  max_radius: Optional[int] = None) -> List[Tuple[Document, float]]:
        """Search, print suggestions and results, and return the results."""
        if self.config.AUTO_CORRECT_ENABLED:
            changes = self.suggest_corrections(query)
            if changes:
                print("Did you mean: " + ", ".join(f"{w} -> {s}" for w, s in changes))

        results, terms = self._search(query, top_k, max_radius)
        if results:
            self.result_formatter.print_results(results, terms)
        else:
            print(f"No books found for the query: {query}")
        return results

    def get_stats(self) -> Dict[str, Any]:
        """
        Get statistics about the built index.

        Returns:
            Dictionary containing various statistics.
        """
        stats = {
            "num_documents": len(self.documents),
            "match_mode": self.config.MATCH_MODE,
            "distance_backend": self.config.DISTANCE_BACKEND,
            "max_radius": self.config.MAX_RADIUS,
        }
        stats.update(self.indexer.get_index_stats())
        return stats

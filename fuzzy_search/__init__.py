"""
Fuzzy Book Search Engine

A typo-tolerant search engine over an in-memory book catalogue, combining
a BK-tree over the vocabulary with BM25 ranking.

Main components:
- FuzzySearchEngine: Main search engine class
- Tokenizer: Lowercase alphanumeric tokenization
- BKTree: Edit-distance metric tree for approximate lookup
- Indexer: Inverted index and corpus statistics
- Ranker: Document scoring using BM25
- AutoCorrect: "Did you mean" suggestions for query words
- DocumentLoader: Catalogue loading from delimited files
- ResultFormatter: Console output of ranked results
"""

from .search_engine import FuzzySearchEngine
from .models import Document
from .tokenizer import Tokenizer
from .distance import levenshtein_distance, get_distance_function
from .bktree import BKTree
from .indexer import Indexer
from .ranker import Ranker
from .autocorrect import AutoCorrect
from .loader import DocumentLoader
from .utils import ResultFormatter

__version__ = "1.0.0"
__author__ = "Rohan Jain"

__all__ = [
    "FuzzySearchEngine",
    "Document",
    "Tokenizer",
    "levenshtein_distance",
    "get_distance_function",
    "BKTree",
    "Indexer",
    "Ranker",
    "AutoCorrect",
    "DocumentLoader",
    "ResultFormatter",
]

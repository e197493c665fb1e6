"""
Configuration settings for the Fuzzy Book Search Engine.

This module contains all configurable parameters for the search engine.
Modify these values to customize the behavior of the system.
"""

from pathlib import Path

# Project paths
PROJECT_ROOT = Path(__file__).parent
DATA_DIR = PROJECT_ROOT / "data"
DATA_FILE = DATA_DIR / "books.csv"  # Default catalogue for the CLI

# Ingestion settings
CSV_DELIMITER = ","  # Field delimiter of the catalogue file
CSV_FIELDS = ["id", "title", "author", "category", "year"]  # Required columns

# Matching settings
MATCH_MODE = "token"  # "token" (per query word) or "title" (whole titles)
DISTANCE_BACKEND = "table"  # "table" (DP table) or "rapidfuzz"
MAX_RADIUS = 5  # Largest edit distance tried while widening
TOP_K_RESULTS = 5  # Number of results to return

# BM25 settings
BM25_K1 = 1.5  # Term frequency saturation
BM25_B = 0.75  # Document length normalization

# Auto-correction settings
AUTO_CORRECT_ENABLED = True  # Show "did you mean" suggestions in the CLI
MAX_EDIT_DISTANCE = 2  # Maximum edit distance for suggestions

# Logging settings
LOG_LEVEL = "INFO"  # Logging level: DEBUG, INFO, WARNING, ERROR
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Result formatting
RESULT_FORMAT = "table"  # Result format: "table" or "list"
SHOW_SCORES = True  # Show relevance scores in results

# Highlighting settings
HIGHLIGHT_START = "[["  # Start marker for highlighting
HIGHLIGHT_END = "]]"  # End marker for highlighting
HIGHLIGHT_CASE_SENSITIVE = False  # Case sensitivity for highlighting

# Reproducibility
RANDOM_SEED = 42  # Random seed for generated test vocabularies

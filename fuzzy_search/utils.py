"""
Utility functions for result formatting.

This module contains helpers for highlighting matched words and printing
ranked search results to the console.
"""

import re
from typing import List, Optional, Tuple

from .models import Document


class ResultFormatter:
    """Handles result formatting and display."""

    def __init__(self, config):
        """Initialize with configuration."""
        self.config = config

    def highlight_words(self, text: str, words: List[str]) -> str:
        """
        Naive console-safe highlighter: wraps whole-word matches with [[ ]].

        Args:
            text: Text to highlight.
            words: List of words to highlight.

        Returns:
            Highlighted text.
        """
        # Deduplicate and sort longer-first to avoid partial overshadowing
        uniq = sorted({w for w in words if w}, key=len, reverse=True)
        if not uniq:
            return text

        def repl(match):
            return f"{self.config.HIGHLIGHT_START}{match.group(0)}{self.config.HIGHLIGHT_END}"

        patterns = [r"\b" + re.escape(w) + r"\b" for w in uniq]
        flags = re.IGNORECASE if not self.config.HIGHLIGHT_CASE_SENSITIVE else 0
        regex = re.compile("|".join(patterns), flags=flags)
        return regex.sub(repl, text)

    def format_rows(self, ranked: List[Tuple[Document, float]], highlight: Optional[List[str]] = None) -> List[List[str]]:
        """Turn ranked results into table rows of strings."""
        rows = []
        for rank, (doc, score) in enumerate(ranked, start=1):
            title = self.highlight_words(doc.title, highlight or [])
            row = [str(rank), doc.id, title, doc.author, doc.category, str(doc.year)]
            if self.config.SHOW_SCORES:
                row.append(f"{score:.4f}")
            rows.append(row)
        return rows

    def print_results_table(self, ranked: List[Tuple[Document, float]], highlight: Optional[List[str]] = None) -> None:
        """
        Render ranked results as a clean ASCII table.

        Args:
            ranked: List of (document, score) tuples.
            highlight: Words to highlight in titles.
        """
        if not ranked:
            print("No matching books found.")
            return

        rows = self.format_rows(ranked, highlight)
        headers = ["#", "ID", "Title", "Author", "Category", "Year"]
        max_widths = [3, 14, 48, 28, 24, 4]
        if self.config.SHOW_SCORES:
            headers.append("Score")
            max_widths.append(8)

        col_widths = []
        for j, h in enumerate(headers):
            width = len(h)
            for row in rows:
                width = max(width, len(row[j]))
            col_widths.append(min(width, max_widths[j]))

        def clip_pad(s, w):
            if len(s) > w:
                return s[: max(0, w - 1)] + "…" if w >= 2 else s[:w]
            return s.ljust(w)

        print("\n=== Top Results ===")
        print(" | ".join(clip_pad(h, col_widths[i]) for i, h in enumerate(headers)))
        print("-+-".join("-" * w for w in col_widths))
        for row in rows:
            print(" | ".join(clip_pad(row[i], col_widths[i]) for i in range(len(headers))))
        print()

    def print_results_simple(self, ranked: List[Tuple[Document, float]], highlight: Optional[List[str]] = None) -> None:
        """Print one line per ranked result."""
        if not ranked:
            print("No matching books found.")
            return

        print("\n=== Top Results ===")
        for rank, (doc, score) in enumerate(ranked, start=1):
            title = self.highlight_words(doc.title, highlight or [])
            line = f"#{rank}  {title} by {doc.author} ({doc.category}, {doc.year})  id={doc.id}"
            if self.config.SHOW_SCORES:
                line += f"  score={score:.4f}"
            print(line)
        print()

    def print_results(self, ranked: List[Tuple[Document, float]], highlight: Optional[List[str]] = None) -> None:
        """Print results in the configured RESULT_FORMAT."""
        if self.config.RESULT_FORMAT == "list":
            self.print_results_simple(ranked, highlight)
        else:
            self.print_results_table(ranked, highlight)

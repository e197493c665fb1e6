"""
Text tokenization module.

This module splits free text into lowercase alphanumeric tokens. The same
tokenizer is used for indexing documents and for parsing queries so both
sides agree on the vocabulary.
"""

from typing import Iterable, Iterator, List


class Tokenizer:
    """Splits text into lowercase alphanumeric tokens."""

    def __init__(self, config=None):
        """Initialize with configuration."""
        self.config = config

    def tokenize(self, text: str) -> Iterator[str]:
        """
        Lazily yield the tokens of a text.

        A token is a maximal run of alphanumeric characters, lowercased.
        Every other character is a delimiter and is discarded.

        Args:
            text: Arbitrary input text.

        Yields:
            Lowercase tokens in order of appearance.
        """
        word: List[str] = []
        for ch in text:
            if ch.isalnum():
                word.append(ch)
            elif word:
                yield "".join(word).lower()
                word = []
        if word:
            yield "".join(word).lower()

    def tokenize_fields(self, fields: Iterable[str]) -> Iterator[str]:
        """Tokenize several fields as a single stream."""
        for field in fields:
            yield from self.tokenize(field)

    def normalize(self, text: str) -> str:
        """Collapse text to its tokens joined by single spaces."""
        return " ".join(self.tokenize(text))

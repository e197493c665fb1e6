"""
Data models for the search engine.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Document:
    """
    A book record in the corpus.

    Attributes:
        id: Unique, stable identifier (primary key and natural sort key).
        title: Book title.
        author: Author name.
        category: Genre or subject category.
        year: Publication year.
    """

    id: str
    title: str
    author: str
    category: str
    year: int

    @property
    def indexed_text(self) -> str:
        """Composite indexed field: title, author and category."""
        return " ".join((self.title, self.author, self.category))

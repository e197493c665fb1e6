"""
Catalogue loading.

Reads book records from a delimited text file with a header row and turns
them into Document values. Malformed rows are skipped so the index only
ever sees complete records.
"""

import csv
import logging
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Union

from .models import Document

logger = logging.getLogger(__name__)


class DocumentLoader:
    """Loads Document records from CSV/TSV files."""

    def __init__(self, config, delimiter: Optional[str] = None):
        """Initialize with configuration and an optional delimiter override."""
        self.config = config
        self.delimiter = delimiter or config.CSV_DELIMITER
        self.fields = list(config.CSV_FIELDS)

    def parse_record(self, row: Dict[str, Optional[str]]) -> Document:
        """
        Build a Document from one parsed row.

        Args:
            row: Mapping of column name to raw value.

        Returns:
            The parsed document.

        Raises:
            ValueError: If a required field is missing or empty, or the year
                is not an integer.
        """
        values = {}
        for name in self.fields:
            raw = row.get(name)
            if raw is None or not raw.strip():
                raise ValueError(f"missing field {name!r}")
            values[name] = raw.strip()

        try:
            year = int(values["year"])
        except ValueError:
            raise ValueError(f"non-numeric year {values['year']!r}") from None

        return Document(
            id=values["id"],
            title=values["title"],
            author=values["author"],
            category=values["category"],
            year=year,
        )

    def iter_documents(self, path: Union[str, Path]) -> Iterator[Document]:
        """
        Yield the well-formed documents of a catalogue file.

        Args:
            path: Path to the delimited file.

        Yields:
            Parsed documents; malformed rows are logged and skipped.
        """
        path = Path(path)
        with open(path, "r", encoding="utf-8", newline="") as f:
            reader = csv.DictReader(f, delimiter=self.delimiter)
            for line_no, row in enumerate(reader, start=2):
                try:
                    yield self.parse_record(row)
                except ValueError as e:
                    logger.warning("Skipping %s line %d: %s", path.name, line_no, e)

    def load(self, path: Union[str, Path]) -> List[Document]:
        """Load all well-formed documents of a catalogue file."""
        documents = list(self.iter_documents(path))
        logger.info("Loaded %d documents from %s", len(documents), path)
        return documents

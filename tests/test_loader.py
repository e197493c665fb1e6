import logging

import pytest

import config
from fuzzy_search import Document, DocumentLoader, FuzzySearchEngine

CSV_TEXT = """id,title,author,category,year
54321,Clean Code,Robert Martin,Software Engineering,2008
99999,Broken Year,Someone,Fiction,not-a-year
88888,,No Title,Fiction,2001
77777,Short Row
67890,"The Pragmatic, The Programmer",Andrew Hunt,Software Engineering,1999
"""


@pytest.fixture
def catalogue_file(tmp_path):
    path = tmp_path / "books.csv"
    path.write_text(CSV_TEXT, encoding="utf-8")
    return path


def test_load_skips_malformed_rows(catalogue_file, caplog):
    loader = DocumentLoader(config)
    with caplog.at_level(logging.WARNING, logger="fuzzy_search.loader"):
        docs = loader.load(catalogue_file)

    assert docs == [
        Document("54321", "Clean Code", "Robert Martin", "Software Engineering", 2008),
        Document("67890", "The Pragmatic, The Programmer", "Andrew Hunt", "Software Engineering", 1999),
    ]
    warnings = [r.getMessage() for r in caplog.records]
    assert len(warnings) == 3
    assert any("non-numeric year" in w and "line 3" in w for w in warnings)
    assert any("missing field 'title'" in w for w in warnings)


def test_tab_delimited(tmp_path):
    path = tmp_path / "books.tsv"
    path.write_text(
        "id\ttitle\tauthor\tcategory\tyear\n1\tRefactoring\tMartin Fowler\tSoftware\t1999\n",
        encoding="utf-8",
    )
    docs = DocumentLoader(config, delimiter="\t").load(path)
    assert docs == [Document("1", "Refactoring", "Martin Fowler", "Software", 1999)]


def test_parse_record_strips_whitespace():
    loader = DocumentLoader(config)
    doc = loader.parse_record({"id": " 7 ", "title": " Dune ", "author": "Frank Herbert",
                               "category": "Fiction", "year": " 1965 "})
    assert doc == Document("7", "Dune", "Frank Herbert", "Fiction", 1965)


def test_parse_record_rejects_missing_field():
    with pytest.raises(ValueError):
        DocumentLoader(config).parse_record({"id": "1", "title": "Dune"})


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        DocumentLoader(config).load(tmp_path / "nope.csv")


def test_engine_load_documents(catalogue_file):
    engine = FuzzySearchEngine()
    assert engine.load_documents(catalogue_file) == 2
    assert [doc.id for doc, _ in engine.search("pragmatc", top_k=1)] == ["67890"]


def test_bundled_catalogue_loads():
    engine = FuzzySearchEngine()
    assert engine.load_documents(config.DATA_FILE) == 10

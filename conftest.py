import pytest

from fuzzy_search import Document, FuzzySearchEngine

CATALOGUE = [
    Document("12345", "C++ The Programmer", "Bjarne Stroustrup", "Programming", 1997),
    Document("67890", "The Pragmatic The Programmer", "Andrew Hunt", "Software Engineering", 1999),
    Document("54321", "Clean Code", "Robert Martin", "Software Engineering", 2008),
    Document("54322", "The Clean Coder", "Robert Martin", "Software Engineering", 2011),
    Document("11111", "Refactoring", "Martin Fowler", "Software Engineering", 1999),
    Document("33333", "Introduction to Algorithms", "Thomas Cormen", "Computer Science", 1990),
]


@pytest.fixture
def catalogue():
    return list(CATALOGUE)


@pytest.fixture
def engine(catalogue):
    eng = FuzzySearchEngine()
    eng.add_documents(catalogue)
    return eng


@pytest.fixture
def clean_code_engine():
    """The two-book corpus used by the ranking scenarios."""
    eng = FuzzySearchEngine()
    eng.add_document(Document("1", "Clean Code", "Robert Martin", "Software", 2008))
    eng.add_document(Document("2", "Clean Coder", "Robert Martin", "Software", 2011))
    return eng

#!/usr/bin/env python3
"""
Example usage of the Fuzzy Book Search Engine.

This script demonstrates how to use the search engine programmatically
for various search tasks.
"""

import sys
from pathlib import Path

# Add parent directory to path to import fuzzy_search
sys.path.append(str(Path(__file__).parent.parent))

from fuzzy_search import Document, FuzzySearchEngine
import config

BOOKS = [
    Document("12345", "C++ The Programmer", "Bjarne Stroustrup", "Programming", 1997),
    Document("67890", "The Pragmatic The Programmer", "Andrew Hunt", "Software Engineering", 1999),
    Document("54321", "Clean Code", "Robert Martin", "Software Engineering", 2008),
]


def basic_search_example():
    """Demonstrate basic search functionality."""
    print("=== Basic Search Example ===")

    engine = FuzzySearchEngine()
    engine.add_documents(BOOKS)

    for query in ["programmer", "clean code", "stroustrup"]:
        print(f"\nSearching for: '{query}'")
        results = engine.search(query, top_k=3)
        for i, (doc, score) in enumerate(results, 1):
            print(f"  {i}. Score: {score:.4f} | {doc.title} by {doc.author}")


def typo_example():
    """Demonstrate typo-tolerant search and suggestions."""
    print("\n=== Typo Example ===")

    engine = FuzzySearchEngine()
    engine.add_documents(BOOKS)

    for query in ["clena cdoe", "pragmatc", "progarmmer"]:
        print(f"\nOriginal query: '{query}'")
        changes = engine.suggest_corrections(query)
        if changes:
            print(f"Did you mean: {changes}")
        for doc, score in engine.search(query, top_k=3):
            print(f"  {doc.title} ({score:.4f})")


def catalogue_example():
    """Demonstrate loading a catalogue file and title matching."""
    print("\n=== Catalogue Example ===")

    engine = FuzzySearchEngine(config_dict={"MATCH_MODE": "title"})
    engine.load_documents(config.DATA_FILE)

    stats = engine.get_stats()
    print("Index Statistics:")
    for key, value in stats.items():
        print(f"  {key}: {value}")

    engine.run_query("the clean codr", top_k=3)


def main():
    """Run all examples."""
    print("Fuzzy Book Search Engine - Example Usage")
    print("=" * 50)

    try:
        basic_search_example()
        typo_example()
        catalogue_example()

        print("\n" + "=" * 50)
        print("All examples completed successfully!")

    except Exception as e:
        print(f"Error running examples: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()

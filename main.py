#!/usr/bin/env python3
"""
Main entry point for the Fuzzy Book Search Engine.

This script provides a command-line interface for the search engine.
"""

import argparse
import logging
import sys

from fuzzy_search import FuzzySearchEngine
import config


def main():
    """Main entry point for the search engine."""
    parser = argparse.ArgumentParser(
        description="Typo-tolerant book search with a BK-tree and BM25 ranking",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py                                   # Start interactive search
  python main.py --data ./books.tsv --delimiter '\\t'
  python main.py --query "clena code"              # Single query mode
  python main.py --mode title --query "clean coder"
        """
    )

    parser.add_argument(
        "--data",
        type=str,
        default=None,
        help="Delimited catalogue file with columns id,title,author,category,year (default: data/books.csv)"
    )

    parser.add_argument(
        "--delimiter",
        type=str,
        default=None,
        help="Field delimiter of the catalogue (default: ',')"
    )

    parser.add_argument(
        "--query",
        type=str,
        default=None,
        help="Single query to process (non-interactive mode)"
    )

    parser.add_argument(
        "--top-k",
        type=int,
        default=None,
        help="Number of results to return (default: 5)"
    )

    parser.add_argument(
        "--max-radius",
        type=int,
        default=None,
        help="Largest edit distance tried while widening (default: 5)"
    )

    parser.add_argument(
        "--mode",
        choices=["token", "title"],
        default=None,
        help="Match query words against the vocabulary or whole titles"
    )

    parser.add_argument(
        "--stats",
        action="store_true",
        help="Show index statistics after loading"
    )

    parser.add_argument(
        "--log-level",
        type=str,
        default=config.LOG_LEVEL,
        help="Logging level: DEBUG, INFO, WARNING, ERROR"
    )

    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format=config.LOG_FORMAT)

    overrides = {}
    if args.mode:
        overrides["MATCH_MODE"] = args.mode
    if args.delimiter:
        overrides["CSV_DELIMITER"] = args.delimiter.encode().decode("unicode_escape")

    # Initialize search engine
    try:
        engine = FuzzySearchEngine(config_dict=overrides)
    except Exception as e:
        print(f"Error initializing search engine: {e}")
        sys.exit(1)

    # Load catalogue
    data_file = args.data or config.DATA_FILE
    try:
        count = engine.load_documents(data_file)
        print(f"Indexed {count} books from {data_file}")
    except Exception as e:
        print(f"Error loading catalogue: {e}")
        sys.exit(1)

    # Show statistics if requested
    if args.stats:
        stats = engine.get_stats()
        print("\n=== Index Statistics ===")
        for key, value in stats.items():
            print(f"{key}: {value}")

    if args.query:
        # Single query mode
        try:
            engine.run_query(args.query, top_k=args.top_k, max_radius=args.max_radius)
        except Exception as e:
            print(f"Error processing query: {e}")
            sys.exit(1)
    else:
        # Interactive mode
        try:
            engine.interactive_search(top_k=args.top_k, max_radius=args.max_radius)
        except KeyboardInterrupt:
            print("\nExiting.")
        except Exception as e:
            print(f"Error in interactive mode: {e}")
            sys.exit(1)


if __name__ == "__main__":
    main()

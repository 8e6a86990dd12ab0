"""
Build the keyword index in memory and print analytics for it.

Usage:
    python index_stats.py --docs docs.txt --noise noisewords.txt

Document names in the docs file are resolved relative to that file.

Output:
  - Analytics table printed to console (documents, keywords, occurrences)
"""

import argparse
import sys
from pathlib import Path

from keyword_search import SearchSession


def main() -> None:
    parser = argparse.ArgumentParser(description="Print keyword index analytics")
    parser.add_argument(
        "--docs",
        type=Path,
        default=Path("docs.txt"),
        help="File listing the documents to index (default: docs.txt)",
    )
    parser.add_argument(
        "--noise",
        type=Path,
        default=Path("noisewords.txt"),
        help="File listing the noise words (default: noisewords.txt)",
    )
    args = parser.parse_args()

    session = SearchSession()
    try:
        session.make_index(args.docs, args.noise)
    except FileNotFoundError as e:
        print(f"Error: {e}")
        sys.exit(1)

    if not session.documents:
        print(f"No documents listed in {args.docs}.")
        sys.exit(1)

    print("\n" + "=" * 50)
    print("KEYWORD INDEX ANALYTICS")
    print("=" * 50)
    print()
    print("| Metric                      | Value |")
    print("|-----------------------------|-------|")
    print(f"| Number of indexed documents | {len(session.documents)} |")
    print(f"| Number of unique keywords   | {len(session.index)} |")
    print(f"| Number of occurrences       | {session.index.num_occurrences()} |")
    print(f"| Number of noise words       | {len(session.noise_words)} |")
    print()
    print("=" * 50)
    print()


if __name__ == "__main__":
    main()

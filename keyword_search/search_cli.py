"""
Interactive search over a keyword index built in memory.

Documents are listed one name per line (whitespace separated) in a docs file;
noise words likewise in a noise words file. Queries are two keywords, with an
optional "or" between them: "deep world" or "deep or world".

Usage (from the directory holding the documents):
    python -m keyword_search.search_cli --docs docs.txt --noise noisewords.txt
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, List, Optional

from .engine import SearchSession
from .tokenizer import load_nltk_stopwords


def parse_query(raw_query: str) -> Optional[List[str]]:
    """
    Split a raw query into its two words, or None if it is not "kw1 [or] kw2".
    """
    words = raw_query.split()
    if len(words) == 3 and words[1].lower() == "or":
        words = [words[0], words[2]]
    if len(words) != 2:
        return None
    return words


def run_search_loop(session: SearchSession) -> None:
    """
    Interactive command-line search loop.
    """
    print("Enter queries as 'kw1 or kw2'. Empty line or Ctrl+C to exit.")

    while True:
        try:
            raw_query = input("query> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if not raw_query:
            break

        words = parse_query(raw_query)
        if words is None:
            print("Queries take exactly two keywords, e.g. 'deep or world'.")
            continue

        keywords: List[str] = []
        for word in words:
            keyword = session.get_keyword(word)
            if keyword is None:
                print(f"'{word}' is not a keyword; it matches nothing.")
                keyword = ""
            keywords.append(keyword)

        results = session.top5_search(keywords[0], keywords[1])
        if not results:
            print("No documents matched the query.")
            continue

        print(f"Top {len(results)} results:")
        for rank, document in enumerate(results, start=1):
            print(f"{rank:2d}. {document}")


def main(argv: Iterable[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Two-keyword OR search over a document set.")
    parser.add_argument(
        "--docs",
        type=Path,
        default=Path("docs.txt"),
        help="File listing the documents to index.",
    )
    parser.add_argument(
        "--noise",
        type=Path,
        default=Path("noisewords.txt"),
        help="File listing the noise words.",
    )
    parser.add_argument(
        "--nltk-stopwords",
        action="store_true",
        help="Use nltk's English stop words instead of a noise words file.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log indexing progress.",
    )
    args = parser.parse_args(list(argv) if argv is not None else None)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.nltk_stopwords:
        session = SearchSession(load_nltk_stopwords())
        noise_file = None
    else:
        session = SearchSession()
        noise_file = args.noise

    try:
        session.make_index(args.docs, noise_file)
    except FileNotFoundError as e:
        print(f"Error: {e}")
        sys.exit(1)

    print(f"Indexed {len(session.documents)} documents, {len(session.index)} keywords.")
    run_search_loop(session)


if __name__ == "__main__":
    main()

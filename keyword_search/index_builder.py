"""
Index builder: constructs the keyword index from a list of documents.
Each document is scanned into per-document keyword counts, which are then
merged into the global index one document at a time.
"""

import logging
from collections import Counter
from pathlib import Path
from typing import Callable, Iterable

from .occurrence import KeywordIndex, Occurrence
from .tokenizer import get_keyword, scan_document

logger = logging.getLogger(__name__)


def load_keywords_from_document(
    document: str,
    tokens: Iterable[str],
    noise_words: set[str] | frozenset[str],
) -> dict[str, Occurrence]:
    """
    Count the keywords among a document's words.
    Words that are not keywords are skipped.
    Returns keyword -> Occurrence(document, count).
    """
    counts: Counter[str] = Counter()
    for word in tokens:
        keyword = get_keyword(word, noise_words)
        if keyword is not None:
            counts[keyword] += 1
    return {
        keyword: Occurrence(document=document, frequency=freq)
        for keyword, freq in counts.items()
    }


def merge_keywords(index: KeywordIndex, kws: dict[str, Occurrence]) -> None:
    """
    Merge one document's keywords into the index.
    A new keyword gets a one-element list; for a known keyword the occurrence
    is appended and moved into place by insert_last_occurrence.
    """
    for keyword, occurrence in kws.items():
        index.add_occurrence(keyword, occurrence)


def build_index(
    documents: Iterable[str],
    noise_words: set[str] | frozenset[str],
    scan: Callable[[str], Iterable[str]] = scan_document,
) -> KeywordIndex:
    """
    Build a keyword index over documents, indexed in the given order.
    scan maps a document identifier to its words; any error it raises
    (e.g. FileNotFoundError) aborts the build.
    """
    index = KeywordIndex()
    num_docs = 0
    for document in documents:
        kws = load_keywords_from_document(document, scan(document), noise_words)
        merge_keywords(index, kws)
        num_docs += 1
        logger.debug("Indexed %s (%d keywords)", document, len(kws))

    logger.info("Built index: %d documents, %d keywords", num_docs, len(index))
    return index


def document_scanner(base_dir: Path | None) -> Callable[[str], Iterable[str]]:
    """
    Return a scan function that resolves relative document names against base_dir.
    """
    def scan(document: str) -> Iterable[str]:
        path = Path(document)
        if base_dir is not None and not path.is_absolute():
            path = Path(base_dir) / path
        return scan_document(path)

    return scan

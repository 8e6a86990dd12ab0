"""
Index session: owns one keyword index and one noise word set.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional

from .index_builder import (
    build_index,
    document_scanner,
    load_keywords_from_document,
    merge_keywords,
)
from .occurrence import KeywordIndex, Occurrence, insert_last_occurrence
from .search import top5_search
from .tokenizer import get_keyword, load_document_list, load_word_list, scan_document


class SearchSession:
    """
    An indexing session. Noise words are loaded once, documents are merged
    one at a time, and the finished index answers two-keyword queries.
    """

    def __init__(self, noise_words: Iterable[str] = ()) -> None:
        self.index = KeywordIndex()
        self.noise_words: set[str] = set(noise_words)
        self.documents: List[str] = []

    def load_noise_words(self, words: Iterable[str]) -> None:
        self.noise_words.update(words)

    def get_keyword(self, word: str) -> Optional[str]:
        return get_keyword(word, self.noise_words)

    def load_keywords_from_document(self, document: str | Path) -> dict[str, Occurrence]:
        """Scan a document file and return its keyword occurrences."""
        return load_keywords_from_document(
            str(document), scan_document(Path(document)), self.noise_words
        )

    def merge_keywords(self, kws: dict[str, Occurrence]) -> None:
        merge_keywords(self.index, kws)

    @staticmethod
    def insert_last_occurrence(occs: List[Occurrence]) -> Optional[List[int]]:
        """
        Move the last occurrence into place and return the midpoints visited
        by the binary search, or None if occs has a single element.
        """
        if len(occs) == 1:
            return None
        mids: List[int] = []
        insert_last_occurrence(occs, trace=mids)
        return mids

    def make_index(
        self,
        docs_file: str | Path,
        noise_words_file: Optional[str | Path] = None,
    ) -> None:
        """
        Index every document listed in docs_file, using the noise words in
        noise_words_file on top of those the session already has. Document
        names are resolved relative to docs_file.

        If any source is missing the error propagates and the session is left
        as it was.
        """
        noise_words = set(self.noise_words)
        if noise_words_file is not None:
            noise_words.update(load_word_list(Path(noise_words_file)))
        docs_file = Path(docs_file)
        documents = load_document_list(docs_file)
        index = build_index(documents, noise_words, scan=document_scanner(docs_file.parent))
        self.noise_words = noise_words
        self.documents = documents
        self.index = index

    def top5_search(self, kw1: str, kw2: str) -> List[str]:
        return top5_search(self.index, kw1, kw2)

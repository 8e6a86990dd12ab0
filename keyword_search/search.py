"""
Query engine for two-keyword OR queries.

A document matches "kw1 or kw2" if either keyword occurs in it. Matches are
ranked by the keyword's frequency in the document, at most TOP_N are
returned, and each document appears once.
"""

from __future__ import annotations

from typing import List

from .occurrence import KeywordIndex, Occurrence

TOP_N = 5


def merge_ranked_occurrences(
    occs1: List[Occurrence],
    occs2: List[Occurrence],
) -> List[str]:
    """
    Merge two frequency-descending occurrence lists into a list of documents.
    Ties in frequency go to occs1. When both heads are the same document it is
    emitted once and both lists advance.
    """
    merged: List[str] = []
    i = j = 0
    while i < len(occs1) and j < len(occs2):
        a = occs1[i]
        b = occs2[j]
        if a.document == b.document:
            merged.append(a.document)
            i += 1
            j += 1
        elif a.frequency >= b.frequency:
            merged.append(a.document)
            i += 1
        else:
            merged.append(b.document)
            j += 1

    merged.extend(o.document for o in occs1[i:])
    merged.extend(o.document for o in occs2[j:])
    return merged


def top5_search(index: KeywordIndex, kw1: str, kw2: str) -> List[str]:
    """
    Return up to TOP_N documents in which kw1 or kw2 occurs, in descending
    order of frequency. Returns [] if neither keyword is in the index.
    """
    occs1 = index.get_occurrences(kw1)[:TOP_N]
    occs2 = index.get_occurrences(kw2)[:TOP_N]

    merged = merge_ranked_occurrences(occs1, occs2)[:TOP_N]

    # Later duplicates are dropped; the first position wins.
    results: List[str] = []
    for document in merged:
        if document not in results:
            results.append(document)
    return results

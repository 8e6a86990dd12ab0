"""
Occurrence and keyword index data structures.

An occurrence records how many times a keyword appears in one document.
The keyword index keeps, for every keyword, its occurrences in DESCENDING
order of frequency.
"""

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Occurrence:
    """
    A keyword's occurrence in a document.
    - document: document identifier (compared by value)
    - frequency: number of times the keyword occurs in that document
    """

    document: str
    frequency: int

    def __repr__(self) -> str:
        return f"({self.document},{self.frequency})"


def insert_last_occurrence(
    occs: list[Occurrence],
    trace: list[int] | None = None,
) -> int:
    """
    Move the last occurrence of occs into its place by descending frequency.

    occs[0..n-2] must already be in descending order. The position is found by
    binary search over that prefix; on an exact frequency match the new
    occurrence goes in front of the matched one. If trace is given, every
    midpoint index visited is appended to it in visitation order.

    Returns the index the occurrence was inserted at.
    """
    if not occs:
        raise ValueError("Cannot insert into an empty occurrence list")
    if len(occs) == 1:
        return 0

    target = occs.pop()
    lo = 0
    hi = len(occs) - 1
    pos = 0
    while lo <= hi:
        mid = lo + (hi - lo) // 2
        if trace is not None:
            trace.append(mid)
        freq = occs[mid].frequency
        if target.frequency < freq:
            lo = mid + 1
            pos = mid + 1
        elif target.frequency > freq:
            hi = mid - 1
            pos = mid
        else:
            pos = mid
            break

    occs.insert(pos, target)
    return pos


class KeywordIndex:
    """
    Keyword index: map from keyword -> occurrences sorted by descending frequency.
    """

    def __init__(self) -> None:
        self._index: dict[str, list[Occurrence]] = {}

    def add_occurrence(self, keyword: str, occurrence: Occurrence) -> None:
        """Add an occurrence for a keyword, keeping the list in frequency order."""
        occs = self._index.get(keyword)
        if occs is None:
            self._index[keyword] = [occurrence]
            return
        occs.append(occurrence)
        insert_last_occurrence(occs)

    def get_occurrences(self, keyword: str) -> list[Occurrence]:
        """Return the occurrence list for a keyword, or empty list."""
        return self._index.get(keyword, [])

    def keywords(self) -> Iterator[str]:
        """Iterate over all keywords in the index."""
        return iter(self._index)

    def num_occurrences(self) -> int:
        return sum(len(occs) for occs in self._index.values())

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, keyword: str) -> bool:
        return keyword in self._index

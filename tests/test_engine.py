from __future__ import annotations

import pytest

from keyword_search import SearchSession
from keyword_search.occurrence import Occurrence


def test_insert_last_occurrence_single_element_has_no_midpoints():
    occs = [Occurrence("docA", 15)]
    assert SearchSession.insert_last_occurrence(occs) is None
    assert occs == [Occurrence("docA", 15)]


def test_insert_last_occurrence_returns_midpoints():
    occs = [
        Occurrence("docA", 15),
        Occurrence("docB", 8),
        Occurrence("docC", 3),
        Occurrence("docX", 10),
    ]
    assert SearchSession.insert_last_occurrence(occs) == [1, 0]
    assert occs[1] == Occurrence("docX", 10)


def test_make_index_and_search(corpus):
    docs, noise = corpus
    session = SearchSession()
    session.make_index(docs, noise)

    assert session.documents == ["doc1.txt", "doc2.txt"]
    assert session.noise_words == {"the", "a", "of"}
    assert "the" not in session.index
    assert session.index.get_occurrences("deep") == [
        Occurrence("doc1.txt", 3),
        Occurrence("doc2.txt", 1),
    ]
    assert session.index.get_occurrences("world") == [Occurrence("doc2.txt", 3)]
    assert session.top5_search("deep", "world") == ["doc1.txt", "doc2.txt"]
    assert session.top5_search("hello", "sea") == ["doc2.txt", "doc1.txt"]
    assert session.top5_search("sea", "hello") == ["doc1.txt", "doc2.txt"]
    assert session.top5_search("ocean", "river") == []


def test_make_index_without_noise_file(corpus):
    docs, _ = corpus
    session = SearchSession(["deep"])
    session.make_index(docs)
    assert "deep" not in session.index
    assert session.index.get_occurrences("the") == [Occurrence("doc1.txt", 1)]


def test_missing_document_aborts_construction(corpus):
    docs, noise = corpus
    docs.write_text("doc1.txt\nmissing.txt\n", encoding="utf-8")
    session = SearchSession()
    with pytest.raises(FileNotFoundError, match="missing.txt"):
        session.make_index(docs, noise)
    assert len(session.index) == 0
    assert session.documents == []
    assert session.noise_words == set()


def test_missing_sources(tmp_path, corpus):
    docs, noise = corpus
    session = SearchSession()
    with pytest.raises(FileNotFoundError):
        session.make_index(tmp_path / "nodocs.txt", noise)
    with pytest.raises(FileNotFoundError):
        session.make_index(docs, tmp_path / "nonoise.txt")


def test_session_keyword_and_document_loading(corpus):
    docs, _ = corpus
    session = SearchSession()
    session.load_noise_words(["the", "hello"])
    assert session.get_keyword("The") is None
    assert session.get_keyword("Water,") == "water"

    doc2 = docs.parent / "doc2.txt"
    kws = session.load_keywords_from_document(doc2)
    assert kws == {
        "world": Occurrence(str(doc2), 3),
        "deep": Occurrence(str(doc2), 1),
    }

    session.merge_keywords(kws)
    assert session.top5_search("world", "deep") == [str(doc2)]

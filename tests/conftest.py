from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def corpus(tmp_path: Path) -> tuple[Path, Path]:
    """A two-document corpus on disk; returns (docs file, noise words file)."""
    (tmp_path / "doc1.txt").write_text("The deep sea. Deep water, deep!\n", encoding="utf-8")
    (tmp_path / "doc2.txt").write_text("Hello world! deep world,\nworld.\n", encoding="utf-8")
    docs = tmp_path / "docs.txt"
    docs.write_text("doc1.txt\ndoc2.txt\n", encoding="utf-8")
    noise = tmp_path / "noisewords.txt"
    noise.write_text("the\na\nof\n", encoding="utf-8")
    return docs, noise

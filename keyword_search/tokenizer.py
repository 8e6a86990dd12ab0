"""
Document scanner and keyword normalizer for the keyword search engine.
Reads documents, splits them on whitespace, and turns raw words into keywords.
HTML documents have their visible text extracted first.
"""

import json
import warnings
from pathlib import Path
from typing import Iterable, Iterator

from bs4 import BeautifulSoup, XMLParsedAsHTMLWarning, MarkupResemblesLocatorWarning
warnings.filterwarnings("ignore", category=XMLParsedAsHTMLWarning)
warnings.filterwarnings("ignore", category=MarkupResemblesLocatorWarning)

from nltk import download as _nltk_download
from nltk.tokenize import WhitespaceTokenizer

# Characters stripped from the end of a word; anywhere else they disqualify it
KEYWORD_PUNCTUATION = ".,?:;!"

# Words containing any of these are never keywords
EXCLUDED_CHARACTERS = "-'"

HTML_SUFFIXES = {".html", ".htm"}

_WHITESPACE = WhitespaceTokenizer()


def get_keyword(word: str, noise_words: set[str] | frozenset[str]) -> str | None:
    """
    Return word as a keyword, or None if it is not one.

    A keyword has no hyphen or apostrophe, has all trailing punctuation
    stripped ("word?!?!" -> "word"), contains no other punctuation, is not a
    noise word in either its typed or lowercase form, and is returned in
    lower case. A word made only of punctuation is rejected.
    """
    if any(c in word for c in EXCLUDED_CHARACTERS):
        return None

    stripped = word.rstrip(KEYWORD_PUNCTUATION)
    if not stripped:
        return None
    if any(c in stripped for c in KEYWORD_PUNCTUATION):
        return None

    if stripped in noise_words:
        return None
    keyword = stripped.lower()
    if keyword in noise_words:
        return None
    return keyword


def split_whitespace(text: str) -> list[str]:
    """Split text into whitespace-delimited words."""
    if not text:
        return []
    return _WHITESPACE.tokenize(text)


def extract_text_from_html(html_content: str) -> str:
    """
    Extract visible text from HTML content, stripping tags and scripts.
    """
    soup = BeautifulSoup(html_content, "lxml")
    for element in soup(["script", "style"]):
        element.decompose()
    return soup.get_text(separator=" ", strip=True)


def read_text_file(filepath: Path) -> str:
    """
    Read file content, handling common encodings.
    """
    filepath = Path(filepath)
    if not filepath.is_file():
        raise FileNotFoundError(f"File not found: {filepath}")
    for encoding in ("utf-8", "latin-1", "cp1252"):
        try:
            return filepath.read_text(encoding=encoding)
        except UnicodeDecodeError:
            continue
    raise ValueError(f"Could not decode file: {filepath}")


def read_document_text(filepath: Path) -> str:
    """
    Read the text of a document.
    - .html/.htm: visible text of the page.
    - .json: the "content" field.
    - anything else: the file as plain text.
    """
    filepath = Path(filepath)
    if not filepath.is_file():
        raise FileNotFoundError(f"Document not found: {filepath}")
    raw = read_text_file(filepath)
    suffix = filepath.suffix.lower()
    if suffix in HTML_SUFFIXES:
        return extract_text_from_html(raw)
    if suffix == ".json":
        data = json.loads(raw)
        if "content" not in data:
            raise ValueError(f"JSON file has no 'content' field: {filepath}")
        return data["content"]
    return raw


def scan_document(filepath: Path) -> Iterator[str]:
    """
    Return an iterator over the whitespace-delimited words of a document.
    Raises FileNotFoundError right away if the document does not exist.
    """
    text = read_document_text(filepath)
    return _iter_words(text.splitlines())


def _iter_words(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from split_whitespace(line)


def load_word_list(filepath: Path) -> list[str]:
    """
    Return the whitespace-delimited words of a list file (noise words,
    document names), in file order.
    """
    filepath = Path(filepath)
    if not filepath.is_file():
        raise FileNotFoundError(f"Source not found: {filepath}")
    return split_whitespace(read_text_file(filepath))


def load_document_list(filepath: Path) -> list[str]:
    """Return the document identifiers listed in filepath, in order."""
    return load_word_list(filepath)


def load_nltk_stopwords(language: str = "english") -> list[str]:
    """
    Return nltk's stop word list for a language, downloading the corpus if needed.
    """
    _nltk_download("stopwords", quiet=True)
    from nltk.corpus import stopwords

    return stopwords.words(language)

"""Keyword search engine package."""

from .occurrence import Occurrence, KeywordIndex, insert_last_occurrence
from .index_builder import build_index, load_keywords_from_document, merge_keywords
from .tokenizer import get_keyword, scan_document
from .search import top5_search
from .engine import SearchSession

"""Keyword search and indexing over plain-text files."""

from .files import (
    enumerate_text_files,
    index_directory,
    iter_entries,
    read_text,
    search_directory,
)
from .matcher import Entry, index, matches, matches_all, search

__all__ = [
    "Entry",
    "enumerate_text_files",
    "index",
    "index_directory",
    "iter_entries",
    "matches",
    "matches_all",
    "read_text",
    "search",
    "search_directory",
]

# src/docsearch/core/__init__.py
"""
Documentation search index: load generator search data, look tokens up.
"""

from docsearch.core.errors import MalformedDataError
from docsearch.core.loader import load, load_directory, load_file, parse_search_data
from docsearch.core.table import Entry, Table
from docsearch.core.tokens import decode_token, encode_token

__all__ = [
    "Entry",
    "MalformedDataError",
    "Table",
    "decode_token",
    "encode_token",
    "load",
    "load_directory",
    "load_file",
    "parse_search_data",
]

"""
Shared dependencies for routes.
"""

from functools import lru_cache

from docsearch.core import config
from docsearch.core.loader import load
from docsearch.core.table import Table


@lru_cache(maxsize=1)
def get_table() -> Table:
    return load(config.index_path(), category=config.index_category())

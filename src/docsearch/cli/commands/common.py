"""
Options shared by commands that can read an index locally.
"""

from docsearch.core import config
from docsearch.core.loader import load
from docsearch.core.table import Table


def add_index_args(parser):
    parser.add_argument("--index", "-i", help="Search data file or directory (default: query the API)")
    parser.add_argument("--category", default=None, help="File category for directories (default: all)")
    parser.add_argument("--json", action="store_true", help="Print raw JSON")


def open_table(args) -> Table:
    category = args.category or config.index_category()
    return load(args.index, category=category)


def format_entry(entry: dict) -> str:
    return f"  {entry['label']:24} {entry['scope']:50} {entry['locator']}"

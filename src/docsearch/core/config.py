# src/docsearch/core/config.py
"""
Configuration from environment variables (and a .env file, if present).
"""

import os

from dotenv import load_dotenv

load_dotenv()


DEFAULT_API_URL = "http://localhost:8000/api"
DEFAULT_CATEGORY = "all"


def get_config(name: str, default: str | None = None) -> str:
    """Return the named setting, raising if it is unset and has no default."""
    value = os.getenv(name, default)
    if value is None:
        raise RuntimeError(f"Missing configuration for {name}")
    return value


def index_path() -> str:
    return get_config("DOCSEARCH_INDEX")


def index_category() -> str:
    return get_config("DOCSEARCH_CATEGORY", DEFAULT_CATEGORY)


def api_url() -> str:
    return get_config("DOCSEARCH_API_URL", DEFAULT_API_URL).rstrip("/")

"""
HTTP client for the Docsearch API.
"""

from urllib.parse import quote

import httpx

from docsearch.core import config


def _get(path: str, params: dict | None = None) -> dict:
    r = httpx.get(f"{config.api_url()}{path}", params=params, timeout=30)
    r.raise_for_status()
    return r.json()


def get_index() -> dict:
    return _get("/index")


def list_tokens() -> list[str]:
    return _get("/tokens")["tokens"]


def lookup(token: str) -> list[dict]:
    return _get(f"/lookup/{quote(token, safe='')}")["entries"]


def search(prefix: str, limit: int = None) -> list[dict]:
    params = {"prefix": prefix}
    if limit:
        params["limit"] = limit
    return _get("/search", params=params)["results"]

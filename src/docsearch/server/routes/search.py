"""
Search routes: /api/index, /api/tokens, /api/lookup, /api/search
"""

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from docsearch.core.table import Entry, Table
from docsearch.server.deps import get_table


router = APIRouter(prefix="/api", tags=["search"])


class EntryOut(BaseModel):
    label: str
    locator: str
    scope: str
    parent_frame: bool = False

    @classmethod
    def from_entry(cls, entry: Entry) -> "EntryOut":
        return cls(**entry.to_dict())


class IndexInfo(BaseModel):
    source: str
    token_count: int
    entry_count: int


class TokenList(BaseModel):
    tokens: list[str]


class LookupResponse(BaseModel):
    token: str
    entries: list[EntryOut]


class SearchResult(BaseModel):
    token: str
    label: str
    entries: list[EntryOut]


class SearchResponse(BaseModel):
    prefix: str
    results: list[SearchResult]


@router.get("/index", response_model=IndexInfo)
async def index_info(table: Table = Depends(get_table)):
    """Summary of the loaded table."""
    return IndexInfo(
        source=table.source,
        token_count=len(table),
        entry_count=table.entry_count,
    )


@router.get("/tokens", response_model=TokenList)
async def list_tokens(table: Table = Depends(get_table)):
    """All tokens, sorted."""
    return TokenList(tokens=list(table.tokens()))


@router.get("/lookup/{token}", response_model=LookupResponse)
async def lookup(token: str, table: Table = Depends(get_table)):
    """Entries for an exact token. Unknown tokens give an empty list."""
    return LookupResponse(
        token=token,
        entries=[EntryOut.from_entry(e) for e in table.lookup(token)],
    )


@router.get("/search", response_model=SearchResponse)
async def search(
    prefix: str,
    limit: int | None = Query(default=None, ge=1),
    table: Table = Depends(get_table),
):
    """Tokens starting with prefix."""
    results = [
        SearchResult(
            token=token,
            label=entries[0].label,
            entries=[EntryOut.from_entry(e) for e in entries],
        )
        for token, entries in table.search(prefix, limit=limit)
    ]
    return SearchResponse(prefix=prefix, results=results)

# src/docsearch/core/table.py
"""
Immutable token -> entries lookup table.
"""

from bisect import bisect_left
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterator, Mapping

from docsearch.core.tokens import encode_token


@dataclass(frozen=True)
class Entry:
    label: str          # "onIdle"
    locator: str        # "../class_cpp_server_1_1_asio_1_1_service.html#a53b9..."
    scope: str          # "CppServer::Asio::Service"
    parent_frame: bool = False

    def to_dict(self) -> dict:
        return {
            "label": self.label,
            "locator": self.locator,
            "scope": self.scope,
            "parent_frame": self.parent_frame,
        }


class Table:
    """
    Read-only mapping built once from search data.

    Entries keep the order they had in the source. Nothing here mutates
    after __init__, so a table can be shared freely between readers.
    """

    def __init__(self, entries: Mapping[str, tuple[Entry, ...]], source: str = "<string>"):
        copied = {token: tuple(items) for token, items in entries.items()}
        empty = [token for token, items in copied.items() if not items]
        if empty:
            raise ValueError(f"Tokens without entries: {', '.join(sorted(empty))}")
        self._entries = MappingProxyType(copied)
        self._tokens = tuple(sorted(self._entries))
        self.source = source

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, token: object) -> bool:
        return token in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._tokens)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Table):
            return NotImplemented
        return dict(self._entries) == dict(other._entries)

    __hash__ = None

    def __repr__(self) -> str:
        return f"Table(source={self.source!r}, tokens={len(self)})"

    @property
    def entry_count(self) -> int:
        return sum(len(items) for items in self._entries.values())

    def tokens(self) -> tuple[str, ...]:
        return self._tokens

    def lookup(self, token: str) -> tuple[Entry, ...]:
        """Entries stored under exactly this token, or () if it is absent."""
        return self._entries.get(token, ())

    def lookup_name(self, name: str) -> tuple[Entry, ...]:
        """Like lookup, for a raw identifier such as "operator=" or "onIdle"."""
        return self.lookup(encode_token(name))

    def search(self, prefix: str, limit: int | None = None) -> list[tuple[str, tuple[Entry, ...]]]:
        """Tokens starting with prefix, in sorted order."""
        if not prefix:
            return []

        results = []
        for i in range(bisect_left(self._tokens, prefix), len(self._tokens)):
            token = self._tokens[i]
            if not token.startswith(prefix):
                break
            if limit is not None and len(results) >= limit:
                break
            results.append((token, self._entries[token]))
        return results

    def to_dict(self) -> dict:
        return {
            token: [e.to_dict() for e in self._entries[token]]
            for token in self._tokens
        }

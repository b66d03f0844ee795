# src/docsearch/core/loader.py
"""
Loads generator search data into a Table.

A search data file is a JavaScript literal:

    var searchData=
    [
      ['onidle',['onIdle',['../class_service.html#a53b9',1,'CppServer::Asio::Service']]],
      ...
    ];

Each item is [token, [label, [locator, parent_frame, scope], ...]].
Loading is all-or-nothing: any defect raises MalformedDataError and no
table is produced.
"""

import html
import logging
import re
from pathlib import Path
from typing import Any

from docsearch.core.errors import MalformedDataError
from docsearch.core.table import Entry, Table

logger = logging.getLogger(__name__)

_ASSIGNMENT = re.compile(r"\s*var\s+[A-Za-z_$][\w$]*\s*=\s*")
_NUMBER = re.compile(r"-?\d+")
_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
    "0": "\0",
    "/": "/",
    "\\": "\\",
    "'": "'",
    '"': '"',
}
_KEYWORDS = {"true": True, "false": False, "null": None}


class SearchDataParser:
    """Parses the array literal of a search data file into Python lists."""

    def __init__(self, text: str, source: str = "<string>"):
        self.text = text
        self.source = source
        self.pos = 0

    def error(self, message: str) -> MalformedDataError:
        return MalformedDataError(f"{message} at offset {self.pos}", self.source)

    def parse(self) -> list:
        match = _ASSIGNMENT.match(self.text)
        if match:
            self.pos = match.end()

        self.skip_ws()
        if self.peek() != "[":
            raise self.error("Expected '['")
        value = self.parse_value()

        self.skip_ws()
        if self.peek() == ";":
            self.pos += 1
            self.skip_ws()
        if self.pos != len(self.text):
            raise self.error("Unexpected trailing data")
        return value

    def peek(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def skip_ws(self):
        while self.pos < len(self.text) and self.text[self.pos].isspace():
            self.pos += 1

    def parse_value(self) -> Any:
        self.skip_ws()
        ch = self.peek()
        if ch == "[":
            return self.parse_array()
        if ch in ("'", '"'):
            return self.parse_string()

        match = _NUMBER.match(self.text, self.pos)
        if match:
            self.pos = match.end()
            return int(match.group())

        for word, value in _KEYWORDS.items():
            if self.text.startswith(word, self.pos):
                self.pos += len(word)
                return value

        if not ch:
            raise self.error("Unexpected end of data")
        raise self.error(f"Unexpected character {ch!r}")

    def parse_array(self) -> list:
        self.pos += 1  # [
        items = []
        while True:
            self.skip_ws()
            if self.peek() == "]":
                self.pos += 1
                return items

            items.append(self.parse_value())

            self.skip_ws()
            ch = self.peek()
            if ch == ",":
                self.pos += 1
            elif ch == "]":
                self.pos += 1
                return items
            elif not ch:
                raise self.error("Unterminated array")
            else:
                raise self.error(f"Expected ',' or ']', got {ch!r}")

    def parse_string(self) -> str:
        quote = self.text[self.pos]
        self.pos += 1
        chars = []
        while self.pos < len(self.text):
            ch = self.text[self.pos]
            if ch == quote:
                self.pos += 1
                return "".join(chars)
            if ch == "\\":
                chars.append(self.parse_escape())
                continue
            if ch == "\n":
                raise self.error("Newline in string")
            chars.append(ch)
            self.pos += 1
        raise self.error("Unterminated string")

    def parse_escape(self) -> str:
        self.pos += 1  # backslash
        ch = self.peek()
        if ch in ("u", "x"):
            width = 4 if ch == "u" else 2
            digits = self.text[self.pos + 1:self.pos + 1 + width]
            if not re.fullmatch(rf"[0-9a-fA-F]{{{width}}}", digits):
                raise self.error(f"Bad \\{ch} escape")
            self.pos += 1 + width
            return chr(int(digits, 16))
        # Line continuation
        if self.text.startswith("\r\n", self.pos):
            self.pos += 2
            return ""
        if ch in ("\n", "\r"):
            self.pos += 1
            return ""
        if not ch:
            raise self.error("Unterminated string")
        self.pos += 1
        return _ESCAPES.get(ch, ch)


def parse_search_data(text: str, source: str = "<string>") -> list:
    """Parse the JavaScript text of a search data file."""
    return SearchDataParser(text, source).parse()


def _build_entry(raw: Any, label: str, where: str, source: str) -> Entry:
    if not isinstance(raw, list) or len(raw) < 3:
        raise MalformedDataError(f"{where}: expected [locator, flag, scope]", source)

    locator, flag, scope = raw[0], raw[1], raw[2]
    if not isinstance(locator, str) or not locator:
        raise MalformedDataError(f"{where}: missing locator", source)
    if not isinstance(flag, (int, bool)):
        raise MalformedDataError(f"{where}: link flag must be a number", source)
    if not isinstance(scope, str):
        raise MalformedDataError(f"{where}: missing scope", source)

    return Entry(
        label=label,
        locator=locator,
        scope=html.unescape(scope),
        parent_frame=bool(flag),
    )


def build_entries(items: Any, source: str = "<string>") -> dict[str, tuple[Entry, ...]]:
    """Validate parsed search data and turn it into token -> entries."""
    if not isinstance(items, list):
        raise MalformedDataError("Search data must be a list", source)

    entries: dict[str, tuple[Entry, ...]] = {}
    for i, item in enumerate(items):
        where = f"item {i}"
        if not isinstance(item, list) or len(item) != 2:
            raise MalformedDataError(f"{where}: expected [token, [label, entries...]]", source)

        token, body = item
        if not isinstance(token, str) or not token:
            raise MalformedDataError(f"{where}: missing token", source)
        where = f"item {i} ({token})"

        if not isinstance(body, list) or len(body) < 2:
            raise MalformedDataError(f"{where}: expected [label, entries...]", source)
        label = body[0]
        if not isinstance(label, str) or not label:
            raise MalformedDataError(f"{where}: missing label", source)

        if token in entries:
            raise MalformedDataError(f"{where}: duplicate token", source)

        label = html.unescape(label)
        entries[token] = tuple(
            _build_entry(raw, label, f"{where} entry {j}", source)
            for j, raw in enumerate(body[1:])
        )

    return entries


def load_text(text: str, source: str = "<string>") -> Table:
    entries = build_entries(parse_search_data(text, source), source)
    table = Table(entries, source=source)
    logger.info("Loaded %d tokens (%d entries) from %s", len(table), table.entry_count, source)
    return table


def _read(path: Path) -> str:
    logger.debug("Reading %s", path)
    try:
        return path.read_text(encoding="utf-8")
    except (UnicodeDecodeError, OSError) as e:
        raise MalformedDataError(str(e), str(path)) from e


def load_file(path: str | Path) -> Table:
    path = Path(path)
    if not path.is_file():
        raise MalformedDataError("File not found", str(path))
    return load_text(_read(path), source=str(path))


def _data_files(directory: Path, category: str) -> list[Path]:
    pattern = re.compile(rf"{re.escape(category)}_(\d+)\.js")
    numbered = []
    for path in directory.iterdir():
        match = pattern.fullmatch(path.name)
        if match:
            numbered.append((int(match.group(1)), path))
    return [path for _, path in sorted(numbered)]


def load_directory(path: str | Path, category: str = "all") -> Table:
    """Merge every <category>_<n>.js file of a search directory into one table."""
    directory = Path(path)
    if not directory.is_dir():
        raise MalformedDataError("Directory not found", str(directory))

    files = _data_files(directory, category)
    if not files:
        raise MalformedDataError(f"No '{category}' search data files", str(directory))

    merged: dict[str, tuple[Entry, ...]] = {}
    for file in files:
        text = _read(file)
        entries = build_entries(parse_search_data(text, str(file)), str(file))
        for token, items in entries.items():
            if token in merged:
                raise MalformedDataError(f"duplicate token {token!r}", str(file))
            merged[token] = items

    table = Table(merged, source=str(directory))
    logger.info(
        "Loaded %d tokens (%d entries) from %d file(s) in %s",
        len(table), table.entry_count, len(files), directory,
    )
    return table


def load(source: Any, category: str = "all") -> Table:
    """
    Build a Table from search data.

    source may be:
      - a Path to a search data file or a search/ directory
      - a string holding search data text ("var searchData=[..." or "[...")
      - a string path
      - already parsed items (a list)
    """
    if isinstance(source, list):
        return Table(build_entries(source, "<list>"), source="<list>")

    if isinstance(source, str):
        stripped = source.lstrip()
        if _ASSIGNMENT.match(source) or stripped.startswith("["):
            return load_text(source)
        source = Path(source)

    if isinstance(source, Path):
        if source.is_dir():
            return load_directory(source, category)
        return load_file(source)

    raise TypeError(f"Cannot load search data from {type(source).__name__}")

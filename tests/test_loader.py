# tests/test_loader.py
"""Tests for parsing and loading search data."""

from pathlib import Path

import pytest

from docsearch.core.errors import MalformedDataError
from docsearch.core.loader import (
    load, load_file, load_directory, parse_search_data, build_entries,
)
from docsearch.core.table import Entry


DATA = Path(__file__).parent / "data" / "search"

SAMPLE = """var searchData=
[
  ['onidle',['onIdle',['../class_service.html#a53b9',1,'CppServer::Asio::Service']]],
  ['operator_3d',['operator=',['../class_a.html#a1',1,'A::operator=(const A &amp;)=delete'],['../class_b.html#a2',0,'B::operator=(B &amp;&amp;)=default']]]
];
"""


# === Parser ===

def test_parse_assignment():
    items = parse_search_data(SAMPLE)
    assert len(items) == 2
    assert items[0] == ["onidle", ["onIdle", ["../class_service.html#a53b9", 1, "CppServer::Asio::Service"]]]


def test_parse_bare_array():
    assert parse_search_data("[['a',['A',['x.html',1,'']]]]") == [["a", ["A", ["x.html", 1, ""]]]]


def test_parse_escapes():
    items = parse_search_data(r"""['it\'s', "say \"hi\"", 'a\\b', 'A']""")
    assert items == ["it's", 'say "hi"', "a\\b", "A"]


def test_parse_trailing_comma():
    assert parse_search_data("[1, 2, ]") == [1, 2]


def test_parse_empty():
    assert parse_search_data("var searchData=[];") == []


def test_parse_keywords():
    assert parse_search_data("[true, false, null]") == [True, False, None]


@pytest.mark.parametrize("text", [
    "",
    "var searchData=",
    "[1, 2",
    "['abc",
    "[1 2]",
    "[1];[2]",
    "{'a': 1}",
    "['a\nb']",
])
def test_parse_rejects_bad_syntax(text):
    with pytest.raises(MalformedDataError):
        parse_search_data(text)


def test_parse_error_reports_offset():
    with pytest.raises(MalformedDataError) as info:
        parse_search_data("[1, @]", source="all_0.js")
    assert info.value.source == "all_0.js"
    assert "offset 4" in str(info.value)


# === Entries ===

def test_build_entries():
    entries = build_entries(parse_search_data(SAMPLE))
    assert entries["onidle"] == (
        Entry("onIdle", "../class_service.html#a53b9", "CppServer::Asio::Service", True),
    )


def test_build_entries_unescapes_html():
    entries = build_entries(parse_search_data(SAMPLE))
    scopes = [e.scope for e in entries["operator_3d"]]
    assert scopes == ["A::operator=(const A &)=delete", "B::operator=(B &&)=default"]


def test_build_entries_keeps_flag():
    entries = build_entries(parse_search_data(SAMPLE))
    assert [e.parent_frame for e in entries["operator_3d"]] == [True, False]


@pytest.mark.parametrize("items", [
    [["onidle"]],
    [["onidle", ["onIdle"]]],
    [["onidle", ["onIdle", ["../x.html", 1]]]],
    [["onidle", ["onIdle", ["", 1, "Service"]]]],
    [["onidle", ["onIdle", ["../x.html", "1", "Service"]]]],
    [["onidle", ["onIdle", ["../x.html", 1, None]]]],
    [["onidle", ["", ["../x.html", 1, "Service"]]]],
    [["", ["onIdle", ["../x.html", 1, "Service"]]]],
    [[1, ["onIdle", ["../x.html", 1, "Service"]]]],
    ["onidle"],
    {"onidle": []},
])
def test_build_entries_rejects_missing_fields(items):
    with pytest.raises(MalformedDataError):
        build_entries(items)


def test_build_entries_rejects_duplicate_tokens():
    item = ["onidle", ["onIdle", ["../x.html", 1, "Service"]]]
    with pytest.raises(MalformedDataError, match="duplicate"):
        build_entries([item, item])


# === Loading ===

def test_load_text():
    table = load(SAMPLE)
    assert len(table) == 2
    assert table.source == "<string>"


def test_load_list():
    table = load([["onidle", ["onIdle", ["../x.html", 1, "Service"]]]])
    assert table.lookup("onidle")[0].scope == "Service"


def test_load_file():
    table = load_file(DATA / "all_8.js")
    assert "onidle" in table
    assert table.source.endswith("all_8.js")


def test_load_path_string():
    table = load(str(DATA / "all_8.js"))
    assert "onconnected" in table


def test_load_missing_file():
    with pytest.raises(MalformedDataError):
        load(DATA / "all_99.js")


def test_load_directory_merges_files():
    table = load_directory(DATA)
    assert "accept" in table
    assert "onidle" in table
    assert len(table) == 7


def test_load_dispatches_directory():
    assert load(DATA) == load_directory(DATA)


def test_load_directory_unknown_category():
    with pytest.raises(MalformedDataError, match="No 'functions'"):
        load_directory(DATA, category="functions")


def test_load_directory_rejects_duplicates_across_files(tmp_path):
    text = "var searchData=[['onidle',['onIdle',['../x.html',1,'Service']]]];"
    (tmp_path / "all_0.js").write_text(text)
    (tmp_path / "all_1.js").write_text(text)
    with pytest.raises(MalformedDataError, match="duplicate"):
        load_directory(tmp_path)


def test_load_directory_ignores_unnumbered_files(tmp_path):
    (tmp_path / "all_10.js").write_text("var searchData=[['b',['B',['b.html',1,'']]]];")
    (tmp_path / "all_2.js").write_text("var searchData=[['a',['A',['a.html',1,'']]]];")
    (tmp_path / "all_x.js").write_text("not search data")
    table = load_directory(tmp_path)
    assert table.tokens() == ("a", "b")


def test_load_is_all_or_nothing(tmp_path):
    (tmp_path / "all_0.js").write_text("var searchData=[['a',['A',['a.html',1,'']]]];")
    (tmp_path / "all_1.js").write_text("var searchData=[['b',['B',['b.html',1]]]];")
    with pytest.raises(MalformedDataError) as info:
        load_directory(tmp_path)
    assert info.value.source.endswith("all_1.js")


def test_load_rejects_other_types():
    with pytest.raises(TypeError):
        load(42)


def test_parse_hex_escape():
    assert parse_search_data(r"['\x41\x3d']") == ["A="]


def test_parse_line_continuation():
    assert parse_search_data("['on\\\nIdle', 'a\\\r\nb']") == ["onIdle", "ab"]


def test_parse_rejects_bad_hex_escape():
    with pytest.raises(MalformedDataError, match="Bad"):
        parse_search_data(r"['\x4']")


def test_load_list_names_origin():
    with pytest.raises(MalformedDataError) as info:
        load([["a", ["A"]]])
    assert info.value.source == "<list>"


BAD_UTF8 = b"var searchData=[['a',['A',['a.html',1,'\xff']]]];"


def test_load_file_rejects_invalid_utf8(tmp_path):
    bad = tmp_path / "all_0.js"
    bad.write_bytes(BAD_UTF8)
    with pytest.raises(MalformedDataError) as info:
        load(bad)
    assert info.value.source == str(bad)


def test_load_directory_rejects_invalid_utf8(tmp_path):
    (tmp_path / "all_0.js").write_bytes(BAD_UTF8)
    with pytest.raises(MalformedDataError):
        load_directory(tmp_path)

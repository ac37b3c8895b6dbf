"""Tests for the global data mapping loader and append-once patching."""

from __future__ import annotations

import json
from pathlib import Path

from tplcompile.encoding import datafile

RESERVED = {"<%": "<!--", "%>": "-->"}


def test_missing_file_loads_empty_and_is_created(tmp_path: Path):
    path = tmp_path / "_data.json"

    mapping = datafile.load_mapping(path)
    assert mapping.data == {}
    assert mapping.writable

    added = datafile.append_keys(mapping, datafile.missing_keys(mapping, RESERVED))

    assert added == RESERVED
    assert json.loads(path.read_text()) == RESERVED


def test_splices_into_existing_mapping(tmp_path: Path):
    path = tmp_path / "_data.json"
    original = '{\n  "title": "Fepper",\n  "items": [1, 2]\n}\n'
    path.write_text(original)

    mapping = datafile.load_mapping(path)
    datafile.append_keys(mapping, datafile.missing_keys(mapping, RESERVED))

    text = path.read_text()
    assert text.startswith('{\n  "title": "Fepper",\n  "items": [1, 2]')
    assert text.endswith('"%>": "-->"\n}\n')
    assert list(json.loads(text)) == ["title", "items", "<%", "%>"]


def test_only_missing_keys_are_added(tmp_path: Path):
    path = tmp_path / "_data.json"
    path.write_text('{\n  "<%": "<!--"\n}\n')

    mapping = datafile.load_mapping(path)
    pending = datafile.missing_keys(mapping, RESERVED)

    assert pending == {"%>": "-->"}
    assert datafile.append_keys(mapping, pending) == {"%>": "-->"}
    assert json.loads(path.read_text()) == RESERVED


def test_complete_mapping_is_left_untouched(tmp_path: Path):
    path = tmp_path / "_data.json"
    path.write_text(json.dumps(RESERVED))
    before = path.stat().st_mtime_ns

    mapping = datafile.load_mapping(path)
    pending = datafile.missing_keys(mapping, RESERVED)

    assert pending == {}
    assert datafile.append_keys(mapping, pending) == {}
    assert path.read_text() == json.dumps(RESERVED)
    assert path.stat().st_mtime_ns == before


def test_empty_object_is_rewritten_fresh(tmp_path: Path):
    path = tmp_path / "_data.json"
    path.write_text("{}\n")

    mapping = datafile.load_mapping(path)
    datafile.append_keys(mapping, datafile.missing_keys(mapping, RESERVED))

    assert json.loads(path.read_text()) == RESERVED


def test_malformed_mapping_is_never_overwritten(tmp_path: Path):
    path = tmp_path / "_data.json"
    path.write_text('{"title": ')

    mapping = datafile.load_mapping(path)
    assert mapping.data == {}
    assert not mapping.writable

    assert datafile.append_keys(mapping, RESERVED) == {}
    assert path.read_text() == '{"title": '

"""Tests for flat JSON parsing and serialization."""

import json
import pytest
from pathlib import Path

from langjson.errors import JsonSyntaxError, ReadError, WriteError
from langjson.io_json import parse_json, serialize_json, read_json_file, write_json_file


def test_parse_json_skips_non_string_values():
    """Test that only string members are kept."""
    store = parse_json('{"a": "x", "b": 5, "c": "y", "d": null, "e": [1], "f": {"g": "h"}, "t": true}')
    
    assert list(store.items()) == [("a", "x"), ("c", "y")]


def test_parse_json_keeps_document_order():
    """Test that members keep their serialized order."""
    store = parse_json('{"z": "1", "a": "2", "m": "3"}')
    
    assert list(store.keys()) == ["z", "a", "m"]


def test_parse_json_non_object_top_level_is_empty():
    """Test that arrays and scalars give an empty store without error."""
    assert parse_json('["a", "b"]') == {}
    assert parse_json('"text"') == {}
    assert parse_json("42") == {}


def test_parse_json_invalid_syntax():
    """Test that malformed JSON raises JsonSyntaxError."""
    with pytest.raises(JsonSyntaxError):
        parse_json("{a: }")


def test_parse_json_rejects_non_standard_constants():
    """Test that NaN and Infinity literals are not valid JSON."""
    for text in ('{"a": NaN, "b": "x"}', "NaN", '{"a": Infinity}', "[-Infinity]"):
        with pytest.raises(JsonSyntaxError):
            parse_json(text)


def test_parse_json_rejects_lone_surrogate():
    """Test that an unpaired surrogate escape is invalid."""
    with pytest.raises(JsonSyntaxError):
        parse_json('{"a": "\\ud800"}')
    with pytest.raises(JsonSyntaxError):
        parse_json('{"\\udc00": "x"}')


def test_parse_json_accepts_surrogate_pair():
    """Test that an escaped surrogate pair decodes to one character."""
    assert parse_json('{"a": "\\ud83d\\ude00"}') == {"a": "\U0001F600"}


def test_parse_json_too_deep():
    """Test that nesting beyond the decoder's depth is a syntax error."""
    with pytest.raises(JsonSyntaxError) as exc_info:
        parse_json("[" * 100000 + "]" * 100000)
    
    assert "nesting too deep" in exc_info.value.message


def test_json_syntax_error_is_read_error():
    """Test that syntax errors are reported as read failures."""
    assert issubclass(JsonSyntaxError, ReadError)


def test_serialize_json_is_pretty_and_ordered():
    """Test pretty-printed output with stable indentation."""
    text = serialize_json({"b": "2", "a": "1"})
    
    assert text == '{\n  "b": "2",\n  "a": "1"\n}\n'


def test_serialize_json_keeps_non_ascii():
    """Test that non-ASCII text is written literally."""
    assert '"Bokning"' in serialize_json({"k": "Bokning"})
    assert "Grüße" in serialize_json({"k": "Grüße"})


def test_json_round_trip():
    """Test that parse(serialize(store)) returns the same store."""
    store = {"menu.title": "Title", "quote": 'say "hi"', "path": "a\\b"}
    
    assert list(parse_json(serialize_json(store)).items()) == list(store.items())


def test_read_json_file_compact_input(tmp_path: Path):
    """Test that compact JSON files are accepted."""
    json_file = tmp_path / "en.json"
    json_file.write_text('{"a":"1","b":"2"}', encoding="utf-8")
    
    assert read_json_file(json_file) == {"a": "1", "b": "2"}


def test_read_json_file_invalid_reports_path(tmp_path: Path):
    """Test that the syntax error carries the offending path."""
    json_file = tmp_path / "broken.json"
    json_file.write_text("{a: }", encoding="utf-8")
    
    with pytest.raises(JsonSyntaxError) as exc_info:
        read_json_file(json_file)
    
    assert exc_info.value.path == json_file
    assert "broken.json" in exc_info.value.message


def test_write_json_file(tmp_path: Path):
    """Test writing a JSON file."""
    out_file = tmp_path / "out" / "en.json"
    
    write_json_file(out_file, {"a": "1"})
    
    with open(out_file, "r", encoding="utf-8") as f:
        assert json.load(f) == {"a": "1"}


def test_write_json_file_target_is_directory(tmp_path: Path):
    """Test that an unwritable destination raises WriteError."""
    target = tmp_path / "en.json"
    target.mkdir()
    
    with pytest.raises(WriteError):
        write_json_file(target, {"a": "1"})

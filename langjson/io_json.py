"""Read/write flat JSON localization files."""

import json
from pathlib import Path

from langjson.errors import JsonSyntaxError
from langjson.io_files import read_text_file, write_text_file
from langjson.records import RecordStore, build_store


def _reject_constant(name: str) -> None:
    raise ValueError(f"{name} is not a valid JSON value")


def parse_json(text: str, source: Path = Path("<string>")) -> RecordStore:
    """
    Parse JSON text into a record store.

    Only string-valued members of a top-level object are kept, in document
    order. Any other top-level value yields an empty store.

    NaN/Infinity literals, lone surrogate escapes and documents nested too
    deeply to decode are rejected as invalid JSON.

    Args:
        text: JSON document
        source: Path reported in the error when the text is not valid JSON

    Returns:
        Ordered dictionary of keys to values

    Raises:
        JsonSyntaxError: If the text is not valid JSON
    """
    try:
        data = json.loads(text, parse_constant=_reject_constant)
        # Lone surrogates decode fine but cannot be encoded as UTF-8
        json.dumps(data, ensure_ascii=False).encode("utf-8")
    except RecursionError:
        raise JsonSyntaxError(source, f"Invalid JSON in {source}: nesting too deep")
    except ValueError as e:
        raise JsonSyntaxError(source, f"Invalid JSON in {source}: {e}")

    if not isinstance(data, dict):
        return {}

    return build_store(
        (key, value) for key, value in data.items() if isinstance(value, str)
    )


def serialize_json(store: RecordStore) -> str:
    """Serialize a record store to pretty-printed JSON text."""
    return json.dumps(store, ensure_ascii=False, indent=2) + "\n"


def read_json_file(file_path: Path) -> RecordStore:
    """
    Read a single JSON localization file.

    Raises:
        ReadError: If the file cannot be read
        JsonSyntaxError: If the file is not valid JSON
    """
    return parse_json(read_text_file(file_path), source=file_path)


def write_json_file(file_path: Path, store: RecordStore) -> None:
    """
    Write a record store as a JSON file.

    Raises:
        WriteError: If the file or its parent directory cannot be written
    """
    write_text_file(file_path, serialize_json(store))

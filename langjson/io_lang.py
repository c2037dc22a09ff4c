"""Read/write .lang localization files."""

from pathlib import Path

from langjson.io_files import read_text_file, write_text_file
from langjson.records import RecordStore


def parse_lang(text: str) -> RecordStore:
    """
    Parse .lang text into a record store.
    
    Blank lines and lines starting with "#" are ignored. Every other line
    is split on its first "="; lines without "=" are dropped. Keys and
    values are stripped of surrounding whitespace.
    
    Args:
        text: Contents of a .lang file
        
    Returns:
        Ordered dictionary of keys to values
    """
    store: RecordStore = {}
    
    for line in text.split("\n"):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        
        if "=" not in line:
            continue
        
        key, value = line.split("=", 1)
        store[key.strip()] = value.strip()
    
    return store


def serialize_lang(store: RecordStore) -> str:
    """
    Serialize a record store to .lang text.
    
    Args:
        store: Ordered dictionary of keys to values
        
    Returns:
        One "key=value" line per entry, each ending with a newline
    """
    return "".join(f"{key}={value}\n" for key, value in store.items())


def read_lang_file(file_path: Path) -> RecordStore:
    """
    Read a single .lang file.
    
    Raises:
        ReadError: If the file cannot be read
    """
    return parse_lang(read_text_file(file_path))


def write_lang_file(file_path: Path, store: RecordStore) -> None:
    """
    Write a record store as a .lang file.
    
    Raises:
        WriteError: If the file or its parent directory cannot be written
    """
    write_text_file(file_path, serialize_lang(store))

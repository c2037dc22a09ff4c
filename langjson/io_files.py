"""Read/write text files with file-scoped conversion errors."""

from pathlib import Path

from langjson.errors import ReadError, WriteError


def read_text_file(file_path: Path) -> str:
    """
    Read a UTF-8 text file.
    
    Args:
        file_path: Path to the file
        
    Returns:
        File contents
        
    Raises:
        ReadError: If the file is missing, not readable or not valid UTF-8
    """
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            return f.read()
    except FileNotFoundError:
        raise ReadError(file_path, f"File not found: {file_path}")
    except UnicodeDecodeError as e:
        raise ReadError(file_path, f"Failed to decode {file_path} as UTF-8: {e.reason}")
    except OSError as e:
        raise ReadError(file_path, f"Failed to read {file_path}: {e.strerror or e}")


def write_text_file(file_path: Path, content: str) -> None:
    """
    Write a UTF-8 text file, creating parent directories as needed.
    
    Args:
        file_path: Path to output file
        content: Text to write
        
    Raises:
        WriteError: If the content is not encodable or the file cannot be written
    """
    try:
        data = content.encode("utf-8")
    except UnicodeEncodeError as e:
        raise WriteError(file_path, f"Failed to encode {file_path} as UTF-8: {e.reason}")
    
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise WriteError(file_path, f"Failed to create output directory {file_path.parent}: {e.strerror or e}")
    
    try:
        with open(file_path, "wb") as f:
            f.write(data)
    except OSError as e:
        raise WriteError(file_path, f"Failed to write {file_path}: {e.strerror or e}")

"""Exceptions raised while reading or writing localization files."""

from pathlib import Path
from typing import Union


class ConversionError(Exception):
    """Raised when a single file cannot be converted."""

    def __init__(self, path: Union[str, Path], message: str):
        self.path = Path(path)
        self.message = message
        super().__init__(message)


class ReadError(ConversionError):
    """Raised when a source file cannot be read."""
    pass


class JsonSyntaxError(ReadError):
    """Raised when a source file is not valid JSON."""
    pass


class WriteError(ConversionError):
    """Raised when a destination file cannot be written."""
    pass

"""Public reading API."""

from .reader import read, read_file, read_string, read_with_extensions

__all__ = [
    "read",
    "read_file",
    "read_string",
    "read_with_extensions",
]

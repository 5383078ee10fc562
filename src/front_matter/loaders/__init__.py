"""File loading utilities.

Key modules:
    - files: Read documents from disk and write them back
"""

from .files import read_file, write_file

__all__ = [
    "read_file",
    "write_file",
]

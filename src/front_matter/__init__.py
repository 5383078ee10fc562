"""
Front Matter - parse and write YAML/JSON front matter in text documents.

Splits a delimited metadata block from the head of a document, parses it
with a YAML or JSON engine, optionally extracts an excerpt, and writes
documents back out with their metadata.

Main entry points:
    - front_matter.api: matter(), stringify(), test(), language(), clear_cache()
    - front_matter.core.parser: MatterParser with an injectable cache
    - front_matter.loaders: read_file() / write_file()
    - front_matter.main: CLI entrypoint
"""

from .api import clear_cache, default_cache, language, matter, stringify, test
from .core.parser import MatterParser
from .core.cache import DocumentCache
from .core.engines import Language
from .core.scanner import LanguageInfo
from .exceptions import (
    EngineCapabilityError,
    FrontMatterError,
    FrontMatterTypeError,
    UnknownLanguageError,
)
from .loaders import read_file, write_file
from .models import Document, MatterOptions, ResolvedOptions

__all__ = [
    "matter",
    "stringify",
    "test",
    "language",
    "clear_cache",
    "default_cache",
    "MatterParser",
    "DocumentCache",
    "Language",
    "LanguageInfo",
    "FrontMatterError",
    "UnknownLanguageError",
    "FrontMatterTypeError",
    "EngineCapabilityError",
    "read_file",
    "write_file",
    "Document",
    "MatterOptions",
    "ResolvedOptions",
]

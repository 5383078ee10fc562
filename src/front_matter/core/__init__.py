"""Core parsing and serialization.

Key modules:
    - normalize: Input coercion into Documents
    - engines: YAML/JSON engines and language registry
    - scanner: Delimiter scanning and language tag detection
    - excerpt: Excerpt extraction
    - stringify: Document serialization
    - cache: Parsed document cache
    - parser: MatterParser entry point
"""

from .normalize import to_document
from .engines import Language, get_engine
from .scanner import LanguageInfo, detect_language, has_front_matter, scan_document
from .excerpt import extract_excerpt
from .stringify import stringify_document
from .cache import DocumentCache
from .parser import MatterParser

__all__ = [
    "to_document",
    "Language",
    "get_engine",
    "LanguageInfo",
    "detect_language",
    "has_front_matter",
    "scan_document",
    "extract_excerpt",
    "stringify_document",
    "DocumentCache",
    "MatterParser",
]

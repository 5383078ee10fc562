"""
Front matter models.

This subpackage contains Pydantic models for documents, parser
options and runtime configuration.

Key models:
    - Document: A parsed document (body, metadata, excerpt, raw block)
    - MatterOptions: Options accepted by the entry points
    - ResolvedOptions: Options with defaults applied
    - Config: Runtime configuration loaded from environment
"""

from .document import Document, Metadata, MetadataValue
from .options import (
    DEFAULT_DELIMITER,
    DEFAULT_LANGUAGE,
    MatterOptions,
    ResolvedOptions,
    resolve_options,
)
from .config import Config, load_env

__all__ = [
    "Document",
    "Metadata",
    "MetadataValue",
    "DEFAULT_DELIMITER",
    "DEFAULT_LANGUAGE",
    "MatterOptions",
    "ResolvedOptions",
    "resolve_options",
    "Config",
    "load_env",
]

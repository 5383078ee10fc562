"""
Exception types raised by the front matter parser.

Errors raised by the metadata engines themselves (``yaml.YAMLError``,
``json.JSONDecodeError``) are not wrapped and reach the caller as-is.
"""

from __future__ import annotations


class FrontMatterError(Exception):
	"""Base class for all front matter errors."""


class UnknownLanguageError(FrontMatterError, ValueError):
	"""Raised when a language tag has no registered engine."""

	def __init__(self, language: str) -> None:
		self.language = language
		super().__init__(f"Unknown front matter language: {language!r}")


class FrontMatterTypeError(FrontMatterError, TypeError):
	"""Raised for unsupported input shapes and non-mapping metadata."""


class EngineCapabilityError(FrontMatterError):
	"""Raised when an engine lacks the operation being requested."""


__all__ = [
    "FrontMatterError",
    "UnknownLanguageError",
    "FrontMatterTypeError",
    "EngineCapabilityError",
]

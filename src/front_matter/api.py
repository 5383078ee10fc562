"""
Module-level API backed by a process-wide default parser.

Use ``MatterParser`` directly when an isolated cache is needed.
"""

from __future__ import annotations

from typing import Any

from front_matter.core.cache import DocumentCache
from front_matter.core.normalize import MatterInput
from front_matter.core.parser import MatterParser, Options
from front_matter.core.scanner import LanguageInfo
from front_matter.models.document import Document

_default_parser = MatterParser()


def matter(input: MatterInput, options: Options = None) -> Document:
	"""
	Extract and parse front matter from ``input``.

	Example:
		>>> matter("---\\ntitle: Home\\n---\\nOther stuff").data
		{'title': 'Home'}
	"""
	return _default_parser.parse(input, options)


def stringify(document: Document | str,
              data: dict[str, Any] | None = None,
              options: Options = None) -> str:
	"""Serialize ``data`` as front matter and prepend it to the body."""
	return _default_parser.stringify(document, data, options)


def test(text: str, options: Options = None) -> bool:
	"""Return True if ``text`` has front matter."""
	return _default_parser.test(text, options)


# Keep pytest from collecting the re-exported ``test`` function
test.__test__ = False  # type: ignore[attr-defined]


def language(text: str, options: Options = None) -> LanguageInfo:
	"""Detect the language tag after the opening delimiter."""
	return _default_parser.language(text, options)


def clear_cache() -> None:
	"""Empty the process-wide document cache."""
	_default_parser.clear_cache()


def default_cache() -> DocumentCache:
	return _default_parser.cache


__all__ = [
    "matter",
    "stringify",
    "test",
    "language",
    "clear_cache",
    "default_cache",
]

"""
Parser entry point.

``MatterParser`` ties the normalizer, scanner, excerpt extractor and
stringifier together and owns the document cache.
"""

from __future__ import annotations

from typing import Any

from front_matter.core.cache import DocumentCache
from front_matter.core.normalize import MatterInput, to_document
from front_matter.core.scanner import (
    LanguageInfo,
    detect_language,
    has_front_matter,
    scan_document,
)
from front_matter.core.stringify import stringify_document
from front_matter.models.document import Document
from front_matter.models.options import MatterOptions
from front_matter.utils.logging import get_logger

logger = get_logger(__name__)

Options = MatterOptions | dict[str, Any] | None


class MatterParser:
	"""
	Front matter parser with an injectable cache.

	Attributes:
		cache: Cache consulted by ``parse`` when no options are given.
	"""

	def __init__(self, cache: DocumentCache | None = None) -> None:
		self.cache = cache if cache is not None else DocumentCache()

	def parse(self, input: MatterInput, options: Options = None) -> Document:
		"""
		Parse front matter from ``input``.

		Parameters:
			input: Text, bytes, a Document, or a mapping with ``content``.
			options: Parser options. Results are cached only when omitted.

		Returns:
			The parsed Document.
		"""
		if isinstance(input, str) and input == "":
			document = to_document(input)
			document.is_empty = True
			return document

		document = to_document(input)

		if options is None:
			cached = self.cache.get(document.content)
			if cached is not None:
				logger.debug("front matter cache hit (%d chars)",
				             len(document.content))
				return cached
			key = document.content
			scan_document(document)
			self.cache.set(key, document)
			return self.cache.get(key)

		return scan_document(document, options)

	def stringify(self,
	              document: Document | str,
	              data: dict[str, Any] | None = None,
	              options: Options = None) -> str:
		"""
		Serialize a document, or a string, with front matter.

		A string is returned unchanged when neither data nor options are
		given; otherwise it is parsed first so existing front matter is
		merged rather than duplicated.
		"""
		if isinstance(document, str) and (data is not None or
		                                  options is not None):
			document = self.parse(document, options)
		return stringify_document(document, data, options)

	def test(self, text: str, options: Options = None) -> bool:
		"""Return True if ``text`` starts with the opening delimiter."""
		return has_front_matter(text, options)

	def language(self, text: str, options: Options = None) -> LanguageInfo:
		"""Return the language tag on the opening delimiter line."""
		return detect_language(text, options)

	def clear_cache(self) -> None:
		self.cache.clear()


__all__ = ["MatterParser"]

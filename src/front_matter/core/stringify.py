"""
Front matter stringifier.

The inverse of the scanner: serializes metadata with the document's
engine and reassembles delimiters, metadata, an optional excerpt block
and the body.
"""

from __future__ import annotations

from typing import Any

from front_matter.core.engines import stringify_matter
from front_matter.exceptions import FrontMatterTypeError
from front_matter.models.document import Document
from front_matter.models.options import MatterOptions, resolve_options
from front_matter.utils.text import ensure_newline

# What an engine produces for an empty mapping (YAML and JSON agree)
EMPTY_MATTER = "{}"


def _has_document_shape(value: Any) -> bool:
	return hasattr(value, "content") and hasattr(value, "data")


def stringify_document(document: Document | str,
                       data: dict[Any, Any] | None = None,
                       options: MatterOptions | dict[str, Any] | None = None
                       ) -> str:
	"""
	Serialize a document and its metadata back to text.

	Metadata resolution: with neither ``data`` nor ``options`` the
	document's own data is used; with options but no data, the
	``data`` option is used (the body is returned as-is when it is
	unset); otherwise ``data`` is merged over the document data.

	A plain string is returned unchanged when no data or options are
	given. Strings with data or options must be parsed first; see
	``front_matter.stringify``.

	Parameters:
		document: Document (or compatible object) to serialize.
		data: Metadata merged over the document's data.
		options: Parser options.

	Returns:
		The assembled text, always ending with a single newline.

	Raises:
		FrontMatterTypeError: If ``document`` is not a string or document.
	"""
	if data is None and options is None:
		if isinstance(document, str):
			return document
		if not _has_document_shape(document):
			raise FrontMatterTypeError(
			    "expected document to be a string or an object with "
			    "content and data")
		data = document.data
		options = MatterOptions()
	elif not _has_document_shape(document):
		raise FrontMatterTypeError(
		    "expected document to be an object with content and data")

	content = document.content
	opts = resolve_options(options)

	if data is None:
		if not opts.data:
			return content
		data = opts.data

	language = document.language or opts.language
	merged = {**(document.data or {}), **data}
	matter = stringify_matter(language, merged, opts.engines).strip()

	buf = ""
	if matter != EMPTY_MATTER:
		buf = ensure_newline(opts.open) + ensure_newline(matter) + \
		    ensure_newline(opts.close)

	excerpt = getattr(document, "excerpt", "")
	if isinstance(excerpt, str) and excerpt:
		if excerpt.strip() not in content:
			buf += ensure_newline(excerpt) + ensure_newline(opts.close)

	return buf + ensure_newline(content)


__all__ = ["stringify_document"]

"""
Excerpt extraction.

An excerpt is the part of the body before a secondary separator. The
body itself is left untouched; ``document.excerpt`` is only a view.
"""

from __future__ import annotations

from typing import Any

from front_matter.models.document import Document
from front_matter.models.options import MatterOptions, resolve_options
from front_matter.utils.protocols import ExcerptStrategy


def excerpt_separator_from_data(data: dict[Any, Any]) -> str:
	"""Return ``data['excerpt_separator']`` if it is a string, else ''."""
	value = data.get("excerpt_separator")
	return value if isinstance(value, str) else ""


def extract_excerpt(
    document: Document,
    options: MatterOptions | dict[str, Any] | None = None) -> Document:
	"""
	Fill ``document.excerpt`` from the body when excerpts are enabled.

	Separator precedence: ``excerpt_separator`` in the parsed data, then
	a string ``excerpt`` option, then ``excerpt_separator`` option, then
	the opening delimiter. A callable ``excerpt`` option takes over
	completely.

	Parameters:
		document: Document whose body has already been separated.
		options: Parser options.

	Returns:
		The same document, mutated in place.
	"""
	opts = resolve_options(options)

	if document.data is None:
		document.data = {}

	if callable(opts.excerpt):
		hook: ExcerptStrategy = opts.excerpt
		hook(document, opts)
		return document

	data_sep = excerpt_separator_from_data(document.data)
	sep = data_sep or opts.excerpt_separator or None

	if sep is None and not opts.excerpt:
		return document

	if isinstance(opts.excerpt, str) and not data_sep:
		delimiter = opts.excerpt
	else:
		delimiter = sep if sep is not None else opts.open

	idx = document.content.find(delimiter)
	if idx != -1:
		document.excerpt = document.content[:idx]
	return document


__all__ = ["extract_excerpt", "excerpt_separator_from_data"]

"""
Front matter delimiter scanner.

Finds the opening and closing delimiters at the head of a document,
reads an optional language tag after the opening delimiter, parses the
block with the matching engine and leaves only the body in
``document.content``.
"""

from __future__ import annotations

from typing import Any, NamedTuple

from front_matter.core.engines import parse_matter
from front_matter.core.excerpt import extract_excerpt
from front_matter.models.document import Document
from front_matter.models.options import MatterOptions, resolve_options
from front_matter.utils.logging import get_logger
from front_matter.utils.text import first_line, strip_comments

logger = get_logger(__name__)


class LanguageInfo(NamedTuple):
	"""Language tag found after the opening delimiter."""

	raw: str
	name: str


def has_front_matter(text: str,
                     options: MatterOptions | dict[str, Any] | None = None
                     ) -> bool:
	"""Return True if ``text`` starts with the opening delimiter."""
	return text.startswith(resolve_options(options).open)


def _read_language(text: str) -> LanguageInfo:
	raw = first_line(text)
	return LanguageInfo(raw=raw, name=raw.strip())


def detect_language(text: str,
                    options: MatterOptions | dict[str, Any] | None = None
                    ) -> LanguageInfo:
	"""
	Detect a language tag on the opening delimiter line.

	For ``"---json\\n{...}"`` this returns ``LanguageInfo("json", "json")``.
	Only the rest of the opening delimiter line is inspected.

	Parameters:
		text: Document text.
		options: Parser options (for custom delimiters).

	Returns:
		The raw tag text and its trimmed name, both empty if there is none
		or the text does not open with a delimiter.
	"""
	opts = resolve_options(options)
	if not text.startswith(opts.open):
		return LanguageInfo(raw="", name="")
	return _read_language(text[len(opts.open):])


def scan_document(
    document: Document,
    options: MatterOptions | dict[str, Any] | None = None) -> Document:
	"""
	Split front matter from the body of ``document`` in place.

	Parameters:
		document: Normalized document; ``content`` holds the full text.
		options: Parser options.

	Returns:
		The same document with ``data``, ``matter``, ``language``,
		``content`` and ``excerpt`` filled in.

	Raises:
		UnknownLanguageError: If the block language has no engine.
		FrontMatterTypeError: If the block is not a mapping.
	"""
	opts = resolve_options(options)
	open_delim = opts.open
	close_delim = "\n" + opts.close
	text = document.content

	if opts.language:
		document.language = opts.language

	if not text.startswith(open_delim):
		return extract_excerpt(document, opts)

	# "----" is not a "---" delimiter
	if text[len(open_delim):len(open_delim) + 1] == open_delim[-1]:
		return document

	text = text[len(open_delim):]

	lang = _read_language(text)
	if lang.name:
		logger.debug("front matter language tag %r", lang.name)
		document.language = lang.name
		text = text[len(lang.raw):]

	close_index = text.find(close_delim)
	has_close = close_index != -1
	document.matter = text[:close_index] if has_close else text

	if not strip_comments(document.matter):
		logger.debug("front matter block is empty")
		document.is_empty = True
		document.empty = document.content
		document.data = {}
	else:
		document.data = parse_matter(document.language, document.matter,
		                             opts.engines)

	if not has_close:
		document.content = ""
	else:
		body = text[close_index + len(close_delim):]
		if body.startswith("\r"):
			body = body[1:]
		if body.startswith("\n"):
			body = body[1:]
		document.content = body

	return extract_excerpt(document, opts)


__all__ = [
    "LanguageInfo",
    "has_front_matter",
    "detect_language",
    "scan_document",
]

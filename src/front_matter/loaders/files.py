"""
File helpers.

Read a document from disk and parse its front matter, or write a
document back out with its front matter.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from front_matter.core.parser import MatterParser, Options
from front_matter.models.document import Document
from front_matter.utils.logging import get_logger

logger = get_logger(__name__)


def read_file(path: str | Path,
              options: Options = None,
              parser: MatterParser | None = None) -> Document:
	"""
	Read a file and parse its front matter.

	The file is read as UTF-8 bytes so ``Document.orig`` holds the exact
	file contents, BOM included.

	Parameters:
		path: File to read.
		options: Parser options.
		parser: Parser to use (and whose cache to use); defaults to a
			fresh parser so file reads do not fill the shared cache.

	Returns:
		Parsed Document with ``path`` set.
	"""
	path = Path(path)
	raw = path.read_bytes()
	logger.debug("reading front matter from %s", path)
	document = (parser or MatterParser()).parse(raw, options)
	document.path = str(path)
	return document


def write_file(path: str | Path,
               document: Document | str,
               data: dict[str, Any] | None = None,
               options: Options = None,
               parser: MatterParser | None = None) -> Path:
	"""
	Stringify a document and write it to ``path`` as UTF-8.

	Returns:
		The path written.
	"""
	path = Path(path)
	text = (parser or MatterParser()).stringify(document, data, options)
	path.parent.mkdir(parents=True, exist_ok=True)
	path.write_text(text, encoding="utf-8")
	return path


__all__ = ["read_file", "write_file"]

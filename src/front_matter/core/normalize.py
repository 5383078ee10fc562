"""
Input normalization.

Coerces the accepted input shapes (text, bytes, or a descriptor with a
``content`` field) into a fresh Document.
"""

from __future__ import annotations

from typing import Any, Mapping, Union

from front_matter.exceptions import FrontMatterTypeError
from front_matter.models.document import Document
from front_matter.utils.text import strip_bom

BytesLike = Union[bytes, bytearray, memoryview]
MatterInput = Union[str, BytesLike, Document, Mapping[str, Any]]


def to_text(value: str | BytesLike) -> str:
	"""
	Decode bytes as UTF-8 and strip a leading BOM.

	Invalid byte sequences become U+FFFD rather than failing the parse.

	Raises:
		FrontMatterTypeError: If the value is neither text nor bytes.
	"""
	if isinstance(value, (bytes, bytearray, memoryview)):
		return strip_bom(bytes(value).decode("utf-8", errors="replace"))
	if not isinstance(value, str):
		raise FrontMatterTypeError("expected input to be a string or bytes")
	return strip_bom(value)


def to_bytes(value: str | BytesLike) -> bytes:
	"""Return an immutable byte copy of text or bytes."""
	if isinstance(value, str):
		return value.encode("utf-8")
	return bytes(value)


def _descriptor_fields(input: Any) -> dict[str, Any]:
	if isinstance(input, Document):
		return {
		    "content": input.content,
		    "data": input.data,
		    "language": input.language,
		    "matter": input.matter,
		}
	if isinstance(input, Mapping):
		if "content" not in input:
			raise FrontMatterTypeError(
			    "expected input mapping to have a 'content' field")
		return dict(input)
	raise FrontMatterTypeError(
	    "expected input to be a string, bytes, or an object with content, "
	    f"got {type(input).__name__}")


def _string_field(fields: dict[str, Any], name: str) -> str:
	value = fields.get(name)
	return value if isinstance(value, str) else ""


def to_document(input: MatterInput) -> Document:
	"""
	Build a Document from any supported input shape.

	Parameters:
		input: Text, bytes, a Document, or a mapping with ``content``
			and optional ``data``, ``language`` and ``matter``.

	Returns:
		A new Document with BOM-stripped content and ``orig`` holding
		the original, unstripped bytes.

	Raises:
		FrontMatterTypeError: For unsupported input shapes.
	"""
	if isinstance(input, (str, bytes, bytearray, memoryview)):
		fields: dict[str, Any] = {"content": input}
	else:
		fields = _descriptor_fields(input)

	raw = fields.get("content")
	if raw is None:
		raw = ""
	data = fields.get("data")
	return Document(
	    content=to_text(raw),
	    data=dict(data) if isinstance(data, Mapping) else {},
	    language=_string_field(fields, "language"),
	    matter=_string_field(fields, "matter"),
	    orig=to_bytes(raw),
	)


__all__ = ["MatterInput", "to_text", "to_bytes", "to_document"]

"""
Document model.

A Document is the unit of work for the parser: it is created once per
input by the normalizer, filled in by the delimiter scanner and the
excerpt extractor, and can be handed back to the stringifier.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import TYPE_CHECKING, Any, Union

from pydantic import BaseModel, Field

if TYPE_CHECKING:
	from front_matter.models.options import MatterOptions

# Values produced by the built-in engines. Custom engines may return
# anything, and YAML keys need not be strings (``on:`` loads as True),
# so the model itself stores ``dict[Any, Any]``.
MetadataValue = Union[str, int, float, bool, None, date, datetime,
                      list["MetadataValue"], dict[str, "MetadataValue"]]
Metadata = dict[str, MetadataValue]


class Document(BaseModel):
	"""
	A text document split into front matter and body.

	Attributes:
		content: Body text; never includes the front matter block once parsed.
		data: Parsed front matter mapping.
		excerpt: Text before the excerpt separator, empty unless extracted.
		matter: Raw front matter block between the delimiters.
		language: Metadata language tag used for the block.
		is_empty: True when a block was present but held only comments.
		empty: Content as it was before parsing, set only when is_empty.
		orig: Original input bytes, BOM included.
		path: Source file path when loaded from disk.
	"""

	content: str = Field(default="", description="Body text")
	data: dict[Any, Any] = Field(default_factory=dict,
	                             description="Parsed front matter")
	excerpt: str = Field(default="", description="Extracted excerpt")
	matter: str = Field(default="", description="Raw front matter block")
	language: str = Field(default="", description="Front matter language")
	is_empty: bool = Field(default=False,
	                       description="Front matter block had no content")
	empty: str | None = Field(default=None,
	                          description="Pre-parse content of empty blocks")
	orig: bytes = Field(default=b"", description="Original input bytes")
	path: str | None = Field(default=None, description="Source file path")

	def stringify(self,
	              data: dict[str, Any] | None = None,
	              options: "MatterOptions | dict[str, Any] | None" = None
	              ) -> str:
		"""
		Serialize this document back to text with its front matter.

		A ``language`` in options replaces this document's language
		before serializing.

		Parameters:
			data: Metadata merged over ``self.data``.
			options: Parser options.

		Returns:
			The assembled document text.
		"""
		from front_matter.core.stringify import stringify_document
		from front_matter.models.options import MatterOptions

		if isinstance(options, dict):
			options = MatterOptions.model_validate(options)
		if options is not None and options.language:
			self.language = options.language
		return stringify_document(self, data, options)


__all__ = ["Document", "Metadata", "MetadataValue"]

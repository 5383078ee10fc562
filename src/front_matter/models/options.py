"""
Parser options.

``MatterOptions`` is what callers pass in; every field may be unset.
``ResolvedOptions`` is the same set of options with defaults applied,
which is what the scanner, excerpt extractor and stringifier work with.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_DELIMITER = "---"
DEFAULT_LANGUAGE = "yaml"

ExcerptOption = Union[bool, str, Callable[[Any, Any], None]]


def _normalize_delimiters(v: Any) -> Any:
	"""Turn a single delimiter or a 1/2 item sequence into a pair."""
	if v is None:
		return v
	if isinstance(v, str):
		v = [v]
	items = list(v)
	if not items or len(items) > 2:
		raise ValueError("delimiters must be a string or a 1-2 item sequence")
	if any(not isinstance(d, str) or not d for d in items):
		raise ValueError("delimiters must be non-empty strings")
	if len(items) == 1:
		return (items[0], items[0])
	return (items[0], items[1])


class MatterOptions(BaseModel):
	"""Options accepted by the parse and stringify entry points."""

	model_config = ConfigDict(arbitrary_types_allowed=True)

	language: Optional[str] = Field(
	    default=None, description="Front matter language (default: yaml)")
	delimiters: Optional[tuple[str, str]] = Field(
	    default=None, description="Opening and closing delimiters")
	excerpt: Optional[ExcerptOption] = Field(
	    default=None,
	    description="True, a separator string, or a custom excerpt hook")
	excerpt_separator: Optional[str] = Field(
	    default=None, description="Excerpt separator override")
	data: Optional[dict[Any, Any]] = Field(
	    default=None, description="Default data used when stringifying")
	engines: dict[str, Any] = Field(
	    default_factory=dict,
	    description="Extra engines by language tag, checked before built-ins")

	@field_validator("delimiters", mode="before")
	@classmethod
	def split_delimiters(cls, v: Any) -> Any:
		return _normalize_delimiters(v)

	@field_validator("language", mode="before")
	@classmethod
	def blank_language_is_unset(cls, v: Any) -> Any:
		if isinstance(v, str) and not v.strip():
			return None
		return v


class ResolvedOptions(MatterOptions):
	"""Options with defaults applied; delimiters and language are always set."""

	language: str = Field(default=DEFAULT_LANGUAGE)
	delimiters: tuple[str, str] = Field(
	    default=(DEFAULT_DELIMITER, DEFAULT_DELIMITER))

	@field_validator("language", mode="before")
	@classmethod
	def blank_language_is_unset(cls, v: Any) -> Any:
		if v is None or (isinstance(v, str) and not v.strip()):
			return DEFAULT_LANGUAGE
		return v

	@property
	def open(self) -> str:
		return self.delimiters[0]

	@property
	def close(self) -> str:
		return self.delimiters[1]


def resolve_options(
    options: MatterOptions | dict[str, Any] | None = None
) -> ResolvedOptions:
	"""
	Apply defaults to user options.

	Parameters:
		options: Options model, plain dict, or None.

	Returns:
		Fully resolved options.
	"""
	if isinstance(options, ResolvedOptions):
		return options
	if options is None:
		return ResolvedOptions()
	if isinstance(options, dict):
		options = MatterOptions.model_validate(options)
	values: dict[str, Any] = {}
	for name in MatterOptions.model_fields:
		value = getattr(options, name)
		if value is not None:
			values[name] = value
	return ResolvedOptions(**values)


__all__ = [
    "DEFAULT_DELIMITER",
    "DEFAULT_LANGUAGE",
    "MatterOptions",
    "ResolvedOptions",
    "resolve_options",
]

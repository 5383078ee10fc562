"""
Metadata language engines.

Provides the built-in YAML and JSON engines and the registry lookup
that maps a language tag to an engine. Extra engines supplied through
``MatterOptions.engines`` are consulted before the built-ins.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import Any, Mapping

import yaml

from front_matter.exceptions import (
    EngineCapabilityError,
    FrontMatterTypeError,
    UnknownLanguageError,
)
from front_matter.utils.protocols import Engine


class Language(str, Enum):
	"""Built-in metadata languages."""

	YAML = "yaml"
	JSON = "json"


LANGUAGE_ALIASES: dict[str, Language] = {
    "yaml": Language.YAML,
    "yml": Language.YAML,
    "json": Language.JSON,
}


class YamlEngine:
	"""YAML engine backed by PyYAML's safe loader and dumper."""

	def parse(self, text: str) -> Any:
		result = yaml.safe_load(text)
		return {} if result is None else result

	def stringify(self, data: dict[str, Any]) -> str:
		return yaml.safe_dump(
		    data,
		    allow_unicode=True,
		    sort_keys=False,
		    default_flow_style=False,
		)


class JsonEngine:
	"""JSON engine with two-space indented output."""

	indent = 2

	def parse(self, text: str) -> Any:
		return json.loads(text)

	def stringify(self, data: dict[str, Any]) -> str:
		return json.dumps(data, indent=self.indent, ensure_ascii=False)


BUILTIN_ENGINES: dict[Language, Engine] = {
    Language.YAML: YamlEngine(),
    Language.JSON: JsonEngine(),
}


def normalize_language(tag: str | Language) -> str:
	"""Lower-case and trim a language tag."""
	if isinstance(tag, Language):
		return tag.value
	return str(tag).strip().lower()


def to_builtin_language(tag: str | Language) -> Language:
	"""
	Map a tag or alias to a built-in language.

	Parameters:
		tag: Language tag such as ``"yaml"``, ``"yml"`` or ``"json"``.

	Returns:
		The matching Language member.

	Raises:
		UnknownLanguageError: If the tag is not a built-in language.
	"""
	name = normalize_language(tag)
	try:
		return LANGUAGE_ALIASES[name]
	except KeyError:
		raise UnknownLanguageError(str(tag)) from None


def get_engine(tag: str | Language,
               engines: Mapping[str, Engine] | None = None) -> Engine:
	"""
	Resolve the engine for a language tag.

	Custom engines are matched on the tag as given first, then on its
	normalized form, before falling back to the built-ins.

	Parameters:
		tag: Language tag.
		engines: Extra engines keyed by tag.

	Returns:
		Engine for the tag.

	Raises:
		UnknownLanguageError: If no engine is registered for the tag.
	"""
	if engines:
		name = normalize_language(tag)
		for key in (tag, name):
			if key in engines:
				return engines[key]
		for key, engine in engines.items():
			if normalize_language(key) == name:
				return engine
	return BUILTIN_ENGINES[to_builtin_language(tag)]


def parse_matter(tag: str | Language,
                 text: str,
                 engines: Mapping[str, Engine] | None = None) -> dict[str, Any]:
	"""
	Parse a raw front matter block with the engine for ``tag``.

	Engine errors propagate unchanged.

	Raises:
		FrontMatterTypeError: If the block does not parse to a mapping.
	"""
	data = get_engine(tag, engines).parse(text)
	if not isinstance(data, Mapping):
		raise FrontMatterTypeError(
		    f"expected front matter to be a mapping, got {type(data).__name__}")
	return dict(data)


def stringify_matter(tag: str | Language,
                     data: dict[str, Any],
                     engines: Mapping[str, Engine] | None = None) -> str:
	"""
	Serialize a mapping with the engine for ``tag``.

	Raises:
		EngineCapabilityError: If the engine cannot stringify.
	"""
	engine = get_engine(tag, engines)
	dump = getattr(engine, "stringify", None)
	if dump is None:
		raise EngineCapabilityError(
		    f"engine for {normalize_language(tag)!r} cannot stringify")
	return dump(data)


__all__ = [
    "Language",
    "LANGUAGE_ALIASES",
    "YamlEngine",
    "JsonEngine",
    "BUILTIN_ENGINES",
    "normalize_language",
    "to_builtin_language",
    "get_engine",
    "parse_matter",
    "stringify_matter",
]

"""
Protocol definitions for pluggable collaborators.

Defines the metadata engine interface and the excerpt strategy hook so
callers can plug in their own implementations (and tests can use fakes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
	from front_matter.models.document import Document
	from front_matter.models.options import ResolvedOptions


@runtime_checkable
class Engine(Protocol):
	"""
	Protocol for a metadata language engine.

	An engine turns the raw text between the delimiters into a mapping
	and back again.
	"""

	def parse(self, text: str) -> Any:
		"""Parse raw front matter text into a mapping."""
		...

	def stringify(self, data: dict[str, Any]) -> str:
		"""Serialize a mapping into front matter text."""
		...


class ExcerptStrategy(Protocol):
	"""
	Protocol for a custom excerpt hook.

	The hook receives the document and resolved options and is
	responsible for setting ``document.excerpt`` itself.
	"""

	def __call__(self, document: "Document",
	             options: "ResolvedOptions") -> None:
		...


__all__ = ["Engine", "ExcerptStrategy"]

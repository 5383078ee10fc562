"""
Parsed document cache.

Keyed by the normalized document text. Only the no-options parse path
uses it. There is no eviction; call ``clear`` to release entries.
"""

from __future__ import annotations

import threading

from front_matter.models.document import Document


class DocumentCache:
	"""Unbounded, lock-guarded mapping from raw text to a parsed Document."""

	def __init__(self) -> None:
		self._items: dict[str, Document] = {}
		self._lock = threading.Lock()

	def get(self, key: str) -> Document | None:
		"""
		Return a copy of the cached document for ``key``.

		The copy has its own ``data`` dict; nested values and ``orig``
		are shared with the cached entry.
		"""
		with self._lock:
			cached = self._items.get(key)
		if cached is None:
			return None
		return cached.model_copy(update={"data": dict(cached.data)})

	def set(self, key: str, document: Document) -> None:
		with self._lock:
			self._items[key] = document

	def clear(self) -> None:
		with self._lock:
			self._items.clear()

	def __contains__(self, key: object) -> bool:
		with self._lock:
			return key in self._items

	def __len__(self) -> int:
		with self._lock:
			return len(self._items)


__all__ = ["DocumentCache"]

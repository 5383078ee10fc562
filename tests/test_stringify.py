"""Tests for serializing documents back to text."""

from __future__ import annotations

import datetime

import pytest

from front_matter import matter, stringify
from front_matter.core.stringify import stringify_document
from front_matter.exceptions import FrontMatterTypeError
from front_matter.models.document import Document


class TestStringify:
	"""Tests for stringify() with string input."""

	def test_string_with_data(self) -> None:
		out = stringify("content", {"title": "Hello"})
		assert out == "---\ntitle: Hello\n---\ncontent\n"
		assert out.endswith("content\n")
		assert not out.endswith("\n\n")

	def test_plain_string_unchanged(self) -> None:
		"""Strings without data or options pass through untouched."""
		assert stringify("content") == "content"

	def test_string_with_existing_front_matter_is_merged(self) -> None:
		out = stringify("---\ntitle: Old\nn: 1\n---\nbody\n",
		                {"title": "New"})
		assert out == "---\ntitle: New\nn: 1\n---\nbody\n"

	def test_trailing_newline_not_doubled(self) -> None:
		out = stringify("content\n", {"a": 1})
		assert out == "---\na: 1\n---\ncontent\n"


class TestStringifyDocument:
	"""Tests for stringify_document()."""

	def test_uses_document_data(self) -> None:
		doc = Document(content="body", data={"a": 1})
		assert stringify_document(doc) == "---\na: 1\n---\nbody\n"

	def test_override_wins(self) -> None:
		"""Override keys replace same-named document keys."""
		doc = Document(content="body", data={"a": 1, "b": 2})
		out = stringify_document(doc, {"b": 3, "c": 4})
		assert out == "---\na: 1\nb: 3\nc: 4\n---\nbody\n"
		assert doc.data == {"a": 1, "b": 2}

	def test_empty_data_writes_no_block(self) -> None:
		doc = Document(content="body\n")
		assert stringify_document(doc, {}) == "body\n"

	def test_options_data_default(self) -> None:
		doc = Document(content="x")
		out = stringify_document(doc, None, {"data": {"t": 1}})
		assert out == "---\nt: 1\n---\nx\n"

	def test_options_without_data_returns_content(self) -> None:
		doc = Document(content="x", data={"a": 1})
		assert stringify_document(doc, None, {"language": "yaml"}) == "x"

	def test_json_language(self) -> None:
		doc = Document(content="x", data={"a": 1}, language="json")
		assert stringify_document(doc) == '---\n{\n  "a": 1\n}\n---\nx\n'

	def test_options_language_used_when_document_has_none(self) -> None:
		doc = Document(content="x")
		out = stringify_document(doc, {"a": 1}, {"language": "json"})
		assert out == '---\n{\n  "a": 1\n}\n---\nx\n'

	def test_custom_delimiters(self) -> None:
		doc = Document(content="x")
		out = stringify_document(doc, {"a": 1}, {"delimiters": ["+++", "..."]})
		assert out == "+++\na: 1\n...\nx\n"

	def test_excerpt_block_reconstructed(self) -> None:
		"""An excerpt missing from the body is written before it."""
		doc = Document(content="body", data={"a": 1}, excerpt="summary")
		assert stringify_document(doc) == (
		    "---\na: 1\n---\nsummary\n---\nbody\n")

	def test_excerpt_in_body_not_duplicated(self) -> None:
		doc = Document(content="summary\n---\nbody",
		               data={"a": 1},
		               excerpt="summary\n")
		assert stringify_document(doc) == "---\na: 1\n---\nsummary\n---\nbody\n"

	def test_rejects_non_document(self) -> None:
		with pytest.raises(FrontMatterTypeError):
			stringify_document(42)  # type: ignore[arg-type]

	def test_rejects_non_document_with_data(self) -> None:
		with pytest.raises(TypeError):
			stringify_document(object(), {"a": 1})  # type: ignore[arg-type]

	def test_document_method(self) -> None:
		doc = Document(content="x", data={"a": 1})
		assert doc.stringify() == "---\na: 1\n---\nx\n"

	def test_document_method_language_option(self) -> None:
		"""A language option on Document.stringify switches engines."""
		doc = Document(content="x", data={"a": 1}, language="yaml")
		out = doc.stringify(None, {"language": "json", "data": {"b": 2}})
		assert doc.language == "json"
		assert out == '---\n{\n  "a": 1,\n  "b": 2\n}\n---\nx\n'


class TestRoundTrip:
	"""Parsing stringified output recovers the metadata."""

	@pytest.mark.parametrize("language", ["yaml", "json"])
	def test_round_trip(self, language: str) -> None:
		data = {
		    "title": "Hello",
		    "tags": ["a", "b"],
		    "count": 3,
		    "draft": False,
		    "nested": {"x": 1.5, "y": None},
		}
		doc = Document(content="Body text\n", data=data, language=language)
		parsed = matter(stringify_document(doc), {"language": language})
		assert parsed.data == data
		assert parsed.content == "Body text\n"

	def test_yaml_dates(self) -> None:
		data = {"date": datetime.date(2024, 1, 2)}
		parsed = matter(stringify_document(Document(content="x", data=data)))
		assert parsed.data == data

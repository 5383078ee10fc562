"""Tests for the logging module."""

from __future__ import annotations

import logging

from front_matter import matter
from front_matter.utils.logging import (
	PACKAGE_LOGGER,
	configure_logging,
	get_logger,
	resolve_level,
)


class TestResolveLevel:
	"""Tests for resolve_level()."""

	def test_names_any_case(self) -> None:
		assert resolve_level("debug") == logging.DEBUG
		assert resolve_level("INFO") == logging.INFO

	def test_unknown_falls_back_to_warning(self) -> None:
		assert resolve_level("chatty") == logging.WARNING

	def test_numeric_passthrough(self) -> None:
		assert resolve_level(15) == 15


class TestConfigureLogging:
	"""Tests for configure_logging()."""

	def test_sets_package_level(self) -> None:
		configure_logging("debug")
		assert logging.getLogger(PACKAGE_LOGGER).level == logging.DEBUG
		configure_logging("warning")
		assert logging.getLogger(PACKAGE_LOGGER).level == logging.WARNING

	def test_get_logger_name(self) -> None:
		assert get_logger("front_matter.core.scanner").name == (
		    "front_matter.core.scanner")


def test_scanner_logs_language_tag(caplog) -> None:
	"""The scanner emits a debug record for a language tag."""
	with caplog.at_level(logging.DEBUG, logger=PACKAGE_LOGGER):
		matter('---json\n{"a": 1}\n---\n', {"language": "yaml"})
	assert any("language tag" in r.getMessage() for r in caplog.records)


def test_cache_hit_logged(caplog) -> None:
	text = "---\na: 1\n---\nbody"
	with caplog.at_level(logging.DEBUG, logger=PACKAGE_LOGGER):
		matter(text)
		matter(text)
	assert any("cache hit" in r.getMessage() for r in caplog.records)

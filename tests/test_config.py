import os

import pytest
from pydantic import ValidationError

from front_matter.models.config import Config, load_env


def test_defaults():
	cfg = Config()
	assert cfg.language == "yaml"
	assert cfg.delimiters == ["---"]
	assert cfg.excerpt_separator is None


def test_delimiters_parsing():
	cfg = Config(FRONT_MATTER_DELIMITERS="~~~, +++ ")
	assert cfg.delimiters == ["~~~", "+++"]


def test_too_many_delimiters():
	with pytest.raises(ValidationError):
		Config(FRONT_MATTER_DELIMITERS="a,b,c")


def test_language_from_env(monkeypatch):
	monkeypatch.setenv("FRONT_MATTER_LANGUAGE", "json")
	assert Config().language == "json"


def test_log_level_from_env(monkeypatch):
	monkeypatch.setenv("LOG_LEVEL", "debug")
	assert Config().log_level == "debug"


def test_to_options():
	cfg = Config(FRONT_MATTER_DELIMITERS="+++",
	             FRONT_MATTER_EXCERPT_SEPARATOR="<!--more-->")
	opts = cfg.to_options(excerpt=True)
	assert opts.delimiters == ("+++", "+++")
	assert opts.language == "yaml"
	assert opts.excerpt_separator == "<!--more-->"
	assert opts.excerpt is True


def test_apply_overrides():
	cfg = Config()
	cfg.apply_overrides(language="json", delimiters=["<!--", "-->"])
	assert cfg.language == "json"
	assert cfg.delimiters == ["<!--", "-->"]
	assert cfg.excerpt_separator is None


def test_apply_overrides_keeps_unset():
	cfg = Config(FRONT_MATTER_LANGUAGE="json")
	cfg.apply_overrides(language=None, delimiters=[])
	assert cfg.language == "json"
	assert cfg.delimiters == ["---"]


def test_apply_overrides_rejects_three_delimiters():
	with pytest.raises(ValueError):
		Config().apply_overrides(delimiters=["a", "b", "c"])


def test_load_env_missing_file(tmp_path):
	load_env(tmp_path / "missing.env")


def test_load_env_reads_file(tmp_path, monkeypatch):
	env = tmp_path / ".env"
	env.write_text("FRONT_MATTER_EXCERPT_SEPARATOR=@@\n", encoding="utf-8")
	monkeypatch.delenv("FRONT_MATTER_EXCERPT_SEPARATOR", raising=False)
	try:
		load_env(env)
		assert Config().excerpt_separator == "@@"
	finally:
		os.environ.pop("FRONT_MATTER_EXCERPT_SEPARATOR", None)

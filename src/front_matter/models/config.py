from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

from front_matter.models.options import (
    DEFAULT_DELIMITER,
    DEFAULT_LANGUAGE,
    MatterOptions,
)


def _check_delimiter_count(v: list[str]) -> list[str]:
	if not 1 <= len(v) <= 2:
		raise ValueError("FRONT_MATTER_DELIMITERS takes one or two values")
	return v


def load_env(env_file: str | Path | None = None) -> None:
	"""Load environment variables from an `.env` file if present."""
	env_path = Path(env_file) if env_file else Path(".env")
	if env_path.exists():
		load_dotenv(env_path)


class Config(BaseSettings):
	"""Runtime configuration loaded from environment variables."""

	model_config = SettingsConfigDict(env_prefix="", case_sensitive=False)

	language: str = Field(
	    DEFAULT_LANGUAGE,
	    alias="FRONT_MATTER_LANGUAGE",
	    description="Default front matter language",
	)
	delimiters: Any = Field(
	    default_factory=lambda: [DEFAULT_DELIMITER],
	    alias="FRONT_MATTER_DELIMITERS",
	    description="Opening (and optional closing) delimiter, comma separated",
	)
	excerpt_separator: str | None = Field(
	    default=None,
	    alias="FRONT_MATTER_EXCERPT_SEPARATOR",
	    description="Default excerpt separator",
	)
	log_level: str = Field("warning", alias="LOG_LEVEL",
	                       description="Log level for the CLI")

	@field_validator("delimiters", mode="before")
	@classmethod
	def split_delimiters(cls, v: Any) -> list[str]:
		"""Normalize delimiters to a list regardless of input format."""
		if v is None or v == "":
			return [DEFAULT_DELIMITER]
		if isinstance(v, list):
			return v
		if isinstance(v, tuple):
			return list(v)
		# fallback: comma-separated string
		return [p.strip() for p in str(v).split(",") if p.strip()]

	@field_validator("delimiters", mode="after")
	@classmethod
	def validate_delimiter_count(cls, v: list[str]) -> list[str]:
		return _check_delimiter_count(v)

	def apply_overrides(
	    self,
	    *,
	    language: Optional[str] = None,
	    delimiters: Optional[list[str]] = None,
	    excerpt_separator: Optional[str] = None,
	) -> None:
		"""Apply CLI overrides onto this config.

		Only non-empty values are applied, preserving environment-based
		defaults for anything the user didn't explicitly set.
		"""
		if language:
			self.language = language
		if delimiters:
			self.delimiters = _check_delimiter_count(list(delimiters))
		if excerpt_separator:
			self.excerpt_separator = excerpt_separator

	def to_options(self, **extra: Any) -> MatterOptions:
		"""
		Build parser options from this config.

		Parameters:
			extra: Additional MatterOptions fields (e.g. ``excerpt``).

		Returns:
			MatterOptions populated from the config.
		"""
		return MatterOptions(
		    language=self.language,
		    delimiters=self.delimiters,
		    excerpt_separator=self.excerpt_separator,
		    **extra,
		)


__all__ = ["Config", "load_env"]

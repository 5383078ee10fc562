"""
Logging configuration module.

Library modules only emit debug records through ``get_logger``; nothing
is configured on import. Applications (and the CLI) call
``configure_logging`` once at startup.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

PACKAGE_LOGGER = "front_matter"


def resolve_level(level: str | int) -> int:
	"""
	Translate a level name such as ``"debug"`` into a logging level.

	Unknown names fall back to ``logging.WARNING``.

	Parameters:
		level: Level name (any case) or numeric level.

	Returns:
		Numeric logging level.
	"""
	if isinstance(level, int):
		return level
	return logging._nameToLevel.get(level.strip().upper(), logging.WARNING)


def configure_logging(level: str | int = "warning") -> None:
	"""
	Configure basic logging with level and format.

	The package logger level is set explicitly so repeated calls with a
	different level take effect even after ``basicConfig`` has run.

	Parameters:
		level: Log level string (e.g., "info", "debug", "warning").
	"""
	lvl = resolve_level(level)
	logging.basicConfig(level=lvl, format=LOG_FORMAT)
	logging.getLogger(PACKAGE_LOGGER).setLevel(lvl)


def get_logger(name: str) -> logging.Logger:
	"""
	Get a logger for the specified module.

	Parameters:
		name: The logger name, typically __name__.

	Returns:
		Configured logger instance.
	"""
	return logging.getLogger(name)


__all__ = [
    "LOG_FORMAT",
    "configure_logging",
    "get_logger",
    "resolve_level",
]

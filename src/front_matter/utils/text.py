"""
Small text helpers shared by the scanner and stringifier.
"""

from __future__ import annotations

import re

BOM = "\ufeff"

# A comment line: optional leading whitespace, then '#' and the rest of the line
COMMENT_LINE_RE = re.compile(r"^\s*#[^\n]+", re.M)
LINE_BREAK_RE = re.compile(r"\r?\n")


def strip_bom(text: str) -> str:
	"""Remove a leading byte-order mark, if present."""
	return text[1:] if text.startswith(BOM) else text


def ensure_newline(text: str) -> str:
	"""Append a line feed unless the text already ends with one."""
	return text if text.endswith("\n") else text + "\n"


def strip_comments(block: str) -> str:
	"""
	Drop comment lines from a front matter block and trim it.

	Parameters:
		block: Raw front matter text.

	Returns:
		The block without ``#`` comment lines, whitespace-trimmed.
	"""
	return COMMENT_LINE_RE.sub("", block).strip()


def first_line(text: str) -> str:
	"""
	Return the text up to (not including) the first line break.

	Returns the whole text when it contains no line break.
	"""
	m = LINE_BREAK_RE.search(text)
	return text[:m.start()] if m else text


__all__ = [
    "BOM",
    "strip_bom",
    "ensure_newline",
    "strip_comments",
    "first_line",
]

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, List, Optional

import typer
import yaml
from rich.console import Console
from typer.main import get_command

from front_matter.core.normalize import to_text
from front_matter.core.parser import MatterParser
from front_matter.core.stringify import stringify_document
from front_matter.exceptions import FrontMatterError
from front_matter.loaders.files import read_file, write_file
from front_matter.models.config import Config, load_env
from front_matter.models.options import MatterOptions
from front_matter.utils.logging import configure_logging

cli = typer.Typer(add_completion=False, no_args_is_help=True)
console = Console()
err_console = Console(stderr=True)

# Errors a malformed document or bad option can raise while parsing
PARSE_ERRORS = (FrontMatterError, yaml.YAMLError, json.JSONDecodeError,
                ValueError)

FileArg = typer.Argument(..., exists=True, dir_okay=False, readable=True,
                         help="Document to read")
LanguageOpt = typer.Option(None, "--language", "-l",
                           help="Front matter language (yaml, json)")
DelimiterOpt = typer.Option(
    None, "--delimiter", "-d",
    help="Delimiter; pass twice for distinct open/close delimiters")
ExcerptOpt = typer.Option(None, "--excerpt/--no-excerpt",
                          help="Extract an excerpt from the body")
ExcerptSepOpt = typer.Option(None, "--excerpt-separator",
                             help="Excerpt separator")


@cli.callback()
def root() -> None:
	"""
	Root callback for the front-matter CLI.

	Sets up the Typer application with no-args-is-help behavior.
	"""
	return None


def build_options(
    language: Optional[str] = None,
    delimiters: Optional[List[str]] = None,
    excerpt: Optional[bool] = None,
    excerpt_separator: Optional[str] = None,
) -> MatterOptions:
	"""
	Merge environment configuration with CLI flags into parser options.

	Also configures logging from the resolved config.
	"""
	load_env()
	config = Config()
	config.apply_overrides(
	    language=language,
	    delimiters=delimiters,
	    excerpt_separator=excerpt_separator,
	)
	configure_logging(config.log_level)
	return config.to_options(excerpt=excerpt)


def _fail(exc: BaseException) -> None:
	err_console.print(f"error: {exc}", style="red", markup=False,
	                  highlight=False)
	raise typer.Exit(code=2)


def _parse_assignment(item: str) -> tuple[str, Any]:
	"""Split ``key=value``; the value is read as a YAML scalar."""
	key, sep, value = item.partition("=")
	key = key.strip()
	if not sep or not key:
		raise typer.BadParameter(f"expected key=value, got {item!r}",
		                         param_hint="--set")
	return key, yaml.safe_load(value) if value.strip() else ""


@cli.command("parse")
def parse_cmd(
    file: Path = FileArg,
    language: str = LanguageOpt,
    delimiter: List[str] = DelimiterOpt,
    excerpt: bool = ExcerptOpt,
    excerpt_separator: str = ExcerptSepOpt,
    data_only: bool = typer.Option(False, "--data-only",
                                   help="Print only the metadata"),
) -> None:
	"""Parse a document and print its front matter and body as JSON."""
	try:
		options = build_options(language, delimiter, excerpt,
		                        excerpt_separator)
		document = read_file(file, options)
	except PARSE_ERRORS as exc:
		_fail(exc)
	if data_only:
		payload: Any = document.data
	else:
		payload = {
		    "data": document.data,
		    "content": document.content,
		    "excerpt": document.excerpt,
		    "language": document.language,
		    "is_empty": document.is_empty,
		}
	rendered = json.dumps(payload, default=str, ensure_ascii=False, indent=2)
	# Highlight for humans; keep piped output plain and unwrapped
	if sys.stdout.isatty():
		console.print_json(rendered)
	else:
		typer.echo(rendered)


@cli.command("test")
def test_cmd(
    file: Path = FileArg,
    delimiter: List[str] = DelimiterOpt,
) -> None:
	"""Exit 0 if the document has front matter, 1 otherwise."""
	try:
		options = build_options(delimiters=delimiter)
		text = to_text(file.read_bytes())
	except PARSE_ERRORS as exc:
		_fail(exc)
	found = MatterParser().test(text, options)
	typer.echo("true" if found else "false")
	raise typer.Exit(code=0 if found else 1)


@cli.command("lang")
def lang_cmd(
    file: Path = FileArg,
    delimiter: List[str] = DelimiterOpt,
) -> None:
	"""Print the language tag after the opening delimiter, if any."""
	try:
		options = build_options(delimiters=delimiter)
		text = to_text(file.read_bytes())
	except PARSE_ERRORS as exc:
		_fail(exc)
	info = MatterParser().language(text, options)
	typer.echo(info.name)


@cli.command("stringify")
def stringify_cmd(
    file: Path = FileArg,
    assignments: List[str] = typer.Option(
        None, "--set", "-s", help="Metadata to set, as key=value"),
    output: Path = typer.Option(None, "--output", "-o",
                                help="Write here instead of stdout"),
    language: str = LanguageOpt,
    delimiter: List[str] = DelimiterOpt,
) -> None:
	"""Merge metadata into a document and print or write the result."""
	try:
		updates = dict(_parse_assignment(a) for a in (assignments or []))
		options = build_options(language, delimiter)
		document = read_file(file, options)
		if output is not None:
			write_file(output, document, updates, options)
			typer.echo(str(output))
			return
		text = stringify_document(document, updates, options)
	except PARSE_ERRORS as exc:
		_fail(exc)
	typer.echo(text, nl=False)


def entrypoint(argv=None, *, standalone_mode: bool = True):
	"""
	Typer entrypoint that defaults to `parse` when appropriate.

	Allows calling 'front-matter post.md' without explicitly
	specifying the 'parse' subcommand.

	Parameters:
		argv: Command-line arguments. Defaults to sys.argv[1:].
		standalone_mode: If True, Click handles exit codes.

	Returns:
		Result of the Click application main invocation.
	"""
	args = sys.argv[1:] if argv is None else list(argv)

	_click_app = get_command(cli)
	commands = getattr(_click_app, "commands", {}).keys()
	if args and not args[0].startswith("-") and args[0] not in commands:
		args = ["parse"] + args
	return _click_app.main(
	    args=args,
	    prog_name="front-matter",
	    standalone_mode=standalone_mode,
	)


if __name__ == "__main__":
	entrypoint()

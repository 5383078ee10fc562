import pytest
from pydantic import ValidationError

from front_matter.models.options import (
    MatterOptions,
    ResolvedOptions,
    resolve_options,
)


def test_defaults():
	opts = resolve_options()
	assert opts.delimiters == ("---", "---")
	assert opts.language == "yaml"
	assert opts.excerpt is None
	assert opts.engines == {}


def test_single_delimiter_used_for_both():
	opts = resolve_options({"delimiters": "~~~"})
	assert opts.open == "~~~"
	assert opts.close == "~~~"


def test_one_item_list_delimiter():
	assert resolve_options({"delimiters": ["+++"]}).delimiters == ("+++",
	                                                               "+++")


def test_two_delimiters():
	opts = resolve_options(MatterOptions(delimiters=("<!--", "-->")))
	assert opts.open == "<!--"
	assert opts.close == "-->"


def test_too_many_delimiters():
	with pytest.raises(ValidationError):
		MatterOptions(delimiters=["a", "b", "c"])


def test_empty_delimiter_rejected():
	with pytest.raises(ValidationError):
		MatterOptions(delimiters="")


def test_blank_language_uses_default():
	assert resolve_options({"language": "  "}).language == "yaml"


def test_resolved_options_blank_language_uses_default():
	assert ResolvedOptions(language=" ").language == "yaml"
	assert ResolvedOptions(language=None).language == "yaml"


def test_language_kept():
	assert resolve_options({"language": "json"}).language == "json"


def test_resolved_options_pass_through():
	opts = ResolvedOptions(language="json")
	assert resolve_options(opts) is opts


def test_callable_excerpt_preserved():

	def hook(document, options):
		document.excerpt = "x"

	assert resolve_options({"excerpt": hook}).excerpt is hook


def test_string_excerpt_preserved():
	assert resolve_options({"excerpt": "<!-- more -->"}).excerpt == (
	    "<!-- more -->")


def test_data_option():
	assert resolve_options({"data": {"a": 1}}).data == {"a": 1}

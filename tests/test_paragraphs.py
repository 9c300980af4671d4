from textwrap import dedent

import pytest

from pkganalyzer.errors import MetadataError, ParagraphParseError
from pkganalyzer.paragraphs import load_paragraphs, parse_paragraphs


def test_parse_multiple_paragraphs():
	text = dedent(
		"""\
		Source: zlib
		Version: 1.2.11
		Description: A compression library

		Feature: extra
		Description: Extra bits
		"""
	)
	pghs = parse_paragraphs(text)
	assert len(pghs) == 2
	assert pghs[0] == {"Source": "zlib", "Version": "1.2.11", "Description": "A compression library"}
	assert pghs[1]["Feature"] == "extra"


def test_continuation_lines_and_comments():
	text = "# comment\nSource: foo\nDescription: first line\n  second line\n"
	pghs = parse_paragraphs(text)
	assert pghs == [{"Source": "foo", "Description": "first line\nsecond line"}]


def test_extra_blank_lines_do_not_create_empty_paragraphs():
	assert parse_paragraphs("\n\nSource: a\n\n\n\nSource: b\n\n") == [{"Source": "a"}, {"Source": "b"}]


def test_empty_text():
	assert parse_paragraphs("") == []


@pytest.mark.parametrize(
	"text",
	[
		"Source foo\n",
		"  dangling continuation\n",
		"Source: a\nSource: b\n",
		"Bad Name: x\n",
	],
)
def test_malformed_paragraphs(text):
	with pytest.raises(ParagraphParseError):
		parse_paragraphs(text)


def test_parse_error_reports_line():
	with pytest.raises(ParagraphParseError) as exc:
		parse_paragraphs("Source: a\nbroken\n")
	assert exc.value.line == 2
	assert "line 2" in str(exc.value)


def test_load_missing_file(tmp_path):
	with pytest.raises(MetadataError, match="does not exist"):
		load_paragraphs(str(tmp_path / "CONTROL"))


def test_load_malformed_file_names_path(tmp_path):
	p = tmp_path / "CONTROL"
	p.write_text("garbage\n")
	with pytest.raises(ParagraphParseError, match="CONTROL"):
		load_paragraphs(str(p))

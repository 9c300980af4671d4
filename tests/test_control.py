import pytest

from pkganalyzer.control import read_control
from pkganalyzer.errors import MetadataError


def test_source_control(make_package):
	root = make_package("foo", {"CONTROL": "Source: foo\nVersion: 1.0\nDescription: Says \"hi\"\n"})
	assert read_control(str(root)) == ("foo", 'Says \\"hi\\"')


def test_binary_control_uses_package(make_package):
	root = make_package("bar", {"CONTROL": "Package: bar\nArchitecture: x64-linux\n"})
	assert read_control(str(root)) == ("bar", "")


def test_only_first_paragraph_is_used(make_package):
	root = make_package("baz", {"CONTROL": "Source: baz\n\nPackage: other\nDescription: nope\n"})
	assert read_control(str(root)) == ("baz", "")


def test_multiline_description_is_escaped(make_package):
	root = make_package("ml", {"CONTROL": "Source: ml\nDescription: one\n two\n"})
	assert read_control(str(root))[1] == "one\\ntwo"


def test_missing_control(tmp_path):
	with pytest.raises(MetadataError):
		read_control(str(tmp_path))


def test_empty_control(make_package):
	root = make_package("empty", {"CONTROL": "\n# nothing\n"})
	with pytest.raises(MetadataError, match="no paragraphs"):
		read_control(str(root))

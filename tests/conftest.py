import logging
import os
import zipfile
from textwrap import dedent

import pytest


FOO_CONFIG = dedent(
	"""
	add_library(foo::bar INTERFACE IMPORTED)
	add_library(foo::baz INTERFACE IMPORTED)
	"""
)


def write_tree(root, files):
	for rel, text in files.items():
		path = root / rel
		path.parent.mkdir(parents=True, exist_ok=True)
		path.write_text(text, newline="")
	return root


def zip_tree(root, archive):
	with zipfile.ZipFile(archive, "w") as zf:
		for dirpath, _, filenames in os.walk(root):
			for filename in filenames:
				full = os.path.join(dirpath, filename)
				zf.write(full, os.path.relpath(full, root))
	return archive


@pytest.fixture(autouse=True)
def restore_root_logger():
	root = logging.getLogger()
	handlers = root.handlers[:]
	level = root.level
	yield
	for handler in root.handlers[:]:
		if handler not in handlers:
			root.removeHandler(handler)
			handler.close()
	root.setLevel(level)


@pytest.fixture
def make_package(tmp_path):
	"""Create an extracted package tree under tmp_path/<name>."""
	def _make(name, files):
		return write_tree(tmp_path / name, files)
	return _make


@pytest.fixture
def make_archive(tmp_path):
	"""Create <name>.zip under tmp_path/archives from a dict of files."""
	def _make(name, files, subdir="archives"):
		src = write_tree(tmp_path / "src" / subdir / name, files)
		out_dir = tmp_path / subdir
		out_dir.mkdir(parents=True, exist_ok=True)
		return str(zip_tree(src, out_dir / f"{name}.zip"))
	return _make


@pytest.fixture
def foo_files():
	return {
		"CONTROL": "Source: foo\n",
		"share/foo/fooConfig.cmake": FOO_CONFIG,
	}

"""Target discovery in installed .cmake files.

This is a text heuristic, not CMake evaluation: ``add_library`` calls hidden
behind macros, variables or generator expressions are not found, and calls
in disabled branches are reported anyway.
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import PurePath
from typing import List, Optional, Tuple

from .model import ConfigMap, TargetMap


logger = logging.getLogger(__name__)

CMAKE_LIBRARY_RE = re.compile(r"\badd_library\(([^\s\)]+)\s")

CONFIG_SUFFIXES = ("Config.cmake", "-config.cmake")


def is_share_cmake_file(path: str) -> bool:
	generic = PurePath(path).as_posix()
	return "/share/" in generic.lower() and generic.endswith(".cmake")


def find_library_targets(text: str) -> List[str]:
	return CMAKE_LIBRARY_RE.findall(text)


def config_root(filename: str) -> Optional[str]:
	"""Strip a ``Config.cmake``/``-config.cmake`` suffix, if present."""
	for suffix in CONFIG_SUFFIXES:
		if filename.endswith(suffix):
			return filename[: -len(suffix)]
	return None


def _read_text(path: str) -> Optional[str]:
	try:
		with open(path, "r", encoding="utf-8", errors="replace") as fh:
			return fh.read()
	except OSError as e:
		logger.debug("Skipping unreadable %s: %s", path, e)
		return None


def parse_cmake_targets(files: List[str]) -> Tuple[ConfigMap, TargetMap]:
	"""Collect exported targets and config-file names from ``share/`` files.

	Targets are keyed by the name of the directory holding the .cmake file,
	which is the name a consumer passes to ``find_package``. They are kept in
	discovery order, duplicates included; callers sort them for output.

	A ``<Root>Config.cmake`` or ``<root>-config.cmake`` file maps that
	directory name to ``Root`` when the two match ignoring case, preserving
	the casing of the file name.
	"""
	config_files: ConfigMap = {}
	library_targets: TargetMap = {}

	for path in files:
		if not is_share_cmake_file(path):
			continue

		find_package_name = os.path.basename(os.path.dirname(path))

		contents = _read_text(path)
		if contents is not None:
			for target in find_library_targets(contents):
				library_targets.setdefault(find_package_name, []).append(target)

		root = config_root(os.path.basename(path))
		if root is not None and root.lower() == find_package_name.lower():
			config_files[find_package_name] = root

	return config_files, library_targets

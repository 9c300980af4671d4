from __future__ import annotations

import os
from typing import List, Optional


SHARE_DIR = "share"
USAGE_FILE = "usage"


def scan_share_tree(root: str) -> List[str]:
	"""List every file under ``<root>/share``.

	Directories and file names are visited in sorted order so that the
	result, and therefore the usage file picked from it, does not depend on
	the filesystem.
	"""
	share = os.path.join(root, SHARE_DIR)
	files: List[str] = []
	for dirpath, dirnames, filenames in os.walk(share):
		dirnames.sort()
		for filename in sorted(filenames):
			files.append(os.path.join(dirpath, filename))
	return files


def find_usage_file(files: List[str]) -> Optional[str]:
	for path in files:
		if os.path.basename(path) == USAGE_FILE and os.path.isfile(path):
			return path
	return None

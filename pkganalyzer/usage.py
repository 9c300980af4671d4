from __future__ import annotations

import logging
import re
from typing import List

from .escape import escape_string
from .model import TargetMap


logger = logging.getLogger(__name__)

FIND_PACKAGE_RE = re.compile(r"\bfind_package\(([^\s\)]+)\s")

USAGE_TEMPLATE = (
	"The package {port} provides CMake targets:\\r\\n\\r\\n"
	"    find_package({package} CONFIG REQUIRED)\\r\\n"
	"    target_link_libraries(main PRIVATE {targets})\\r\\n"
)


def read_usage(path: str) -> str:
	"""Return the escaped contents of a port's usage file."""
	try:
		with open(path, "r", encoding="utf-8", errors="replace", newline="") as fh:
			return escape_string(fh.read())
	except OSError as e:
		logger.warning("Cannot read usage file %s: %s", path, e)
		return ""


def detect_fallback_packages(usage: str) -> TargetMap:
	"""Guess package names from ``find_package(...)`` calls in usage text.

	Only meant for ports that export no targets of their own. The names are
	whatever the usage text mentions, so they may include dependencies or
	packages the port does not actually provide.
	"""
	packages: TargetMap = {}
	for name in FIND_PACKAGE_RE.findall(usage):
		packages.setdefault(name, [])
	return packages


def synthesize_usage(port_name: str, package_name: str, targets: List[str]) -> str:
	return USAGE_TEMPLATE.format(port=port_name, package=package_name, targets=" ".join(targets))

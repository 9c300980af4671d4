from __future__ import annotations

import logging

from .cmake_parse import parse_cmake_targets
from .control import read_control
from .fs_scan import find_usage_file, scan_share_tree
from .model import PackageRecord
from .usage import detect_fallback_packages, read_usage


logger = logging.getLogger(__name__)


def build_package_record(package_root: str) -> PackageRecord:
	"""Build the record describing one extracted package tree.

	Raises MetadataError when the CONTROL file is missing or malformed.
	"""
	port_name, port_description = read_control(package_root)

	files = scan_share_tree(package_root)

	usage = ""
	usage_file = find_usage_file(files)
	if usage_file is not None:
		usage = read_usage(usage_file)

	config_files, library_targets = parse_cmake_targets(files)

	if not library_targets:
		library_targets = detect_fallback_packages(usage)
		if library_targets:
			logger.debug("Port %s exports no targets, guessed packages from usage: %s",
				port_name, ", ".join(library_targets))

	return PackageRecord(
		port_name=port_name,
		port_description=port_description,
		usage=usage,
		config_files=config_files,
		library_targets=library_targets,
	)

from __future__ import annotations

import os
from typing import Tuple

from .errors import MetadataError
from .escape import escape_string
from .paragraphs import load_paragraphs


CONTROL_FILE = "CONTROL"


def read_control(package_root: str) -> Tuple[str, str]:
	"""Return ``(port_name, port_description)`` from the package CONTROL file.

	Only the first paragraph is used. A source CONTROL file names the port in
	``Source``, a binary one in ``Package``. The description comes back
	escaped and is empty when the field is absent.
	"""
	control_path = os.path.join(package_root, CONTROL_FILE)
	paragraphs = load_paragraphs(control_path)
	if not paragraphs:
		raise MetadataError(f"{control_path} contains no paragraphs.")

	first = paragraphs[0]
	port_name = ""
	if "Source" in first:
		port_name = first["Source"]
	elif "Package" in first:
		port_name = first["Package"]
	port_description = escape_string(first["Description"]) if "Description" in first else ""
	return port_name, port_description

"""Reader for CONTROL-style paragraph files.

A file is a sequence of paragraphs separated by blank lines. Each paragraph
holds ``Field: value`` lines; a line starting with a space or tab continues
the value of the previous field. Lines starting with ``#`` are comments.
"""

from __future__ import annotations

import re
from typing import Dict, List, Optional

from .errors import MetadataError, ParagraphParseError


Paragraph = Dict[str, str]

_FIELD_NAME = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_-]*$")


def parse_paragraphs(text: str) -> List[Paragraph]:
	paragraphs: List[Paragraph] = []
	current: Paragraph = {}
	last_field: Optional[str] = None

	for lineno, raw in enumerate(text.splitlines(), start=1):
		line = raw.rstrip()
		if line.startswith("#"):
			continue
		if not line:
			if current:
				paragraphs.append(current)
			current = {}
			last_field = None
			continue
		if line[0] in " \t":
			if last_field is None:
				raise ParagraphParseError("continuation line without a field", lineno)
			current[last_field] += "\n" + line.strip()
			continue

		name, sep, value = line.partition(":")
		if not sep:
			raise ParagraphParseError(f"expected 'Field: value', got {line!r}", lineno)
		name = name.strip()
		if not _FIELD_NAME.match(name):
			raise ParagraphParseError(f"invalid field name {name!r}", lineno)
		if name in current:
			raise ParagraphParseError(f"duplicate field {name!r}", lineno)
		current[name] = value.strip()
		last_field = name

	if current:
		paragraphs.append(current)
	return paragraphs


def load_paragraphs(path: str) -> List[Paragraph]:
	try:
		with open(path, "r", encoding="utf-8") as fh:
			text = fh.read()
	except FileNotFoundError:
		raise MetadataError(f"{path} does not exist.")
	except (OSError, UnicodeDecodeError) as e:
		raise MetadataError(f"Cannot read {path}: {e}")
	try:
		return parse_paragraphs(text)
	except ParagraphParseError as e:
		raise ParagraphParseError(f"Error parsing '{path}': {e}") from e

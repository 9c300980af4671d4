"""Exception hierarchy.

Every error raised by the analyzer derives from AnalyzerError. ``fatal``
tells the pipeline whether the whole run must stop or only the current
archive is skipped.
"""

from __future__ import annotations


class AnalyzerError(Exception):
	"""Base analyzer error."""

	code: str = "UNKNOWN"
	fatal: bool = True

	def __init__(self, message: str) -> None:
		super().__init__(message)


class MetadataError(AnalyzerError):
	"""CONTROL file missing or unusable for one package."""

	code = "METADATA_ERROR"
	fatal = False


class ParagraphParseError(MetadataError):
	"""Malformed paragraph syntax."""

	code = "PARAGRAPH_PARSE_ERROR"

	def __init__(self, message: str, line: int = 0) -> None:
		if line:
			message = f"line {line}: {message}"
		super().__init__(message)
		self.line = line


class ExtractionError(AnalyzerError):
	"""Archive missing, corrupt or in an unsupported format."""

	code = "EXTRACTION_ERROR"


class OutputError(AnalyzerError):
	"""Temporary directory or input/output file could not be used."""

	code = "OUTPUT_ERROR"

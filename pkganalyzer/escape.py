from __future__ import annotations


def escape_string(text: str) -> str:
	"""Escape CR, LF and double quotes so text fits inside a report string."""
	return text.replace("\r", "\\r").replace("\n", "\\n").replace('"', '\\"')

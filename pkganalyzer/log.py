"""Logging setup.

Everything goes to stderr so that a report written to stdout stays clean.
Two formats are available: a human readable one and one JSON object per
line for CI consumers.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone


class JSONFormatter(logging.Formatter):
	def format(self, record: logging.LogRecord) -> str:
		entry = {
			"timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
			"level": record.levelname,
			"logger": record.name,
			"message": record.getMessage(),
		}
		if record.exc_info and record.exc_info[1]:
			entry["exception"] = self.formatException(record.exc_info)
		return json.dumps(entry)


def setup_logging(level: int = logging.INFO, json_output: bool = False) -> None:
	"""Configure the root logger, replacing any handlers already installed."""
	root = logging.getLogger()
	for handler in root.handlers[:]:
		root.removeHandler(handler)
		handler.close()

	root.setLevel(level)

	handler = logging.StreamHandler(sys.stderr)
	if json_output:
		handler.setFormatter(JSONFormatter())
	else:
		handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)-7s] %(name)s: %(message)s"))
	root.addHandler(handler)

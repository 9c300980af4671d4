from __future__ import annotations

import logging
import os
import tempfile
from dataclasses import dataclass, field
from typing import List, Optional


def default_temp_root() -> str:
	return os.path.join(tempfile.gettempdir(), "pkganalyzer")


@dataclass
class RunConfig:
	"""Settings for one analysis run, passed explicitly through the pipeline."""

	archives: List[str] = field(default_factory=list)
	infile: Optional[str] = None
	outfile: Optional[str] = None
	quiet: bool = False
	jobs: int = 1
	temp_root: str = field(default_factory=default_temp_root)
	keep_temp: bool = False
	log_level_name: str = "INFO"
	json_log: bool = False

	@property
	def log_level(self) -> int:
		if self.quiet:
			return logging.WARNING
		return getattr(logging, self.log_level_name.upper(), logging.INFO)

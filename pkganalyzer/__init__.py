"""Extract CMake consumption metadata from packaged port archives.

Modules:
- archives.py: Archive extraction into a working directory.
- paragraphs.py: CONTROL-style paragraph parsing.
- control.py: Port name and description from the CONTROL file.
- fs_scan.py: Walking the share/ tree of an extracted package.
- cmake_parse.py: Target and config-file discovery in .cmake files.
- usage.py: Usage text loading, fallback detection and synthesis.
- record.py: Building one PackageRecord per extracted package.
- report.py: Deterministic report rendering.
- pipeline.py: Extraction, analysis and output routing for a run.
"""

__version__ = "0.1.0"

__all__ = [
	"archives",
	"paragraphs",
	"control",
	"fs_scan",
	"cmake_parse",
	"usage",
	"record",
	"report",
	"pipeline",
]

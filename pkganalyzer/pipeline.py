"""Run driver: extraction, record building and report output.

Archives are independent of each other. A CONTROL problem in one archive is
logged and the archive is skipped; anything fatal (temporary directory,
input or output file, unreadable archive) stops the run.
"""

from __future__ import annotations

import logging
import os
import shutil
import sys
import tempfile
from concurrent.futures import ThreadPoolExecutor
from typing import IO, List, Optional, Tuple, Union

from .archives import extract_archive
from .config import RunConfig
from .errors import MetadataError, OutputError
from .model import AnalyzeResult, ArchiveFailure, PackageRecord
from .record import build_package_record
from .report import generate_entries, render_report


logger = logging.getLogger(__name__)

Outcome = Union[PackageRecord, ArchiveFailure]


def read_package_list(path: str) -> List[str]:
	"""Read archive paths from a file, one per line, skipping blank lines."""
	try:
		with open(path, "r", encoding="utf-8") as fh:
			lines = fh.readlines()
	except OSError as e:
		raise OutputError(f"Failed opening input file '{path}': {e}")
	return [line.strip() for line in lines if line.strip()]


def resolve_archives(config: RunConfig) -> List[str]:
	if config.infile:
		logger.info("Input will be read from '%s'.", os.path.abspath(config.infile))
		return read_package_list(config.infile)
	return list(config.archives)


def archive_workdir(temp_root: str, index: int, archive: str) -> str:
	stem = os.path.splitext(os.path.basename(archive))[0]
	return os.path.join(temp_root, f"{index}-{stem}")


def extract_and_get_info(archive: str, workdir: str) -> PackageRecord:
	logger.info("Processing %s...", archive)

	extract_archive(archive, workdir)
	record = build_package_record(workdir)

	count = len(record.library_targets)
	logger.info("done (port '%s' provides %d package%s)", record.port_name, count, "" if count == 1 else "s")
	return record


def _process(archive: str, workdir: str) -> Outcome:
	try:
		return extract_and_get_info(archive, workdir)
	except MetadataError as e:
		logger.error("failed: %s", e)
		return ArchiveFailure(archive=archive, error=str(e))


def analyze_archives(archives: List[str], run_dir: str, jobs: int = 1) -> Tuple[List[PackageRecord], List[ArchiveFailure]]:
	"""Build one record per archive, in input order.

	Each archive is extracted into its own subdirectory of ``run_dir``. With
	``jobs`` above one, archives are processed on a thread pool; the results
	are still collected in input order.
	"""
	workdirs = [archive_workdir(run_dir, i, a) for i, a in enumerate(archives)]

	if jobs > 1 and len(archives) > 1:
		with ThreadPoolExecutor(max_workers=jobs) as pool:
			outcomes = list(pool.map(_process, archives, workdirs))
	else:
		outcomes = [_process(a, w) for a, w in zip(archives, workdirs)]

	records: List[PackageRecord] = []
	failures: List[ArchiveFailure] = []
	for outcome in outcomes:
		if isinstance(outcome, ArchiveFailure):
			failures.append(outcome)
		else:
			records.append(outcome)
	return records, failures


def make_run_dir(temp_root: str) -> str:
	"""Create a private directory for this run under ``temp_root``.

	``temp_root`` itself is never removed; only the run directory is.
	"""
	try:
		os.makedirs(temp_root, exist_ok=True)
		return tempfile.mkdtemp(prefix="pkganalyzer-", dir=temp_root)
	except OSError as e:
		raise OutputError(f"Failed creating temp directory under '{temp_root}': {e}")


def remove_run_dir(path: str) -> None:
	try:
		shutil.rmtree(path)
	except FileNotFoundError:
		pass
	except OSError as e:
		raise OutputError(f"Failed removing temp directory '{path}': {e}")


def analyze(config: RunConfig) -> AnalyzeResult:
	"""Process every archive of the run and build the report."""
	archives = resolve_archives(config)

	run_dir = make_run_dir(config.temp_root)
	try:
		records, failures = analyze_archives(archives, run_dir, config.jobs)
	except Exception:
		if not config.keep_temp:
			try:
				remove_run_dir(run_dir)
			except OutputError as e:
				logger.error("%s", e)
		raise

	if config.keep_temp:
		logger.info("Extracted packages kept in '%s'.", run_dir)
	else:
		remove_run_dir(run_dir)

	entries = generate_entries(records)
	return AnalyzeResult(entries=entries, failures=failures, report=render_report(entries))


def _open_output(path: str) -> Tuple[str, IO[str]]:
	"""Open a scratch file next to ``path``.

	The report is moved into place only once it is complete, so a failed run
	never truncates an existing output file.
	"""
	full = os.path.abspath(path)
	try:
		fh = tempfile.NamedTemporaryFile(
			"w", encoding="utf-8", dir=os.path.dirname(full),
			prefix=f".{os.path.basename(full)}.", suffix=".tmp", delete=False,
		)
	except OSError as e:
		raise OutputError(f"Failed opening output file '{full}': {e}")
	logger.info("Output will be written to '%s'.", full)
	return full, fh


def _discard(fh: IO[str]) -> None:
	fh.close()
	try:
		os.remove(fh.name)
	except OSError as e:
		logger.warning("Cannot remove %s: %s", fh.name, e)


def run(config: RunConfig, stdout: Optional[IO[str]] = None) -> AnalyzeResult:
	"""Analyze the configured archives and write the report.

	The output destination is checked before any archive is touched so that
	a bad destination fails fast.
	"""
	if not config.outfile:
		result = analyze(config)
		sink = stdout or sys.stdout
		sink.write(result.report)
		sink.flush()
		return result

	full, fh = _open_output(config.outfile)
	try:
		result = analyze(config)
		fh.write(result.report)
		fh.close()
		try:
			os.replace(fh.name, full)
		except OSError as e:
			raise OutputError(f"Failed writing output file '{full}': {e}")
	except BaseException:
		_discard(fh)
		raise
	return result

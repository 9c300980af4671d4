from __future__ import annotations

import logging
import os
import tarfile
import zipfile

from .errors import ExtractionError


logger = logging.getLogger(__name__)


def extract_archive(archive: str, dest: str) -> None:
	"""Unpack a zip or tar archive (optionally compressed) into ``dest``."""
	if not os.path.isfile(archive):
		raise ExtractionError(f"Archive {archive} does not exist.")

	os.makedirs(dest, exist_ok=True)
	try:
		if zipfile.is_zipfile(archive):
			with zipfile.ZipFile(archive) as zf:
				zf.extractall(dest)
		elif tarfile.is_tarfile(archive):
			with tarfile.open(archive) as tf:
				tf.extractall(dest, filter="data")
		else:
			raise ExtractionError(f"Unsupported archive format: {archive}")
	except (OSError, zipfile.BadZipFile, tarfile.TarError) as e:
		raise ExtractionError(f"Failed extracting {archive}: {e}") from e
	logger.debug("Extracted %s to %s", archive, dest)

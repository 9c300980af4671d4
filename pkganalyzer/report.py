"""Rendering of package records into the usage report.

The report is a JSON object literal keyed by package name. Keys are not
unique: two ports providing the same package both get an entry. String
values are written as produced by ``escape_string``, without a second round
of JSON escaping.
"""

from __future__ import annotations

from typing import List

from .model import PackageEntry, PackageRecord
from .usage import synthesize_usage


def generate_package_entries(record: PackageRecord) -> List[PackageEntry]:
	"""One entry per find_package name, ordered by that name.

	When the port ships no usage text, one is synthesized from the first
	entry and shared by the remaining ones. A port without any package gets a
	single placeholder entry named ``_<port>`` so it still shows up.
	"""
	if not record.library_targets:
		return [
			PackageEntry(
				name=f"_{record.port_name}",
				targets=[],
				port_name=record.port_name,
				port_description=record.port_description,
				usage=record.usage,
			)
		]

	entries: List[PackageEntry] = []
	usage = record.usage
	for find_package_name in sorted(record.library_targets):
		package_name = record.config_files.get(find_package_name, find_package_name)
		targets = sorted(record.library_targets[find_package_name])
		if not usage:
			usage = synthesize_usage(record.port_name, package_name, targets)
		entries.append(
			PackageEntry(
				name=package_name,
				targets=targets,
				port_name=record.port_name,
				port_description=record.port_description,
				usage=usage,
			)
		)
	return entries


def generate_entries(records: List[PackageRecord]) -> List[PackageEntry]:
	entries: List[PackageEntry] = []
	for record in records:
		entries.extend(generate_package_entries(record))
	return entries


def format_entry(entry: PackageEntry) -> str:
	targets = ", ".join(f'"{t}"' for t in entry.targets)
	return (
		f'    "{entry.name}": {{ "name": "{entry.name}", "targets": [{targets}], '
		f'"portName": "{entry.port_name}", "portDescription": "{entry.port_description}", '
		f'"usage": "{entry.usage}" }}'
	)


def render_report(entries: List[PackageEntry]) -> str:
	if not entries:
		return "{\n}\n"
	return "{\n" + ",\n".join(format_entry(e) for e in entries) + "\n}\n"


def generate_report(records: List[PackageRecord]) -> str:
	return render_report(generate_entries(records))

from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field


# find_package name -> canonical package name from a matching *Config.cmake
ConfigMap = Dict[str, str]

# find_package name -> targets in discovery order
TargetMap = Dict[str, List[str]]


class PackageRecord(BaseModel):
	port_name: str = ""
	port_description: str = ""
	usage: str = ""
	config_files: ConfigMap = {}
	library_targets: TargetMap = {}


class PackageEntry(BaseModel):
	model_config = ConfigDict(populate_by_name=True)

	name: str
	targets: List[str] = []
	port_name: str = Field(alias="portName")
	port_description: str = Field(default="", alias="portDescription")
	usage: str = ""


class ArchiveFailure(BaseModel):
	archive: str
	error: str


class AnalyzeResult(BaseModel):
	entries: List[PackageEntry]
	failures: List[ArchiveFailure] = []
	report: str

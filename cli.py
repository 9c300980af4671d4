from __future__ import annotations

import argparse
import sys
from typing import List, Optional

import uvicorn

from pkganalyzer import __version__
from pkganalyzer.config import RunConfig, default_temp_root
from pkganalyzer.errors import AnalyzerError
from pkganalyzer.log import setup_logging
from pkganalyzer.pipeline import run


def cmd_analyze(args: argparse.Namespace) -> int:
	config = RunConfig(
		archives=args.archives,
		infile=args.infile,
		outfile=args.outfile,
		quiet=args.quiet,
		jobs=args.jobs,
		temp_root=args.temp_dir,
		keep_temp=args.keep_temp,
		log_level_name=args.log_level,
		json_log=args.json_log,
	)
	setup_logging(config.log_level, json_output=config.json_log)

	try:
		run(config)
	except AnalyzerError as e:
		print(f"error: {e}", file=sys.stderr)
		return 1
	return 0


def cmd_serve(args: argparse.Namespace) -> int:
	uvicorn.run("api:app", host=args.host, port=args.port, reload=args.reload)
	return 0


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(
		prog="pkganalyzer",
		description="Analyze and output CMake usage information from zipped packages.",
	)
	parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
	sub = parser.add_subparsers(dest="cmd", required=True)

	pa = sub.add_parser("analyze", help="Analyze package archives and print the usage report")
	pa.add_argument("archives", nargs="*", help="Package archives (zip or tar)")
	pa.add_argument("--infile", help="Read packages from file instead of command line (one package per line)")
	pa.add_argument("--outfile", help="Output to file instead of stdout")
	pa.add_argument("--quiet", action="store_true", help="Suppresses extra status messages")
	pa.add_argument("--jobs", "-j", type=int, default=1, help="Number of archives processed in parallel")
	pa.add_argument("--temp-dir", default=default_temp_root(), help="Parent directory for the per-run extraction directory")
	pa.add_argument("--keep-temp", action="store_true", help="Do not remove the per-run extraction directory")
	pa.add_argument("--log-level", default="INFO", help="DEBUG, INFO, WARNING or ERROR")
	pa.add_argument("--json-log", action="store_true", help="Log one JSON object per line")
	pa.set_defaults(func=cmd_analyze)

	ps = sub.add_parser("serve", help="Run FastAPI server")
	ps.add_argument("--host", default="127.0.0.1")
	ps.add_argument("--port", type=int, default=8000)
	ps.add_argument("--reload", action="store_true")
	ps.set_defaults(func=cmd_serve)

	return parser


def main(argv: Optional[List[str]] = None) -> int:
	parser = build_parser()
	args = parser.parse_args(argv)
	return args.func(args)


if __name__ == "__main__":
	sys.exit(main())

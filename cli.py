from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

import uvicorn

from archnotes.config import load_config
from archnotes.errors import ArchNotesError
from archnotes.pipeline import build_architecture

logger = logging.getLogger("archnotes")

EOLS = {"lf": "\n", "crlf": "\r\n"}


def cmd_build(args: argparse.Namespace) -> int:
	try:
		config = load_config(
			args.cwd,
			{
				"patterns": args.patterns or None,
				"title_level": args.title_level,
				"base": args.base,
				"eol": EOLS[args.eol] if args.eol else None,
			},
		)
		markdown = asyncio.run(build_architecture(config))
	except ArchNotesError as err:
		logger.error("Could not build the architecture notes: %s", err)
		logger.debug("Cause:", exc_info=err.__cause__)
		return 1

	if args.output:
		with open(args.output, "w", encoding="utf-8", newline="") as fh:
			fh.write(markdown)
	else:
		sys.stdout.write(markdown)
	return 0


def cmd_serve(args: argparse.Namespace) -> int:
	uvicorn.run("api:app", host=args.host, port=args.port, reload=args.reload)
	return 0


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(prog="archnotes")
	parser.add_argument("-v", "--verbose", action="store_true", help="Log debug messages")
	sub = parser.add_subparsers(dest="cmd", required=True)

	pb = sub.add_parser("build", help="Extract architecture notes and print the markdown")
	pb.add_argument("patterns", nargs="*", help="Glob patterns of the files to scan (default: **/*.py)")
	pb.add_argument("--cwd", default=".", help="Directory patterns and links are relative to")
	pb.add_argument("--title-level", help="Heading marks prepended to every title, e.g. '##'")
	pb.add_argument("--base", help="Base path of the links to the source")
	pb.add_argument("--eol", choices=sorted(EOLS), help="Line ending (default: platform)")
	pb.add_argument("-o", "--output", help="Write the markdown to this file instead of stdout")
	pb.set_defaults(func=cmd_build)

	ps = sub.add_parser("serve", help="Run FastAPI server")
	ps.add_argument("--host", default="127.0.0.1")
	ps.add_argument("--port", type=int, default=8000)
	ps.add_argument("--reload", action="store_true")
	ps.set_defaults(func=cmd_serve)
	return parser


def main(argv: Optional[List[str]] = None) -> None:
	args = build_parser().parse_args(argv)
	logging.basicConfig(
		level=logging.DEBUG if args.verbose else logging.WARNING,
		format="%(levelname)s %(name)s: %(message)s",
	)
	sys.exit(args.func(args))


if __name__ == "__main__":
	main()

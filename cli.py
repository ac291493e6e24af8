from __future__ import annotations

import argparse
import logging
import os
import sys

import uvicorn

from servicemap.config import ParserConfig
from servicemap.errors import ServiceMapError
from servicemap.parser import CommentParser
from servicemap.serialize import dump_service_file, write_service_files


def _config_from_args(args: argparse.Namespace) -> ParserConfig:
	overrides = {}
	if args.recursive is not None:
		overrides["recursive"] = args.recursive
	if args.format:
		overrides["output_format"] = args.format
	if args.output_dir:
		overrides["output_dir"] = args.output_dir
	if args.strict:
		overrides["strict"] = True
	if args.strict_implicit:
		overrides["strict_implicit"] = True
	if args.anchored:
		overrides["anchored_markers"] = True
	return ParserConfig(**overrides)


def cmd_generate(args: argparse.Namespace) -> int:
	config = _config_from_args(args)
	logging.basicConfig(level=config.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
	root = os.path.abspath(args.path)
	try:
		result = CommentParser(config).parse(root)
		if config.output_dir:
			written = write_service_files(result.service_files, config.output_dir, config.output_format)
		else:
			written = None
	except ServiceMapError as e:
		print(f"error: {e}", file=sys.stderr)
		return 1

	if written is not None:
		for path in written:
			print(path)
		return 0

	files = sorted(result.service_files, key=lambda f: f.info.name)
	separator = "---\n" if config.output_format == "yaml" else ""
	print(separator.join(dump_service_file(sf, config.output_format) for sf in files), end="")
	return 0


def cmd_serve(args: argparse.Namespace) -> int:
	uvicorn.run("api:app", host=args.host, port=args.port, reload=args.reload)
	return 0


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(prog="servicemap")
	sub = parser.add_subparsers(dest="cmd", required=True)

	pg = sub.add_parser("generate", help="Generate service files from source comments")
	pg.add_argument("path", help="Path to the source tree")
	pg.add_argument("--recursive", dest="recursive", action="store_true", default=None)
	pg.add_argument("--no-recursive", dest="recursive", action="store_false")
	pg.add_argument("-o", "--output-dir", help="Write files here instead of printing")
	pg.add_argument("--format", choices=["yaml", "json"])
	pg.add_argument("--strict", action="store_true", help="Fail on malformed tag blocks")
	pg.add_argument("--strict-implicit", action="store_true", help="Fail on ambiguous implicit relationships")
	pg.add_argument("--anchored", action="store_true", help="Only match tags at the start of a comment line")
	pg.set_defaults(func=cmd_generate)

	ps = sub.add_parser("serve", help="Run FastAPI server")
	ps.add_argument("--host", default="127.0.0.1")
	ps.add_argument("--port", type=int, default=8000)
	ps.add_argument("--reload", action="store_true")
	ps.set_defaults(func=cmd_serve)
	return parser


def main(argv=None) -> int:
	args = build_parser().parse_args(argv)
	return args.func(args)


if __name__ == "__main__":
	sys.exit(main())

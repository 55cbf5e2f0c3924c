"""Command-line entry point for bin2obj."""

from __future__ import annotations

import json
import sys

from .binio import SeekError
from .config import Bin2ObjConfig, build_parser
from .convert import convert
from .logging_config import setup_logging


EXIT_OK = 0
EXIT_SEEK_ERROR = 11
EXIT_IO_ERROR = 12


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        print("No arguments provided. Possible arguments are provided below.\n")
        parser.print_help()
        return EXIT_OK

    args = parser.parse_args(argv)
    config = Bin2ObjConfig.from_args(args)
    setup_logging(verbose=config.verbose)

    try:
        summary = convert(config)
    except SeekError as exc:
        print(str(exc), file=sys.stderr)
        return EXIT_SEEK_ERROR
    except OSError as exc:
        print(f"I/O error: {exc}", file=sys.stderr)
        return EXIT_IO_ERROR

    if config.summary_json:
        out_json = json.dumps(summary.__dict__, indent=2)
        try:
            config.summary_json.parent.mkdir(parents=True, exist_ok=True)
            config.summary_json.write_text(out_json, encoding="utf-8")
        except OSError as exc:
            print(f"I/O error writing summary: {exc}", file=sys.stderr)
            return EXIT_IO_ERROR

    return EXIT_OK

"""Command-line entry point.

Usage::

    python -m reprjson dump.txt
    pbpaste | python -m reprjson --indent 4

Writes the converted JSON to stdout.  On failure the reason goes to
stderr and the exit status is 1.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from reprjson.config import get_settings
from reprjson.core.converter import PythonNotationConverter
from reprjson.core.errors import ConversionError
from reprjson.core.log import safe_print, setup_logging
from reprjson.paste import paste_as_json


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="reprjson",
        description="Convert repr-style debug output into canonical JSON.",
    )
    parser.add_argument("file", nargs="?", default="-", help="input file ('-' or omitted reads stdin)")
    parser.add_argument("--indent", type=int, choices=range(0, 9), metavar="N", help="spaces per level (0-8)")
    parser.add_argument("--log-json", action="store_true", help="emit log lines as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="log each conversion stage")
    return parser


def _read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def _fail(message: str) -> int:
    """Report *message* on stderr; a configured log file gets a copy."""
    print(message, file=sys.stderr)
    if get_settings().log_file:
        safe_print(message, logging.ERROR)
    return 1


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    setup_logging(json_format=args.log_json)
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        text = _read_input(args.file)
    except (OSError, UnicodeDecodeError) as exc:
        return _fail(f"Cannot read {args.file}: {exc}")

    try:
        output = paste_as_json(text, converter=PythonNotationConverter(indent=args.indent))
    except ConversionError as exc:
        return _fail(str(exc))

    sys.stdout.write(output + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Command-line entry point: parse a GDB/MI transcript, one record per line."""

import argparse
import json
import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import IO

from mi_parser.errors import MIParseError
from mi_parser.records import Record, format_record, parse_records

STDIN_MARKER = "-"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


@contextmanager
def _open_input(path: str) -> Iterator[IO[str]]:
    """Open the transcript file, or hand out stdin for `-`."""
    if path == STDIN_MARKER:
        yield sys.stdin
        return
    with Path(path).open("r", encoding="utf-8", errors="surrogateescape") as stream:
        yield stream


def _render(record: Record, output_format: str) -> str:
    if output_format == "mi":
        return format_record(record)
    return json.dumps(record.to_dict())


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Parse GDB/MI output records")
    parser.add_argument(
        "input",
        nargs="?",
        default=STDIN_MARKER,
        help="MI transcript to parse, one record per line (default: stdin)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Stop at the first malformed record instead of skipping it",
    )
    parser.add_argument(
        "--format",
        choices=["json", "mi"],
        default="json",
        help="Print records as pygdbmi-style JSON or re-rendered MI text",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for the MI parser command line."""
    args = _build_arg_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)

    with _open_input(args.input) as stream:
        try:
            for record in parse_records(stream, strict=args.strict):
                print(_render(record, args.format), flush=True)
        except MIParseError as err:
            print(f"Malformed MI record: {err}", file=sys.stderr, flush=True)
            return 1
    return 0

"""Split each line of a text file into top-level segments.

Every non-blank input line is split independently with a tokenizer built from
the YAML configuration, and printed as one JSON object per line.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from scope_splitter.build_tokenizer import build_tokenizer, split_options_from_config
from scope_splitter.compute_config_hash import compute_config_hash
from scope_splitter.load_config import load_config
from scope_splitter.split_options import SplitOptions
from scope_splitter.split_report import SplitReport

logger = logging.getLogger(__name__)


def read_lines(source: str) -> list[str]:
    """Read the non-blank lines of a file, or of stdin when source is '-'."""
    if source == "-":
        lines = sys.stdin.read().splitlines()
    else:
        path = Path(source)
        if not path.is_file():
            msg = f"Input file not found: {source}"
            raise SystemExit(msg)
        lines = path.read_text(encoding="utf-8").splitlines()
    return [line for line in lines if line.strip()]


def run_split(args: argparse.Namespace) -> int:
    """Split every input line and print the results."""
    try:
        config = load_config(args.config)
        tokenizer = build_tokenizer(config)
    except ValueError as e:
        msg = f"Invalid configuration: {e}"
        raise SystemExit(msg) from e

    options = split_options_from_config(config)
    if args.remove_empty:
        options = SplitOptions.REMOVE_EMPTY

    report = SplitReport(compute_config_hash(config))
    error_count = 0
    for line_no, line in enumerate(read_lines(args.input), start=1):
        result = tokenizer.try_split(line, options)
        report.add_result(line, result)
        if result.is_error:
            error_count += 1
            logger.warning("Unbalanced delimiters on line %s: %s", line_no, line)
        print(json.dumps({"source": line, **result.to_dict()}, ensure_ascii=False))

    if args.report:
        report.generate_report(args.report)
        print(f"Report generated at {args.report}", file=sys.stderr)

    if args.strict and error_count:
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the line splitter."""
    ap = argparse.ArgumentParser(
        description="Split lines into top-level segments of nested delimiters.",
    )
    ap.add_argument(
        "input",
        help="Text file with one input per line, or '-' for stdin",
    )
    ap.add_argument(
        "--config",
        help="Path to YAML configuration file with delimiter dialects",
    )
    ap.add_argument(
        "--remove-empty",
        action="store_true",
        help="Drop segments that are empty after trimming",
    )
    ap.add_argument(
        "--report",
        help="Write a JSON summary report to this path",
    )
    ap.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 if any line has unbalanced delimiters",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Enable informational logging",
    )
    args = ap.parse_args(argv)
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)
    return run_split(args)


if __name__ == "__main__":
    raise SystemExit(main())

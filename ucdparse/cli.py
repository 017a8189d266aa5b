#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
ucdparse command-line interface

Commands
--------
1. **fields**   — Print the fields of every significant line of a file
2. **download** — Download UCD data files from unicode.org

Usage
-----
::

    # Tab-separated fields of Blocks.txt
    python -m ucdparse.cli fields ucd/Blocks.txt

    # One JSON array per line, first 10 lines, from stdin
    cat Scripts.txt | python -m ucdparse.cli fields - --format json --limit 10

    # Download the default file set of release 15.1.0
    python -m ucdparse.cli download --version 15.1.0
"""

from __future__ import annotations

import argparse
import itertools
import json
import logging
import sys

from ucdparse.exceptions import UCDError
from ucdparse.ucd import UCD
from ucdparse.utils.constants import DEFAULT_UCD_VERSION

logger = logging.getLogger("ucdparse.cli")


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def cmd_fields(args) -> int:
    """Print the fields of each significant line."""
    if args.file == "-":
        ucd = UCD(sys.stdin.buffer)
    else:
        try:
            ucd = UCD.open(args.file)
        except OSError as exc:
            print(f"ERROR: {exc}", file=sys.stderr)
            return 1

    logger.debug("Reading %r", ucd)
    with ucd:
        records = ucd.records()
        if args.limit is not None:
            records = itertools.islice(records, args.limit)
        try:
            for fields in records:
                if args.format == "json":
                    print(json.dumps(fields, ensure_ascii=False))
                else:
                    print("\t".join(fields))
        except OSError as exc:
            print(f"ERROR: {exc}", file=sys.stderr)
            return 1
    return 0


def cmd_download(args) -> int:
    """Download UCD files from unicode.org."""
    from ucdparse.io.download import download_ucd

    try:
        paths = download_ucd(args.names, args.out_dir, args.version)
    except UCDError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    print(f"Downloaded {len(paths)} files to {args.out_dir}/")
    return 0


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="ucdparse",
        description="Parse Unicode Character Database text files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Examples:
    python -m ucdparse.cli fields ucd/Blocks.txt                # tab separated
    python -m ucdparse.cli fields ucd/Blocks.txt --format json  # JSON arrays
    python -m ucdparse.cli download                             # default file set
    python -m ucdparse.cli download Scripts.txt --version 15.1.0
""",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    sub = parser.add_subparsers(dest="command", help="Command to run")

    p_fields = sub.add_parser("fields", help="Print the fields of each data line")
    p_fields.add_argument("file", help="UCD text file, or '-' for standard input")
    p_fields.add_argument(
        "--format", "-f",
        choices=["tsv", "json"],
        default="tsv",
        help="Output format (default: tsv)",
    )
    p_fields.add_argument(
        "--limit", "-n",
        type=int,
        default=None,
        help="Stop after N data lines",
    )

    p_download = sub.add_parser("download", help="Download UCD files from unicode.org")
    p_download.add_argument(
        "names",
        nargs="*",
        help="Files to download (default: a common set)",
    )
    p_download.add_argument(
        "--version",
        default=DEFAULT_UCD_VERSION,
        help=f"UCD release (default: {DEFAULT_UCD_VERSION})",
    )
    p_download.add_argument(
        "--out-dir", "-o",
        default="ucd",
        help="Output directory (default: ./ucd)",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s: %(message)s")
    else:
        logging.basicConfig(level=logging.INFO, format="%(message)s")

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "fields": cmd_fields,
        "download": cmd_download,
    }
    return commands[args.command](args)


if __name__ == "__main__":
    sys.exit(main())

"""Main CLI entry point for adsbjson."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .. import __version__
from ..cli.fields import print_fields
from ..cli.validate import validate_file


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the adsbjson CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        description="adsbjson: ADS-B aircraft JSON codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  adsbjson --validate aircraft.jsonl    Decode every line and report failures
  adsbjson --fields                     Show the wire field table
  adsbjson --version                    Show version
        """,
    )

    parser.add_argument(
        "--validate",
        metavar="FILE",
        type=str,
        help="Decode each line of an NDJSON file and report failures",
    )

    parser.add_argument(
        "--fields",
        action="store_true",
        help="Show wire field names, attribute names and expected types",
    )

    parser.add_argument(
        "--show",
        metavar="N",
        type=int,
        default=10,
        help="Number of failures to list with --validate (default 10)",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every rejected line",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"adsbjson {__version__}",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.ERROR,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.fields:
        print_fields()
        return 0

    # Handle --validate
    if args.validate:
        file_path = Path(args.validate)
        if not file_path.exists():
            print(f"Error: File not found: {file_path}", file=sys.stderr)
            return 1

        try:
            return 0 if validate_file(file_path, show=args.show) else 1
        except OSError as e:
            print(f"Error reading file: {e}", file=sys.stderr)
            return 1

    # If no command specified, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())

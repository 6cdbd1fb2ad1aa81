"""Command-line entry for wastecal.

Converts a CSV export of a waste collection sheet into an ICS calendar.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import NoReturn, Optional

from . import run_conversion


def _create_parser() -> argparse.ArgumentParser:
    """Create argument parser for the wastecal CLI.

    Returns:
        Configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog="wastecal",
        description="wastecal - convert a waste collection sheet (CSV) into an ICS calendar",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m wastecal -c harmonogram.csv                 # Writes output.ics
  python -m wastecal -c harmonogram.csv odpady.ics      # Writes odpady.ics
        """,
    )

    parser.add_argument(
        "-c",
        "--calendar-path",
        type=Path,
        required=True,
        metavar="CSV",
        help="Path to the CSV containing the collection sheet",
    )
    parser.add_argument(
        "output_path",
        type=Path,
        nargs="?",
        default=None,
        help="Path to the output calendar file (default: output.ics, or from wastecal.yaml)",
    )

    return parser


def main(argv: Optional[list[str]] = None) -> NoReturn:
    """Run the wastecal CLI."""
    parser = _create_parser()
    args = parser.parse_args(argv)
    sys.exit(run_conversion(args))


if __name__ == "__main__":
    main()

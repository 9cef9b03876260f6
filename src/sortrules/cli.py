#!/usr/bin/env python3
"""
sortrules CLI: sort JSON records by one or more fields.
Uses the same rule engine as the library: each --key adds one tie-breaking level.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import logging
import os
import sys
import time
from typing import List, NoReturn, Optional

logging.basicConfig(
    level=logging.ERROR,
    format="%(levelname)-8s | %(name)-25s | %(message)s"
)

from sortrules.aliases import EPILOG_TEXT, FORMAT_ALIASES, FORMAT_CHOICES, FORMAT_HELP_TEXT, KEY_HELP_TEXT
from sortrules.commands import SortCommand
from sortrules.core.models import KeySpec, SortParams, SortStats
from sortrules.exceptions import IncomparableKeysError, RecordFormatError
from sortrules.services.record_service import STDIO_PATH


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.start_time: float = time.time()
        self.verbose: bool = False
        self.quiet: bool = False

    @staticmethod
    def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(
            prog="sortrules",
            description="sortrules — stable multi-key sorting of JSON records",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        parser.add_argument(
            "--input", "-i",
            required=True,
            type=str,
            help="Input file with records ('-' for stdin)"
        )
        parser.add_argument(
            "--key", "-k",
            action="append",
            required=True,
            type=str,
            metavar='FIELD[:DIR]',
            dest="keys",
            help=KEY_HELP_TEXT
        )
        parser.add_argument(
            "--output", "-o",
            default=None,
            type=str,
            metavar='',
            help="Output file (default: stdout)"
        )
        parser.add_argument(
            "--format", "-f",
            choices=FORMAT_CHOICES,
            default="json",
            type=str,
            dest="input_format",
            help=FORMAT_HELP_TEXT
        )
        parser.add_argument(
            "--output-format",
            choices=FORMAT_CHOICES,
            default=None,
            type=str,
            help="Output record format (default: same as --format)"
        )
        parser.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Suppress warnings"
        )
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Show statistics and debug logging on stderr"
        )

        return parser.parse_args(args)

    def validate_args(self, args: argparse.Namespace) -> None:
        """Validate command-line arguments before execution."""
        if args.input != STDIO_PATH and not os.path.isfile(args.input):
            self.error_exit(f"Input file not found: {args.input}")

        if args.output and args.output != STDIO_PATH:
            if os.path.abspath(args.output) == os.path.abspath(args.input):
                self.warning(f"Output overwrites the input file: {args.output}")
            out_dir = os.path.dirname(os.path.abspath(args.output))
            if not os.path.isdir(out_dir):
                self.error_exit(f"Output directory not found: {out_dir}")

        fields = []
        for spec in args.keys:
            try:
                fields.append(KeySpec.parse(spec).field)
            except ValueError as e:
                self.error_exit(f"Invalid sort key: {e}")

        duplicates = sorted({f for f in fields if fields.count(f) > 1})
        if duplicates:
            self.warning(f"Sort key repeated, later occurrences only matter on ties: {', '.join(duplicates)}")

    def create_params(self, args: argparse.Namespace) -> SortParams:
        """Create SortParams from CLI arguments."""
        try:
            keys = [KeySpec.parse(spec) for spec in args.keys]
            input_format = FORMAT_ALIASES[args.input_format]
            output_format = FORMAT_ALIASES[args.output_format] if args.output_format else None

            return SortParams(
                input_path=args.input,
                keys=keys,
                output_path=args.output,
                input_format=input_format,
                output_format=output_format,
            )
        except ValueError as e:
            self.error_exit(f"Parameter error: {e}")

    def run_sort(self, params: SortParams) -> SortStats:
        """Execute the sorting workflow."""
        command = SortCommand()
        try:
            return command.execute_and_write(params)
        except RecordFormatError as e:
            self.error_exit(f"Cannot read records: {e}")
        except IncomparableKeysError as e:
            self.error_exit(f"Cannot sort: {e}")
        except OSError as e:
            self.error_exit(f"I/O error: {e}")

    @staticmethod
    def describe_keys(params: SortParams) -> str:
        """Numbered list of the sort keys, primary key first."""
        lines = [f"🔑 Sort keys ({params.input_format.display_name} input):"]
        for index, spec in enumerate(params.keys, 1):
            lines.append(f"  {index}. {spec}  ({spec.direction.display_name})")
        return "\n".join(lines)

    def warning(self, message: str) -> None:
        """Print a warning message to stderr."""
        if not self.quiet:
            print(f"⚠️  {message}", file=sys.stderr)

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"❌ Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, argv: Optional[List[str]] = None) -> None:
        """Main entry point."""
        args = self.parse_args(argv)
        self.verbose = args.verbose
        self.quiet = args.quiet

        if self.verbose:
            logging.getLogger("sortrules").setLevel(logging.DEBUG)

        self.validate_args(args)
        params = self.create_params(args)
        stats = self.run_sort(params)

        if self.verbose:
            print(self.describe_keys(params), file=sys.stderr)
            print(stats.print_summary(), file=sys.stderr)
            elapsed = time.time() - self.start_time
            print(f"✅ Completed in {elapsed:.2f} seconds", file=sys.stderr)
        elif stats.extraction_failures:
            self.warning(f"{stats.extraction_failures} key lookups failed and were sorted as absent")


def main(argv: Optional[List[str]] = None) -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        app.run(argv)
    except KeyboardInterrupt:
        print("\n⚠️  Operation cancelled by user (Ctrl+C)", file=sys.stderr)
        sys.exit(130)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"❌ Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()

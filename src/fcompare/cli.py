#!/usr/bin/env python3
"""
fcompare CLI — Command line interface for file fingerprinting and comparison.
Reports file metadata and checksums, compares two files, or groups many files
by sameness, keeping access times intact unless told otherwise.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import json
import os
import sys
import time
from typing import List, NoReturn
import logging

LOG_FORMAT = "%(levelname)-8s | %(name)-25s | %(message)s"

logging.basicConfig(
    level=logging.ERROR,
    format=LOG_FORMAT
)

from fcompare.core.exceptions import FCompareError
from fcompare.core.models import CompareParams, FileInfo, describe_groups
from fcompare.commands import CompareCommand
from fcompare.utils.convert_utils import ConvertUtils
from fcompare.aliases import (
    METHOD_CHOICES, METHOD_HELP_TEXT,
    ALGORITHM_CHOICES, ALGORITHM_HELP_TEXT, EPILOG_TEXT
)


class CLILogHandler(logging.Handler):
    """
    Routes fcompare log records to the console while a CLI run is active.
    Warnings go through CLIApplication.warning; debug records use LOG_FORMAT.
    """

    def __init__(self, app: "CLIApplication"):
        super().__init__()
        self.app = app
        self.setFormatter(logging.Formatter(LOG_FORMAT))

    def emit(self, record: logging.LogRecord) -> None:
        if record.levelno >= logging.WARNING:
            self.app.warning(record.getMessage())
        else:
            print(self.format(record), file=sys.stderr)


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.start_time: float = time.time()
        self.verbose: bool = False
        self.quiet: bool = False

        # Fix encoding for Windows consoles to prevent UnicodeEncodeError
        sys.stdout.reconfigure(encoding='utf-8')
        sys.stderr.reconfigure(encoding='utf-8')

    @staticmethod
    def build_parser() -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog="fcompare",
            description="fcompare — compare files by size, partial or full checksum, keeping access times",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        parser.add_argument(
            "files",
            nargs="*",
            metavar="FILE",
            help="Files to inspect or compare"
        )

        # Actions
        action = parser.add_mutually_exclusive_group()
        action.add_argument(
            "--compare",
            action="store_true",
            help="Compare exactly two files and report whether they are the same"
        )
        action.add_argument(
            "--group",
            action="store_true",
            help="Group any number of files into sets of identical files"
        )

        # Comparison options
        parser.add_argument(
            "--method", "-c",
            choices=METHOD_CHOICES,
            default="partial",
            type=str,
            help=METHOD_HELP_TEXT
        )
        parser.add_argument(
            "--algorithm", "-a",
            choices=ALGORITHM_CHOICES,
            default="sha256",
            type=str,
            help=ALGORITHM_HELP_TEXT
        )
        parser.add_argument(
            "--keep-atime",
            action=argparse.BooleanOptionalAction,
            default=True,
            help="Restore access/modification times after reading each file. Default: on"
        )
        parser.add_argument(
            "--check-atime",
            action="store_true",
            help="Abort unless the filesystem of the first file can keep access times"
        )
        parser.add_argument(
            "--strict-atime",
            action="store_true",
            help="Treat a failed timestamp restore as an error instead of a warning"
        )

        # Output options
        parser.add_argument(
            "--json",
            action="store_true",
            help="Produce output in JSON format"
        )
        parser.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Suppress warnings and summary lines"
        )
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Show debug logging and timing"
        )
        return parser

    @staticmethod
    def parse_args(args=None) -> argparse.Namespace:
        """Parse command-line arguments."""
        return CLIApplication.build_parser().parse_args(args)

    def validate_args(self, args: argparse.Namespace) -> None:
        """Validate argument combinations argparse can't express."""
        if not args.files:
            self.usage_exit("at least one file is required")

        if args.compare and len(args.files) != 2:
            self.usage_exit("--compare only works with 2 files")

        if args.check_atime and not args.keep_atime:
            self.warning("--check-atime has no effect with --no-keep-atime")

        if args.strict_atime and not args.keep_atime:
            self.warning("--strict-atime has no effect with --no-keep-atime")

    def create_params(self, args: argparse.Namespace) -> CompareParams:
        """Create CompareParams from CLI arguments."""
        try:
            return CompareParams.from_strings(
                method=args.method,
                keep_atime=args.keep_atime,
                verify_atime=args.check_atime,
                strict_atime=args.strict_atime,
                algorithm=args.algorithm,
            )
        except ValueError as e:
            self.error_exit(f"Parameter error: {e}")

    # ===== Actions =====

    def run_describe(self, files: List[str], params: CompareParams, as_json: bool) -> None:
        infos = CompareCommand().describe(files, params)
        for info in infos:
            if as_json:
                print(json.dumps(info.to_json_dict()))
            else:
                self.print_file_info(info)

    def run_compare(self, files: List[str], params: CompareParams, as_json: bool) -> bool:
        same = CompareCommand().compare(files[0], files[1], params)
        if as_json:
            print(json.dumps({"files": files, "method": params.method.value, "same": same}))
        else:
            print("Files are the same" if same else "Files are different")
        return same

    def run_group(self, files: List[str], params: CompareParams, as_json: bool) -> None:
        groups = CompareCommand().execute(files, params)
        if as_json:
            print(json.dumps(describe_groups(groups, files)))
            return

        if not self.quiet:
            print(f"Found {len(groups)} group(s) among {len(files)} files (method: {params.method.display_name})")
        for idx, group in enumerate(groups, 1):
            marker = "🔁" if len(group) > 1 else "📄"
            print(f"\n{marker} Group {idx} | Files: {len(group)}")
            for i in group:
                print(f"   [{i}] {files[i]}")

    @staticmethod
    def print_file_info(info: FileInfo) -> None:
        print(f"📄 {info.filename}")
        print(f"   Size: {ConvertUtils.bytes_to_human(info.size)} ({info.size} bytes)")
        print(f"   Accessed: {ConvertUtils.timestamp_to_human(info.atime)} ({info.atime})")
        print(f"   Modified: {ConvertUtils.timestamp_to_human(info.mtime)} ({info.mtime})")
        if info.partial_checksum:
            print(f"   Partial checksum: {info.partial_checksum}")
        if info.full_checksum:
            print(f"   Full checksum:    {info.full_checksum}")

    # ===== Messages =====

    def warning(self, message: str) -> None:
        """Print a warning message to stderr."""
        if not self.quiet:
            print(f"⚠️  {message}", file=sys.stderr)

    def usage_exit(self, message: str, code: int = 2) -> NoReturn:
        """Print usage plus error and exit."""
        self.build_parser().print_usage(sys.stderr)
        self.error_exit(message, code)

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"❌ Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, argv=None) -> None:
        """Main entry point."""
        args = self.parse_args(argv)
        self.verbose = args.verbose
        self.quiet = args.quiet

        self.validate_args(args)
        params = self.create_params(args)

        # Restore failures are logged as warnings by the core; show them on the console
        pkg_logger = logging.getLogger("fcompare")
        handler = CLILogHandler(self)
        pkg_logger.addHandler(handler)
        pkg_logger.setLevel(logging.DEBUG if self.verbose else logging.WARNING)
        pkg_logger.propagate = False
        try:
            if args.compare:
                self.run_compare(args.files, params, args.json)
            elif args.group:
                self.run_group(args.files, params, args.json)
            else:
                self.run_describe(args.files, params, args.json)
        except FCompareError as e:
            self.error_exit(str(e))
        finally:
            pkg_logger.removeHandler(handler)
            pkg_logger.setLevel(logging.NOTSET)
            pkg_logger.propagate = True

        elapsed = time.time() - self.start_time
        if self.verbose:
            print(f"\n✅ Completed in {elapsed:.2f} seconds", file=sys.stderr)


def main() -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        app.run()
    except KeyboardInterrupt:
        print("\n⚠️  Operation cancelled by user (Ctrl+C)")
        sys.exit(130)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"❌ Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()

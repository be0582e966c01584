#!/usr/bin/env python3
"""
chronosort CLI: Command line interface for organizing a directory tree in place.
Maps a successful run to a fixed confirmation message and a failure to an error message.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import sys
import time
from typing import List, Optional, NoReturn
import logging

logging.basicConfig(
    level=logging.ERROR,
    format="%(levelname)-8s | %(name)-25s | %(message)s"
)

# === EARLY DEPENDENCY VALIDATION ===
_MISSING_DEPS = []
try:
    import xxhash
except ImportError:
    _MISSING_DEPS.append("xxhash")

if _MISSING_DEPS:
    print("❌ Missing required dependencies:", file=sys.stderr)
    print(f"   pip install {' '.join(_MISSING_DEPS)}", file=sys.stderr)
    sys.exit(1)

# === NORMAL IMPORTS (after validation) ===
from chronosort.commands import OrganizeCommand
from chronosort.core.models import FileOutcome, OrganizeParams, OrganizeReport
from chronosort.errors import ChronoSortError

SUCCESS_MESSAGE = "Files organized successfully."

EPILOG_TEXT = """
Layout produced:
  <root>/original/<type>/<yyyy>/<MM>/<dd>/<name>_<yyyyMMddHHmmssSSS>.<ext>
  <root>/duplicate/<type>/<yyyy>/<MM>/<dd>/<name>_<yyyyMMddHHmmssSSS>[_N].<ext>

Examples:
  Organize the Downloads folder in place
  %(prog)s -i ~/Downloads

  Same as above, listing every moved file
  %(prog)s -i ~/Downloads --verbose
"""


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.start_time: float = time.time()
        self.verbose: bool = False
        self.quiet: bool = False

        # UTF-8 for Windows consoles; undecodable file name bytes print as escapes
        sys.stdout.reconfigure(encoding='utf-8', errors='backslashreplace')
        sys.stderr.reconfigure(encoding='utf-8', errors='backslashreplace')

    @staticmethod
    def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(
            description="chronosort: organize files by type and date, set exact duplicates aside",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        parser.add_argument(
            "--input", "-i",
            required=True,
            type=str,
            help="Directory to organize in place"
        )

        # Output options
        parser.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Print only the final status line"
        )
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Show progress, every moved file and debug logging"
        )

        return parser.parse_args(args)

    def validate_args(self, args: argparse.Namespace) -> None:
        if args.quiet and args.verbose:
            self.error_exit("--quiet and --verbose cannot be used together")
        if not args.input.strip():
            self.error_exit("Input path is required")

    def progress_callback(self, stage: str, current: int, total: Optional[int]) -> None:
        """CLI progress callback - shows progress in console."""
        if not self.verbose:
            return

        if total and total > 0:
            percent = (current / total) * 100
            sys.stderr.write(f"\r  [{stage}] {current}/{total} ({percent:.1f}%)")
        else:
            sys.stderr.write(f"\r  [{stage}] {current}\n")
        sys.stderr.flush()

    def run_organize(self, params: OrganizeParams) -> OrganizeReport:
        command = OrganizeCommand()
        try:
            return command.execute(
                params,
                progress_callback=self.progress_callback if self.verbose else None
            )
        except (ChronoSortError, OSError) as e:
            self.error_exit(str(e))

    def output_results(self, report: OrganizeReport) -> None:
        if self.verbose:
            sys.stderr.write("\n")
            for result in report.results:
                if result.outcome == FileOutcome.SKIPPED:
                    print(f"   [{result.outcome.display_name}] {result.source}: {result.error}")
                else:
                    print(f"   [{result.outcome.display_name}] {result.source} -> {result.destination}")
            print()

        if not self.quiet:
            print(report.print_summary())
            print()

        if not report.fully_succeeded:
            self.warning(
                f"Partial success: {report.skipped_count} of {report.processed_count} files were skipped."
            )
            if not self.quiet:
                for result in report.by_outcome(FileOutcome.SKIPPED)[:5]:
                    print(f"  • {result.source}: {result.error}", file=sys.stderr)
                if report.skipped_count > 5:
                    print(f"  ...and {report.skipped_count - 5} more files", file=sys.stderr)

        print(SUCCESS_MESSAGE)

    def warning(self, message: str) -> None:
        """Print a warning message to stderr."""
        print(f"⚠️  {message}", file=sys.stderr)

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, args: Optional[List[str]] = None) -> None:
        parsed = self.parse_args(args)
        self.verbose = parsed.verbose
        self.quiet = parsed.quiet
        self.validate_args(parsed)

        if self.verbose:
            logging.getLogger().setLevel(logging.DEBUG)

        params = OrganizeParams(root_dir=parsed.input)
        if not self.quiet:
            print(f"Organizing directory: {params.root_dir}")

        report = self.run_organize(params)
        self.output_results(report)

        if self.verbose:
            print(f"\n✅ Completed in {time.time() - self.start_time:.2f} seconds")


def main() -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        app.run()
    except KeyboardInterrupt:
        print("\n⚠️  Operation cancelled by user (Ctrl+C)")
        sys.exit(130)


if __name__ == "__main__":
    main()

"""
Command-line interface for the exception analyzer.

Usage:
    exception-audit <directory-path> [--mode strict|inclusive] [--no-catalogue]

Every immediate subdirectory of <directory-path> is analyzed as a separate
project. Exit status is 1 for a bad invocation or a missing directory and 0
otherwise, even when the directory cannot be listed or individual files or
outputs failed.
"""

import argparse
import logging
import sys
from pathlib import Path

from dotenv import find_dotenv, load_dotenv
from pydantic import ValidationError

from exception_audit.core.config import get_settings
from exception_audit.parser.extractor import ThrowPolicy
from exception_audit.services.analysis_service import ExceptionAnalysisService
from exception_audit.utils.logging import configure_logging

USAGE_EXIT_CODE = 1

logger = logging.getLogger(__name__)


class UsageErrorParser(argparse.ArgumentParser):
    """ArgumentParser that exits with status 1 on usage errors."""

    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(USAGE_EXIT_CODE, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = UsageErrorParser(
        prog="exception-audit",
        description="Inventory the exceptions thrown across a directory of Java projects",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Throw policy:
  strict     only `throw new X(...)` sites are recorded (default)
  inclusive  every throw is recorded; rethrows get type "Unknown" and the
             thrown expression as their text

Examples:
  exception-audit ~/work/services
  exception-audit ~/work/services --mode inclusive --catalogue -o reports/
        """,
    )
    parser.add_argument(
        "root",
        type=Path,
        help="Directory whose subdirectories are the projects to analyze",
    )
    parser.add_argument(
        "--mode",
        choices=[policy.value for policy in ThrowPolicy],
        default=None,
        help="How to treat throws that are not `new X(...)` (default: strict)",
    )
    parser.add_argument(
        "--catalogue",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Write the unique exception texts file (default: on in strict mode only)",
    )
    parser.add_argument(
        "-o",
        "--output-dir",
        type=Path,
        default=None,
        help="Directory for the generated files (default: current directory)",
    )
    parser.add_argument(
        "--template",
        type=Path,
        default=None,
        help="Jinja2 template for the HTML report; written with the default layout if missing",
    )
    parser.add_argument(
        "-j",
        "--workers",
        type=int,
        default=None,
        help="Number of projects to scan in parallel (default: 1)",
    )
    parser.add_argument(
        "--relative-paths",
        action="store_true",
        default=None,
        help="Group files by project-relative path instead of file name",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: INFO)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the analyzer and return the process exit status."""
    load_dotenv(find_dotenv(usecwd=True))
    args = build_parser().parse_args(argv)

    root: Path = args.root
    if not root.exists() or not root.is_dir():
        print(f"Directory does not exist: {root}", file=sys.stderr)
        return USAGE_EXIT_CODE

    try:
        settings = get_settings(
            throw_policy=args.mode,
            emit_catalogue=args.catalogue,
            output_dir=args.output_dir,
            report_template=args.template,
            max_workers=args.workers,
            group_by_relative_path=args.relative_paths,
            log_level=args.log_level,
        )
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return USAGE_EXIT_CODE

    configure_logging(settings.log_level)

    service = ExceptionAnalysisService(settings)
    try:
        run = service.run(root)
    except OSError as e:
        logger.error(f"Error analyzing projects: {e}")
        return 0

    if not run.write_result.ok:
        logger.warning(f"{len(run.write_result.failures)} output(s) could not be written")
    return 0


if __name__ == "__main__":
    sys.exit(main())
